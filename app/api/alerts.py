"""API endpoint for the 7-day frequency/symptom alert scan."""
from datetime import datetime

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.dependencies import get_reference_time, get_user_id
from app.database import get_db
from app.services.alert_service import AlertService
from app.services.entry_service import EntryService

router = APIRouter(prefix="/alerts", tags=["alerts"])


@router.get("")
async def list_alerts(
    user_id: str = Depends(get_user_id),
    now: datetime = Depends(get_reference_time),
    db: Session = Depends(get_db),
):
    """
    Returns: {"success", "data": [{"type", "message", "severity", "timestamp"}],
              "meta": {"recentEntriesCount", "alertsCount"}}
    """
    rows = EntryService.list_entries(db, user_id)
    alerts = AlertService.scan(rows, now=now)

    return {
        "success": True,
        "data": [a.model_dump(by_alias=True) for a in alerts],
        "meta": {
            "recentEntriesCount": len(AlertService.recent_entries(rows, now)),
            "alertsCount": len(alerts),
        },
    }

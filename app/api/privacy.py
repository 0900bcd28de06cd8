"""Privacy endpoints: data export and full deletion."""
from datetime import datetime
import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.api.dependencies import get_reference_time, get_user_id
from app.database import get_db
from app.services.entry_service import EntryService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/privacy", tags=["privacy"])

DELETE_CONFIRMATION = "DELETE_MY_DATA"


class DeleteRequest(BaseModel):
    """Request model for deleting all user data."""

    confirmation: str


@router.post("/export")
async def export_data(
    user_id: str = Depends(get_user_id),
    now: datetime = Depends(get_reference_time),
    db: Session = Depends(get_db),
):
    """Export every entry the user has logged."""
    export = EntryService.export_entries(db, user_id, now=now)
    return {
        "success": True,
        "data": export,
        "meta": {"totalEntries": len(export["entries"])},
    }


@router.post("/delete")
async def delete_data(
    request: DeleteRequest,
    user_id: str = Depends(get_user_id),
    now: datetime = Depends(get_reference_time),
    db: Session = Depends(get_db),
):
    """Delete all of the user's entries. Requires the DELETE_MY_DATA confirmation."""
    if request.confirmation != DELETE_CONFIRMATION:
        logger.warning("Rejected data deletion for user %s: missing confirmation", user_id)
        raise HTTPException(status_code=400, detail="Confirmation required")

    EntryService.delete_all_for_user(db, user_id)
    return {
        "success": True,
        "data": {
            "userId": user_id,
            "status": "deleted",
            "deletedAt": now.isoformat(),
        },
        "message": "All data has been successfully deleted",
    }

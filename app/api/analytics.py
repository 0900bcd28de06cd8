"""Analytics API endpoints: frequency counts, rolling score and analysis report."""
from collections import Counter
from datetime import datetime
from typing import Literal, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.api.dependencies import get_reference_time, get_user_id
from app.database import get_db
from app.services.analysis_schemas import AnalysisResult
from app.services.analysis_service import AnalysisService
from app.services.entry_service import EntryService
from app.services.health_scorer import HealthScorer
from app.services.time_utils import ensure_utc

router = APIRouter(prefix="/analytics", tags=["analytics"])

# Day buckets for short periods, month buckets for long ones
PERIOD_KEY_FORMATS = {
    "week": "%Y-%m-%d",
    "month": "%Y-%m-%d",
    "quarter": "%Y-%m",
    "year": "%Y-%m",
}


@router.get("/frequency")
async def frequency(
    period: Literal["week", "month", "quarter", "year"] = Query("week"),
    start_date: Optional[datetime] = Query(None, alias="startDate"),
    end_date: Optional[datetime] = Query(None, alias="endDate"),
    user_id: str = Depends(get_user_id),
    db: Session = Depends(get_db),
):
    """
    Count entries per UTC day (week/month) or per UTC month (quarter/year).

    Returns: {"success", "data": {"period", "counts"}, "meta": {"totalEntries", "dateRange"}}
    """
    start = ensure_utc(start_date) if start_date else None
    end = ensure_utc(end_date) if end_date else None
    if start and end and start > end:
        raise HTTPException(status_code=400, detail="startDate must not be after endDate")

    rows = EntryService.list_entries(db, user_id)
    filtered = []
    for entry in rows:
        timestamp = ensure_utc(entry.timestamp_minute)
        if start and timestamp < start:
            continue
        if end and timestamp > end:
            continue
        filtered.append(timestamp)

    key_format = PERIOD_KEY_FORMATS[period]
    counts = Counter(t.strftime(key_format) for t in filtered)

    return {
        "success": True,
        "data": {"period": period, "counts": dict(counts)},
        "meta": {
            "totalEntries": len(filtered),
            "dateRange": {
                "start": start.isoformat() if start else None,
                "end": end.isoformat() if end else None,
            },
        },
    }


@router.get("/score")
async def rolling_score(
    user_id: str = Depends(get_user_id),
    now: datetime = Depends(get_reference_time),
    db: Session = Depends(get_db),
):
    """
    Rolling 30-day health score for the dashboard.

    An empty window returns score null rather than 0.
    """
    rows = EntryService.list_entries(db, user_id)
    result = HealthScorer.calculate_rolling_score(rows, now=now)

    if result.score is None:
        return {
            "success": True,
            "data": {"score": None, "message": "Insufficient data for scoring"},
            "meta": {"entriesCount": 0},
        }

    return {
        "success": True,
        "data": result.model_dump(by_alias=True),
    }


@router.get("/report", response_model=AnalysisResult)
async def analysis_report(
    user_id: str = Depends(get_user_id),
    now: datetime = Depends(get_reference_time),
    db: Session = Depends(get_db),
):
    """
    Full analysis report: findings, literature references, alert tags, score
    and risk level.
    """
    rows = EntryService.list_entries(db, user_id)
    return AnalysisService.analyze(rows, now=now)

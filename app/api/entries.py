"""API endpoints for logging and listing stool entries."""
from datetime import datetime
import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.api.dependencies import get_reference_time, get_user_id
from app.database import get_db
from app.services.entry_schemas import EntryCreate, EntryRead
from app.services.entry_service import EntryService, InvalidEntryError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/entries", tags=["entries"])


def serialize_entry(entry) -> dict:
    return EntryRead.model_validate(entry).model_dump(by_alias=True, mode="json")


@router.get("")
async def list_entries(
    limit: int = Query(50, ge=1, le=100),
    offset: int = Query(0, ge=0),
    user_id: str = Depends(get_user_id),
    db: Session = Depends(get_db),
):
    """
    List the user's entries, newest first.

    Returns: {"data": [...], "pagination": {"total", "limit", "offset", "hasMore"}}
    """
    rows = EntryService.list_entries(db, user_id)
    page = rows[offset : offset + limit]

    return {
        "data": [serialize_entry(e) for e in page],
        "pagination": {
            "total": len(rows),
            "limit": limit,
            "offset": offset,
            "hasMore": offset + limit < len(rows),
        },
    }


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_entry(
    request: EntryCreate,
    user_id: str = Depends(get_user_id),
    now: datetime = Depends(get_reference_time),
    db: Session = Depends(get_db),
):
    """
    Log a new entry.

    Schema violations are rejected with 422 by request validation; date rule
    violations (future, older than a year) with 400.
    """
    try:
        entry = EntryService.create_entry(db, user_id, request, now=now)
    except InvalidEntryError as e:
        logger.warning("Rejected entry for user %s: %s", user_id, e)
        raise HTTPException(
            status_code=400,
            detail={"error": "invalid_date", "message": str(e)},
        )

    return {
        "success": True,
        "data": serialize_entry(entry),
        "message": "Entry created successfully",
    }

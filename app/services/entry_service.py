"""Business logic for stool entry storage."""

import logging
from datetime import datetime, timedelta
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from app.config import settings
from app.models.stool_entry import StoolEntry
from app.services.entry_schemas import EntryCreate, EntryRead
from app.services.time_utils import ensure_utc, resolve_now

logger = logging.getLogger(__name__)


class InvalidEntryError(ValueError):
    """Raised when an entry violates a business date rule."""


class EntryService:
    """Service for entry-related operations."""

    @staticmethod
    def create_entry(
        db: Session,
        user_id: str,
        data: EntryCreate,
        now: Optional[datetime] = None,
    ) -> StoolEntry:
        """
        Create a new stool entry.

        Args:
            db: Database session
            user_id: Owning user ID
            data: Validated entry payload
            now: Reference time for the date rules (defaults to now)

        Returns:
            Created StoolEntry object

        Raises:
            InvalidEntryError: If the timestamp is in the future or older
                than settings.entry_max_age_days
        """
        now = resolve_now(now)
        timestamp = ensure_utc(data.timestamp_minute).replace(second=0, microsecond=0)

        if timestamp > now:
            raise InvalidEntryError("Entry date cannot be in the future")
        if timestamp < now - timedelta(days=settings.entry_max_age_days):
            raise InvalidEntryError("Entry date cannot be more than one year ago")

        entry = StoolEntry(
            user_id=user_id,
            timestamp_minute=timestamp,
            bristol_type=data.bristol_type,
            smell_score=data.smell_score,
            color=data.color,
            volume=data.volume,
            symptoms=list(data.symptoms),
            notes=data.notes,
            version=1,
        )
        db.add(entry)
        db.commit()
        db.refresh(entry)

        logger.info("Created entry %s for user %s", entry.id, user_id)
        return entry

    @staticmethod
    def list_entries(db: Session, user_id: str) -> List[StoolEntry]:
        """Get all entries for a user, ordered by timestamp descending."""
        return (
            db.query(StoolEntry)
            .filter(StoolEntry.user_id == user_id)
            .order_by(StoolEntry.timestamp_minute.desc())
            .all()
        )

    @staticmethod
    def delete_all_for_user(db: Session, user_id: str) -> bool:
        """
        Delete every entry owned by a user.

        Returns:
            True if any entry was deleted, False if the user had none
        """
        deleted = (
            db.query(StoolEntry)
            .filter(StoolEntry.user_id == user_id)
            .delete(synchronize_session=False)
        )
        db.commit()

        logger.info("Deleted %d entries for user %s", deleted, user_id)
        return deleted > 0

    @staticmethod
    def export_entries(
        db: Session, user_id: str, now: Optional[datetime] = None
    ) -> Dict:
        """Build the privacy export document for a user."""
        entries = EntryService.list_entries(db, user_id)
        return {
            "userId": user_id,
            "exportDate": resolve_now(now).isoformat(),
            "version": settings.export_version,
            "entries": [
                EntryRead.model_validate(e).model_dump(by_alias=True, mode="json")
                for e in entries
            ],
        }

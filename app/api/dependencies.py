"""Shared FastAPI dependencies for the API routers."""

from datetime import datetime, timezone
from typing import Optional

from fastapi import Header

from app.config import settings


def get_user_id(x_user_id: Optional[str] = Header(default=None)) -> str:
    """Resolve the requesting user from the X-User-Id header."""
    return x_user_id or settings.default_user_id


def get_reference_time() -> datetime:
    """Reference instant for time-windowed analysis. Overridden in tests."""
    return datetime.now(timezone.utc)

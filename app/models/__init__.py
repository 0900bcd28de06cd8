"""
Database models for GutCheck.

Import all models here so metadata.create_all() can see them.
"""

from app.database import Base
from app.models.stool_entry import StoolEntry

__all__ = [
    "Base",
    "StoolEntry",
]

"""
Pydantic models for stool entry input and output.

Input validation (enum values, numeric ranges, text lengths) lives here so
the analysis core can assume well-formed entries.
"""

from datetime import datetime
from typing import Annotated, Literal, Optional

from pydantic import ConfigDict, Field, StringConstraints

from app.services.analysis_schemas import CamelModel


Color = Literal["brown", "dark_brown", "yellow", "green", "black", "red"]
Volume = Literal["small", "medium", "large"]
SymptomTag = Annotated[str, StringConstraints(max_length=50)]


class EntryCreate(CamelModel):
    timestamp_minute: datetime
    bristol_type: int = Field(ge=1, le=7)
    smell_score: int = Field(ge=1, le=5)
    color: Color
    volume: Volume
    symptoms: list[SymptomTag] = []
    notes: Optional[str] = Field(default=None, max_length=500)


class EntryRead(CamelModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    timestamp_minute: datetime
    bristol_type: int
    smell_score: int
    color: str
    volume: str
    symptoms: list[str] = []
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    version: int = 1

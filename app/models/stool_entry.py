import uuid

from sqlalchemy import Column, Integer, String, Text, DateTime, Index, JSON
from sqlalchemy.sql import func

from app.database import Base


class StoolEntry(Base):
    """A single bowel movement observation logged by a user."""

    __tablename__ = "stool_entries"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(64), nullable=False)
    timestamp_minute = Column(DateTime(timezone=True), nullable=False)

    bristol_type = Column(Integer, nullable=False)  # 1-7 Bristol stool form scale
    smell_score = Column(Integer, nullable=False)  # 1-5
    color = Column(String(20), nullable=False)  # brown|dark_brown|yellow|green|black|red
    volume = Column(String(10), nullable=False)  # small|medium|large
    symptoms = Column(JSON, default=list)  # ["bloating", "abdominal_pain", ...]
    notes = Column(Text, nullable=True)  # Opaque, may be client-side ciphertext

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )
    version = Column(Integer, default=1, nullable=False)

    __table_args__ = (
        Index("idx_stool_entries_user_id", "user_id"),
        Index("idx_stool_entries_timestamp", "timestamp_minute"),
        Index("idx_stool_entries_user_timestamp", "user_id", "timestamp_minute"),
    )

    def __repr__(self) -> str:
        return (
            f"<StoolEntry id={self.id} bristol={self.bristol_type} "
            f"at={self.timestamp_minute}>"
        )

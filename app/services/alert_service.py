"""Frequency and symptom alert scan over the last 7 days."""

from datetime import datetime, timedelta
from typing import List, Optional, Sequence

from app.services.analysis_schemas import Alert
from app.services.references import (
    CONCERNING_SYMPTOMS_MESSAGE,
    HIGH_BRISTOL_MESSAGE,
    LOW_FREQUENCY_MESSAGE,
)
from app.services.time_utils import ensure_utc, resolve_now


class AlertService:
    """Independent frequency/form/symptom checks feeding the alerts endpoint."""

    WINDOW_DAYS = 7
    MIN_WEEKLY_ENTRIES = 4
    LOOSE_BRISTOL_TYPE = 6
    MIN_LOOSE_ENTRIES = 3
    CONCERNING_SYMPTOMS = frozenset({"blood", "severe_pain", "fever", "vomiting"})

    @classmethod
    def recent_entries(cls, entries: Optional[Sequence], now: Optional[datetime] = None) -> list:
        now = resolve_now(now)
        window = timedelta(days=cls.WINDOW_DAYS)
        return [e for e in entries or [] if now - ensure_utc(e.timestamp_minute) < window]

    @classmethod
    def has_concerning_symptom(cls, entry) -> bool:
        return any(s.lower() in cls.CONCERNING_SYMPTOMS for s in entry.symptoms or [])

    @classmethod
    def scan(cls, entries: Optional[Sequence], now: Optional[datetime] = None) -> List[Alert]:
        """
        Run the three 7-day checks. They are not mutually exclusive.

        - fewer than 4 entries -> constipation (medium)
        - at least 3 entries with Bristol >= 6 -> diarrhea (high)
        - any concerning symptom tag -> symptoms (high)

        Returns:
            List of 0-3 alerts stamped with the reference time
        """
        now = resolve_now(now)
        recent = cls.recent_entries(entries, now)
        timestamp = now.isoformat()
        alerts: List[Alert] = []

        if len(recent) < cls.MIN_WEEKLY_ENTRIES:
            alerts.append(
                Alert(
                    type="constipation",
                    message=LOW_FREQUENCY_MESSAGE,
                    severity="medium",
                    timestamp=timestamp,
                )
            )

        loose = [e for e in recent if e.bristol_type >= cls.LOOSE_BRISTOL_TYPE]
        if len(loose) >= cls.MIN_LOOSE_ENTRIES:
            alerts.append(
                Alert(
                    type="diarrhea",
                    message=HIGH_BRISTOL_MESSAGE,
                    severity="high",
                    timestamp=timestamp,
                )
            )

        if any(cls.has_concerning_symptom(e) for e in recent):
            alerts.append(
                Alert(
                    type="symptoms",
                    message=CONCERNING_SYMPTOMS_MESSAGE,
                    severity="high",
                    timestamp=timestamp,
                )
            )

        return alerts

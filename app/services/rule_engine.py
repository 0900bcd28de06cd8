"""
Rule-based checks over a user's stool entries.

Each check is a pure function of (entries, reference time) returning an
immutable RuleOutcome. Checks never short-circuit each other; the
orchestrator concatenates their outcomes in a fixed order:
Rome-IV-like pattern -> Bristol anomaly -> red flags.

Entries are any objects exposing timestamp_minute, bristol_type, color and
symptoms (the StoolEntry ORM model in practice).
"""

from datetime import datetime, timedelta
from typing import Iterable, Optional, Sequence

from app.services.analysis_schemas import NOT_FIRED, RuleOutcome
from app.services.anomaly_detector import detect_bristol_anomalies
from app.services.references import (
    ANOMALY_FINDING_TEMPLATE,
    BLEEDING_FINDING,
    BRISTOL_TRANSIT_REFERENCE,
    CUSTOM_ALERT,
    ROME_IV_FINDING,
    ROME_IV_REFERENCE,
)
from app.services.time_utils import ensure_utc, resolve_now


# Rome-IV-like recurrent symptom pattern
ROME_IV_WINDOW_DAYS = 90
ROME_IV_MIN_ENTRIES = 10
ROME_IV_MIN_SYMPTOM_WEEKS = 3
ROME_IV_ABNORMAL_RATIO = 0.25
PAIN_KEYWORDS = (
    "pain",
    "cramp",
    "ache",
    "discomfort",
    "bloating",
    "stomach ache",
    "abdominal",
)

# Red-flag safety check
RED_FLAG_WINDOW = 5
RED_FLAG_COLORS = frozenset({"red", "black"})


# =============================================================================
# Helpers
# =============================================================================


def sort_newest_first(entries: Optional[Iterable]) -> list:
    """Copy entries sorted by timestamp descending. None is treated as empty."""
    if not entries:
        return []
    return sorted(entries, key=lambda e: ensure_utc(e.timestamp_minute), reverse=True)


def contains_keyword(symptoms: Optional[Iterable[str]], keywords: Iterable[str]) -> bool:
    """True if any symptom contains any keyword, case-insensitively."""
    lowered = [s.lower() for s in symptoms or []]
    return any(k in s for s in lowered for k in keywords)


def week_bucket(timestamp: datetime) -> str:
    """
    Coarse week identifier: year plus day-of-month // 7.

    Not an ISO week. Buckets restart every month, so two entries a few days
    apart across a month boundary land in different buckets.
    """
    ts = ensure_utc(timestamp)
    return f"{ts.year}-W{ts.day // 7}"


def is_abnormal_form(bristol_type: int) -> bool:
    return bristol_type <= 2 or bristol_type >= 6


# =============================================================================
# Checks
# =============================================================================


def check_rome_iv(entries: Sequence, now: Optional[datetime] = None) -> RuleOutcome:
    """
    Approximate the Rome IV recurrent-pain pattern for IBS.

    Fires when, over the last 90 days:
    - at least 10 entries were logged,
    - pain-like symptoms appear in at least 3 distinct week buckets, and
    - more than 25% of entries have an abnormal form (Bristol <= 2 or >= 6).
    """
    cutoff = resolve_now(now) - timedelta(days=ROME_IV_WINDOW_DAYS)
    recent = [e for e in entries if ensure_utc(e.timestamp_minute) >= cutoff]
    if len(recent) < ROME_IV_MIN_ENTRIES:
        return NOT_FIRED

    symptom_weeks = {
        week_bucket(e.timestamp_minute)
        for e in recent
        if contains_keyword(e.symptoms, PAIN_KEYWORDS)
    }
    if len(symptom_weeks) < ROME_IV_MIN_SYMPTOM_WEEKS:
        return NOT_FIRED

    abnormal = sum(1 for e in recent if is_abnormal_form(e.bristol_type))
    if abnormal / len(recent) <= ROME_IV_ABNORMAL_RATIO:
        return NOT_FIRED

    return RuleOutcome(
        findings=(ROME_IV_FINDING,),
        references=(ROME_IV_REFERENCE,),
        alerts=(CUSTOM_ALERT,),
    )


def check_bristol_anomaly(entries: Sequence) -> RuleOutcome:
    """Flag erratic stool form over the full (unwindowed) history."""
    if not entries:
        return NOT_FIRED

    anomaly = detect_bristol_anomalies([e.bristol_type for e in entries])
    if not anomaly.is_anomalous:
        return NOT_FIRED

    return RuleOutcome(
        findings=(ANOMALY_FINDING_TEMPLATE.format(variance=anomaly.variance),),
        references=(BRISTOL_TRANSIT_REFERENCE,),
    )


def check_red_flags(entries: Sequence) -> RuleOutcome:
    """
    Look for possible GI bleeding in the 5 most recent entries.

    Expects entries sorted newest first. Only color is inspected; duration
    based red flags (e.g. days of persistent Type 7) are not covered.
    """
    recent = entries[:RED_FLAG_WINDOW]
    if not any(e.color in RED_FLAG_COLORS for e in recent):
        return NOT_FIRED

    return RuleOutcome(findings=(BLEEDING_FINDING,), alerts=(CUSTOM_ALERT,))

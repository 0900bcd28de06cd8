"""
Heuristic health scoring.

Two independent 0-100 formulas answer different questions and are kept
separate:
- calculate_health_score: findings-adjusted score for the analysis report
- calculate_rolling_score: frequency/consistency score over the last 30 days
"""

import logging
import math
from collections import Counter
from datetime import datetime, timedelta
from typing import Optional, Sequence

from app.services.analysis_schemas import RiskLevel, RollingScore, ScoreBreakdown
from app.services.time_utils import ensure_utc, resolve_now

logger = logging.getLogger(__name__)


class HealthScorer:
    """Scoring functions over entry collections."""

    # Report score
    RECENT_ENTRY_COUNT = 10
    NORMAL_BRISTOL_MIDPOINT = 3.5  # midpoint of the normal 3-4 band
    NORMAL_BRISTOL_TOLERANCE = 1.5
    ABNORMAL_FORM_PENALTY = 5
    FINDING_PENALTY = 10

    # Risk tiers
    HIGH_RISK_BELOW = 60
    MEDIUM_RISK_BELOW = 80

    # Rolling score
    ROLLING_WINDOW_DAYS = 30
    MAX_FREQUENCY_PENALTY = 40
    IDEAL_BRISTOL_TYPE = 4
    SMELL_BASELINE = 3

    @staticmethod
    def round_half_up(value: float) -> int:
        return int(math.floor(value + 0.5))

    @staticmethod
    def round_cents(value: float) -> float:
        """Round half up to 2 decimals for breakdown figures."""
        return math.floor(value * 100 + 0.5) / 100

    @staticmethod
    def clamp_score(value: float) -> int:
        return max(0, min(100, HealthScorer.round_half_up(value)))

    @classmethod
    def calculate_health_score(cls, entries: Sequence, findings_count: int) -> int:
        """
        Score the report: 100 minus penalties for abnormal form and findings.

        Args:
            entries: Entries sorted newest first
            findings_count: Number of findings produced by the rule checks

        Returns:
            Integer score clamped to [0, 100]
        """
        score = 100.0

        for entry in entries[: cls.RECENT_ENTRY_COUNT]:
            distance = abs(entry.bristol_type - cls.NORMAL_BRISTOL_MIDPOINT)
            if distance > cls.NORMAL_BRISTOL_TOLERANCE:
                score -= cls.ABNORMAL_FORM_PENALTY

        score -= findings_count * cls.FINDING_PENALTY

        return cls.clamp_score(score)

    @classmethod
    def risk_level_for(cls, score: int) -> RiskLevel:
        if score < cls.HIGH_RISK_BELOW:
            return "High"
        if score < cls.MEDIUM_RISK_BELOW:
            return "Medium"
        return "Low"

    @classmethod
    def calculate_rolling_score(
        cls, entries: Optional[Sequence], now: Optional[datetime] = None
    ) -> RollingScore:
        """
        Score recent consistency over the last 30 days.

        Penalties:
        - frequency irregularity: min(40, variance of per-day counts * 10)
        - form: |median Bristol type - 4| * 10
        - smell: max(0, mean smell score - 3) * 10

        An empty window reports score=None so "no data" is never confused
        with a perfect score.
        """
        now = resolve_now(now)
        window = timedelta(days=cls.ROLLING_WINDOW_DAYS)
        recent = [e for e in entries or [] if now - ensure_utc(e.timestamp_minute) < window]

        if not recent:
            return RollingScore(score=None)

        # Frequency irregularity across UTC calendar days
        per_day = list(Counter(ensure_utc(e.timestamp_minute).date() for e in recent).values())
        avg_per_day = sum(per_day) / len(per_day)
        frequency_variance = sum((c - avg_per_day) ** 2 for c in per_day) / len(per_day)

        bristol = sorted(e.bristol_type for e in recent)
        median = bristol[len(bristol) // 2]

        smell_avg = sum(e.smell_score for e in recent) / len(recent)

        score = 100.0
        score -= min(cls.MAX_FREQUENCY_PENALTY, frequency_variance * 10)
        score -= abs(median - cls.IDEAL_BRISTOL_TYPE) * 10
        score -= max(0, smell_avg - cls.SMELL_BASELINE) * 10

        final_score = cls.clamp_score(score)
        logger.debug(
            "Rolling score %s from %d entries (variance=%.2f, median=%s, smell=%.2f)",
            final_score,
            len(recent),
            frequency_variance,
            median,
            smell_avg,
        )

        return RollingScore(
            score=final_score,
            breakdown=ScoreBreakdown(
                frequency_variance=cls.round_cents(frequency_variance),
                median_bristol_type=median,
                average_smell_score=cls.round_cents(smell_avg),
                entries_count=len(recent),
            ),
        )

"""Analysis orchestrator: rule checks, anomaly detection and scoring in one report."""

import logging
from datetime import datetime
from typing import Iterable, List, Optional

from app.services.analysis_schemas import AnalysisResult, Reference, RuleOutcome
from app.services.health_scorer import HealthScorer
from app.services.references import NO_DATA_FINDING
from app.services import rule_engine

logger = logging.getLogger(__name__)


class AnalysisService:
    """Single entry point for the bowel-health analysis report."""

    @staticmethod
    def empty_result() -> AnalysisResult:
        return AnalysisResult(
            score=100,
            risk_level="Low",
            findings=[NO_DATA_FINDING],
            references=[],
            alerts=[],
        )

    @staticmethod
    def run_checks(entries: list, now: Optional[datetime] = None) -> List[RuleOutcome]:
        """Run every rule check in evaluation order over newest-first entries."""
        return [
            rule_engine.check_rome_iv(entries, now),
            rule_engine.check_bristol_anomaly(entries),
            rule_engine.check_red_flags(entries),
        ]

    @classmethod
    def analyze(
        cls, entries: Optional[Iterable], now: Optional[datetime] = None
    ) -> AnalysisResult:
        """
        Build the analysis report for a user's entries.

        Args:
            entries: Entries in any order; None or empty yields the
                optimistic "no data" report
            now: Reference instant for time-windowed rules (defaults to now)

        Returns:
            AnalysisResult with score, risk level, findings, references and
            deduplicated alert tags
        """
        sorted_entries = rule_engine.sort_newest_first(entries)
        if not sorted_entries:
            return cls.empty_result()

        findings: List[str] = []
        references: List[Reference] = []
        alerts: List[str] = []
        for outcome in cls.run_checks(sorted_entries, now):
            findings.extend(outcome.findings)
            references.extend(outcome.references)
            alerts.extend(outcome.alerts)

        score = HealthScorer.calculate_health_score(sorted_entries, len(findings))
        logger.debug(
            "Analyzed %d entries: %d findings, score %d",
            len(sorted_entries),
            len(findings),
            score,
        )

        return AnalysisResult(
            score=score,
            risk_level=HealthScorer.risk_level_for(score),
            findings=findings,
            references=references,
            alerts=list(dict.fromkeys(alerts)),
        )

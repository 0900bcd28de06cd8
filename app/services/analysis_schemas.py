"""
Pydantic models for the analysis core's structured output.

Field names serialize in camelCase (riskLevel, frequencyVariance, ...) since
they are part of the public API contract consumed by the web frontend.
"""

from dataclasses import dataclass
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


RiskLevel = Literal["Low", "Medium", "High"]
AlertKind = Literal["constipation", "diarrhea", "symptoms"]
AlertSeverity = Literal["low", "medium", "high"]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Analysis report (AnalysisService.analyze) ---


class Reference(CamelModel):
    title: str
    authors: str
    journal: str
    year: int
    relevance: str


class AnalysisResult(CamelModel):
    score: int
    risk_level: RiskLevel
    findings: list[str]
    references: list[Reference]
    alerts: list[str]


# --- Rolling 30-day score (HealthScorer.calculate_rolling_score) ---


class ScoreBreakdown(CamelModel):
    frequency_variance: float
    median_bristol_type: int
    average_smell_score: float
    entries_count: int


class RollingScore(CamelModel):
    """score is None when the window holds no entries ("no data", not 0)."""

    score: Optional[int]
    breakdown: Optional[ScoreBreakdown] = None


# --- 7-day alert scan (AlertService.scan) ---


class Alert(CamelModel):
    type: AlertKind
    message: str
    severity: AlertSeverity
    timestamp: str


# --- Per-check rule outcome ---


@dataclass(frozen=True)
class RuleOutcome:
    """Immutable result of one rule check, concatenated by the orchestrator."""

    findings: tuple[str, ...] = ()
    references: tuple[Reference, ...] = ()
    alerts: tuple[str, ...] = ()

    @property
    def fired(self) -> bool:
        return bool(self.findings)


NOT_FIRED = RuleOutcome()

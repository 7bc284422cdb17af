"""
Data models for analysis engine input and output.

Tier, severity, and input-type labels are plain string constants shared by
the engine, report exporter, history store, and API. Result records are
frozen dataclasses: created once per analysis and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

TIER_SAFE = "safe"
TIER_LOW = "low"
TIER_MEDIUM = "medium"
TIER_HIGH = "high"
TIER_CRITICAL = "critical"
# Display fallback only; classify_score never returns it
TIER_UNKNOWN = "unknown"

TIERS = (TIER_SAFE, TIER_LOW, TIER_MEDIUM, TIER_HIGH, TIER_CRITICAL, TIER_UNKNOWN)
SCORED_TIERS = (TIER_SAFE, TIER_LOW, TIER_MEDIUM, TIER_HIGH, TIER_CRITICAL)

SEVERITY_INFO = "info"
SEVERITY_WARNING = "warning"
SEVERITY_DANGER = "danger"

SEVERITIES = (SEVERITY_INFO, SEVERITY_WARNING, SEVERITY_DANGER)

INPUT_URL = "url"
INPUT_DOMAIN = "domain"
INPUT_TEXT = "text"

INPUT_TYPES = (INPUT_URL, INPUT_DOMAIN, INPUT_TEXT)


@dataclass(frozen=True)
class Indicator:
    """One matched rule: category label, severity, human-readable description."""

    type: str
    severity: str
    description: str


@dataclass(frozen=True)
class ScoreResult:
    """Output of the rule runner: signed score plus evidence in rule-table order."""

    score: int
    indicators: tuple[Indicator, ...]
    details: tuple[str, ...]


@dataclass(frozen=True)
class TierResult:
    risk_level: str
    summary: str
    recommendations: tuple[str, ...]


@dataclass(frozen=True)
class AnalysisResult:
    """
    Final result of one analysis.

    indicators/details/recommendations keep emission order; reports and
    UIs display them as-is. timestamp is the only field that differs
    between two analyses of the same input.
    """

    risk_level: str
    confidence: int
    summary: str
    details: tuple[str, ...]
    recommendations: tuple[str, ...]
    indicators: tuple[Indicator, ...]
    timestamp: datetime
    input_type: str

"""
Derived display metrics over an AnalysisResult.

Severity and category counts for charts, and the per-area security
metrics (SSL, domain trust, content safety, privacy) shown next to the
risk badge. Pure helpers; nothing here feeds back into scoring.
"""

from __future__ import annotations

from typing import Any, Iterable

from backend_neroguard.analysis_engine.models import (
    INPUT_TEXT,
    SEVERITIES,
    SEVERITY_DANGER,
    SEVERITY_WARNING,
    TIER_CRITICAL,
    TIER_HIGH,
    TIER_LOW,
    TIER_MEDIUM,
    TIER_SAFE,
    TIER_UNKNOWN,
    AnalysisResult,
    Indicator,
)

TIER_BASE_SCORES: dict[str, int] = {
    TIER_SAFE: 95,
    TIER_LOW: 80,
    TIER_MEDIUM: 55,
    TIER_HIGH: 30,
    TIER_CRITICAL: 10,
    TIER_UNKNOWN: 50,
}

DANGER_PENALTY = 15
WARNING_PENALTY = 5
METRIC_MAX = 100


def severity_breakdown(indicators: Iterable[Indicator]) -> dict[str, int]:
    """Count indicators per severity, most severe first."""
    counts = {severity: 0 for severity in reversed(SEVERITIES)}
    for ind in indicators:
        counts[ind.severity] = counts.get(ind.severity, 0) + 1
    return counts


def category_breakdown(indicators: Iterable[Indicator]) -> dict[str, int]:
    """Count indicators per category label, in first-seen order."""
    counts: dict[str, int] = {}
    for ind in indicators:
        counts[ind.type] = counts.get(ind.type, 0) + 1
    return counts


def security_metrics(result: AnalysisResult) -> dict[str, Any]:
    """
    Overall score from the tier, then per-area scores penalised by
    danger/warning indicator counts. SSL and domain trust do not apply to
    free text and read 100. Every value is capped at 100.
    """
    overall = TIER_BASE_SCORES.get(result.risk_level, TIER_BASE_SCORES[TIER_UNKNOWN])
    counts = severity_breakdown(result.indicators)
    danger = counts[SEVERITY_DANGER]
    warning = counts[SEVERITY_WARNING]
    penalty = danger * DANGER_PENALTY + warning * WARNING_PENALTY

    if result.input_type == INPUT_TEXT:
        ssl = METRIC_MAX
        domain = METRIC_MAX
    else:
        ssl = min(METRIC_MAX, max(20, overall + 10 - penalty / 2))
        domain = min(METRIC_MAX, max(10, overall - penalty))

    return {
        "overall": overall,
        "ssl": ssl,
        "domain": domain,
        "content": min(METRIC_MAX, max(15, overall - danger * 20)),
        "privacy": min(METRIC_MAX, max(25, overall + 5 - warning * 10)),
    }

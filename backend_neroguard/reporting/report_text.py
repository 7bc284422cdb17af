"""
Plain-text security report for one AnalysisResult.

Fixed template: header, risk level, confidence, timestamp, input type,
summary, indicators (emission order), recommendations.
"""

from __future__ import annotations

from datetime import datetime

from backend_neroguard.analysis_engine.models import AnalysisResult

REPORT_TITLE = "NeroGuard Security Report"
REPORT_RULE = "=" * 24


def format_timestamp(dt: datetime) -> str:
    """Render as e.g. 'Oct 8, 2026, 14:03:05' (24-hour clock, day not zero-padded)."""
    return f"{dt:%b} {dt.day}, {dt:%Y}, {dt:%H:%M:%S}"


def render_report(result: AnalysisResult) -> str:
    indicator_lines = [
        f"- [{ind.severity.upper()}] {ind.type}: {ind.description}" for ind in result.indicators
    ]
    recommendation_lines = [f"• {rec}" for rec in result.recommendations]
    lines = [
        REPORT_TITLE,
        REPORT_RULE,
        f"Risk Level: {result.risk_level.upper()}",
        f"Confidence: {result.confidence}%",
        f"Analyzed: {format_timestamp(result.timestamp)}",
        f"Type: {result.input_type}",
        "",
        f"Summary: {result.summary}",
        "",
        "Indicators:",
        "\n".join(indicator_lines),
        "",
        "Recommendations:",
        "\n".join(recommendation_lines),
    ]
    return "\n".join(lines) + "\n"

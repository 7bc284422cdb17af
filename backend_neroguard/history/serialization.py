"""
AnalysisResult <-> JSON-ready dict.

Keys follow the shared result taxonomy (riskLevel, inputType, ...) used by
the UI, report exporter, and history store. timestamp round-trips through
ISO 8601.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from backend_neroguard.analysis_engine.models import AnalysisResult, Indicator


def indicator_to_dict(ind: Indicator) -> dict[str, str]:
    return {"type": ind.type, "severity": ind.severity, "description": ind.description}


def result_to_dict(result: AnalysisResult) -> dict[str, Any]:
    return {
        "riskLevel": result.risk_level,
        "confidence": result.confidence,
        "summary": result.summary,
        "details": list(result.details),
        "recommendations": list(result.recommendations),
        "indicators": [indicator_to_dict(i) for i in result.indicators],
        "timestamp": result.timestamp.isoformat(),
        "inputType": result.input_type,
    }


def result_from_dict(data: dict[str, Any]) -> AnalysisResult:
    """
    Rebuild an AnalysisResult from result_to_dict output.
    Raises KeyError/ValueError/TypeError on malformed data.
    """
    return AnalysisResult(
        risk_level=str(data["riskLevel"]),
        confidence=int(data["confidence"]),
        summary=str(data["summary"]),
        details=tuple(str(d) for d in data["details"]),
        recommendations=tuple(str(r) for r in data["recommendations"]),
        indicators=tuple(
            Indicator(type=str(i["type"]), severity=str(i["severity"]), description=str(i["description"]))
            for i in data["indicators"]
        ),
        timestamp=datetime.fromisoformat(data["timestamp"]),
        input_type=str(data["inputType"]),
    )

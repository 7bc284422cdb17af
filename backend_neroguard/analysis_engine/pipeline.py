"""
Analysis pipeline: Classify -> (Extract Domain) -> Score -> Tier -> Assemble.

analyze() is the engine's sole public operation. It is a pure function of
its input plus the fixed rule table (timestamp aside), holds no state
between calls, and is safe to run concurrently from any number of callers.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from backend_neroguard.analysis_engine.classifier import detect_input_type, trim_input
from backend_neroguard.analysis_engine.models import AnalysisResult, ScoreResult, TierResult
from backend_neroguard.analysis_engine.scorer import score_input
from backend_neroguard.analysis_engine.tiers import classify_score
from backend_neroguard.neroguard_logging import get_logger

logger = get_logger(__name__)

BASE_CONFIDENCE = 50
CONFIDENCE_PER_INDICATOR = 10
MAX_CONFIDENCE = 95


def compute_confidence(indicator_count: int) -> int:
    """min(95, 50 + 10 * n). Display-only; not a statistical measure."""
    return min(MAX_CONFIDENCE, BASE_CONFIDENCE + CONFIDENCE_PER_INDICATOR * indicator_count)


def assemble_result(
    input_type: str,
    score_result: ScoreResult,
    tier_result: TierResult,
    now: datetime,
) -> AnalysisResult:
    return AnalysisResult(
        risk_level=tier_result.risk_level,
        confidence=compute_confidence(len(score_result.indicators)),
        summary=tier_result.summary,
        details=score_result.details,
        recommendations=tier_result.recommendations,
        indicators=score_result.indicators,
        timestamp=now,
        input_type=input_type,
    )


def analyze(text: str, now: Optional[datetime] = None) -> AnalysisResult:
    """
    Analyze a URL, domain, or free text and return its risk assessment.

    Total over all strings: imposes no length limit and rejects nothing
    (blank input is text with no matches). Input is trimmed first.
    now defaults to the current UTC time.
    """
    trimmed = trim_input(text)
    input_type = detect_input_type(trimmed)
    score_result = score_input(trimmed, input_type)
    tier_result = classify_score(score_result.score)
    result = assemble_result(
        input_type,
        score_result,
        tier_result,
        now if now is not None else datetime.now(timezone.utc),
    )
    logger.debug(
        "analysis_complete",
        input_type=input_type,
        score=score_result.score,
        risk_level=result.risk_level,
        confidence=result.confidence,
        indicators=[i.type for i in result.indicators],
    )
    return result

"""
Tier classifier: map an accumulated score to a risk tier.

Contiguous bands, upper bound inclusive, first match wins:
<= -10 safe, <= 10 low, <= 30 medium, <= 50 high, else critical.
Each tier carries a fixed summary and recommendation list.
"""

from __future__ import annotations

from backend_neroguard.analysis_engine.models import (
    TIER_CRITICAL,
    TIER_HIGH,
    TIER_LOW,
    TIER_MEDIUM,
    TIER_SAFE,
    TierResult,
)

SAFE_MAX_SCORE = -10
LOW_MAX_SCORE = 10
MEDIUM_MAX_SCORE = 30
HIGH_MAX_SCORE = 50

TIER_NARRATIVES: dict[str, TierResult] = {
    TIER_SAFE: TierResult(
        risk_level=TIER_SAFE,
        summary="This appears to be a legitimate, trusted resource.",
        recommendations=(
            "Always verify you're on the correct site before entering sensitive information.",
        ),
    ),
    TIER_LOW: TierResult(
        risk_level=TIER_LOW,
        summary="No significant threats detected, but exercise normal caution.",
        recommendations=(
            "Verify the source if you weren't expecting this content.",
            "Look for official verification badges or certificates.",
        ),
    ),
    TIER_MEDIUM: TierResult(
        risk_level=TIER_MEDIUM,
        summary="Some suspicious indicators detected. Proceed with caution.",
        recommendations=(
            "Verify the legitimacy of this content through official channels.",
            "Do not enter sensitive information without verification.",
            "Check for official communications from the claimed source.",
        ),
    ),
    TIER_HIGH: TierResult(
        risk_level=TIER_HIGH,
        summary="Multiple warning signs detected. This content may be malicious.",
        recommendations=(
            "Do not click links or download files from this source.",
            "Do not enter any personal or financial information.",
            "Report this content if it was sent to you unsolicited.",
            "If you've already interacted, consider changing relevant passwords.",
        ),
    ),
    TIER_CRITICAL: TierResult(
        risk_level=TIER_CRITICAL,
        summary="Strong indicators of malicious content. Avoid interaction.",
        recommendations=(
            "Do not interact with this content in any way.",
            "Close this tab/window immediately if viewing the actual content.",
            "Report this to relevant authorities or platforms.",
            "If you've shared any information, take immediate protective action.",
        ),
    ),
}


def tier_for_score(score: int) -> str:
    if score <= SAFE_MAX_SCORE:
        return TIER_SAFE
    if score <= LOW_MAX_SCORE:
        return TIER_LOW
    if score <= MEDIUM_MAX_SCORE:
        return TIER_MEDIUM
    if score <= HIGH_MAX_SCORE:
        return TIER_HIGH
    return TIER_CRITICAL


def classify_score(score: int) -> TierResult:
    """Return tier, summary, and recommendations for score. Never returns unknown."""
    return TIER_NARRATIVES[tier_for_score(score)]

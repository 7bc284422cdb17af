"""
NeroGuard analysis engine.

Classifies input, runs the fixed rule table, maps the score to a tier,
and assembles an immutable AnalysisResult.
Modules: classifier, rules, scorer, tiers, pipeline, breakdown.
"""

from backend_neroguard.analysis_engine.models import AnalysisResult, Indicator
from backend_neroguard.analysis_engine.pipeline import analyze

__all__ = [
    "AnalysisResult",
    "Indicator",
    "analyze",
]

"""
Scoring pipeline: run the rule table against one input.

URL/domain rules run only for url and domain inputs; text rules run for
every input. Deltas sum with no floor or cap during accumulation.
"""

from __future__ import annotations

from typing import Iterable

from backend_neroguard.analysis_engine.classifier import extract_domain
from backend_neroguard.analysis_engine.models import (
    INPUT_DOMAIN,
    INPUT_URL,
    Indicator,
    ScoreResult,
)
from backend_neroguard.analysis_engine.rules import (
    TEXT_RULES,
    URL_DOMAIN_RULES,
    Rule,
    RuleContext,
)
from backend_neroguard.neroguard_logging import get_logger

logger = get_logger(__name__)

NO_INDICATORS_DETAIL = "No specific threat indicators identified in this analysis."


def rules_for(input_type: str) -> tuple[Rule, ...]:
    """Return the rules applicable to input_type, in evaluation order."""
    if input_type in (INPUT_URL, INPUT_DOMAIN):
        return URL_DOMAIN_RULES + TEXT_RULES
    return TEXT_RULES


def run_rules(rules: Iterable[Rule], ctx: RuleContext) -> ScoreResult:
    """
    Evaluate rules in order against ctx. Generic runner: knows nothing about
    individual rules. Adds the fallback detail when no rule emitted one.
    """
    score = 0
    indicators: list[Indicator] = []
    details: list[str] = []
    for rule in rules:
        if not rule.matches(ctx):
            continue
        indicators.append(Indicator(type=rule.category, severity=rule.severity, description=rule.description))
        score += rule.score_delta
        if rule.detail is not None:
            details.append(rule.detail)
    if not details:
        details.append(NO_INDICATORS_DETAIL)
    return ScoreResult(score=score, indicators=tuple(indicators), details=tuple(details))


def score_input(text: str, input_type: str) -> ScoreResult:
    """
    Score trimmed input text of the given input_type.

    Domain extraction happens only for url/domain inputs; when it yields
    None the domain-specific rules simply do not fire.
    """
    domain = extract_domain(text) if input_type in (INPUT_URL, INPUT_DOMAIN) else None
    result = run_rules(rules_for(input_type), RuleContext(text=text, domain=domain))
    logger.debug(
        "scoring_complete",
        input_type=input_type,
        input_length=len(text),
        domain_extracted=domain is not None,
        score=result.score,
        indicator_count=len(result.indicators),
    )
    return result

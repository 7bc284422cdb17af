"""
Fixed detection rule table.

Each Rule binds a matcher, an indicator (category, severity, description),
a signed score delta, and an optional detail string. Rules are stateless
and evaluated in table order by scorer.score_input; that order is the
order of indicators and details in every result.

Two subsets: URL_DOMAIN_RULES (url and domain inputs only) and TEXT_RULES
(every input). Lookup tables are frozensets/tuples built once at import.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Optional

from backend_neroguard.analysis_engine.models import (
    SEVERITY_DANGER,
    SEVERITY_INFO,
    SEVERITY_WARNING,
)

KNOWN_SAFE_DOMAINS = (
    "google.com", "youtube.com", "facebook.com", "amazon.com", "microsoft.com",
    "apple.com", "github.com", "stackoverflow.com", "wikipedia.org", "linkedin.com",
    "twitter.com", "instagram.com", "reddit.com", "netflix.com", "spotify.com",
)

SUSPICIOUS_TLDS = frozenset(
    ("xyz", "tk", "ml", "ga", "cf", "gq", "top", "work", "click", "link", "loan", "win")
)

BRAND_LOOKALIKES = ("g00gle", "amaz0n", "paypa1", "micr0soft", "faceb00k", "netf1ix")

URGENCY_WORDS = (
    "urgent", "immediate", "act now", "limited time", "expire", "suspended",
    "verify", "confirm", "update required",
)
FINANCIAL_WORDS = (
    "bank", "account", "credit card", "password", "ssn", "social security",
    "wire transfer", "bitcoin", "crypto",
)
THREAT_WORDS = (
    "locked", "suspended", "unauthorized", "illegal", "breach", "compromised", "hacked",
)
REWARD_WORDS = (
    "winner", "prize", "lottery", "free", "gift card", "congratulations", "selected", "claim",
)

MAX_ENCODED_SEQUENCES = 2


def _word_pattern(words: tuple[str, ...]) -> re.Pattern[str]:
    # ASCII word boundaries: a keyword glued to CJK or Cyrillic letters still matches
    alternatives = "|".join(re.escape(w) for w in words)
    return re.compile(rf"\b(?:{alternatives})\b", re.IGNORECASE | re.ASCII)


IP_URL_RE = re.compile(r"^https?://[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}")
EXCESSIVE_SUBDOMAINS_RE = re.compile(r"^https?://(?:[^.]+\.){4,}")
SUSPICIOUS_TLD_RE = re.compile(
    r"\.(?:" + "|".join(sorted(SUSPICIOUS_TLDS)) + r")\Z", re.IGNORECASE
)
# Cyrillic (U+0400-U+04FF) and Greek (U+0370-U+03FF) blocks
HOMOGLYPH_RE = re.compile(r"[\u0370-\u03ff\u0400-\u04ff]")
ENCODED_CHAR_RE = re.compile(r"%[0-9a-fA-F]{2}")
DATA_URI_RE = re.compile(r"^data:", re.IGNORECASE)
PORT_RE = re.compile(r":[0-9]{4,5}/")
TYPOSQUAT_RE = re.compile("|".join(BRAND_LOOKALIKES), re.IGNORECASE)

URGENCY_RE = _word_pattern(URGENCY_WORDS)
FINANCIAL_RE = _word_pattern(FINANCIAL_WORDS)
THREAT_RE = _word_pattern(THREAT_WORDS)
REWARD_RE = _word_pattern(REWARD_WORDS)


@dataclass(frozen=True)
class RuleContext:
    """What a matcher sees: trimmed input and the extracted domain (None when absent)."""

    text: str
    domain: Optional[str] = None


@dataclass(frozen=True)
class Rule:
    name: str
    category: str
    severity: str
    description: str
    score_delta: int
    matches: Callable[[RuleContext], bool]
    # None: rule contributes an indicator but no detail line
    detail: Optional[str] = None


def _is_known_safe_domain(ctx: RuleContext) -> bool:
    if ctx.domain is None:
        return False
    return any(ctx.domain == safe or ctx.domain.endswith("." + safe) for safe in KNOWN_SAFE_DOMAINS)


def _has_excessive_encoding(ctx: RuleContext) -> bool:
    return len(ENCODED_CHAR_RE.findall(ctx.text)) > MAX_ENCODED_SEQUENCES


def _is_typosquat(ctx: RuleContext) -> bool:
    return ctx.domain is not None and TYPOSQUAT_RE.search(ctx.domain) is not None


def _searches(pattern: re.Pattern[str]) -> Callable[[RuleContext], bool]:
    return lambda ctx: pattern.search(ctx.text) is not None


URL_DOMAIN_RULES: tuple[Rule, ...] = (
    Rule(
        name="known_safe_domain",
        category="Known Domain",
        severity=SEVERITY_INFO,
        description="This domain is from a well-known, established organization.",
        score_delta=-20,
        matches=_is_known_safe_domain,
    ),
    Rule(
        name="ip_address_url",
        category="IP Address URL",
        severity=SEVERITY_WARNING,
        description="URL uses an IP address instead of a domain name, which is uncommon for legitimate sites.",
        score_delta=25,
        matches=_searches(IP_URL_RE),
        detail="Direct IP address usage detected in URL",
    ),
    Rule(
        name="excessive_subdomains",
        category="Complex Subdomain",
        severity=SEVERITY_WARNING,
        description="Multiple subdomains may indicate an attempt to obfuscate the true destination.",
        score_delta=15,
        matches=_searches(EXCESSIVE_SUBDOMAINS_RE),
        detail="Unusually complex subdomain structure",
    ),
    Rule(
        name="suspicious_tld",
        category="Unusual TLD",
        severity=SEVERITY_WARNING,
        description="This top-level domain is commonly associated with low-cost registration and spam.",
        score_delta=20,
        matches=_searches(SUSPICIOUS_TLD_RE),
        detail="Domain uses a TLD commonly associated with malicious activity",
    ),
    Rule(
        name="homoglyph",
        category="Character Substitution",
        severity=SEVERITY_DANGER,
        description="Domain contains characters from other alphabets that may impersonate legitimate sites.",
        score_delta=40,
        matches=_searches(HOMOGLYPH_RE),
        detail="Potential homoglyph attack detected",
    ),
    Rule(
        name="excessive_encoding",
        category="URL Encoding",
        severity=SEVERITY_WARNING,
        description="Excessive URL encoding may be used to hide the true destination.",
        score_delta=15,
        matches=_has_excessive_encoding,
        detail="Multiple encoded characters in URL",
    ),
    # Unreachable through analyze(): data: inputs classify as text
    Rule(
        name="data_uri",
        category="Data URI",
        severity=SEVERITY_DANGER,
        description="Data URIs can embed malicious content directly in the URL.",
        score_delta=50,
        matches=_searches(DATA_URI_RE),
        detail="Data URI scheme detected",
    ),
    Rule(
        name="non_standard_port",
        category="Non-Standard Port",
        severity=SEVERITY_INFO,
        description="URL specifies a non-standard port number.",
        score_delta=10,
        matches=_searches(PORT_RE),
        detail="Non-standard port in URL",
    ),
    Rule(
        name="brand_typosquat",
        category="Possible Typosquatting",
        severity=SEVERITY_DANGER,
        description="Domain resembles a known brand with character substitutions.",
        score_delta=45,
        matches=_is_typosquat,
        detail="Domain may be impersonating a well-known brand",
    ),
    Rule(
        name="unencrypted_transport",
        category="Unencrypted Connection",
        severity=SEVERITY_WARNING,
        description="This URL uses HTTP instead of HTTPS, meaning data is not encrypted.",
        score_delta=15,
        matches=lambda ctx: ctx.text.startswith("http://"),
        detail="Connection is not encrypted (HTTP)",
    ),
)

TEXT_RULES: tuple[Rule, ...] = (
    Rule(
        name="urgency_language",
        category="Urgency Tactics",
        severity=SEVERITY_WARNING,
        description="Contains language designed to create a sense of urgency.",
        score_delta=15,
        matches=_searches(URGENCY_RE),
        detail="Uses urgency-inducing language",
    ),
    Rule(
        name="financial_bait",
        category="Financial Keywords",
        severity=SEVERITY_WARNING,
        description="Contains references to financial or sensitive information.",
        score_delta=10,
        matches=_searches(FINANCIAL_RE),
        detail="References financial or sensitive topics",
    ),
    Rule(
        name="threat_language",
        category="Threat Language",
        severity=SEVERITY_WARNING,
        description="Contains threatening language often used in phishing attempts.",
        score_delta=20,
        matches=_searches(THREAT_RE),
        detail="Uses threatening or alarming language",
    ),
    Rule(
        name="reward_bait",
        category="Reward Bait",
        severity=SEVERITY_WARNING,
        description="Promises prizes or rewards, a common social engineering tactic.",
        score_delta=15,
        matches=_searches(REWARD_RE),
        detail="Contains promises of prizes or rewards",
    ),
)

RULES_BY_NAME: dict[str, Rule] = {r.name: r for r in URL_DOMAIN_RULES + TEXT_RULES}

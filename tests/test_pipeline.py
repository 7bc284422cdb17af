"""
Pytest tests for analyze(): end-to-end scenarios and engine-wide properties
(totality, idempotence, confidence cap).
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone

import pytest

from backend_neroguard.analysis_engine import analyze
from backend_neroguard.analysis_engine.models import (
    INPUT_DOMAIN,
    INPUT_TEXT,
    INPUT_URL,
    SCORED_TIERS,
    TIER_CRITICAL,
    TIER_HIGH,
    TIER_LOW,
    TIER_MEDIUM,
    TIER_SAFE,
)
from backend_neroguard.analysis_engine.pipeline import compute_confidence
from backend_neroguard.analysis_engine.scorer import NO_INDICATORS_DETAIL


def test_plain_text_no_matches():
    r = analyze("hello, how are you today")
    assert r.input_type == INPUT_TEXT
    assert r.indicators == ()
    assert r.details == (NO_INDICATORS_DETAIL,)
    assert r.risk_level == TIER_LOW
    assert r.confidence == 50
    assert len(r.recommendations) == 2


def test_known_safe_domain_suppression():
    r = analyze("https://www.github.com/foo")
    assert r.input_type == INPUT_URL
    assert [i.type for i in r.indicators] == ["Known Domain"]
    assert r.indicators[0].severity == "info"
    assert r.details == (NO_INDICATORS_DETAIL,)
    assert r.risk_level == TIER_SAFE
    assert r.confidence == 60


def test_escalation_scenario():
    """IP (+25) + HTTP (+15) + urgency (+15) = 55 -> critical."""
    r = analyze("http://192.168.1.1/login?verify=1&urgent=now")
    assert r.input_type == INPUT_URL
    assert [i.type for i in r.indicators] == [
        "IP Address URL",
        "Unencrypted Connection",
        "Urgency Tactics",
    ]
    assert r.details == (
        "Direct IP address usage detected in URL",
        "Connection is not encrypted (HTTP)",
        "Uses urgency-inducing language",
    )
    assert r.risk_level == TIER_CRITICAL
    assert r.confidence == 80


def test_data_uri_input_is_text_and_rule_unreachable():
    """data: strings classify as text, so the Data URI rule never runs via analyze()."""
    r = analyze("data:text/html,hi")
    assert r.input_type == INPUT_TEXT
    assert all(i.type != "Data URI" for i in r.indicators)
    assert r.risk_level == TIER_LOW


@pytest.mark.parametrize(
    "text, tier",
    [
        ("https://google.com/bank", TIER_SAFE),  # -20 + 10 = -10
        ("https://example.com:8080/", TIER_LOW),  # 10
        ("http://example.com/verify", TIER_MEDIUM),  # 15 + 15 = 30
        ("http://verify.example.xyz", TIER_HIGH),  # 15 + 20 + 15 = 50
    ],
)
def test_tier_boundaries_from_inputs(text, tier):
    assert analyze(text).risk_level == tier


def test_domain_input_rules():
    r = analyze("paypa1-secure.xyz")
    assert r.input_type == INPUT_DOMAIN
    assert [i.type for i in r.indicators] == ["Unusual TLD", "Possible Typosquatting"]
    assert r.risk_level == TIER_CRITICAL  # 20 + 45


def test_known_domain_does_not_hide_danger_indicators():
    """Net score is taken literally: the negative delta offsets other rules."""
    r = analyze("https://mail.google.com/%41%42%43")
    assert [i.type for i in r.indicators] == ["Known Domain", "URL Encoding"]
    assert r.risk_level == TIER_LOW  # -20 + 15


def test_homoglyph_url():
    r = analyze("https://аpple.com")  # Cyrillic a
    assert [i.type for i in r.indicators] == ["Character Substitution"]
    assert r.indicators[0].severity == "danger"
    assert r.risk_level == TIER_HIGH


def test_input_is_trimmed():
    r = analyze("   http://192.168.1.1/   ")
    assert r.input_type == INPUT_URL
    assert r.indicators[0].type == "IP Address URL"


def test_byte_order_mark_is_trimmed():
    r = analyze("\ufeffhttps://github.com")
    assert r.input_type == INPUT_URL
    assert [i.type for i in r.indicators] == ["Known Domain"]


def test_keyword_inside_cjk_text():
    r = analyze("今すぐverifyしてください")
    assert [i.type for i in r.indicators] == ["Urgency Tactics"]


def test_confidence_formula_and_cap():
    assert compute_confidence(0) == 50
    assert compute_confidence(1) == 60
    assert compute_confidence(4) == 90
    assert compute_confidence(5) == 95
    assert compute_confidence(12) == 95
    values = [compute_confidence(n) for n in range(20)]
    assert values == sorted(values)


def test_many_indicators_hit_confidence_cap():
    r = analyze("http://1.2.3.4:8080/%41%42%43 urgent bank hacked winner")
    assert len(r.indicators) == 8
    assert r.confidence == 95
    assert r.risk_level == TIER_CRITICAL


def test_idempotent_modulo_timestamp():
    text = "Your account is suspended, verify now to claim your prize"
    a = analyze(text)
    b = analyze(text)
    assert replace(a, timestamp=b.timestamp) == b


def test_fixed_now_gives_identical_results(fixed_now):
    text = "http://g00gle.com"
    assert analyze(text, now=fixed_now) == analyze(text, now=fixed_now)
    assert analyze(text, now=fixed_now).timestamp == fixed_now


def test_default_timestamp_is_utc_now():
    before = datetime.now(timezone.utc)
    r = analyze("example.com")
    after = datetime.now(timezone.utc)
    assert before <= r.timestamp <= after


@pytest.mark.parametrize(
    "text",
    [
        "",
        "   ",
        "\x00\n\t",
        "a" * 2000,
        "😀" * 500,
        "mixed Пароль παράδειγμα http://",
        "http://",
        "https://%%%",
        "http://[::1",
        "http://" + "a." * 1000 + "com",
        "data:",
        "‮https://example.com",
    ],
)
def test_totality(text):
    r = analyze(text)
    assert r.risk_level in SCORED_TIERS
    assert 0 <= r.confidence <= 95
    assert r.recommendations
    assert r.details
    assert r.input_type in (INPUT_URL, INPUT_DOMAIN, INPUT_TEXT)


def test_empty_string_is_text_with_fallback_only():
    r = analyze("")
    assert r.input_type == INPUT_TEXT
    assert r.indicators == ()
    assert r.details == (NO_INDICATORS_DETAIL,)
    assert r.risk_level == TIER_LOW

"""
Pytest tests for env-driven settings and collaborator-side input validation.
"""

from __future__ import annotations

import pytest

from backend_neroguard.config import get_settings
from backend_neroguard.core.exceptions import InputValidationError, validate_input


@pytest.fixture
def clean_env(monkeypatch):
    for name in (
        "NEROGUARD_DB_URL",
        "DATABASE_URL",
        "HISTORY_DB_PATH",
        "HISTORY_LIMIT",
        "MAX_INPUT_LENGTH",
        "API_HOST",
        "API_PORT",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    s = get_settings()
    assert s.database_url == "sqlite:///neroguard_history.db"
    assert s.history_limit == 50
    assert s.max_input_length == 2000
    assert (s.api_host, s.api_port) == ("0.0.0.0", 8000)


def test_database_url_precedence(clean_env):
    clean_env.setenv("HISTORY_DB_PATH", "/tmp/h.db")
    assert get_settings().database_url == "sqlite:////tmp/h.db"
    clean_env.setenv("DATABASE_URL", "postgresql://db/one")
    assert get_settings().database_url == "postgresql://db/one"
    clean_env.setenv("NEROGUARD_DB_URL", "postgresql://db/two")
    assert get_settings().database_url == "postgresql://db/two"


@pytest.mark.parametrize("raw", ["abc", "0", "-5", ""])
def test_invalid_history_limit_falls_back(clean_env, raw):
    clean_env.setenv("HISTORY_LIMIT", raw)
    assert get_settings().history_limit == 50


def test_overrides(clean_env):
    clean_env.setenv("HISTORY_LIMIT", "10")
    clean_env.setenv("MAX_INPUT_LENGTH", "100")
    clean_env.setenv("API_PORT", "9000")
    s = get_settings()
    assert (s.history_limit, s.max_input_length, s.api_port) == (10, 100, 9000)


def test_validate_input_trims():
    assert validate_input("  example.com \n", 2000) == "example.com"
    assert validate_input("\ufeffexample.com", 2000) == "example.com"


@pytest.mark.parametrize("text", ["", "   ", "\n\t", "\ufeff ", None])
def test_validate_input_blank(text):
    with pytest.raises(InputValidationError, match="Please enter a URL"):
        validate_input(text, 2000)


def test_validate_input_too_long():
    assert validate_input("a" * 10, 10) == "a" * 10
    with pytest.raises(InputValidationError) as exc:
        validate_input("a" * 11, 10)
    assert exc.value.message == "Input is too long. Please limit to 10 characters."
    assert isinstance(exc.value, ValueError)

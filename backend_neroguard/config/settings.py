"""
Application settings.

Typed, immutable view over the environment (see config.env) for the
history store, API server, and console tool. Built fresh on each call so
tests can monkeypatch the environment.
"""

from __future__ import annotations

from dataclasses import dataclass

from backend_neroguard.config.env import (
    get_api_bind,
    get_database_url,
    get_history_limit,
    get_max_input_length,
)


@dataclass(frozen=True)
class Settings:
    database_url: str
    history_limit: int
    max_input_length: int
    api_host: str
    api_port: int


def get_settings() -> Settings:
    """Return the current application settings."""
    api_host, api_port = get_api_bind()
    return Settings(
        database_url=get_database_url(),
        history_limit=get_history_limit(),
        max_input_length=get_max_input_length(),
        api_host=api_host,
        api_port=api_port,
    )

"""
Environment variable loading for NeroGuard.

- NEROGUARD_DB_URL / DATABASE_URL: SQLAlchemy URL for the history store
- HISTORY_DB_PATH: SQLite file used when no URL is set (default: neroguard_history.db)
- HISTORY_LIMIT: number of history entries kept (default: 50)
- MAX_INPUT_LENGTH: longest accepted input after trimming (default: 2000)
- API_HOST / API_PORT: uvicorn bind address
- Loads .env from project root when available.
"""

from __future__ import annotations

import os
from pathlib import Path

# Project root: config is backend_neroguard/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_BACKEND_DIR = _CONFIG_DIR.parent
_ROOT = _BACKEND_DIR.parent
_ENV_PATH = _ROOT / ".env"

DEFAULT_HISTORY_DB_PATH = "neroguard_history.db"
DEFAULT_HISTORY_LIMIT = 50
DEFAULT_MAX_INPUT_LENGTH = 2000
DEFAULT_API_HOST = "0.0.0.0"
DEFAULT_API_PORT = 8000


def load_neroguard_env() -> None:
    """Load .env from project root. Safe to call multiple times."""
    try:
        from dotenv import load_dotenv
        load_dotenv(_ENV_PATH)
    except Exception:
        pass


def _get_int(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def get_database_url() -> str:
    """
    Resolve the history store database URL.
    Order: NEROGUARD_DB_URL > DATABASE_URL > sqlite:///HISTORY_DB_PATH.
    """
    load_neroguard_env()
    url = (os.getenv("NEROGUARD_DB_URL") or os.getenv("DATABASE_URL") or "").strip()
    if url:
        return url
    path = (os.getenv("HISTORY_DB_PATH") or "").strip() or DEFAULT_HISTORY_DB_PATH
    return f"sqlite:///{path}"


def get_history_limit() -> int:
    """Return HISTORY_LIMIT; non-positive or invalid values fall back to 50."""
    load_neroguard_env()
    limit = _get_int("HISTORY_LIMIT", DEFAULT_HISTORY_LIMIT)
    return limit if limit > 0 else DEFAULT_HISTORY_LIMIT


def get_max_input_length() -> int:
    load_neroguard_env()
    length = _get_int("MAX_INPUT_LENGTH", DEFAULT_MAX_INPUT_LENGTH)
    return length if length > 0 else DEFAULT_MAX_INPUT_LENGTH


def get_api_bind() -> tuple[str, int]:
    """Return (API_HOST, API_PORT)."""
    load_neroguard_env()
    host = (os.getenv("API_HOST") or "").strip() or DEFAULT_API_HOST
    return host, _get_int("API_PORT", DEFAULT_API_PORT)

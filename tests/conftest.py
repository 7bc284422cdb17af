"""
Pytest fixtures for NeroGuard tests. Uses a temporary SQLite DB for the history store.
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

FIXED_NOW = datetime(2026, 10, 8, 14, 3, 5, tzinfo=timezone.utc)


@pytest.fixture
def fixed_now():
    return FIXED_NOW


@pytest.fixture
def history_db(tmp_path, monkeypatch):
    """
    Point the history store at a temporary SQLite DB and init tables.
    Resets engine cache so each test gets a fresh DB. Unset DB URLs so we use SQLite.
    """
    monkeypatch.delenv("NEROGUARD_DB_URL", raising=False)
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("HISTORY_LIMIT", raising=False)
    monkeypatch.setenv("HISTORY_DB_PATH", str(tmp_path / "history.db"))

    import backend_neroguard.history.store as store

    store.reset_engine_for_test()
    store.init_db()
    yield store
    store.reset_engine_for_test()


@pytest.fixture
def client(history_db):
    """FastAPI TestClient. Depends on history_db so temp DB is set before app runs."""
    from fastapi.testclient import TestClient

    from backend_neroguard.api_server.server import app

    return TestClient(app)

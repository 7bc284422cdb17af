"""
NeroGuard analysis history — SQLAlchemy-backed, newest first, capped.

Uses NEROGUARD_DB_URL / DATABASE_URL when set; otherwise falls back to SQLite
(HISTORY_DB_PATH or neroguard_history.db). Each entry stores the analysed
input and the result as JSON (see history.serialization). After every save
the oldest rows beyond HISTORY_LIMIT are evicted.
"""

from __future__ import annotations

import json
import time
import uuid
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Iterator

from sqlalchemy import Column, Float, Integer, String, Text, create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from backend_neroguard.analysis_engine.models import AnalysisResult
from backend_neroguard.config.env import get_database_url, get_history_limit
from backend_neroguard.core.exceptions import HistoryEntryNotFound
from backend_neroguard.history.serialization import result_from_dict, result_to_dict
from backend_neroguard.neroguard_logging import get_logger

logger = get_logger(__name__)

Base = declarative_base()


class AnalysisHistory(Base):
    """
    One analysed input. seq orders entries (higher = newer); entry_id is the
    opaque id handed to clients.
    """

    __tablename__ = "analysis_history"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    entry_id = Column(String(32), unique=True, nullable=False, index=True)
    input = Column(Text, nullable=False)
    risk_level = Column(String(16), nullable=False)
    result_json = Column(Text, nullable=False)
    created_at = Column(Float, nullable=False)  # Unix


@dataclass(frozen=True)
class HistoryEntry:
    id: str
    input: str
    result: AnalysisResult

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "input": self.input, "result": result_to_dict(self.result)}


# -----------------------------------------------------------------------------
# Engine and session
# -----------------------------------------------------------------------------

_engine = None
_SessionLocal: sessionmaker | None = None


def _get_engine():
    """Create or return cached engine."""
    global _engine
    if _engine is None:
        url = get_database_url()
        connect_args = {}
        if url.startswith("sqlite"):
            connect_args["check_same_thread"] = False
        _engine = create_engine(url, connect_args=connect_args, pool_pre_ping=True)
        logger.info("history_engine", url=url.split("?")[0].split("//")[-1])
    return _engine


def _get_session_factory() -> sessionmaker:
    global _SessionLocal
    if _SessionLocal is None:
        _SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=_get_engine())
    return _SessionLocal


@contextmanager
def _session_scope() -> Iterator[Session]:
    """Context manager for a single session. Commits on success, rolls back on error."""
    factory = _get_session_factory()
    session = factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def _row_to_entry(row: AnalysisHistory) -> HistoryEntry | None:
    """Decode one row; None (with a warning) if the stored JSON is unreadable."""
    try:
        result = result_from_dict(json.loads(row.result_json))
    except (ValueError, KeyError, TypeError) as e:
        logger.warning("history_entry_undecodable", entry_id=row.entry_id, error=str(e))
        return None
    return HistoryEntry(id=row.entry_id, input=row.input, result=result)


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------


def init_db() -> None:
    """Create the history table if it does not exist. Safe to call on every startup."""
    try:
        Base.metadata.create_all(bind=_get_engine())
        logger.info("history_init_db", url=get_database_url().split("?")[0].split("//")[-1])
    except Exception as e:
        logger.exception("history_init_db_failed", error=str(e))
        raise


def _evict_oldest(session: Session, limit: int) -> int:
    stale = (
        session.query(AnalysisHistory.seq)
        .order_by(AnalysisHistory.seq.desc())
        .offset(limit)
        .all()
    )
    if not stale:
        return 0
    seqs = [r[0] for r in stale]
    session.query(AnalysisHistory).filter(AnalysisHistory.seq.in_(seqs)).delete(synchronize_session=False)
    return len(seqs)


def save_to_history(input_text: str, result: AnalysisResult) -> str:
    """
    Insert an entry as the newest and evict the oldest beyond HISTORY_LIMIT.
    Returns the new entry id.
    """
    entry_id = uuid.uuid4().hex
    limit = get_history_limit()
    try:
        with _session_scope() as session:
            session.add(
                AnalysisHistory(
                    entry_id=entry_id,
                    input=input_text,
                    risk_level=result.risk_level,
                    result_json=json.dumps(result_to_dict(result)),
                    created_at=time.time(),
                )
            )
            session.flush()
            evicted = _evict_oldest(session, limit)
        logger.info("history_entry_saved", entry_id=entry_id, risk_level=result.risk_level, evicted=evicted)
        return entry_id
    except Exception as e:
        logger.exception("history_save_failed", error=str(e))
        raise


def load_history(query: str | None = None) -> list[HistoryEntry]:
    """
    Return entries newest first. query filters on the stored input,
    case-insensitive substring match.
    """
    needle = (query or "").lower()
    try:
        with _session_scope() as session:
            rows = session.query(AnalysisHistory).order_by(AnalysisHistory.seq.desc()).all()
            entries = [_row_to_entry(r) for r in rows if needle in r.input.lower()]
    except Exception as e:
        logger.exception("history_load_failed", error=str(e))
        raise
    return [e for e in entries if e is not None]


def get_entry(entry_id: str) -> HistoryEntry | None:
    entry_id = (entry_id or "").strip()
    if not entry_id:
        return None
    try:
        with _session_scope() as session:
            row = session.query(AnalysisHistory).filter(AnalysisHistory.entry_id == entry_id).first()
            return _row_to_entry(row) if row else None
    except Exception as e:
        logger.exception("history_get_failed", entry_id=entry_id, error=str(e))
        raise


def require_entry(entry_id: str) -> HistoryEntry:
    """Like get_entry but raises HistoryEntryNotFound when absent."""
    entry = get_entry(entry_id)
    if entry is None:
        raise HistoryEntryNotFound(entry_id)
    return entry


def delete_entry(entry_id: str) -> bool:
    """Delete one entry. Returns False if it did not exist."""
    try:
        with _session_scope() as session:
            deleted = (
                session.query(AnalysisHistory)
                .filter(AnalysisHistory.entry_id == entry_id)
                .delete(synchronize_session=False)
            )
    except Exception as e:
        logger.exception("history_delete_failed", entry_id=entry_id, error=str(e))
        raise
    if deleted:
        logger.info("history_entry_deleted", entry_id=entry_id)
    return bool(deleted)


def clear_history() -> int:
    """Delete every entry. Returns the number of rows removed."""
    try:
        with _session_scope() as session:
            deleted = session.query(AnalysisHistory).delete(synchronize_session=False)
    except Exception as e:
        logger.exception("history_clear_failed", error=str(e))
        raise
    logger.info("history_cleared", deleted=deleted)
    return deleted


def reset_engine_for_test() -> None:
    """
    Clear cached engine and session factory. For tests only; use with a new HISTORY_DB_PATH.
    """
    global _engine, _SessionLocal
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _SessionLocal = None

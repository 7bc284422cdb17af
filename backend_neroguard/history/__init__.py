"""
Analysis history store.

Keeps the most recent analyses (HISTORY_LIMIT, default 50) keyed by an
opaque id; oldest entries are evicted first.
"""

from backend_neroguard.history.serialization import result_from_dict, result_to_dict
from backend_neroguard.history.store import (
    HistoryEntry,
    clear_history,
    delete_entry,
    get_entry,
    init_db,
    load_history,
    require_entry,
    save_to_history,
)

__all__ = [
    "HistoryEntry",
    "clear_history",
    "delete_entry",
    "get_entry",
    "init_db",
    "load_history",
    "require_entry",
    "result_from_dict",
    "result_to_dict",
    "save_to_history",
]

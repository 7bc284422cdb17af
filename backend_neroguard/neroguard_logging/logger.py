"""
Structured logging for NeroGuard: structlog, one JSON object per line on stderr.

Every record carries event_type, level, logger, and an ISO 8601 UTC
timestamp. String fields are truncated so an oversized input or search
query can never flood the log; the engine itself logs input lengths, not
input text.

Env: LOG_LEVEL (default INFO), LOG_FORMAT (json | console, default json).
Uses only Python stdlib logging and structlog; no backend_neroguard imports to avoid circular imports.
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any

import structlog

MAX_FIELD_LENGTH = 200
TRUNCATION_MARK = "..."


def _add_timestamp(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    event_dict.setdefault("timestamp", datetime.now(timezone.utc).isoformat())
    return event_dict


def _event_type(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """structlog's positional 'event' becomes event_type."""
    if "event" in event_dict and "event_type" not in event_dict:
        event_dict["event_type"] = event_dict.pop("event")
    return event_dict


def _truncate_strings(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    for key, value in event_dict.items():
        if isinstance(value, str) and len(value) > MAX_FIELD_LENGTH:
            event_dict[key] = value[:MAX_FIELD_LENGTH] + TRUNCATION_MARK
    return event_dict


def configure_logging(level: str | None = None, fmt: str | None = None) -> None:
    """
    (Re)configure structlog. Arguments override LOG_LEVEL / LOG_FORMAT.
    Called once on first import; call again to switch level or renderer.
    """
    level_name = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    level_value = getattr(logging, level_name, logging.INFO)
    fmt = (fmt or os.getenv("LOG_FORMAT") or "json").strip().lower()

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.format_exc_info,
        _add_timestamp,
        _truncate_strings,
    ]
    if fmt == "json":
        processors += [_event_type, structlog.processors.JSONRenderer(ensure_ascii=False)]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level_value),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


if not structlog.is_configured():
    configure_logging()


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Return a structured logger bound to the module name.

        logger = get_logger(__name__)
        logger.info("history_entry_saved", entry_id=entry_id, risk_level="high")
    """
    return structlog.get_logger(name).bind(logger=name)


def bind_request(request_id: str) -> structlog.BoundLogger:
    """Return a logger with request_id bound to all subsequent log calls."""
    return get_logger("backend_neroguard.api").bind(request_id=request_id)

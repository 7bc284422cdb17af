"""
Structured logging for NeroGuard.

JSON logs with timestamp, event_type, and per-call fields.
Use get_logger() in all modules for aggregation-friendly output.
"""

from backend_neroguard.neroguard_logging.logger import get_logger

__all__ = ["get_logger"]

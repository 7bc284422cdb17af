"""
Application-level exceptions.

The analysis engine is total and raises nothing; these cover the
collaborator layer (input validation, history lookups) and give the API
and console tool consistent messages.
"""

from __future__ import annotations

from backend_neroguard.analysis_engine.classifier import trim_input

EMPTY_INPUT_MESSAGE = "Please enter a URL, domain, or text to analyze."
INPUT_TOO_LONG_MESSAGE = "Input is too long. Please limit to {limit} characters."


class NeroGuardError(Exception):
    """Base class for NeroGuard errors."""


class InputValidationError(NeroGuardError, ValueError):
    """User input rejected before analysis (blank or over the length limit)."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class HistoryEntryNotFound(NeroGuardError, KeyError):
    """No history entry exists for the given id."""

    def __init__(self, entry_id: str) -> None:
        super().__init__(entry_id)
        self.entry_id = entry_id

    def __str__(self) -> str:
        return f"No history entry {self.entry_id!r}"


def validate_input(text: str | None, max_length: int) -> str:
    """
    Trim and validate user input. Returns the trimmed text.
    Raises InputValidationError when blank or longer than max_length.
    """
    trimmed = trim_input(text or "")
    if not trimmed:
        raise InputValidationError(EMPTY_INPUT_MESSAGE)
    if len(trimmed) > max_length:
        raise InputValidationError(INPUT_TOO_LONG_MESSAGE.format(limit=max_length))
    return trimmed

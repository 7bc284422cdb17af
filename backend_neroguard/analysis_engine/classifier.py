"""
Input classification and domain extraction.

detect_input_type tags every string as url, domain, or text (total, no
error cases). extract_domain returns a lowercase hostname or None; a
malformed URL disables domain-specific rules for that call only.
"""

from __future__ import annotations

import re
from typing import Optional
from urllib.parse import urlsplit

from backend_neroguard.analysis_engine.models import INPUT_DOMAIN, INPUT_TEXT, INPUT_URL

URL_PREFIXES = ("http://", "https://")

# Surrounding whitespace plus the byte order mark
_EDGE_SPACE_RE = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+\Z")

# Labels of 1-63 alnum chars with internal hyphens, joined by dots; alphabetic TLD of 2+
DOMAIN_RE = re.compile(
    r"(?:[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?\.)+[A-Za-z]{2,}"
)


def trim_input(text: str) -> str:
    """Strip leading and trailing whitespace, including a stray U+FEFF."""
    return _EDGE_SPACE_RE.sub("", text)


def is_domain_name(text: str) -> bool:
    """Return True if text (as given, not trimmed) fully matches the domain grammar."""
    return DOMAIN_RE.fullmatch(text) is not None


def detect_input_type(text: str) -> str:
    """
    Classify input as url, domain, or text. Order of checks matters.

    The scheme prefix check is case-sensitive and is applied to text as
    given; the domain check applies to the trimmed text.
    """
    if text.startswith(URL_PREFIXES):
        return INPUT_URL
    if is_domain_name(trim_input(text)):
        return INPUT_DOMAIN
    return INPUT_TEXT


def extract_domain(text: str) -> Optional[str]:
    """
    Return the lowercase hostname of a URL or bare domain, else None.

    URL parse failures (bad IPv6 literal, bad port, empty host) return
    None rather than raising.
    """
    if text.startswith(URL_PREFIXES):
        try:
            # Backslash separates the path in http(s) URLs, as browsers parse them
            parts = urlsplit(text.replace("\\", "/"))
            # .port validates the authority; out-of-range ports raise ValueError
            parts.port
            hostname = parts.hostname
        except ValueError:
            return None
        if not hostname:
            return None
        return hostname.lower()
    if is_domain_name(text):
        return text.lower()
    return None

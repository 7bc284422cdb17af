"""
Configuration management for NeroGuard.

Loads settings from environment variables and an optional .env file.
Exposes a single source of truth for host-side configuration; the
analysis engine itself reads no configuration.
"""

from backend_neroguard.config.settings import Settings, get_settings  # noqa: F401

__all__ = ["Settings", "get_settings"]

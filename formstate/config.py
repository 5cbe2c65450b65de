"""
formstate configuration — all environment variables in one place.

Read from environment at import time. Hosts may also mutate `settings`
directly before building a reducer.
"""

from __future__ import annotations

import os


def _env_flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """Library settings from environment variables."""

    # Diagnostics
    DIAGNOSTIC_LOGGER: str = os.environ.get("FORMSTATE_DIAGNOSTIC_LOGGER", "formstate.reducer")
    DIAGNOSTIC_LEVEL: str = os.environ.get("FORMSTATE_DIAGNOSTIC_LEVEL", "WARNING")

    # Logging (used by configure_logging only; the library never configures handlers itself)
    LOG_LEVEL: str = os.environ.get("FORMSTATE_LOG_LEVEL", "WARNING")

    # Actions
    ACCEPT_LEGACY_INIT: bool = _env_flag("FORMSTATE_ACCEPT_LEGACY_INIT", "true")


# Singleton instance
settings = Settings()

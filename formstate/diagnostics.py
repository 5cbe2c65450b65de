"""
formstate — Diagnostic sinks

The reducer never raises for an action it does not understand; it reports a
Diagnostic to a sink and moves on. Sinks are plain callables so a host can
route them anywhere (its own logger, a list in a test, a metrics counter).
"""

from __future__ import annotations

import logging

from formstate.config import settings
from formstate.types import Diagnostic


def log_diagnostic(diagnostic: Diagnostic) -> None:
    """Default sink: log through the configured diagnostics logger."""
    logger = logging.getLogger(settings.DIAGNOSTIC_LOGGER)
    level = logging.getLevelName(settings.DIAGNOSTIC_LEVEL.upper())
    if not isinstance(level, int):
        level = logging.WARNING
    logger.log(level, "%s: %s", diagnostic.code, diagnostic.message, extra={"details": diagnostic.details})


def null_sink(diagnostic: Diagnostic) -> None:
    """Discard diagnostics."""


class CollectingSink:
    """Keeps every diagnostic it receives, in order."""

    def __init__(self) -> None:
        self.diagnostics: list[Diagnostic] = []

    def __call__(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)

    def codes(self) -> list[str]:
        return [d.code for d in self.diagnostics]


def configure_logging(level: str | int | None = None) -> None:
    """
    Convenience for scripts and hosts without their own logging setup.
    The library itself never installs handlers.
    """
    logging.basicConfig(
        level=level if level is not None else settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

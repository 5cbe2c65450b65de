"""
formstate — Shared Types

Data classes and constants used across the sanitizer, path mutator, and reducer.
These are the contracts that bind the package together.

State is a plain dict with the canonical keys below. Any other key a host
stores on the state passes through every transition untouched.
"""

from __future__ import annotations

import copy
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Final

# ---------------------------------------------------------------------------
# Canonical state keys
# ---------------------------------------------------------------------------

VALUE: Final = "value"
MODEL: Final = "model"
BASE_MODEL: Final = "base_model"
ERRORS: Final = "errors"
VALIDATION_RESULT: Final = "validation_result"

STATE_KEYS: tuple[str, ...] = (ERRORS, VALIDATION_RESULT, VALUE, MODEL, BASE_MODEL)


# ---------------------------------------------------------------------------
# Sentinel
# ---------------------------------------------------------------------------


class _Unset:
    """
    Marks a value that has been deliberately cleared during initialization.
    Treated as missing by default-filling and as droppable by the sanitizer.
    """

    _instance: _Unset | None = None

    def __new__(cls) -> _Unset:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> _Unset:
        return self

    def __deepcopy__(self, memo: dict) -> _Unset:
        return self


UNSET: Final = _Unset()


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

_DEFAULT_STATE: dict[str, Any] = {
    ERRORS: {},
    VALIDATION_RESULT: {"warnings": [], "errors": []},
    VALUE: None,
    MODEL: {},  # derived by the reducer
    BASE_MODEL: {},  # as supplied by the form author
}


def default_state() -> dict[str, Any]:
    """Fresh copy of the documented defaults. Never shared between states."""
    return copy.deepcopy(_DEFAULT_STATE)


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Diagnostic:
    """A non-fatal issue encountered during reduction."""

    code: str
    message: str
    details: dict[str, Any] | None = None


DiagnosticSink = Callable[[Diagnostic], None]

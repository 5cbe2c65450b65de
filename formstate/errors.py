"""formstate exceptions."""

from __future__ import annotations


class FormStateError(Exception):
    """Base class for formstate errors."""


class InvalidPathError(FormStateError, ValueError):
    """A bunsen id that cannot be parsed into path segments."""

    def __init__(self, bunsen_id: object) -> None:
        super().__init__(f"INVALID_PATH: cannot address value tree with {bunsen_id!r}")
        self.bunsen_id = bunsen_id

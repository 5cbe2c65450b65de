"""
formstate — Value Sanitizer

Strips empty leaves and containers from a form value before it becomes the
new snapshot. "Empty" is decided by is_droppable alone:

    value kind                              droppable
    --------------------------------------  ---------------
    bool (True or False)                    never
    number (int, float, Decimal, ...)       never, 0 included
    None / UNSET                            always
    str / bytes                             when empty
    mapping (dict, PMap, ...)               when empty
    sequence (list, tuple, PVector, ...)    when empty
    set (set, frozenset, PSet)              when empty
    anything else                           never

Children are cleaned before they are judged, so a mapping whose only
members were empty is itself dropped. This keeps recursive_clean idempotent.

Sequences are filtered, not spliced: dropping an element shifts the index
of everything after it.
"""

from __future__ import annotations

import numbers
from collections.abc import Mapping, Sequence, Set
from typing import Any

from formstate.types import UNSET

_TEXT = (str, bytes, bytearray)


def is_droppable(value: Any) -> bool:
    """Return True when value carries no information and should be pruned."""
    if isinstance(value, bool):
        return False
    if isinstance(value, numbers.Number):
        return False
    if value is None or value is UNSET:
        return True
    if isinstance(value, (*_TEXT, Mapping, Sequence, Set)):
        return len(value) == 0
    return False


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, _TEXT)


def recursive_clean(value: Any) -> Any:
    """
    Return a pruned, plain copy of value.

    Mappings come back as dicts and sequences as lists; freezing is the
    caller's business. Scalars, including None, are returned as-is.
    """
    if isinstance(value, Mapping):
        output: dict[Any, Any] = {}
        for key, sub_value in value.items():
            cleaned = recursive_clean(sub_value)
            if not is_droppable(cleaned):
                output[key] = cleaned
        return output

    if _is_sequence(value):
        items = (recursive_clean(sub_value) for sub_value in value)
        return [item for item in items if not is_droppable(item)]

    return value

"""
formstate — Path Mutator

Pure set / unset / get on immutable value trees addressed by a bunsen id.

Trees are pyrsistent PMap / PVector structures. Every write returns a new
root and shares every untouched subtree with the old one by identity, so
consumers can compare subtrees with `is`.

Bunsen ids are dotted, bracketed or mixed:
  "name"                → ["name"]
  "address.street"      → ["address", "street"]
  "contacts.0.phone"    → ["contacts", "0", "phone"]
  "contacts[0].phone"   → ["contacts", "0", "phone"]

Digit segments index into vectors; everywhere else they are mapping keys.
A bunsen id with no segments at all ("", "..", "[]") addresses the
literal key of that name, so writes never fail on an odd id.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any

from pyrsistent import PMap, PSet, PVector, freeze, pmap, pvector, thaw

from formstate.errors import InvalidPathError

_SEGMENT_RE = re.compile(r"[^.\[\]]+")

_PERSISTENT = (PMap, PVector, PSet)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def parse_path(bunsen_id: str) -> list[str]:
    """Split a bunsen id into segments. Raises InvalidPathError if none."""
    if not isinstance(bunsen_id, str):
        raise InvalidPathError(bunsen_id)
    segments = _SEGMENT_RE.findall(bunsen_id)
    if not segments:
        raise InvalidPathError(bunsen_id)
    return segments


def ensure_frozen(value: Any) -> Any:
    """Freeze plain containers; persistent values are returned as-is to keep sharing."""
    if isinstance(value, _PERSISTENT):
        return value
    return freeze(value)


def to_plain(value: Any) -> Any:
    """Thaw a frozen tree back to dicts and lists."""
    return thaw(value)


def get_in(tree: Any, bunsen_id: str, default: Any = None) -> Any:
    """Lookup the node at bunsen_id, or default when any segment is missing."""
    node = tree
    for segment in _segments(bunsen_id):
        found, node = _child(node, segment)
        if not found:
            return default
    return node


def set_in(tree: Any, bunsen_id: str, value: Any) -> Any:
    """
    Return a new tree with value stored at bunsen_id.

    Missing intermediates are created: a vector when the following segment
    is a digit, a map otherwise. Anything on the path that is not a
    container is replaced. Writing past the end of a vector pads it with
    None.
    """
    return _set(tree, _segments(bunsen_id), ensure_frozen(value))


def unset_in(tree: Any, bunsen_id: str) -> Any:
    """
    Return a new tree without the node at bunsen_id.

    Mapping keys are removed; vector elements are deleted and later
    elements shift down. Parents left empty stay in place. A path that does
    not exist returns the original tree object.
    """
    return _unset(tree, _segments(bunsen_id))


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _segments(bunsen_id: Any) -> list[str]:
    """parse_path without the failure: unparsable ids become a single literal key."""
    raw = bunsen_id if isinstance(bunsen_id, str) else str(bunsen_id)
    return _SEGMENT_RE.findall(raw) or [raw]


def _is_index(segment: str) -> bool:
    return segment.isdigit()


def _child(node: Any, segment: str) -> tuple[bool, Any]:
    if isinstance(node, Mapping):
        if segment in node:
            return True, node[segment]
        return False, None
    if isinstance(node, Sequence) and not isinstance(node, str) and _is_index(segment):
        index = int(segment)
        if index < len(node):
            return True, node[index]
    return False, None


def _as_container(node: Any, segment: str) -> PMap | PVector:
    """The persistent container to write segment into."""
    if isinstance(node, PVector):
        if _is_index(segment):
            return node
        return pmap({str(i): item for i, item in enumerate(node)})
    if isinstance(node, PMap):
        return node
    if isinstance(node, Mapping) or (isinstance(node, Sequence) and not isinstance(node, str)):
        return _as_container(freeze(node), segment)
    return pvector() if _is_index(segment) else pmap()


def _assign(container: PMap | PVector, segment: str, value: Any) -> PMap | PVector:
    if isinstance(container, PVector):
        index = int(segment)
        if index > len(container):
            container = container.extend([None] * (index - len(container)))
        if index == len(container):
            return container.append(value)
        return container.set(index, value)
    return container.set(segment, value)


def _set(node: Any, segments: list[str], value: Any) -> PMap | PVector:
    head, rest = segments[0], segments[1:]
    container = _as_container(node, head)
    if rest:
        found, child = _child(container, head)
        value = _set(child if found else None, rest, value)
    return _assign(container, head, value)


def _unset(node: Any, segments: list[str]) -> Any:
    head, rest = segments[0], segments[1:]
    found, child = _child(node, head)
    if not found:
        return node

    container = _as_container(node, head)
    if rest:
        new_child = _unset(child, rest)
        if new_child is child:
            return node
        return _assign(container, head, new_child)

    if isinstance(container, PVector):
        return container.delete(int(head))
    return container.remove(head)

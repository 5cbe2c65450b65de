"""
formstate — Condition evaluation seam

The reducer never interprets a model. It hands the author's base model and
the current value to a ConditionEvaluator and stores what comes back. The
evaluator must be pure and deterministic; otherwise the derived model can
change on every transition and the `model` reference is never retained.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping, Sequence, Set
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class ConditionEvaluator(Protocol):
    def __call__(self, base_model: Any, value: Any) -> Any: ...


def passthrough_conditions(base_model: Any, value: Any) -> Any:
    """Evaluator for models without conditional branches: the base model as-is."""
    return base_model


def structurally_equal(a: Any, b: Any) -> bool:
    """
    Deep equality over JSON-like trees, plain or frozen.

    Unlike ==, booleans never equal numbers (False != 0) and NaN equals NaN.
    Mappings compare by keys and values regardless of concrete class, so a
    dict equals a PMap with the same contents.
    """
    if a is b:
        return True

    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b

    if isinstance(a, float) and isinstance(b, float) and math.isnan(a) and math.isnan(b):
        return True

    if isinstance(a, Mapping) or isinstance(b, Mapping):
        if not (isinstance(a, Mapping) and isinstance(b, Mapping)):
            return False
        if len(a) != len(b):
            return False
        for key, sub_a in a.items():
            if key not in b or not structurally_equal(sub_a, b[key]):
                return False
        return True

    if _is_sequence(a) or _is_sequence(b):
        if not (_is_sequence(a) and _is_sequence(b)):
            return False
        if len(a) != len(b):
            return False
        return all(structurally_equal(x, y) for x, y in zip(a, b))

    if isinstance(a, Set) and isinstance(b, Set):
        return set(a) == set(b)

    return a == b


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, str | bytes | bytearray)


def derive_model(evaluate: ConditionEvaluator, base_model: Any, value: Any, previous: Any) -> Any:
    """
    Evaluate the model for value. When the result is structurally equal to
    previous, previous itself is returned so identity checks see no change.
    """
    model = evaluate(base_model, value)
    if structurally_equal(previous, model):
        logger.debug("derive_model: model unchanged, keeping previous reference")
        return previous
    logger.debug("derive_model: model changed")
    return model

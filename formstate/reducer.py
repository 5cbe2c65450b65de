"""
formstate — Reducer

Pure function: (state, action) → state
No side effects. No IO. Deterministic for a deterministic condition evaluator.

The input state is never modified. Every transition returns a new dict that
carries over any key it does not own, except for unknown actions, which are
reported to the diagnostic sink and answered with the input state itself.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, assert_never

from formstate.actions import (
    Action,
    ChangeModelAction,
    ChangeValueAction,
    InitAction,
    UnknownAction,
    ValidationResolvedAction,
    init,
    parse_action,
)
from formstate.conditions import ConditionEvaluator, derive_model, passthrough_conditions
from formstate.diagnostics import log_diagnostic
from formstate.immutable_utils import ensure_frozen, set_in, to_plain, unset_in
from formstate.sanitize import recursive_clean
from formstate.types import (
    BASE_MODEL,
    ERRORS,
    MODEL,
    UNSET,
    VALIDATION_RESULT,
    VALUE,
    Diagnostic,
    DiagnosticSink,
    default_state,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def initial_state(state: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """
    Fill any missing canonical key with its documented default.
    Keys already present (other than UNSET ones) are kept as they are.
    """
    merged = dict(state or {})
    for key, default in default_state().items():
        if merged.get(key, UNSET) is UNSET:
            merged[key] = default
    return merged


class FormReducer:
    """
    The transition function with its two collaborators bound:
    a condition evaluator and a diagnostic sink.
    """

    def __init__(
        self,
        evaluate_conditions: ConditionEvaluator = passthrough_conditions,
        diagnostic_sink: DiagnosticSink = log_diagnostic,
    ) -> None:
        self.evaluate_conditions = evaluate_conditions
        self.diagnostic_sink = diagnostic_sink

    def __call__(self, state: Mapping[str, Any] | None, action: Any) -> Any:
        return self.reduce(state, action)

    def reduce(self, state: Mapping[str, Any] | None, action: Any) -> Any:
        """
        Apply one action to state and return the next state.
        Accepts action models or raw mappings with a `kind` key.
        """
        action = parse_action(action)
        logger.debug("reduce: %s", action.kind)

        if isinstance(action, InitAction):
            return self._handle_init(state, action)
        snap = state if state is not None else {}
        if isinstance(action, ChangeModelAction):
            return self._handle_change_model(snap, action)
        if isinstance(action, ChangeValueAction):
            return self._handle_change_value(snap, action)
        if isinstance(action, ValidationResolvedAction):
            return self._handle_validation_resolved(snap, action)
        if isinstance(action, UnknownAction):
            return self._handle_unknown(state, action)
        assert_never(action)

    def replay(self, actions: Iterable[Any], state: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """
        Rebuild a state from scratch: INIT, then every action in order.
        replay([a1, a2]) == reduce(reduce(reduce(state, INIT), a1), a2)
        """
        current = self.reduce(state, init())
        for action in actions:
            current = self.reduce(current, action)
        return current

    # -----------------------------------------------------------------------
    # Handlers
    # -----------------------------------------------------------------------

    def _handle_init(self, state: Mapping[str, Any] | None, action: InitAction) -> dict[str, Any]:
        snap = dict(state or {})

        if snap.get(BASE_MODEL) is not None:
            # Re-init over existing data. The current value is dropped so it
            # can only come back through CHANGE_VALUE (and its sanitizing).
            current = snap.get(VALUE) or {}
            snap[MODEL] = self.evaluate_conditions(snap[BASE_MODEL], recursive_clean(current))
            snap[VALUE] = UNSET

        snap = initial_state(snap)
        snap[VALUE] = ensure_frozen(snap[VALUE])
        return snap

    def _handle_change_model(self, state: Mapping[str, Any], action: ChangeModelAction) -> dict[str, Any]:
        return {
            **state,
            BASE_MODEL: action.model,
            MODEL: self.evaluate_conditions(action.model, state.get(VALUE)),
        }

    def _handle_change_value(self, state: Mapping[str, Any], action: ChangeValueAction) -> dict[str, Any]:
        if action.bunsen_id is None:
            cleaned = recursive_clean(action.value)
            new_value = ensure_frozen(cleaned if cleaned is not None else {})
        else:
            new_value = ensure_frozen(state.get(VALUE))
            if _clears_field(action.value):
                new_value = unset_in(new_value, action.bunsen_id)
            else:
                new_value = set_in(new_value, action.bunsen_id, action.value)

        model = derive_model(self.evaluate_conditions, state.get(BASE_MODEL), new_value, state.get(MODEL))

        return {
            **state,
            VALUE: new_value,
            MODEL: model,
        }

    def _handle_validation_resolved(
        self, state: Mapping[str, Any], action: ValidationResolvedAction
    ) -> dict[str, Any]:
        return {
            **state,
            VALIDATION_RESULT: action.validation_result,
            ERRORS: action.errors,
        }

    def _handle_unknown(self, state: Any, action: UnknownAction) -> Any:
        self.diagnostic_sink(
            Diagnostic(
                code="UNKNOWN_ACTION",
                message=f"Do not recognize action {action.kind}",
                details={"kind": action.kind},
            )
        )
        return state


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _clears_field(value: Any) -> bool:
    """None, "" and empty lists remove a field instead of storing an empty value."""
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, Sequence) and not isinstance(value, bytes | bytearray):
        return len(value) == 0
    return False


# ---------------------------------------------------------------------------
# Module-level default reducer
# ---------------------------------------------------------------------------

_default_reducer = FormReducer()


def reduce(state: Mapping[str, Any] | None, action: Any) -> Any:
    """Apply one action with the pass-through evaluator and the logging sink."""
    return _default_reducer.reduce(state, action)


def replay(actions: Iterable[Any], state: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Rebuild a state from scratch with the default reducer."""
    return _default_reducer.replay(actions, state)


def state_to_plain(state: Mapping[str, Any]) -> dict[str, Any]:
    """Thaw every frozen part of state into plain dicts and lists, e.g. for json.dumps."""
    return {key: to_plain(value) for key, value in state.items()}

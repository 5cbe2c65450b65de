"""
formstate — pure state transitions for a form-data model.

Components:
  immutable_utils  — path-addressed set / unset on frozen value trees
  sanitize         — recursive pruning of empty leaves and containers
  conditions       — condition-evaluator seam and the model stability gate
  actions          — the closed action vocabulary and its creators
  reducer          — (state, action) → state  (pure, deterministic)
"""

from formstate.actions import (
    CHANGE_MODEL,
    CHANGE_VALUE,
    INIT,
    VALIDATION_RESOLVED,
    change_model,
    change_value,
    init,
    parse_action,
    validation_resolved,
)
from formstate.conditions import ConditionEvaluator, passthrough_conditions, structurally_equal
from formstate.diagnostics import CollectingSink, configure_logging, log_diagnostic, null_sink
from formstate.errors import FormStateError, InvalidPathError
from formstate.immutable_utils import get_in, set_in, unset_in
from formstate.reducer import FormReducer, initial_state, reduce, replay, state_to_plain
from formstate.sanitize import is_droppable, recursive_clean
from formstate.types import UNSET, Diagnostic

__all__ = [
    "INIT",
    "CHANGE_MODEL",
    "CHANGE_VALUE",
    "VALIDATION_RESOLVED",
    "init",
    "change_model",
    "change_value",
    "validation_resolved",
    "parse_action",
    "FormReducer",
    "reduce",
    "replay",
    "initial_state",
    "state_to_plain",
    "recursive_clean",
    "is_droppable",
    "get_in",
    "set_in",
    "unset_in",
    "ConditionEvaluator",
    "passthrough_conditions",
    "structurally_equal",
    "Diagnostic",
    "CollectingSink",
    "log_diagnostic",
    "null_sink",
    "configure_logging",
    "FormStateError",
    "InvalidPathError",
    "UNSET",
]

"""
formstate test configuration.

Shared fixtures: a base model with one conditional branch, a deterministic
evaluator that resolves it, and a reducer wired to a collecting sink.
"""

import copy

import pytest

from formstate.diagnostics import CollectingSink
from formstate.reducer import FormReducer

BASE_MODEL = {
    "type": "object",
    "properties": {
        "name": {"type": "string"},
        "kind": {"type": "string", "enum": ["person", "company"]},
        "age": {"type": "number"},
    },
    "conditions": [
        {"if": {"kind": "company"}, "then": {"properties": {"vat": {"type": "string"}}}},
    ],
}


def evaluate_conditions(base_model, value):
    """
    Minimal deterministic evaluator for tests: merges each `then` block whose
    `if` fields all match the value. Always returns a fresh object.
    """
    model = copy.deepcopy(dict(base_model or {}))
    conditions = model.pop("conditions", [])
    value = value or {}
    for condition in conditions:
        if all(value.get(key) == expected for key, expected in condition["if"].items()):
            model.setdefault("properties", {}).update(copy.deepcopy(condition["then"]["properties"]))
    return model


class RecordingEvaluator:
    """Wraps evaluate_conditions and records every call."""

    def __init__(self):
        self.calls = []

    def __call__(self, base_model, value):
        self.calls.append((base_model, value))
        return evaluate_conditions(base_model, value)


@pytest.fixture
def base_model():
    return copy.deepcopy(BASE_MODEL)


@pytest.fixture
def sink():
    return CollectingSink()


@pytest.fixture
def evaluator():
    return RecordingEvaluator()


@pytest.fixture
def reducer(evaluator, sink):
    return FormReducer(evaluate_conditions=evaluator, diagnostic_sink=sink)


@pytest.fixture
def ready(reducer, base_model):
    """An initialised state carrying the base model."""
    return reducer.reduce({"base_model": base_model}, {"kind": "@@INIT"})

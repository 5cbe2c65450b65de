"""
formstate — Value Sanitizer Tests

Covers:
  - is_droppable truth table per value kind
  - recursive_clean on mappings, sequences and frozen trees
  - Booleans and zero are never dropped
  - Containers left empty by cleaning are dropped too (idempotence)
  - Sequences are compacted
"""

import datetime
from decimal import Decimal

import pytest
from pyrsistent import freeze, pmap, pset, pvector

from formstate.sanitize import is_droppable, recursive_clean
from formstate.types import UNSET


class TestIsDroppable:
    @pytest.mark.parametrize("value", [None, UNSET, "", b"", {}, [], (), set(), pmap(), pvector(), pset()])
    def test_empty_values_are_droppable(self, value):
        assert is_droppable(value)

    @pytest.mark.parametrize(
        "value",
        [False, True, 0, 0.0, -1, 3.5, Decimal("0"), "x", {"a": 1}, [None], ("a",), {1},
         datetime.date(2024, 1, 1), object()],
    )
    def test_informative_values_are_kept(self, value):
        assert not is_droppable(value)


class TestRecursiveClean:
    def test_documented_example(self):
        assert recursive_clean({"a": {}, "b": 1, "c": False, "d": None}) == {"b": 1, "c": False}

    def test_zero_and_false_survive_at_depth(self):
        value = {"outer": {"count": 0, "flag": False, "ratio": 0.0, "name": ""}}
        assert recursive_clean(value) == {"outer": {"count": 0, "flag": False, "ratio": 0.0}}

    def test_sequences_are_compacted(self):
        assert recursive_clean({"tags": ["a", None, "", "b", [], {}]}) == {"tags": ["a", "b"]}

    def test_nested_empties_are_pruned_upwards(self):
        assert recursive_clean({"a": {"b": {"c": None}}, "keep": 1}) == {"keep": 1}

    def test_list_of_mappings(self):
        value = [{"name": "Ada", "nick": ""}, {"nick": None}, {"age": 0}]
        assert recursive_clean(value) == [{"name": "Ada"}, {"age": 0}]

    def test_frozen_input_returns_plain_output(self):
        value = freeze({"a": [1, None], "b": {"c": ""}})
        cleaned = recursive_clean(value)
        assert cleaned == {"a": [1]}
        assert type(cleaned) is dict
        assert type(cleaned["a"]) is list

    def test_tuples_become_lists(self):
        assert recursive_clean({"pair": (1, None, 2)}) == {"pair": [1, 2]}

    @pytest.mark.parametrize("scalar", [None, 0, False, "text", 4.2])
    def test_scalars_pass_through(self, scalar):
        assert recursive_clean(scalar) == scalar

    def test_strings_are_not_split(self):
        assert recursive_clean({"name": "Ada"}) == {"name": "Ada"}

    def test_does_not_modify_input(self):
        value = {"a": {"b": None}, "c": [None, 1]}
        recursive_clean(value)
        assert value == {"a": {"b": None}, "c": [None, 1]}

    @pytest.mark.parametrize(
        "value",
        [
            {"a": {"b": {"c": None}}, "d": [[], [None], [0]]},
            [{"x": ""}, {"y": [{}]}, False],
            {"n": {"m": {"k": [None, {"z": ""}]}}, "t": True},
        ],
    )
    def test_idempotent(self, value):
        once = recursive_clean(value)
        assert recursive_clean(once) == once

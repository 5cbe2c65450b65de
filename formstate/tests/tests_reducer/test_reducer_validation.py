"""
formstate Reducer — VALIDATION_RESOLVED Tests

Covers:
  - validation_result and errors are replaced wholesale, never merged
  - Payload shape is not checked
  - Every other field passes through
"""

from formstate.actions import validation_resolved


class TestValidationResolved:
    def test_replaces_payload(self, reducer, ready):
        result = {"warnings": [{"path": "name", "message": "short"}], "errors": []}
        errors = {"age": "must be positive"}
        state = reducer.reduce(ready, validation_resolved(result, errors))
        assert state["validation_result"] is result
        assert state["errors"] is errors

    def test_no_merge_with_previous_errors(self, reducer, ready):
        s1 = reducer.reduce(ready, validation_resolved({"warnings": [], "errors": ["a"]}, {"name": "required"}))
        s2 = reducer.reduce(s1, validation_resolved({"warnings": [], "errors": []}, {"age": "too low"}))
        assert s2["errors"] == {"age": "too low"}
        assert s2["validation_result"] == {"warnings": [], "errors": []}

    def test_payload_shape_is_not_checked(self, reducer, ready):
        state = reducer.reduce(ready, {"kind": "VALIDATION_RESOLVED", "validationResult": "odd", "errors": 7})
        assert state["validation_result"] == "odd"
        assert state["errors"] == 7

    def test_other_fields_pass_through(self, reducer, ready):
        ready = {**ready, "ui_theme": "dark"}
        state = reducer.reduce(ready, validation_resolved({"warnings": [], "errors": []}, {}))
        assert state["value"] is ready["value"]
        assert state["model"] is ready["model"]
        assert state["base_model"] is ready["base_model"]
        assert state["ui_theme"] == "dark"

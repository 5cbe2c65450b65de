"""
formstate — Action vocabulary

The closed set of actions the reducer understands, as pydantic models
discriminated on `kind`, plus creator functions for building them.

Payload fields are deliberately loose (Any, with defaults): the reducer
does not validate payload shape, so parsing a known kind never fails.
Anything with an unrecognised kind parses to UnknownAction.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from formstate.config import settings

# ---------------------------------------------------------------------------
# Kinds
# ---------------------------------------------------------------------------

INIT = "@@INIT"
LEGACY_INIT = "@@redux/INIT"
CHANGE_MODEL = "CHANGE_MODEL"
CHANGE_VALUE = "CHANGE_VALUE"
VALIDATION_RESOLVED = "VALIDATION_RESOLVED"

ACTION_KINDS: set[str] = {INIT, CHANGE_MODEL, CHANGE_VALUE, VALIDATION_RESOLVED}


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class _Action(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, arbitrary_types_allowed=True)


class InitAction(_Action):
    """Bootstrap or re-initialise the state."""

    kind: Literal["@@INIT"] = INIT


class ChangeModelAction(_Action):
    """Replace the author-supplied base model."""

    kind: Literal["CHANGE_MODEL"] = CHANGE_MODEL
    model: Any = None


class ChangeValueAction(_Action):
    """
    Change the form value. With bunsen_id=None the whole value is replaced;
    otherwise only the node at that path is set or cleared.
    """

    kind: Literal["CHANGE_VALUE"] = CHANGE_VALUE
    value: Any = None
    bunsen_id: Any = Field(default=None, alias="bunsenId")


class ValidationResolvedAction(_Action):
    """Publish the outcome of a validation run."""

    kind: Literal["VALIDATION_RESOLVED"] = VALIDATION_RESOLVED
    validation_result: Any = Field(default=None, alias="validationResult")
    errors: Any = None


class UnknownAction(_Action):
    """Any action outside the vocabulary. Carries the raw payload for diagnostics."""

    kind: Any = None
    payload: dict[Any, Any] = Field(default_factory=dict)


KnownAction = Annotated[
    InitAction | ChangeModelAction | ChangeValueAction | ValidationResolvedAction,
    Field(discriminator="kind"),
]

Action = InitAction | ChangeModelAction | ChangeValueAction | ValidationResolvedAction | UnknownAction

_ACTION_TYPES = (InitAction, ChangeModelAction, ChangeValueAction, ValidationResolvedAction, UnknownAction)

_known_adapter: TypeAdapter[Any] = TypeAdapter(KnownAction)


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def parse_action(raw: Any) -> Action:
    """
    Turn an action model or a raw mapping into a typed action.

    Mappings without a recognised `kind` (or non-mappings) become
    UnknownAction; they are never rejected here.
    """
    if isinstance(raw, _ACTION_TYPES):
        return raw

    if not isinstance(raw, Mapping):
        return UnknownAction(kind=None, payload={"raw": raw})

    kind = raw.get("kind")
    if kind == LEGACY_INIT and settings.ACCEPT_LEGACY_INIT:
        return InitAction()
    if not isinstance(kind, str) or kind not in ACTION_KINDS:
        return UnknownAction(kind=kind, payload=dict(raw))

    return _known_adapter.validate_python(dict(raw))


# ---------------------------------------------------------------------------
# Creators
# ---------------------------------------------------------------------------


def init() -> InitAction:
    return InitAction()


def change_model(model: Any) -> ChangeModelAction:
    return ChangeModelAction(model=model)


def change_value(bunsen_id: str | None, value: Any) -> ChangeValueAction:
    """Build a CHANGE_VALUE action. bunsen_id=None replaces the whole value."""
    return ChangeValueAction(bunsen_id=bunsen_id, value=value)


def validation_resolved(validation_result: Any, errors: Any) -> ValidationResolvedAction:
    return ValidationResolvedAction(validation_result=validation_result, errors=errors)

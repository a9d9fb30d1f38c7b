"""Form and field state models. FormState is mutated in place by the orchestrator only."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from regform.domain.fields import FieldName, FormData
from regform.domain.phases import FieldPhase


class FieldState(BaseModel):
    """State for one field: current value, focus history, and last computed error."""

    field_name: FieldName
    value: Any = None
    phase: FieldPhase = FieldPhase.UNTOUCHED
    touched: bool = False
    has_been_focused: bool = False
    error: list[str] | None = Field(default=None, description="Failure messages in rule order, or None")

    @property
    def has_error(self) -> bool:
        return bool(self.error)


class FormState(BaseModel):
    """Every field's state, keyed by FieldName."""

    fields: dict[FieldName, FieldState] = Field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        """True iff no field currently holds an error."""
        return not any(fs.has_error for fs in self.fields.values())

    def values(self) -> FormData:
        return FormData.from_field_map({name: fs.value for name, fs in self.fields.items()})

    def errors(self) -> dict[FieldName, list[str]]:
        return {name: list(fs.error) for name, fs in self.fields.items() if fs.error}


def initial_form_state(defaults: FormData) -> FormState:
    return FormState(
        fields={
            name: FieldState(field_name=name, value=value)
            for name, value in defaults.as_field_map().items()
        }
    )


class FormSnapshot(BaseModel):
    """Read-only projection for rendering."""

    model_config = ConfigDict(frozen=True)

    values: FormData
    touched: dict[FieldName, bool]
    errors: dict[FieldName, tuple[str, ...]] = Field(
        default_factory=dict, description="All computed errors, including untouched fields"
    )
    is_valid: bool = True

    @property
    def visible_errors(self) -> dict[FieldName, tuple[str, ...]]:
        """Errors eligible for display: touched fields only."""
        return {name: msgs for name, msgs in self.errors.items() if self.touched.get(name)}


class SubmitResult(BaseModel):
    """Outcome of submit: values on success, the full error map on failure."""

    model_config = ConfigDict(frozen=True)

    ok: bool
    data: FormData | None = None
    errors: dict[FieldName, list[str]] = Field(default_factory=dict)

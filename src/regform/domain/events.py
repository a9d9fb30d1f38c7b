"""Interaction events delivered by the UI layer."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, field_validator

from regform.domain.fields import FieldName, coerce_field


class _FieldEvent(BaseModel):
    model_config = ConfigDict(frozen=True)

    field: FieldName

    @field_validator("field", mode="plain")
    @classmethod
    def known_field(cls, v: Any) -> FieldName:
        return coerce_field(v)


class ValueChanged(_FieldEvent):
    kind: Literal["value_changed"] = "value_changed"
    value: Any = None


class FocusGained(_FieldEvent):
    kind: Literal["focus_gained"] = "focus_gained"


class FocusLost(_FieldEvent):
    kind: Literal["focus_lost"] = "focus_lost"


class SubmitRequested(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["submit_requested"] = "submit_requested"


FormEvent = ValueChanged | FocusGained | FocusLost | SubmitRequested

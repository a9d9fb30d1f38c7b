"""Pydantic models for form configuration. Central contract for IDE and validation."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, model_validator

from regform.domain.fields import FieldName


# --- Validation policy ---

ValidationTrigger = Literal["on_blur", "live"]
ErrorDisplay = Literal["joined", "first"]


# --- Messages ---


class MessagesConfig(BaseModel):
    """Error messages reported by the registration rules."""

    not_blank: str = Field(default="must be not blank", min_length=1)
    invalid_email: str = Field(default="must be valid email address", min_length=1)
    invalid_phone: str = Field(default="must be valid phone number", min_length=1)
    not_selected: str = Field(default="must be selected", min_length=1)


# --- Fields ---


class FieldConfig(BaseModel):
    """Display settings for one form field."""

    name: FieldName = Field(..., description="One of the registration field identifiers")
    label: str = Field(..., description="Label shown by the terminal form")


DEFAULT_FIELDS: list[FieldConfig] = [
    FieldConfig(name=FieldName.FIRST_NAME, label="First name"),
    FieldConfig(name=FieldName.LAST_NAME, label="Last name"),
    FieldConfig(name=FieldName.EMAIL, label="Email"),
    FieldConfig(name=FieldName.MOBILE_NUMBER, label="Mobile number"),
    FieldConfig(name=FieldName.TITLE, label="Title"),
    FieldConfig(name=FieldName.DEVELOPER, label="Are you a developer?"),
]


# --- Top-level form config ---


class FormConfig(BaseModel):
    """Full form configuration loaded from YAML."""

    name: str = Field(default="Registration", description="Form display name")
    validation_trigger: ValidationTrigger = Field(
        default="on_blur",
        description="on_blur validates on focus loss and submit; live also revalidates touched fields on every change",
    )
    error_display: ErrorDisplay = Field(
        default="joined",
        description="joined shows all messages; first shows only the first failing rule",
    )
    error_separator: str = Field(default=", ")
    success_message: str = Field(default="Form submitted successfully")
    messages: MessagesConfig = Field(default_factory=MessagesConfig)
    fields: list[FieldConfig] = Field(default_factory=lambda: list(DEFAULT_FIELDS))

    @model_validator(mode="after")
    def fields_unique(self) -> FormConfig:
        names = [f.name for f in self.fields]
        if len(names) != len(set(names)):
            raise ValueError("fields must not repeat a field name")
        return self

    def label_for(self, field: FieldName) -> str:
        for f in self.fields:
            if f.name == field:
                return f.label
        return field.value

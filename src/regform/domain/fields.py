"""Field identifiers and the registration form data model."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from regform.domain.errors import InvalidFieldReference


class FieldName(str, Enum):
    """Closed set of registration form fields, in display order."""

    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"
    EMAIL = "email"
    MOBILE_NUMBER = "mobileNumber"
    TITLE = "title"
    DEVELOPER = "developer"


class Title(str, Enum):
    MR = "Mr"
    MRS = "Mrs"
    MISS = "Miss"
    DR = "Dr"


# FieldName -> FormData attribute
_ATTRS: dict[FieldName, str] = {
    FieldName.FIRST_NAME: "first_name",
    FieldName.LAST_NAME: "last_name",
    FieldName.EMAIL: "email",
    FieldName.MOBILE_NUMBER: "mobile_number",
    FieldName.TITLE: "title",
    FieldName.DEVELOPER: "developer",
}


class FormData(BaseModel):
    """Submitted values. Defaults are the form's initial state."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    first_name: str = Field(default="", alias="firstName")
    last_name: str = Field(default="", alias="lastName")
    email: str = ""
    mobile_number: str = Field(default="", alias="mobileNumber")
    title: Title | None = None
    developer: bool | None = None

    def get(self, field: FieldName) -> Any:
        return getattr(self, _ATTRS[field])

    def as_field_map(self) -> dict[FieldName, Any]:
        return {f: self.get(f) for f in FieldName}

    @classmethod
    def from_field_map(cls, values: dict[FieldName, Any]) -> FormData:
        return cls.model_validate({_ATTRS[f]: v for f, v in values.items()})


def coerce_value(field: FieldName, value: Any) -> Any:
    """Validate value against the field's type, e.g. "Mr" -> Title.MR. Raises pydantic.ValidationError."""
    return FormData.model_validate({_ATTRS[field]: value}).get(field)


def coerce_field(field: FieldName | str) -> FieldName:
    """Map a string key to FieldName. Unknown keys raise InvalidFieldReference."""
    if isinstance(field, FieldName):
        return field
    try:
        return FieldName(field)
    except ValueError:
        raise InvalidFieldReference(field) from None

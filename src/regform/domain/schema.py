"""Registration form schema: the fixed FieldName -> Validator mapping."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from regform.config.models import MessagesConfig
from regform.domain.errors import ConfigurationError
from regform.domain.fields import FieldName
from regform.domain.rules import Rule, email, min_length, not_null, phone_number
from regform.domain.validator import Validator, compile_rules


def registration_rules(messages: MessagesConfig | None = None) -> dict[FieldName, list[Rule]]:
    """Rule lists per field, in evaluation order."""
    m = messages or MessagesConfig()
    return {
        FieldName.FIRST_NAME: [min_length(1, m.not_blank)],
        FieldName.LAST_NAME: [min_length(1, m.not_blank)],
        FieldName.EMAIL: [min_length(1, m.not_blank), email(m.invalid_email)],
        FieldName.MOBILE_NUMBER: [min_length(1, m.not_blank), phone_number(m.invalid_phone)],
        FieldName.TITLE: [not_null(m.not_selected)],
        FieldName.DEVELOPER: [not_null(m.not_selected)],
    }


def compile_schema(rules: Mapping[FieldName | str, Sequence[Rule]]) -> dict[FieldName, Validator]:
    """
    Compile one validator per field. The schema must cover exactly the known field set.
    Raises ConfigurationError otherwise.
    """
    compiled: dict[FieldName, Validator] = {}
    for key, field_rules in rules.items():
        try:
            name = FieldName(key)
        except ValueError:
            raise ConfigurationError(f"Schema names unknown field: {key!r}") from None
        compiled[name] = compile_rules(field_rules)
    missing = [f.value for f in FieldName if f not in compiled]
    if missing:
        raise ConfigurationError(f"Schema is missing fields: {', '.join(missing)}")
    return compiled


def build_registration_validators(messages: MessagesConfig | None = None) -> dict[FieldName, Validator]:
    return compile_schema(registration_rules(messages))

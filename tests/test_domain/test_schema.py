"""Registration schema: rule sets per field and schema completeness."""

from __future__ import annotations

import pytest

from regform.config.models import MessagesConfig
from regform.domain.errors import ConfigurationError
from regform.domain.fields import FieldName, Title
from regform.domain.rules import min_length
from regform.domain.schema import build_registration_validators, compile_schema, registration_rules
from regform.domain.validator import validate


def test_schema_covers_every_field() -> None:
    validators = build_registration_validators()
    assert set(validators) == set(FieldName)


def test_title_and_developer_must_be_selected() -> None:
    validators = build_registration_validators()
    assert list(validate(validators[FieldName.TITLE], None).messages) == ["must be selected"]
    assert list(validate(validators[FieldName.DEVELOPER], None).messages) == ["must be selected"]
    assert validate(validators[FieldName.TITLE], Title.MR).is_valid
    assert validate(validators[FieldName.DEVELOPER], False).is_valid


def test_names_require_non_empty() -> None:
    validators = build_registration_validators()
    assert list(validate(validators[FieldName.FIRST_NAME], "").messages) == ["must be not blank"]
    assert validate(validators[FieldName.LAST_NAME], "Kim").is_valid


def test_custom_messages_flow_into_rules() -> None:
    validators = build_registration_validators(MessagesConfig(invalid_email="bad email"))
    assert list(validate(validators[FieldName.EMAIL], "nope").messages) == ["bad email"]


def test_missing_field_is_configuration_error() -> None:
    rules = registration_rules()
    del rules[FieldName.DEVELOPER]
    with pytest.raises(ConfigurationError, match="developer"):
        compile_schema(rules)


def test_unknown_field_is_configuration_error() -> None:
    rules: dict = dict(registration_rules())
    rules["nickname"] = [min_length(1, "x")]
    with pytest.raises(ConfigurationError, match="nickname"):
        compile_schema(rules)


def test_string_keys_are_accepted() -> None:
    rules = {name.value: r for name, r in registration_rules().items()}
    assert set(compile_schema(rules)) == set(FieldName)

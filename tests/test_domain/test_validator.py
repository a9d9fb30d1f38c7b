"""Validator: compile checks, all-rules accumulation, determinism."""

from __future__ import annotations

import pytest

from regform.domain.errors import ConfigurationError
from regform.domain.rules import Rule, email, matches_pattern, min_length, not_null, phone_number
from regform.domain.validator import ValidationOutcome, compile_rules, validate


def _email_validator():
    return compile_rules([min_length(1, "must be not blank"), email("must be valid email address")])


def _phone_validator():
    return compile_rules([min_length(1, "must be not blank"), phone_number("must be valid phone number")])


def test_email_not_an_email_reports_pattern_only() -> None:
    outcome = validate(_email_validator(), "not-an-email")
    assert outcome.is_valid is False
    assert list(outcome.messages) == ["must be valid email address"]


def test_empty_mobile_number_reports_both_in_rule_order() -> None:
    outcome = validate(_phone_validator(), "")
    assert list(outcome.messages) == ["must be not blank", "must be valid phone number"]


def test_valid_mobile_number() -> None:
    outcome = validate(_phone_validator(), "017-1234-5678")
    assert outcome.is_valid is True
    assert outcome == ValidationOutcome.valid()


def test_null_selection_is_invalid() -> None:
    outcome = validate(compile_rules([not_null("must be selected")]), None)
    assert list(outcome.messages) == ["must be selected"]


def test_no_short_circuit_collects_every_failure() -> None:
    v = compile_rules(
        [
            min_length(5, "too short"),
            matches_pattern(r"\d+", "digits only"),
            min_length(1, "blank"),
            matches_pattern(r"[a-z]+", "lowercase only"),
        ]
    )
    outcome = validate(v, "ab")
    assert list(outcome.messages) == ["too short", "digits only"]


def test_validate_is_deterministic() -> None:
    v = _phone_validator()
    for value in ["", "abc", "010-1234-5678"]:
        assert validate(v, value) == validate(v, value)


def test_empty_rule_list_is_always_valid() -> None:
    assert validate(compile_rules([]), None).is_valid


def test_outcome_is_falsy_when_invalid() -> None:
    assert not validate(_email_validator(), "")
    assert validate(_email_validator(), "a@b.io")


def test_invalid_outcome_requires_messages() -> None:
    with pytest.raises(ValueError):
        ValidationOutcome.invalid([])


def test_compile_rejects_missing_message() -> None:
    with pytest.raises(ConfigurationError, match="no message"):
        compile_rules([Rule(predicate=lambda v: True)])


def test_compile_rejects_empty_message() -> None:
    with pytest.raises(ConfigurationError):
        compile_rules([Rule(predicate=lambda v: True, message="")])


def test_compile_rejects_message_factory_returning_none() -> None:
    with pytest.raises(ConfigurationError):
        compile_rules([Rule(predicate=lambda v: True, message=lambda: None)])


def test_compile_rejects_non_rules() -> None:
    with pytest.raises(ConfigurationError):
        compile_rules([lambda v: True])  # type: ignore[list-item]


def test_compile_rejects_non_sequence() -> None:
    with pytest.raises(ConfigurationError):
        compile_rules(min_length(1, "x"))  # type: ignore[arg-type]

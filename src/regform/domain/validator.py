"""Compiled field validators and their outcomes. Pure: same value in, same outcome out."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from regform.domain.errors import ConfigurationError
from regform.domain.rules import Rule


class ValidationOutcome(BaseModel):
    """Valid when messages is empty; otherwise Invalid with messages in rule order."""

    model_config = ConfigDict(frozen=True)

    messages: tuple[str, ...] = Field(default_factory=tuple)

    @property
    def is_valid(self) -> bool:
        return not self.messages

    def __bool__(self) -> bool:
        return self.is_valid

    @classmethod
    def valid(cls) -> ValidationOutcome:
        return cls()

    @classmethod
    def invalid(cls, messages: Sequence[str]) -> ValidationOutcome:
        if not messages:
            raise ValueError("Invalid outcome requires at least one message")
        return cls(messages=tuple(messages))


class Validator(BaseModel):
    """Immutable, ordered rule set for one field. Build with compile_rules."""

    model_config = ConfigDict(frozen=True)

    rules: tuple[Rule, ...]


def compile_rules(rules: Sequence[Rule]) -> Validator:
    """
    Check every rule and freeze the list into a Validator.
    Raises ConfigurationError for anything that is not a Rule or a rule without a usable message.
    """
    if isinstance(rules, (str, bytes)) or not isinstance(rules, Sequence):
        raise ConfigurationError(f"Expected a sequence of rules, got {type(rules).__name__}")
    for i, rule in enumerate(rules):
        if not isinstance(rule, Rule):
            raise ConfigurationError(f"Rule {i} is not a Rule: {rule!r}")
        if rule.message is None:
            raise ConfigurationError(f"Rule {i} ({rule.kind}) has no message")
        # Raises ConfigurationError when the message is empty or its factory returns nothing
        rule.resolve_message()
    return Validator(rules=tuple(rules))


def validate(validator: Validator, value: Any) -> ValidationOutcome:
    """Run every rule in order (no short-circuit) and collect each failing rule's message."""
    messages = [rule.resolve_message() for rule in validator.rules if not rule.check(value)]
    if not messages:
        return ValidationOutcome.valid()
    return ValidationOutcome.invalid(messages)

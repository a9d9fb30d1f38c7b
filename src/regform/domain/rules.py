"""Built-in rules: pure predicates paired with an error message. No I/O."""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict

from regform.domain.errors import ConfigurationError

EMAIL_RE = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
PHONE_RE = re.compile(r"^01[0-9]-?[0-9]{3,4}-?[0-9]{4}$")

Message = str | Callable[[], str]


class Rule(BaseModel):
    """One predicate over a field value plus the message reported when it fails."""

    model_config = ConfigDict(frozen=True)

    kind: str = "custom"
    predicate: Callable[[Any], bool]
    message: Message | None = None

    def check(self, value: Any) -> bool:
        return bool(self.predicate(value))

    def resolve_message(self) -> str:
        msg = self.message() if callable(self.message) else self.message
        if not isinstance(msg, str) or not msg:
            raise ConfigurationError(f"Rule {self.kind!r} produced no message")
        return msg


def _text(value: Any) -> str:
    # Nullable string fields validate as empty
    return "" if value is None else str(value)


def min_length(n: int, message: Message) -> Rule:
    if n < 0:
        raise ConfigurationError(f"min_length expects n >= 0, got {n}")
    return Rule(kind="min_length", predicate=lambda v: len(_text(v)) >= n, message=message)


def not_blank(message: Message) -> Rule:
    return Rule(kind="not_blank", predicate=lambda v: bool(_text(v).strip()), message=message)


def matches_pattern(pattern: str | re.Pattern[str], message: Message) -> Rule:
    """Full-match the value's text against pattern."""
    if isinstance(pattern, str):
        try:
            pattern = re.compile(pattern)
        except re.error as e:
            raise ConfigurationError(f"Invalid pattern {pattern!r}: {e}") from e
    compiled = pattern
    return Rule(
        kind="matches_pattern",
        predicate=lambda v: compiled.fullmatch(_text(v)) is not None,
        message=message,
    )


def not_null(message: Message) -> Rule:
    return Rule(kind="not_null", predicate=lambda v: v is not None, message=message)


def email(message: Message) -> Rule:
    return matches_pattern(EMAIL_RE, message)


def phone_number(message: Message) -> Rule:
    return matches_pattern(PHONE_RE, message)

"""Exceptions for programmer and configuration errors. Validation failures are data, not exceptions."""

from __future__ import annotations


class FormError(Exception):
    """Base class for regform errors."""


class ConfigurationError(FormError):
    """Malformed rule, schema, or config. Raised at construction time only."""


class InvalidFieldReference(FormError, LookupError):
    """An event named a field outside the fixed registration field set."""

    def __init__(self, field: object) -> None:
        super().__init__(f"Unknown field: {field!r}")
        self.field = field

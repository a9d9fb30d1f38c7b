"""Configuration loading and validation."""

from regform.config.models import (
    FieldConfig,
    FormConfig,
    MessagesConfig,
)
from regform.config.loader import load_config

__all__ = [
    "FieldConfig",
    "FormConfig",
    "MessagesConfig",
    "load_config",
]

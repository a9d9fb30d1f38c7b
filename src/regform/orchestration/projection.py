"""Turn a snapshot into display strings per field."""

from __future__ import annotations

from regform.config.models import FormConfig
from regform.domain.fields import FieldName, FormData
from regform.domain.state import FormSnapshot


def render_errors(snapshot: FormSnapshot, config: FormConfig) -> dict[FieldName, str]:
    """One error line per touched field, following config.error_display."""
    out: dict[FieldName, str] = {}
    for name, messages in snapshot.visible_errors.items():
        if config.error_display == "first":
            out[name] = messages[0]
        else:
            out[name] = config.error_separator.join(messages)
    return out


def render_value(field: FieldName, values: FormData) -> str:
    """Text for a field's current value: enum names, Yes/No for the developer flag."""
    value = values.get(field)
    if value is None:
        return ""
    if field == FieldName.DEVELOPER:
        return "Yes" if value else "No"
    if field == FieldName.TITLE:
        return value.value
    return str(value)

"""Form orchestrator: decides when field validators run and owns aggregate form state."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog

from regform.config.models import FormConfig
from regform.domain.errors import ConfigurationError
from regform.domain.events import (
    FocusGained,
    FocusLost,
    FormEvent,
    SubmitRequested,
    ValueChanged,
)
from regform.domain.fields import FieldName, FormData, coerce_field, coerce_value
from regform.domain.phases import FocusSignal, next_phase, triggers_validation
from regform.domain.schema import build_registration_validators
from regform.domain.state import (
    FieldState,
    FormSnapshot,
    SubmitResult,
    initial_form_state,
)
from regform.domain.validator import ValidationOutcome, Validator, validate

logger = structlog.get_logger(__name__)


class FormOrchestrator:
    """One form session: config + compiled validators + mutable FormState. Handles one event at a time."""

    def __init__(
        self,
        config: FormConfig | None = None,
        validators: Mapping[FieldName, Validator] | None = None,
        defaults: FormData | None = None,
    ) -> None:
        self.config = config or FormConfig()
        if validators is None:
            validators = build_registration_validators(self.config.messages)
        missing = [f.value for f in FieldName if f not in validators]
        if missing:
            raise ConfigurationError(f"No validator for fields: {', '.join(missing)}")
        self._validators = dict(validators)
        self._defaults = defaults or FormData()
        self._state = initial_form_state(self._defaults)
        self._validating: set[FieldName] = set()

    @property
    def is_valid(self) -> bool:
        return self._state.is_valid

    def initialize(self, defaults: FormData | None = None) -> FormSnapshot:
        """Start over from defaults (or the ones given, which become the new reset target)."""
        if defaults is not None:
            self._defaults = defaults
        self._state = initial_form_state(self._defaults)
        logger.debug("form_initialized", form=self.config.name)
        return self.snapshot()

    def on_value_changed(self, field: FieldName | str, value: Any) -> None:
        """
        Store the new value. Errors and focus state are left alone; under the live policy a
        field that is already touched is revalidated.
        """
        fs = self._field(field)
        fs.value = coerce_value(fs.field_name, value)
        if self.config.validation_trigger == "live" and fs.touched:
            self.revalidate(fs.field_name)

    def on_focus_changed(self, field: FieldName | str, focused: bool) -> None:
        fs = self._field(field)
        signal = FocusSignal.GAINED if focused else FocusSignal.LOST
        validate_now = triggers_validation(signal, fs.has_been_focused)
        fs.phase = next_phase(fs.phase, signal, fs.has_been_focused)
        if focused:
            fs.has_been_focused = True
        elif validate_now:
            fs.touched = True
        logger.debug("focus_changed", field=fs.field_name.value, focused=focused, phase=fs.phase.value)
        if validate_now:
            self.revalidate(fs.field_name)

    def revalidate(self, field: FieldName | str) -> ValidationOutcome:
        """Run the field's validator on its current value and set or clear its error."""
        fs = self._field(field)
        name = fs.field_name
        if name in self._validating:
            raise RuntimeError(f"revalidate re-entered for field {name.value}")
        self._validating.add(name)
        try:
            outcome = validate(self._validators[name], fs.value)
        finally:
            self._validating.discard(name)
        fs.error = None if outcome.is_valid else list(outcome.messages)
        logger.debug("field_validated", field=name.value, valid=outcome.is_valid, errors=fs.error)
        return outcome

    def submit(self) -> SubmitResult:
        """
        Touch and revalidate every field. On success return a snapshot of the values and reset
        to defaults; otherwise return the full error map and keep the state.
        """
        for fs in self._state.fields.values():
            fs.phase = next_phase(fs.phase, FocusSignal.SUBMIT, fs.has_been_focused)
            fs.touched = True
        for name in FieldName:
            self.revalidate(name)

        if not self._state.is_valid:
            errors = self._state.errors()
            logger.info("form_submit_rejected", form=self.config.name, fields=[f.value for f in errors])
            return SubmitResult(ok=False, errors=errors)

        data = self._state.values()
        self._state = initial_form_state(self._defaults)
        logger.info("form_submitted", form=self.config.name)
        return SubmitResult(ok=True, data=data)

    def dispatch(self, event: FormEvent) -> SubmitResult | None:
        """Route one interaction event. Returns the SubmitResult for SubmitRequested, else None."""
        if isinstance(event, ValueChanged):
            self.on_value_changed(event.field, event.value)
        elif isinstance(event, FocusGained):
            self.on_focus_changed(event.field, True)
        elif isinstance(event, FocusLost):
            self.on_focus_changed(event.field, False)
        elif isinstance(event, SubmitRequested):
            return self.submit()
        else:
            raise TypeError(f"Unsupported event: {event!r}")
        return None

    def snapshot(self) -> FormSnapshot:
        """Read-only projection of the current state for rendering."""
        return FormSnapshot(
            values=self._state.values(),
            touched={name: fs.touched for name, fs in self._state.fields.items()},
            errors={name: tuple(fs.error) for name, fs in self._state.fields.items() if fs.error},
            is_valid=self._state.is_valid,
        )

    def field_state(self, field: FieldName | str) -> FieldState:
        """Copy of one field's state (e.g. for tests or debugging)."""
        return self._field(field).model_copy(deep=True)

    def _field(self, field: FieldName | str) -> FieldState:
        return self._state.fields[coerce_field(field)]

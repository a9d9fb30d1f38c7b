"""Per-field focus FSM: enum and pure transition function."""

from __future__ import annotations

from enum import Enum


class FieldPhase(str, Enum):
    """Focus lifecycle of one field."""

    UNTOUCHED = "untouched"
    FOCUSED = "focused"
    TOUCHED = "touched"


class FocusSignal(str, Enum):
    """Inputs that move a field through its phases."""

    GAINED = "gained"
    LOST = "lost"
    SUBMIT = "submit"


def next_phase(phase: FieldPhase, signal: FocusSignal, has_been_focused: bool) -> FieldPhase:
    """
    Pure transition: given current phase, the signal, and whether the field has ever been
    focused, return the next phase. Testable in isolation without an orchestrator.
    """
    if signal == FocusSignal.SUBMIT:
        return FieldPhase.TOUCHED

    if signal == FocusSignal.GAINED:
        return FieldPhase.FOCUSED

    if signal == FocusSignal.LOST:
        # Blur before any focus (initial render) is ignored
        if not has_been_focused:
            return phase
        return FieldPhase.TOUCHED

    return phase


def triggers_validation(signal: FocusSignal, has_been_focused: bool) -> bool:
    """True when the signal moves the field into TOUCHED and its validator must run."""
    if signal == FocusSignal.SUBMIT:
        return True
    return signal == FocusSignal.LOST and has_been_focused

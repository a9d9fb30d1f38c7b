"""Session store: Protocol + in-memory implementation."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from regform.orchestration.orchestrator import FormOrchestrator


@runtime_checkable
class SessionStore(Protocol):
    """Protocol for holding one form orchestrator per session."""

    def get(self, session_id: str) -> FormOrchestrator | None:
        """Return the session's orchestrator, or None if not found."""
        ...

    def set(self, session_id: str, orchestrator: FormOrchestrator) -> None:
        ...

    def delete(self, session_id: str) -> None:
        """Drop the session. Unknown ids are ignored."""
        ...


class InMemorySessionStore:
    """In-memory dict store. Suitable for single process; no persistence."""

    def __init__(self) -> None:
        self._store: dict[str, FormOrchestrator] = {}

    def get(self, session_id: str) -> FormOrchestrator | None:
        return self._store.get(session_id)

    def set(self, session_id: str, orchestrator: FormOrchestrator) -> None:
        self._store[session_id] = orchestrator

    def delete(self, session_id: str) -> None:
        self._store.pop(session_id, None)

    def __len__(self) -> int:
        return len(self._store)

"""Form runtime: manages multiple independent form sessions."""

from __future__ import annotations

import structlog

from regform.config.models import FormConfig
from regform.domain.events import FormEvent
from regform.domain.fields import FormData
from regform.domain.schema import build_registration_validators
from regform.domain.state import FormSnapshot, SubmitResult
from regform.infrastructure.session_store import SessionStore
from regform.orchestration.orchestrator import FormOrchestrator

logger = structlog.get_logger(__name__)


class FormRuntime:
    """Holds config + session store; creates one FormOrchestrator per session; routes by session_id."""

    def __init__(self, config: FormConfig, session_store: SessionStore) -> None:
        self.config = config
        self._store = session_store
        # Compiled once; validators are immutable and shared by all sessions
        self._validators = build_registration_validators(config.messages)

    def start_session(self, session_id: str, defaults: FormData | None = None) -> FormSnapshot:
        """
        Create the session if it does not exist yet and return its snapshot.
        An existing session is returned as is.
        """
        orchestrator = self._store.get(session_id)
        if orchestrator is None:
            orchestrator = FormOrchestrator(self.config, self._validators, defaults)
            self._store.set(session_id, orchestrator)
            logger.debug("session_started", session_id=session_id)
        return orchestrator.snapshot()

    def handle_event(self, session_id: str, event: FormEvent) -> SubmitResult | None:
        """
        Route an event to the session's orchestrator, starting the session if needed.
        Sessions are isolated by session_id.
        """
        self.start_session(session_id)
        return self._store.get(session_id).dispatch(event)

    def get_snapshot(self, session_id: str) -> FormSnapshot | None:
        orchestrator = self._store.get(session_id)
        return orchestrator.snapshot() if orchestrator is not None else None

    def end_session(self, session_id: str) -> None:
        """Discard the session's form state."""
        self._store.delete(session_id)
        logger.debug("session_ended", session_id=session_id)

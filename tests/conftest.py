"""Pytest fixtures: configs, orchestrators, runtime, filled-in form data."""

from __future__ import annotations

from pathlib import Path

import pytest

from regform.config.models import FormConfig
from regform.domain.fields import FieldName, FormData, Title
from regform.infrastructure.session_store import InMemorySessionStore
from regform.orchestration.orchestrator import FormOrchestrator
from regform.orchestration.runtime import FormRuntime


@pytest.fixture
def default_config() -> FormConfig:
    return FormConfig()


@pytest.fixture
def orchestrator(default_config: FormConfig) -> FormOrchestrator:
    """Orchestrator over the registration schema, starting from empty defaults."""
    return FormOrchestrator(default_config)


@pytest.fixture
def session_store() -> InMemorySessionStore:
    return InMemorySessionStore()


@pytest.fixture
def runtime(default_config: FormConfig, session_store: InMemorySessionStore) -> FormRuntime:
    return FormRuntime(default_config, session_store)


@pytest.fixture
def valid_values() -> dict[FieldName, object]:
    """One value per field that passes every registration rule."""
    return {
        FieldName.FIRST_NAME: "Alice",
        FieldName.LAST_NAME: "Kim",
        FieldName.EMAIL: "alice@example.com",
        FieldName.MOBILE_NUMBER: "010-1234-5678",
        FieldName.TITLE: Title.MISS,
        FieldName.DEVELOPER: True,
    }


@pytest.fixture
def filled_orchestrator(orchestrator: FormOrchestrator, valid_values: dict) -> FormOrchestrator:
    for field, value in valid_values.items():
        orchestrator.on_value_changed(field, value)
    return orchestrator


@pytest.fixture
def configs_dir() -> Path:
    return Path(__file__).resolve().parent.parent / "configs"


@pytest.fixture
def empty_form() -> FormData:
    return FormData()

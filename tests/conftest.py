"""Shared test fixtures."""

import random

import pytest

from fitness_tracker.config import Settings
from fitness_tracker.containers import AppContainer
from fitness_tracker.domain.profile import UnitSystem
from fitness_tracker.services.sessions import SessionService
from fitness_tracker.services.state_store import InMemoryStateStore


@pytest.fixture
def settings() -> Settings:
    return Settings(
        unit_system=UnitSystem.IMPERIAL,
        require_workout_calories=True,
        session_ttl_seconds=3600,
        quote_seed=7,
        environment="test",
    )


@pytest.fixture
def state_store(settings: Settings) -> InMemoryStateStore:
    return InMemoryStateStore(ttl_seconds=settings.session_ttl_seconds)


@pytest.fixture
def session_service(
    settings: Settings, state_store: InMemoryStateStore
) -> SessionService:
    return SessionService(
        store=state_store,
        unit_system=settings.unit_system,
        require_workout_calories=settings.require_workout_calories,
        rng=random.Random(settings.quote_seed),
    )


@pytest.fixture
def container(
    settings: Settings,
    state_store: InMemoryStateStore,
    session_service: SessionService,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        state_store=state_store,
        session_service=session_service,
    )

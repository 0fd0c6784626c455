"""Dependency container wiring for the application."""

import random
from dataclasses import dataclass

from fitness_tracker.config import Settings
from fitness_tracker.services.sessions import SessionService
from fitness_tracker.services.state_store import InMemoryStateStore, StateStore


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    state_store: StateStore
    session_service: SessionService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    state_store = InMemoryStateStore(ttl_seconds=resolved_settings.session_ttl_seconds)
    session_service = SessionService(
        store=state_store,
        unit_system=resolved_settings.unit_system,
        require_workout_calories=resolved_settings.require_workout_calories,
        rng=random.Random(resolved_settings.quote_seed),
    )
    return AppContainer(
        settings=resolved_settings,
        state_store=state_store,
        session_service=session_service,
    )

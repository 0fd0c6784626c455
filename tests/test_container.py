"""Tests for container wiring and settings."""

from fitness_tracker.config import Settings
from fitness_tracker.containers import build_container
from fitness_tracker.domain.profile import UnitSystem


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.session_service is not None
    assert container.session_service.store is container.state_store
    assert container.session_service.unit_system is UnitSystem.IMPERIAL


def test_seeded_containers_pick_the_same_quotes(settings) -> None:
    first = build_container(settings).session_service
    second = build_container(settings).session_service

    quotes_first = [first.create_session()[1].mood.quote for _ in range(5)]
    quotes_second = [second.create_session()[1].mood.quote for _ in range(5)]

    assert quotes_first == quotes_second


def test_settings_read_unit_system_from_env(monkeypatch) -> None:
    monkeypatch.setenv("UNIT_SYSTEM", "metric")
    monkeypatch.setenv("REQUIRE_WORKOUT_CALORIES", "false")

    settings = Settings()

    assert settings.unit_system is UnitSystem.METRIC
    assert settings.require_workout_calories is False

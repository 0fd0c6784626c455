"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from fitness_tracker.domain.profile import UnitSystem

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    unit_system: UnitSystem = UnitSystem.IMPERIAL
    require_workout_calories: bool = True
    session_ttl_seconds: int = 86400
    quote_seed: int | None = None
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

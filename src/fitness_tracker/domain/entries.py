"""Domain models for logged workouts and foods."""

from dataclasses import dataclass, field
from uuid import UUID, uuid4


@dataclass(frozen=True)
class WorkoutEntry:
    """A workout submitted by the user."""

    name: str
    sets: int
    reps: int
    calories_burned: int | None = None
    id: UUID = field(default_factory=uuid4)


@dataclass(frozen=True)
class FoodEntry:
    """A food submitted by the user."""

    name: str
    calories: int
    id: UUID = field(default_factory=uuid4)

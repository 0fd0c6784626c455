"""Goal and exercise domain models."""

from dataclasses import dataclass
from enum import Enum


class Goal(str, Enum):
    """Fitness goals a user can pick."""

    LOSE_WEIGHT = "Lose Weight"
    GAIN_WEIGHT = "Gain Weight"
    INCREASE_STRENGTH = "Increase Strength"
    GAIN_MUSCLE = "Gain Muscle"
    STAY_HEALTHY = "Stay Healthy"
    AESTHETIC = "Aesthetic / Look Better"


class MuscleGroup(str, Enum):
    """Muscle groups with exercise recommendations."""

    BICEPS = "Biceps"
    CHEST = "Chest"
    BACK = "Back"
    LEGS = "Legs"
    SHOULDERS = "Shoulders"


@dataclass(frozen=True)
class GoalSelection:
    """The user's chosen goal and free-text notes."""

    goal: Goal = Goal.LOSE_WEIGHT
    notes: str = ""


@dataclass(frozen=True)
class Recommendation:
    """Exercise ideas for a goal and a muscle group."""

    goal: Goal
    exercises: list[str]
    duration_advice: str
    muscle: MuscleGroup
    muscle_exercises: list[str]
    disclaimer: str | None = None

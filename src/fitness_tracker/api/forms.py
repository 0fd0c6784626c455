"""Pydantic models for form submissions."""

from pydantic import BaseModel

from fitness_tracker.domain.goals import Goal
from fitness_tracker.domain.motivation import Mood


class WorkoutForm(BaseModel):
    """Workout form fields as typed."""

    name: str = ""
    sets: str = ""
    reps: str = ""
    calories: str | None = None


class FoodForm(BaseModel):
    """Food form fields as typed."""

    name: str = ""
    calories: str = ""


class ProfileForm(BaseModel):
    """Profile fields as typed; fields for the other unit system are ignored."""

    name: str = ""
    age: str = ""
    weight: str = ""
    height_feet: str = ""
    height_inches: str = ""
    height_cm: str = ""


class GoalForm(BaseModel):
    """Goal picker and notes; omitted fields keep their current value."""

    goal: Goal | None = None
    notes: str | None = None


class QuoteRequest(BaseModel):
    """Mood picker; omitting the mood refreshes the quote for the current one."""

    mood: Mood | None = None

"""Mood and quote domain models."""

from dataclasses import dataclass
from enum import Enum


class Mood(str, Enum):
    """How the user feels today."""

    TIRED = "Tired"
    STRESSED = "Stressed"
    HAPPY = "Happy"
    SAD = "Sad"
    MOTIVATED = "Motivated"


@dataclass(frozen=True)
class MoodSelection:
    """Selected mood and the quote currently shown for it."""

    mood: Mood = Mood.TIRED
    quote: str | None = None

"""Domain models for derived metrics."""

from dataclasses import dataclass
from enum import Enum


class CalorieStatus(str, Enum):
    """Sign of the day's net calories."""

    SURPLUS = "surplus"
    DEFICIT = "deficit"
    MAINTENANCE = "maintenance"


class BmiCategory(str, Enum):
    """BMI bands, plus a category for a missing reading."""

    UNDERWEIGHT = "Underweight"
    NORMAL = "Normal"
    OVERWEIGHT = "Overweight"
    OBESE = "Obese"
    NOT_ENOUGH_DATA = "Not enough data"


@dataclass(frozen=True)
class CalorieSummary:
    """Calories in, out and net for a session."""

    calories_in: int
    calories_out: int
    net: int
    status: CalorieStatus


@dataclass(frozen=True)
class BmiReading:
    """BMI value, if computable, with its category."""

    value: float | None
    category: BmiCategory

"""Profile domain models."""

from dataclasses import dataclass
from enum import Enum


class UnitSystem(str, Enum):
    """Measurement convention used for profile input and BMI."""

    IMPERIAL = "imperial"
    METRIC = "metric"


@dataclass(frozen=True)
class ProfileInput:
    """Raw profile fields exactly as the user typed them.

    Imperial profiles read height from feet and inches and weight in pounds.
    Metric profiles read height in centimeters and weight in kilograms.
    """

    name: str = ""
    age_text: str = ""
    weight_text: str = ""
    height_feet_text: str = ""
    height_inches_text: str = ""
    height_cm_text: str = ""

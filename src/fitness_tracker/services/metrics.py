"""Derived metrics computed from logged entries and the profile.

Every function here is pure: the same inputs always give the same result, and
missing input yields ``None`` or a neutral category instead of an exception.
"""

import random
from collections.abc import Iterable, Mapping, Sequence

from fitness_tracker.domain.entries import FoodEntry, WorkoutEntry
from fitness_tracker.domain.metrics import (
    BmiCategory,
    BmiReading,
    CalorieStatus,
    CalorieSummary,
)
from fitness_tracker.domain.profile import ProfileInput, UnitSystem
from fitness_tracker.services.forms import parse_float

IMPERIAL_BMI_FACTOR = 703.0
INCHES_PER_FOOT = 12.0
CENTIMETERS_PER_METER = 100.0

UNDERWEIGHT_BELOW = 18.5
OVERWEIGHT_FROM = 25.0
OBESE_FROM = 30.0


def total_calories_in(foods: Iterable[FoodEntry]) -> int:
    """Sum calories over all logged foods."""
    return sum(food.calories for food in foods)


def total_calories_out(workouts: Iterable[WorkoutEntry]) -> int:
    """Sum calories burned over all workouts, counting a missing value as zero."""
    return sum(workout.calories_burned or 0 for workout in workouts)


def net_calories(calories_in: int, calories_out: int) -> int:
    return calories_in - calories_out


def calorie_status(net: int) -> CalorieStatus:
    """Classify net calories by sign."""
    if net > 0:
        return CalorieStatus.SURPLUS
    if net < 0:
        return CalorieStatus.DEFICIT
    return CalorieStatus.MAINTENANCE


def summarize_calories(
    foods: Iterable[FoodEntry], workouts: Iterable[WorkoutEntry]
) -> CalorieSummary:
    """Return calories in, out, net and the resulting status."""
    calories_in = total_calories_in(foods)
    calories_out = total_calories_out(workouts)
    net = net_calories(calories_in, calories_out)
    return CalorieSummary(
        calories_in=calories_in,
        calories_out=calories_out,
        net=net,
        status=calorie_status(net),
    )


def body_mass_index(
    weight: float | None,
    height: float | None,
    unit_system: UnitSystem = UnitSystem.IMPERIAL,
) -> float | None:
    """Compute BMI from weight and height in the unit system's units.

    Imperial expects pounds and inches; metric expects kilograms and meters.
    Returns None when either value is missing or height is not positive.
    """
    if weight is None or height is None or height <= 0:
        return None
    if unit_system is UnitSystem.METRIC:
        return weight / (height * height)
    return IMPERIAL_BMI_FACTOR * weight / (height * height)


def bmi_category(bmi: float | None) -> BmiCategory:
    """Bucket a BMI value into half-open bands."""
    if bmi is None:
        return BmiCategory.NOT_ENOUGH_DATA
    if bmi < UNDERWEIGHT_BELOW:
        return BmiCategory.UNDERWEIGHT
    if bmi < OVERWEIGHT_FROM:
        return BmiCategory.NORMAL
    if bmi < OBESE_FROM:
        return BmiCategory.OVERWEIGHT
    return BmiCategory.OBESE


def profile_height(profile: ProfileInput, unit_system: UnitSystem) -> float | None:
    """Return height in inches (imperial) or meters (metric) from raw fields."""
    if unit_system is UnitSystem.METRIC:
        centimeters = parse_float(profile.height_cm_text)
        if centimeters is None or centimeters <= 0:
            return None
        return centimeters / CENTIMETERS_PER_METER
    feet = parse_float(profile.height_feet_text)
    inches = parse_float(profile.height_inches_text)
    if feet is None or inches is None:
        return None
    total = feet * INCHES_PER_FOOT + inches
    return total if total > 0 else None


def profile_bmi(profile: ProfileInput, unit_system: UnitSystem) -> float | None:
    return body_mass_index(
        parse_float(profile.weight_text),
        profile_height(profile, unit_system),
        unit_system,
    )


def bmi_reading(profile: ProfileInput, unit_system: UnitSystem) -> BmiReading:
    """Return the BMI value and category for a raw profile."""
    value = profile_bmi(profile, unit_system)
    return BmiReading(value=value, category=bmi_category(value))


def pick_quote(
    mood: str,
    table: Mapping[str, Sequence[str]],
    rng: random.Random | None = None,
) -> str | None:
    """Pick a quote for the mood uniformly at random.

    Returns None when the mood has no quotes.
    """
    options = table.get(mood)
    if not options:
        return None
    chooser = rng or random.Random()
    return chooser.choice(options)

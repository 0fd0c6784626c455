"""Parsing and validation of raw form input."""

import math

from fitness_tracker.domain.entries import FoodEntry, WorkoutEntry


def _clean_number_text(text: str | None) -> str | None:
    """Strip a numeric field; None when blank or holding non-ASCII or '_' characters."""
    if text is None:
        return None
    cleaned = text.strip()
    if not cleaned or not cleaned.isascii() or "_" in cleaned:
        return None
    return cleaned


def parse_int(text: str | None) -> int | None:
    """Parse an integer field, returning None when it is blank or not a number."""
    cleaned = _clean_number_text(text)
    if cleaned is None:
        return None
    try:
        return int(cleaned)
    except ValueError:
        return None


def parse_float(text: str | None) -> float | None:
    """Parse a decimal field, returning None when it is blank, invalid or not finite."""
    cleaned = _clean_number_text(text)
    if cleaned is None:
        return None
    try:
        value = float(cleaned)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def _positive_int(text: str | None) -> int | None:
    value = parse_int(text)
    if value is None or value <= 0:
        return None
    return value


def build_workout(
    name: str,
    sets_text: str,
    reps_text: str,
    calories_text: str | None,
    *,
    require_calories: bool = True,
) -> WorkoutEntry | None:
    """Return a workout entry, or None when any required field is invalid."""
    if not name:
        return None
    sets = _positive_int(sets_text)
    reps = _positive_int(reps_text)
    if sets is None or reps is None:
        return None
    calories: int | None = None
    if require_calories or (calories_text and calories_text.strip()):
        calories = _positive_int(calories_text)
        if calories is None:
            return None
    return WorkoutEntry(name=name, sets=sets, reps=reps, calories_burned=calories)


def build_food(name: str, calories_text: str) -> FoodEntry | None:
    """Return a food entry, or None when the name or calories are invalid."""
    if not name:
        return None
    calories = _positive_int(calories_text)
    if calories is None:
        return None
    return FoodEntry(name=name, calories=calories)


def can_add_workout(
    name: str,
    sets_text: str,
    reps_text: str,
    calories_text: str | None,
    *,
    require_calories: bool = True,
) -> bool:
    """Return True when the workout form may be submitted."""
    return (
        build_workout(
            name,
            sets_text,
            reps_text,
            calories_text,
            require_calories=require_calories,
        )
        is not None
    )


def can_add_food(name: str, calories_text: str) -> bool:
    """Return True when the food form may be submitted."""
    return build_food(name, calories_text) is not None

"""Static exercise and quote tables."""

from fitness_tracker.domain.goals import Goal, MuscleGroup, Recommendation
from fitness_tracker.domain.motivation import Mood

DEFAULT_DURATION_ADVICE = "Try to move your body regularly throughout the week."
CALORIE_ESTIMATE_DISCLAIMER = (
    "Calorie numbers are rough estimates and can change based on speed, "
    "body weight, and fitness level."
)

GOAL_EXERCISES: dict[Goal, list[str]] = {
    Goal.LOSE_WEIGHT: [
        "Running (fast): ~12 calories per minute",
        "Jump rope: ~10 calories per minute",
        "Cycling (moderate): ~8 calories per minute",
        "Burpees: ~10–12 calories per minute",
        "Swimming (laps): ~9 calories per minute",
    ],
    Goal.GAIN_WEIGHT: [
        "Heavy squats (barbell)",
        "Bench press",
        "Deadlifts",
        "Rows (barbell or dumbbell)",
        "Overhead press",
    ],
    Goal.INCREASE_STRENGTH: [
        "Low reps, heavy squats",
        "Deadlifts",
        "Bench press",
        "Pull-ups / weighted pull-ups",
        "Overhead press",
    ],
    Goal.GAIN_MUSCLE: [
        "Squats (3–4 sets of 8–12 reps)",
        "Bench press (3–4 sets of 8–12 reps)",
        "Lat pulldown or pull-ups",
        "Shoulder press",
        "Leg press or lunges",
    ],
    Goal.STAY_HEALTHY: [
        "Brisk walking",
        "Light jogging",
        "Cycling (easy pace)",
        "Bodyweight squats",
        "Light dumbbell exercises",
    ],
}

GOAL_DURATION_ADVICE: dict[Goal, str] = {
    Goal.LOSE_WEIGHT: (
        "Try to exercise 30–40 minutes most days of the week to support weight loss."
    ),
    Goal.GAIN_WEIGHT: (
        "Focus on 30–45 minutes of strength training 3–4 days per week, "
        "with enough food to support muscle gain."
    ),
    Goal.INCREASE_STRENGTH: (
        "Aim for 30–60 minutes of heavy strength training 3–5 days per week, "
        "with rest days in between."
    ),
    Goal.GAIN_MUSCLE: (
        "Try 45–60 minutes of resistance training 3–5 days per week, "
        "focusing on progressive overload."
    ),
    Goal.STAY_HEALTHY: (
        "Move your body at least 20–30 minutes a day with light to moderate activity."
    ),
}

MUSCLE_EXERCISES: dict[MuscleGroup, list[str]] = {
    MuscleGroup.BICEPS: ["Hammer Curl", "Barbell Curl", "Dumbbell Curl"],
    MuscleGroup.CHEST: ["Bench Press", "Push-Ups", "Incline Dumbbell Press"],
    MuscleGroup.BACK: ["Pull-Ups", "Barbell Row", "Lat Pulldown"],
    MuscleGroup.LEGS: ["Squats", "Lunges", "Leg Press"],
    MuscleGroup.SHOULDERS: ["Overhead Press", "Lateral Raise", "Front Raise"],
}

QUOTES: dict[str, list[str]] = {
    Mood.TIRED: [
        "Small steps still move you forward.",
        "You don’t have to be perfect, just consistent.",
    ],
    Mood.STRESSED: [
        "One workout at a time. One day at a time.",
        "You are stronger than you think.",
    ],
    Mood.HAPPY: [
        "Use this energy to chase your goals!",
        "Celebrate progress, not perfection.",
    ],
    Mood.SAD: [
        "Moving your body can help clear your mind.",
        "You’re not alone in this — keep going.",
    ],
    Mood.MOTIVATED: [
        "Today is a great day to get better.",
        "Your future self will thank you.",
    ],
}


def goal_exercises(goal: Goal) -> list[str]:
    """Return exercise ideas for a goal, empty when none are listed."""
    return list(GOAL_EXERCISES.get(goal, []))


def duration_advice(goal: Goal) -> str:
    return GOAL_DURATION_ADVICE.get(goal, DEFAULT_DURATION_ADVICE)


def muscle_exercises(muscle: MuscleGroup) -> list[str]:
    return list(MUSCLE_EXERCISES[muscle])


def recommend(goal: Goal, muscle: MuscleGroup) -> Recommendation:
    """Build the recommendation view for a goal and muscle group."""
    return Recommendation(
        goal=goal,
        exercises=goal_exercises(goal),
        duration_advice=duration_advice(goal),
        muscle=muscle,
        muscle_exercises=muscle_exercises(muscle),
        disclaimer=CALORIE_ESTIMATE_DISCLAIMER if goal is Goal.LOSE_WEIGHT else None,
    )

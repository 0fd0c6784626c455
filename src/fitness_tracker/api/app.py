"""FastAPI application factory."""

import logging
from typing import TypeVar
from uuid import UUID

from fastapi import Depends, FastAPI, HTTPException, Request, status

from fitness_tracker.api.forms import (
    FoodForm,
    GoalForm,
    ProfileForm,
    QuoteRequest,
    WorkoutForm,
)
from fitness_tracker.app_logging import configure_logging
from fitness_tracker.containers import AppContainer
from fitness_tracker.domain.entries import FoodEntry, WorkoutEntry
from fitness_tracker.domain.goals import Goal, GoalSelection, MuscleGroup
from fitness_tracker.domain.metrics import BmiReading, CalorieStatus
from fitness_tracker.domain.motivation import Mood, MoodSelection
from fitness_tracker.domain.profile import ProfileInput
from fitness_tracker.domain.state import AppState
from fitness_tracker.services.catalog import recommend
from fitness_tracker.services.forms import can_add_food, can_add_workout, parse_int
from fitness_tracker.services.metrics import total_calories_in
from fitness_tracker.services.sessions import HomeSummary

HTTP_UNPROCESSABLE = 422

NO_WORKOUTS_TEXT = "No workouts added yet."
NO_FOODS_TEXT = "No foods added yet."
NO_BMI_TEXT = "Enter your height and weight to see your BMI."
NO_NOTES_TEXT = "Add some notes about why this goal matters to you."
NO_QUOTE_TEXT = "Select your mood to see a quote."
NO_EXERCISES_TEXT = "Pick a goal to see exercise ideas."
HOME_HELP_TEXT = (
    "Log foods in the Calories tab and workouts in the Workouts tab. "
    "This Home page will update automatically."
)
WORKOUT_REJECTED_TEXT = (
    "Workout needs a name and positive whole numbers for sets, reps and calories."
)
FOOD_REJECTED_TEXT = "Food needs a name and a positive whole number of calories."

_T = TypeVar("_T")

_NET_STATUS_TEXT = {
    CalorieStatus.SURPLUS: "You’re in a calorie surplus today.",
    CalorieStatus.DEFICIT: "You’re in a calorie deficit today.",
    CalorieStatus.MAINTENANCE: "You’re exactly at maintenance today.",
}


def _get_container(request: Request) -> AppContainer:
    return request.app.state.container


def _require_session(
    session_id: UUID, container: AppContainer = Depends(_get_container)
) -> AppState:
    """Resolve the session state or fail with 404."""
    state = container.session_service.get_state(session_id)
    if state is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Session not found."
        )
    return state


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Fitness Tracker")
    app.state.container = container
    logger.info(
        "Fitness tracker configured",
        extra={
            "unit_system": container.settings.unit_system.value,
            "environment": container.settings.environment,
        },
    )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/options")
    async def options() -> dict[str, object]:
        """Return the choices offered by each picker."""
        return {
            "goals": [goal.value for goal in Goal],
            "muscle_groups": [muscle.value for muscle in MuscleGroup],
            "moods": [mood.value for mood in Mood],
            "unit_system": container.settings.unit_system.value,
        }

    @app.post("/sessions", status_code=status.HTTP_201_CREATED)
    async def create_session(request: Request) -> dict[str, object]:
        """Start a new in-memory session."""
        state_container: AppContainer = request.app.state.container
        session_id, state = state_container.session_service.create_session()
        return {"session_id": str(session_id), "quote": _format_quote(state.mood)}

    @app.get("/sessions/{session_id}/home")
    async def home(
        session_id: UUID,
        request: Request,
        _: AppState = Depends(_require_session),
    ) -> dict[str, object]:
        """Return calorie totals, profile and BMI."""
        state_container: AppContainer = request.app.state.container
        summary = state_container.session_service.home(session_id)
        return _format_home(_ensure_found(summary))

    @app.put("/sessions/{session_id}/profile")
    async def update_profile(
        session_id: UUID,
        form: ProfileForm,
        request: Request,
        _: AppState = Depends(_require_session),
    ) -> dict[str, object]:
        """Replace the profile fields and return the refreshed home view."""
        state_container: AppContainer = request.app.state.container
        profile = ProfileInput(
            name=form.name,
            age_text=form.age,
            weight_text=form.weight,
            height_feet_text=form.height_feet,
            height_inches_text=form.height_inches,
            height_cm_text=form.height_cm,
        )
        state_container.session_service.update_profile(session_id, profile)
        summary = state_container.session_service.home(session_id)
        return _format_home(_ensure_found(summary))

    @app.get("/sessions/{session_id}/goal")
    async def get_goal(
        state: AppState = Depends(_require_session),
    ) -> dict[str, object]:
        """Return the goal summary."""
        return _format_goal(state.goal)

    @app.put("/sessions/{session_id}/goal")
    async def update_goal(
        session_id: UUID,
        form: GoalForm,
        request: Request,
        state: AppState = Depends(_require_session),
    ) -> dict[str, object]:
        """Change the selected goal and/or notes."""
        state_container: AppContainer = request.app.state.container
        service = state_container.session_service
        if form.goal is not None:
            state = _ensure_found(service.select_goal(session_id, form.goal))
        if form.notes is not None:
            state = _ensure_found(service.update_goal_notes(session_id, form.notes))
        return _format_goal(state.goal)

    @app.get("/sessions/{session_id}/workouts")
    async def list_workouts(
        state: AppState = Depends(_require_session),
    ) -> dict[str, object]:
        """Return the session's workouts."""
        return _format_workouts(state.workouts)

    @app.post("/sessions/{session_id}/workouts", status_code=status.HTTP_201_CREATED)
    async def add_workout(
        session_id: UUID,
        form: WorkoutForm,
        request: Request,
        _: AppState = Depends(_require_session),
    ) -> dict[str, object]:
        """Append a workout when every field is valid."""
        state_container: AppContainer = request.app.state.container
        entry = state_container.session_service.add_workout(
            session_id, form.name, form.sets, form.reps, form.calories
        )
        if entry is None:
            raise HTTPException(
                status_code=HTTP_UNPROCESSABLE,
                detail=WORKOUT_REJECTED_TEXT,
            )
        return _format_workout(entry)

    @app.post("/sessions/{session_id}/workouts/check")
    async def check_workout(
        form: WorkoutForm,
        request: Request,
        _: AppState = Depends(_require_session),
    ) -> dict[str, bool]:
        """Report whether the workout form can be submitted."""
        state_container: AppContainer = request.app.state.container
        return {
            "can_add": can_add_workout(
                form.name,
                form.sets,
                form.reps,
                form.calories,
                require_calories=state_container.settings.require_workout_calories,
            )
        }

    @app.get("/sessions/{session_id}/foods")
    async def list_foods(
        state: AppState = Depends(_require_session),
    ) -> dict[str, object]:
        """Return the session's foods and total calories in."""
        return _format_foods(state.foods)

    @app.post("/sessions/{session_id}/foods", status_code=status.HTTP_201_CREATED)
    async def add_food(
        session_id: UUID,
        form: FoodForm,
        request: Request,
        _: AppState = Depends(_require_session),
    ) -> dict[str, object]:
        """Append a food when the name and calories are valid."""
        state_container: AppContainer = request.app.state.container
        entry = state_container.session_service.add_food(
            session_id, form.name, form.calories
        )
        if entry is None:
            raise HTTPException(
                status_code=HTTP_UNPROCESSABLE,
                detail=FOOD_REJECTED_TEXT,
            )
        return _format_food(entry)

    @app.post("/sessions/{session_id}/foods/check")
    async def check_food(
        form: FoodForm,
        _: AppState = Depends(_require_session),
    ) -> dict[str, bool]:
        """Report whether the food form can be submitted."""
        return {"can_add": can_add_food(form.name, form.calories)}

    @app.get("/recommendations")
    async def recommendations(
        goal: Goal = Goal.LOSE_WEIGHT, muscle: MuscleGroup = MuscleGroup.BICEPS
    ) -> dict[str, object]:
        """Return exercise ideas for a goal and a muscle group."""
        recommendation = recommend(goal, muscle)
        return {
            "goal": recommendation.goal.value,
            "exercises": recommendation.exercises,
            "exercises_placeholder": None
            if recommendation.exercises
            else NO_EXERCISES_TEXT,
            "disclaimer": recommendation.disclaimer,
            "duration_advice": recommendation.duration_advice,
            "muscle": recommendation.muscle.value,
            "muscle_exercises": recommendation.muscle_exercises,
        }

    @app.get("/sessions/{session_id}/quote")
    async def get_quote(
        state: AppState = Depends(_require_session),
    ) -> dict[str, object]:
        """Return the quote currently shown."""
        return _format_quote(state.mood)

    @app.post("/sessions/{session_id}/quote")
    async def new_quote(
        session_id: UUID,
        request: Request,
        _: AppState = Depends(_require_session),
        body: QuoteRequest | None = None,
    ) -> dict[str, object]:
        """Pick a new quote, optionally for a different mood."""
        state_container: AppContainer = request.app.state.container
        state = state_container.session_service.refresh_quote(
            session_id, body.mood if body else None
        )
        return _format_quote(_ensure_found(state).mood)

    return app


def _ensure_found(value: _T | None) -> _T:
    """Raise 404 for a session that disappeared mid-request."""
    if value is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Session not found."
        )
    return value


def _format_kcal(value: int) -> str:
    return f"{value} kcal"


def _format_bmi(reading: BmiReading) -> dict[str, object]:
    """Format a BMI reading, falling back to a placeholder."""
    if reading.value is None:
        return {
            "value": None,
            "category": reading.category.value,
            "text": NO_BMI_TEXT,
        }
    return {
        "value": round(reading.value, 1),
        "category": reading.category.value,
        "text": f"BMI: {reading.value:.1f}",
        "category_text": f"Category: {reading.category.value}",
    }


def _format_home(summary: HomeSummary) -> dict[str, object]:
    """Format the home screen."""
    calories = summary.calories
    profile = summary.profile
    return {
        "calories": {
            "in": calories.calories_in,
            "out": calories.calories_out,
            "net": calories.net,
            "in_text": _format_kcal(calories.calories_in),
            "out_text": _format_kcal(calories.calories_out),
            "net_text": _format_kcal(calories.net),
            "status": calories.status.value,
            "status_text": _NET_STATUS_TEXT[calories.status],
        },
        "profile": {
            "name": profile.name,
            "age": parse_int(profile.age_text),
            "unit_system": summary.unit_system.value,
        },
        "bmi": _format_bmi(summary.bmi),
        "help": HOME_HELP_TEXT,
    }


def _format_goal(selection: GoalSelection) -> dict[str, object]:
    return {
        "goal": selection.goal.value,
        "notes": selection.notes,
        "summary": [
            f"Goal: {selection.goal.value}",
            f"Notes: {selection.notes}" if selection.notes else NO_NOTES_TEXT,
        ],
    }


def _format_workout(entry: WorkoutEntry) -> dict[str, object]:
    return {
        "id": str(entry.id),
        "name": entry.name,
        "sets": entry.sets,
        "reps": entry.reps,
        "calories_burned": entry.calories_burned,
        "detail": f"{entry.sets} sets x {entry.reps} reps",
        "calories_text": _format_kcal(entry.calories_burned)
        if entry.calories_burned is not None
        else None,
    }


def _format_workouts(workouts: tuple[WorkoutEntry, ...]) -> dict[str, object]:
    """Format the workout list with an empty-state message."""
    return {
        "workouts": [_format_workout(entry) for entry in workouts],
        "empty_text": None if workouts else NO_WORKOUTS_TEXT,
    }


def _format_food(entry: FoodEntry) -> dict[str, object]:
    return {
        "id": str(entry.id),
        "name": entry.name,
        "calories": entry.calories,
        "calories_text": _format_kcal(entry.calories),
    }


def _format_foods(foods: tuple[FoodEntry, ...]) -> dict[str, object]:
    """Format the food list with its total and an empty-state message."""
    total = total_calories_in(foods)
    return {
        "foods": [_format_food(entry) for entry in foods],
        "empty_text": None if foods else NO_FOODS_TEXT,
        "total_calories": total,
        "total_text": _format_kcal(total),
    }


def _format_quote(selection: MoodSelection) -> dict[str, object]:
    """Format the quote, falling back to a placeholder."""
    return {
        "mood": selection.mood.value,
        "quote": selection.quote,
        "text": f"“{selection.quote}”" if selection.quote else NO_QUOTE_TEXT,
    }

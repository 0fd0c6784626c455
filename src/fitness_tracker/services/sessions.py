"""Session orchestration for the fitness tracker screens."""

import logging
import random
from dataclasses import dataclass, field
from uuid import UUID, uuid4

from fitness_tracker.domain.entries import FoodEntry, WorkoutEntry
from fitness_tracker.domain.goals import Goal
from fitness_tracker.domain.metrics import BmiReading, CalorieSummary
from fitness_tracker.domain.motivation import Mood
from fitness_tracker.domain.profile import ProfileInput, UnitSystem
from fitness_tracker.domain.state import (
    Action,
    AddFood,
    AddWorkout,
    AppState,
    SelectGoal,
    ShowQuote,
    UpdateGoalNotes,
    UpdateProfile,
    reduce,
)
from fitness_tracker.services.catalog import QUOTES
from fitness_tracker.services.forms import build_food, build_workout
from fitness_tracker.services.metrics import bmi_reading, pick_quote, summarize_calories
from fitness_tracker.services.state_store import StateStore

_logger = logging.getLogger(__name__)


@dataclass
class HomeSummary:
    """Everything the home screen displays."""

    calories: CalorieSummary
    profile: ProfileInput
    bmi: BmiReading
    unit_system: UnitSystem


@dataclass
class SessionService:
    """Apply user actions to in-memory session state."""

    store: StateStore
    unit_system: UnitSystem = UnitSystem.IMPERIAL
    require_workout_calories: bool = True
    rng: random.Random = field(default_factory=random.Random)

    def create_session(self) -> tuple[UUID, AppState]:
        """Start a session with a quote already picked for the default mood."""
        session_id = uuid4()
        initial = AppState()
        state = reduce(initial, self._quote_action(initial.mood.mood))
        self.store.save(session_id, state)
        _logger.info("Session created", extra={"session_id": str(session_id)})
        return session_id, state

    def get_state(self, session_id: UUID) -> AppState | None:
        return self.store.get(session_id)

    def add_workout(
        self,
        session_id: UUID,
        name: str,
        sets_text: str,
        reps_text: str,
        calories_text: str | None = None,
    ) -> WorkoutEntry | None:
        """Validate and append a workout; return None when it is rejected."""
        entry = build_workout(
            name,
            sets_text,
            reps_text,
            calories_text,
            require_calories=self.require_workout_calories,
        )
        if entry is None:
            _logger.info("Workout rejected", extra={"session_id": str(session_id)})
            return None
        if self._dispatch(session_id, AddWorkout(entry)) is None:
            return None
        return entry

    def add_food(
        self, session_id: UUID, name: str, calories_text: str
    ) -> FoodEntry | None:
        """Validate and append a food; return None when it is rejected."""
        entry = build_food(name, calories_text)
        if entry is None:
            _logger.info("Food rejected", extra={"session_id": str(session_id)})
            return None
        if self._dispatch(session_id, AddFood(entry)) is None:
            return None
        return entry

    def update_profile(
        self, session_id: UUID, profile: ProfileInput
    ) -> AppState | None:
        return self._dispatch(session_id, UpdateProfile(profile))

    def select_goal(self, session_id: UUID, goal: Goal) -> AppState | None:
        return self._dispatch(session_id, SelectGoal(goal))

    def update_goal_notes(self, session_id: UUID, notes: str) -> AppState | None:
        return self._dispatch(session_id, UpdateGoalNotes(notes))

    def refresh_quote(
        self, session_id: UUID, mood: Mood | None = None
    ) -> AppState | None:
        """Pick a new quote for the given mood, or for the current one."""
        state = self.store.get(session_id)
        if state is None:
            return None
        selected = mood or state.mood.mood
        return self._dispatch(session_id, self._quote_action(selected), state)

    def home(self, session_id: UUID) -> HomeSummary | None:
        """Return calorie totals, profile and BMI for the home screen."""
        state = self.store.get(session_id)
        if state is None:
            return None
        return HomeSummary(
            calories=summarize_calories(state.foods, state.workouts),
            profile=state.profile,
            bmi=bmi_reading(state.profile, self.unit_system),
            unit_system=self.unit_system,
        )

    def _quote_action(self, mood: Mood) -> ShowQuote:
        return ShowQuote(mood=mood, quote=pick_quote(mood, QUOTES, self.rng))

    def _dispatch(
        self, session_id: UUID, action: Action, state: AppState | None = None
    ) -> AppState | None:
        current = state or self.store.get(session_id)
        if current is None:
            _logger.warning(
                "Unknown session",
                extra={"session_id": str(session_id), "action": type(action).__name__},
            )
            return None
        updated = reduce(current, action)
        self.store.save(session_id, updated)
        return updated

"""Session state and the pure reducers that update it."""

from dataclasses import dataclass, field, replace

from fitness_tracker.domain.entries import FoodEntry, WorkoutEntry
from fitness_tracker.domain.goals import Goal, GoalSelection
from fitness_tracker.domain.motivation import Mood, MoodSelection
from fitness_tracker.domain.profile import ProfileInput


@dataclass(frozen=True)
class AppState:
    """Everything one session shows across its screens."""

    workouts: tuple[WorkoutEntry, ...] = ()
    foods: tuple[FoodEntry, ...] = ()
    profile: ProfileInput = field(default_factory=ProfileInput)
    goal: GoalSelection = field(default_factory=GoalSelection)
    mood: MoodSelection = field(default_factory=MoodSelection)


@dataclass(frozen=True)
class AddWorkout:
    """Append a validated workout."""

    entry: WorkoutEntry


@dataclass(frozen=True)
class AddFood:
    """Append a validated food."""

    entry: FoodEntry


@dataclass(frozen=True)
class UpdateProfile:
    """Replace the raw profile fields."""

    profile: ProfileInput


@dataclass(frozen=True)
class SelectGoal:
    goal: Goal


@dataclass(frozen=True)
class UpdateGoalNotes:
    notes: str


@dataclass(frozen=True)
class ShowQuote:
    """Select a mood along with the quote already picked for it."""

    mood: Mood
    quote: str | None


Action = AddWorkout | AddFood | UpdateProfile | SelectGoal | UpdateGoalNotes | ShowQuote


def reduce(state: AppState, action: Action) -> AppState:  # noqa: PLR0911
    """Return the state that results from applying an action."""
    if isinstance(action, AddWorkout):
        return replace(state, workouts=(*state.workouts, action.entry))
    if isinstance(action, AddFood):
        return replace(state, foods=(*state.foods, action.entry))
    if isinstance(action, UpdateProfile):
        return replace(state, profile=action.profile)
    if isinstance(action, SelectGoal):
        return replace(state, goal=replace(state.goal, goal=action.goal))
    if isinstance(action, UpdateGoalNotes):
        return replace(state, goal=replace(state.goal, notes=action.notes))
    if isinstance(action, ShowQuote):
        return replace(state, mood=MoodSelection(mood=action.mood, quote=action.quote))
    raise TypeError(f"Unsupported action: {type(action).__name__}")

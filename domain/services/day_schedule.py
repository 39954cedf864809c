"""
Rest-day / training-day reconciliation for the routine editor.

A DaySchedule keeps three things consistent:
- a per-day "is rest day" flag over the seven weekdays
- the exercises assigned to each day
- the training/rest day counters, which always sum to 7

Mutations (toggle, add, remove) update flags and counters eagerly so the
editor stays responsive. `reconcile()` is the authoritative step run before
saving: it rebuilds every flag from ground truth (a day is a rest day if and
only if it has no exercises) and recomputes the counters.

Per-day states: REST -> TRAINING_EMPTY (user enabled training, no exercise
yet) -> TRAINING_POPULATED (first exercise added). Removing the last exercise
returns a day to REST. TRAINING_EMPTY is never a valid state to save.
"""

import logging
from enum import Enum
from typing import Dict, Iterable, List, Optional

from domain.models import DAYS_OF_WEEK, Exercise, ExerciseType, Routine, Weekday

logger = logging.getLogger(__name__)

# Defaults applied to incomplete exercises when the schedule is flattened for saving
STRENGTH_DEFAULTS = {"sets": 3, "reps": 10, "weight": 0.0}
CARDIO_DEFAULTS = {"duration": 30.0, "distance": 5.0}


class DayState(str, Enum):
    """State of a single day in the editor."""

    REST = "rest"
    TRAINING_EMPTY = "training_empty"
    TRAINING_POPULATED = "training_populated"


class DaySchedule:
    """
    Mutable per-day editor state for one routine.

    Usage:
        >>> schedule = DaySchedule.empty()
        >>> schedule.add_exercise(Weekday.MONDAY, Exercise(name="Squat", sets=5, reps=5))
        >>> schedule.training_days, schedule.rest_days
        (1, 6)
    """

    def __init__(
        self,
        rest_days_config: Optional[Dict[Weekday, bool]] = None,
        exercises: Optional[Dict[Weekday, List[Exercise]]] = None,
    ):
        self.rest_days_config: Dict[Weekday, bool] = {day: True for day in DAYS_OF_WEEK}
        self.exercises: Dict[Weekday, List[Exercise]] = {day: [] for day in DAYS_OF_WEEK}
        if rest_days_config:
            self.rest_days_config.update(rest_days_config)
        if exercises:
            for day, day_exercises in exercises.items():
                self.exercises[day] = [ex.model_copy(update={"day": day}) for ex in day_exercises]
        self.training_days = 0
        self.rest_days = 7
        self.recompute_counts()

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def empty(cls) -> "DaySchedule":
        """Schedule for a new routine: every day is a rest day."""
        return cls()

    @classmethod
    def from_routine(cls, routine: Routine) -> "DaySchedule":
        """
        Build the editor state for an existing routine.

        A day starts as a training day only if it has at least one exercise.
        Exercises without a valid day are placed on Monday.
        """
        exercises: Dict[Weekday, List[Exercise]] = {day: [] for day in DAYS_OF_WEEK}
        for exercise in routine.exercises:
            day = exercise.day or Weekday.MONDAY
            exercises[day].append(
                exercise.model_copy(update={"day": day, "routine_id": routine.id})
            )

        rest_days_config = {day: not exercises[day] for day in DAYS_OF_WEEK}
        logger.debug(
            "Loaded schedule for routine %s: %s",
            routine.name,
            {day.value: len(exercises[day]) for day in DAYS_OF_WEEK},
        )
        return cls(rest_days_config=rest_days_config, exercises=exercises)

    # =========================================================================
    # Queries
    # =========================================================================

    def is_rest_day(self, day: Weekday) -> bool:
        return self.rest_days_config[day]

    def exercises_for(self, day: Weekday) -> List[Exercise]:
        """Copy of the exercises assigned to `day`."""
        return list(self.exercises[day])

    def day_state(self, day: Weekday) -> DayState:
        if self.rest_days_config[day]:
            return DayState.REST
        if self.exercises[day]:
            return DayState.TRAINING_POPULATED
        return DayState.TRAINING_EMPTY

    def empty_training_days(self) -> List[Weekday]:
        """Days marked as training that have no exercises, in week order."""
        return [day for day in DAYS_OF_WEEK if self.day_state(day) == DayState.TRAINING_EMPTY]

    def all_exercises(self) -> List[Exercise]:
        """
        Every exercise in week order, with per-type defaults filled in.

        Strength: 3 sets of 10 at 0 kg. Cardio: 30 minutes, distance 5.
        """
        result: List[Exercise] = []
        for day in DAYS_OF_WEEK:
            for exercise in self.exercises[day]:
                result.append(_with_defaults(exercise, day))
        return result

    # =========================================================================
    # Mutations
    # =========================================================================

    def recompute_counts(self) -> None:
        """Derive the counters from the rest-day flags."""
        self.rest_days = sum(1 for day in DAYS_OF_WEEK if self.rest_days_config[day])
        self.training_days = len(DAYS_OF_WEEK) - self.rest_days

    def toggle_rest_day(self, day: Weekday) -> bool:
        """
        Flip a day between rest and training.

        A day that becomes a rest day loses all of its exercises immediately.

        Returns:
            The new "is rest day" flag.
        """
        is_rest = not self.rest_days_config[day]
        self.rest_days_config[day] = is_rest
        if is_rest and self.exercises[day]:
            logger.info(f"Clearing {len(self.exercises[day])} exercise(s) from {day.value}")
            self.exercises[day] = []
        self.recompute_counts()
        return is_rest

    def set_training_day(self, day: Weekday) -> None:
        """Mark a day as training without adding an exercise yet."""
        if self.rest_days_config[day]:
            self.rest_days_config[day] = False
            self.recompute_counts()

    def add_exercise(self, day: Weekday, exercise: Exercise) -> Exercise:
        """
        Append an exercise to a day, making it a training day.

        Returns:
            The stored copy, carrying its day assignment.
        """
        stored = exercise.model_copy(update={"day": day})
        self.exercises[day].append(stored)
        if self.rest_days_config[day]:
            self.rest_days_config[day] = False
            self.recompute_counts()
        return stored

    def update_exercise(self, day: Weekday, exercise_id: str, exercise: Exercise) -> bool:
        """
        Replace an exercise in place, keeping its id.

        If `exercise.day` names a different day, the exercise moves there
        (and the old day may become a rest day).

        Returns:
            True if anything changed.
        """
        index = _index_of(self.exercises[day], exercise_id)
        if index is None:
            logger.warning(f"Could not find exercise {exercise_id} on {day.value} to update")
            return False

        current = self.exercises[day][index]
        target_day = exercise.day or day
        if not _has_changes(current, exercise, target_day):
            return False

        updated = exercise.model_copy(
            update={"id": current.id, "day": target_day, "routine_id": current.routine_id}
        )
        if target_day == day:
            self.exercises[day][index] = updated
        else:
            self.remove_exercise(day, exercise_id)
            self.add_exercise(target_day, updated)
        return True

    def remove_exercise(self, day: Weekday, exercise_id: str) -> bool:
        """
        Remove an exercise; a day left without exercises becomes a rest day.

        Returns:
            True if the exercise was found.
        """
        remaining = [ex for ex in self.exercises[day] if ex.id != exercise_id]
        if len(remaining) == len(self.exercises[day]):
            return False
        self.exercises[day] = remaining
        if not remaining and not self.rest_days_config[day]:
            self.rest_days_config[day] = True
            self.recompute_counts()
        return True

    def mark_as_rest_days(self, days: Iterable[Weekday]) -> None:
        """Convert several days to rest days at once."""
        for day in days:
            self.rest_days_config[day] = True
            self.exercises[day] = []
        self.recompute_counts()

    def reconcile(self) -> None:
        """
        Rebuild the flags from the exercise lists and recompute the counters.

        Overrides any stale manual flag: a day is a rest day if and only if
        it currently has no exercises.
        """
        for day in DAYS_OF_WEEK:
            self.rest_days_config[day] = not self.exercises[day]
        self.recompute_counts()

    # =========================================================================
    # Change tracking
    # =========================================================================

    def snapshot(self) -> dict:
        """Deep copy of the editable state, for unsaved-change detection."""
        return {
            "rest_days_config": dict(self.rest_days_config),
            "exercises": {
                day: [ex.model_dump() for ex in self.exercises[day]] for day in DAYS_OF_WEEK
            },
        }

    def has_changes(self, snapshot: dict) -> bool:
        return self.snapshot() != snapshot


def _index_of(exercises: List[Exercise], exercise_id: str) -> Optional[int]:
    for index, exercise in enumerate(exercises):
        if exercise.id == exercise_id:
            return index
    return None


def _has_changes(current: Exercise, incoming: Exercise, target_day: Weekday) -> bool:
    """Compare the user-editable fields, as text, to ignore type-only differences."""

    def text(value: object) -> str:
        return "" if value is None else str(value).strip()

    return (
        text(current.name) != text(incoming.name)
        or text(current.sets) != text(incoming.sets)
        or text(current.reps) != text(incoming.reps)
        or text(current.weight) != text(incoming.weight)
        or text(current.duration) != text(incoming.duration)
        or text(current.distance) != text(incoming.distance)
        or text(current.notes) != text(incoming.notes)
        or current.type != incoming.type
        or current.exercise_mode != incoming.exercise_mode
        or current.custom_sets != incoming.custom_sets
        or current.day != target_day
    )


def _with_defaults(exercise: Exercise, day: Weekday) -> Exercise:
    update: dict = {"day": day}
    if exercise.type == ExerciseType.STRENGTH:
        if exercise.sets is None:
            update["sets"] = STRENGTH_DEFAULTS["sets"]
        if exercise.reps is None:
            update["reps"] = STRENGTH_DEFAULTS["reps"]
    else:
        if exercise.duration is None:
            update["duration"] = CARDIO_DEFAULTS["duration"]
        if exercise.distance is None:
            update["distance"] = CARDIO_DEFAULTS["distance"]
    return exercise.model_copy(update=update)

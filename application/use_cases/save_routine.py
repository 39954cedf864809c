"""
SaveRoutine Use Case.

Validates and reconciles the routine editor state, then persists the routine
row and replaces its exercise set on the backend.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from application.exceptions import RepositoryError, RoutineValidationError
from application.ports import ExerciseRepository, RoutineRepository
from domain.converters import db_row_to_routine, exercise_to_db_row, routine_to_db_row
from domain.models import Exercise, Routine, Weekday
from domain.services import DaySchedule

logger = logging.getLogger(__name__)

SAVE_ERROR_MESSAGE = "Failed to save the routine. Please try again."


class EmptyDayResolution(str, Enum):
    """
    How the user chose to resolve training days that have no exercises.

    - ADD_EXERCISES: go back and add an exercise to the first such day
    - MARK_AS_REST: turn every such day into a rest day and save
    """

    ADD_EXERCISES = "add_exercises"
    MARK_AS_REST = "mark_as_rest"


@dataclass
class SaveRoutineResult:
    """Result of the SaveRoutine use case execution."""

    success: bool
    routine: Optional[Routine] = None
    routine_id: Optional[str] = None
    is_update: bool = False
    error: Optional[str] = None
    validation_errors: List[str] = field(default_factory=list)
    empty_training_days: List[Weekday] = field(default_factory=list)
    focus_day: Optional[Weekday] = None

    @property
    def needs_resolution(self) -> bool:
        """True when the save is blocked until the user picks an EmptyDayResolution."""
        return not self.success and bool(self.empty_training_days) and self.focus_day is None


class SaveRoutineUseCase:
    """
    Use case for saving a routine from the editor.

    Orchestrates the following workflow:
    1. Validate the routine name
    2. Block on training days without exercises until the user resolves them
    3. Reconcile rest/training flags from the actual exercise lists
    4. Insert or update the routine row
    5. Activate it atomically (new routines always become active)
    6. Replace the exercise set (delete all, then insert all)

    Steps 4-6 are separate backend calls. If one fails, earlier ones are not
    rolled back; only the failing step is reported.

    Usage:
        >>> use_case = SaveRoutineUseCase(routine_repo=routine_repo, exercise_repo=exercise_repo)
        >>> result = use_case.execute(schedule, name="PPL", user_id="user-123")
        >>> if result.needs_resolution:
        ...     result = use_case.execute(
        ...         schedule, name="PPL", user_id="user-123",
        ...         resolution=EmptyDayResolution.MARK_AS_REST,
        ...     )
    """

    def __init__(
        self,
        routine_repo: RoutineRepository,
        exercise_repo: ExerciseRepository,
    ) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            routine_repo: Repository for routine rows
            exercise_repo: Repository for exercise rows
        """
        self._routine_repo = routine_repo
        self._exercise_repo = exercise_repo

    def execute(
        self,
        schedule: DaySchedule,
        name: str,
        user_id: str,
        *,
        routine_id: Optional[str] = None,
        was_active: bool = False,
        resolution: Optional[EmptyDayResolution] = None,
    ) -> SaveRoutineResult:
        """
        Execute the save routine workflow.

        Args:
            schedule: Editor state; reconciled in place before saving
            name: Routine name
            user_id: Authenticated user ID
            routine_id: Existing routine ID when editing, None for a new routine
            was_active: Whether the edited routine is the active one
            resolution: The user's answer to the empty-training-days prompt

        Returns:
            SaveRoutineResult with the saved routine, or the reason it was not saved
        """
        try:
            clean_name = self._validate_name(name)
        except RoutineValidationError as e:
            logger.warning(f"Routine validation failed: {e.message}")
            return SaveRoutineResult(
                success=False,
                error=e.message,
                validation_errors=e.errors,
            )

        empty_days = schedule.empty_training_days()
        if empty_days:
            day_list = ", ".join(day.value for day in empty_days)
            if resolution is None:
                logger.warning(f"Save blocked, training days without exercises: {day_list}")
                return SaveRoutineResult(
                    success=False,
                    error=(
                        f"You have training days without exercises: {day_list}. "
                        "Would you like to add exercises or mark these as rest days?"
                    ),
                    validation_errors=[f"{day.value} has no exercises" for day in empty_days],
                    empty_training_days=empty_days,
                )
            if resolution == EmptyDayResolution.ADD_EXERCISES:
                return SaveRoutineResult(
                    success=False,
                    error=f"Add an exercise to {empty_days[0].value} before saving",
                    empty_training_days=empty_days,
                    focus_day=empty_days[0],
                )
            logger.info(f"Marking {day_list} as rest days before saving")
            schedule.mark_as_rest_days(empty_days)

        schedule.reconcile()

        is_update = routine_id is not None
        should_be_active = was_active if is_update else True
        exercises = schedule.all_exercises()
        routine = Routine(
            id=routine_id,
            user_id=user_id,
            name=clean_name,
            is_active=should_be_active,
            training_days=schedule.training_days,
            rest_days=schedule.rest_days,
            exercises=exercises,
        )

        operation = "update" if is_update else "create"
        logger.info(
            f"Saving routine ({operation}) '{routine.name}': "
            f"{routine.training_days} training / {routine.rest_days} rest days, "
            f"{len(exercises)} exercise(s)"
        )

        try:
            row_data = routine_to_db_row(routine, user_id=user_id)
            if is_update:
                saved_row = self._routine_repo.update(routine_id, row_data)
            else:
                # Inserted inactive, then activated through the atomic call below
                row_data["is_active"] = False
                saved_row = self._routine_repo.create(row_data)
            saved_id = str(saved_row["id"])

            if should_be_active:
                self._routine_repo.set_active(user_id, saved_id)

            saved_exercises = self._replace_exercises(
                saved_id, user_id, exercises, is_update=is_update
            )
        except RepositoryError as e:
            logger.error(f"Error saving routine '{routine.name}': {e}")
            return SaveRoutineResult(
                success=False,
                error=SAVE_ERROR_MESSAGE,
                is_update=is_update,
            )

        saved_routine = db_row_to_routine(saved_row, saved_exercises).model_copy(
            update={"is_active": should_be_active}
        )
        logger.info(f"Routine saved successfully: {saved_id}")
        return SaveRoutineResult(
            success=True,
            routine=saved_routine,
            routine_id=saved_id,
            is_update=is_update,
        )

    def _validate_name(self, name: Optional[str]) -> str:
        if not name or not name.strip():
            raise RoutineValidationError(
                "Please enter a routine name", errors=["Routine name is required"]
            )
        return name.strip()

    def _replace_exercises(
        self,
        routine_id: str,
        user_id: str,
        exercises: List[Exercise],
        *,
        is_update: bool,
    ) -> List[Exercise]:
        """Delete the routine's existing exercises and insert the current set."""
        if is_update:
            deleted = self._exercise_repo.delete_by_routine(routine_id)
            logger.debug(f"Deleted {deleted} existing exercise(s) for routine {routine_id}")

        if not exercises:
            return []

        rows = [
            exercise_to_db_row(exercise, routine_id=routine_id, user_id=user_id)
            for exercise in exercises
        ]
        inserted = self._exercise_repo.insert_many(rows)
        logger.info(f"Saved {len(rows)} exercise(s) for routine {routine_id}")

        if len(inserted) != len(exercises):
            return [ex.model_copy(update={"routine_id": routine_id}) for ex in exercises]

        # Backend ids replace the client-generated ones; client-only fields are kept
        return [
            exercise.model_copy(
                update={
                    "id": str(row["id"]) if row.get("id") is not None else exercise.id,
                    "routine_id": routine_id,
                }
            )
            for exercise, row in zip(exercises, inserted)
        ]


def merge_saved_routine(routines: List[Routine], saved: Routine) -> List[Routine]:
    """
    Mirror a saved routine into the local routine collection.

    Replaces the routine with the same id (or appends a new one). If the saved
    routine is active, every other routine is marked inactive.
    """
    merged: List[Routine] = []
    replaced = False
    for routine in routines:
        if routine.id == saved.id:
            merged.append(saved)
            replaced = True
        elif saved.is_active and routine.is_active:
            merged.append(routine.model_copy(update={"is_active": False}))
        else:
            merged.append(routine)
    if not replaced:
        merged.append(saved)
    return merged

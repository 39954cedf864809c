"""
LoadRoutines Use Case.

Fetches a user's routines and exercises and combines them into Routine
aggregates, identifying the active routine.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from application.exceptions import RepositoryError
from application.ports import ExerciseRepository, RoutineRepository
from domain.converters import combine_routines
from domain.models import Routine

logger = logging.getLogger(__name__)

LOAD_ERROR_MESSAGE = "Could not load workout data."


@dataclass
class LoadRoutinesResult:
    """Result of the LoadRoutines use case execution."""

    success: bool
    routines: List[Routine] = field(default_factory=list)
    active_routine_id: Optional[str] = None
    error: Optional[str] = None

    @property
    def active_routine(self) -> Optional[Routine]:
        for routine in self.routines:
            if routine.id == self.active_routine_id:
                return routine
        return None


class LoadRoutinesUseCase:
    """
    Use case for loading all routines for a user.

    Workflow:
    1. Select routines by user (oldest first)
    2. Select exercises by user
    3. Attach exercises to their routines
    4. Find the active routine

    On failure the result carries an empty routine list and a user-facing
    error; nothing is retried.
    """

    def __init__(
        self,
        routine_repo: RoutineRepository,
        exercise_repo: ExerciseRepository,
    ) -> None:
        self._routine_repo = routine_repo
        self._exercise_repo = exercise_repo

    def execute(self, user_id: str) -> LoadRoutinesResult:
        try:
            routine_rows = self._routine_repo.list_by_user(user_id)
            exercise_rows = self._exercise_repo.list_by_user(user_id)
        except RepositoryError as e:
            logger.error(f"Error fetching routines for user {user_id}: {e}")
            return LoadRoutinesResult(success=False, error=LOAD_ERROR_MESSAGE)

        routines = combine_routines(routine_rows, exercise_rows)
        active = next((r for r in routines if r.is_active), None)

        logger.info(
            f"Loaded {len(routines)} routine(s) and {len(exercise_rows)} exercise(s) "
            f"for user {user_id}; active routine: {active.id if active else 'none'}"
        )
        return LoadRoutinesResult(
            success=True,
            routines=routines,
            active_routine_id=active.id if active else None,
        )

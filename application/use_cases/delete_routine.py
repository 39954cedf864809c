"""
DeleteRoutine Use Case.

Removes a routine and its exercises from the backend.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from application.exceptions import RepositoryError
from application.ports import ExerciseRepository, RoutineRepository
from domain.models import Routine

logger = logging.getLogger(__name__)

DELETE_ERROR_MESSAGE = "Failed to delete the routine. Please try again."


@dataclass
class DeleteRoutineResult:
    """Result of the DeleteRoutine use case execution."""

    success: bool
    routine_id: Optional[str] = None
    exercises_deleted: int = 0
    error: Optional[str] = None


class DeleteRoutineUseCase:
    """
    Use case for deleting a routine.

    Workflow:
    1. Delete the routine's exercises (by parent id)
    2. Delete the routine row

    If step 2 fails the exercises stay deleted; the failure is reported and
    not retried.
    """

    def __init__(
        self,
        routine_repo: RoutineRepository,
        exercise_repo: ExerciseRepository,
    ) -> None:
        self._routine_repo = routine_repo
        self._exercise_repo = exercise_repo

    def execute(self, routine_id: str) -> DeleteRoutineResult:
        try:
            exercises_deleted = self._exercise_repo.delete_by_routine(routine_id)
            deleted = self._routine_repo.delete(routine_id)
        except RepositoryError as e:
            logger.error(f"Error deleting routine {routine_id}: {e}")
            return DeleteRoutineResult(
                success=False,
                routine_id=routine_id,
                error=DELETE_ERROR_MESSAGE,
            )

        if not deleted:
            logger.warning(f"Routine {routine_id} was not found; nothing deleted")
        else:
            logger.info(f"Deleted routine {routine_id} and {exercises_deleted} exercise(s)")

        return DeleteRoutineResult(
            success=True,
            routine_id=routine_id,
            exercises_deleted=exercises_deleted,
        )


def remove_routine(routines: List[Routine], routine_id: str) -> List[Routine]:
    """Mirror a deletion locally."""
    return [routine for routine in routines if routine.id != routine_id]

"""
SetActiveRoutine Use Case.

Makes one routine the user's active routine through the repository's atomic
activation call.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from application.exceptions import RepositoryError
from application.ports import RoutineRepository
from domain.models import Routine

logger = logging.getLogger(__name__)

SET_ACTIVE_ERROR_MESSAGE = "Failed to set active routine. Please try again."


@dataclass
class SetActiveRoutineResult:
    """Result of the SetActiveRoutine use case execution."""

    success: bool
    active_routine_id: Optional[str] = None
    error: Optional[str] = None


class SetActiveRoutineUseCase:
    """
    Use case for switching the active routine.

    The flags of all of the user's routines change in a single backend call,
    so a failure leaves the previous active routine untouched.
    """

    def __init__(self, routine_repo: RoutineRepository) -> None:
        self._routine_repo = routine_repo

    def execute(self, user_id: str, routine_id: str) -> SetActiveRoutineResult:
        """
        Activate `routine_id` for `user_id`.

        Args:
            user_id: Authenticated user ID
            routine_id: Routine to activate

        Returns:
            SetActiveRoutineResult with the new active routine id
        """
        try:
            self._routine_repo.set_active(user_id, routine_id)
        except RepositoryError as e:
            logger.error(f"Error setting active routine {routine_id} for user {user_id}: {e}")
            return SetActiveRoutineResult(success=False, error=SET_ACTIVE_ERROR_MESSAGE)

        logger.info(f"Routine {routine_id} is now active for user {user_id}")
        return SetActiveRoutineResult(success=True, active_routine_id=routine_id)


def apply_active(routines: List[Routine], routine_id: Optional[str]) -> List[Routine]:
    """Mirror an activation locally: exactly `routine_id` is active afterwards."""
    return [
        routine.model_copy(update={"is_active": routine.id == routine_id})
        for routine in routines
    ]

"""
Routine and Exercise Repository Interfaces (Ports).

This module defines the abstract interfaces for the `routines` and
`exercises` tables. Implementations may use Supabase or other backends.

All methods raise application.exceptions.RepositoryError when the backend
call fails. No transactions are assumed across calls.
"""
from typing import Any, Dict, List, Protocol


class RoutineRepository(Protocol):
    """
    Abstract interface for routine persistence.

    Rows are plain dicts matching the `routines` table.
    """

    def list_by_user(self, user_id: str) -> List[Dict[str, Any]]:
        """
        Get all routines for a user, oldest first.

        Args:
            user_id: Authenticated user ID

        Returns:
            List of routine rows ordered by created_at ascending
        """
        ...

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Insert a routine.

        Args:
            data: Routine columns (name, training_days, rest_days, is_active, user_id)

        Returns:
            The inserted row, including its backend-assigned id
        """
        ...

    def update(self, routine_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Update a routine by ID.

        Args:
            routine_id: Routine ID
            data: Columns to update

        Returns:
            The updated row
        """
        ...

    def delete(self, routine_id: str) -> bool:
        """
        Delete a routine by ID.

        Args:
            routine_id: Routine ID

        Returns:
            True if a row was deleted
        """
        ...

    def set_active(self, user_id: str, routine_id: str) -> None:
        """
        Make `routine_id` the user's only active routine.

        Implementations must do this in a single atomic operation so a user
        never ends up with zero or two active routines after a failure.

        Args:
            user_id: Authenticated user ID
            routine_id: Routine to activate
        """
        ...


class ExerciseRepository(Protocol):
    """
    Abstract interface for exercise persistence.

    Rows are plain dicts matching the `exercises` table.
    """

    def list_by_user(self, user_id: str) -> List[Dict[str, Any]]:
        """
        Get all exercises for a user across every routine.

        Args:
            user_id: Authenticated user ID

        Returns:
            List of exercise rows
        """
        ...

    def insert_many(self, rows: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """
        Insert several exercises in one call.

        Args:
            rows: Exercise rows (routine_id, user_id, name, sets, reps, weight, day, type)

        Returns:
            The inserted rows, in input order, with backend-assigned ids
        """
        ...

    def delete(self, exercise_id: str) -> bool:
        """
        Delete a single exercise by ID.

        Returns:
            True if a row was deleted
        """
        ...

    def delete_by_routine(self, routine_id: str) -> int:
        """
        Delete every exercise belonging to a routine.

        Args:
            routine_id: Parent routine ID

        Returns:
            Number of rows deleted
        """
        ...

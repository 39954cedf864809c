"""
Supabase implementation of ExerciseRepository.

Exercises are stored flat in the `exercises` table and linked to their
routine by `routine_id`; there is no cascade, so callers delete a routine's
exercises explicitly.
"""
import logging
from typing import Any, Dict, List

from supabase import Client

from application.exceptions import RepositoryError

logger = logging.getLogger(__name__)


class SupabaseExerciseRepository:
    """
    Supabase implementation of ExerciseRepository protocol.

    The client is injected via constructor for testability.
    """

    def __init__(self, client: Client):
        self._client = client

    def list_by_user(self, user_id: str) -> List[Dict[str, Any]]:
        """Get all exercises for a user across every routine."""
        try:
            result = (
                self._client.table("exercises")
                .select("*")
                .eq("user_id", user_id)
                .execute()
            )
            return result.data or []
        except Exception as e:
            raise RepositoryError(f"Failed to fetch exercises for user {user_id}: {e}") from e

    def insert_many(self, rows: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Insert several exercises in one call and return the inserted rows."""
        if not rows:
            return []
        try:
            result = self._client.table("exercises").insert(rows).execute()
        except Exception as e:
            raise RepositoryError(f"Failed to insert {len(rows)} exercise(s): {e}") from e

        inserted = result.data or []
        if len(inserted) != len(rows):
            logger.warning(f"Inserted {len(rows)} exercise(s) but backend returned {len(inserted)} row(s)")
        return inserted

    def delete(self, exercise_id: str) -> bool:
        """Delete a single exercise by ID."""
        try:
            result = self._client.table("exercises").delete().eq("id", exercise_id).execute()
        except Exception as e:
            raise RepositoryError(f"Failed to delete exercise {exercise_id}: {e}") from e
        return bool(result.data)

    def delete_by_routine(self, routine_id: str) -> int:
        """Delete every exercise belonging to a routine; returns the count deleted."""
        try:
            result = (
                self._client.table("exercises")
                .delete()
                .eq("routine_id", routine_id)
                .execute()
            )
        except Exception as e:
            raise RepositoryError(f"Failed to delete exercises for routine {routine_id}: {e}") from e
        return len(result.data or [])

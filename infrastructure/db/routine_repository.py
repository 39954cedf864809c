"""
Supabase implementation of RoutineRepository.

All Supabase query logic for the `routines` table is encapsulated here.
Every failure is re-raised as RepositoryError so use cases can report it
without knowing about the client library.
"""
import logging
from typing import Any, Dict, List

from supabase import Client

from application.exceptions import RepositoryError

logger = logging.getLogger(__name__)

SET_ACTIVE_ROUTINE_RPC = "set_active_routine"


class SupabaseRoutineRepository:
    """
    Supabase implementation of RoutineRepository protocol.

    The client is injected via constructor for testability.
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
        """
        self._client = client

    def list_by_user(self, user_id: str) -> List[Dict[str, Any]]:
        """Get all routines for a user, oldest first."""
        try:
            result = (
                self._client.table("routines")
                .select("*")
                .eq("user_id", user_id)
                .order("created_at")
                .execute()
            )
            return result.data or []
        except Exception as e:
            raise RepositoryError(f"Failed to fetch routines for user {user_id}: {e}") from e

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Insert a routine and return the inserted row."""
        try:
            result = self._client.table("routines").insert(data).execute()
        except Exception as e:
            raise RepositoryError(f"Failed to create routine: {e}") from e

        if not result.data:
            raise RepositoryError("Routine insert returned no data")
        logger.info(f"Routine created: {result.data[0].get('id')}")
        return result.data[0]

    def update(self, routine_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """Update a routine by ID and return the updated row."""
        try:
            result = (
                self._client.table("routines")
                .update(data)
                .eq("id", routine_id)
                .execute()
            )
        except Exception as e:
            raise RepositoryError(f"Failed to update routine {routine_id}: {e}") from e

        if not result.data:
            raise RepositoryError(f"Routine {routine_id} not found for update")
        logger.info(f"Routine updated: {routine_id}")
        return result.data[0]

    def delete(self, routine_id: str) -> bool:
        """Delete a routine by ID."""
        try:
            result = self._client.table("routines").delete().eq("id", routine_id).execute()
        except Exception as e:
            raise RepositoryError(f"Failed to delete routine {routine_id}: {e}") from e
        return bool(result.data)

    def set_active(self, user_id: str, routine_id: str) -> None:
        """
        Make `routine_id` the user's only active routine.

        Uses a PostgreSQL function that sets `is_active = (id = routine_id)`
        for all of the user's routines in one statement, so a failure never
        leaves the user with zero or several active routines.

        Raises:
            RepositoryError: If the RPC call fails or the routine is not the user's
        """
        try:
            response = self._client.rpc(
                SET_ACTIVE_ROUTINE_RPC,
                {
                    "p_user_id": user_id,
                    "p_routine_id": routine_id,
                },
            ).execute()
        except Exception as e:
            raise RepositoryError(f"Atomic routine activation failed: {e}") from e

        if response.data is False:
            raise RepositoryError(f"Routine {routine_id} does not belong to user {user_id}")

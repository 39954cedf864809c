"""
Infrastructure Database Layer.

This package provides Supabase-backed implementations of the repository interfaces
defined in application.ports. These implementations are injected into the use
cases for clean separation of concerns and testability.

Usage:
    from backend.database import get_supabase_client
    from infrastructure.db import (
        SupabaseRoutineRepository,
        SupabaseExerciseRepository,
    )

    client = get_supabase_client()

    # Instantiate repositories with injected client
    routine_repo = SupabaseRoutineRepository(client)
    exercise_repo = SupabaseExerciseRepository(client)
"""

from infrastructure.db.exercise_repository import SupabaseExerciseRepository
from infrastructure.db.routine_repository import SupabaseRoutineRepository

__all__ = [
    # Routine persistence
    "SupabaseRoutineRepository",

    # Exercise persistence
    "SupabaseExerciseRepository",
]

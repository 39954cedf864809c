"""
Infrastructure layer for the workout tracker.

This package contains concrete implementations of the application ports:
- db/: Supabase database implementations
- storage/: local key-value storage (device storage analogue)
"""

# Re-export implementations for convenient access
from infrastructure.db import (
    SupabaseExerciseRepository,
    SupabaseRoutineRepository,
)
from infrastructure.storage import JsonFileKeyValueStore

__all__ = [
    "SupabaseRoutineRepository",
    "SupabaseExerciseRepository",
    "JsonFileKeyValueStore",
]

"""
Repository Interfaces (Ports) for the workout tracker.

This package defines abstract interfaces that decouple application logic
from infrastructure (Supabase, local device storage). Implementations are
provided in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the application needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import RoutineRepository, ExerciseRepository

    class RoutineService:
        def __init__(self, routine_repo: RoutineRepository):
            self.routine_repo = routine_repo
"""

# Routine / exercise persistence
from application.ports.routine_repository import (
    ExerciseRepository,
    RoutineRepository,
)

# Local device storage
from application.ports.key_value_store import KeyValueStore

__all__ = [
    # Routines
    "RoutineRepository",
    "ExerciseRepository",
    # Local storage
    "KeyValueStore",
]

"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of the application ports
for fast, isolated testing. No database or device storage required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Failure injection (fail_on / fail_writes) for error paths
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeRoutineRepository, create_routine_repos

    # Direct instantiation
    repo = FakeRoutineRepository()
    repo.seed([{"id": "r1", "user_id": "user1", "name": "PPL"}])

    # Factory function with pre-populated data
    routine_repo, exercise_repo = create_routine_repos(user_id="user1", num_routines=2)
"""
from typing import Tuple

from tests.fakes.key_value_store import InMemoryKeyValueStore
from tests.fakes.routine_repository import FakeExerciseRepository, FakeRoutineRepository


# =============================================================================
# Factory Functions
# =============================================================================


def create_routine_repos(
    *,
    user_id: str = "test_user",
    num_routines: int = 0,
) -> Tuple[FakeRoutineRepository, FakeExerciseRepository]:
    """
    Create fake routine/exercise repositories with optional sample data.

    Each generated routine has a Monday "Squat" and a Wednesday "Bench Press";
    the first routine is active.

    Args:
        user_id: User ID for generated rows
        num_routines: Number of sample routines to create

    Returns:
        (routine_repo, exercise_repo)
    """
    routine_repo = FakeRoutineRepository()
    exercise_repo = FakeExerciseRepository()

    for i in range(num_routines):
        routine_id = f"routine-{i + 1}"
        routine_repo.seed([{
            "id": routine_id,
            "user_id": user_id,
            "name": f"Test Routine {i + 1}",
            "is_active": i == 0,
            "training_days": 2,
            "rest_days": 5,
        }])
        exercise_repo.seed([
            {
                "routine_id": routine_id,
                "user_id": user_id,
                "name": "Squat",
                "sets": 5,
                "reps": 5,
                "weight": 100,
                "day": "Monday",
                "type": "strength",
            },
            {
                "routine_id": routine_id,
                "user_id": user_id,
                "name": "Bench Press",
                "sets": 3,
                "reps": "8-12",
                "weight": 60,
                "day": "Wednesday",
                "type": "strength",
            },
        ])

    return routine_repo, exercise_repo


__all__ = [
    # Fakes
    "FakeRoutineRepository",
    "FakeExerciseRepository",
    "InMemoryKeyValueStore",
    # Factories
    "create_routine_repos",
]

"""
Application use cases for the workout tracker.

This package contains application-level use cases that orchestrate domain logic
and coordinate between ports/adapters. Use cases are the entry points for
business operations and contain the application's workflow logic.

- Use cases orchestrate domain objects and repository ports
- Dependencies are injected via constructors for testability
- Use cases return result dataclasses carrying domain models or a
  user-facing error message; they do not raise on backend failures

Usage:
    from application.use_cases import (
        LoadRoutinesUseCase,
        SaveRoutineUseCase,
        EmptyDayResolution,
    )

    load = LoadRoutinesUseCase(routine_repo=routine_repo, exercise_repo=exercise_repo)
    result = load.execute(user_id="user-123")

    save = SaveRoutineUseCase(routine_repo=routine_repo, exercise_repo=exercise_repo)
    result = save.execute(schedule, name="Push Pull Legs", user_id="user-123")
    if result.needs_resolution:
        result = save.execute(
            schedule,
            name="Push Pull Legs",
            user_id="user-123",
            resolution=EmptyDayResolution.MARK_AS_REST,
        )
"""

from application.use_cases.delete_routine import (
    DELETE_ERROR_MESSAGE,
    DeleteRoutineResult,
    DeleteRoutineUseCase,
    remove_routine,
)
from application.use_cases.export_routines import (
    ExportRoutinesUseCase,
    RoutineExport,
)
from application.use_cases.load_routines import (
    LOAD_ERROR_MESSAGE,
    LoadRoutinesResult,
    LoadRoutinesUseCase,
)
from application.use_cases.save_routine import (
    SAVE_ERROR_MESSAGE,
    EmptyDayResolution,
    SaveRoutineResult,
    SaveRoutineUseCase,
    merge_saved_routine,
)
from application.use_cases.session_progress import WorkoutSession
from application.use_cases.set_active_routine import (
    SET_ACTIVE_ERROR_MESSAGE,
    SetActiveRoutineResult,
    SetActiveRoutineUseCase,
    apply_active,
)

__all__ = [
    # LoadRoutines
    "LoadRoutinesUseCase",
    "LoadRoutinesResult",
    "LOAD_ERROR_MESSAGE",
    # SaveRoutine
    "SaveRoutineUseCase",
    "SaveRoutineResult",
    "EmptyDayResolution",
    "SAVE_ERROR_MESSAGE",
    "merge_saved_routine",
    # SetActiveRoutine
    "SetActiveRoutineUseCase",
    "SetActiveRoutineResult",
    "SET_ACTIVE_ERROR_MESSAGE",
    "apply_active",
    # DeleteRoutine
    "DeleteRoutineUseCase",
    "DeleteRoutineResult",
    "DELETE_ERROR_MESSAGE",
    "remove_routine",
    # Session
    "WorkoutSession",
    # Export
    "ExportRoutinesUseCase",
    "RoutineExport",
]

"""
Domain models for the workout tracker.

This package contains pure domain models that are independent of
infrastructure concerns (database, local storage, auth).

These models represent the core concepts:
- Routine: a user's named weekly plan, the aggregate root
- Exercise: a strength or cardio activity assigned to one weekday
- CustomSet: per-set reps/weight for custom-mode strength exercises
- Weekday: the seven fixed days of a training week
- WeightUnit / WeightData: kg/lbs units and entered weights

Usage:
    >>> from domain.models import Routine, Exercise, Weekday

    >>> routine = Routine(
    ...     name="Push Pull Legs",
    ...     exercises=[
    ...         Exercise(name="Squat", sets=5, reps=5, weight=100, day=Weekday.MONDAY),
    ...     ],
    ... )

    >>> json_str = routine.model_dump_json(indent=2)
    >>> routine = Routine.model_validate_json(json_str)
"""

from domain.models.exercise import (
    CustomSet,
    Exercise,
    ExerciseMode,
    ExerciseType,
    generate_exercise_id,
)
from domain.models.routine import Routine
from domain.models.weekday import DAYS_OF_WEEK, Weekday
from domain.models.weight import (
    DEFAULT_WEIGHT_UNIT,
    KG_TO_LBS,
    WeightData,
    WeightUnit,
)

__all__ = [
    # Main entities
    "Routine",
    "Exercise",
    "CustomSet",
    "WeightData",
    # Enums
    "ExerciseType",
    "ExerciseMode",
    "Weekday",
    "WeightUnit",
    # Constants and helpers
    "DAYS_OF_WEEK",
    "DEFAULT_WEIGHT_UNIT",
    "KG_TO_LBS",
    "generate_exercise_id",
]

"""
Domain layer for the workout tracker.

This package contains pure domain models and logic that are independent of
infrastructure concerns (database, local storage, authentication).
"""

from domain.models import (
    CustomSet,
    Exercise,
    ExerciseMode,
    ExerciseType,
    Routine,
    Weekday,
    WeightData,
    WeightUnit,
)

__all__ = [
    "CustomSet",
    "Exercise",
    "ExerciseMode",
    "ExerciseType",
    "Routine",
    "Weekday",
    "WeightData",
    "WeightUnit",
]

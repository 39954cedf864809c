"""Backend services for the workout tracker."""

from backend.services.exercise_suggestions import (
    FALLBACK_EXERCISES,
    ROUTINES_CACHE_KEY,
    ExerciseSuggestionService,
)
from backend.services.local_data import FIRST_RUN_KEY, reset_local_data
from backend.services.weight_unit_service import (
    WEIGHT_UNIT_KEY,
    WeightUnitService,
    get_weight_unit_preference,
    save_weight_unit_preference,
)

__all__ = [
    "ExerciseSuggestionService",
    "FALLBACK_EXERCISES",
    "ROUTINES_CACHE_KEY",
    "FIRST_RUN_KEY",
    "reset_local_data",
    "WeightUnitService",
    "WEIGHT_UNIT_KEY",
    "get_weight_unit_preference",
    "save_weight_unit_preference",
]

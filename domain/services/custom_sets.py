"""
Helpers for custom-mode strength exercises (individual reps/weight per set).

Set values are kept as the text the user typed; these helpers parse them
leniently (like the weight converter) when they need numbers.
"""

import re
from dataclasses import dataclass
from typing import List, Optional, Sequence

from domain.models import CustomSet, Exercise, ExerciseMode
from domain.services.weight_converter import format_number, parse_weight

DEFAULT_SET_COUNT = 3
DEFAULT_REPS = "12"
DEFAULT_WEIGHT = "60"

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _parse_reps(value: str) -> Optional[int]:
    """Leading integer of a reps value ("8-12" -> 8), None if there is none."""
    match = _INT_PREFIX.match(value or "")
    return int(match.group(1)) if match else None


def create_default_custom_sets(reps: str = DEFAULT_REPS, weight: str = DEFAULT_WEIGHT) -> List[CustomSet]:
    return [CustomSet(reps=reps, weight=weight) for _ in range(DEFAULT_SET_COUNT)]


def convert_quick_to_custom(exercise: Exercise) -> Exercise:
    """Expand sets x reps x weight into one CustomSet per set."""
    reps = str(exercise.reps) if exercise.reps is not None else DEFAULT_REPS
    weight = format_number(exercise.weight)
    sets = exercise.sets or DEFAULT_SET_COUNT
    return exercise.model_copy(
        update={
            "exercise_mode": ExerciseMode.CUSTOM,
            "custom_sets": [CustomSet(reps=reps, weight=weight) for _ in range(sets)],
        }
    )


def convert_custom_to_quick(exercise: Exercise) -> Exercise:
    """Collapse custom sets back to quick mode using the first set's values."""
    if not exercise.custom_sets:
        return Exercise.model_validate(
            {
                **exercise.model_dump(),
                "exercise_mode": ExerciseMode.QUICK,
                "sets": DEFAULT_SET_COUNT,
                "reps": DEFAULT_REPS,
                "weight": DEFAULT_WEIGHT,
            }
        )

    first = exercise.custom_sets[0]
    reps = _parse_reps(first.reps)
    return Exercise.model_validate(
        {
            **exercise.model_dump(),
            "exercise_mode": ExerciseMode.QUICK,
            "sets": len(exercise.custom_sets),
            "reps": reps if reps and reps > 0 else DEFAULT_REPS,
            "weight": max(parse_weight(first.weight), 0.0),
        }
    )


def calculate_custom_volume(custom_sets: Sequence[CustomSet]) -> float:
    """Total volume: sum of reps x weight over all sets."""
    total = 0.0
    for custom_set in custom_sets or []:
        reps = _parse_reps(custom_set.reps) or 0
        total += reps * parse_weight(custom_set.weight)
    return total


def _range_text(values: List[float]) -> str:
    unique = sorted(set(values))
    if len(unique) == 1:
        return format_number(unique[0])
    return f"{format_number(unique[0])}-{format_number(unique[-1])}"


def custom_sets_display_text(custom_sets: Sequence[CustomSet], weight_unit: str = "kg") -> str:
    """
    Summary line for a list of sets.

    Identical sets: "3 sets • 10 reps • 60 kg"
    Mixed sets:     "3 sets • 8-12 reps • 60-70 kg"
    """
    if not custom_sets:
        return ""

    count = len(custom_sets)
    first = custom_sets[0]
    if all(s.reps == first.reps and s.weight == first.weight for s in custom_sets):
        return f"{count} sets • {first.reps} reps • {first.weight} {weight_unit}"

    reps_range = _range_text([_parse_reps(s.reps) or 0 for s in custom_sets])
    weight_range = _range_text([parse_weight(s.weight) for s in custom_sets])
    return f"{count} sets • {reps_range} reps • {weight_range} {weight_unit}"


@dataclass
class CustomSetsValidation:
    """Outcome of validate_custom_sets."""

    valid: bool
    error: Optional[str] = None


def validate_custom_sets(custom_sets: Optional[Sequence[CustomSet]]) -> CustomSetsValidation:
    """Every set needs positive reps; a weight, if given, must be numeric."""
    if not custom_sets:
        return CustomSetsValidation(valid=False, error="At least one set is required")

    for index, custom_set in enumerate(custom_sets, start=1):
        reps = _parse_reps(custom_set.reps)
        if reps is None or reps <= 0:
            return CustomSetsValidation(
                valid=False, error=f"Set {index}: Reps must be a positive number"
            )
        if custom_set.weight and not re.match(r"\s*[+-]?(\d|\.\d)", custom_set.weight):
            return CustomSetsValidation(
                valid=False, error=f"Set {index}: Weight must be a valid number"
            )

    return CustomSetsValidation(valid=True)


def add_set(custom_sets: Optional[Sequence[CustomSet]], new_set: Optional[CustomSet] = None) -> List[CustomSet]:
    """Append a set; without an explicit set, the last set's values are repeated."""
    sets = list(custom_sets or [])
    if new_set is not None:
        return sets + [new_set]
    if sets:
        last = sets[-1]
        return sets + [CustomSet(reps=last.reps, weight=last.weight)]
    return sets + [CustomSet()]


def remove_set(custom_sets: List[CustomSet], index: int) -> List[CustomSet]:
    """Drop the set at `index`; out-of-range indexes leave the list unchanged."""
    if not custom_sets or index < 0 or index >= len(custom_sets):
        return custom_sets
    return [s for i, s in enumerate(custom_sets) if i != index]


def update_set(custom_sets: List[CustomSet], index: int, **changes: str) -> List[CustomSet]:
    """Replace fields of the set at `index`; out-of-range indexes are ignored."""
    if not custom_sets or index < 0 or index >= len(custom_sets):
        return custom_sets
    updated = list(custom_sets)
    updated[index] = updated[index].model_copy(update=changes)
    return updated

"""
Converters: Database row format <-> domain Routine / Exercise.

Provides bidirectional conversion between Supabase rows and the domain
models.

Database schema (routines table):
- id, user_id, name, is_active, training_days, rest_days, created_at

Database schema (exercises table):
- id, routine_id, user_id, name, sets, reps, weight, day, type

Cardio duration/distance, notes, custom sets and the completion/PR flags
have no backend columns; they live only on the client.
"""

import logging
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from pydantic import ValidationError

from domain.models import Exercise, ExerciseType, Routine

logger = logging.getLogger(__name__)


def _parse_datetime(value: Any) -> Optional[datetime]:
    """Parse datetime from various formats."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        try:
            if value.endswith("Z"):
                value = value[:-1] + "+00:00"
            return datetime.fromisoformat(value)
        except ValueError:
            return None
    return None


def _positive_or_none(value: Any) -> Any:
    """Backend stores 0 for "not set"; the domain uses None."""
    if value in (None, "", 0, "0"):
        return None
    return value


def db_row_to_exercise(row: Dict[str, Any]) -> Exercise:
    """
    Convert an exercises row to an Exercise.

    Raises:
        ValidationError: If the row cannot form a valid exercise.
    """
    return Exercise(
        id=row.get("id"),
        routine_id=row.get("routine_id"),
        name=row.get("name") or "Unnamed Exercise",
        type=row.get("type") or ExerciseType.STRENGTH,
        day=row.get("day"),
        sets=_positive_or_none(row.get("sets")),
        reps=_positive_or_none(row.get("reps")),
        weight=row.get("weight") or 0,
    )


def exercise_to_db_row(exercise: Exercise, *, routine_id: str, user_id: str) -> Dict[str, Any]:
    """Convert an Exercise to an exercises row for insert."""
    return {
        "routine_id": routine_id,
        "user_id": user_id,
        "name": exercise.name,
        "sets": exercise.sets or 0,
        "reps": exercise.reps or 0,
        "weight": exercise.weight or 0,
        "day": exercise.day.value if exercise.day else None,
        "type": exercise.type.value,
    }


def db_row_to_routine(row: Dict[str, Any], exercises: Optional[List[Exercise]] = None) -> Routine:
    """Convert a routines row (plus its exercises) to a Routine."""
    return Routine(
        id=row.get("id"),
        user_id=row.get("user_id"),
        name=row.get("name") or "Untitled Routine",
        is_active=bool(row.get("is_active")),
        training_days=row.get("training_days") or 0,
        rest_days=row.get("rest_days") or 0,
        created_at=_parse_datetime(row.get("created_at")),
        exercises=exercises or [],
    )


def routine_to_db_row(routine: Routine, *, user_id: str) -> Dict[str, Any]:
    """Convert a Routine to a routines row for insert/update."""
    return {
        "name": routine.name,
        "training_days": routine.training_days,
        "rest_days": routine.rest_days,
        "is_active": routine.is_active,
        "user_id": user_id,
    }


def combine_routines(
    routine_rows: Iterable[Dict[str, Any]],
    exercise_rows: Iterable[Dict[str, Any]],
) -> List[Routine]:
    """
    Attach exercise rows to their routines.

    Routine order is preserved. Exercise rows that fail validation are
    skipped with a warning rather than failing the whole load.
    """
    by_routine: Dict[str, List[Exercise]] = {}
    for row in exercise_rows:
        try:
            exercise = db_row_to_exercise(row)
        except ValidationError as e:
            logger.warning(f"Skipping malformed exercise row {row.get('id')}: {e}")
            continue
        if exercise.routine_id is not None:
            by_routine.setdefault(exercise.routine_id, []).append(exercise)

    routines: List[Routine] = []
    for row in routine_rows:
        routine_id = str(row.get("id"))
        routines.append(db_row_to_routine(row, by_routine.get(routine_id, [])))
    return routines

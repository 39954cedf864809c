"""
Unit tests for domain/converters/db_converters.py

Tests for:
- Row -> model conversion, including backend "0 means unset" values
- Model -> row conversion writing only backend columns
- Combining routine and exercise rows
"""

from datetime import datetime, timezone

import pytest

from domain.converters import (
    combine_routines,
    db_row_to_exercise,
    db_row_to_routine,
    exercise_to_db_row,
    routine_to_db_row,
)
from domain.models import CustomSet, Exercise, ExerciseMode, ExerciseType, Routine, Weekday


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def exercise_row():
    return {
        "id": 11,
        "routine_id": 3,
        "user_id": "user-1",
        "name": "Bench Press",
        "sets": 3,
        "reps": "8-12",
        "weight": 60,
        "day": "Monday",
        "type": "strength",
    }


@pytest.fixture
def routine_row():
    return {
        "id": 3,
        "user_id": "user-1",
        "name": "Push Day",
        "is_active": True,
        "training_days": 1,
        "rest_days": 6,
        "created_at": "2024-03-01T10:00:00Z",
    }


@pytest.mark.unit
class TestExerciseRows:
    def test_row_to_exercise(self, exercise_row):
        exercise = db_row_to_exercise(exercise_row)

        assert exercise.id == "11"
        assert exercise.routine_id == "3"
        assert exercise.day == Weekday.MONDAY
        assert exercise.type == ExerciseType.STRENGTH
        assert exercise.reps == "8-12"
        assert exercise.weight == 60

    def test_cardio_row_with_zero_placeholders(self):
        exercise = db_row_to_exercise(
            {"id": "e", "routine_id": "r", "name": "Running", "sets": 0, "reps": 0,
             "weight": None, "day": "Tuesday", "type": "cardio"}
        )
        assert exercise.sets is None
        assert exercise.reps is None
        assert exercise.weight == 0
        assert exercise.is_cardio

    def test_exercise_to_row_writes_only_backend_columns(self):
        exercise = Exercise(
            name="Bench",
            sets=3,
            reps=10,
            weight=62.5,
            day=Weekday.FRIDAY,
            notes="pause reps",
            exercise_mode=ExerciseMode.CUSTOM,
            custom_sets=[CustomSet(reps="10", weight="62.5")],
            is_completed=True,
            is_pr=True,
        )
        row = exercise_to_db_row(exercise, routine_id="r1", user_id="u1")

        assert row == {
            "routine_id": "r1",
            "user_id": "u1",
            "name": "Bench",
            "sets": 3,
            "reps": 10,
            "weight": 62.5,
            "day": "Friday",
            "type": "strength",
        }

    def test_unset_strength_values_are_written_as_zero(self):
        row = exercise_to_db_row(
            Exercise(name="Running", type=ExerciseType.CARDIO, day="Sunday"),
            routine_id="r1",
            user_id="u1",
        )
        assert (row["sets"], row["reps"], row["weight"]) == (0, 0, 0)
        assert row["type"] == "cardio"


@pytest.mark.unit
class TestRoutineRows:
    def test_row_to_routine(self, routine_row):
        routine = db_row_to_routine(routine_row)

        assert routine.id == "3"
        assert routine.is_active is True
        assert routine.created_at == datetime(2024, 3, 1, 10, 0, tzinfo=timezone.utc)
        assert routine.exercises == []

    def test_routine_to_row(self):
        routine = Routine(name="Legs", is_active=True, training_days=2, rest_days=5)
        assert routine_to_db_row(routine, user_id="u1") == {
            "name": "Legs",
            "training_days": 2,
            "rest_days": 5,
            "is_active": True,
            "user_id": "u1",
        }

    def test_combine_attaches_exercises_and_preserves_order(self, routine_row, exercise_row):
        second = {**routine_row, "id": 4, "name": "Pull Day", "is_active": False}
        other = {**exercise_row, "id": 12, "routine_id": 4, "name": "Row"}

        routines = combine_routines([routine_row, second], [exercise_row, other])

        assert [r.name for r in routines] == ["Push Day", "Pull Day"]
        assert [e.name for e in routines[0].exercises] == ["Bench Press"]
        assert [e.name for e in routines[1].exercises] == ["Row"]

    def test_combine_skips_malformed_exercise_rows(self, routine_row, exercise_row):
        broken = {**exercise_row, "id": 99, "reps": "lots"}
        routines = combine_routines([routine_row], [exercise_row, broken])
        assert [e.id for e in routines[0].exercises] == ["11"]

    def test_routine_without_exercises(self, routine_row):
        (routine,) = combine_routines([routine_row], [])
        assert routine.exercises == []

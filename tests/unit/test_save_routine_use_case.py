"""
Unit tests for SaveRoutineUseCase.

Tests for:
- Create (new routine) and update (existing routine) paths
- Validation and empty-training-day blocking
- Atomic activation and exercise replacement
- Backend failure reporting
"""

import pytest

from application.use_cases import (
    SAVE_ERROR_MESSAGE,
    EmptyDayResolution,
    SaveRoutineResult,
    SaveRoutineUseCase,
    merge_saved_routine,
)
from domain.models import Exercise, ExerciseType, Routine, Weekday
from domain.services import DaySchedule
from tests.fakes import FakeExerciseRepository, FakeRoutineRepository


USER_ID = "user-123"


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def routine_repo() -> FakeRoutineRepository:
    """Create a fresh fake routine repository."""
    return FakeRoutineRepository()


@pytest.fixture
def exercise_repo() -> FakeExerciseRepository:
    """Create a fresh fake exercise repository."""
    return FakeExerciseRepository()


@pytest.fixture
def use_case(routine_repo, exercise_repo) -> SaveRoutineUseCase:
    """Create SaveRoutineUseCase with fake dependencies."""
    return SaveRoutineUseCase(routine_repo=routine_repo, exercise_repo=exercise_repo)


@pytest.fixture
def schedule() -> DaySchedule:
    """Monday strength and Thursday cardio."""
    schedule = DaySchedule.empty()
    schedule.add_exercise(Weekday.MONDAY, Exercise(id="local-1", name="Squat", sets=5, reps=5, weight=100))
    schedule.add_exercise(Weekday.THURSDAY, Exercise(id="local-2", name="Running", type=ExerciseType.CARDIO))
    return schedule


@pytest.fixture
def existing(routine_repo, exercise_repo):
    """An active routine already stored for the user, with one exercise."""
    routine_repo.seed([{
        "id": "r-existing",
        "user_id": USER_ID,
        "name": "Old Name",
        "is_active": True,
        "training_days": 1,
        "rest_days": 6,
    }])
    exercise_repo.seed([{
        "id": "old-ex",
        "routine_id": "r-existing",
        "user_id": USER_ID,
        "name": "Deadlift",
        "sets": 1,
        "reps": 5,
        "weight": 180,
        "day": "Friday",
        "type": "strength",
    }])
    return "r-existing"


# =============================================================================
# Create Path Tests
# =============================================================================


class TestSaveRoutineCreate:
    """Tests for creating new routines."""

    @pytest.mark.unit
    def test_create_new_routine(self, use_case, schedule, routine_repo):
        result = use_case.execute(schedule, name="Strength Block", user_id=USER_ID)

        assert result.success is True
        assert result.is_update is False
        assert result.routine_id is not None
        assert result.routine.id == result.routine_id
        assert result.routine.name == "Strength Block"
        assert (result.routine.training_days, result.routine.rest_days) == (2, 5)

    @pytest.mark.unit
    def test_new_routine_becomes_the_only_active_one(self, use_case, schedule, routine_repo, existing):
        result = use_case.execute(schedule, name="New Plan", user_id=USER_ID)

        assert result.routine.is_active is True
        assert routine_repo.active_ids(USER_ID) == [result.routine_id]
        assert "set_active" in routine_repo.calls

    @pytest.mark.unit
    def test_exercises_are_inserted_with_backend_ids(self, use_case, schedule, exercise_repo):
        result = use_case.execute(schedule, name="Plan", user_id=USER_ID)

        stored = exercise_repo.for_routine(result.routine_id)
        assert [row["name"] for row in stored] == ["Squat", "Running"]
        assert [ex.id for ex in result.routine.exercises] == [row["id"] for row in stored]
        assert all(ex.routine_id == result.routine_id for ex in result.routine.exercises)

    @pytest.mark.unit
    def test_defaults_are_applied_to_cardio(self, use_case, schedule, exercise_repo):
        result = use_case.execute(schedule, name="Plan", user_id=USER_ID)

        running = result.routine.exercises[1]
        assert running.duration == 30
        assert running.distance == 5
        row = exercise_repo.for_routine(result.routine_id)[1]
        assert row["type"] == "cardio"
        assert row["day"] == "Thursday"

    @pytest.mark.unit
    def test_name_is_trimmed(self, use_case, schedule):
        result = use_case.execute(schedule, name="  Plan  ", user_id=USER_ID)
        assert result.routine.name == "Plan"


# =============================================================================
# Update Path Tests
# =============================================================================


class TestSaveRoutineUpdate:
    """Tests for updating existing routines."""

    @pytest.mark.unit
    def test_update_replaces_exercise_set(self, use_case, schedule, exercise_repo, existing):
        result = use_case.execute(
            schedule, name="Renamed", user_id=USER_ID, routine_id=existing, was_active=True
        )

        assert result.success is True
        assert result.is_update is True
        names = [row["name"] for row in exercise_repo.for_routine(existing)]
        assert names == ["Squat", "Running"]

    @pytest.mark.unit
    def test_update_keeps_active_status(self, use_case, schedule, routine_repo, existing):
        result = use_case.execute(
            schedule, name="Renamed", user_id=USER_ID, routine_id=existing, was_active=True
        )
        assert result.routine.is_active is True
        assert routine_repo.active_ids(USER_ID) == [existing]

    @pytest.mark.unit
    def test_update_inactive_routine_does_not_activate(self, use_case, schedule, routine_repo):
        routine_repo.seed([
            {"id": "active", "user_id": USER_ID, "name": "Current", "is_active": True},
            {"id": "other", "user_id": USER_ID, "name": "Other", "is_active": False},
        ])
        result = use_case.execute(
            schedule, name="Other v2", user_id=USER_ID, routine_id="other", was_active=False
        )

        assert result.routine.is_active is False
        assert routine_repo.active_ids(USER_ID) == ["active"]
        assert "set_active" not in routine_repo.calls

    @pytest.mark.unit
    def test_update_to_all_rest_removes_old_exercises(self, use_case, exercise_repo, existing):
        result = use_case.execute(
            DaySchedule.empty(), name="Deload", user_id=USER_ID, routine_id=existing, was_active=True
        )

        assert result.success is True
        assert exercise_repo.for_routine(existing) == []
        assert (result.routine.training_days, result.routine.rest_days) == (0, 7)


# =============================================================================
# Validation Tests
# =============================================================================


class TestSaveRoutineValidation:
    """Tests for blocking validation."""

    @pytest.mark.unit
    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_blank_name_is_rejected(self, use_case, schedule, routine_repo, exercise_repo, name):
        result = use_case.execute(schedule, name=name, user_id=USER_ID)

        assert result.success is False
        assert result.error == "Please enter a routine name"
        assert routine_repo.calls == []
        assert exercise_repo.calls == []

    @pytest.mark.unit
    def test_empty_training_day_blocks_save(self, use_case, schedule, routine_repo, exercise_repo, existing):
        schedule.set_training_day(Weekday.WEDNESDAY)
        before_routines = routine_repo.get_all()
        before_exercises = exercise_repo.get_all()
        routine_repo.calls.clear()
        exercise_repo.calls.clear()

        result = use_case.execute(schedule, name="Plan", user_id=USER_ID)

        assert result.success is False
        assert result.needs_resolution is True
        assert result.empty_training_days == [Weekday.WEDNESDAY]
        assert "Wednesday" in result.error
        assert routine_repo.calls == []
        assert exercise_repo.calls == []
        assert routine_repo.get_all() == before_routines
        assert exercise_repo.get_all() == before_exercises

    @pytest.mark.unit
    def test_add_exercises_resolution_focuses_first_empty_day(self, use_case, schedule, routine_repo):
        schedule.set_training_day(Weekday.SATURDAY)
        schedule.set_training_day(Weekday.TUESDAY)

        result = use_case.execute(
            schedule, name="Plan", user_id=USER_ID, resolution=EmptyDayResolution.ADD_EXERCISES
        )

        assert result.success is False
        assert result.needs_resolution is False
        assert result.focus_day == Weekday.TUESDAY
        assert routine_repo.calls == []

    @pytest.mark.unit
    def test_mark_as_rest_resolution_saves(self, use_case, schedule):
        schedule.set_training_day(Weekday.WEDNESDAY)

        result = use_case.execute(
            schedule, name="Plan", user_id=USER_ID, resolution=EmptyDayResolution.MARK_AS_REST
        )

        assert result.success is True
        assert schedule.is_rest_day(Weekday.WEDNESDAY)
        assert (result.routine.training_days, result.routine.rest_days) == (2, 5)


# =============================================================================
# Failure Tests
# =============================================================================


class TestSaveRoutineFailures:
    """Backend failures are reported, not raised."""

    @pytest.mark.unit
    @pytest.mark.parametrize("method", ["create", "set_active"])
    def test_routine_write_failure(self, use_case, schedule, routine_repo, method):
        routine_repo.fail_on(method)

        result = use_case.execute(schedule, name="Plan", user_id=USER_ID)

        assert isinstance(result, SaveRoutineResult)
        assert result.success is False
        assert result.error == SAVE_ERROR_MESSAGE

    @pytest.mark.unit
    def test_exercise_insert_failure(self, use_case, schedule, exercise_repo):
        exercise_repo.fail_on("insert_many")

        result = use_case.execute(schedule, name="Plan", user_id=USER_ID)

        assert result.success is False
        assert result.error == SAVE_ERROR_MESSAGE

    @pytest.mark.unit
    def test_failed_activation_keeps_previous_active_routine(self, use_case, schedule, routine_repo, existing):
        routine_repo.fail_on("set_active")

        use_case.execute(schedule, name="Plan", user_id=USER_ID)

        assert routine_repo.active_ids(USER_ID) == [existing]


@pytest.mark.unit
class TestMergeSavedRoutine:
    def test_replaces_and_deactivates_others(self):
        routines = [
            Routine(id="a", name="A", is_active=True),
            Routine(id="b", name="B"),
        ]
        saved = Routine(id="b", name="B2", is_active=True)

        merged = merge_saved_routine(routines, saved)

        assert [(r.id, r.name, r.is_active) for r in merged] == [("a", "A", False), ("b", "B2", True)]

    def test_appends_new_routine(self):
        routines = [Routine(id="a", name="A", is_active=True)]
        merged = merge_saved_routine(routines, Routine(id="c", name="C"))
        assert [r.id for r in merged] == ["a", "c"]
        assert merged[0].is_active is True

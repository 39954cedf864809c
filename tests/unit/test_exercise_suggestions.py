"""
Unit tests for backend/services/exercise_suggestions.py and local data reset.
"""

import json

import pytest

from backend.services import (
    FIRST_RUN_KEY,
    ROUTINES_CACHE_KEY,
    ExerciseSuggestionService,
    reset_local_data,
)
from domain.models import Exercise, ExerciseType, Routine
from tests.fakes import InMemoryKeyValueStore


@pytest.fixture
def active_routine():
    return Routine(
        id="r1",
        name="PPL",
        is_active=True,
        exercises=[
            Exercise(name="Bench Press", sets=3, reps="8-12", weight=80, day="Monday"),
            Exercise(name="Incline Bench Press", sets=3, reps=10, day="Monday"),
            Exercise(name="Bench Press", sets=5, reps=5, weight=90, day="Thursday"),
            Exercise(name="Deadlift", sets=1, reps=5, weight=180, day="Friday"),
        ],
    )


@pytest.mark.unit
class TestPreviousExercises:
    def test_fallback_catalogue_without_history(self):
        names = [ex.name for ex in ExerciseSuggestionService().previous_exercises()]
        assert names == ["Bench Press", "Squats", "Deadlifts", "Push-ups", "Running", "Cycling"]

    def test_unique_by_name_first_occurrence_wins(self, active_routine):
        previous = ExerciseSuggestionService().previous_exercises(active_routine)

        assert [ex.name for ex in previous] == ["Bench Press", "Incline Bench Press", "Deadlift"]
        assert previous[0].weight == 80

    def test_cached_routines_are_included(self):
        store = InMemoryKeyValueStore({
            ROUTINES_CACHE_KEY: json.dumps([
                {"name": "Old", "exercises": [{"name": "Pull-ups", "sets": 3, "reps": "6-8"}]},
            ])
        })
        previous = ExerciseSuggestionService(store).previous_exercises()
        assert [ex.name for ex in previous] == ["Pull-ups"]

    @pytest.mark.parametrize("raw", ["not json", json.dumps({"a": 1}), json.dumps([{"exercises": [{"name": ""}]}])])
    def test_bad_cache_is_ignored(self, raw):
        store = InMemoryKeyValueStore({ROUTINES_CACHE_KEY: raw})
        previous = ExerciseSuggestionService(store).previous_exercises()
        assert previous[0].name == "Bench Press"
        assert len(previous) == 6

    def test_unreadable_store_is_ignored(self):
        store = InMemoryKeyValueStore()
        store.fail_reads = True
        assert len(ExerciseSuggestionService(store).previous_exercises()) == 6

    def test_names_by_type(self):
        names = ExerciseSuggestionService().names_by_type(ExerciseType.CARDIO)
        assert names == ["Running", "Cycling"]


@pytest.mark.unit
class TestSearch:
    def test_blank_query(self, active_routine):
        service = ExerciseSuggestionService()
        assert service.search("", active_routine) == []
        assert service.search("   ", active_routine) == []

    def test_substring_matches_are_case_insensitive(self, active_routine):
        results = ExerciseSuggestionService().search("BENCH", active_routine)
        assert [ex.name for ex in results] == ["Bench Press", "Incline Bench Press"]

    def test_fuzzy_match_catches_typos(self, active_routine):
        results = ExerciseSuggestionService().search("dedlift", active_routine)
        assert [ex.name for ex in results] == ["Deadlift"]

    def test_no_match(self, active_routine):
        assert ExerciseSuggestionService().search("zzzz", active_routine) == []

    def test_limit(self, active_routine):
        results = ExerciseSuggestionService(limit=1).search("bench", active_routine)
        assert len(results) == 1


@pytest.mark.unit
class TestResetLocalData:
    def test_reset_removes_cache_and_sets_first_run(self):
        store = InMemoryKeyValueStore({ROUTINES_CACHE_KEY: "[]", "weight_unit_preference": "lbs"})

        assert reset_local_data(store) is True
        assert store.get_all() == {FIRST_RUN_KEY: "true", "weight_unit_preference": "lbs"}

    def test_reset_failure(self):
        store = InMemoryKeyValueStore()
        store.fail_writes = True
        assert reset_local_data(store) is False

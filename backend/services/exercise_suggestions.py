"""
Exercise suggestions for the "add exercise" flow.

Suggests exercises the user has already programmed (unique by name) so they
can be re-added with their previous prescription. With no history, a small
built-in catalogue is offered instead.

Search is case-insensitive substring matching first, then fuzzy matching
with rapidfuzz for typos ("bench pres", "dedlift").
"""

import json
import logging
from typing import Any, Dict, Iterable, List, Optional

from pydantic import ValidationError
from rapidfuzz import fuzz

from application.exceptions import StorageError
from application.ports import KeyValueStore
from domain.models import Exercise, ExerciseType, Routine

logger = logging.getLogger(__name__)

# Legacy local cache of routines written by older clients
ROUTINES_CACHE_KEY = "routines"

FALLBACK_EXERCISES: List[Dict[str, Any]] = [
    {"id": "e1", "name": "Bench Press", "type": "strength", "sets": 3, "reps": "8-12", "weight": 135},
    {"id": "e2", "name": "Squats", "type": "strength", "sets": 3, "reps": "8-12", "weight": 185},
    {"id": "e3", "name": "Deadlifts", "type": "strength", "sets": 3, "reps": "8-12", "weight": 225},
    {"id": "e4", "name": "Push-ups", "type": "strength", "sets": 3, "reps": "10-15", "weight": 0},
    {"id": "e5", "name": "Running", "type": "cardio", "duration": 30, "distance": 3},
    {"id": "e6", "name": "Cycling", "type": "cardio", "duration": 45, "distance": 10},
]


def fallback_exercises() -> List[Exercise]:
    return [Exercise.model_validate(row) for row in FALLBACK_EXERCISES]


def unique_by_name(exercises: Iterable[Exercise]) -> List[Exercise]:
    """First occurrence of each exercise name (case-insensitive), in order."""
    seen = set()
    unique: List[Exercise] = []
    for exercise in exercises:
        key = exercise.name.lower()
        if key in seen:
            continue
        seen.add(key)
        unique.append(exercise)
    return unique


class ExerciseSuggestionService:
    """
    Autocomplete source for exercise names.

    Usage:
        >>> suggestions = ExerciseSuggestionService(store)
        >>> [ex.name for ex in suggestions.search("bench", active_routine)]
        ['Bench Press']
    """

    def __init__(
        self,
        store: Optional[KeyValueStore] = None,
        *,
        score_cutoff: float = 0.6,
        limit: int = 10,
    ):
        """
        Args:
            store: Local storage holding the legacy routines cache (optional)
            score_cutoff: Minimum fuzzy confidence (0-1) for a fuzzy match
            limit: Maximum number of results from search()
        """
        self._store = store
        self._score_cutoff = score_cutoff
        self._limit = limit

    def previous_exercises(self, active_routine: Optional[Routine] = None) -> List[Exercise]:
        """Exercises from the active routine and the local cache, or the fallback catalogue."""
        history: List[Exercise] = []
        if active_routine is not None:
            history.extend(active_routine.exercises)
        history.extend(self._cached_exercises())

        if not history:
            return fallback_exercises()
        return unique_by_name(history)

    def search(self, query: str, active_routine: Optional[Routine] = None) -> List[Exercise]:
        """
        Find exercises whose name matches `query`.

        Substring matches come first (in history order), then fuzzy matches
        ordered by confidence. A blank query returns nothing.
        """
        needle = (query or "").strip().lower()
        if not needle:
            return []

        candidates = self.previous_exercises(active_routine)
        substring = [ex for ex in candidates if needle in ex.name.lower()]

        scored = []
        for exercise in candidates:
            if exercise in substring:
                continue
            score = fuzz.token_set_ratio(needle, exercise.name.lower()) / 100.0
            if score >= self._score_cutoff:
                scored.append((exercise, score))
        scored.sort(key=lambda pair: pair[1], reverse=True)

        results = substring + [exercise for exercise, _ in scored]
        return results[: self._limit]

    def names_by_type(self, exercise_type: ExerciseType, active_routine: Optional[Routine] = None) -> List[str]:
        return [
            ex.name for ex in self.previous_exercises(active_routine) if ex.type == exercise_type
        ]

    def _cached_exercises(self) -> List[Exercise]:
        """Best-effort read of the legacy routines cache; any problem yields []."""
        if self._store is None:
            return []
        try:
            raw = self._store.get_item(ROUTINES_CACHE_KEY)
        except StorageError as e:
            logger.warning(f"Could not read cached routines: {e}")
            return []
        if not raw:
            return []

        try:
            cached = json.loads(raw)
        except ValueError as e:
            logger.warning(f"Ignoring corrupt routines cache: {e}")
            return []
        if not isinstance(cached, list):
            return []

        exercises: List[Exercise] = []
        for routine in cached:
            if not isinstance(routine, dict):
                continue
            for row in routine.get("exercises") or []:
                try:
                    exercises.append(Exercise.model_validate(row))
                except ValidationError:
                    logger.debug(f"Skipping cached exercise {row!r}")
        return exercises

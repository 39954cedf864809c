"""
Workout session: today's view of the active routine and in-session progress.

Completion and PR flags are kept on the in-memory routines only; they are
never written to the backend and reset on the next load.
"""

import logging
from datetime import date
from typing import Dict, List, Optional

from domain.models import DAYS_OF_WEEK, Exercise, Routine, Weekday

logger = logging.getLogger(__name__)


class WorkoutSession:
    """
    In-memory session over a user's loaded routines.

    Usage:
        >>> result = LoadRoutinesUseCase(routine_repo, exercise_repo).execute(user_id)
        >>> session = WorkoutSession(result.routines, result.active_routine_id)
        >>> for exercise in session.todays_exercises():
        ...     print(exercise)
    """

    def __init__(self, routines: List[Routine], active_routine_id: Optional[str] = None):
        self.routines = list(routines)
        if active_routine_id is None:
            active = next((r for r in self.routines if r.is_active), None)
            active_routine_id = active.id if active else None
        self.active_routine_id = active_routine_id

    @property
    def active_routine(self) -> Optional[Routine]:
        for routine in self.routines:
            if routine.id == self.active_routine_id:
                return routine
        return None

    @staticmethod
    def today_name(today: Optional[date] = None) -> Weekday:
        return Weekday.from_date(today or date.today())

    def exercises_for(self, day: Weekday) -> List[Exercise]:
        routine = self.active_routine
        if routine is None:
            return []
        return routine.exercises_for_day(day)

    def todays_exercises(self, today: Optional[date] = None) -> List[Exercise]:
        return self.exercises_for(self.today_name(today))

    def is_rest_day(self, today: Optional[date] = None) -> bool:
        """
        Today is a rest day when the active routine has nothing scheduled.

        Without an active routine there is nothing to rest from, so this is
        False (the caller shows the "no active routine" state instead).
        """
        if self.active_routine is None:
            return False
        return not self.todays_exercises(today)

    def week_schedule(self) -> Dict[Weekday, List[Exercise]]:
        """Exercises per weekday for the active routine; empty lists are rest days."""
        return {day: self.exercises_for(day) for day in DAYS_OF_WEEK}

    def toggle_completion(self, exercise_id: str) -> bool:
        """
        Flip an exercise's completion flag in the active routine.

        Returns:
            True if the exercise was just marked complete, False if it was
            unmarked or not found.
        """
        exercise = self._find(exercise_id)
        if exercise is None:
            return False
        completed = not exercise.is_completed
        self._replace(exercise.model_copy(update={"is_completed": completed}))
        return completed

    def set_pr(self, exercise_id: str) -> bool:
        """Mark a personal record; returns False if the exercise is not in the active routine."""
        exercise = self._find(exercise_id)
        if exercise is None:
            return False
        self._replace(exercise.model_copy(update={"is_pr": True}))
        logger.info(f"PR recorded for {exercise.name}")
        return True

    def _find(self, exercise_id: str) -> Optional[Exercise]:
        routine = self.active_routine
        if routine is None:
            logger.warning("No active routine; ignoring progress update")
            return None
        exercise = routine.find_exercise(exercise_id)
        if exercise is None:
            logger.warning(f"Exercise {exercise_id} not found in active routine {routine.id}")
        return exercise

    def _replace(self, updated: Exercise) -> None:
        routines = []
        for routine in self.routines:
            if routine.id == self.active_routine_id:
                exercises = [updated if ex.id == updated.id else ex for ex in routine.exercises]
                routine = routine.model_copy(update={"exercises": exercises})
            routines.append(routine)
        self.routines = routines

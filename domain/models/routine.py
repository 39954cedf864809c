"""
Routine aggregate: a named weekly plan owned by a user.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from domain.models.exercise import Exercise
from domain.models.weekday import DAYS_OF_WEEK, Weekday


class Routine(BaseModel):
    """
    A user's weekly training routine.

    `training_days` and `rest_days` are derived counters; after the editor
    reconciles a routine they always sum to 7 and match which days have
    exercises. Rows written by older clients may carry stale counters, so
    the model does not enforce the sum itself (see `counts_consistent`).
    """

    id: Optional[str] = Field(default=None, description="Backend-assigned id")
    user_id: Optional[str] = None
    name: str = Field(..., min_length=1)
    is_active: bool = False
    training_days: int = Field(default=0, ge=0, le=7)
    rest_days: int = Field(default=7, ge=0, le=7)
    created_at: Optional[datetime] = None
    exercises: List[Exercise] = Field(default_factory=list)

    @field_validator("id", "user_id", mode="before")
    @classmethod
    def coerce_ids(cls, v: object) -> Optional[str]:
        return None if v is None else str(v)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        stripped = v.strip()
        if not stripped:
            raise ValueError("Routine name cannot be blank")
        return stripped

    @field_validator("training_days", "rest_days", mode="before")
    @classmethod
    def none_to_zero(cls, v: object) -> object:
        return 0 if v is None else v

    @property
    def is_new(self) -> bool:
        """True until the backend has assigned an id."""
        return self.id is None

    @property
    def total_exercises(self) -> int:
        return len(self.exercises)

    @property
    def counts_consistent(self) -> bool:
        """Counters sum to 7 and agree with the per-day exercise assignment."""
        training = sum(1 for day in DAYS_OF_WEEK if self.exercises_for_day(day))
        return (
            self.training_days + self.rest_days == 7
            and self.training_days == training
        )

    def exercises_for_day(self, day: Weekday) -> List[Exercise]:
        """Exercises assigned to `day`, in creation order."""
        return [ex for ex in self.exercises if ex.day == day]

    def find_exercise(self, exercise_id: str) -> Optional[Exercise]:
        for exercise in self.exercises:
            if exercise.id == exercise_id:
                return exercise
        return None

    def with_id(self, routine_id: str) -> "Routine":
        """Copy of this routine carrying a backend-assigned id."""
        return self.model_copy(update={"id": routine_id})

    def __str__(self) -> str:
        active = " (active)" if self.is_active else ""
        return f"{self.name}{active}: {self.training_days} training / {self.rest_days} rest"

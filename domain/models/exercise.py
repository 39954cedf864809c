"""
Exercise model for weekly routines.

An exercise is a single strength or cardio activity assigned to one weekday
of a routine. Strength exercises carry sets/reps/weight, cardio exercises
carry duration/distance. Weight is always the canonical kilogram value.
"""

import random
import re
import time
from enum import Enum
from typing import List, Optional, Tuple, Union

from pydantic import BaseModel, Field, field_validator

from domain.models.weekday import Weekday


REP_RANGE_PATTERN = re.compile(r"(\d+)\s*-\s*(\d+)")


def generate_exercise_id() -> str:
    """Client-side id for exercises that have not been persisted yet."""
    return f"{int(time.time() * 1000)}-{random.randint(0, 9999)}"


class ExerciseType(str, Enum):
    """Kind of exercise, matching the backend `type` column."""

    STRENGTH = "strength"
    CARDIO = "cardio"


class ExerciseMode(str, Enum):
    """
    How a strength exercise's sets are described.

    - QUICK: uniform sets x reps x weight
    - CUSTOM: individual reps/weight per set
    """

    QUICK = "quick"
    CUSTOM = "custom"


class CustomSet(BaseModel):
    """
    One set of a custom-mode exercise.

    Values are kept as entered (text) so partially filled forms round-trip;
    parsing happens in domain.services.custom_sets.
    """

    reps: str = ""
    weight: str = ""

    @field_validator("reps", "weight", mode="before")
    @classmethod
    def coerce_to_text(cls, v: object) -> str:
        if v is None:
            return ""
        if isinstance(v, float) and v.is_integer():
            return str(int(v))
        return str(v)


class Exercise(BaseModel):
    """
    A single exercise within a routine.

    `reps` is either a positive integer or a "min-max" range string such as
    "8-12". Completion and PR flags are session-local and never written to
    the backend.

    Examples:
        >>> Exercise(name="Bench Press", sets=3, reps="8-12", weight=60)
        >>> Exercise(name="Running", type=ExerciseType.CARDIO, duration=30, distance=5)
    """

    # Identity
    id: str = Field(default_factory=generate_exercise_id)
    routine_id: Optional[str] = Field(default=None, description="Owning routine (backend id)")
    name: str = Field(..., min_length=1, description="Exercise name")
    type: ExerciseType = Field(default=ExerciseType.STRENGTH)
    day: Optional[Weekday] = Field(default=None, description="Day the exercise is assigned to")

    # Strength prescription
    sets: Optional[int] = Field(default=None, ge=1)
    reps: Optional[Union[int, str]] = Field(default=None, description="Reps or 'min-max' range")
    weight: float = Field(default=0.0, ge=0, description="Storage weight in kilograms")
    exercise_mode: ExerciseMode = Field(default=ExerciseMode.QUICK)
    custom_sets: List[CustomSet] = Field(default_factory=list)

    # Cardio prescription
    duration: Optional[float] = Field(default=None, ge=0, description="Duration in minutes")
    distance: Optional[float] = Field(default=None, ge=0)

    notes: Optional[str] = None

    # Session-local progress
    is_completed: bool = False
    is_pr: bool = False

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: object) -> str:
        if v is None or v == "":
            return generate_exercise_id()
        return str(v)

    @field_validator("routine_id", mode="before")
    @classmethod
    def coerce_routine_id(cls, v: object) -> Optional[str]:
        return None if v is None else str(v)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        stripped = v.strip()
        if not stripped:
            raise ValueError("Exercise name cannot be blank")
        return stripped

    @field_validator("day", mode="before")
    @classmethod
    def parse_day(cls, v: object) -> Optional[Weekday]:
        return Weekday.parse(v)

    @field_validator("sets", mode="before")
    @classmethod
    def blank_sets_to_none(cls, v: object) -> object:
        if v == "":
            return None
        return v

    @field_validator("reps", mode="before")
    @classmethod
    def validate_reps(cls, v: object) -> Optional[Union[int, str]]:
        """Accept a positive whole number or a 'min-max' range of them."""
        if v is None or v == "":
            return None
        if isinstance(v, bool):
            raise ValueError("Reps must be a positive number or a range like '8-12'")
        if isinstance(v, (int, float)):
            if v <= 0 or int(v) != v:
                raise ValueError("Reps must be a positive whole number")
            return int(v)
        if isinstance(v, str):
            text = v.strip()
            if text.isdigit():
                if int(text) <= 0:
                    raise ValueError("Reps must be a positive whole number")
                return int(text)
            match = REP_RANGE_PATTERN.fullmatch(text)
            if match:
                low, high = int(match.group(1)), int(match.group(2))
                if low <= 0 or high < low:
                    raise ValueError(f"Invalid rep range '{text}'")
                return f"{low}-{high}"
        raise ValueError("Reps must be a positive number or a range like '8-12'")

    @field_validator("weight", mode="before")
    @classmethod
    def blank_weight_to_zero(cls, v: object) -> object:
        if v is None or v == "":
            return 0.0
        return v

    @property
    def is_strength(self) -> bool:
        return self.type == ExerciseType.STRENGTH

    @property
    def is_cardio(self) -> bool:
        return self.type == ExerciseType.CARDIO

    @property
    def rep_range(self) -> Optional[Tuple[int, int]]:
        """(min, max) for range-prescribed reps, None otherwise."""
        if isinstance(self.reps, str):
            low, high = self.reps.split("-")
            return int(low), int(high)
        return None

    def __str__(self) -> str:
        if self.is_cardio:
            return f"{self.name} ({self.duration or 0} min)"
        return f"{self.name} {self.sets or 0}x{self.reps or 0}"

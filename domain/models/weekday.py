"""
Weekday enumeration used to assign exercises to days of a weekly routine.
"""

from datetime import date
from enum import Enum
from typing import List, Optional


class Weekday(str, Enum):
    """The seven fixed days of a training week, Monday first."""

    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"

    @classmethod
    def parse(cls, value: object) -> Optional["Weekday"]:
        """Return the Weekday for a name like "monday", or None if unknown."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str) or not value.strip():
            return None
        normalized = value.strip().capitalize()
        try:
            return cls(normalized)
        except ValueError:
            return None

    @classmethod
    def from_date(cls, day: date) -> "Weekday":
        """Weekday a calendar date falls on."""
        return DAYS_OF_WEEK[day.weekday()]


DAYS_OF_WEEK: List[Weekday] = list(Weekday)

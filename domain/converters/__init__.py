"""
Domain converters between Supabase rows and the domain models.

All converters are pure functions with no side effects.

Examples:
    >>> from domain.converters import combine_routines, routine_to_db_row

    >>> routines = combine_routines(routine_rows, exercise_rows)
    >>> row = routine_to_db_row(routines[0], user_id="user-123")
"""

from domain.converters.db_converters import (
    combine_routines,
    db_row_to_exercise,
    db_row_to_routine,
    exercise_to_db_row,
    routine_to_db_row,
)

__all__ = [
    "combine_routines",
    "db_row_to_exercise",
    "db_row_to_routine",
    "exercise_to_db_row",
    "routine_to_db_row",
]

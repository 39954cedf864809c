"""
ExportRoutines Use Case.

Serializes the user's routines into a JSON backup document.
"""

import json
import logging
from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from domain.models import Routine

logger = logging.getLogger(__name__)

EXPORT_FILENAME_TEMPLATE = "workout_backup_{date}.json"


@dataclass
class RoutineExport:
    """A ready-to-write backup."""

    filename: str
    content: str
    routine_count: int = 0


class ExportRoutinesUseCase:
    """
    Use case for exporting routines as a JSON backup.

    The document is the routine collection as a JSON array (indent 2), with
    exercises nested under each routine. Weights are in kilograms.

    Usage:
        >>> export = ExportRoutinesUseCase().execute(routines)
        >>> Path(export.filename).write_text(export.content)
    """

    def execute(self, routines: List[Routine], today: Optional[date] = None) -> RoutineExport:
        export_date = (today or date.today()).isoformat()
        content = json.dumps(
            [routine.model_dump(mode="json") for routine in routines],
            indent=2,
        )
        logger.info(f"Exported {len(routines)} routine(s) for {export_date}")
        return RoutineExport(
            filename=EXPORT_FILENAME_TEMPLATE.format(date=export_date),
            content=content,
            routine_count=len(routines),
        )

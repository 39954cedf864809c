"""
Domain services: pure, deterministic logic over the domain models.

- weight_converter: kg/lbs conversion, display rounding and formatting
- day_schedule: rest-day / training-day reconciliation for the routine editor
- custom_sets: per-set helpers for custom-mode strength exercises
"""

from domain.services.custom_sets import (
    CustomSetsValidation,
    add_set,
    calculate_custom_volume,
    convert_custom_to_quick,
    convert_quick_to_custom,
    create_default_custom_sets,
    custom_sets_display_text,
    remove_set,
    update_set,
    validate_custom_sets,
)
from domain.services.day_schedule import DaySchedule, DayState
from domain.services.weight_converter import (
    convert_weight,
    create_weight_data,
    display_weight_with_unit,
    format_weight,
    parse_weight,
    to_display_weight,
    to_storage_weight,
)

__all__ = [
    # Custom sets
    "CustomSetsValidation",
    "add_set",
    "calculate_custom_volume",
    "convert_custom_to_quick",
    "convert_quick_to_custom",
    "create_default_custom_sets",
    "custom_sets_display_text",
    "remove_set",
    "update_set",
    "validate_custom_sets",
    # Day schedule
    "DaySchedule",
    "DayState",
    # Weight conversion
    "convert_weight",
    "create_weight_data",
    "display_weight_with_unit",
    "format_weight",
    "parse_weight",
    "to_display_weight",
    "to_storage_weight",
]

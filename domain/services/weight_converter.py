"""
Weight conversion between kilograms and pounds.

Weights are stored in kilograms. Converting kg -> lbs rounds to two decimal
places for display, while lbs -> kg keeps full precision so that a pound
value the user typed survives a storage round trip without drifting.

This is a display-layer helper, not a validator: any value that cannot be
parsed as a number is treated as 0.
"""

import math
import re
from typing import Any, Union

from domain.models.weight import KG_TO_LBS, WeightData, WeightUnit

UnitLike = Union[WeightUnit, str]

# Leading decimal number, same prefix rule as a browser's parseFloat
_NUMBER_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_weight(value: Any) -> float:
    """
    Parse a weight from user input or a stored value.

    "12.5" -> 12.5, "12.5kg" -> 12.5, "body" -> 0.0, None -> 0.0.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        match = _NUMBER_PREFIX.match(str(value))
        if not match:
            return 0.0
        number = float(match.group(1))
    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number


def round_half_up(value: float, places: int = 0) -> float:
    """Round halves away from negative infinity (JS Math.round semantics)."""
    factor = 10 ** places
    return math.floor(value * factor + 0.5) / factor


def _unit_text(unit: UnitLike) -> str:
    return unit.value if isinstance(unit, WeightUnit) else str(unit)


def convert_weight(weight: Any, from_unit: UnitLike, to_unit: UnitLike) -> float:
    """
    Convert a weight between units.

    kg -> lbs multiplies by 2.20462 and rounds to 2 decimal places.
    lbs -> kg divides by 2.20462 and is NOT rounded.
    """
    number = parse_weight(weight)
    source = WeightUnit.parse(from_unit)
    target = WeightUnit.parse(to_unit)

    if source == target:
        return number
    if source == WeightUnit.KG and target == WeightUnit.LBS:
        return round_half_up(number * KG_TO_LBS, 2)
    if source == WeightUnit.LBS and target == WeightUnit.KG:
        return number / KG_TO_LBS
    return number


def to_storage_weight(input_weight: Any, input_unit: UnitLike) -> float:
    """Convert user input to the canonical kg storage weight."""
    number = parse_weight(input_weight)
    if WeightUnit.parse(input_unit) == WeightUnit.KG:
        # kg input is stored exactly as typed
        return number
    return convert_weight(number, input_unit, WeightUnit.KG)


def to_display_weight(storage_weight: Any, display_unit: UnitLike) -> float:
    """
    Convert a kg storage weight to the display unit with smart rounding.

    Pound values within 0.1 of a whole number are shown as that whole number
    (135.0004 -> 135); everything else is rounded to one decimal place.
    """
    converted = convert_weight(storage_weight, WeightUnit.KG, display_unit)
    if WeightUnit.parse(display_unit) == WeightUnit.LBS:
        nearest = round_half_up(converted)
        if abs(converted - nearest) < 0.1:
            return nearest
    return round_half_up(converted, 1)


def format_number(value: float) -> str:
    """Render a number without a trailing '.0' for whole values."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def format_weight(weight: Any, unit: UnitLike) -> str:
    """
    Format a weight with its unit.

    Zero means "unset" (e.g. bodyweight exercises) and renders as "".
    """
    number = parse_weight(weight)
    if number == 0:
        return ""
    return f"{format_number(number)} {_unit_text(unit)}"


def display_weight_with_unit(storage_weight: Any, preferred_unit: UnitLike) -> str:
    """Format a kg storage weight in the user's preferred unit."""
    if parse_weight(storage_weight) == 0:
        return ""
    converted = convert_weight(storage_weight, WeightUnit.KG, preferred_unit)
    return f"{format_number(converted)} {_unit_text(preferred_unit)}"


def create_weight_data(input_weight: Any, input_unit: UnitLike) -> WeightData:
    """Keep the weight as entered next to its kg storage value."""
    unit = WeightUnit.parse(input_unit) or WeightUnit.KG
    number = parse_weight(input_weight)
    return WeightData(
        value=number,
        unit=unit,
        kg=to_storage_weight(number, unit),
    )

"""
Weight unit value objects.

Weights are always persisted in kilograms ("storage weight"). The user's
preferred unit only matters at the display/input boundary.
"""

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field


# Conversion constant (kg -> lbs)
KG_TO_LBS = 2.20462


class WeightUnit(str, Enum):
    """Units a user can enter or display weights in."""

    KG = "kg"
    LBS = "lbs"

    @classmethod
    def parse(cls, value: Union["WeightUnit", str, None]) -> Optional["WeightUnit"]:
        """
        Coerce a raw unit value into a WeightUnit.

        Returns:
            The matching WeightUnit, or None if the value is not a known unit.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


DEFAULT_WEIGHT_UNIT = WeightUnit.KG


class WeightData(BaseModel):
    """
    A weight as the user entered it, alongside its canonical kg value.

    Examples:
        >>> WeightData(value=135, unit=WeightUnit.LBS, kg=61.235)
    """

    value: float = Field(..., description="Weight as entered by the user")
    unit: WeightUnit = Field(..., description="Unit the user entered the weight in")
    kg: float = Field(..., description="Canonical storage weight in kilograms")

    model_config = {"frozen": True}

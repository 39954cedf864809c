"""
Weight unit preference: persistence helpers and the process-wide holder.

The preference lives in local storage under `weight_unit_preference`.
Storage failures never propagate; reads fall back to kilograms and writes
report False.
"""

import logging
from typing import Optional, Union

from application.exceptions import StorageError
from application.ports import KeyValueStore
from domain.models import DEFAULT_WEIGHT_UNIT, WeightUnit

logger = logging.getLogger(__name__)

WEIGHT_UNIT_KEY = "weight_unit_preference"


def get_weight_unit_preference(store: KeyValueStore) -> WeightUnit:
    """Read the saved unit; missing, unknown or unreadable values give the default."""
    try:
        saved = store.get_item(WEIGHT_UNIT_KEY)
    except StorageError as e:
        logger.error(f"Error getting weight unit preference: {e}")
        return DEFAULT_WEIGHT_UNIT

    unit = WeightUnit.parse(saved)
    if saved is not None and unit is None:
        logger.warning(f"Ignoring unknown weight unit preference '{saved}'")
    return unit or DEFAULT_WEIGHT_UNIT


def save_weight_unit_preference(store: KeyValueStore, unit: Union[WeightUnit, str]) -> bool:
    """Persist the unit; returns False if the unit is unknown or storage fails."""
    parsed = WeightUnit.parse(unit)
    if parsed is None:
        logger.warning(f"Refusing to save unknown weight unit '{unit}'")
        return False
    try:
        store.set_item(WEIGHT_UNIT_KEY, parsed.value)
    except StorageError as e:
        logger.error(f"Error saving weight unit preference: {e}")
        return False
    return True


class WeightUnitService:
    """
    Single holder of the user's weight unit for the running process.

    Load it once at startup and pass `service.unit` explicitly into the
    converter functions; nothing reads the preference implicitly.

    Usage:
        >>> units = WeightUnitService(store)
        >>> units.load()
        >>> to_display_weight(exercise.weight, units.unit)
    """

    def __init__(self, store: KeyValueStore):
        self._store = store
        self._unit: WeightUnit = DEFAULT_WEIGHT_UNIT
        self.loaded = False

    @property
    def unit(self) -> WeightUnit:
        return self._unit

    @property
    def is_kg(self) -> bool:
        return self._unit == WeightUnit.KG

    @property
    def is_lbs(self) -> bool:
        return self._unit == WeightUnit.LBS

    def load(self) -> WeightUnit:
        self._unit = get_weight_unit_preference(self._store)
        self.loaded = True
        return self._unit

    def change(self, unit: Union[WeightUnit, str]) -> bool:
        """
        Persist a new unit, then switch to it.

        The in-memory unit only changes if the write succeeded.
        """
        if not save_weight_unit_preference(self._store, unit):
            return False
        new_unit: Optional[WeightUnit] = WeightUnit.parse(unit)
        if new_unit is not None:
            self._unit = new_unit
        logger.info(f"Weight unit changed to {self._unit.value}")
        return True

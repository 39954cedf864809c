"""
Local (device) data reset.
"""

import logging

from application.exceptions import StorageError
from application.ports import KeyValueStore
from backend.services.exercise_suggestions import ROUTINES_CACHE_KEY

logger = logging.getLogger(__name__)

FIRST_RUN_KEY = "isFirstRun"


def reset_local_data(store: KeyValueStore) -> bool:
    """
    Drop the cached routines and flag the next launch as a first run.

    Backend data and the weight unit preference are left alone.

    Returns:
        True on success, False if local storage could not be updated
    """
    try:
        store.remove_item(ROUTINES_CACHE_KEY)
        store.set_item(FIRST_RUN_KEY, "true")
    except StorageError as e:
        logger.error(f"Error resetting local data: {e}")
        return False
    logger.info("Local data reset")
    return True

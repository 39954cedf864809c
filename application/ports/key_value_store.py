"""
Key-Value Store Interface (Port).

Local device storage: string keys to string values. Used for the weight
unit preference and the best-effort exercise suggestion cache.
"""
from typing import Optional, Protocol


class KeyValueStore(Protocol):
    """
    Abstract interface for local key-value storage.

    Implementations raise application.exceptions.StorageError on failure;
    callers decide whether to fall back to a default.
    """

    def get_item(self, key: str) -> Optional[str]:
        """Return the stored value, or None if the key is not set."""
        ...

    def set_item(self, key: str, value: str) -> None:
        """Store `value` under `key`, replacing any previous value."""
        ...

    def remove_item(self, key: str) -> None:
        """Remove `key`; removing a missing key is not an error."""
        ...

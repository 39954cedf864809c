"""
Application-layer exceptions.

These exceptions are used across application and infrastructure layers.
"""

from typing import List, Optional


class RepositoryError(Exception):
    """A backend read or write failed.

    Raised by repository implementations, wrapping the underlying client
    error. Use cases catch it, log it and report a user-facing message;
    nothing is retried.
    """

    pass


class StorageError(Exception):
    """Local device storage could not be read or written."""

    pass


class RoutineValidationError(Exception):
    """Raised when a routine fails validation before it reaches the backend."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or []

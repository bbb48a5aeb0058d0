"""The List exception hierarchy."""

from __future__ import annotations


class TheListError(Exception):
    """Base exception for all The List errors."""


class InvalidNameError(TheListError):
    """Raised when a name is empty, whitespace-only or too long."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class StoreError(TheListError):
    """Base class for failures of the backing store."""


class StoreUnavailableError(StoreError):
    """Raised when the backing medium cannot be opened or created."""


class StoreClosedError(StoreError):
    """Raised when an operation is attempted on a closed store."""


class ReadError(StoreError):
    """Raised when fetching records does not complete."""


class WriteError(StoreError):
    """Raised when an insert cannot complete or commit."""

"""Mini README: Error taxonomy shared by the ledger and its persistence layer.

Structure:
    * FinTrackError - common base so callers can catch every ledger failure.
    * ValidationError - rejected input to ``LedgerStore.add``.
    * DuplicateTransactionError - hydrated collection repeats an id.
    * PersistenceReadError - stored snapshot missing or undecodable.
    * PersistenceWriteError - the key-value backend refused a write.

None of these is fatal: callers degrade to an in-memory ledger and surface
the message to the user.
"""

from __future__ import annotations


class FinTrackError(Exception):
    """Base class for all FinTrack errors."""


class ValidationError(FinTrackError, ValueError):
    """Raised when user input cannot become a transaction."""


class PersistenceError(FinTrackError):
    """Base class for failures talking to durable storage."""


class PersistenceReadError(PersistenceError):
    """Raised or reported when the stored ledger cannot be loaded."""

    def __init__(self, message: str, *, missing: bool = False) -> None:
        super().__init__(message)
        self.missing = missing


class PersistenceWriteError(PersistenceError):
    """Raised when the backend rejects a snapshot or timestamp write."""


class DuplicateTransactionError(FinTrackError, ValueError):
    """Raised when a hydrated collection repeats a transaction id."""

"""Mini README: Persistence adapter bridging the ledger and a key-value store.

Structure:
    * TRANSACTIONS_KEY / LAST_SAVED_KEY - the two logical storage keys.
    * LoadResult - transactions plus the read error reported during load.
    * PersistenceAdapter - whole-snapshot ``load``/``save``/``last_saved``.

Every save rewrites the full collection and then the timestamp. Loads never
raise: a missing or corrupt snapshot yields an empty list and a
``PersistenceReadError`` the caller can show or ignore.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Iterable, List, Optional

from ..ledger.errors import PersistenceReadError, PersistenceWriteError
from ..ledger.models import Transaction, parse_iso, to_iso, utc_now
from ..logging_utils import get_logger
from .base import KeyValueStore
from .codec import TransactionCodec

LOGGER = get_logger(__name__)

TRANSACTIONS_KEY = "fintrack_transactions"
LAST_SAVED_KEY = "fintrack_lastSaved"


@dataclass(slots=True)
class LoadResult:
    """Outcome of hydrating the ledger from storage."""

    transactions: List[Transaction] = field(default_factory=list)
    error: Optional[PersistenceReadError] = None


class PersistenceAdapter:
    """Read and write ledger snapshots through a ``KeyValueStore``."""

    def __init__(
        self,
        backend: KeyValueStore,
        codec: Optional[TransactionCodec] = None,
        *,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.backend = backend
        self.codec = codec or TransactionCodec()
        self._clock = clock

    def load(self) -> LoadResult:
        """Return the stored transactions, or an empty list and the reason."""

        try:
            raw = self.backend.get(TRANSACTIONS_KEY)
        except OSError as error:
            LOGGER.error("Failed to read transactions from storage: %s", error)
            return LoadResult(error=PersistenceReadError(f"Storage unreadable: {error}"))
        if raw is None:
            LOGGER.info("No stored transactions found; starting with an empty ledger")
            return LoadResult(
                error=PersistenceReadError("No stored transactions found.", missing=True)
            )
        try:
            transactions = self.codec.decode(raw)
        except PersistenceReadError as error:
            LOGGER.error("Failed to read transactions from storage: %s", error)
            return LoadResult(error=error)
        LOGGER.debug("Loaded %s transactions from storage", len(transactions))
        return LoadResult(transactions=transactions)

    def save(self, transactions: Iterable[Transaction]) -> datetime:
        """Write the whole snapshot, then the last-saved stamp, and return the stamp."""

        payload = self.codec.encode(transactions)
        saved_at = self._clock()
        try:
            previous = self.backend.get(TRANSACTIONS_KEY)
            self.backend.set(TRANSACTIONS_KEY, payload)
        except OSError as error:
            LOGGER.error("Failed to save transactions: %s", error)
            raise PersistenceWriteError(f"Failed to save transactions: {error}") from error
        try:
            self.backend.set(LAST_SAVED_KEY, to_iso(saved_at).encode("utf-8"))
        except OSError as error:
            LOGGER.error("Failed to save last-saved stamp; restoring previous snapshot: %s", error)
            self._restore_snapshot(previous)
            raise PersistenceWriteError(f"Failed to save transactions: {error}") from error
        LOGGER.debug("Saved %s bytes at %s", len(payload), to_iso(saved_at))
        return saved_at

    def _restore_snapshot(self, previous: Optional[bytes]) -> None:
        """Put back the snapshot that matches the stamp still in storage."""

        try:
            if previous is None:
                self.backend.delete(TRANSACTIONS_KEY)
            else:
                self.backend.set(TRANSACTIONS_KEY, previous)
        except OSError as error:
            LOGGER.error("Could not restore previous snapshot: %s", error)

    def last_saved(self) -> Optional[datetime]:
        """Return the last successful save time, or ``None`` if never saved."""

        try:
            raw = self.backend.get(LAST_SAVED_KEY)
        except OSError as error:
            LOGGER.warning("Could not read last-saved stamp: %s", error)
            return None
        if raw is None:
            return None
        try:
            return parse_iso(raw.decode("utf-8"))
        except (UnicodeDecodeError, ValueError) as error:
            LOGGER.warning("Ignoring unreadable last-saved stamp: %s", error)
            return None

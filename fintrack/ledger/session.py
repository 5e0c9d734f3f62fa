"""Mini README: Caller-owned session tying the ledger store to persistence.

Structure:
    * MutationOutcome - result of a mutation plus any persistence warning.
    * LedgerSession - hydrates at startup and flushes after every mutation.

The session is what the interface layer talks to. It follows the recovery
rules of the error taxonomy: validation errors propagate to the caller,
read failures leave an empty ledger, and write failures keep the in-memory
change while reporting that it may not survive a restart.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from ..logging_utils import get_logger
from ..storage.adapter import PersistenceAdapter
from .errors import PersistenceReadError, PersistenceWriteError
from .models import Transaction
from .store import LedgerStore
from .summary import LedgerSummary

LOGGER = get_logger(__name__)

UNSAVED_WARNING = "Changes could not be saved and may be lost after a restart."


@dataclass(slots=True)
class MutationOutcome:
    """Describe what a mutation changed and whether it reached storage."""

    changed: bool
    transaction: Optional[Transaction] = None
    saved_at: Optional[datetime] = None
    warning: Optional[str] = None


class LedgerSession:
    """Own one ledger store and flush it through a persistence adapter."""

    def __init__(self, adapter: PersistenceAdapter, store: Optional[LedgerStore] = None) -> None:
        self.adapter = adapter
        self.store = store or LedgerStore()
        self.read_error: Optional[PersistenceReadError] = None
        self.last_saved: Optional[datetime] = None

    def start(self) -> "LedgerSession":
        """Hydrate the store from storage; read failures leave it empty."""

        result = self.adapter.load()
        self.read_error = result.error
        self.store.replace_all(result.transactions)
        self.last_saved = self.adapter.last_saved()
        LOGGER.info("Session started with %s transactions", len(self.store))
        return self

    def _flush(self) -> MutationOutcome:
        try:
            saved_at = self.adapter.save(self.store.list())
        except PersistenceWriteError as error:
            LOGGER.warning("Ledger kept in memory only: %s", error)
            return MutationOutcome(changed=True, warning=UNSAVED_WARNING)
        self.last_saved = saved_at
        return MutationOutcome(changed=True, saved_at=saved_at)

    def add(self, description: str, amount: object, type: object) -> MutationOutcome:
        """Add a transaction and flush; ``ValidationError`` propagates untouched."""

        transaction = self.store.add(description, amount, type)
        outcome = self._flush()
        outcome.transaction = transaction
        return outcome

    def remove(self, transaction_id: str) -> MutationOutcome:
        """Remove a transaction and flush; unknown ids skip the flush."""

        if not self.store.remove(transaction_id):
            return MutationOutcome(changed=False)
        return self._flush()

    def clear(self) -> MutationOutcome:
        """Empty the ledger and flush. Confirmation is the caller's job."""

        self.store.clear()
        return self._flush()

    def transactions(self, newest_first: bool = True) -> List[Transaction]:
        """Return transactions in display order."""

        transactions = self.store.list()
        if newest_first:
            transactions.reverse()
        return transactions

    def summary(self) -> LedgerSummary:
        return self.store.summary()

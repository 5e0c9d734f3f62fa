"""Mini README: Ledger data model, store, aggregation and session.

Modules:
    * models - ``Transaction`` and ``TransactionType`` plus timestamp helpers.
    * store - ``LedgerStore``, the sole mutator of ledger state.
    * summary - pure ``summarise`` aggregation.
    * session - ``LedgerSession`` flushing the store after each mutation.
    * errors - the shared error taxonomy.
"""

from .errors import (
    DuplicateTransactionError,
    FinTrackError,
    PersistenceError,
    PersistenceReadError,
    PersistenceWriteError,
    ValidationError,
)
from .models import Transaction, TransactionType
from .store import LedgerStore, generate_transaction_id
from .summary import LedgerSummary, summarise

__all__ = [
    "DuplicateTransactionError",
    "FinTrackError",
    "LedgerStore",
    "LedgerSummary",
    "PersistenceError",
    "PersistenceReadError",
    "PersistenceWriteError",
    "Transaction",
    "TransactionType",
    "ValidationError",
    "generate_transaction_id",
    "summarise",
]

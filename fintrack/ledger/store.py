"""Mini README: In-memory ledger store owning the ordered transaction list.

Structure:
    * generate_transaction_id - time-based id with a random base-36 suffix.
    * LedgerStore - validates input and performs add/remove/clear/list.

The store is the only mutator of ledger state and never persists on its
own; the owning session decides when to flush. Instances are plain objects
constructed by the caller, so tests can run any number of them side by side.
"""

from __future__ import annotations

import math
import random
import string
import time
from datetime import datetime
from typing import Callable, Iterable, List, Optional

from ..logging_utils import get_logger
from .errors import DuplicateTransactionError, ValidationError
from .models import Transaction, TransactionType, utc_now
from .summary import LedgerSummary, summarise

LOGGER = get_logger(__name__)

_BASE36 = string.digits + string.ascii_lowercase


def _to_base36(value: int) -> str:
    digits = []
    while True:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36[remainder])
        if value == 0:
            return "".join(reversed(digits))


def generate_transaction_id() -> str:
    """Return a millisecond timestamp in base 36 followed by six random characters."""

    suffix = "".join(random.choices(_BASE36, k=6))
    return _to_base36(time.time_ns() // 1_000_000) + suffix


def _parse_amount(amount: object) -> float:
    """Coerce numbers or numeric text into a positive finite magnitude."""

    if isinstance(amount, bool):
        raise ValidationError("Please enter a non-zero amount.")
    try:
        value = float(amount.strip()) if isinstance(amount, str) else float(amount)
    except (TypeError, ValueError) as error:
        raise ValidationError("Please enter a non-zero amount.") from error
    if not math.isfinite(value) or value == 0:
        raise ValidationError("Please enter a non-zero amount.")
    return abs(value)


class LedgerStore:
    """Maintain the authoritative, insertion-ordered list of transactions."""

    def __init__(
        self,
        transactions: Optional[Iterable[Transaction]] = None,
        *,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = generate_transaction_id,
    ) -> None:
        self._transactions: List[Transaction] = []
        self._ids: set[str] = set()
        self._clock = clock
        self._id_factory = id_factory
        if transactions:
            self.replace_all(transactions)
        LOGGER.debug("Ledger store initialised with %s transactions", len(self._transactions))

    def __len__(self) -> int:
        return len(self._transactions)

    def _next_id(self) -> str:
        identifier = self._id_factory()
        while identifier in self._ids:
            LOGGER.debug("Transaction id %s already taken; regenerating", identifier)
            identifier = self._id_factory()
        return identifier

    def add(self, description: str, amount: object, type: object) -> Transaction:
        """Validate input, append a new transaction and return it."""

        cleaned_description = (description or "").strip() if isinstance(description, str) else ""
        if not cleaned_description:
            raise ValidationError("Please enter a description.")
        magnitude = _parse_amount(amount)
        try:
            transaction_type = TransactionType.from_str(type)
        except ValidationError as error:
            raise ValidationError("Please select a valid type.") from error

        transaction = Transaction(
            id=self._next_id(),
            description=cleaned_description,
            amount=magnitude,
            type=transaction_type,
            date=self._clock(),
        )
        self._transactions.append(transaction)
        self._ids.add(transaction.id)
        LOGGER.info(
            "Added %s transaction %s (%.2f)", transaction.type.value, transaction.id, magnitude
        )
        return transaction

    def remove(self, transaction_id: str) -> bool:
        """Remove the transaction with ``transaction_id``; report whether one was removed."""

        if transaction_id not in self._ids:
            LOGGER.debug("Remove ignored; transaction %s not found", transaction_id)
            return False
        self._transactions = [
            transaction for transaction in self._transactions if transaction.id != transaction_id
        ]
        self._ids.discard(transaction_id)
        LOGGER.info("Removed transaction %s", transaction_id)
        return True

    def clear(self) -> None:
        """Drop every transaction."""

        LOGGER.info("Clearing %s transactions", len(self._transactions))
        self._transactions = []
        self._ids = set()

    def list(self) -> List[Transaction]:
        """Return a snapshot of the ledger, oldest first."""

        return list(self._transactions)

    def get(self, transaction_id: str) -> Transaction:
        """Retrieve a transaction, raising informative errors when missing."""

        for transaction in self._transactions:
            if transaction.id == transaction_id:
                return transaction
        raise KeyError(f"Transaction {transaction_id} not found")

    def replace_all(self, transactions: Iterable[Transaction]) -> None:
        """Swap in a hydrated collection, rejecting duplicate identifiers."""

        incoming = list(transactions)
        identifiers = [transaction.id for transaction in incoming]
        if len(set(identifiers)) != len(identifiers):
            raise DuplicateTransactionError(
                "Transaction identifiers must be unique within the ledger."
            )
        self._transactions = incoming
        self._ids = set(identifiers)

    def summary(self) -> LedgerSummary:
        """Aggregate the current ledger contents."""

        return summarise(self._transactions)

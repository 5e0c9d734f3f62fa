"""Mini README: JSON codec between transaction lists and stored bytes.

Structure:
    * TransactionCodec - ``encode``/``decode`` for the transaction collection.

The stored form is a UTF-8 JSON array of ``{id, description, amount, type,
date}`` objects with ISO-8601 dates. Decoding validates every record and
the uniqueness of ids, raising ``PersistenceReadError`` for anything that
would break the ledger invariants once loaded.
"""

from __future__ import annotations

import json
import math
from typing import Iterable, List

from ..ledger.errors import PersistenceReadError, ValidationError
from ..ledger.models import Transaction, TransactionType, parse_iso

_REQUIRED_FIELDS = ("id", "description", "amount", "type", "date")


class TransactionCodec:
    """Serialise whole ledger snapshots to and from bytes."""

    encoding = "utf-8"

    def encode(self, transactions: Iterable[Transaction]) -> bytes:
        payload = [transaction.as_dict() for transaction in transactions]
        return json.dumps(payload, allow_nan=False).encode(self.encoding)

    def decode(self, raw: bytes) -> List[Transaction]:
        try:
            payload = json.loads(raw.decode(self.encoding))
        except (UnicodeDecodeError, ValueError) as error:
            raise PersistenceReadError(f"Stored transactions are not valid JSON: {error}") from error
        if not isinstance(payload, list):
            raise PersistenceReadError("Stored transactions must be a JSON array.")

        transactions: List[Transaction] = []
        seen: set[str] = set()
        for index, record in enumerate(payload):
            transaction = self._decode_record(index, record)
            if transaction.id in seen:
                raise PersistenceReadError(f"Duplicate transaction id {transaction.id!r} in storage.")
            seen.add(transaction.id)
            transactions.append(transaction)
        return transactions

    @staticmethod
    def _decode_record(index: int, record: object) -> Transaction:
        if not isinstance(record, dict):
            raise PersistenceReadError(f"Record {index} is not an object.")
        missing = [name for name in _REQUIRED_FIELDS if name not in record]
        if missing:
            raise PersistenceReadError(f"Record {index} is missing fields: {', '.join(missing)}")

        identifier = record["id"]
        description = record["description"]
        amount = record["amount"]
        if not isinstance(identifier, str) or not identifier:
            raise PersistenceReadError(f"Record {index} has an invalid id.")
        if not isinstance(description, str):
            raise PersistenceReadError(f"Record {index} has a non-text description.")
        if isinstance(amount, bool) or not isinstance(amount, (int, float)):
            raise PersistenceReadError(f"Record {index} has a non-numeric amount.")
        if not math.isfinite(amount) or amount <= 0:
            raise PersistenceReadError(f"Record {index} has a non-positive amount.")
        try:
            transaction_type = TransactionType.from_str(record["type"])
        except ValidationError as error:
            raise PersistenceReadError(f"Record {index}: {error}") from error
        try:
            moment = parse_iso(record["date"])
        except (AttributeError, TypeError, ValueError) as error:
            raise PersistenceReadError(f"Record {index} has an invalid date.") from error

        return Transaction(
            id=identifier,
            description=description,
            amount=float(amount),
            type=transaction_type,
            date=moment,
        )

"""Mini README: Transaction data model for the FinTrack ledger.

Structure:
    * TransactionType - enum representing income versus expense entries.
    * Transaction - frozen dataclass storing a single ledger entry.
    * utc_now / to_iso / parse_iso - timestamp helpers shared with storage.

Transactions are immutable once created. Timestamps are UTC and truncated
to millisecond precision, matching the ``YYYY-MM-DDTHH:MM:SS.mmmZ`` strings
written to storage so an entry compares equal after a save/load cycle.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Dict

from .errors import ValidationError


class TransactionType(str, Enum):
    """Enumerate the supported transaction categories."""

    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def from_str(cls, value: object) -> "TransactionType":
        """Coerce arbitrary casing into a valid transaction type."""

        if isinstance(value, cls):
            return value
        try:
            normalised = str(value).strip().lower() if value is not None else ""
            return cls(normalised)
        except ValueError as error:
            raise ValidationError(f"Unsupported transaction type: {value!r}") from error


@dataclass(frozen=True, slots=True)
class Transaction:
    """Represent one recorded income or expense event."""

    id: str
    description: str
    amount: float
    type: TransactionType
    date: datetime

    def as_dict(self) -> Dict[str, object]:
        """Export the transaction using the storage/export field names."""

        return {
            "id": self.id,
            "description": self.description,
            "amount": self.amount,
            "type": self.type.value,
            "date": to_iso(self.date),
        }


def utc_now() -> datetime:
    """Return the current UTC time truncated to whole milliseconds."""

    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond - now.microsecond % 1000)


def to_iso(moment: datetime) -> str:
    """Render a timestamp as ISO-8601 with millisecond precision and a ``Z`` suffix."""

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_iso(value: str) -> datetime:
    """Parse ISO-8601 strings, accepting the ``Z`` suffix and naive values as UTC."""

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)

"""Mini README: Pure aggregation of a transaction sequence into totals.

``summarise`` walks the ledger once and returns a ``LedgerSummary``. Plain
float addition is used and no rounding happens here; presentation layers
format the values for display.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable

from .models import Transaction, TransactionType


@dataclass(frozen=True, slots=True)
class LedgerSummary:
    """Totals derived from the ledger contents."""

    total_income: float = 0.0
    total_expenses: float = 0.0

    @property
    def balance(self) -> float:
        return self.total_income - self.total_expenses

    def as_dict(self) -> Dict[str, float]:
        return {
            "total_income": self.total_income,
            "total_expenses": self.total_expenses,
            "balance": self.balance,
        }


def summarise(transactions: Iterable[Transaction]) -> LedgerSummary:
    """Sum income and expense amounts; an empty ledger yields zeros."""

    income = 0.0
    expenses = 0.0
    for transaction in transactions:
        if transaction.type is TransactionType.INCOME:
            income += transaction.amount
        else:
            expenses += transaction.amount
    return LedgerSummary(total_income=income, total_expenses=expenses)

"""Mini README: Display helpers for amounts and timestamps.

Rounding and locale-style formatting live here rather than in the ledger,
which keeps full float precision. Amounts render as US dollars with two
decimals and thousands separators.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..ledger.models import Transaction, TransactionType


def format_currency(value: float) -> str:
    """Format ``value`` as dollars, e.g. ``-$1,200.50``."""

    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def format_signed_amount(transaction: Transaction) -> str:
    """Prefix the magnitude with ``+`` for income and ``-`` for expenses."""

    prefix = "+ " if transaction.type is TransactionType.INCOME else "- "
    return prefix + format_currency(abs(transaction.amount))


def friendly_date(moment: Optional[datetime]) -> str:
    """Render a timestamp in the server's local time zone."""

    if moment is None:
        return ""
    return moment.astimezone().strftime("%d %b %Y, %H:%M:%S")

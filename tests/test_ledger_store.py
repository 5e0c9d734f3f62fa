"""Mini README: Tests covering the in-memory ledger store.

Structure:
    * add - field normalisation, id uniqueness and input rejection.
    * remove/clear - idempotent removal and unconditional clearing.
    * list - snapshots are copies, not views of internal state.
"""

from __future__ import annotations

from datetime import datetime, timezone
from itertools import cycle

import pytest

from fintrack.ledger import (
    DuplicateTransactionError,
    FinTrackError,
    LedgerStore,
    TransactionType,
    ValidationError,
    generate_transaction_id,
)

FIXED_TIME = datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc)


def test_add_appends_normalised_transaction() -> None:
    """A valid entry should be appended with a positive amount and stamped time."""

    store = LedgerStore(clock=lambda: FIXED_TIME)
    store.add("Coffee", 3.5, "expense")

    created = store.add("  Refund  ", "-12.25", " Income ")

    transactions = store.list()
    assert len(transactions) == 2
    assert transactions[-1] == created
    assert created.description == "Refund"
    assert created.amount == pytest.approx(12.25)
    assert created.type is TransactionType.INCOME
    assert created.date == FIXED_TIME
    assert created.id != transactions[0].id


@pytest.mark.parametrize(
    ("description", "amount", "kind"),
    [
        ("", 10, "income"),
        ("   ", 10, "income"),
        ("Lunch", 0, "expense"),
        ("Lunch", "0", "expense"),
        ("Lunch", float("nan"), "expense"),
        ("Lunch", "nan", "expense"),
        ("Lunch", float("inf"), "expense"),
        ("Lunch", "twelve", "expense"),
        ("Lunch", None, "expense"),
        ("Lunch", True, "expense"),
        ("Lunch", 12, "transfer"),
        ("Lunch", 12, ""),
    ],
)
def test_add_rejects_invalid_input(description, amount, kind) -> None:
    """Invalid input should raise and leave the ledger untouched."""

    store = LedgerStore()
    store.add("Salary", 2000, "income")

    with pytest.raises(ValidationError):
        store.add(description, amount, kind)
    assert len(store) == 1


def test_validation_error_is_a_value_error() -> None:
    store = LedgerStore()
    with pytest.raises(ValueError):
        store.add("Rent", -0.0, "expense")


def test_add_regenerates_colliding_ids() -> None:
    """Colliding identifiers from the factory should be skipped."""

    ids = cycle(["dup", "dup", "fresh"])
    store = LedgerStore(id_factory=lambda: next(ids))

    first = store.add("One", 1, "income")
    second = store.add("Two", 2, "income")

    assert first.id == "dup"
    assert second.id == "fresh"


def test_generated_ids_are_unique() -> None:
    identifiers = {generate_transaction_id() for _ in range(500)}
    assert len(identifiers) == 500


def test_remove_present_and_missing_ids() -> None:
    """Removing a known id shrinks the ledger; unknown ids are a no-op."""

    store = LedgerStore()
    keep = store.add("Salary", 2000, "income")
    drop = store.add("Rent", 800, "expense")

    assert store.remove("does-not-exist") is False
    assert store.list() == [keep, drop]

    assert store.remove(drop.id) is True
    assert [transaction.id for transaction in store.list()] == [keep.id]
    assert store.remove(drop.id) is False
    with pytest.raises(KeyError):
        store.get(drop.id)


def test_clear_empties_ledger() -> None:
    store = LedgerStore()
    for index in range(5):
        store.add(f"Entry {index}", index + 1, "expense")

    store.clear()

    assert store.list() == []
    assert store.summary().balance == 0


def test_list_returns_a_copy() -> None:
    """Mutating a snapshot should not leak into the store."""

    store = LedgerStore()
    store.add("Salary", 2000, "income")

    snapshot = store.list()
    snapshot.clear()

    assert len(store.list()) == 1


def test_replace_all_rejects_duplicate_ids() -> None:
    source = LedgerStore(id_factory=lambda: "same")
    transaction = source.add("Salary", 2000, "income")

    with pytest.raises(DuplicateTransactionError) as excinfo:
        LedgerStore(transactions=[transaction, transaction])
    assert isinstance(excinfo.value, FinTrackError)


def test_ids_stay_unique_across_many_adds() -> None:
    """Every entry added with the real clock should get a distinct id."""

    store = LedgerStore()
    for index in range(300):
        store.add(f"Entry {index}", index + 1, "income" if index % 2 else "expense")

    assert len({transaction.id for transaction in store.list()}) == len(store) == 300

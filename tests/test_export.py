"""Mini README: Tests for JSON exports and display formatting helpers."""

from __future__ import annotations

import json
from datetime import datetime, timezone

from fintrack.export import LedgerExporter, build_export_document, export_filename
from fintrack.interface.formatting import format_currency, format_signed_amount, friendly_date
from fintrack.ledger import LedgerStore

EXPORTED_AT = datetime(2024, 7, 4, 18, 5, 9, tzinfo=timezone.utc)


def test_export_filename_uses_timestamp() -> None:
    assert export_filename(EXPORTED_AT) == "fintrack-export-2024-07-04-18-05-09.json"


def test_build_export_document_shape() -> None:
    store = LedgerStore()
    created = store.add("Salary", 2000, "income")

    document = build_export_document(store.list(), exported_at=EXPORTED_AT)

    assert document["exportedAt"] == "2024-07-04T18:05:09.000Z"
    assert document["transactions"] == [created.as_dict()]


def test_exporter_writes_pretty_json(tmp_path) -> None:
    store = LedgerStore()
    store.add("Salary", 2000, "income")
    store.add("Rent", 800, "expense")

    path = LedgerExporter(clock=lambda: EXPORTED_AT).export(store.list(), tmp_path / "exports")

    assert path.name == "fintrack-export-2024-07-04-18-05-09.json"
    text = path.read_text(encoding="utf-8")
    assert text.startswith('{\n  "exportedAt"')
    assert [entry["description"] for entry in json.loads(text)["transactions"]] == ["Salary", "Rent"]


def test_currency_formatting() -> None:
    assert format_currency(1234.5) == "$1,234.50"
    assert format_currency(-1200) == "-$1,200.00"
    assert format_currency(0) == "$0.00"


def test_signed_amount_and_dates() -> None:
    store = LedgerStore()
    income = store.add("Salary", 2000, "income")
    expense = store.add("Rent", 800, "expense")

    assert format_signed_amount(income) == "+ $2,000.00"
    assert format_signed_amount(expense) == "- $800.00"
    assert friendly_date(None) == ""
    assert "2024" in friendly_date(EXPORTED_AT)

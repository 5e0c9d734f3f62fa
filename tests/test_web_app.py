"""Mini README: Tests for the FastAPI dashboard routes.

The application is built around an in-memory session so requests exercise
the real ledger, persistence adapter and templates without touching disk.
"""

from __future__ import annotations

import inspect
import json

import pytest
from fastapi.routing import APIRoute
from fastapi.testclient import TestClient

from fintrack.interface import create_application
from fintrack.ledger.session import LedgerSession
from fintrack.storage import TRANSACTIONS_KEY, InMemoryKeyValueStore, PersistenceAdapter


@pytest.fixture()
def backend() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture()
def client(backend: InMemoryKeyValueStore) -> TestClient:
    session = LedgerSession(PersistenceAdapter(backend)).start()
    return TestClient(create_application(session=session))


def test_add_list_and_summary(client: TestClient, backend: InMemoryKeyValueStore) -> None:
    """Form submissions should create entries and update the summary."""

    response = client.post(
        "/transactions", data={"description": "Salary", "amount": "2000", "type": "income"}
    )
    assert response.status_code == 201
    payload = response.json()
    assert payload["transaction"]["description"] == "Salary"
    assert payload["last_saved"] is not None
    assert payload["warning"] is None

    client.post("/transactions", data={"description": "Rent", "amount": "800", "type": "expense"})

    listing = client.get("/transactions").json()
    assert [entry["description"] for entry in listing["transactions"]] == ["Rent", "Salary"]
    assert client.get("/summary").json() == {
        "total_income": 2000.0,
        "total_expenses": 800.0,
        "balance": 1200.0,
    }
    assert len(json.loads(backend.get(TRANSACTIONS_KEY))) == 2


def test_add_rejects_invalid_form(client: TestClient) -> None:
    response = client.post("/transactions", data={"description": "", "amount": "5", "type": "income"})
    assert response.status_code == 400
    assert "description" in response.json()["detail"]

    response = client.post("/transactions", data={"description": "Lunch", "amount": "0", "type": "expense"})
    assert response.status_code == 400
    assert client.get("/transactions").json()["transactions"] == []


def test_delete_and_clear(client: TestClient) -> None:
    created = client.post(
        "/transactions", data={"description": "Coffee", "amount": "3.5", "type": "expense"}
    ).json()["transaction"]
    client.post("/transactions", data={"description": "Tea", "amount": "2", "type": "expense"})

    assert client.delete(f"/transactions/{created['id']}").status_code == 200
    assert client.delete(f"/transactions/{created['id']}").status_code == 404

    cleared = client.post("/clear").json()
    assert cleared["transactions"] == []
    assert cleared["summary"]["balance"] == 0


def test_dashboard_renders_entries(client: TestClient) -> None:
    client.post("/transactions", data={"description": "Salary", "amount": "1500.5", "type": "income"})

    page = client.get("/")

    assert page.status_code == 200
    assert "Salary" in page.text
    assert "+ $1,500.50" in page.text
    assert "Last saved:" in page.text


def test_dashboard_empty_state(client: TestClient) -> None:
    assert "No transactions yet" in client.get("/").text


def test_export_download(client: TestClient) -> None:
    client.post("/transactions", data={"description": "Salary", "amount": "2000", "type": "income"})

    response = client.get("/export")

    assert response.status_code == 200
    assert 'filename="fintrack-export-' in response.headers["content-disposition"]
    document = response.json()
    assert set(document) == {"exportedAt", "transactions"}
    assert document["transactions"][0]["description"] == "Salary"


def test_write_failure_is_reported_as_warning() -> None:
    session = LedgerSession(PersistenceAdapter(InMemoryKeyValueStore(quota_bytes=16))).start()
    client = TestClient(create_application(session=session))

    response = client.post(
        "/transactions", data={"description": "Salary", "amount": "2000", "type": "income"}
    )

    assert response.status_code == 201
    assert response.json()["warning"]
    assert len(client.get("/transactions").json()["transactions"]) == 1


def test_mutating_routes_run_in_threadpool() -> None:
    """Routes that write to storage should be plain functions, not coroutines."""

    session = LedgerSession(PersistenceAdapter(InMemoryKeyValueStore())).start()
    app = create_application(session=session)

    mutating = [
        route
        for route in app.routes
        if isinstance(route, APIRoute) and route.methods & {"POST", "DELETE"}
    ]

    assert {route.path for route in mutating} == {"/transactions", "/transactions/{transaction_id}", "/clear"}
    assert not any(inspect.iscoroutinefunction(route.endpoint) for route in mutating)

"""Mini README: Tests for the FastAPI dashboard.

Structure:
    * dashboard - empty state, form submission, validation banner.
    * delete - existing and unknown ids.
    * api - JSON snapshot and chart endpoint.
    * persistence - a new application instance sees earlier transactions.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from expensetracker.configuration import ExpenseTrackerSettings
from expensetracker.interface import create_application
from expensetracker.storage import JsonFileStore, MemoryStore


@pytest.fixture()
def settings(tmp_path) -> ExpenseTrackerSettings:
    return ExpenseTrackerSettings(data_directory=tmp_path)


@pytest.fixture()
def client(settings) -> TestClient:
    return TestClient(create_application(settings=settings, store=MemoryStore()))


def test_dashboard_renders_empty_ledger(client) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert 'id="transaction-list"' in response.text
    assert '<span id="balance">0.00</span>' in response.text


def test_add_transaction_redirects_and_updates_dashboard(client) -> None:
    """A valid submission redirects back to a dashboard showing the new row."""

    response = client.post(
        "/transactions",
        data={"description": "Salary", "amount": "1000", "kind": "income"},
        follow_redirects=False,
    )

    assert response.status_code == 303
    assert response.headers["location"] == "/"
    page = client.get("/").text
    assert "Salary: $1000 (income)" in page
    assert '<span id="total-income">1000.00</span>' in page
    assert 'value="Salary"' not in page


def test_invalid_submission_keeps_inputs_and_shows_message(client) -> None:
    response = client.post(
        "/transactions",
        data={"description": "coffee", "amount": "abc", "kind": "expense"},
    )

    assert response.status_code == 400
    assert "Please enter a valid description and amount." in response.text
    assert 'value="coffee"' in response.text
    assert 'value="abc"' in response.text
    assert client.get("/api/transactions").json()["transactions"] == []
    assert "Please enter a valid description and amount." not in client.get("/").text


def test_unsupported_kind_is_rejected_by_form_validation(client) -> None:
    response = client.post(
        "/transactions", data={"description": "gift", "amount": "5", "kind": "transfer"}
    )

    assert response.status_code == 422


def test_scenario_through_the_api(client) -> None:
    """Salary and rent update the summary; deleting rent restores the balance."""

    client.post("/transactions", data={"description": "Salary", "amount": "1000", "kind": "income"})
    client.post("/transactions", data={"description": "Rent", "amount": "400", "kind": "expense"})

    snapshot = client.get("/api/transactions").json()
    assert snapshot["summary"] == {
        "total_income": "1000.00",
        "total_expenses": "400.00",
        "balance": "600.00",
    }
    rent_id = snapshot["transactions"][1]["id"]

    response = client.post(f"/transactions/{rent_id}/delete", follow_redirects=False)

    assert response.status_code == 303
    snapshot = client.get("/api/transactions").json()
    assert [entry["description"] for entry in snapshot["transactions"]] == ["Salary"]
    assert snapshot["summary"]["balance"] == "1000.00"


def test_deleting_unknown_id_changes_nothing(client) -> None:
    client.post("/transactions", data={"description": "Salary", "amount": "1000", "kind": "income"})
    before = client.get("/api/transactions").json()

    response = client.post("/transactions/42/delete", follow_redirects=False)

    assert response.status_code == 303
    assert client.get("/api/transactions").json() == before


def test_chart_endpoint_serves_svg(client) -> None:
    client.post("/transactions", data={"description": "Rent", "amount": "400", "kind": "expense"})

    response = client.get("/chart.svg")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("image/svg+xml")
    assert "Rent" in response.text


def test_new_application_loads_persisted_ledger(settings) -> None:
    """Transactions saved by one app instance are loaded by the next."""

    first = TestClient(create_application(settings=settings))
    first.post("/transactions", data={"description": "Salary", "amount": "1000", "kind": "income"})

    second = TestClient(create_application(settings=settings))

    assert "Salary: $1000 (income)" in second.get("/").text
    assert JsonFileStore(settings.storage_path).get("transactions") is not None


def test_description_with_dollar_markup_survives_restart(settings) -> None:
    """A description containing ``$...$`` is stored, charted and reloaded."""

    store = MemoryStore()
    client = TestClient(create_application(settings=settings, store=store))

    response = client.post(
        "/transactions",
        data={"description": r"Lunch $\alpa$ split", "amount": "12", "kind": "expense"},
        follow_redirects=False,
    )

    assert response.status_code == 303
    assert r"Lunch $\alpa$ split" in client.get("/chart.svg").text

    restarted = TestClient(create_application(settings=settings, store=store))

    assert restarted.get("/api/transactions").json()["transactions"][0]["description"] == (
        r"Lunch $\alpa$ split"
    )

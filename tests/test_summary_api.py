import pytest

EMPTY = {"totalIncome": 0, "totalExpense": 0, "balance": 0}


def _create(client, amount, tx_type=None):
    payload = {"txDate": "2024-03-01", "category": "test", "amount": amount}
    if tx_type:
        payload["type"] = tx_type
    r = client.post("/api/transactions", json=payload)
    assert r.status_code == 201


def test_empty_store_reports_zeros(client):
    r = client.get("/api/summary")
    assert r.status_code == 200
    assert r.json() == EMPTY


def test_totals(client):
    _create(client, 1000, "income")
    _create(client, 50)
    _create(client, 25.5, "expense")

    assert client.get("/api/summary").json() == {
        "totalIncome": 1000.0,
        "totalExpense": 75.5,
        "balance": 924.5,
    }


def test_only_expenses(client):
    _create(client, 10)
    _create(client, 5)

    assert client.get("/api/summary").json() == {
        "totalIncome": 0,
        "totalExpense": 15.0,
        "balance": -15.0,
    }


@pytest.mark.parametrize(
    "entries",
    [
        [],
        [(0, None)],
        [(0.1, "income"), (0.2, "income"), (0.3, None)],
        [(1234.56, "income"), (999.99, None), (0.01, None), (42, "income")],
    ],
)
def test_balance_is_income_minus_expense(client, entries):
    for amount, tx_type in entries:
        _create(client, amount, tx_type)

    s = client.get("/api/summary").json()
    assert s["totalIncome"] >= 0
    assert s["totalExpense"] >= 0
    assert s["totalIncome"] - s["totalExpense"] == pytest.approx(s["balance"])


def test_totals_are_whole_cents(client):
    for amount in (0.1, 0.2, 0.7):
        _create(client, amount, "income")
    _create(client, 0.3)

    assert client.get("/api/summary").json() == {
        "totalIncome": 1.0,
        "totalExpense": 0.3,
        "balance": 0.7,
    }

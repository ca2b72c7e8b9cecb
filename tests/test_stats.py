# tests/test_stats.py
"""
Aggregates: current-month income/expense and total balance.
Service tests pin "today"; the HTTP scenario uses the real date.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from spendwise.services.records import accounts, categories, transactions
from spendwise.services.stats import monthly_income_expense, total_balance

API = "/api/v1"


def _seed(session, owner):
    acc = accounts.create(session, owner.id, {"name": "Bank", "type": "bank", "balance": 1000})
    salary = categories.create(session, owner.id, {"name": "Salary", "type": "income"})
    food = categories.create(session, owner.id, {"name": "Food", "type": "expense"})
    return acc, salary, food


def _tx(session, owner, acc, cat, kind, amount, on):
    return transactions.create(
        session,
        owner.id,
        {
            "account_id": acc.id,
            "category_id": cat.id,
            "type": kind,
            "amount": amount,
            "date": on,
        },
    )


def test_no_transactions_gives_zeroes(session, owner):
    totals = monthly_income_expense(session, owner.id, today=date(2025, 5, 10))
    assert totals == {"income": Decimal("0"), "expense": Decimal("0")}
    assert total_balance(session, owner.id) == Decimal("0")


def test_monthly_totals_only_count_this_month(session, owner):
    acc, salary, food = _seed(session, owner)
    _tx(session, owner, acc, salary, "income", "500", date(2025, 12, 1))
    _tx(session, owner, acc, food, "expense", "20.25", date(2025, 12, 31))
    _tx(session, owner, acc, food, "expense", "4.75", date(2025, 12, 15))
    _tx(session, owner, acc, food, "expense", "99", date(2025, 11, 30))  # last month
    _tx(session, owner, acc, salary, "income", "99", date(2026, 1, 1))  # next month

    totals = monthly_income_expense(session, owner.id, today=date(2025, 12, 20))
    assert totals == {"income": Decimal("500.00"), "expense": Decimal("25.00")}


def test_monthly_totals_skip_archived_and_foreign(session, owner, stranger):
    acc, salary, food = _seed(session, owner)
    their_acc, their_salary, _ = _seed(session, stranger)
    kept = _tx(session, owner, acc, salary, "income", "100", date(2025, 6, 2))
    gone = _tx(session, owner, acc, food, "expense", "30", date(2025, 6, 3))
    transactions.archive(session, owner.id, gone.id)
    _tx(session, stranger, their_acc, their_salary, "income", "7000", date(2025, 6, 4))

    totals = monthly_income_expense(session, owner.id, today=date(2025, 6, 30))
    assert totals["income"] == Decimal("100")
    assert totals["expense"] == Decimal("0")
    assert kept.is_deleted is False


def test_total_balance_sums_active_accounts_with_sign(session, owner, stranger):
    accounts.create(session, owner.id, {"name": "Bank", "type": "bank", "balance": "1000"})
    accounts.create(session, owner.id, {"name": "Visa", "type": "credit", "balance": "-250.50"})
    old = accounts.create(session, owner.id, {"name": "Old", "type": "cash", "balance": "75"})
    accounts.archive(session, owner.id, old.id)
    accounts.create(session, stranger.id, {"name": "Theirs", "type": "bank", "balance": "9"})

    assert total_balance(session, owner.id) == Decimal("749.50")


def test_scenario_transaction_does_not_move_balance(auth_client):
    acc = auth_client.post(
        f"{API}/accounts", json={"name": "A", "type": "bank", "balance": 1000}
    ).json()["data"]
    cat = auth_client.post(
        f"{API}/categories", json={"name": "Salary", "type": "income"}
    ).json()["data"]
    r = auth_client.post(
        f"{API}/transactions",
        json={
            "account_id": acc["id"],
            "category_id": cat["id"],
            "type": "income",
            "amount": 500,
            "date": date.today().isoformat(),
        },
    )
    assert r.status_code == 201

    balance = auth_client.get(f"{API}/stats/total-balance").json()
    assert balance["success"] is True
    assert Decimal(balance["data"]["total_balance"]) == Decimal("1000")

    monthly = auth_client.get(f"{API}/stats/monthly/income-expense").json()["data"]
    assert Decimal(monthly["income"]) == Decimal("500")
    assert Decimal(monthly["expense"]) == Decimal("0")


def test_stats_are_per_user(auth_client, other_auth_client):
    auth_client.post(f"{API}/accounts", json={"name": "A", "type": "bank", "balance": 42})
    r = other_auth_client.get(f"{API}/stats/total-balance")
    assert Decimal(r.json()["data"]["total_balance"]) == Decimal("0")

# spendwise/services/stats.py
"""
Read-only aggregates over the caller's active (non-archived) records.
Recomputed on every call; nothing is cached.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Dict, Optional

from sqlalchemy import func
from sqlmodel import Session, col, select

from spendwise.models import Account, EntryType, Transaction
from spendwise.periods import month_bounds

_CENTS = Decimal("0.01")


def _as_decimal(value) -> Decimal:
    # SQLite hands SUM() back as float on some drivers; normalise to 2 places
    if value is None:
        return Decimal("0.00")
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(_CENTS)


def monthly_income_expense(
    session: Session, owner_id: str, today: Optional[date] = None
) -> Dict[str, Decimal]:
    """
    Sum of this month's transactions per type.
    A type with no transactions reports 0.
    """
    start, end = month_bounds(today)
    stmt = (
        select(Transaction.type, func.sum(Transaction.amount))
        .where(
            Transaction.user_id == owner_id,
            col(Transaction.is_deleted).is_(False),
            Transaction.date >= start,
            Transaction.date < end,
        )
        .group_by(Transaction.type)
    )
    totals = {kind.value: _as_decimal(0) for kind in EntryType}
    for kind, total in session.exec(stmt).all():
        totals[EntryType(kind).value] = _as_decimal(total)
    return totals


def total_balance(session: Session, owner_id: str) -> Decimal:
    """
    Sum of balances across active accounts, every account type included.
    Credit balances count with their stored sign.
    """
    stmt = select(func.coalesce(func.sum(Account.balance), 0)).where(
        Account.user_id == owner_id,
        col(Account.is_deleted).is_(False),
    )
    return _as_decimal(session.exec(stmt).one())

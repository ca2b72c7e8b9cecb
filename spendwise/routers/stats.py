# spendwise/routers/stats.py
from fastapi import APIRouter, Depends
from sqlmodel import Session

from spendwise.db import get_session
from spendwise.responses import envelope
from spendwise.security import require_user_id
from spendwise.services.stats import monthly_income_expense, total_balance

router = APIRouter(prefix="/stats", tags=["stats"])


# Money goes out as decimal strings, same as on the records themselves.


@router.get("/monthly/income-expense")
def monthly_income_expense_view(
    user_id: str = Depends(require_user_id),
    session: Session = Depends(get_session),
):
    totals = monthly_income_expense(session, user_id)
    return envelope(
        {kind: str(amount) for kind, amount in totals.items()},
        "Monthly income and expense fetched successfully.",
    )


@router.get("/total-balance")
def total_balance_view(
    user_id: str = Depends(require_user_id),
    session: Session = Depends(get_session),
):
    balance = total_balance(session, user_id)
    return envelope(
        {"total_balance": str(balance)}, "Total balance fetched successfully."
    )

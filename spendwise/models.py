# spendwise/models.py
import datetime as dt
from decimal import Decimal
from enum import Enum  # small enums for clarity
from typing import Optional  # nullable fields
from uuid import uuid4

from sqlmodel import Field, SQLModel, UniqueConstraint


def utcnow() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


def new_id() -> str:
    # opaque ids: nothing to guess or enumerate across users
    return uuid4().hex


class User(SQLModel, table=True):
    id: str = Field(default_factory=new_id, primary_key=True)
    name: str
    email: str = Field(index=True)  # stored lower-cased
    hashed_password: str  # never the plain password
    created_at: dt.datetime = Field(default_factory=utcnow)
    updated_at: dt.datetime = Field(default_factory=utcnow)

    __table_args__ = (UniqueConstraint("email", name="uq_user_email"),)


class AccountType(str, Enum):
    cash = "cash"
    bank = "bank"
    credit = "credit"
    ewallet = "ewallet"


class EntryType(str, Enum):
    income = "income"  # stored as TEXT
    expense = "expense"


class BudgetPeriod(str, Enum):
    weekly = "weekly"
    monthly = "monthly"
    yearly = "yearly"


class OwnedRecord(SQLModel):
    """
    Columns shared by every per-user record.
    is_deleted is the archive flag; only archive/restore toggle it.
    """

    id: str = Field(default_factory=new_id, primary_key=True)
    user_id: str = Field(index=True, foreign_key="user.id")  # owner, never changes
    is_deleted: bool = Field(default=False, index=True)
    created_at: dt.datetime = Field(default_factory=utcnow)
    updated_at: dt.datetime = Field(default_factory=utcnow)


class Account(OwnedRecord, table=True):
    name: str
    type: AccountType = Field(index=True)
    # signed; credit accounts may go negative
    balance: Decimal = Field(default=Decimal("0"), max_digits=14, decimal_places=2)


class Category(OwnedRecord, table=True):
    name: str
    type: EntryType = Field(index=True)
    description: Optional[str] = None
    color: Optional[str] = None  # e.g. "#22c55e", free text for the UI


class Transaction(OwnedRecord, table=True):
    """
    A single real-life entry of money moving in/out of an account.
    Creating one does not touch the account balance.
    """

    # Plain ids, no FK constraint: deleting an account/category keeps history rows.
    account_id: str = Field(index=True)
    category_id: str = Field(index=True)
    type: EntryType = Field(index=True)
    amount: Decimal = Field(max_digits=14, decimal_places=2)
    description: Optional[str] = None
    date: dt.date = Field(index=True)


class Budget(OwnedRecord, table=True):
    category_id: str = Field(index=True)
    amount: Decimal = Field(max_digits=14, decimal_places=2)
    period: BudgetPeriod
    start_date: dt.date

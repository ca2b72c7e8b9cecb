# spendwise/schemas.py
"""
Request payloads, one Create/Update pair per resource.

The store validates every payload against these before it writes, so the
same rules apply to HTTP requests and to direct service calls.
Unknown keys are rejected: owner, id and archive flag cannot be sent.
"""

from __future__ import annotations

import datetime as dt
from decimal import Decimal
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, StringConstraints

from spendwise.models import AccountType, BudgetPeriod, EntryType

Name = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]
Text = Annotated[str, StringConstraints(strip_whitespace=True, max_length=500)]
RecordId = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
SignedAmount = Annotated[Decimal, Field(max_digits=14, decimal_places=2)]
PositiveAmount = Annotated[Decimal, Field(gt=0, max_digits=14, decimal_places=2)]


class _Payload(BaseModel):
    model_config = ConfigDict(extra="forbid")


# ---------- Accounts ----------


class AccountCreate(_Payload):
    name: Name
    type: AccountType
    balance: SignedAmount = Decimal("0")


class AccountUpdate(_Payload):
    name: Optional[Name] = None
    type: Optional[AccountType] = None
    balance: Optional[SignedAmount] = None


# ---------- Categories ----------


class CategoryCreate(_Payload):
    name: Name
    type: EntryType
    description: Optional[Text] = None
    color: Optional[Annotated[str, StringConstraints(max_length=30)]] = None


class CategoryUpdate(_Payload):
    name: Optional[Name] = None
    type: Optional[EntryType] = None
    description: Optional[Text] = None
    color: Optional[Annotated[str, StringConstraints(max_length=30)]] = None


# ---------- Transactions ----------


class TransactionCreate(_Payload):
    account_id: RecordId
    category_id: RecordId
    type: EntryType
    amount: PositiveAmount
    description: Optional[Text] = None
    date: Optional[dt.date] = None  # None -> today


class TransactionUpdate(_Payload):
    account_id: Optional[RecordId] = None
    category_id: Optional[RecordId] = None
    type: Optional[EntryType] = None
    amount: Optional[PositiveAmount] = None
    description: Optional[Text] = None
    date: Optional[dt.date] = None


# ---------- Budgets ----------


class BudgetCreate(_Payload):
    category_id: RecordId
    amount: PositiveAmount
    period: BudgetPeriod
    start_date: Optional[dt.date] = None  # None -> today


class BudgetUpdate(_Payload):
    category_id: Optional[RecordId] = None
    amount: Optional[PositiveAmount] = None
    period: Optional[BudgetPeriod] = None
    start_date: Optional[dt.date] = None


# ---------- Auth ----------


class RegisterIn(_Payload):
    name: Name
    email: EmailStr
    password: Annotated[str, StringConstraints(min_length=6, max_length=128)]


class SignInIn(_Payload):
    email: EmailStr
    password: Annotated[str, StringConstraints(min_length=1, max_length=128)]

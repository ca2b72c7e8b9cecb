# spendwise/services/records.py
"""
Owner-scoped storage for accounts, categories, transactions and budgets.

Why:
- The four resources share one shape (owner, archive flag, timestamps), so
  they share one store; subclasses only add references, defaults and filters.
- Every call takes the owner id. A record owned by somebody else is reported
  exactly like a missing one (NotFoundError), so ids of other users leak nothing.
- Payloads are validated against the pydantic schemas before any write.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Generic, Iterable, List, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from sqlmodel import Session, col, select

from spendwise.errors import NotFoundError, ValidationError, describe_pydantic_errors
from spendwise.models import (
    Account,
    AccountType,
    Budget,
    Category,
    EntryType,
    OwnedRecord,
    Transaction,
    utcnow,
)
from spendwise.schemas import (
    AccountCreate,
    AccountUpdate,
    BudgetCreate,
    BudgetUpdate,
    CategoryCreate,
    CategoryUpdate,
    TransactionCreate,
    TransactionUpdate,
)
from spendwise.services.lifecycle import LifecycleAction, apply_transition

logger = logging.getLogger("spendwise.records")

RecordT = TypeVar("RecordT", bound=OwnedRecord)
Payload = Union[BaseModel, Mapping[str, Any]]


class RecordStore(Generic[RecordT]):
    model: Type[RecordT]
    create_schema: Type[BaseModel]
    update_schema: Type[BaseModel]
    label = "Record"
    type_enum: Type[Any] = EntryType
    # fields an update may set back to null
    nullable_fields: frozenset = frozenset()

    # ---------- hooks for subclasses ----------

    def _fill_defaults(self, data: dict) -> None:
        pass

    def _check_references(self, session: Session, owner_id: str, data: dict) -> None:
        pass

    def _filter_by_type(self, stmt, kind):
        return stmt.where(self.model.type == kind)

    def _ordering(self) -> Iterable:
        return (col(self.model.created_at).desc(),)

    # ---------- helpers ----------

    def _validate(self, schema: Type[BaseModel], payload: Payload) -> BaseModel:
        if isinstance(payload, schema):
            return payload
        if isinstance(payload, BaseModel):
            payload = payload.model_dump(exclude_unset=True)
        try:
            return schema.model_validate(payload)
        except PydanticValidationError as exc:
            raise ValidationError(describe_pydantic_errors(exc)) from exc

    def _parse_type(self, value: Any):
        try:
            return self.type_enum(value)
        except ValueError:
            allowed = ", ".join(m.value for m in self.type_enum)
            raise ValidationError(f"type must be one of: {allowed}") from None

    @staticmethod
    def _require_owned(
        session: Session,
        owner_id: str,
        model: Type[OwnedRecord],
        record_id: Optional[str],
        field: str,
    ) -> None:
        """A reference must point at one of the owner's records (archived or not)."""
        if record_id is None:
            return
        ref = session.get(model, record_id)
        if ref is None or ref.user_id != owner_id:
            raise ValidationError(
                f"{field} must reference one of your {model.__name__.lower()} records"
            )

    # ---------- operations ----------

    def create(self, session: Session, owner_id: str, payload: Payload) -> RecordT:
        data = self._validate(self.create_schema, payload).model_dump()
        self._fill_defaults(data)
        self._check_references(session, owner_id, data)

        record = self.model(**data, user_id=owner_id)
        session.add(record)
        session.commit()
        session.refresh(record)
        logger.info("%s %s created user=%s", self.label, record.id, owner_id)
        return record

    def get(self, session: Session, owner_id: str, record_id: str) -> RecordT:
        record = session.get(self.model, record_id)
        if record is None or record.user_id != owner_id:
            raise NotFoundError(f"{self.label} not found.")
        return record

    def list(
        self,
        session: Session,
        owner_id: str,
        *,
        archived: bool = False,
        type_filter: Optional[str] = None,
    ) -> List[RecordT]:
        """Active records by default; only archived ones with archived=True."""
        stmt = select(self.model).where(
            self.model.user_id == owner_id,
            col(self.model.is_deleted) == archived,
        )
        if type_filter is not None:
            stmt = self._filter_by_type(stmt, self._parse_type(type_filter))
        stmt = stmt.order_by(*self._ordering())
        return list(session.exec(stmt).all())

    def update(
        self, session: Session, owner_id: str, record_id: str, payload: Payload
    ) -> RecordT:
        record = self.get(session, owner_id, record_id)
        changes = self._validate(self.update_schema, payload).model_dump(
            exclude_unset=True
        )
        for field, value in changes.items():
            if value is None and field not in self.nullable_fields:
                raise ValidationError(f"{field} cannot be null")
        self._check_references(session, owner_id, changes)

        if not changes:
            return record
        for field, value in changes.items():
            setattr(record, field, value)
        record.updated_at = utcnow()
        session.add(record)
        session.commit()
        session.refresh(record)
        return record

    def archive(self, session: Session, owner_id: str, record_id: str) -> RecordT:
        return self._transition(session, owner_id, record_id, LifecycleAction.archive)

    def restore(self, session: Session, owner_id: str, record_id: str) -> RecordT:
        return self._transition(session, owner_id, record_id, LifecycleAction.restore)

    def _transition(
        self,
        session: Session,
        owner_id: str,
        record_id: str,
        action: LifecycleAction,
    ) -> RecordT:
        record = self.get(session, owner_id, record_id)
        if apply_transition(record, action):
            session.add(record)
            session.commit()
            session.refresh(record)
            logger.info("%s %s %sd user=%s", self.label, record.id, action.value, owner_id)
        return record

    def delete(self, session: Session, owner_id: str, record_id: str) -> None:
        """Irreversible. A second delete of the same id raises NotFoundError."""
        record = self.get(session, owner_id, record_id)
        session.delete(record)
        session.commit()
        logger.info("%s %s deleted user=%s", self.label, record_id, owner_id)


class AccountStore(RecordStore[Account]):
    model = Account
    create_schema = AccountCreate
    update_schema = AccountUpdate
    label = "Account"
    type_enum = AccountType


class CategoryStore(RecordStore[Category]):
    model = Category
    create_schema = CategoryCreate
    update_schema = CategoryUpdate
    label = "Category"
    nullable_fields = frozenset({"description", "color"})


class TransactionStore(RecordStore[Transaction]):
    model = Transaction
    create_schema = TransactionCreate
    update_schema = TransactionUpdate
    label = "Transaction"
    nullable_fields = frozenset({"description"})

    def _fill_defaults(self, data: dict) -> None:
        if data.get("date") is None:
            data["date"] = date.today()

    def _check_references(self, session: Session, owner_id: str, data: dict) -> None:
        self._require_owned(session, owner_id, Account, data.get("account_id"), "account_id")
        self._require_owned(
            session, owner_id, Category, data.get("category_id"), "category_id"
        )

    def _ordering(self) -> Iterable:
        return (col(Transaction.date).desc(), col(Transaction.created_at).desc())


class BudgetStore(RecordStore[Budget]):
    model = Budget
    create_schema = BudgetCreate
    update_schema = BudgetUpdate
    label = "Budget"

    def _fill_defaults(self, data: dict) -> None:
        if data.get("start_date") is None:
            data["start_date"] = date.today()

    def _check_references(self, session: Session, owner_id: str, data: dict) -> None:
        self._require_owned(
            session, owner_id, Category, data.get("category_id"), "category_id"
        )

    def _filter_by_type(self, stmt, kind):
        # budgets have no type of their own: filter on the linked category
        return stmt.join(Category, Budget.category_id == Category.id).where(
            Category.type == kind
        )


accounts = AccountStore()
categories = CategoryStore()
transactions = TransactionStore()
budgets = BudgetStore()

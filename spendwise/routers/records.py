# spendwise/routers/records.py
# Purpose: the eight lifecycle endpoints shared by accounts, categories,
# transactions and budgets. One router per resource, all built here.
# - Every route requires the signed cookie (require_user_id).
# - "/archived" is declared before "/{record_id}" so it is not read as an id.
# - Annotations must stay real objects here (no __future__ import): FastAPI
#   reads the body model from each route's signature.

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from spendwise.db import get_session
from spendwise.responses import envelope
from spendwise.security import require_user_id
from spendwise.services.records import (
    RecordStore,
    accounts,
    budgets,
    categories,
    transactions,
)


def build_record_router(store: RecordStore, *, prefix: str, plural: str) -> APIRouter:
    router = APIRouter(prefix=prefix, tags=[plural.lower()])
    label = store.label
    create_schema = store.create_schema
    update_schema = store.update_schema

    @router.get("")
    def list_active(
        type_: Optional[str] = Query(None, alias="type"),
        user_id: str = Depends(require_user_id),
        session: Session = Depends(get_session),
    ):
        records = store.list(session, user_id, type_filter=type_)
        return envelope(records, f"{plural} fetched successfully.")

    @router.get("/archived")
    def list_archived(
        type_: Optional[str] = Query(None, alias="type"),
        user_id: str = Depends(require_user_id),
        session: Session = Depends(get_session),
    ):
        records = store.list(session, user_id, archived=True, type_filter=type_)
        return envelope(records, f"Archived {plural.lower()} fetched successfully.")

    @router.get("/{record_id}")
    def get_one(
        record_id: str,
        user_id: str = Depends(require_user_id),
        session: Session = Depends(get_session),
    ):
        record = store.get(session, user_id, record_id)
        return envelope(record, f"{label} fetched successfully.")

    @router.post("", status_code=status.HTTP_201_CREATED)
    def create(
        payload: create_schema,
        user_id: str = Depends(require_user_id),
        session: Session = Depends(get_session),
    ):
        record = store.create(session, user_id, payload)
        return envelope(record, f"{label} created successfully.")

    @router.patch("/{record_id}")
    def update(
        record_id: str,
        payload: update_schema,
        user_id: str = Depends(require_user_id),
        session: Session = Depends(get_session),
    ):
        record = store.update(session, user_id, record_id, payload)
        return envelope(record, f"{label} updated successfully.")

    @router.patch("/{record_id}/archive")
    def archive(
        record_id: str,
        user_id: str = Depends(require_user_id),
        session: Session = Depends(get_session),
    ):
        record = store.archive(session, user_id, record_id)
        return envelope(record, f"{label} archived successfully.")

    @router.patch("/{record_id}/restore")
    def restore(
        record_id: str,
        user_id: str = Depends(require_user_id),
        session: Session = Depends(get_session),
    ):
        record = store.restore(session, user_id, record_id)
        return envelope(record, f"{label} restored successfully.")

    @router.delete("/{record_id}")
    def delete(
        record_id: str,
        user_id: str = Depends(require_user_id),
        session: Session = Depends(get_session),
    ):
        store.delete(session, user_id, record_id)
        return envelope(message=f"{label} deleted successfully.")

    return router


accounts_router = build_record_router(accounts, prefix="/accounts", plural="Accounts")
categories_router = build_record_router(
    categories, prefix="/categories", plural="Categories"
)
transactions_router = build_record_router(
    transactions, prefix="/transactions", plural="Transactions"
)
budgets_router = build_record_router(budgets, prefix="/budgets", plural="Budgets")

# spendwise/db.py
from __future__ import annotations

import logging
from typing import Generator

from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

from spendwise.config import get_settings

logger = logging.getLogger("db")


def make_engine(url: str, *, echo: bool = False) -> Engine:
    """Engine for `url`; SQLite gets the cross-thread flag FastAPI needs."""
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, echo=echo, connect_args=connect_args)


engine = make_engine(get_settings().database_url)
logger.info("DB URL in use: %s", engine.url)


def get_session() -> Generator[Session, None, None]:
    """FastAPI dependency: one session per request, closed afterwards."""
    with Session(engine) as session:
        yield session


def create_db_and_tables(bind: Engine | None = None) -> None:
    """
    Create any missing tables (default: the app engine).
    Alembic migrations remain the way to change existing tables.
    """
    import spendwise.models  # noqa: F401  # registers tables on SQLModel.metadata

    SQLModel.metadata.create_all(bind or engine)

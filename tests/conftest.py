# tests/conftest.py
# Test setup: temporary SQLite DB and dependency override for sessions.

import os
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

# Ensure repo root on sys.path so "import spendwise" works without installing
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Settings are read once at import: the tests own the schema, not the app
os.environ.setdefault("AUTO_CREATE_TABLES", "0")
os.environ.setdefault("SECRET_KEY", "test-secret")

from spendwise.db import create_db_and_tables, get_session, make_engine  # noqa: E402
from spendwise.main import app as fastapi_app  # noqa: E402
from spendwise.models import User  # noqa: E402


@pytest.fixture()
def tmp_db_path(tmp_path: Path) -> Path:
    return tmp_path / "test_app.db"


@pytest.fixture()
def test_engine(tmp_db_path: Path):
    # File-based SQLite so multiple connections share the same DB
    engine = make_engine(f"sqlite:///{tmp_db_path}")
    create_db_and_tables(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture()
def app_with_test_db(test_engine):
    # Override the app's DB session to use our test engine
    def _get_test_session():
        with Session(test_engine) as s:
            yield s

    fastapi_app.dependency_overrides[get_session] = _get_test_session
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture()
def client(app_with_test_db):
    with TestClient(app_with_test_db) as c:
        yield c


@pytest.fixture()
def other_client(app_with_test_db):
    """A second browser: its own cookie jar, same database."""
    with TestClient(app_with_test_db) as c:
        yield c


def register(c: TestClient, email="t@test.com", name="Test User", password="pw123456"):
    r = c.post(
        "/api/v1/auth/register",
        json={"name": name, "email": email, "password": password},
    )
    assert r.status_code == 201, r.text
    return r.json()["data"]


@pytest.fixture()
def auth_client(client):
    register(client)
    return client


@pytest.fixture()
def other_auth_client(other_client):
    register(other_client, email="other@test.com", name="Other User")
    return other_client


# ---------- service-level fixtures (no HTTP) ----------


@pytest.fixture()
def session():
    engine = make_engine("sqlite:///:memory:")
    create_db_and_tables(engine)
    with Session(engine) as s:
        yield s


def make_user(s: Session, email: str) -> User:
    user = User(name=email.split("@")[0], email=email, hashed_password="x")
    s.add(user)
    s.commit()
    s.refresh(user)
    return user


@pytest.fixture()
def owner(session) -> User:
    return make_user(session, "owner@test.com")


@pytest.fixture()
def stranger(session) -> User:
    return make_user(session, "stranger@test.com")

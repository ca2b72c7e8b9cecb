# spendwise/security.py
from __future__ import annotations

from typing import Optional

from fastapi.requests import Request
from passlib.context import CryptContext

from spendwise.errors import UnauthorizedError

# Password hashing context. pbkdf2_sha256 is pure passlib (no bcrypt backend needed).
_pwd = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

SESSION_USER_KEY = "user_id"


# ------------ Password helpers ------------


def hash_password(plain: str) -> str:
    """Return a secure hash for a plaintext password."""
    return _pwd.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    """Verify a plaintext password against a stored hash."""
    return _pwd.verify(plain, hashed)


# ------------ Credential helpers ------------
# The credential is the signed session cookie set by SessionMiddleware.
# A bad signature or an expired cookie simply yields an empty session.


def issue_credential(request: Request, user_id: str) -> None:
    request.session.clear()
    request.session[SESSION_USER_KEY] = user_id


def revoke_credential(request: Request) -> None:
    """Drop the cookie on the client. Nothing is stored server-side."""
    request.session.clear()


def get_user_id_from_session(request: Request) -> Optional[str]:
    """Read user_id from the session (if present)."""
    if "session" not in request.scope:  # SessionMiddleware not installed
        return None
    uid = request.session.get(SESSION_USER_KEY)
    return str(uid) if uid else None


def require_user_id(request: Request) -> str:
    """
    FastAPI dependency: the caller's user id, or 401.
    Usage:  user_id: str = Depends(require_user_id)
    """
    uid = get_user_id_from_session(request)
    if uid is None:
        raise UnauthorizedError()
    return uid


__all__ = [
    "hash_password",
    "verify_password",
    "issue_credential",
    "revoke_credential",
    "get_user_id_from_session",
    "require_user_id",
]

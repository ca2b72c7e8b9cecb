# spendwise/services/users.py
"""Registration and sign-in. Issuing the cookie is the router's job."""

from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from spendwise.errors import ConflictError, UnauthorizedError, ValidationError
from spendwise.models import User
from spendwise.schemas import RegisterIn, SignInIn
from spendwise.security import hash_password, verify_password

logger = logging.getLogger("spendwise.users")


def _normalise_email(email: str) -> str:
    return email.strip().lower()


def find_by_email(session: Session, email: str) -> User | None:
    return session.exec(select(User).where(User.email == _normalise_email(email))).first()


def register_user(session: Session, data: RegisterIn) -> User:
    email = _normalise_email(data.email)
    if find_by_email(session, email):
        raise ConflictError("Email is already registered.")

    user = User(name=data.name, email=email, hashed_password=hash_password(data.password))
    session.add(user)
    try:
        session.commit()
    except IntegrityError as exc:  # lost a race against the same email
        session.rollback()
        raise ConflictError("Email is already registered.") from exc
    session.refresh(user)
    logger.info("user %s registered", user.id)
    return user


def authenticate(session: Session, data: SignInIn) -> User:
    user = find_by_email(session, data.email)
    if not user or not verify_password(data.password, user.hashed_password):
        raise ValidationError("Invalid email or password.")
    return user


def get_user(session: Session, user_id: str) -> User:
    """The credential may outlive its user; treat that as signed out."""
    user = session.get(User, user_id)
    if user is None:
        raise UnauthorizedError()
    return user


def public_profile(user: User) -> dict:
    return user.model_dump(exclude={"hashed_password"})

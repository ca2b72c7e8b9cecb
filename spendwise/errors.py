# spendwise/errors.py
"""
Error types raised by the services.

Routers never build error responses themselves: they let these propagate and
the handlers registered in spendwise.main turn them into the JSON envelope
{"success": false, "message": ...} with the matching status code.
"""

from __future__ import annotations

from fastapi import status


class AppError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Something went wrong."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    """Malformed or missing field, or a reference to another owner's record."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid input."


class NotFoundError(AppError):
    """Id absent, or owned by somebody else (never told apart)."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found."


class UnauthorizedError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized. Please sign in."


class ConflictError(AppError):
    """Duplicate value of a unique field (email, passport number)."""

    status_code = status.HTTP_409_CONFLICT
    default_message = "Already exists."


def describe_pydantic_errors(exc) -> str:
    """
    Flatten pydantic / FastAPI validation errors into one readable line,
    e.g. "amount: Input should be greater than 0; name: Field required".
    """
    parts = []
    for err in exc.errors():
        loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "query", "path")]
        field = ".".join(loc)
        msg = err.get("msg", "invalid value")
        parts.append(f"{field}: {msg}" if field else msg)
    return "; ".join(parts) or ValidationError.default_message


__all__ = [
    "AppError",
    "ValidationError",
    "NotFoundError",
    "UnauthorizedError",
    "ConflictError",
    "describe_pydantic_errors",
]

# spendwise/services/passports.py
"""
In-memory passport registry.

The registry object owns its records; create one per session and pass it
around. Nothing lives at module level.

Plain words:
- Text inputs are trimmed, must not be blank or a bare number, and are stored
  upper-cased ("juan", "dela cruz" -> "JUAN DELA CRUZ").
- Date of birth is checked year first, so February gets 29 days only in
  leap years.
- Passport numbers are exactly 6 digits and unique inside the registry.
- Listing every passport needs the administrator password.
"""

from __future__ import annotations

import hmac
import logging
import math
from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import ValidationError as PydanticValidationError

from spendwise.errors import (
    ConflictError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
    describe_pydantic_errors,
)
from spendwise.periods import validate_calendar_date

logger = logging.getLogger("spendwise.passports")

PASSPORT_NUMBER_LENGTH = 6
MIN_BIRTH_YEAR = 1900


def _looks_numeric(value: str) -> bool:
    """True for anything that reads as a number: "42", "3.14", "1e5", "Infinity", "0x10"."""
    try:
        # "NaN" is still a name
        return not math.isnan(float(value))
    except ValueError:
        pass
    try:
        int(value, 0)
    except ValueError:
        return False
    return True


class PassportForm(BaseModel):
    """Raw fields as a clerk would type them."""

    model_config = ConfigDict(str_strip_whitespace=True)

    first_name: str
    last_name: str
    age: int
    nationality: str
    gender: str
    birth_year: int
    birth_month: int
    birth_day: int
    city: str
    country: str
    number: str

    @field_validator("first_name", "last_name", "nationality", "city", "country")
    @classmethod
    def _text(cls, v: str) -> str:
        if not v or _looks_numeric(v):
            raise ValueError("must be non-empty text, not a number")
        return v.upper()

    @field_validator("age")
    @classmethod
    def _age(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("must be greater than 0")
        return v

    @field_validator("gender")
    @classmethod
    def _gender(cls, v: str) -> str:
        v = v.upper()
        if v not in ("M", "F"):
            raise ValueError("must be M or F")
        return v

    @field_validator("number")
    @classmethod
    def _number(cls, v: str) -> str:
        if len(v) != PASSPORT_NUMBER_LENGTH or not v.isdigit():
            raise ValueError(f"must be a {PASSPORT_NUMBER_LENGTH}-digit number")
        return v


class Passport(BaseModel):
    name: str  # "FIRST LAST"
    age: int
    nationality: str
    gender: str  # "M" | "F"
    date_of_birth: date
    place_of_birth: str  # "CITY, COUNTRY"
    number: str


class PassportRegistry:
    def __init__(
        self,
        admin_password: str,
        *,
        min_birth_year: int = MIN_BIRTH_YEAR,
        max_birth_year: Optional[int] = None,
    ) -> None:
        self._admin_password = admin_password
        self._min_birth_year = min_birth_year
        self._max_birth_year = max_birth_year
        self._passports: List[Passport] = []

    def __len__(self) -> int:
        return len(self._passports)

    # ---------- helpers ----------

    def _build(self, form: PassportForm | dict) -> Passport:
        try:
            if not isinstance(form, PassportForm):
                form = PassportForm.model_validate(form)
            dob = validate_calendar_date(
                form.birth_year,
                form.birth_month,
                form.birth_day,
                min_year=self._min_birth_year,
                max_year=self._max_birth_year,
            )
        except PydanticValidationError as exc:
            raise ValidationError(describe_pydantic_errors(exc)) from exc
        except ValueError as exc:
            raise ValidationError(f"date_of_birth: {exc}") from exc

        return Passport(
            name=f"{form.first_name} {form.last_name}",
            age=form.age,
            nationality=form.nationality,
            gender=form.gender,
            date_of_birth=dob,
            place_of_birth=f"{form.city}, {form.country}",
            number=form.number,
        )

    def _index_of(self, number: str) -> int:
        number = (number or "").strip()
        for i, passport in enumerate(self._passports):
            if passport.number == number:
                return i
        raise NotFoundError("Passport doesn't exist. Create one first.")

    def _ensure_number_free(self, number: str, *, except_index: int = -1) -> None:
        for i, passport in enumerate(self._passports):
            if passport.number == number and i != except_index:
                raise ConflictError("This passport number already exists.")

    # ---------- operations ----------

    def add(self, form: PassportForm | dict) -> Passport:
        passport = self._build(form)
        self._ensure_number_free(passport.number)
        self._passports.append(passport)
        logger.info("passport %s added", passport.number)
        return passport

    def find(self, number: str) -> Passport:
        return self._passports[self._index_of(number)]

    def update(self, number: str, form: PassportForm | dict) -> Passport:
        """Replace every field. Keeping the same number is allowed."""
        index = self._index_of(number)
        passport = self._build(form)
        self._ensure_number_free(passport.number, except_index=index)
        self._passports[index] = passport
        logger.info("passport %s updated (now %s)", number, passport.number)
        return passport

    def delete(self, number: str) -> None:
        index = self._index_of(number)
        removed = self._passports.pop(index)
        logger.info("passport %s deleted", removed.number)

    def list_all(self, admin_password: str) -> List[Passport]:
        if not hmac.compare_digest(
            (admin_password or "").encode(), self._admin_password.encode()
        ):
            logger.warning("passport list refused: wrong administrator password")
            raise UnauthorizedError("Incorrect password. Access denied.")
        return list(self._passports)

# spendwise/periods.py
"""
Calendar helpers.

Definitions
- month bounds: [first day of month, first day of next month)

Public API:
- month_bounds(date) -> (date, date)
- is_leap_year(year) -> bool
- days_in_month(year, month) -> int
- validate_calendar_date(year, month, day, *, min_year, max_year) -> date
"""

from __future__ import annotations

import calendar
from datetime import date
from typing import Optional, Tuple

__all__ = [
    "month_bounds",
    "is_leap_year",
    "days_in_month",
    "validate_calendar_date",
]


# ---------- Month ranges ----------


def month_bounds(today: Optional[date] = None) -> Tuple[date, date]:
    """
    Half-open range covering the month of `today` (server-local date).
    Example: 2025-12-10 -> (2025-12-01, 2026-01-01).
    """
    today = today or date.today()
    start = today.replace(day=1)
    if start.month == 12:
        end = date(start.year + 1, 1, 1)
    else:
        end = date(start.year, start.month + 1, 1)
    return start, end


# ---------- Day counting ----------


def is_leap_year(year: int) -> bool:
    """Gregorian rule: every 4th year, except centuries not divisible by 400."""
    return calendar.isleap(year)


def days_in_month(year: int, month: int) -> int:
    if month < 1 or month > 12:
        raise ValueError("Month must be 1–12")
    return calendar.monthrange(year, month)[1]


def validate_calendar_date(
    year: int,
    month: int,
    day: int,
    *,
    min_year: int = 1900,
    max_year: Optional[int] = None,
) -> date:
    """
    Check a (year, month, day) triple and return it as a date.
    Year is checked first so February can be sized by the leap-year rule.
    """
    max_year = max_year if max_year is not None else date.today().year
    if year < min_year or year > max_year:
        raise ValueError(f"Year must be {min_year}–{max_year}")
    if month < 1 or month > 12:
        raise ValueError("Month must be 1–12")
    last = days_in_month(year, month)
    if day < 1 or day > last:
        raise ValueError(f"Day must be 1–{last}")
    return date(year, month, day)

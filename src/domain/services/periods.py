"""Calendar helpers for (year, month) reporting periods."""

import calendar
from datetime import date


def format_period(year: int, month: int) -> str:
    """Return the YYYY-MM key of a period."""
    return f"{year}-{month:02d}"


def parse_period(period: str) -> tuple[int, int]:
    """Split a YYYY-MM key into (year, month)."""
    year, month = period.split("-")
    return int(year), int(month)


def end_of_month(year: int, month: int) -> date:
    """Return the last calendar day of a period.

    This is the valuation date used for currency conversion of a period.
    """
    return date(year, month, calendar.monthrange(year, month)[1])


def next_month(year: int, month: int) -> tuple[int, int]:
    """Return the (year, month) following the given period."""
    if month == 12:
        return year + 1, 1
    return year, month + 1


def is_past_or_current_month(year: int, month: int, reference: date) -> bool:
    """Return True when the period does not lie after the reference month."""
    return (year, month) <= (reference.year, reference.month)


__all__ = [
    "format_period",
    "parse_period",
    "end_of_month",
    "next_month",
    "is_past_or_current_month",
]

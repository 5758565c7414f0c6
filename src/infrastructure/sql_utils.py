"""Value conversions shared by the SQLAlchemy repositories."""

from datetime import date, datetime
from decimal import Decimal


def to_sql_decimal(value: Decimal) -> str:
    """Bind Decimal values as text so every driver stores them exactly."""
    return str(value)


def to_sql_date(value: date) -> str:
    return value.isoformat()


def coerce_date(value) -> date:
    """Normalize DATE columns returned as strings (SQLite) or datetimes."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


__all__ = ["to_sql_decimal", "to_sql_date", "coerce_date"]

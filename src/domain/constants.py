"""Domain constants for portfolio analytics."""

from datetime import date

SUPPORTED_CURRENCIES = ("RUB", "USD", "EUR")

DEFAULT_REPORT_CURRENCY = "RUB"

# Pairs the daily rate sync keeps complete for each stored day.
RATE_SYNC_BASE_CURRENCIES = ("USD", "EUR")
RATE_SYNC_TARGET_CURRENCY = "RUB"
RATE_SYNC_CROSS_PAIR = ("EUR", "USD")

MIN_RATE_DATE = date(2016, 1, 1)

TRAILING_YEAR_POINTS = 12


__all__ = [
    "SUPPORTED_CURRENCIES",
    "DEFAULT_REPORT_CURRENCY",
    "RATE_SYNC_BASE_CURRENCIES",
    "RATE_SYNC_TARGET_CURRENCY",
    "RATE_SYNC_CROSS_PAIR",
    "MIN_RATE_DATE",
    "TRAILING_YEAR_POINTS",
]

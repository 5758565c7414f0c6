"""Domain validation helpers."""

from decimal import Decimal

from src.domain.errors import (
    InvalidBalanceValueError,
    InvalidDecimalPrecisionError,
)
from src.utils.decimal_utils import has_at_most_two_decimals


def validate_balance_value(
    value: Decimal,
    field: str,
    allow_negative: bool = False,
) -> None:
    """Validate a user-entered balance value.

    Args:
        value: Value to validate.
        field: Field name used in error messages.
        allow_negative: Whether negative values are accepted (net flows).

    Raises:
        InvalidBalanceValueError: If the value is negative and not allowed.
        InvalidDecimalPrecisionError: If the value has more than two decimals.
    """
    if not value.is_finite():
        raise InvalidBalanceValueError(f"{field} must be a finite number")
    if not allow_negative and value < 0:
        raise InvalidBalanceValueError(f"{field} must be non-negative")
    if not has_at_most_two_decimals(value):
        raise InvalidDecimalPrecisionError(field)


def validate_period(year: int, month: int) -> None:
    """Reject periods outside the supported calendar range."""
    if not 1900 <= year <= 3000:
        raise ValueError(f"Invalid period year: {year}")
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid period month: {month}")


__all__ = ["validate_balance_value", "validate_period"]

"""Helpers for Decimal normalization."""

from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_money(value: Decimal) -> Decimal:
    """Round a monetary or percentage value to two places, half up.

    Args:
        value: Value to round.

    Returns:
        Decimal: Value quantized to cents.
    """
    return coerce_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def has_at_most_two_decimals(value: Decimal) -> bool:
    """Return True when the value carries no more than two fractional digits.

    Trailing fractional zeros do not count. The check reads the digit tuple
    instead of quantizing, so it holds for values of any magnitude.
    """
    _, digits, exponent = coerce_decimal(value).as_tuple()
    if not isinstance(exponent, int):
        return False
    digits = list(digits)
    while exponent < -2 and digits and digits[-1] == 0:
        digits.pop()
        exponent += 1
    return exponent >= -2 or not digits


__all__ = ["CENT", "coerce_decimal", "round_money", "has_at_most_two_decimals"]

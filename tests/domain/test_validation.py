"""Tests for balance value validation."""

from decimal import Decimal

import pytest

from src.domain.errors import (
    InvalidBalanceValueError,
    InvalidDecimalPrecisionError,
)
from src.domain.services.validation import (
    validate_balance_value,
    validate_period,
)


@pytest.mark.parametrize("value", ["0", "10", "10.5", "10.50", "1.230"])
def test_validate_balance_value_accepts_cents(value) -> None:
    validate_balance_value(Decimal(value), "amount")


def test_validate_balance_value_rejects_negative_amount() -> None:
    with pytest.raises(InvalidBalanceValueError):
        validate_balance_value(Decimal("-1"), "amount")


def test_validate_balance_value_allows_negative_net_flow() -> None:
    validate_balance_value(Decimal("-250.75"), "netFlow", allow_negative=True)


def test_validate_balance_value_rejects_sub_cent_precision() -> None:
    """Three significant decimals should raise a precision error."""
    with pytest.raises(InvalidDecimalPrecisionError) as exc_info:
        validate_balance_value(Decimal("1.001"), "netFlow", True)

    assert "netFlow" in str(exc_info.value)
    assert isinstance(exc_info.value, InvalidBalanceValueError)


def test_validate_balance_value_rejects_non_finite() -> None:
    with pytest.raises(InvalidBalanceValueError):
        validate_balance_value(Decimal("NaN"), "amount")


@pytest.mark.parametrize("year, month", [(2024, 0), (2024, 13), (1800, 5)])
def test_validate_period_rejects_out_of_range(year, month) -> None:
    with pytest.raises(ValueError):
        validate_period(year, month)


@pytest.mark.parametrize(
    "value",
    [
        "1E+27",
        "123456789012345678901234567.89",
        "99999999999999999999999999999.10",
    ],
)
def test_validate_balance_value_accepts_large_amounts(value) -> None:
    """Amounts beyond the decimal context precision are still valid."""
    validate_balance_value(Decimal(value), "amount")


def test_validate_balance_value_rejects_large_sub_cent_amount() -> None:
    with pytest.raises(InvalidDecimalPrecisionError):
        validate_balance_value(
            Decimal("123456789012345678901234567.891"),
            "amount",
        )

"""Tests for monthly aggregation of balance records."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.domain.errors import RateMissingForPairError, RateUnavailableError
from src.domain.models import BalanceRecord
from src.domain.services.aggregation import aggregate_monthly


class _FixedRateConverter:
    """Converter with one rate per (from, to) pair, recording valuation days."""

    def __init__(self, rates: dict[tuple[str, str], Decimal]) -> None:
        self._rates = rates
        self.days: list[date] = []

    def convert(self, day, amount, from_currency, to_currency):
        self.days.append(day)
        if from_currency == to_currency:
            return amount
        try:
            return amount * self._rates[(from_currency, to_currency)]
        except KeyError:
            raise RateMissingForPairError(day, from_currency, to_currency)


def _record(account_id, year, month, amount, net_flow="0") -> BalanceRecord:
    return BalanceRecord(
        account_id=account_id,
        period_year=year,
        period_month=month,
        amount=Decimal(amount),
        net_flow=Decimal(net_flow),
    )


def test_aggregate_monthly_sums_converted_values_per_period() -> None:
    """Amounts from several accounts should be converted then summed."""
    records = [
        _record("usd", 2024, 2, "10", "5"),
        _record("rub", 2024, 1, "1000", "1000"),
        _record("usd", 2024, 1, "10", "10"),
    ]
    converter = _FixedRateConverter({("USD", "RUB"): Decimal("90")})

    points = aggregate_monthly(
        records,
        {"usd": "USD", "rub": "RUB"},
        "RUB",
        converter,
        MagicMock(),
    )

    assert [p.period for p in points] == ["2024-01", "2024-02"]
    assert points[0].total_equity == Decimal("1900")
    assert points[0].inflow == Decimal("1900")
    assert points[1].total_equity == Decimal("900")
    assert points[1].inflow == Decimal("450")


def test_aggregate_monthly_values_at_end_of_month() -> None:
    converter = _FixedRateConverter({})

    aggregate_monthly(
        [_record("a", 2024, 2, "1")],
        {"a": "RUB"},
        "RUB",
        converter,
        MagicMock(),
    )

    assert set(converter.days) == {date(2024, 2, 29)}


def test_aggregate_monthly_skips_records_without_rate() -> None:
    """A pair without any rate should drop the record with a warning."""
    logger = MagicMock()
    records = [
        _record("eur", 2024, 1, "100"),
        _record("rub", 2024, 1, "500"),
    ]

    points = aggregate_monthly(
        records,
        {"eur": "EUR", "rub": "RUB"},
        "RUB",
        _FixedRateConverter({}),
        logger,
    )

    assert points[0].total_equity == Decimal("500")
    logger.warning.assert_called_once()


def test_aggregate_monthly_skips_unknown_currency() -> None:
    logger = MagicMock()

    points = aggregate_monthly(
        [_record("orphan", 2024, 1, "100")],
        {"orphan": None},
        "RUB",
        _FixedRateConverter({}),
        logger,
    )

    assert points == []
    logger.warning.assert_called_once()


def test_aggregate_monthly_propagates_rate_unavailable() -> None:
    """A store without any rate should fail the whole computation."""
    converter = MagicMock()
    converter.convert.side_effect = RateUnavailableError()

    with pytest.raises(RateUnavailableError):
        aggregate_monthly(
            [_record("usd", 2024, 1, "10")],
            {"usd": "USD"},
            "RUB",
            converter,
            MagicMock(),
        )

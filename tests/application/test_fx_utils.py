"""Tests for the currency rate resolver and conversion cache."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from fakes import InMemoryRateStore, make_rate
from src.application.use_cases.fx_utils import (
    CurrencyConversionCache,
    CurrencyRateResolver,
)
from src.domain.errors import RateMissingForPairError, RateUnavailableError


DAY = date(2024, 3, 10)


def test_identity_pair_needs_no_rates() -> None:
    """Converting a currency into itself should never hit the store."""
    store = MagicMock()
    resolver = CurrencyRateResolver(store)

    assert resolver.rate(DAY, "RUB", "RUB") == Decimal("1")
    store.find_exact.assert_not_called()


def test_exact_direct_rate_wins() -> None:
    store = InMemoryRateStore(
        [
            make_rate(DAY, "USD", "RUB", "90"),
            make_rate(DAY, "RUB", "USD", "0.5"),
        ]
    )

    assert CurrencyRateResolver(store).rate(DAY, "USD", "RUB") == Decimal("90")


def test_exact_inverse_rate_is_inverted() -> None:
    store = InMemoryRateStore([make_rate(DAY, "USD", "RUB", "80")])

    rate = CurrencyRateResolver(store).rate(DAY, "RUB", "USD")

    assert rate == Decimal("1") / Decimal("80")


def test_direct_and_inverse_rates_are_consistent() -> None:
    store = InMemoryRateStore([make_rate(DAY, "EUR", "USD", "1.0850")])
    resolver = CurrencyRateResolver(store)

    product = resolver.rate(DAY, "EUR", "USD") * resolver.rate(
        DAY, "USD", "EUR"
    )

    assert abs(product - Decimal("1")) < Decimal("1e-20")


def test_falls_back_to_latest_rate_before_the_day() -> None:
    """A rate three days earlier should be used instead of failing."""
    store = InMemoryRateStore(
        [
            make_rate(date(2024, 3, 1), "USD", "RUB", "88"),
            make_rate(date(2024, 3, 7), "USD", "RUB", "91"),
            make_rate(date(2024, 3, 12), "USD", "RUB", "95"),
        ]
    )

    assert CurrencyRateResolver(store).rate(DAY, "USD", "RUB") == Decimal("91")


def test_falls_back_to_latest_inverse_rate() -> None:
    store = InMemoryRateStore([make_rate(date(2024, 3, 5), "RUB", "EUR", "0.01")])

    rate = CurrencyRateResolver(store).rate(DAY, "EUR", "RUB")

    assert rate == Decimal("100")


def test_empty_store_raises_rate_unavailable() -> None:
    with pytest.raises(RateUnavailableError):
        CurrencyRateResolver(InMemoryRateStore()).rate(DAY, "USD", "RUB")


def test_missing_pair_raises_rate_missing_for_pair() -> None:
    store = InMemoryRateStore([make_rate(DAY, "USD", "RUB", "90")])

    with pytest.raises(RateMissingForPairError) as exc_info:
        CurrencyRateResolver(store).rate(DAY, "EUR", "RUB")

    assert exc_info.value.base == "EUR"


def test_rate_after_the_day_is_not_used() -> None:
    store = InMemoryRateStore([make_rate(date(2024, 4, 1), "USD", "RUB", "90")])

    with pytest.raises(RateMissingForPairError):
        CurrencyRateResolver(store).rate(DAY, "USD", "RUB")


def test_cache_resolves_each_pair_once() -> None:
    """Repeated conversions should reuse the resolved rate."""
    resolver = MagicMock()
    resolver.rate.return_value = Decimal("90")
    cache = CurrencyConversionCache(resolver, logger=MagicMock())

    first = cache.convert(DAY, Decimal("2"), "USD", "RUB")
    second = cache.convert(DAY, Decimal("3"), "USD", "RUB")

    assert (first, second) == (Decimal("180"), Decimal("270"))
    resolver.rate.assert_called_once_with(DAY, "USD", "RUB")
    assert len(cache) == 1


def test_cache_identity_conversion_returns_amount() -> None:
    resolver = MagicMock()
    cache = CurrencyConversionCache(resolver, logger=MagicMock())

    assert cache.convert(DAY, Decimal("12.34"), "USD", "USD") == Decimal(
        "12.34"
    )
    resolver.rate.assert_not_called()
    assert len(cache) == 0

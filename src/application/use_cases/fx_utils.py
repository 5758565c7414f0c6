"""Shared helpers for currency conversion in application use cases."""

from datetime import date
from decimal import Decimal
from logging import Logger

from src.application.ports.currency_rate_store import CurrencyRateStorePort
from src.domain.errors import RateMissingForPairError, RateUnavailableError
from src.domain.models import CurrencyPairKey
from src.infrastructure.logging.logger import get_app_logger

_ONE = Decimal("1")


class CurrencyRateResolver:
    """Resolve the rate of a currency pair as of a day.

    Resolution order, first match wins: identity, exact direct rate, exact
    inverse rate, latest direct rate on or before the day, latest inverse
    rate on or before the day.
    """

    def __init__(self, rate_store: CurrencyRateStorePort) -> None:
        """Initialize the resolver.

        Args:
            rate_store: Port providing stored currency rates.
        """
        self._rate_store = rate_store

    def rate(self, day: date, from_currency: str, to_currency: str) -> Decimal:
        """Return how many units of ``to_currency`` one ``from_currency`` buys.

        Args:
            day: Valuation date.
            from_currency: Source currency code.
            to_currency: Target currency code.

        Returns:
            Decimal: Positive exchange rate.

        Raises:
            RateUnavailableError: If no rate is stored at all.
            RateMissingForPairError: If rates exist but none matches the pair.
        """
        if from_currency == to_currency:
            return _ONE

        direct = self._rate_store.find_exact(day, from_currency, to_currency)
        if direct:
            return direct.rate

        inverse = self._rate_store.find_exact(day, to_currency, from_currency)
        if inverse:
            return _ONE / inverse.rate

        latest_direct = self._rate_store.find_latest_on_or_before(
            day, from_currency, to_currency
        )
        if latest_direct:
            return latest_direct.rate

        latest_inverse = self._rate_store.find_latest_on_or_before(
            day, to_currency, from_currency
        )
        if latest_inverse:
            return _ONE / latest_inverse.rate

        if not self._rate_store.find_any():
            raise RateUnavailableError()
        raise RateMissingForPairError(day, from_currency, to_currency)


class CurrencyConversionCache:
    """Memoize resolved rates for the duration of one computation.

    Create one instance per request or use-case execution; instances are
    never shared, so cached rates cannot go stale across requests.
    """

    def __init__(
        self,
        resolver: CurrencyRateResolver,
        logger: Logger | None = None,
    ) -> None:
        """Initialize the cache.

        Args:
            resolver: Resolver used on cache misses.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._resolver = resolver
        self._logger = logger or get_app_logger()
        self._rates: dict[CurrencyPairKey, Decimal] = {}

    def rate(self, day: date, from_currency: str, to_currency: str) -> Decimal:
        """Return the cached rate, resolving it on first use."""
        if from_currency == to_currency:
            return _ONE
        key = CurrencyPairKey(day, from_currency, to_currency)
        cached = self._rates.get(key)
        if cached is None:
            cached = self._resolver.rate(day, from_currency, to_currency)
            self._rates[key] = cached
            self._logger.debug(
                f"Resolved {from_currency}/{to_currency} at "
                f"{day.isoformat()}: {cached}"
            )
        return cached

    def convert(
        self,
        day: date,
        amount: Decimal,
        from_currency: str,
        to_currency: str,
    ) -> Decimal:
        """Convert an amount into ``to_currency`` as of a day.

        Args:
            day: Valuation date.
            amount: Amount in ``from_currency``.
            from_currency: Source currency code.
            to_currency: Target currency code.

        Returns:
            Decimal: Converted amount.
        """
        if from_currency == to_currency:
            return amount
        return amount * self.rate(day, from_currency, to_currency)

    def __len__(self) -> int:
        return len(self._rates)


__all__ = ["CurrencyRateResolver", "CurrencyConversionCache"]

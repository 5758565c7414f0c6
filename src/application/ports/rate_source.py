"""Port for fetching daily rates from an external provider."""

from datetime import date
from typing import Protocol

from src.domain.models import DailyRates


class CurrencyRateSourcePort(Protocol):
    """Port exposing an external daily exchange rate feed."""

    def fetch_daily_rates(self, day: date) -> DailyRates:
        """Return the rates effective for the given day.

        Raises:
            RateSourceError: If the provider returns no usable data.
        """


__all__ = ["CurrencyRateSourcePort"]

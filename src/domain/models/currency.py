"""Domain models for currency rates."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import NamedTuple


@dataclass(frozen=True)
class CurrencyRateRecord:
    """Stored exchange rate: 1 unit of base equals ``rate`` units of target."""

    date: date
    base_currency: str
    target_currency: str
    rate: Decimal
    source: str = ""


class CurrencyPairKey(NamedTuple):
    """Structured cache key for a resolved rate."""

    date: date
    base: str
    target: str


@dataclass(frozen=True)
class DailyRates:
    """Rates published by a source for one day, quoted in ``quote_currency``.

    Attributes:
        date: Day the rates are effective for.
        quote_currency: Currency every rate is expressed in.
        rates: Mapping of currency code to the price of one unit.
    """

    date: date
    quote_currency: str
    rates: dict[str, Decimal]


__all__ = ["CurrencyRateRecord", "CurrencyPairKey", "DailyRates"]

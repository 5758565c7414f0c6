"""Port for stored currency rates."""

from datetime import date
from typing import Protocol

from src.domain.models import CurrencyRateRecord


class CurrencyRateStorePort(Protocol):
    """Port exposing read and write access to daily currency rates."""

    def find_exact(
        self,
        day: date,
        base: str,
        target: str,
    ) -> CurrencyRateRecord | None:
        """Return the rate stored for exactly this day and pair."""

    def find_latest_on_or_before(
        self,
        day: date,
        base: str,
        target: str,
    ) -> CurrencyRateRecord | None:
        """Return the most recent rate of the pair dated on or before day."""

    def find_any(self) -> bool:
        """Return True when at least one rate is stored."""

    def find_latest(self) -> CurrencyRateRecord | None:
        """Return the most recently dated rate of any pair."""

    def find_between(
        self,
        start_date: date | None,
        end_date: date | None,
        base_currency: str | None = None,
    ) -> list[CurrencyRateRecord]:
        """Return rates in the inclusive range, newest first."""

    def upsert(self, record: CurrencyRateRecord) -> None:
        """Insert or overwrite the rate of (date, base, target)."""


__all__ = ["CurrencyRateStorePort"]

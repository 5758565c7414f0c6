"""Use case listing stored currency rates for a date range."""

from collections import defaultdict
from datetime import date, timedelta
from decimal import Decimal

from src.application.ports.currency_rate_store import CurrencyRateStorePort
from src.application.use_cases.rate_ranges import validate_rate_range
from src.domain.constants import (
    MIN_RATE_DATE,
    RATE_SYNC_CROSS_PAIR,
    RATE_SYNC_TARGET_CURRENCY,
)
from src.domain.models import CurrencyRateRecord
from src.infrastructure.logging.logger import get_app_logger

_CROSS_RATE_TOLERANCE = Decimal("1e-9")
DEFAULT_LOOKBACK_DAYS = 30


class GetCurrencyRatesUseCase:
    """Return stored rates, completing missing cross rates first."""

    def __init__(
        self,
        rate_store: CurrencyRateStorePort,
        logger=None,
        max_span_days: int = 366,
    ) -> None:
        """Initialize the use case.

        Args:
            rate_store: Port providing stored currency rates.
            logger: Optional logger compatible with logging.Logger-like API.
            max_span_days: Longest range accepted for one request.
        """
        self._rate_store = rate_store
        self._logger = logger or get_app_logger()
        self._max_span_days = max_span_days

    def execute(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
        base_currency: str | None = None,
        today: date | None = None,
    ) -> list[CurrencyRateRecord]:
        """Return rates in the range, newest first.

        Args:
            start_date: First day, defaults to 30 days before today.
            end_date: Last day, defaults to today.
            base_currency: Optional base currency filter.
            today: Reference date, defaults to the current day.

        Returns:
            list[CurrencyRateRecord]: Stored rates.

        Raises:
            InvalidDateRangeError: If the range is inverted or too long.
        """
        today = today or date.today()
        start = start_date or today - timedelta(days=DEFAULT_LOOKBACK_DAYS)
        start = max(start, MIN_RATE_DATE)
        end = end_date or today
        validate_rate_range(start, end, self._max_span_days)

        derived = self._derive_cross_rates(start, end)
        if derived:
            self._logger.info(f"Stored {derived} derived cross rates")
        return self._rate_store.find_between(start, end, base_currency)

    def _derive_cross_rates(self, start: date, end: date) -> int:
        cross_base, cross_target = RATE_SYNC_CROSS_PAIR
        by_day: dict[date, dict[tuple[str, str], Decimal]] = defaultdict(dict)
        for rate in self._rate_store.find_between(start, end):
            by_day[rate.date][(rate.base_currency, rate.target_currency)] = (
                rate.rate
            )

        upserts = []
        for day, pairs in by_day.items():
            base_rate = pairs.get((cross_base, RATE_SYNC_TARGET_CURRENCY))
            target_rate = pairs.get((cross_target, RATE_SYNC_TARGET_CURRENCY))
            if base_rate is None or target_rate is None:
                continue
            derived = base_rate / target_rate
            current = pairs.get(RATE_SYNC_CROSS_PAIR)
            if current is None or abs(current - derived) > _CROSS_RATE_TOLERANCE:
                upserts.append(
                    CurrencyRateRecord(
                        date=day,
                        base_currency=cross_base,
                        target_currency=cross_target,
                        rate=derived,
                        source="derived:stored",
                    )
                )
        for record in upserts:
            self._rate_store.upsert(record)
        return len(upserts)


__all__ = ["GetCurrencyRatesUseCase"]

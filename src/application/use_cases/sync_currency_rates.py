"""Use case backfilling missing daily currency rates from an external source.

Each day is processed independently: a day that already holds every synced
pair is skipped, and a day whose fetch keeps failing after the configured
retries is reported in the result without aborting the remaining days.
"""

from dataclasses import dataclass, field
from datetime import date, timedelta
import time

from src.application.ports.currency_rate_store import CurrencyRateStorePort
from src.application.ports.rate_source import CurrencyRateSourcePort
from src.application.use_cases.rate_ranges import validate_rate_range
from src.domain.constants import (
    MIN_RATE_DATE,
    RATE_SYNC_BASE_CURRENCIES,
    RATE_SYNC_CROSS_PAIR,
    RATE_SYNC_TARGET_CURRENCY,
)
from src.domain.errors import RateSourceError
from src.domain.models import CurrencyRateRecord, DailyRates
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class SyncCurrencyRatesResult:
    """Result of a currency rate sync run.

    Attributes:
        start_date: First processed day, None when nothing was due.
        end_date: Last processed day, None when nothing was due.
        processed_days: Days fetched from the source successfully.
        skipped_days: Days that already held every synced pair.
        stored_count: Number of rates written.
        failed_dates: Days whose fetch failed after all retries.
    """

    start_date: date | None
    end_date: date | None
    processed_days: int = 0
    skipped_days: int = 0
    stored_count: int = 0
    failed_dates: list[date] = field(default_factory=list)


class SyncCurrencyRatesUseCase:
    """Fetch and store daily rates for days missing from the store."""

    def __init__(
        self,
        rate_store: CurrencyRateStorePort,
        rate_source: CurrencyRateSourcePort,
        logger=None,
        max_span_days: int = 366,
        lookback_days: int = 5,
        retry_attempts: int = 3,
        retry_delay: float = 1.0,
        source_name: str = "cbr.ru",
    ) -> None:
        """Initialize the use case.

        Args:
            rate_store: Port providing stored currency rates.
            rate_source: Port fetching rates from the external provider.
            logger: Optional logger compatible with logging.Logger-like API.
            max_span_days: Longest range accepted for one run.
            lookback_days: Days re-checked when the store is behind.
            retry_attempts: Fetch attempts per day before giving up.
            retry_delay: Seconds to wait between attempts.
            source_name: Source label stored with fetched rates.
        """
        self._rate_store = rate_store
        self._rate_source = rate_source
        self._logger = logger or get_app_logger()
        self._max_span_days = max_span_days
        self._lookback_days = lookback_days
        self._retry_attempts = max(retry_attempts, 1)
        self._retry_delay = retry_delay
        self._source_name = source_name

    def run(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
        today: date | None = None,
    ) -> SyncCurrencyRatesResult:
        """Execute the sync job.

        Without explicit bounds the run starts the day after the latest stored
        rate, limited to the lookback window, and ends today.

        Args:
            start_date: Optional first day to backfill.
            end_date: Optional last day to backfill.
            today: Reference date, defaults to the current day.

        Returns:
            SyncCurrencyRatesResult: Summary of processed days.

        Raises:
            InvalidDateRangeError: If explicit bounds are inverted or span
                more than the configured maximum.
        """
        today = today or date.today()
        explicit = start_date is not None or end_date is not None
        start = start_date or self._default_start(today)
        end = end_date or today
        if not explicit and start > end:
            self._logger.info("Currency rates are up to date")
            return SyncCurrencyRatesResult(start_date=None, end_date=None)
        validate_rate_range(start, end, self._max_span_days)

        failed: list[date] = []
        stored = processed = skipped = 0
        cursor = start
        while cursor <= end:
            if self._has_all_pairs(cursor):
                skipped += 1
            else:
                daily = self._fetch_with_retry(cursor)
                if daily is None:
                    failed.append(cursor)
                else:
                    stored += self._store_daily_rates(cursor, daily)
                    processed += 1
            cursor += timedelta(days=1)

        self._logger.info(
            f"Currency rate sync {start.isoformat()}..{end.isoformat()}: "
            f"processed={processed}, skipped={skipped}, stored={stored}, "
            f"failed={len(failed)}"
        )
        return SyncCurrencyRatesResult(
            start_date=start,
            end_date=end,
            processed_days=processed,
            skipped_days=skipped,
            stored_count=stored,
            failed_dates=failed,
        )

    def _default_start(self, today: date) -> date:
        latest = self._rate_store.find_latest()
        latest_date = latest.date if latest else MIN_RATE_DATE
        max_lookback = today - timedelta(days=self._lookback_days - 1)
        if latest_date > max_lookback:
            return latest_date + timedelta(days=1)
        return max(max_lookback, MIN_RATE_DATE)

    def _has_all_pairs(self, day: date) -> bool:
        existing = {
            (rate.base_currency, rate.target_currency)
            for rate in self._rate_store.find_between(day, day)
        }
        required = {
            (base, RATE_SYNC_TARGET_CURRENCY)
            for base in RATE_SYNC_BASE_CURRENCIES
        }
        required.add(RATE_SYNC_CROSS_PAIR)
        return required <= existing

    def _fetch_with_retry(self, day: date) -> DailyRates | None:
        for attempt in range(1, self._retry_attempts + 1):
            try:
                return self._rate_source.fetch_daily_rates(day)
            except RateSourceError as exc:
                self._logger.warning(
                    f"Rate fetch for {day.isoformat()} failed "
                    f"(attempt {attempt}/{self._retry_attempts}): {exc}"
                )
                if attempt < self._retry_attempts and self._retry_delay > 0:
                    time.sleep(self._retry_delay)
        self._logger.error(f"Currency rate sync failed for {day.isoformat()}")
        return None

    def _store_daily_rates(self, day: date, daily: DailyRates) -> int:
        records = [
            CurrencyRateRecord(
                date=day,
                base_currency=code,
                target_currency=daily.quote_currency,
                rate=daily.rates[code],
                source=self._source_name,
            )
            for code in RATE_SYNC_BASE_CURRENCIES
            if code in daily.rates
        ]
        cross_base, cross_target = RATE_SYNC_CROSS_PAIR
        if cross_base in daily.rates and cross_target in daily.rates:
            records.append(
                CurrencyRateRecord(
                    date=day,
                    base_currency=cross_base,
                    target_currency=cross_target,
                    rate=daily.rates[cross_base] / daily.rates[cross_target],
                    source=f"derived:{self._source_name}",
                )
            )
        for record in records:
            self._rate_store.upsert(record)
        return len(records)


__all__ = ["SyncCurrencyRatesUseCase", "SyncCurrencyRatesResult"]

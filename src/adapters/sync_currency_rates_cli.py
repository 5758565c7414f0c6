"""CLI adapter to backfill daily currency rates into the portfolio database.

Optional ``RATE_SYNC_START`` and ``RATE_SYNC_END`` (ISO dates) bound the run;
without them the job resumes from the latest stored rate.
"""

from datetime import date
import os

from src.infrastructure.container import build_sync_currency_rates_use_case
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger


def _optional_date(name: str) -> date | None:
    raw = os.getenv(name, "").strip()
    return date.fromisoformat(raw) if raw else None


def main() -> None:
    """Run the currency rate synchronization use case."""
    logger = get_app_logger()
    use_case = build_sync_currency_rates_use_case()

    result = use_case.run(
        start_date=_optional_date("RATE_SYNC_START"),
        end_date=_optional_date("RATE_SYNC_END"),
    )
    get_usage_logger().info(
        f"sync_currency_rates stored={result.stored_count} "
        f"failed={len(result.failed_dates)}"
    )

    if result.start_date is None:
        print("Currency rates are up to date.")
        return
    print(
        f"Synchronized rates {result.start_date} - {result.end_date}: "
        f"{result.processed_days} days fetched, "
        f"{result.skipped_days} skipped, {result.stored_count} rates stored."
    )
    if result.failed_dates:
        failed = ", ".join(day.isoformat() for day in result.failed_dates)
        logger.warning(f"Rate fetch failed for: {failed}")
        print(f"Failed days: {failed}")


if __name__ == "__main__":  # pragma: no cover
    main()

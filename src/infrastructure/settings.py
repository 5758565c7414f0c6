"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from src.domain.constants import DEFAULT_REPORT_CURRENCY, SUPPORTED_CURRENCIES
from src.infrastructure.cbr_client import CBR_DAILY_URL
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class AnalyticsSettings:
    """Runtime settings for the analytics core.

    Attributes:
        report_currency: Default currency for dashboard and plan output.
        rate_sync_max_span_days: Longest range accepted by rate sync/reads.
        rate_sync_lookback_days: Days re-checked when rates are behind.
        rate_sync_retry_attempts: Fetch attempts per day.
        rate_source_url: Endpoint of the daily rate feed.
        rate_source_timeout: Rate feed request timeout in seconds.
    """

    report_currency: str = DEFAULT_REPORT_CURRENCY
    rate_sync_max_span_days: int = 366
    rate_sync_lookback_days: int = 5
    rate_sync_retry_attempts: int = 3
    rate_source_url: str = CBR_DAILY_URL
    rate_source_timeout: float = 30.0

    @classmethod
    def from_env(cls) -> "AnalyticsSettings":
        """Build settings from environment variables.

        Unset or malformed values fall back to defaults with a warning.

        Returns:
            AnalyticsSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        defaults = cls()

        currency = (
            os.getenv("REPORT_CURRENCY", defaults.report_currency)
            .strip()
            .upper()
        )
        if currency not in SUPPORTED_CURRENCIES:
            logger.warning(
                f"Unsupported REPORT_CURRENCY {currency!r}, "
                f"using {defaults.report_currency}"
            )
            currency = defaults.report_currency

        return cls(
            report_currency=currency,
            rate_sync_max_span_days=cls._positive_int(
                "RATE_SYNC_MAX_SPAN_DAYS",
                defaults.rate_sync_max_span_days,
                logger,
            ),
            rate_sync_lookback_days=cls._positive_int(
                "RATE_SYNC_LOOKBACK_DAYS",
                defaults.rate_sync_lookback_days,
                logger,
            ),
            rate_sync_retry_attempts=cls._positive_int(
                "RATE_SYNC_RETRY_ATTEMPTS",
                defaults.rate_sync_retry_attempts,
                logger,
            ),
            rate_source_url=(
                os.getenv("RATE_SOURCE_URL", "").strip()
                or defaults.rate_source_url
            ),
            rate_source_timeout=float(
                cls._positive_int(
                    "RATE_SOURCE_TIMEOUT",
                    int(defaults.rate_source_timeout),
                    logger,
                )
            ),
        )

    @staticmethod
    def _positive_int(name: str, default: int, logger) -> int:
        """Read a positive integer variable.

        Args:
            name: Environment variable name.
            default: Value used when unset or invalid.
            logger: Logger used for warnings.

        Returns:
            int: Parsed value or the default.
        """
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = int(raw)
        except ValueError:
            logger.warning(f"Invalid {name} value {raw!r}, using {default}")
            return default
        if value <= 0:
            logger.warning(f"{name} must be positive, using {default}")
            return default
        return value


__all__ = ["AnalyticsSettings"]

"""Domain errors raised by the analytics core.

Every error carries a message suitable for surfacing to the end user; none of
them is fatal to the process.
"""

from datetime import date


class PortfolioAnalyticsError(Exception):
    """Base class for recoverable analytics errors."""


class RateUnavailableError(PortfolioAnalyticsError):
    """No currency rate data exists at all (rates were never synced)."""

    def __init__(self) -> None:
        super().__init__("Currency rates are not available")


class RateMissingForPairError(PortfolioAnalyticsError):
    """Rates exist, but none resolves the requested pair on or before a date."""

    def __init__(self, day: date, base: str, target: str) -> None:
        self.day = day
        self.base = base
        self.target = target
        super().__init__(
            f"Missing currency rate for {base}/{target} at {day.isoformat()}"
        )


class PeriodClosedError(PortfolioAnalyticsError):
    """Balances cannot be edited because the period is closed."""

    def __init__(self, year: int, month: int) -> None:
        self.year = year
        self.month = month
        super().__init__(f"Period {year}-{month:02d} is closed")


class PeriodAlreadyClosedError(PortfolioAnalyticsError):
    """The period was already closed."""

    def __init__(self, year: int, month: int) -> None:
        self.year = year
        self.month = month
        super().__init__(f"Period {year}-{month:02d} is already closed")


class NoBalancesForPeriodError(PortfolioAnalyticsError):
    """No balance records exist for the requested period."""

    def __init__(self, year: int, month: int) -> None:
        self.year = year
        self.month = month
        super().__init__(f"No balances recorded for {year}-{month:02d}")


class InvalidBalanceValueError(PortfolioAnalyticsError, ValueError):
    """A balance value violates the sign rules."""


class InvalidDecimalPrecisionError(InvalidBalanceValueError):
    """A balance value carries more than two fractional digits."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"{field} must have at most two decimals")


class InvalidDateRangeError(PortfolioAnalyticsError, ValueError):
    """A date range is inverted or exceeds the configured maximum span."""


class AccountNotFoundError(PortfolioAnalyticsError):
    """The account does not belong to the requesting user."""

    def __init__(self, account_id: str) -> None:
        self.account_id = account_id
        super().__init__(f"Account not found: {account_id}")


class ScenarioNotFoundError(PortfolioAnalyticsError):
    """The plan scenario does not exist for the requesting user."""

    def __init__(self, scenario_id: str) -> None:
        self.scenario_id = scenario_id
        super().__init__(f"Scenario not found: {scenario_id}")


class RateSourceError(PortfolioAnalyticsError):
    """The external rate source returned no usable data."""


__all__ = [
    "PortfolioAnalyticsError",
    "RateUnavailableError",
    "RateMissingForPairError",
    "PeriodClosedError",
    "PeriodAlreadyClosedError",
    "NoBalancesForPeriodError",
    "InvalidBalanceValueError",
    "InvalidDecimalPrecisionError",
    "InvalidDateRangeError",
    "AccountNotFoundError",
    "ScenarioNotFoundError",
    "RateSourceError",
]

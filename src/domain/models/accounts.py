"""Domain models for investment accounts."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class AccountStatus(str, Enum):
    """Lifecycle status of an account."""

    ACTIVE = "active"
    ARCHIVED = "archived"


@dataclass(frozen=True)
class AccountDTO:
    """Account as listed by the account directory."""

    id: str
    currency: str | None
    status: AccountStatus = AccountStatus.ACTIVE
    name: str = ""

    @property
    def is_active(self) -> bool:
        return self.status == AccountStatus.ACTIVE


@dataclass(frozen=True)
class AccountAnalyticsPoint:
    """One period of a single account's history in its own currency.

    Attributes:
        period: Period key formatted as YYYY-MM.
        equity: Account amount at the end of the period.
        inflow: Net flow recorded for the period.
        total_inflow: Cumulative net flow since the first period.
    """

    period: str
    equity: Decimal
    inflow: Decimal
    total_inflow: Decimal


@dataclass(frozen=True)
class AccountAnalytics:
    """History and totals of a single account."""

    account: AccountDTO
    currency: str | None
    status: AccountStatus
    total_equity: Decimal
    total_inflow: Decimal
    first_period: str | None
    last_period: str | None
    points: list[AccountAnalyticsPoint]


__all__ = [
    "AccountStatus",
    "AccountDTO",
    "AccountAnalyticsPoint",
    "AccountAnalytics",
]

"""Domain models for monthly account balances."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class BalanceRecord:
    """Observed state of one account for one (year, month) period.

    Attributes:
        account_id: Identifier of the owning account.
        period_year: Calendar year of the period.
        period_month: Calendar month of the period (1-12).
        amount: Account value at the end of the period, non-negative.
        net_flow: Cash contributed (positive) or withdrawn (negative).
        is_closed: True once the period has been closed.
    """

    account_id: str
    period_year: int
    period_month: int
    amount: Decimal
    net_flow: Decimal
    is_closed: bool = False


@dataclass(frozen=True)
class BalanceEntry:
    """User-provided values for one account in a batch upsert."""

    account_id: str
    amount: Decimal
    net_flow: Decimal


@dataclass(frozen=True)
class PeriodSummary:
    """Open/closed state of a period across a user's accounts."""

    period_year: int
    period_month: int
    is_closed: bool
    has_balances: bool


@dataclass(frozen=True)
class CloseMonthResult:
    """Outcome of a month close.

    Attributes:
        closed_count: Number of records marked closed.
        seeded_count: Number of records seeded into the next period.
    """

    period_year: int
    period_month: int
    closed_count: int
    seeded_count: int


__all__ = [
    "BalanceRecord",
    "BalanceEntry",
    "PeriodSummary",
    "CloseMonthResult",
]

"""Domain models for dashboard time series."""

from dataclasses import dataclass, replace
from decimal import Decimal
from enum import Enum


class ReturnMethod(str, Enum):
    """Return methodologies available for dashboard series."""

    SIMPLE = "simple"
    TWR = "twr"
    MWR = "mwr"


class DashboardRange(str, Enum):
    """Display windows for dashboard series."""

    ALL = "all"
    ONE_YEAR = "1y"
    YTD = "ytd"


@dataclass(frozen=True)
class MonthlyAggregatePoint:
    """Aggregated state of all accounts for one period.

    Attributes:
        period: Period key formatted as YYYY-MM.
        inflow: Converted net flow across accounts for the period.
        total_equity: Converted amount across accounts for the period.
        net_income: Total equity minus cumulative inflow.
        return_pct: Return percentage, None when undefined.
    """

    period: str
    inflow: Decimal
    total_equity: Decimal
    net_income: Decimal = Decimal("0")
    return_pct: Decimal | None = None

    @property
    def year(self) -> int:
        return int(self.period[:4])

    def with_performance(
        self,
        net_income: Decimal,
        return_pct: Decimal | None,
    ) -> "MonthlyAggregatePoint":
        return replace(self, net_income=net_income, return_pct=return_pct)


@dataclass(frozen=True)
class DashboardPoint:
    """Presentation point with values rounded to cents."""

    period: str
    inflow: Decimal
    equity_with_net_flow: Decimal
    equity_without_net_flow: Decimal
    net_income: Decimal
    return_pct: Decimal | None


@dataclass(frozen=True)
class DashboardSeries:
    """Dashboard series in the reporting currency."""

    currency: str
    range: DashboardRange
    from_period: str | None
    to_period: str | None
    return_method: ReturnMethod
    points: list[DashboardPoint]


__all__ = [
    "ReturnMethod",
    "DashboardRange",
    "MonthlyAggregatePoint",
    "DashboardPoint",
    "DashboardSeries",
]

"""Domain models package."""

from .accounts import (
    AccountAnalytics,
    AccountAnalyticsPoint,
    AccountDTO,
    AccountStatus,
)
from .analytics import (
    DashboardPoint,
    DashboardRange,
    DashboardSeries,
    MonthlyAggregatePoint,
    ReturnMethod,
)
from .balances import (
    BalanceEntry,
    BalanceRecord,
    CloseMonthResult,
    PeriodSummary,
)
from .currency import CurrencyPairKey, CurrencyRateRecord, DailyRates
from .planning import (
    PlanFactPoint,
    PlanFactSeries,
    PlanScenario,
    PlanScenarioInput,
)

__all__ = [
    "AccountAnalytics",
    "AccountAnalyticsPoint",
    "AccountDTO",
    "AccountStatus",
    "DashboardPoint",
    "DashboardRange",
    "DashboardSeries",
    "MonthlyAggregatePoint",
    "ReturnMethod",
    "BalanceEntry",
    "BalanceRecord",
    "CloseMonthResult",
    "PeriodSummary",
    "CurrencyPairKey",
    "CurrencyRateRecord",
    "DailyRates",
    "PlanFactPoint",
    "PlanFactSeries",
    "PlanScenario",
    "PlanScenarioInput",
]

"""Domain package for business rules and core models."""

from .constants import DEFAULT_REPORT_CURRENCY, SUPPORTED_CURRENCIES
from .errors import PortfolioAnalyticsError
from .models import (
    BalanceRecord,
    CurrencyRateRecord,
    DashboardRange,
    MonthlyAggregatePoint,
    PeriodSummary,
    ReturnMethod,
)
from .policies import is_period_editable, summarize_periods
from .services import (
    aggregate_monthly,
    build_plan_fact_points,
    build_windowed_series,
    compute_performance,
    resolve_scenario_defaults,
)

__all__ = [
    "DEFAULT_REPORT_CURRENCY",
    "SUPPORTED_CURRENCIES",
    "PortfolioAnalyticsError",
    "BalanceRecord",
    "CurrencyRateRecord",
    "DashboardRange",
    "MonthlyAggregatePoint",
    "PeriodSummary",
    "ReturnMethod",
    "is_period_editable",
    "summarize_periods",
    "aggregate_monthly",
    "build_plan_fact_points",
    "build_windowed_series",
    "compute_performance",
    "resolve_scenario_defaults",
]

"""Domain services package."""

from .account_analytics import build_account_analytics
from .aggregation import AmountConverter, aggregate_monthly
from .periods import (
    end_of_month,
    format_period,
    is_past_or_current_month,
    next_month,
    parse_period,
)
from .projection import (
    build_plan_fact_points,
    project_plan,
    resolve_scenario_defaults,
)
from .ranges import build_windowed_series, select_range, window_start_index
from .returns import RETURN_STRATEGIES, compute_net_income, compute_performance
from .validation import validate_balance_value, validate_period

__all__ = [
    "build_account_analytics",
    "AmountConverter",
    "aggregate_monthly",
    "end_of_month",
    "format_period",
    "is_past_or_current_month",
    "next_month",
    "parse_period",
    "build_plan_fact_points",
    "project_plan",
    "resolve_scenario_defaults",
    "build_windowed_series",
    "select_range",
    "window_start_index",
    "RETURN_STRATEGIES",
    "compute_net_income",
    "compute_performance",
    "validate_balance_value",
    "validate_period",
]

"""Application use cases package."""

from .close_month import CloseMonthUseCase
from .fx_utils import CurrencyConversionCache, CurrencyRateResolver
from .get_account_analytics import GetAccountAnalyticsUseCase
from .get_balance_periods import GetBalancesUseCase, ListBalancePeriodsUseCase
from .get_currency_rates import GetCurrencyRatesUseCase
from .get_dashboard_series import GetDashboardSeriesUseCase
from .get_plan_fact_series import GetPlanFactSeriesUseCase
from .sync_currency_rates import (
    SyncCurrencyRatesUseCase,
    SyncCurrencyRatesResult,
)
from .upsert_balances import UpsertBalancesUseCase

__all__ = [
    "CloseMonthUseCase",
    "CurrencyConversionCache",
    "CurrencyRateResolver",
    "GetAccountAnalyticsUseCase",
    "GetBalancesUseCase",
    "ListBalancePeriodsUseCase",
    "GetCurrencyRatesUseCase",
    "GetDashboardSeriesUseCase",
    "GetPlanFactSeriesUseCase",
    "SyncCurrencyRatesUseCase",
    "SyncCurrencyRatesResult",
    "UpsertBalancesUseCase",
]

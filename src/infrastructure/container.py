"""Composition root for wiring infrastructure adapters."""

from src.application.ports.account_directory import AccountDirectoryPort
from src.application.ports.balance_store import BalanceStorePort
from src.application.ports.currency_rate_store import CurrencyRateStorePort
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.plan_scenario_store import PlanScenarioStorePort
from src.application.ports.rate_source import CurrencyRateSourcePort
from src.application.use_cases.close_month import CloseMonthUseCase
from src.application.use_cases.get_account_analytics import (
    GetAccountAnalyticsUseCase,
)
from src.application.use_cases.get_balance_periods import (
    GetBalancesUseCase,
    ListBalancePeriodsUseCase,
)
from src.application.use_cases.get_currency_rates import (
    GetCurrencyRatesUseCase,
)
from src.application.use_cases.get_dashboard_series import (
    GetDashboardSeriesUseCase,
)
from src.application.use_cases.get_plan_fact_series import (
    GetPlanFactSeriesUseCase,
)
from src.application.use_cases.sync_currency_rates import (
    SyncCurrencyRatesUseCase,
)
from src.application.use_cases.upsert_balances import UpsertBalancesUseCase
from src.infrastructure.accounts_repository import SqlAlchemyAccountDirectory
from src.infrastructure.balance_repository import SqlAlchemyBalanceStore
from src.infrastructure.cbr_client import CbrRateSource
from src.infrastructure.currency_rate_repository import (
    SqlAlchemyCurrencyRateStore,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.plan_scenario_repository import (
    SqlAlchemyPlanScenarioStore,
)
from src.infrastructure.settings import AnalyticsSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_account_directory(
    db_port: DatabaseEnginePort | None = None,
) -> AccountDirectoryPort:
    """Return the account directory adapter."""
    return SqlAlchemyAccountDirectory(db_port or build_database_adapter())


def build_balance_store(
    db_port: DatabaseEnginePort | None = None,
) -> BalanceStorePort:
    """Return the balance store adapter."""
    return SqlAlchemyBalanceStore(db_port or build_database_adapter())


def build_rate_store(
    db_port: DatabaseEnginePort | None = None,
) -> CurrencyRateStorePort:
    """Return the currency rate store adapter."""
    return SqlAlchemyCurrencyRateStore(db_port or build_database_adapter())


def build_plan_scenario_store(
    db_port: DatabaseEnginePort | None = None,
) -> PlanScenarioStorePort:
    """Return the plan scenario store adapter."""
    return SqlAlchemyPlanScenarioStore(db_port or build_database_adapter())


def build_rate_source(
    settings: AnalyticsSettings | None = None,
) -> CurrencyRateSourcePort:
    """Return the configured external rate source."""
    resolved = settings or AnalyticsSettings.from_env()
    return CbrRateSource(
        base_url=resolved.rate_source_url,
        timeout=resolved.rate_source_timeout,
        logger=get_app_logger(),
    )


def build_dashboard_series_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetDashboardSeriesUseCase:
    """Return the dashboard series use case wired to the database."""
    resolved_db = db_port or build_database_adapter()
    return GetDashboardSeriesUseCase(
        account_directory=build_account_directory(resolved_db),
        balance_store=build_balance_store(resolved_db),
        rate_store=build_rate_store(resolved_db),
        logger=get_app_logger(),
    )


def build_plan_fact_series_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetPlanFactSeriesUseCase:
    """Return the plan/fact series use case wired to the database."""
    resolved_db = db_port or build_database_adapter()
    return GetPlanFactSeriesUseCase(
        account_directory=build_account_directory(resolved_db),
        balance_store=build_balance_store(resolved_db),
        rate_store=build_rate_store(resolved_db),
        scenario_store=build_plan_scenario_store(resolved_db),
        logger=get_app_logger(),
    )


def build_upsert_balances_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> UpsertBalancesUseCase:
    """Return the balance upsert use case wired to the database."""
    resolved_db = db_port or build_database_adapter()
    return UpsertBalancesUseCase(
        account_directory=build_account_directory(resolved_db),
        balance_store=build_balance_store(resolved_db),
        logger=get_app_logger(),
    )


def build_close_month_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> CloseMonthUseCase:
    """Return the close-month use case wired to the database."""
    resolved_db = db_port or build_database_adapter()
    return CloseMonthUseCase(
        account_directory=build_account_directory(resolved_db),
        balance_store=build_balance_store(resolved_db),
        logger=get_app_logger(),
    )


def build_list_balance_periods_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> ListBalancePeriodsUseCase:
    """Return the balance period listing use case wired to the database."""
    resolved_db = db_port or build_database_adapter()
    return ListBalancePeriodsUseCase(
        account_directory=build_account_directory(resolved_db),
        balance_store=build_balance_store(resolved_db),
        logger=get_app_logger(),
    )


def build_get_balances_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetBalancesUseCase:
    """Return the single-period balances use case wired to the database."""
    resolved_db = db_port or build_database_adapter()
    return GetBalancesUseCase(
        account_directory=build_account_directory(resolved_db),
        balance_store=build_balance_store(resolved_db),
    )


def build_account_analytics_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetAccountAnalyticsUseCase:
    """Return the account analytics use case wired to the database."""
    resolved_db = db_port or build_database_adapter()
    return GetAccountAnalyticsUseCase(
        account_directory=build_account_directory(resolved_db),
        balance_store=build_balance_store(resolved_db),
        logger=get_app_logger(),
    )


def build_currency_rates_use_case(
    db_port: DatabaseEnginePort | None = None,
    settings: AnalyticsSettings | None = None,
) -> GetCurrencyRatesUseCase:
    """Return the currency rate listing use case wired to the database."""
    resolved = settings or AnalyticsSettings.from_env()
    return GetCurrencyRatesUseCase(
        rate_store=build_rate_store(db_port),
        logger=get_app_logger(),
        max_span_days=resolved.rate_sync_max_span_days,
    )


def build_sync_currency_rates_use_case(
    db_port: DatabaseEnginePort | None = None,
    settings: AnalyticsSettings | None = None,
) -> SyncCurrencyRatesUseCase:
    """Return the rate sync use case wired to the database and feed."""
    resolved = settings or AnalyticsSettings.from_env()
    return SyncCurrencyRatesUseCase(
        rate_store=build_rate_store(db_port),
        rate_source=build_rate_source(resolved),
        logger=get_app_logger(),
        max_span_days=resolved.rate_sync_max_span_days,
        lookback_days=resolved.rate_sync_lookback_days,
        retry_attempts=resolved.rate_sync_retry_attempts,
    )


__all__ = [
    "build_database_adapter",
    "build_account_directory",
    "build_balance_store",
    "build_rate_store",
    "build_plan_scenario_store",
    "build_rate_source",
    "build_dashboard_series_use_case",
    "build_plan_fact_series_use_case",
    "build_upsert_balances_use_case",
    "build_close_month_use_case",
    "build_list_balance_periods_use_case",
    "build_get_balances_use_case",
    "build_account_analytics_use_case",
    "build_currency_rates_use_case",
    "build_sync_currency_rates_use_case",
]

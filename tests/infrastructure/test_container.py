"""Tests for the composition root."""

from unittest.mock import MagicMock

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
from src.application.use_cases.sync_currency_rates import (
    SyncCurrencyRatesUseCase,
)
from src.infrastructure import container
from src.infrastructure.balance_repository import SqlAlchemyBalanceStore
from src.infrastructure.cbr_client import CbrRateSource
from src.infrastructure.settings import AnalyticsSettings


def test_build_balance_store_uses_given_db_port() -> None:
    db_port = MagicMock()

    store = container.build_balance_store(db_port)

    assert isinstance(store, SqlAlchemyBalanceStore)
    assert store._db_port is db_port


def test_build_rate_source_uses_settings() -> None:
    settings = AnalyticsSettings(
        rate_source_url="https://mirror.test/daily",
        rate_source_timeout=7.0,
    )

    source = container.build_rate_source(settings)

    assert isinstance(source, CbrRateSource)
    assert source._base_url == "https://mirror.test/daily"
    assert source._timeout == 7.0


def test_build_use_cases_share_one_db_port() -> None:
    db_port = MagicMock()

    dashboard = container.build_dashboard_series_use_case(db_port)
    close_month = container.build_close_month_use_case(db_port)

    assert isinstance(dashboard, GetDashboardSeriesUseCase)
    assert isinstance(close_month, CloseMonthUseCase)
    assert dashboard._balance_store._db_port is db_port
    assert close_month._account_directory._db_port is db_port


def test_build_sync_use_case_applies_settings() -> None:
    settings = AnalyticsSettings(
        rate_sync_max_span_days=31,
        rate_sync_lookback_days=2,
        rate_sync_retry_attempts=4,
    )

    use_case = container.build_sync_currency_rates_use_case(
        MagicMock(),
        settings,
    )

    assert isinstance(use_case, SyncCurrencyRatesUseCase)
    assert use_case._max_span_days == 31
    assert use_case._lookback_days == 2
    assert use_case._retry_attempts == 4


def test_build_read_use_cases_share_one_db_port() -> None:
    db_port = MagicMock()

    periods = container.build_list_balance_periods_use_case(db_port)
    balances = container.build_get_balances_use_case(db_port)
    analytics = container.build_account_analytics_use_case(db_port)

    assert isinstance(periods, ListBalancePeriodsUseCase)
    assert isinstance(balances, GetBalancesUseCase)
    assert isinstance(analytics, GetAccountAnalyticsUseCase)
    assert periods._balance_store._db_port is db_port
    assert balances._account_directory._db_port is db_port
    assert analytics._balance_store._db_port is db_port


def test_build_currency_rates_use_case_applies_span_limit() -> None:
    db_port = MagicMock()

    use_case = container.build_currency_rates_use_case(
        db_port,
        AnalyticsSettings(rate_sync_max_span_days=90),
    )

    assert isinstance(use_case, GetCurrencyRatesUseCase)
    assert use_case._max_span_days == 90
    assert use_case._rate_store._db_port is db_port

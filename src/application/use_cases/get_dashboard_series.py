"""Use case to build the dashboard series in a reporting currency."""

from src.application.ports.account_directory import AccountDirectoryPort
from src.application.ports.balance_store import BalanceStorePort
from src.application.ports.currency_rate_store import CurrencyRateStorePort
from src.application.use_cases.fx_utils import (
    CurrencyConversionCache,
    CurrencyRateResolver,
)
from src.domain.models import (
    DashboardPoint,
    DashboardRange,
    DashboardSeries,
    ReturnMethod,
)
from src.domain.services import aggregate_monthly, build_windowed_series
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import round_money


class GetDashboardSeriesUseCase:
    """Aggregate balances, compute returns, and trim to a display window."""

    def __init__(
        self,
        account_directory: AccountDirectoryPort,
        balance_store: BalanceStorePort,
        rate_store: CurrencyRateStorePort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            account_directory: Port listing the user's accounts.
            balance_store: Port providing balance records.
            rate_store: Port providing stored currency rates.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._account_directory = account_directory
        self._balance_store = balance_store
        self._rate_store = rate_store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        user_id: str,
        report_currency: str,
        range_: DashboardRange = DashboardRange.ALL,
        return_method: ReturnMethod = ReturnMethod.SIMPLE,
    ) -> DashboardSeries:
        """Return the dashboard series.

        Args:
            user_id: Owner of the accounts, already authorized.
            report_currency: Currency all balances are converted into.
            range_: Display window.
            return_method: Return methodology.

        Returns:
            DashboardSeries: Windowed points rounded to cents.

        Raises:
            RateUnavailableError: If no currency rates were ever synced.
        """
        range_ = DashboardRange(range_)
        return_method = ReturnMethod(return_method)
        accounts = self._account_directory.list_for_user(user_id)
        currencies = {account.id: account.currency for account in accounts}
        records = self._balance_store.find_all(list(currencies))

        cache = CurrencyConversionCache(
            CurrencyRateResolver(self._rate_store),
            logger=self._logger,
        )
        series = aggregate_monthly(
            records,
            currencies,
            report_currency,
            cache,
            self._logger,
        )
        windowed = build_windowed_series(series, range_, return_method)
        self._logger.info(
            f"Dashboard series computed: user={user_id}, "
            f"currency={report_currency}, range={range_.value}, "
            f"method={return_method.value}, points={len(windowed)}, "
            f"rates_resolved={len(cache)}"
        )

        points = [
            DashboardPoint(
                period=point.period,
                inflow=round_money(point.inflow),
                equity_with_net_flow=round_money(point.total_equity),
                equity_without_net_flow=round_money(point.net_income),
                net_income=round_money(point.net_income),
                return_pct=point.return_pct,
            )
            for point in windowed
        ]
        return DashboardSeries(
            currency=report_currency,
            range=range_,
            from_period=points[0].period if points else None,
            to_period=points[-1].period if points else None,
            return_method=return_method,
            points=points,
        )


__all__ = ["GetDashboardSeriesUseCase", "DashboardSeries"]

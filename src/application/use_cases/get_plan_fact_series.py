"""Use case to compare realized balances with a plan scenario."""

from datetime import date

from src.application.ports.account_directory import AccountDirectoryPort
from src.application.ports.balance_store import BalanceStorePort
from src.application.ports.currency_rate_store import CurrencyRateStorePort
from src.application.ports.plan_scenario_store import PlanScenarioStorePort
from src.application.use_cases.fx_utils import (
    CurrencyConversionCache,
    CurrencyRateResolver,
)
from src.domain.errors import ScenarioNotFoundError
from src.domain.models import PlanFactSeries, PlanScenarioInput
from src.domain.services import (
    aggregate_monthly,
    build_plan_fact_points,
    is_past_or_current_month,
    resolve_scenario_defaults,
)
from src.infrastructure.logging.logger import get_app_logger


class GetPlanFactSeriesUseCase:
    """Blend realized equity with a forward compounding projection."""

    def __init__(
        self,
        account_directory: AccountDirectoryPort,
        balance_store: BalanceStorePort,
        rate_store: CurrencyRateStorePort,
        scenario_store: PlanScenarioStorePort | None = None,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            account_directory: Port listing the user's accounts.
            balance_store: Port providing balance records.
            rate_store: Port providing stored currency rates.
            scenario_store: Optional port resolving saved scenarios by id.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._account_directory = account_directory
        self._balance_store = balance_store
        self._rate_store = rate_store
        self._scenario_store = scenario_store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        user_id: str,
        scenario: PlanScenarioInput | str,
        today: date | None = None,
    ) -> PlanFactSeries:
        """Return the plan/fact series for a scenario.

        Args:
            user_id: Owner of the accounts, already authorized.
            scenario: Scenario parameters, or the id of a saved scenario.
            today: Reference date; balances after its month are ignored.

        Returns:
            PlanFactSeries: Points carrying fact, plan, or both.

        Raises:
            ScenarioNotFoundError: If a scenario id cannot be resolved.
            InvalidDateRangeError: If the scenario ends before it starts.
        """
        today = today or date.today()
        resolved = resolve_scenario_defaults(
            self._resolve_scenario(user_id, scenario),
            today,
        )

        accounts = self._account_directory.list_for_user(user_id)
        currencies = {account.id: account.currency for account in accounts}
        records = [
            record
            for record in self._balance_store.find_all(list(currencies))
            if is_past_or_current_month(
                record.period_year, record.period_month, today
            )
        ]
        cache = CurrencyConversionCache(
            CurrencyRateResolver(self._rate_store),
            logger=self._logger,
        )
        realized = aggregate_monthly(
            records,
            currencies,
            resolved.currency,
            cache,
            self._logger,
        )
        points = build_plan_fact_points(realized, resolved)
        self._logger.info(
            f"Plan/fact series computed: user={user_id}, "
            f"currency={resolved.currency}, realized={len(realized)}, "
            f"points={len(points)}"
        )
        return PlanFactSeries(currency=resolved.currency, points=points)

    def _resolve_scenario(
        self,
        user_id: str,
        scenario: PlanScenarioInput | str,
    ) -> PlanScenarioInput:
        if not isinstance(scenario, str):
            return scenario
        found = None
        if self._scenario_store is not None:
            found = self._scenario_store.find_for_user(user_id, scenario)
        if found is None:
            raise ScenarioNotFoundError(scenario)
        return found


__all__ = ["GetPlanFactSeriesUseCase", "PlanFactSeries"]

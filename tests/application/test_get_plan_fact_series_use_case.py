"""Tests for the GetPlanFactSeriesUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from fakes import (
    InMemoryAccountDirectory,
    InMemoryBalanceStore,
    InMemoryRateStore,
    InMemoryScenarioStore,
    make_balance,
)
from src.application.use_cases.get_plan_fact_series import (
    GetPlanFactSeriesUseCase,
)
from src.domain.errors import ScenarioNotFoundError
from src.domain.models import AccountDTO, PlanScenarioInput


def _use_case(balances, scenarios=None) -> GetPlanFactSeriesUseCase:
    return GetPlanFactSeriesUseCase(
        account_directory=InMemoryAccountDirectory(
            {"user-1": [AccountDTO(id="a", currency="RUB")]}
        ),
        balance_store=InMemoryBalanceStore(balances),
        rate_store=InMemoryRateStore(),
        scenario_store=InMemoryScenarioStore(scenarios or {}),
        logger=MagicMock(),
    )


def test_execute_projects_from_last_realized_month() -> None:
    """Facts up to today should seed the plan from the join month."""
    use_case = _use_case(
        [
            make_balance("a", 2024, 1, "1000", "1000"),
            make_balance("a", 2024, 2, "1100", "0"),
            make_balance("a", 2024, 9, "9999", "0"),
        ]
    )
    scenario = PlanScenarioInput(
        currency="RUB",
        end_date=date(2024, 4, 30),
        start_date=date(2024, 1, 1),
        annual_yield_rate=Decimal("0"),
        monthly_inflow=Decimal("100"),
    )

    series = use_case.execute("user-1", scenario, today=date(2024, 2, 15))

    assert series.currency == "RUB"
    assert [(p.period, p.fact, p.plan) for p in series.points] == [
        ("2024-01", Decimal("1000.00"), None),
        ("2024-02", Decimal("1100.00"), Decimal("1100.00")),
        ("2024-03", None, Decimal("1200.00")),
        ("2024-04", None, Decimal("1300.00")),
    ]


def test_execute_without_history_uses_initial_amount() -> None:
    scenario = PlanScenarioInput(
        currency="RUB",
        end_date=date(2024, 2, 29),
        start_date=date(2024, 1, 1),
        annual_yield_rate=Decimal("0.12"),
        monthly_inflow=Decimal("1000"),
        initial_amount=Decimal("0"),
    )

    series = _use_case([]).execute(
        "user-1", scenario, today=date(2023, 12, 1)
    )

    assert [p.plan for p in series.points] == [
        Decimal("0.00"),
        Decimal("1000.00"),
    ]


def test_execute_loads_saved_scenario_by_id() -> None:
    saved = PlanScenarioInput(
        id="s-1",
        currency="RUB",
        end_date=date(2024, 3, 31),
    )
    use_case = _use_case([], scenarios={("user-1", "s-1"): saved})

    series = use_case.execute("user-1", "s-1", today=date(2024, 2, 10))

    assert [p.period for p in series.points] == ["2024-02", "2024-03"]


def test_execute_rejects_unknown_scenario_id() -> None:
    with pytest.raises(ScenarioNotFoundError):
        _use_case([]).execute("user-1", "missing", today=date(2024, 1, 1))


def test_execute_rejects_scenario_of_other_user() -> None:
    saved = PlanScenarioInput(currency="RUB", end_date=date(2024, 3, 31))
    use_case = _use_case([], scenarios={("user-2", "s-1"): saved})

    with pytest.raises(ScenarioNotFoundError):
        use_case.execute("user-1", "s-1", today=date(2024, 1, 1))

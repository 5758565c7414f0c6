"""Domain service projecting a compounding plan and blending it with facts."""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal

from src.domain.errors import InvalidDateRangeError
from src.domain.models import (
    MonthlyAggregatePoint,
    PlanFactPoint,
    PlanScenario,
    PlanScenarioInput,
)
from src.domain.services.periods import format_period, next_month, parse_period
from src.utils.decimal_utils import coerce_decimal, round_money

_MONTHS_PER_YEAR = Decimal("12")


def resolve_scenario_defaults(
    scenario: PlanScenarioInput,
    today: date,
) -> PlanScenario:
    """Fill optional scenario fields with their defaults.

    A missing start date defaults to the first day of the current month and
    missing amounts or rates default to zero.

    Args:
        scenario: Scenario parameters as provided by the caller.
        today: Reference date used for the start date default.

    Returns:
        PlanScenario: Scenario with every field populated.

    Raises:
        InvalidDateRangeError: If the end date lies before the start date.
    """
    start_date = scenario.start_date or today.replace(day=1)
    if scenario.end_date < start_date:
        raise InvalidDateRangeError(
            f"Scenario end date {scenario.end_date.isoformat()} is before "
            f"start date {start_date.isoformat()}"
        )
    return PlanScenario(
        currency=scenario.currency,
        annual_yield_rate=coerce_decimal(scenario.annual_yield_rate),
        monthly_inflow=coerce_decimal(scenario.monthly_inflow),
        initial_amount=coerce_decimal(scenario.initial_amount),
        start_date=start_date,
        end_date=scenario.end_date,
        id=scenario.id,
        name=scenario.name,
    )


def project_plan(
    seed: Decimal,
    anchor: tuple[int, int],
    end: tuple[int, int],
    annual_yield_rate: Decimal,
    monthly_inflow: Decimal,
) -> dict[tuple[int, int], Decimal]:
    """Compound a balance monthly from the anchor period through ``end``.

    The anchor carries the seed itself; each later month applies
    ``balance * (1 + annual_yield_rate / 12) + monthly_inflow``.

    Returns:
        dict[tuple[int, int], Decimal]: Unrounded balance per period.
    """
    if anchor > end:
        return {}
    growth = Decimal("1") + annual_yield_rate / _MONTHS_PER_YEAR
    balances = {anchor: seed}
    balance = seed
    cursor = next_month(*anchor)
    while cursor <= end:
        balance = balance * growth + monthly_inflow
        balances[cursor] = balance
        cursor = next_month(*cursor)
    return balances


def build_plan_fact_points(
    realized: Sequence[MonthlyAggregatePoint],
    scenario: PlanScenario,
) -> list[PlanFactPoint]:
    """Merge realized equity with the projected plan.

    The projection starts from the later of the last realized period and the
    scenario start period. It is seeded with the last realized total equity,
    or the scenario initial amount when nothing was realized yet.

    Args:
        realized: Aggregated points up to the reference date, ascending.
        scenario: Fully defaulted scenario.

    Returns:
        list[PlanFactPoint]: Points sorted by period.
    """
    facts = {
        parse_period(point.period): round_money(point.total_equity)
        for point in realized
    }
    start = (scenario.start_date.year, scenario.start_date.month)
    end = (scenario.end_date.year, scenario.end_date.month)
    if realized:
        anchor = max(parse_period(realized[-1].period), start)
        seed = realized[-1].total_equity
    else:
        anchor = start
        seed = scenario.initial_amount

    plan = project_plan(
        seed,
        anchor,
        end,
        scenario.annual_yield_rate,
        scenario.monthly_inflow,
    )
    periods = sorted(set(facts) | set(plan))
    return [
        PlanFactPoint(
            period=format_period(year, month),
            fact=facts.get((year, month)),
            plan=(
                round_money(plan[(year, month)])
                if (year, month) in plan
                else None
            ),
        )
        for year, month in periods
    ]


__all__ = [
    "resolve_scenario_defaults",
    "project_plan",
    "build_plan_fact_points",
]

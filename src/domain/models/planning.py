"""Domain models for plan scenarios and plan/fact series."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class PlanScenarioInput:
    """Scenario parameters as provided, optional fields not yet defaulted."""

    currency: str
    end_date: date
    annual_yield_rate: Decimal | None = None
    monthly_inflow: Decimal | None = None
    initial_amount: Decimal | None = None
    start_date: date | None = None
    id: str | None = None
    name: str | None = None


@dataclass(frozen=True)
class PlanScenario:
    """Fully defaulted scenario used by the projection.

    Attributes:
        annual_yield_rate: Expected yearly yield as a fraction (0.12 = 12%).
        monthly_inflow: Contribution added at the end of every month.
        initial_amount: Seed balance when no realized data exists.
        start_date: First day of the projection horizon.
        end_date: Last day of the projection horizon, inclusive.
    """

    currency: str
    annual_yield_rate: Decimal
    monthly_inflow: Decimal
    initial_amount: Decimal
    start_date: date
    end_date: date
    id: str | None = None
    name: str | None = None


@dataclass(frozen=True)
class PlanFactPoint:
    """Period carrying a realized value, a projected value, or both."""

    period: str
    fact: Decimal | None
    plan: Decimal | None


@dataclass(frozen=True)
class PlanFactSeries:
    """Merged plan/fact series in the scenario currency."""

    currency: str
    points: list[PlanFactPoint]


__all__ = [
    "PlanScenarioInput",
    "PlanScenario",
    "PlanFactPoint",
    "PlanFactSeries",
]

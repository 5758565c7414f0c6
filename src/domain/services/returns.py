"""Domain service computing net income and returns over a monthly series."""

from collections.abc import Callable, Sequence
from decimal import Decimal

from src.domain.models import MonthlyAggregatePoint, ReturnMethod
from src.utils.decimal_utils import round_money

_ZERO = Decimal("0")
_ONE = Decimal("1")
_HUNDRED = Decimal("100")
_TWO = Decimal("2")


def compute_net_income(
    points: Sequence[MonthlyAggregatePoint],
    baseline_net_flow: Decimal = _ZERO,
) -> list[Decimal]:
    """Return total equity minus cumulative inflow for every point.

    Args:
        points: Series ordered ascending by period.
        baseline_net_flow: Inflow accumulated before the first point.

    Returns:
        list[Decimal]: Net income per point.
    """
    cumulative = baseline_net_flow
    net_income = []
    for point in points:
        cumulative += point.inflow
        net_income.append(point.total_equity - cumulative)
    return net_income


class _ReturnState:
    """Running state shared across one pass of a return method."""

    def __init__(self) -> None:
        self.cumulative = _ZERO


ReturnStrategy = Callable[
    [MonthlyAggregatePoint, MonthlyAggregatePoint, _ReturnState],
    Decimal | None,
]


def _simple_return(
    prev: MonthlyAggregatePoint,
    current: MonthlyAggregatePoint,
    state: _ReturnState,
) -> Decimal | None:
    if prev.total_equity == 0:
        return None
    return (current.total_equity / prev.total_equity - _ONE) * _HUNDRED


def _time_weighted_return(
    prev: MonthlyAggregatePoint,
    current: MonthlyAggregatePoint,
    state: _ReturnState,
) -> Decimal | None:
    if prev.total_equity == 0:
        return None
    period_return = (current.net_income - prev.net_income) / prev.total_equity
    state.cumulative = (_ONE + state.cumulative) * (_ONE + period_return) - _ONE
    return state.cumulative * _HUNDRED


def _money_weighted_return(
    prev: MonthlyAggregatePoint,
    current: MonthlyAggregatePoint,
    state: _ReturnState,
) -> Decimal | None:
    # Average invested capital approximation, not a full IRR.
    denominator = prev.total_equity + current.inflow / _TWO
    if denominator == 0:
        return None
    gain = current.total_equity - prev.total_equity - current.inflow
    return gain / denominator * _HUNDRED


RETURN_STRATEGIES: dict[ReturnMethod, ReturnStrategy] = {
    ReturnMethod.SIMPLE: _simple_return,
    ReturnMethod.TWR: _time_weighted_return,
    ReturnMethod.MWR: _money_weighted_return,
}

_missing = set(ReturnMethod) - set(RETURN_STRATEGIES)
if _missing:
    raise RuntimeError(f"Return methods without strategy: {sorted(_missing)}")


def compute_performance(
    points: Sequence[MonthlyAggregatePoint],
    method: ReturnMethod,
    baseline_net_flow: Decimal = _ZERO,
) -> list[MonthlyAggregatePoint]:
    """Populate net income and return percentage for every point.

    The first point never has a return. Percentages are rounded to two
    places, half up.

    Args:
        points: Series with inflow and total equity populated.
        method: Return methodology to apply.
        baseline_net_flow: Inflow accumulated before the first point.

    Returns:
        list[MonthlyAggregatePoint]: New points with performance fields set.
    """
    strategy = RETURN_STRATEGIES[ReturnMethod(method)]
    net_income = compute_net_income(points, baseline_net_flow)
    with_income = [
        point.with_performance(income, None)
        for point, income in zip(points, net_income)
    ]

    state = _ReturnState()
    result = []
    for index, point in enumerate(with_income):
        if index == 0:
            result.append(point)
            continue
        raw = strategy(with_income[index - 1], point, state)
        return_pct = None if raw is None else round_money(raw)
        result.append(point.with_performance(point.net_income, return_pct))
    return result


__all__ = [
    "RETURN_STRATEGIES",
    "compute_net_income",
    "compute_performance",
]

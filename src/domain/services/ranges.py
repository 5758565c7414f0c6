"""Domain service trimming a monthly series to a display window."""

from collections.abc import Sequence
from decimal import Decimal

from src.domain.constants import TRAILING_YEAR_POINTS
from src.domain.models import (
    DashboardRange,
    MonthlyAggregatePoint,
    ReturnMethod,
)
from src.domain.services.returns import compute_performance


def window_start_index(
    points: Sequence[MonthlyAggregatePoint],
    range_: DashboardRange,
) -> int:
    """Return the index of the first point inside the requested window.

    Args:
        points: Full series ordered ascending by period.
        range_: Requested display window.

    Returns:
        int: Start index; ``len(points)`` is never returned for a
        non-empty series.
    """
    range_ = DashboardRange(range_)
    if not points or range_ == DashboardRange.ALL:
        return 0
    if range_ == DashboardRange.YTD:
        latest_year = points[-1].year
        for index, point in enumerate(points):
            if point.year == latest_year:
                return index
    return max(len(points) - TRAILING_YEAR_POINTS, 0)


def select_range(
    points: Sequence[MonthlyAggregatePoint],
    range_: DashboardRange,
) -> tuple[list[MonthlyAggregatePoint], Decimal]:
    """Slice the series and compute the baseline net flow of the window.

    Args:
        points: Full series ordered ascending by period.
        range_: Requested display window.

    Returns:
        tuple[list[MonthlyAggregatePoint], Decimal]: Window points and the
        cumulative inflow of every point before the window start.
    """
    start = window_start_index(points, range_)
    baseline = sum((point.inflow for point in points[:start]), Decimal("0"))
    return list(points[start:]), baseline


def build_windowed_series(
    points: Sequence[MonthlyAggregatePoint],
    range_: DashboardRange,
    method: ReturnMethod,
) -> list[MonthlyAggregatePoint]:
    """Select the window and recompute performance with a baseline carry.

    Net income inside the window keeps the meaning it has on the full
    series; only the visible range changes.
    """
    window, baseline = select_range(points, range_)
    return compute_performance(window, method, baseline_net_flow=baseline)


__all__ = ["window_start_index", "select_range", "build_windowed_series"]

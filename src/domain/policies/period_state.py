"""Policies deciding whether a reporting period is open or closed."""

from collections.abc import Iterable

from src.domain.models import BalanceRecord, PeriodSummary


def is_period_editable(records: Iterable[BalanceRecord]) -> bool:
    """Return True when no in-scope record of the period is closed."""
    return not any(record.is_closed for record in records)


def is_period_fully_closed(records: Iterable[BalanceRecord]) -> bool:
    """Return True when records exist and every one of them is closed."""
    records = list(records)
    return bool(records) and all(record.is_closed for record in records)


def summarize_periods(records: Iterable[BalanceRecord]) -> list[PeriodSummary]:
    """Summarize the state of every period present in the records.

    Args:
        records: Balance records across periods for one user.

    Returns:
        list[PeriodSummary]: Summaries sorted newest period first.
    """
    closed_by_period: dict[tuple[int, int], bool] = {}
    for record in records:
        key = (record.period_year, record.period_month)
        closed_by_period[key] = closed_by_period.get(key, True) and (
            record.is_closed
        )
    return [
        PeriodSummary(
            period_year=year,
            period_month=month,
            is_closed=is_closed,
            has_balances=True,
        )
        for (year, month), is_closed in sorted(
            closed_by_period.items(),
            reverse=True,
        )
    ]


__all__ = [
    "is_period_editable",
    "is_period_fully_closed",
    "summarize_periods",
]

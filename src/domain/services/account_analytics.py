"""Domain service building the history of a single account."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.models import (
    AccountAnalytics,
    AccountAnalyticsPoint,
    AccountDTO,
    BalanceRecord,
)
from src.domain.services.periods import format_period


def build_account_analytics(
    account: AccountDTO,
    records: Iterable[BalanceRecord],
) -> AccountAnalytics:
    """Compute per-period equity and cumulative inflow in account currency.

    Args:
        account: Account the records belong to.
        records: Balance records of the account, any order.

    Returns:
        AccountAnalytics: Points ascending by period with running totals.
    """
    own_records = sorted(
        (record for record in records if record.account_id == account.id),
        key=lambda record: (record.period_year, record.period_month),
    )
    total_inflow = Decimal("0")
    points = []
    for record in own_records:
        total_inflow += record.net_flow
        points.append(
            AccountAnalyticsPoint(
                period=format_period(record.period_year, record.period_month),
                equity=record.amount,
                inflow=record.net_flow,
                total_inflow=total_inflow,
            )
        )
    return AccountAnalytics(
        account=account,
        currency=account.currency,
        status=account.status,
        total_equity=points[-1].equity if points else Decimal("0"),
        total_inflow=total_inflow,
        first_period=points[0].period if points else None,
        last_period=points[-1].period if points else None,
        points=points,
    )


__all__ = ["build_account_analytics"]

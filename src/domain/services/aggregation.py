"""Domain service rolling account balances into a monthly series."""

from collections.abc import Iterable, Mapping
from datetime import date
from decimal import Decimal
from logging import Logger
from typing import Protocol

from src.domain.errors import RateMissingForPairError
from src.domain.models import BalanceRecord, MonthlyAggregatePoint
from src.domain.services.periods import end_of_month, format_period


class AmountConverter(Protocol):
    """Anything able to convert an amount between currencies as of a day."""

    def convert(
        self,
        day: date,
        amount: Decimal,
        from_currency: str,
        to_currency: str,
    ) -> Decimal:
        """Return the amount expressed in ``to_currency``."""


def aggregate_monthly(
    records: Iterable[BalanceRecord],
    account_currencies: Mapping[str, str | None],
    report_currency: str,
    converter: AmountConverter,
    logger: Logger,
) -> list[MonthlyAggregatePoint]:
    """Aggregate balance records into one point per period.

    Amounts and net flows are converted as of the last day of the record's
    month. Records without a resolvable account currency, or whose pair has
    no rate, are skipped. ``RateUnavailableError`` propagates.

    Args:
        records: Balance records across all periods and accounts.
        account_currencies: Mapping of account id to account currency.
        report_currency: Currency of the resulting series.
        converter: Conversion cache scoped to the current computation.
        logger: Logger used for warnings.

    Returns:
        list[MonthlyAggregatePoint]: Points sorted ascending by period.
    """
    totals: dict[tuple[int, int], tuple[Decimal, Decimal]] = {}
    for record in records:
        currency = account_currencies.get(record.account_id)
        if not currency:
            logger.warning(
                f"Skipping balance of account {record.account_id}: "
                "no currency"
            )
            continue
        valuation_date = end_of_month(record.period_year, record.period_month)
        try:
            amount = converter.convert(
                valuation_date, record.amount, currency, report_currency
            )
            net_flow = converter.convert(
                valuation_date, record.net_flow, currency, report_currency
            )
        except RateMissingForPairError as exc:
            logger.warning(
                f"Skipping balance of account {record.account_id} "
                f"for {format_period(record.period_year, record.period_month)}"
                f": {exc}"
            )
            continue
        key = (record.period_year, record.period_month)
        inflow, equity = totals.get(key, (Decimal("0"), Decimal("0")))
        totals[key] = (inflow + net_flow, equity + amount)

    return [
        MonthlyAggregatePoint(
            period=format_period(year, month),
            inflow=inflow,
            total_equity=equity,
        )
        for (year, month), (inflow, equity) in sorted(totals.items())
    ]


__all__ = ["AmountConverter", "aggregate_monthly"]

"""Use case closing a reporting period and seeding the next one.

Closing marks every record of the period closed, then carries the amount of
each active account into the following period with a zero net flow, unless
that account already has a record there. The close relies on two store
guarantees to stay safe under concurrent requests:

* ``close_period`` only updates records that are still open, so a second
  closer observes zero updated rows;
* ``insert_many`` skips records that already exist for (account, period).
"""

from decimal import Decimal

from src.application.ports.account_directory import AccountDirectoryPort
from src.application.ports.balance_store import BalanceStorePort
from src.domain.errors import (
    NoBalancesForPeriodError,
    PeriodAlreadyClosedError,
)
from src.domain.models import BalanceRecord, CloseMonthResult
from src.domain.policies import is_period_fully_closed
from src.domain.services import next_month, validate_period
from src.infrastructure.logging.logger import get_app_logger


class CloseMonthUseCase:
    """Transition a period from open to closed."""

    def __init__(
        self,
        account_directory: AccountDirectoryPort,
        balance_store: BalanceStorePort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            account_directory: Port listing the user's accounts.
            balance_store: Port providing balance records.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._account_directory = account_directory
        self._balance_store = balance_store
        self._logger = logger or get_app_logger()

    def execute(self, user_id: str, year: int, month: int) -> CloseMonthResult:
        """Close the period and seed the following one.

        Args:
            user_id: Owner of the accounts, already authorized.
            year: Period year.
            month: Period month.

        Returns:
            CloseMonthResult: Number of closed and seeded records.

        Raises:
            NoBalancesForPeriodError: If the period holds no records.
            PeriodAlreadyClosedError: If the period is already closed.
        """
        validate_period(year, month)
        accounts = self._account_directory.list_for_user(user_id)
        account_ids = [account.id for account in accounts]

        records = self._balance_store.find(account_ids, year, month)
        if not records:
            raise NoBalancesForPeriodError(year, month)
        if is_period_fully_closed(records):
            raise PeriodAlreadyClosedError(year, month)

        closed_count = self._balance_store.close_period(
            account_ids, year, month
        )
        if closed_count == 0:
            raise PeriodAlreadyClosedError(year, month)

        next_year, following_month = next_month(year, month)
        existing_next = {
            record.account_id
            for record in self._balance_store.find(
                account_ids, next_year, following_month
            )
        }
        amounts = {record.account_id: record.amount for record in records}
        seeds = [
            BalanceRecord(
                account_id=account.id,
                period_year=next_year,
                period_month=following_month,
                amount=amounts[account.id],
                net_flow=Decimal("0"),
                is_closed=False,
            )
            for account in accounts
            if account.is_active
            and account.id in amounts
            and account.id not in existing_next
        ]
        seeded_count = self._balance_store.insert_many(seeds) if seeds else 0

        self._logger.info(
            f"Closed {closed_count} balances for {year}-{month:02d}, "
            f"seeded {seeded_count} into {next_year}-{following_month:02d}"
        )
        return CloseMonthResult(
            period_year=year,
            period_month=month,
            closed_count=closed_count,
            seeded_count=seeded_count,
        )


__all__ = ["CloseMonthUseCase"]

"""Use case to record a batch of balances for one period."""

from src.application.ports.account_directory import AccountDirectoryPort
from src.application.ports.balance_store import BalanceStorePort
from src.domain.errors import AccountNotFoundError, PeriodClosedError
from src.domain.models import BalanceEntry, BalanceRecord
from src.domain.policies import is_period_editable
from src.domain.services import validate_balance_value, validate_period
from src.infrastructure.logging.logger import get_app_logger


class UpsertBalancesUseCase:
    """Overwrite amount and net flow of accounts for an open period."""

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

    def execute(
        self,
        user_id: str,
        year: int,
        month: int,
        entries: list[BalanceEntry],
    ) -> list[BalanceRecord]:
        """Validate every entry, then upsert them.

        Nothing is written unless the whole batch is valid, and the batch
        is stored in a single transaction.

        Args:
            user_id: Owner of the accounts, already authorized.
            year: Period year.
            month: Period month.
            entries: Values to record, one per account.

        Returns:
            list[BalanceRecord]: Stored records in entry order.

        Raises:
            AccountNotFoundError: If an entry targets a foreign account.
            InvalidBalanceValueError: If an amount is negative.
            InvalidDecimalPrecisionError: If a value has over two decimals.
            PeriodClosedError: If the period is closed.
        """
        validate_period(year, month)
        account_ids = [
            account.id
            for account in self._account_directory.list_for_user(user_id)
        ]
        allowed = set(account_ids)
        for entry in entries:
            if entry.account_id not in allowed:
                raise AccountNotFoundError(entry.account_id)
            validate_balance_value(entry.amount, "amount")
            validate_balance_value(
                entry.net_flow, "netFlow", allow_negative=True
            )

        existing = self._balance_store.find(account_ids, year, month)
        if not is_period_editable(existing):
            raise PeriodClosedError(year, month)

        results = self._balance_store.upsert_many(
            [
                BalanceRecord(
                    account_id=entry.account_id,
                    period_year=year,
                    period_month=month,
                    amount=entry.amount,
                    net_flow=entry.net_flow,
                    is_closed=False,
                )
                for entry in entries
            ]
        )
        self._logger.info(
            f"Upserted {len(results)} balances for {year}-{month:02d}"
        )
        return results


__all__ = ["UpsertBalancesUseCase"]

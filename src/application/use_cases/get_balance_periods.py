"""Use cases to read balances and the state of reporting periods."""

from src.application.ports.account_directory import AccountDirectoryPort
from src.application.ports.balance_store import BalanceStorePort
from src.domain.models import BalanceRecord, PeriodSummary
from src.domain.policies import summarize_periods
from src.domain.services import validate_period
from src.infrastructure.logging.logger import get_app_logger


class ListBalancePeriodsUseCase:
    """List every period holding balances with its open/closed state."""

    def __init__(
        self,
        account_directory: AccountDirectoryPort,
        balance_store: BalanceStorePort,
        logger=None,
    ) -> None:
        self._account_directory = account_directory
        self._balance_store = balance_store
        self._logger = logger or get_app_logger()

    def execute(self, user_id: str) -> list[PeriodSummary]:
        """Return period summaries, newest first."""
        account_ids = [
            account.id
            for account in self._account_directory.list_for_user(user_id)
        ]
        summaries = summarize_periods(self._balance_store.find_all(account_ids))
        self._logger.info(
            f"Listed {len(summaries)} balance periods for user={user_id}"
        )
        return summaries


class GetBalancesUseCase:
    """Return the balance records of one period."""

    def __init__(
        self,
        account_directory: AccountDirectoryPort,
        balance_store: BalanceStorePort,
    ) -> None:
        self._account_directory = account_directory
        self._balance_store = balance_store

    def execute(self, user_id: str, year: int, month: int) -> list[BalanceRecord]:
        validate_period(year, month)
        account_ids = [
            account.id
            for account in self._account_directory.list_for_user(user_id)
        ]
        return self._balance_store.find(account_ids, year, month)


__all__ = ["ListBalancePeriodsUseCase", "GetBalancesUseCase"]

"""Use case to compute the history of a single account."""

from src.application.ports.account_directory import AccountDirectoryPort
from src.application.ports.balance_store import BalanceStorePort
from src.domain.errors import AccountNotFoundError
from src.domain.models import AccountAnalytics
from src.domain.services import build_account_analytics
from src.infrastructure.logging.logger import get_app_logger


class GetAccountAnalyticsUseCase:
    """Return per-period equity and inflow of one account, unconverted."""

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

    def execute(self, user_id: str, account_id: str) -> AccountAnalytics:
        """Return the analytics of the account.

        Raises:
            AccountNotFoundError: If the account does not belong to the user.
        """
        account = next(
            (
                candidate
                for candidate in self._account_directory.list_for_user(user_id)
                if candidate.id == account_id
            ),
            None,
        )
        if account is None:
            raise AccountNotFoundError(account_id)
        analytics = build_account_analytics(
            account,
            self._balance_store.find_all([account_id]),
        )
        self._logger.info(
            f"Account analytics computed: account={account_id}, "
            f"points={len(analytics.points)}"
        )
        return analytics


__all__ = ["GetAccountAnalyticsUseCase"]

"""Port for reading and writing monthly account balances."""

from typing import Protocol

from src.domain.models import BalanceRecord


class BalanceStorePort(Protocol):
    """Port exposing balance records scoped to a set of accounts."""

    def find(
        self,
        account_ids: list[str],
        year: int,
        month: int,
    ) -> list[BalanceRecord]:
        """Return records of the accounts for one period."""

    def find_all(self, account_ids: list[str]) -> list[BalanceRecord]:
        """Return records of the accounts for every period, ascending."""

    def upsert(self, record: BalanceRecord) -> BalanceRecord:
        """Insert or overwrite the record of (account, year, month)."""

    def upsert_many(self, records: list[BalanceRecord]) -> list[BalanceRecord]:
        """Upsert every record in one transaction, all or nothing."""

    def close_period(
        self,
        account_ids: list[str],
        year: int,
        month: int,
    ) -> int:
        """Mark open records of the period closed and return their count."""

    def insert_many(self, records: list[BalanceRecord]) -> int:
        """Insert records that do not exist yet and return the inserted count."""


__all__ = ["BalanceStorePort"]

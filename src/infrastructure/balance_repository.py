"""SQLAlchemy-backed repository for monthly account balances."""

from sqlalchemy import bindparam, text

from src.application.ports.balance_store import BalanceStorePort
from src.application.ports.database import DatabaseEnginePort
from src.domain.models import BalanceRecord
from src.infrastructure.sql_utils import to_sql_decimal
from src.utils.decimal_utils import coerce_decimal


_SELECT_COLUMNS = """
    SELECT account_id, period_year, period_month, amount, net_flow, is_closed
    FROM account_balances
"""

SELECT_PERIOD_SQL = text(
    _SELECT_COLUMNS
    + """
    WHERE account_id IN :account_ids
      AND period_year = :period_year
      AND period_month = :period_month
    ORDER BY account_id
    """
).bindparams(bindparam("account_ids", expanding=True))

SELECT_ALL_SQL = text(
    _SELECT_COLUMNS
    + """
    WHERE account_id IN :account_ids
    ORDER BY period_year, period_month, account_id
    """
).bindparams(bindparam("account_ids", expanding=True))

UPSERT_SQL = text(
    """
    INSERT INTO account_balances (
        account_id, period_year, period_month, amount, net_flow, is_closed
    )
    VALUES (
        :account_id, :period_year, :period_month, :amount, :net_flow,
        :is_closed
    )
    ON CONFLICT (account_id, period_year, period_month) DO UPDATE SET
        amount = excluded.amount,
        net_flow = excluded.net_flow,
        is_closed = excluded.is_closed,
        updated_at = CURRENT_TIMESTAMP
    """
)

INSERT_IF_ABSENT_SQL = text(
    """
    INSERT INTO account_balances (
        account_id, period_year, period_month, amount, net_flow, is_closed
    )
    VALUES (
        :account_id, :period_year, :period_month, :amount, :net_flow,
        :is_closed
    )
    ON CONFLICT (account_id, period_year, period_month) DO NOTHING
    """
)

CLOSE_PERIOD_SQL = text(
    """
    UPDATE account_balances
    SET is_closed = TRUE, updated_at = CURRENT_TIMESTAMP
    WHERE account_id IN :account_ids
      AND period_year = :period_year
      AND period_month = :period_month
      AND is_closed = FALSE
    """
).bindparams(bindparam("account_ids", expanding=True))


class SqlAlchemyBalanceStore(BalanceStorePort):
    """Balance store backed by the portfolio database."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the portfolio engine.
        """
        self._db_port = db_port

    def find(
        self,
        account_ids: list[str],
        year: int,
        month: int,
    ) -> list[BalanceRecord]:
        if not account_ids:
            return []
        params = {
            "account_ids": list(account_ids),
            "period_year": year,
            "period_month": month,
        }
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(SELECT_PERIOD_SQL, params).all()
        return [self._to_record(row) for row in rows]

    def find_all(self, account_ids: list[str]) -> list[BalanceRecord]:
        if not account_ids:
            return []
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SELECT_ALL_SQL,
                {"account_ids": list(account_ids)},
            ).all()
        return [self._to_record(row) for row in rows]

    def upsert(self, record: BalanceRecord) -> BalanceRecord:
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(UPSERT_SQL, self._to_params(record))
        return record

    def upsert_many(self, records: list[BalanceRecord]) -> list[BalanceRecord]:
        if not records:
            return []
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(
                UPSERT_SQL,
                [self._to_params(record) for record in records],
            )
        return list(records)

    def close_period(
        self,
        account_ids: list[str],
        year: int,
        month: int,
    ) -> int:
        if not account_ids:
            return 0
        params = {
            "account_ids": list(account_ids),
            "period_year": year,
            "period_month": month,
        }
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            result = conn.execute(CLOSE_PERIOD_SQL, params)
        return result.rowcount

    def insert_many(self, records: list[BalanceRecord]) -> int:
        inserted = 0
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            for record in records:
                result = conn.execute(
                    INSERT_IF_ABSENT_SQL,
                    self._to_params(record),
                )
                inserted += max(result.rowcount, 0)
        return inserted

    @staticmethod
    def _to_record(row) -> BalanceRecord:
        return BalanceRecord(
            account_id=str(row.account_id),
            period_year=int(row.period_year),
            period_month=int(row.period_month),
            amount=coerce_decimal(row.amount),
            net_flow=coerce_decimal(row.net_flow),
            is_closed=bool(row.is_closed),
        )

    @staticmethod
    def _to_params(record: BalanceRecord) -> dict:
        return {
            "account_id": record.account_id,
            "period_year": record.period_year,
            "period_month": record.period_month,
            "amount": to_sql_decimal(record.amount),
            "net_flow": to_sql_decimal(record.net_flow),
            "is_closed": record.is_closed,
        }


__all__ = ["SqlAlchemyBalanceStore"]

"""SQLAlchemy-backed repository for daily currency rates."""

from datetime import date

from sqlalchemy import text

from src.application.ports.currency_rate_store import CurrencyRateStorePort
from src.application.ports.database import DatabaseEnginePort
from src.domain.models import CurrencyRateRecord
from src.infrastructure.sql_utils import coerce_date, to_sql_date, to_sql_decimal
from src.utils.decimal_utils import coerce_decimal


_SELECT_COLUMNS = """
    SELECT date, base_currency, target_currency, rate, source
    FROM currency_rates
"""

SELECT_EXACT_SQL = text(
    _SELECT_COLUMNS
    + """
    WHERE date = :day
      AND base_currency = :base
      AND target_currency = :target
    LIMIT 1
    """
)

SELECT_LATEST_ON_OR_BEFORE_SQL = text(
    _SELECT_COLUMNS
    + """
    WHERE date <= :day
      AND base_currency = :base
      AND target_currency = :target
    ORDER BY date DESC
    LIMIT 1
    """
)

SELECT_ANY_SQL = text(
    """
    SELECT 1 AS present
    FROM currency_rates
    WHERE base_currency <> target_currency
    LIMIT 1
    """
)

SELECT_LATEST_SQL = text(
    _SELECT_COLUMNS
    + """
    WHERE base_currency <> target_currency
    ORDER BY date DESC
    LIMIT 1
    """
)

UPSERT_SQL = text(
    """
    INSERT INTO currency_rates (
        date, base_currency, target_currency, rate, source
    )
    VALUES (:day, :base, :target, :rate, :source)
    ON CONFLICT (date, base_currency, target_currency) DO UPDATE SET
        rate = excluded.rate,
        source = excluded.source,
        fetched_at = CURRENT_TIMESTAMP
    """
)


class SqlAlchemyCurrencyRateStore(CurrencyRateStorePort):
    """Currency rate store backed by the portfolio database.

    Self pairs (base equal to target) are never returned.
    """

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the portfolio engine.
        """
        self._db_port = db_port

    def find_exact(
        self,
        day: date,
        base: str,
        target: str,
    ) -> CurrencyRateRecord | None:
        return self._fetch_one(SELECT_EXACT_SQL, day, base, target)

    def find_latest_on_or_before(
        self,
        day: date,
        base: str,
        target: str,
    ) -> CurrencyRateRecord | None:
        return self._fetch_one(
            SELECT_LATEST_ON_OR_BEFORE_SQL,
            day,
            base,
            target,
        )

    def find_any(self) -> bool:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(SELECT_ANY_SQL).first()
        return row is not None

    def find_latest(self) -> CurrencyRateRecord | None:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(SELECT_LATEST_SQL).first()
        return self._to_record(row) if row else None

    def find_between(
        self,
        start_date: date | None,
        end_date: date | None,
        base_currency: str | None = None,
    ) -> list[CurrencyRateRecord]:
        sql = _SELECT_COLUMNS + " WHERE base_currency <> target_currency"
        params: dict[str, str] = {}
        if start_date:
            sql += " AND date >= :start_date"
            params["start_date"] = to_sql_date(start_date)
        if end_date:
            sql += " AND date <= :end_date"
            params["end_date"] = to_sql_date(end_date)
        if base_currency:
            sql += " AND base_currency = :base_currency"
            params["base_currency"] = base_currency
        sql += " ORDER BY date DESC, base_currency, target_currency"
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(text(sql), params).all()
        return [self._to_record(row) for row in rows]

    def upsert(self, record: CurrencyRateRecord) -> None:
        if record.base_currency == record.target_currency:
            return
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(
                UPSERT_SQL,
                {
                    "day": to_sql_date(record.date),
                    "base": record.base_currency,
                    "target": record.target_currency,
                    "rate": to_sql_decimal(record.rate),
                    "source": record.source,
                },
            )

    def _fetch_one(
        self,
        query,
        day: date,
        base: str,
        target: str,
    ) -> CurrencyRateRecord | None:
        if base == target:
            return None
        params = {"day": to_sql_date(day), "base": base, "target": target}
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(query, params).first()
        return self._to_record(row) if row else None

    @staticmethod
    def _to_record(row) -> CurrencyRateRecord:
        return CurrencyRateRecord(
            date=coerce_date(row.date),
            base_currency=row.base_currency,
            target_currency=row.target_currency,
            rate=coerce_decimal(row.rate),
            source=row.source or "",
        )


__all__ = ["SqlAlchemyCurrencyRateStore"]

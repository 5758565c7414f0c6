"""Tests for the SQLAlchemy balance store against SQLite."""

from decimal import Decimal
from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.exc import IntegrityError

from src.application.ports.database import DatabaseEnginePort
from src.domain.models import BalanceRecord
from src.infrastructure.balance_repository import SqlAlchemyBalanceStore
from src.infrastructure.schema import ensure_schema


class _FakeDatabasePort(DatabaseEnginePort):
    def __init__(self, url: str) -> None:
        self._engine = create_engine(url)

    def get_engine(self):
        return self._engine


@pytest.fixture
def store(tmp_path: Path) -> SqlAlchemyBalanceStore:
    db_port = _FakeDatabasePort(f"sqlite:///{tmp_path / 'portfolio.db'}")
    ensure_schema(db_port.get_engine())
    return SqlAlchemyBalanceStore(db_port)


def _record(account_id, month, amount="100.25", net_flow="-5.50", **kwargs):
    return BalanceRecord(
        account_id=account_id,
        period_year=2024,
        period_month=month,
        amount=Decimal(amount),
        net_flow=Decimal(net_flow),
        **kwargs,
    )


def test_upsert_inserts_then_updates(store) -> None:
    store.upsert(_record("a", 1))
    store.upsert(_record("a", 1, amount="200", net_flow="10"))

    records = store.find(["a"], 2024, 1)

    assert len(records) == 1
    assert records[0].amount == Decimal("200")
    assert records[0].net_flow == Decimal("10")
    assert records[0].is_closed is False


def test_find_returns_decimals_for_requested_accounts(store) -> None:
    store.upsert(_record("a", 1))
    store.upsert(_record("b", 1))
    store.upsert(_record("a", 2))

    records = store.find(["a"], 2024, 1)

    assert [(r.account_id, r.amount, r.net_flow) for r in records] == [
        ("a", Decimal("100.25"), Decimal("-5.5"))
    ]


def test_find_all_orders_by_period(store) -> None:
    store.upsert(_record("a", 3))
    store.upsert(_record("a", 1))
    store.upsert(_record("b", 2))

    records = store.find_all(["a", "b"])

    assert [(r.account_id, r.period_month) for r in records] == [
        ("a", 1),
        ("b", 2),
        ("a", 3),
    ]


def test_empty_account_list_short_circuits(store) -> None:
    assert store.find([], 2024, 1) == []
    assert store.find_all([]) == []
    assert store.close_period([], 2024, 1) == 0


def test_close_period_only_updates_open_records(store) -> None:
    """A second close should report zero updated rows."""
    store.upsert(_record("a", 1))
    store.upsert(_record("b", 1))

    assert store.close_period(["a", "b"], 2024, 1) == 2
    assert store.close_period(["a", "b"], 2024, 1) == 0
    assert all(r.is_closed for r in store.find(["a", "b"], 2024, 1))


def test_insert_many_skips_existing_rows(store) -> None:
    store.upsert(_record("a", 2, amount="5"))

    inserted = store.insert_many(
        [
            _record("a", 2, amount="999", net_flow="0"),
            _record("b", 2, amount="7", net_flow="0"),
        ]
    )

    assert inserted == 1
    amounts = {r.account_id: r.amount for r in store.find(["a", "b"], 2024, 2)}
    assert amounts == {"a": Decimal("5"), "b": Decimal("7")}


def test_upsert_many_writes_all_records(store) -> None:
    store.upsert(_record("a", 4, amount="1"))

    stored = store.upsert_many(
        [_record("a", 4, amount="10"), _record("b", 4, amount="20")]
    )

    assert len(stored) == 2
    amounts = {r.account_id: r.amount for r in store.find(["a", "b"], 2024, 4)}
    assert amounts == {"a": Decimal("10"), "b": Decimal("20")}


def test_upsert_many_rolls_back_whole_batch_on_failure(store) -> None:
    """A failing row should leave every record of the batch unwritten."""
    broken = BalanceRecord(
        account_id="b",
        period_year=None,
        period_month=5,
        amount=Decimal("1"),
        net_flow=Decimal("0"),
    )

    with pytest.raises(IntegrityError):
        store.upsert_many([_record("a", 5), broken])

    assert store.find(["a", "b"], 2024, 5) == []


def test_upsert_many_with_no_records(store) -> None:
    assert store.upsert_many([]) == []

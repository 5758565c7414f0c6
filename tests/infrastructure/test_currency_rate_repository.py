"""Tests for the SQLAlchemy currency rate store against SQLite."""

from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest
from sqlalchemy import create_engine

from src.application.ports.database import DatabaseEnginePort
from src.domain.models import CurrencyRateRecord
from src.infrastructure.currency_rate_repository import (
    SqlAlchemyCurrencyRateStore,
)
from src.infrastructure.schema import ensure_schema


class _FakeDatabasePort(DatabaseEnginePort):
    def __init__(self, url: str) -> None:
        self._engine = create_engine(url)

    def get_engine(self):
        return self._engine


@pytest.fixture
def store(tmp_path: Path) -> SqlAlchemyCurrencyRateStore:
    db_port = _FakeDatabasePort(f"sqlite:///{tmp_path / 'rates.db'}")
    ensure_schema(db_port.get_engine())
    return SqlAlchemyCurrencyRateStore(db_port)


def _rate(day: date, base: str, target: str, value: str) -> CurrencyRateRecord:
    return CurrencyRateRecord(
        date=day,
        base_currency=base,
        target_currency=target,
        rate=Decimal(value),
        source="cbr.ru",
    )


def test_empty_store_has_no_rates(store) -> None:
    assert store.find_any() is False
    assert store.find_latest() is None


def test_upsert_and_find_exact(store) -> None:
    store.upsert(_rate(date(2024, 3, 1), "USD", "RUB", "90.5"))
    store.upsert(_rate(date(2024, 3, 1), "USD", "RUB", "91.25"))

    found = store.find_exact(date(2024, 3, 1), "USD", "RUB")

    assert found.rate == Decimal("91.25")
    assert found.date == date(2024, 3, 1)
    assert found.source == "cbr.ru"
    assert store.find_exact(date(2024, 3, 1), "RUB", "USD") is None


def test_find_latest_on_or_before(store) -> None:
    store.upsert(_rate(date(2024, 2, 27), "USD", "RUB", "89"))
    store.upsert(_rate(date(2024, 3, 1), "USD", "RUB", "90"))
    store.upsert(_rate(date(2024, 3, 5), "USD", "RUB", "92"))

    found = store.find_latest_on_or_before(date(2024, 3, 4), "USD", "RUB")

    assert found.date == date(2024, 3, 1)
    assert found.rate == Decimal("90")


def test_self_pairs_are_never_stored(store) -> None:
    store.upsert(_rate(date(2024, 3, 1), "RUB", "RUB", "1"))

    assert store.find_any() is False
    assert store.find_exact(date(2024, 3, 1), "RUB", "RUB") is None


def test_find_between_filters_and_orders_newest_first(store) -> None:
    store.upsert(_rate(date(2024, 3, 1), "USD", "RUB", "90"))
    store.upsert(_rate(date(2024, 3, 2), "EUR", "RUB", "99"))
    store.upsert(_rate(date(2024, 3, 2), "USD", "RUB", "91"))
    store.upsert(_rate(date(2024, 4, 1), "USD", "RUB", "95"))

    rates = store.find_between(date(2024, 3, 1), date(2024, 3, 31))
    usd_only = store.find_between(None, None, base_currency="USD")

    assert [(r.date.day, r.base_currency) for r in rates] == [
        (2, "EUR"),
        (2, "USD"),
        (1, "USD"),
    ]
    assert [r.date for r in usd_only] == [
        date(2024, 4, 1),
        date(2024, 3, 2),
        date(2024, 3, 1),
    ]
    assert store.find_latest().date == date(2024, 4, 1)

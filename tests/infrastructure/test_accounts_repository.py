"""Tests for the SQL account directory and plan scenario store."""

from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest
from sqlalchemy import create_engine

from src.application.ports.database import DatabaseEnginePort
from src.domain.models import AccountStatus
from src.infrastructure.accounts_repository import SqlAlchemyAccountDirectory
from src.infrastructure.plan_scenario_repository import (
    SqlAlchemyPlanScenarioStore,
)
from src.infrastructure.schema import ensure_schema


class _FakeDatabasePort(DatabaseEnginePort):
    def __init__(self, url: str) -> None:
        self._engine = create_engine(url)

    def get_engine(self):
        return self._engine


@pytest.fixture
def db_port(tmp_path: Path) -> _FakeDatabasePort:
    port = _FakeDatabasePort(f"sqlite:///{tmp_path / 'portfolio.db'}")
    ensure_schema(port.get_engine())
    with port.get_engine().begin() as conn:
        conn.exec_driver_sql(
            """
            INSERT INTO accounts (id, user_id, name, currency, status)
            VALUES
                ('acc-1', 'user-1', 'Broker', 'usd', 'active'),
                ('acc-2', 'user-1', 'Bank', 'RUB', 'archived'),
                ('acc-3', 'user-2', 'Other', 'EUR', 'active')
            """
        )
        conn.exec_driver_sql(
            """
            INSERT INTO plan_scenarios (
                id, user_id, name, currency, annual_yield_rate,
                monthly_inflow, initial_amount, start_date, end_date
            )
            VALUES
                ('s-1', 'user-1', 'Base', 'RUB', '0.12', '1000', NULL,
                 NULL, '2030-12-31')
            """
        )
    return port


def test_list_for_user_returns_only_own_accounts(db_port) -> None:
    accounts = SqlAlchemyAccountDirectory(db_port).list_for_user("user-1")

    assert [(a.id, a.name) for a in accounts] == [
        ("acc-2", "Bank"),
        ("acc-1", "Broker"),
    ]
    assert accounts[1].currency == "USD"
    assert accounts[0].status == AccountStatus.ARCHIVED
    assert not accounts[0].is_active


def test_find_for_user_maps_optional_fields(db_port) -> None:
    scenario = SqlAlchemyPlanScenarioStore(db_port).find_for_user(
        "user-1", "s-1"
    )

    assert scenario.name == "Base"
    assert scenario.annual_yield_rate == Decimal("0.12")
    assert scenario.monthly_inflow == Decimal("1000")
    assert scenario.initial_amount is None
    assert scenario.start_date is None
    assert scenario.end_date == date(2030, 12, 31)


def test_find_for_user_hides_other_users_scenarios(db_port) -> None:
    store = SqlAlchemyPlanScenarioStore(db_port)

    assert store.find_for_user("user-2", "s-1") is None

"""DDL for the portfolio database tables used by the SQL repositories."""

from sqlalchemy.engine import Engine


CREATE_ACCOUNTS_SQL = """
CREATE TABLE IF NOT EXISTS accounts (
    id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL,
    name TEXT,
    currency TEXT,
    status TEXT NOT NULL DEFAULT 'active'
)
"""

CREATE_ACCOUNT_BALANCES_SQL = """
CREATE TABLE IF NOT EXISTS account_balances (
    account_id TEXT NOT NULL,
    period_year INTEGER NOT NULL,
    period_month INTEGER NOT NULL,
    amount NUMERIC(20, 2) NOT NULL,
    net_flow NUMERIC(20, 2) NOT NULL,
    is_closed BOOLEAN NOT NULL DEFAULT FALSE,
    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    UNIQUE (account_id, period_year, period_month)
)
"""

CREATE_CURRENCY_RATES_SQL = """
CREATE TABLE IF NOT EXISTS currency_rates (
    date DATE NOT NULL,
    base_currency TEXT NOT NULL,
    target_currency TEXT NOT NULL,
    rate NUMERIC(28, 12) NOT NULL,
    source TEXT,
    fetched_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    UNIQUE (date, base_currency, target_currency)
)
"""

CREATE_PLAN_SCENARIOS_SQL = """
CREATE TABLE IF NOT EXISTS plan_scenarios (
    id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL,
    name TEXT,
    currency TEXT NOT NULL,
    annual_yield_rate NUMERIC(10, 6),
    monthly_inflow NUMERIC(20, 2),
    initial_amount NUMERIC(20, 2),
    start_date DATE,
    end_date DATE NOT NULL
)
"""

_SCHEMA = (
    CREATE_ACCOUNTS_SQL,
    CREATE_ACCOUNT_BALANCES_SQL,
    CREATE_CURRENCY_RATES_SQL,
    CREATE_PLAN_SCENARIOS_SQL,
)


def ensure_schema(engine: Engine) -> None:
    """Create the portfolio tables when they do not exist yet."""
    with engine.begin() as conn:
        for statement in _SCHEMA:
            conn.exec_driver_sql(statement)


__all__ = ["ensure_schema"]

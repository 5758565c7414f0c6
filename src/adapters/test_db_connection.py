"""Simple CLI to validate the portfolio database connection.

This adapter is meant for local operations: it instantiates the concrete
database adapter, runs a basic health check and creates missing tables.
"""

from src.infrastructure.container import build_database_adapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.schema import ensure_schema


def main() -> None:
    """Run a connectivity check and make sure the schema exists."""
    adapter = build_database_adapter()
    logger = get_app_logger()

    engine = adapter.get_engine()
    logger.info(f"Portfolio DB: {engine.url}")

    with engine.connect() as conn:
        conn.exec_driver_sql("SELECT 1")
    ensure_schema(engine)

    logger.info("Connection is working and schema is in place.")


if __name__ == "__main__":
    main()

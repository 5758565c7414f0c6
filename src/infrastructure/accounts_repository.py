"""SQLAlchemy-backed account directory."""

from sqlalchemy import text

from src.application.ports.account_directory import AccountDirectoryPort
from src.application.ports.database import DatabaseEnginePort
from src.domain.models import AccountDTO, AccountStatus


SELECT_USER_ACCOUNTS_SQL = text(
    """
    SELECT id, name, currency, status
    FROM accounts
    WHERE user_id = :user_id
    ORDER BY name, id
    """
)


class SqlAlchemyAccountDirectory(AccountDirectoryPort):
    """Account directory backed by the portfolio database."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the portfolio engine.
        """
        self._db_port = db_port

    def list_for_user(self, user_id: str) -> list[AccountDTO]:
        """Return the user's accounts from the database."""
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SELECT_USER_ACCOUNTS_SQL,
                {"user_id": user_id},
            ).all()
        return [
            AccountDTO(
                id=str(row.id),
                name=row.name or "",
                currency=(row.currency or "").strip().upper() or None,
                status=AccountStatus(row.status or AccountStatus.ACTIVE.value),
            )
            for row in rows
        ]


__all__ = ["SqlAlchemyAccountDirectory"]

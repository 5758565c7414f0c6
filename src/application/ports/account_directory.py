"""Port for listing a user's accounts."""

from typing import Protocol

from src.domain.models import AccountDTO


class AccountDirectoryPort(Protocol):
    """Port exposing the accounts owned by a user."""

    def list_for_user(self, user_id: str) -> list[AccountDTO]:
        """Return every account of the user, active or archived."""


__all__ = ["AccountDirectoryPort"]

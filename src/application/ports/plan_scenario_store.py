"""Port for saved plan scenarios."""

from typing import Protocol

from src.domain.models import PlanScenarioInput


class PlanScenarioStorePort(Protocol):
    """Port exposing read access to a user's plan scenarios."""

    def find_for_user(
        self,
        user_id: str,
        scenario_id: str,
    ) -> PlanScenarioInput | None:
        """Return the scenario when it exists and belongs to the user."""


__all__ = ["PlanScenarioStorePort"]

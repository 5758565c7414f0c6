"""SQLAlchemy-backed repository for saved plan scenarios."""

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.plan_scenario_store import PlanScenarioStorePort
from src.domain.models import PlanScenarioInput
from src.infrastructure.sql_utils import coerce_date
from src.utils.decimal_utils import coerce_decimal


SELECT_SCENARIO_SQL = text(
    """
    SELECT id, name, currency, annual_yield_rate, monthly_inflow,
           initial_amount, start_date, end_date
    FROM plan_scenarios
    WHERE id = :scenario_id AND user_id = :user_id
    """
)


class SqlAlchemyPlanScenarioStore(PlanScenarioStorePort):
    """Plan scenario store backed by the portfolio database."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        self._db_port = db_port

    def find_for_user(
        self,
        user_id: str,
        scenario_id: str,
    ) -> PlanScenarioInput | None:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(
                SELECT_SCENARIO_SQL,
                {"scenario_id": scenario_id, "user_id": user_id},
            ).first()
        if row is None:
            return None
        return PlanScenarioInput(
            id=str(row.id),
            name=row.name,
            currency=row.currency,
            annual_yield_rate=_optional_decimal(row.annual_yield_rate),
            monthly_inflow=_optional_decimal(row.monthly_inflow),
            initial_amount=_optional_decimal(row.initial_amount),
            start_date=coerce_date(row.start_date) if row.start_date else None,
            end_date=coerce_date(row.end_date),
        )


def _optional_decimal(value):
    return None if value is None else coerce_decimal(value)


__all__ = ["SqlAlchemyPlanScenarioStore"]

"""Application ports package."""

from .account_directory import AccountDirectoryPort
from .balance_store import BalanceStorePort
from .currency_rate_store import CurrencyRateStorePort
from .database import DatabaseEnginePort
from .plan_scenario_store import PlanScenarioStorePort
from .rate_source import CurrencyRateSourcePort

__all__ = [
    "AccountDirectoryPort",
    "BalanceStorePort",
    "CurrencyRateStorePort",
    "DatabaseEnginePort",
    "PlanScenarioStorePort",
    "CurrencyRateSourcePort",
]

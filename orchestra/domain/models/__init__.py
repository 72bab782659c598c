"""Domain models package."""

from .insights import (
    ActionType,
    AssistantContext,
    FinancialMetrics,
    ScenarioForecast,
    StrategicAction,
    TransactionAnalysis,
)
from .ledger import (
    Alert,
    AlertSeverity,
    CashflowPoint,
    IntegrationState,
    IntegrationStatus,
    IntegrationType,
    Transaction,
    TransactionStatus,
    TransactionType,
)
from .snapshot import FinancialSnapshot, ImportResult

__all__ = [
    "ActionType",
    "AssistantContext",
    "FinancialMetrics",
    "ScenarioForecast",
    "StrategicAction",
    "TransactionAnalysis",
    "Alert",
    "AlertSeverity",
    "CashflowPoint",
    "IntegrationState",
    "IntegrationStatus",
    "IntegrationType",
    "Transaction",
    "TransactionStatus",
    "TransactionType",
    "FinancialSnapshot",
    "ImportResult",
]

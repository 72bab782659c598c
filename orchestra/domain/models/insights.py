"""Domain models for metrics and AI-produced insights."""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from .ledger import CashflowPoint, Transaction


@dataclass(frozen=True)
class FinancialMetrics:
    """Derived headline figures.

    Attributes:
        balance: Balance of the most recent cashflow point.
        monthly_burn: Policy-selected monthly burn.
        runway: Months of runway, or the sentinel when burn is not positive.
    """

    balance: Decimal
    monthly_burn: Decimal
    runway: Decimal


class ActionType(str, Enum):
    SAVING = "saving"
    RISK = "risk"
    GROWTH = "growth"


@dataclass(frozen=True)
class StrategicAction:
    """Suggested action to improve cashflow."""

    action: str
    impact: str
    type: ActionType


@dataclass(frozen=True)
class TransactionAnalysis:
    """Categorization and risk assessment for one transaction."""

    id: str
    category: str
    risk_score: float
    risk_reason: str | None = None
    is_anomaly: bool = False


@dataclass(frozen=True)
class ScenarioForecast:
    """Explanation and projected points for a what-if scenario."""

    explanation: str
    data: list[CashflowPoint] = field(default_factory=list)


@dataclass(frozen=True)
class AssistantContext:
    """Snapshot handed to the conversational assistant."""

    balance: Decimal
    monthly_burn: Decimal
    runway: Decimal
    recent_transactions: tuple[Transaction, ...] = ()


__all__ = [
    "FinancialMetrics",
    "ActionType",
    "StrategicAction",
    "TransactionAnalysis",
    "ScenarioForecast",
    "AssistantContext",
]

"""Domain models for the ledger, cashflow, alerts and integrations."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class TransactionType(str, Enum):
    INCOME = "INCOME"
    EXPENSE = "EXPENSE"


class TransactionStatus(str, Enum):
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"


class AlertSeverity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class IntegrationType(str, Enum):
    BANK = "BANK"
    ERP = "ERP"
    STRIPE = "STRIPE"


class IntegrationState(str, Enum):
    CONNECTED = "connected"
    SYNCING = "syncing"
    ERROR = "error"


@dataclass(frozen=True)
class Transaction:
    """Ledger entry shown in the transactions table.

    Attributes:
        id: Unique transaction identifier.
        date: ISO date string (``YYYY-MM-DD``).
        description: Counterparty or memo text.
        amount: Signed amount (income positive, expenses negative).
        type: Income or expense.
        category: Free-text category, ``"Uncategorized"`` when unknown.
        status: Settlement status.
        risk_score: Optional 0-100 risk score assigned by analysis.
        risk_reason: Optional short explanation of the score.
        is_anomaly: Whether the entry was flagged as unusual.
    """

    id: str
    date: str
    description: str
    amount: Decimal
    type: TransactionType
    category: str
    status: TransactionStatus
    risk_score: float | None = None
    risk_reason: str | None = None
    is_anomaly: bool | None = None


@dataclass(frozen=True)
class CashflowPoint:
    """One period of the cashflow series."""

    month: str
    income: Decimal
    expenses: Decimal
    balance: Decimal
    projected: bool = False


@dataclass(frozen=True)
class Alert:
    """Alert raised by anomaly detection or seeded for the demo."""

    id: str
    severity: AlertSeverity
    message: str
    date: str
    resolved: bool = False


@dataclass(frozen=True)
class IntegrationStatus:
    """Connection state of an external data source."""

    name: str
    type: IntegrationType
    last_synced: str
    status: IntegrationState


__all__ = [
    "TransactionType",
    "TransactionStatus",
    "AlertSeverity",
    "IntegrationType",
    "IntegrationState",
    "Transaction",
    "CashflowPoint",
    "Alert",
    "IntegrationStatus",
]

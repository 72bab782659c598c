"""Domain package for business rules and core models."""

from .constants import (
    DEMO_ALERT_ID,
    DEMO_TRANSACTION_ID,
    RUNWAY_SENTINEL_MONTHS,
    UNCATEGORIZED,
)
from .models import (
    Alert,
    CashflowPoint,
    FinancialMetrics,
    FinancialSnapshot,
    IntegrationStatus,
    Transaction,
)
from .policies import BaselineBurnRatePolicy, NarrativeBurnRatePolicy
from .services import (
    DemoStep,
    NarrativeEvent,
    compute_metrics,
    compute_runway,
    generate_mock_cashflow,
    next_step,
)

__all__ = [
    "DEMO_ALERT_ID",
    "DEMO_TRANSACTION_ID",
    "RUNWAY_SENTINEL_MONTHS",
    "UNCATEGORIZED",
    "Alert",
    "CashflowPoint",
    "FinancialMetrics",
    "FinancialSnapshot",
    "IntegrationStatus",
    "Transaction",
    "BaselineBurnRatePolicy",
    "NarrativeBurnRatePolicy",
    "DemoStep",
    "NarrativeEvent",
    "compute_metrics",
    "compute_runway",
    "generate_mock_cashflow",
    "next_step",
]

"""Seed data for a fresh dashboard session."""

from decimal import Decimal

from orchestra.domain.models import (
    Alert,
    AlertSeverity,
    IntegrationState,
    IntegrationStatus,
    IntegrationType,
    Transaction,
    TransactionStatus,
    TransactionType,
)
from orchestra.domain.constants import UNCATEGORIZED

_INCOME = TransactionType.INCOME
_EXPENSE = TransactionType.EXPENSE
_DONE = TransactionStatus.COMPLETED


def seed_transactions() -> list[Transaction]:
    """Return the seeded ledger, most recent first."""
    return [
        Transaction("t1", "2023-10-24", "Stripe Payout #8842",
                    Decimal("12500"), _INCOME, "Revenue", _DONE,
                    risk_score=5),
        Transaction("t2", "2023-10-24", "AWS EMEA SERVICE",
                    Decimal("-2400"), _EXPENSE, "Infrastructure", _DONE,
                    risk_score=2),
        Transaction("t3", "2023-10-23", "Uber * Trip 2991",
                    Decimal("-45.20"), _EXPENSE, "Travel", _DONE),
        Transaction("t4", "2023-10-23", "Unknown Vendor 994X",
                    Decimal("-12000"), _EXPENSE, UNCATEGORIZED,
                    TransactionStatus.PENDING, risk_score=85,
                    risk_reason="High amount for new vendor",
                    is_anomaly=True),
        Transaction("t5", "2023-10-22", "Gusto Payroll",
                    Decimal("-68000"), _EXPENSE, "Payroll", _DONE),
        Transaction("t6", "2023-10-22", "WeWork Rent Oct",
                    Decimal("-5500"), _EXPENSE, "Office", _DONE),
        Transaction("t7", "2023-10-21", "Client Invoice #4002",
                    Decimal("45000"), _INCOME, "Revenue", _DONE),
        Transaction("t8", "2023-10-20", "Github Ent",
                    Decimal("-220"), _EXPENSE, "Software", _DONE),
    ]


def seed_alerts() -> list[Alert]:
    return [
        Alert("a1", AlertSeverity.HIGH,
              "Unusual outflow detected: $12,000 to Unknown Vendor",
              "10 mins ago"),
        Alert("a2", AlertSeverity.MEDIUM,
              "Runway dropped below 15 months", "2 hours ago"),
        Alert("a3", AlertSeverity.LOW,
              "New bank account connected", "1 day ago", resolved=True),
    ]


def seed_integrations() -> list[IntegrationStatus]:
    return [
        IntegrationStatus("Silicon Valley Bank", IntegrationType.BANK,
                          "5 mins ago", IntegrationState.CONNECTED),
        IntegrationStatus("NetSuite ERP", IntegrationType.ERP,
                          "10 mins ago", IntegrationState.CONNECTED),
        IntegrationStatus("Stripe Payments", IntegrationType.STRIPE,
                          "1 hour ago", IntegrationState.CONNECTED),
        IntegrationStatus("Brex Cards", IntegrationType.BANK,
                          "Failed", IntegrationState.ERROR),
    ]


__all__ = ["seed_transactions", "seed_alerts", "seed_integrations"]

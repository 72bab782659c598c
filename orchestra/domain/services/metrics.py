"""Derived metrics: balance, burn and runway."""

from collections.abc import Sequence
from decimal import Decimal

from orchestra.domain.constants import RUNWAY_SENTINEL_MONTHS
from orchestra.domain.models.insights import FinancialMetrics
from orchestra.domain.models.ledger import Alert, CashflowPoint, Transaction
from orchestra.domain.policies.burn_rate import BurnRatePolicy


def compute_runway(balance: Decimal, monthly_burn: Decimal) -> Decimal:
    """Return months of runway, or the sentinel when burn is not positive.

    Args:
        balance: Current cash balance.
        monthly_burn: Net monthly outflow.

    Returns:
        Decimal: ``balance / monthly_burn`` or ``RUNWAY_SENTINEL_MONTHS``.
    """
    if monthly_burn <= 0:
        return RUNWAY_SENTINEL_MONTHS
    return balance / monthly_burn


def compute_metrics(
    transactions: Sequence[Transaction],
    cashflow: Sequence[CashflowPoint],
    alerts: Sequence[Alert],
    burn_policy: BurnRatePolicy,
) -> FinancialMetrics:
    """Compute the headline metrics from the current snapshot.

    Args:
        transactions: Current ledger.
        cashflow: Chronological cashflow series.
        alerts: Current alerts.
        burn_policy: Policy selecting the monthly burn.

    Returns:
        FinancialMetrics: Balance, burn and runway.
    """
    balance = cashflow[-1].balance if cashflow else Decimal("0")
    monthly_burn = burn_policy.monthly_burn(transactions, alerts)
    return FinancialMetrics(
        balance=balance,
        monthly_burn=monthly_burn,
        runway=compute_runway(balance, monthly_burn),
    )


__all__ = ["compute_metrics", "compute_runway"]

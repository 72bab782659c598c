"""Burn-rate policies.

Monthly burn is never derived from the ledger: it is a preset selected by
policy. The narrative policy exists only for the scripted demo, where the
burn drops once the crisis alert is handled.
"""

from collections.abc import Iterable
from decimal import Decimal
from typing import Protocol

from orchestra.domain.constants import (
    BASELINE_MONTHLY_BURN,
    CRISIS_MONTHLY_BURN,
    RESOLVED_MONTHLY_BURN,
)
from orchestra.domain.models.ledger import Alert, AlertSeverity, Transaction


class BurnRatePolicy(Protocol):
    """Select the monthly burn used for runway computations."""

    def monthly_burn(
        self,
        transactions: Iterable[Transaction],
        alerts: Iterable[Alert],
    ) -> Decimal:
        """Return the monthly burn for the current state."""


class BaselineBurnRatePolicy:
    """Constant burn, independent of alerts."""

    def __init__(self, burn: Decimal = BASELINE_MONTHLY_BURN) -> None:
        self._burn = burn

    def monthly_burn(self, transactions, alerts) -> Decimal:
        return self._burn


class NarrativeBurnRatePolicy:
    """Crisis burn while a high-severity alert is open, lower once handled."""

    def __init__(
        self,
        crisis_burn: Decimal = CRISIS_MONTHLY_BURN,
        resolved_burn: Decimal = RESOLVED_MONTHLY_BURN,
    ) -> None:
        self._crisis_burn = crisis_burn
        self._resolved_burn = resolved_burn

    def monthly_burn(self, transactions, alerts) -> Decimal:
        if has_open_critical_alert(alerts):
            return self._crisis_burn
        return self._resolved_burn


def has_open_critical_alert(alerts: Iterable[Alert]) -> bool:
    """Return True when any unresolved high-severity alert exists."""
    return any(
        not alert.resolved and alert.severity == AlertSeverity.HIGH
        for alert in alerts
    )


__all__ = [
    "BurnRatePolicy",
    "BaselineBurnRatePolicy",
    "NarrativeBurnRatePolicy",
    "has_open_critical_alert",
]

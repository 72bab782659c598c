"""In-memory state container for the financial snapshot.

``FinancialSnapshot`` owns every collection shown by the dashboard and is
the only place where they change. Collections are exposed as tuples of
frozen dataclasses, so callers cannot mutate them in place; all changes go
through the named operations below. Every operation is total: unknown ids
and repeated calls are no-ops, never errors.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace
from decimal import Decimal
import itertools

from orchestra.domain.constants import JUST_NOW
from orchestra.domain.models.insights import TransactionAnalysis
from orchestra.domain.models.ledger import (
    Alert,
    AlertSeverity,
    CashflowPoint,
    IntegrationState,
    IntegrationStatus,
    Transaction,
    TransactionStatus,
)
from orchestra.utils.decimal_utils import format_plain_amount


@dataclass(frozen=True)
class ImportResult:
    """Outcome of ``FinancialSnapshot.import_transactions``.

    Attributes:
        imported: Transactions prepended to the ledger.
        alerts: Alerts synthesized for anomalous entries.
        skipped_ids: Ids ignored because they already existed.
    """

    imported: tuple[Transaction, ...]
    alerts: tuple[Alert, ...]
    skipped_ids: tuple[str, ...] = ()


def anomaly_alert_message(transaction: Transaction) -> str:
    """Return the alert message for an anomalous transaction."""
    return (
        f"New anomaly detected: {transaction.description} "
        f"(${format_plain_amount(transaction.amount)})"
    )


class FinancialSnapshot:
    """Canonical collections of the session."""

    def __init__(
        self,
        transactions: Iterable[Transaction] = (),
        cashflow: Iterable[CashflowPoint] = (),
        alerts: Iterable[Alert] = (),
        integrations: Iterable[IntegrationStatus] = (),
    ) -> None:
        self._transactions = self._unique(transactions)
        self._cashflow = tuple(cashflow)
        self._alerts = self._unique(alerts)
        self._integrations = tuple(
            {item.name: item for item in integrations}.values()
        )
        self._alert_sequence = itertools.count(1)

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        return self._transactions

    @property
    def cashflow(self) -> tuple[CashflowPoint, ...]:
        return self._cashflow

    @property
    def alerts(self) -> tuple[Alert, ...]:
        return self._alerts

    @property
    def integrations(self) -> tuple[IntegrationStatus, ...]:
        return self._integrations

    def find_alert(self, alert_id: str) -> Alert | None:
        return next((a for a in self._alerts if a.id == alert_id), None)

    def find_transaction(self, transaction_id: str) -> Transaction | None:
        return next(
            (t for t in self._transactions if t.id == transaction_id),
            None,
        )

    def resolve_alert(self, alert_id: str) -> bool:
        """Mark an alert resolved.

        Args:
            alert_id: Identifier of the alert.

        Returns:
            bool: True when the alert changed state, False for unknown or
            already-resolved alerts.
        """
        alert = self.find_alert(alert_id)
        if alert is None or alert.resolved:
            return False
        self._alerts = tuple(
            replace(a, resolved=True) if a.id == alert_id else a
            for a in self._alerts
        )
        return True

    def import_transactions(
        self,
        batch: Sequence[Transaction],
    ) -> ImportResult:
        """Prepend a batch and raise one alert per anomalous entry.

        The batch keeps its own order and is placed before the existing
        ledger (most recent first). Entries whose id is already present,
        in the ledger or earlier in the batch, are skipped.

        Args:
            batch: Transactions to import.

        Returns:
            ImportResult: Imported entries, new alerts and skipped ids.
        """
        known = {t.id for t in self._transactions}
        imported: list[Transaction] = []
        skipped: list[str] = []
        for transaction in batch:
            if transaction.id in known:
                skipped.append(transaction.id)
                continue
            known.add(transaction.id)
            imported.append(transaction)

        new_alerts = [
            Alert(
                id=self._next_alert_id(),
                severity=AlertSeverity.MEDIUM,
                message=anomaly_alert_message(transaction),
                date=JUST_NOW,
                resolved=False,
            )
            for transaction in imported
            if transaction.is_anomaly
        ]
        self._transactions = (*imported, *self._transactions)
        self._alerts = (*new_alerts, *self._alerts)
        return ImportResult(
            imported=tuple(imported),
            alerts=tuple(new_alerts),
            skipped_ids=tuple(skipped),
        )

    def apply_categorization(
        self,
        results: Iterable[TransactionAnalysis],
    ) -> int:
        """Merge analysis results into matching transactions.

        A result without a ``risk_reason`` keeps the existing one.

        Args:
            results: Analysis keyed by transaction id.

        Returns:
            int: Number of transactions updated.
        """
        by_id = {result.id: result for result in results}
        updated = 0
        merged: list[Transaction] = []
        for transaction in self._transactions:
            result = by_id.get(transaction.id)
            if result is None:
                merged.append(transaction)
                continue
            merged.append(
                replace(
                    transaction,
                    category=result.category,
                    risk_score=result.risk_score,
                    risk_reason=(
                        result.risk_reason
                        if result.risk_reason is not None
                        else transaction.risk_reason
                    ),
                    is_anomaly=result.is_anomaly,
                    status=TransactionStatus.COMPLETED,
                )
            )
            updated += 1
        self._transactions = tuple(merged)
        return updated

    def replace_cashflow(self, series: Iterable[CashflowPoint]) -> None:
        self._cashflow = tuple(series)

    def correct_transaction(
        self,
        transaction_id: str,
        description: str,
        amount: Decimal,
    ) -> bool:
        """Rewrite a transaction as corrected and clear its anomaly flag.

        Returns:
            bool: True when a transaction with that id exists.
        """
        if self.find_transaction(transaction_id) is None:
            return False
        self._transactions = tuple(
            replace(
                t,
                description=description,
                amount=amount,
                is_anomaly=False,
                status=TransactionStatus.COMPLETED,
            )
            if t.id == transaction_id
            else t
            for t in self._transactions
        )
        return True

    def mark_integration_syncing(self, name: str) -> bool:
        return self._update_integration(
            name,
            status=IntegrationState.SYNCING,
        )

    def mark_integration_synced(self, name: str) -> bool:
        return self._update_integration(
            name,
            status=IntegrationState.CONNECTED,
            last_synced=JUST_NOW,
        )

    def _update_integration(self, name: str, **changes) -> bool:
        if all(item.name != name for item in self._integrations):
            return False
        self._integrations = tuple(
            replace(item, **changes) if item.name == name else item
            for item in self._integrations
        )
        return True

    def _next_alert_id(self) -> str:
        taken = {a.id for a in self._alerts}
        while True:
            candidate = f"alert_{next(self._alert_sequence)}"
            if candidate not in taken:
                return candidate

    @staticmethod
    def _unique(items):
        """Keep the first occurrence of each id, preserving order."""
        seen: set[str] = set()
        kept = []
        for item in items:
            if item.id in seen:
                continue
            seen.add(item.id)
            kept.append(item)
        return tuple(kept)


__all__ = ["FinancialSnapshot", "ImportResult", "anomaly_alert_message"]

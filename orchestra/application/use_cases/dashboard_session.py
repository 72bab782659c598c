"""Session-scoped state container for the dashboard.

The session is the single object shared by every interface adapter. It
owns the ``FinancialSnapshot``, the demo tour controller and the demo
flag, and recomputes the derived metrics on every read so a caller never
sees values older than the last mutation.
"""

from collections.abc import Sequence

from orchestra.application.use_cases.demo_narrative import (
    CashflowFactory,
    DemoNarrativeController,
)
from orchestra.domain.constants import DEMO_ALERT_ID, DEMO_TRANSACTION_ID
from orchestra.domain.models import (
    FinancialMetrics,
    FinancialSnapshot,
    ImportResult,
    Transaction,
)
from orchestra.domain.policies import (
    BaselineBurnRatePolicy,
    BurnRatePolicy,
    NarrativeBurnRatePolicy,
)
from orchestra.domain.services import compute_metrics, generate_mock_cashflow
from orchestra.domain.services.narrative import DemoStep
from orchestra.infrastructure.logging.logger import get_app_logger


class DashboardSession:
    """Own the snapshot and route user intents to it."""

    def __init__(
        self,
        snapshot: FinancialSnapshot,
        demo_mode: bool = False,
        cashflow_factory: CashflowFactory = generate_mock_cashflow,
        scripted_alert_id: str = DEMO_ALERT_ID,
        scripted_transaction_id: str = DEMO_TRANSACTION_ID,
        baseline_policy: BurnRatePolicy | None = None,
        narrative_policy: BurnRatePolicy | None = None,
        logger=None,
    ) -> None:
        """Initialize the session.

        Args:
            snapshot: State container holding the session data.
            demo_mode: Start in the scripted demo tour.
            cashflow_factory: Generator used for demo cashflow resets.
            scripted_alert_id: Alert id ending the demo tour.
            scripted_transaction_id: Transaction corrected by the tour.
            baseline_policy: Burn policy outside the demo.
            narrative_policy: Burn policy during the demo.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._snapshot = snapshot
        self._cashflow_factory = cashflow_factory
        self._scripted_alert_id = scripted_alert_id
        self._scripted_transaction_id = scripted_transaction_id
        self._baseline_policy = baseline_policy or BaselineBurnRatePolicy()
        self._narrative_policy = narrative_policy or NarrativeBurnRatePolicy()
        self._logger = logger or get_app_logger()
        self._narrative = self._new_controller(demo_mode)

    @property
    def snapshot(self) -> FinancialSnapshot:
        return self._snapshot

    @property
    def demo_mode(self) -> bool:
        return self._narrative.demo_mode

    @property
    def demo_step(self) -> DemoStep:
        return self._narrative.step

    @property
    def narrative(self) -> DemoNarrativeController:
        return self._narrative

    @property
    def burn_policy(self) -> BurnRatePolicy:
        if self.demo_mode:
            return self._narrative_policy
        return self._baseline_policy

    @property
    def metrics(self) -> FinancialMetrics:
        return compute_metrics(
            self._snapshot.transactions,
            self._snapshot.cashflow,
            self._snapshot.alerts,
            self.burn_policy,
        )

    def set_demo_mode(self, enabled: bool) -> None:
        """Enter or leave the scripted demo.

        Entering starts a fresh tour on the crisis cashflow; leaving forces
        the current tour to ``done``. Once the scripted alert has been
        resolved the crisis cannot be replayed, so re-entering keeps the
        calm cashflow and the tour stays ``done``.
        """
        if enabled == self.demo_mode:
            return
        if enabled:
            self._narrative = self._new_controller(True)
            crisis = not self._narrative.scripted_alert_resolved
            self._snapshot.replace_cashflow(self._cashflow_factory(crisis))
            self._logger.info(
                f"Entered demo mode at step {self._narrative.step.value}"
            )
        else:
            self._narrative.leave_demo()
            self._logger.info("Left demo mode")

    def dismiss_welcome(self) -> DemoStep:
        return self._narrative.dismiss_welcome()

    def open_view(self, view: str) -> DemoStep:
        return self._narrative.open_view(view)

    def resolve_alert(self, alert_id: str) -> bool:
        changed = self._narrative.resolve_alert(alert_id)
        if changed:
            self._logger.info(f"Alert resolved: {alert_id}")
        return changed

    def import_transactions(
        self,
        batch: Sequence[Transaction],
    ) -> ImportResult:
        result = self._snapshot.import_transactions(batch)
        self._logger.info(
            f"Imported {len(result.imported)} transactions, "
            f"raised {len(result.alerts)} alerts"
        )
        if result.skipped_ids:
            self._logger.warning(
                f"Skipped duplicate transaction ids: {list(result.skipped_ids)}"
            )
        return result

    def _new_controller(self, demo_mode: bool) -> DemoNarrativeController:
        return DemoNarrativeController(
            self._snapshot,
            cashflow_factory=self._cashflow_factory,
            demo_mode=demo_mode,
            scripted_alert_id=self._scripted_alert_id,
            scripted_transaction_id=self._scripted_transaction_id,
            logger=self._logger,
        )


__all__ = ["DashboardSession"]

"""Controller for the scripted crisis -> resolution demo tour."""

from collections.abc import Callable, Sequence
from decimal import Decimal

from orchestra.application.use_cases.constants import ACTION_ITEMS_VIEW
from orchestra.domain.constants import (
    CORRECTED_DESCRIPTION,
    DEMO_ALERT_ID,
    DEMO_TRANSACTION_ID,
)
from orchestra.domain.models import CashflowPoint, FinancialSnapshot
from orchestra.domain.services.narrative import (
    DemoStep,
    NarrativeEvent,
    next_step,
)
from orchestra.infrastructure.logging.logger import get_app_logger

CashflowFactory = Callable[[bool], Sequence[CashflowPoint]]


class DemoNarrativeController:
    """Drive the demo tour and its one-off scripted data fix.

    The controller owns the tour step and applies the scripted side effect
    when the designated alert is resolved in demo mode: the cashflow is
    regenerated with non-crisis parameters and the designated transaction
    is rewritten as corrected. Because an alert can only be resolved once,
    the effect runs at most once per session.
    """

    def __init__(
        self,
        snapshot: FinancialSnapshot,
        cashflow_factory: CashflowFactory,
        demo_mode: bool = True,
        scripted_alert_id: str = DEMO_ALERT_ID,
        scripted_transaction_id: str = DEMO_TRANSACTION_ID,
        logger=None,
    ) -> None:
        """Initialize the controller.

        Args:
            snapshot: State container mutated by the scripted fix.
            cashflow_factory: Callable returning a cashflow series; its
                argument selects crisis (True) or calm (False) parameters.
            demo_mode: Start inside the tour (``welcome``) or outside it
                (``done``). A tour whose scripted alert is already resolved
                starts at ``done``.
            scripted_alert_id: Alert whose resolution ends the tour.
            scripted_transaction_id: Transaction corrected by the fix.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._snapshot = snapshot
        self._cashflow_factory = cashflow_factory
        self._demo_mode = demo_mode
        self._scripted_alert_id = scripted_alert_id
        self._scripted_transaction_id = scripted_transaction_id
        self._logger = logger or get_app_logger()
        self._step = (
            DemoStep.WELCOME
            if demo_mode and not self.scripted_alert_resolved
            else DemoStep.DONE
        )
        self._history: list[DemoStep] = [self._step]

    @property
    def demo_mode(self) -> bool:
        return self._demo_mode

    @property
    def step(self) -> DemoStep:
        return self._step

    @property
    def scripted_alert_resolved(self) -> bool:
        alert = self._snapshot.find_alert(self._scripted_alert_id)
        return alert is not None and alert.resolved

    @property
    def history(self) -> tuple[DemoStep, ...]:
        return tuple(self._history)

    def dismiss_welcome(self) -> DemoStep:
        return self._fire(NarrativeEvent.DISMISS_WELCOME)

    def open_view(self, view: str) -> DemoStep:
        if view == ACTION_ITEMS_VIEW:
            return self._fire(NarrativeEvent.OPEN_ACTION_ITEMS)
        return self._step

    def leave_demo(self) -> DemoStep:
        self._demo_mode = False
        return self._fire(NarrativeEvent.LEAVE_DEMO)

    def resolve_alert(self, alert_id: str) -> bool:
        """Resolve an alert, applying the scripted fix when it applies.

        Args:
            alert_id: Identifier of the alert to resolve.

        Returns:
            bool: True when the alert changed state.
        """
        changed = self._snapshot.resolve_alert(alert_id)
        if not self._demo_mode or alert_id != self._scripted_alert_id:
            return changed
        if changed:
            self._apply_scripted_fix()
        self._fire(NarrativeEvent.RESOLVE_SCRIPTED_ALERT)
        return changed

    def _apply_scripted_fix(self) -> None:
        self._snapshot.replace_cashflow(self._cashflow_factory(False))
        self._snapshot.correct_transaction(
            self._scripted_transaction_id,
            description=CORRECTED_DESCRIPTION,
            amount=Decimal("0"),
        )
        self._logger.info(
            f"Scripted resolution applied for alert={self._scripted_alert_id}"
            f", transaction={self._scripted_transaction_id}"
        )

    def _fire(self, event: NarrativeEvent) -> DemoStep:
        target = next_step(self._step, event)
        if target != self._step:
            self._logger.info(
                f"Demo tour: {self._step.value} -> {target.value} "
                f"on {event.value}"
            )
            self._step = target
            self._history.append(target)
        return self._step


__all__ = ["DemoNarrativeController", "CashflowFactory"]

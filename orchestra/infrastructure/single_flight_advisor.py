"""Advisor decorator allowing one in-flight call per operation.

A second call to an operation that is still running is rejected at once
and receives the same safe default a failed call would. Calls to different
operations never block each other.
"""

from collections.abc import Callable, Sequence
from decimal import Decimal
import threading
from typing import TypeVar

from orchestra.application.ports.ai_advisor import AiAdvisorPort
from orchestra.domain.models import (
    Alert,
    AssistantContext,
    CashflowPoint,
    FinancialMetrics,
    ScenarioForecast,
    StrategicAction,
    Transaction,
    TransactionAnalysis,
)
from orchestra.infrastructure import ai_defaults
from orchestra.infrastructure.logging.logger import get_app_logger

T = TypeVar("T")

OPERATIONS = (
    "executive_summary",
    "investor_report",
    "strategic_actions",
    "analyze_transactions",
    "forecast_scenario",
    "chat",
)


class SingleFlightAiAdvisor:
    """AiAdvisorPort wrapper rejecting concurrent calls per operation."""

    def __init__(self, inner: AiAdvisorPort, logger=None) -> None:
        self._inner = inner
        self._logger = logger or get_app_logger()
        self._locks = {name: threading.Lock() for name in OPERATIONS}

    def in_flight(self, operation: str) -> bool:
        return self._locks[operation].locked()

    def executive_summary(
        self,
        balance: Decimal,
        monthly_burn: Decimal,
        runway: Decimal,
        alerts: Sequence[Alert],
    ) -> str:
        return self._guard(
            "executive_summary",
            lambda: self._inner.executive_summary(
                balance, monthly_burn, runway, alerts
            ),
            lambda: ai_defaults.SUMMARY_UNAVAILABLE,
        )

    def investor_report(
        self,
        metrics: FinancialMetrics,
        cashflow: Sequence[CashflowPoint],
    ) -> str:
        return self._guard(
            "investor_report",
            lambda: self._inner.investor_report(metrics, cashflow),
            lambda: ai_defaults.REPORT_UNAVAILABLE,
        )

    def strategic_actions(
        self,
        transactions: Sequence[Transaction],
    ) -> list[StrategicAction]:
        return self._guard(
            "strategic_actions",
            lambda: self._inner.strategic_actions(transactions),
            list,
        )

    def analyze_transactions(
        self,
        transactions: Sequence[Transaction],
    ) -> list[TransactionAnalysis]:
        return self._guard(
            "analyze_transactions",
            lambda: self._inner.analyze_transactions(transactions),
            list,
        )

    def forecast_scenario(
        self,
        history: Sequence[CashflowPoint],
        scenario: str,
    ) -> ScenarioForecast:
        return self._guard(
            "forecast_scenario",
            lambda: self._inner.forecast_scenario(history, scenario),
            lambda: ai_defaults.unavailable_forecast(history),
        )

    def chat(self, message: str, context: AssistantContext) -> str:
        return self._guard(
            "chat",
            lambda: self._inner.chat(message, context),
            lambda: ai_defaults.CHAT_APOLOGY,
        )

    def _guard(
        self,
        operation: str,
        call: Callable[[], T],
        default: Callable[[], T],
    ) -> T:
        lock = self._locks[operation]
        if not lock.acquire(blocking=False):
            self._logger.warning(
                f"Rejected {operation}: a previous call is still running"
            )
            return default()
        try:
            return call()
        finally:
            lock.release()


__all__ = ["SingleFlightAiAdvisor", "OPERATIONS"]

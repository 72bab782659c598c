"""Port for the generative AI advisor.

One method per assistant capability. Implementations never raise: when the
service is unconfigured they return deterministic demo values, and when a
call fails they return a safe default for the operation (apology text,
empty list, or the unchanged forecast input).
"""

from collections.abc import Sequence
from decimal import Decimal
from typing import Protocol

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


class AiAdvisorPort(Protocol):
    """Port exposing the AI-backed insights used by the dashboard."""

    def executive_summary(
        self,
        balance: Decimal,
        monthly_burn: Decimal,
        runway: Decimal,
        alerts: Sequence[Alert],
    ) -> str:
        """Return a 2-3 sentence plain-text briefing."""

    def investor_report(
        self,
        metrics: FinancialMetrics,
        cashflow: Sequence[CashflowPoint],
    ) -> str:
        """Return an investor update with subject, summary, metrics,
        risks and closing sections."""

    def strategic_actions(
        self,
        transactions: Sequence[Transaction],
    ) -> list[StrategicAction]:
        """Return three suggested actions."""

    def analyze_transactions(
        self,
        transactions: Sequence[Transaction],
    ) -> list[TransactionAnalysis]:
        """Return category and risk assessment keyed by transaction id."""

    def forecast_scenario(
        self,
        history: Sequence[CashflowPoint],
        scenario: str,
    ) -> ScenarioForecast:
        """Return projected points for the next three periods."""

    def chat(self, message: str, context: AssistantContext) -> str:
        """Answer a user question grounded in ``context``."""


__all__ = ["AiAdvisorPort"]

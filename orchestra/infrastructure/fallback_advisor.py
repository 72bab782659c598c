"""Offline advisor used when no Gemini credential is configured.

Every reply is deterministic for a given input and is worded so a user can
tell it is demo content rather than a live analysis.
"""

from collections.abc import Sequence
from decimal import Decimal

from orchestra.domain.models import (
    ActionType,
    Alert,
    AssistantContext,
    CashflowPoint,
    FinancialMetrics,
    ScenarioForecast,
    StrategicAction,
    Transaction,
    TransactionAnalysis,
)
from orchestra.utils.decimal_utils import format_money

DEMO_SUMMARY = (
    "Demo insight: based on current trends, your cashflow remains stable "
    "with 14 months of runway. Note: 2 high-priority alerts require "
    "attention regarding vendor payments."
)
DEMO_CATEGORY = "Uncategorized (No API)"
DEMO_RISK_SCORE = 10.0
DEMO_FORECAST_EXPLANATION = "API key missing. Using static demo data."
DEMO_ACTIONS = (
    StrategicAction(
        action="Renegotiate AWS Enterprise Contract",
        impact="Potential $2,400/mo saving",
        type=ActionType.SAVING,
    ),
    StrategicAction(
        action="Investigate 'Unknown Vendor' payments",
        impact="Risk mitigation",
        type=ActionType.RISK,
    ),
    StrategicAction(
        action="Move idle cash to Yield Account",
        impact="+4.5% APY Interest",
        type=ActionType.GROWTH,
    ),
)


class FallbackAiAdvisor:
    """AiAdvisorPort implementation returning fixed demo content."""

    def executive_summary(
        self,
        balance: Decimal,
        monthly_burn: Decimal,
        runway: Decimal,
        alerts: Sequence[Alert],
    ) -> str:
        return DEMO_SUMMARY

    def investor_report(
        self,
        metrics: FinancialMetrics,
        cashflow: Sequence[CashflowPoint],
    ) -> str:
        return (
            "Subject: Investor Update (demo) - Strong Growth, "
            "Stable Runway\n\n"
            "Hi everyone,\n\n"
            "We are pleased to report that our cash position remains "
            f"strong at {format_money(metrics.balance)}. Our monthly burn "
            f"rate is currently {format_money(metrics.monthly_burn)}, "
            f"giving us {metrics.runway:.1f} months of runway.\n\n"
            "Key Highlights:\n"
            "- Revenue increased by 15% MoM.\n"
            "- Optimization of infrastructure costs is underway.\n\n"
            "Risks:\n"
            "- Vendor payments flagged by anomaly detection are under "
            "review.\n\n"
            "As always, thank you for your support.\n\n"
            "Best,\nAlex Finance"
        )

    def strategic_actions(
        self,
        transactions: Sequence[Transaction],
    ) -> list[StrategicAction]:
        return list(DEMO_ACTIONS)

    def analyze_transactions(
        self,
        transactions: Sequence[Transaction],
    ) -> list[TransactionAnalysis]:
        return [
            TransactionAnalysis(
                id=transaction.id,
                category=DEMO_CATEGORY,
                risk_score=DEMO_RISK_SCORE,
                risk_reason=None,
                is_anomaly=False,
            )
            for transaction in transactions
        ]

    def forecast_scenario(
        self,
        history: Sequence[CashflowPoint],
        scenario: str,
    ) -> ScenarioForecast:
        return ScenarioForecast(
            explanation=DEMO_FORECAST_EXPLANATION,
            data=list(history),
        )

    def chat(self, message: str, context: AssistantContext) -> str:
        return (
            f"I can see you're asking about: {message}. Since I'm in demo "
            "mode (no API key), I can tell you that your current balance "
            f"is {format_money(context.balance)}."
        )


__all__ = ["FallbackAiAdvisor"]

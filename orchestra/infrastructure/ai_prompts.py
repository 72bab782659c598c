"""Prompt builders for the Gemini advisor.

Each builder turns domain objects into the instruction text for one
advisor operation. Figures are rendered from the supplied values only, so
the model never sees numbers that are not in the session.
"""

from collections.abc import Sequence
from decimal import Decimal
import json

from orchestra.domain.models import (
    Alert,
    AssistantContext,
    CashflowPoint,
    FinancialMetrics,
    Transaction,
)
from orchestra.utils.decimal_utils import format_money

COMPANY_NAME = "Orchestra"
ANOMALY_THRESHOLD = Decimal("10000")
MAX_STRATEGY_TRANSACTIONS = 15
REPORT_TREND_POINTS = 3
FORECAST_HISTORY_POINTS = 3
FORECAST_PERIODS = 3
CHAT_TRANSACTIONS = 5


def transaction_payload(transaction: Transaction) -> dict:
    payload = {
        "id": transaction.id,
        "date": transaction.date,
        "description": transaction.description,
        "amount": float(transaction.amount),
        "type": transaction.type.value,
        "category": transaction.category,
        "status": transaction.status.value,
    }
    if transaction.risk_score is not None:
        payload["riskScore"] = transaction.risk_score
    if transaction.risk_reason:
        payload["riskReason"] = transaction.risk_reason
    if transaction.is_anomaly is not None:
        payload["isAnomaly"] = transaction.is_anomaly
    return payload


def cashflow_payload(point: CashflowPoint) -> dict:
    return {
        "month": point.month,
        "income": float(point.income),
        "expenses": float(point.expenses),
        "balance": float(point.balance),
        "projected": point.projected,
    }


def alert_payload(alert: Alert) -> dict:
    return {
        "id": alert.id,
        "severity": alert.severity.value,
        "message": alert.message,
        "date": alert.date,
        "resolved": alert.resolved,
    }


def _dumps(items) -> str:
    return json.dumps(list(items))


def executive_summary_prompt(
    balance: Decimal,
    monthly_burn: Decimal,
    runway: Decimal,
    alerts: Sequence[Alert],
) -> str:
    active = [alert_payload(a) for a in alerts if not a.resolved]
    return f"""
You are an expert CFO AI Assistant for a startup called "{COMPANY_NAME}".

Current Financial Snapshot:
- Current Balance: {format_money(balance)}
- Monthly Burn Rate: ~{format_money(monthly_burn)}
- Estimated Runway: {runway:.1f} months
- Active Alerts: {_dumps(active)}

Task:
Write a 2-3 sentence proactive executive summary.
- Focus on the single most critical risk or opportunity.
- Be concise, professional, and actionable.
- Do not use markdown formatting, just plain text.
""".strip()


def investor_report_prompt(
    metrics: FinancialMetrics,
    cashflow: Sequence[CashflowPoint],
) -> str:
    trend = [cashflow_payload(p) for p in cashflow[-REPORT_TREND_POINTS:]]
    return f"""
Write a professional Investor Update email for a startup.

Metrics:
- Cash on Hand: {format_money(metrics.balance)}
- Monthly Burn: {format_money(metrics.monthly_burn)}
- Runway: {metrics.runway:.1f} months
- Recent Trend: {_dumps(trend)}

Tone: Professional, transparent, and confident.
Structure: Subject Line, Executive Summary, Key Metrics, Lowlights/Risks,
and Closing. Only quote figures listed above.
""".strip()


def strategic_actions_prompt(transactions: Sequence[Transaction]) -> str:
    recent = [
        transaction_payload(t)
        for t in transactions[:MAX_STRATEGY_TRANSACTIONS]
    ]
    return f"""
Analyze these transactions and suggest exactly 3 specific strategic actions
to improve cashflow.
Transactions: {_dumps(recent)}

Return a JSON array of 3 objects with the fields 'action', 'impact', and
'type' (one of: saving, risk, growth).
""".strip()


def transaction_analysis_prompt(transactions: Sequence[Transaction]) -> str:
    payload = [transaction_payload(t) for t in transactions]
    return f"""
Analyze the following financial transactions.
1. Assign a standardized category (e.g., Software, Payroll, Marketing,
   Sales, Office, Travel).
2. Detect if the transaction is an anomaly (high risk) based on its
   description or amount: an amount above {format_money(ANOMALY_THRESHOLD)}
   is unusual for an unknown or unfamiliar vendor.
3. Provide a risk score (0-100) and a short reason.

Return one object per transaction, keyed by its 'id'.
Transactions: {_dumps(payload)}
""".strip()


def forecast_prompt(
    history: Sequence[CashflowPoint],
    scenario: str,
) -> str:
    recent = [cashflow_payload(p) for p in history[-FORECAST_HISTORY_POINTS:]]
    return f"""
You are a financial CFO AI.
Historical Cashflow Data (last {FORECAST_HISTORY_POINTS} periods): {_dumps(recent)}

User Scenario to Simulate: "{scenario}"

Task:
1. Project the cashflow for the NEXT {FORECAST_PERIODS} periods based on the
   history and the user's what-if scenario.
2. Provide a short strategic explanation of the impact.
3. Return the projected periods in the same JSON shape as the history,
   with "projected" set to true.
""".strip()


def chat_prompt(message: str, context: AssistantContext) -> str:
    recent = [
        f"{t.date}: {t.description} (${t.amount})"
        for t in context.recent_transactions[:CHAT_TRANSACTIONS]
    ]
    return f"""
You are the "{COMPANY_NAME} CFO Agent". You are helpful, concise, and
financially savvy.

User Context:
- Cash Balance: {format_money(context.balance)}
- Monthly Burn: {format_money(context.monthly_burn)}
- Runway: {context.runway:.1f} months
- Recent Transactions: {json.dumps(recent)}

User Question: "{message}"

Answer the user's question based on their data.
If they ask about "runway", explain what it means for their specific number.
If they ask about spending, refer to the burn rate or recent transactions.
Only use figures from the context above; never invent numbers.
Keep answers under 50 words unless detailed analysis is requested.
""".strip()


__all__ = [
    "transaction_payload",
    "cashflow_payload",
    "alert_payload",
    "executive_summary_prompt",
    "investor_report_prompt",
    "strategic_actions_prompt",
    "transaction_analysis_prompt",
    "forecast_prompt",
    "chat_prompt",
    "FORECAST_PERIODS",
]

"""Tests for the offline demo advisor."""

from decimal import Decimal

from orchestra.domain.models import (
    ActionType,
    AssistantContext,
    CashflowPoint,
    FinancialMetrics,
    Transaction,
    TransactionStatus,
    TransactionType,
)
from orchestra.infrastructure.fallback_advisor import FallbackAiAdvisor


def _txn(txn_id: str) -> Transaction:
    return Transaction(
        txn_id,
        "2023-10-24",
        "Github Ent",
        Decimal("-220"),
        TransactionType.EXPENSE,
        "Software",
        TransactionStatus.COMPLETED,
    )


def test_summary_is_labelled_as_demo_and_stable() -> None:
    advisor = FallbackAiAdvisor()

    first = advisor.executive_summary(
        Decimal("1"), Decimal("1"), Decimal("1"), []
    )
    second = advisor.executive_summary(
        Decimal("2"), Decimal("2"), Decimal("2"), []
    )

    assert first == second
    assert first.startswith("Demo insight")


def test_strategic_actions_cover_each_type() -> None:
    actions = FallbackAiAdvisor().strategic_actions([])

    assert len(actions) == 3
    assert [a.type for a in actions] == [
        ActionType.SAVING,
        ActionType.RISK,
        ActionType.GROWTH,
    ]


def test_analysis_returns_low_risk_uncategorized_per_transaction() -> None:
    results = FallbackAiAdvisor().analyze_transactions(
        [_txn("t1"), _txn("t2")]
    )

    assert [r.id for r in results] == ["t1", "t2"]
    assert {r.category for r in results} == {"Uncategorized (No API)"}
    assert {r.risk_score for r in results} == {10.0}
    assert not any(r.is_anomaly for r in results)


def test_forecast_echoes_history() -> None:
    history = [
        CashflowPoint("Oct 24", Decimal("0"), Decimal("0"), Decimal("5"))
    ]

    forecast = FallbackAiAdvisor().forecast_scenario(history, "anything")

    assert forecast.data == history
    assert "API key missing" in forecast.explanation


def test_chat_mentions_question_and_balance() -> None:
    context = AssistantContext(
        balance=Decimal("1240500"),
        monthly_burn=Decimal("85000"),
        runway=Decimal("14.6"),
    )

    reply = FallbackAiAdvisor().chat("burn?", context)

    assert "burn?" in reply
    assert "$1,240,500" in reply
    assert "demo mode" in reply


def test_investor_report_quotes_metrics() -> None:
    metrics = FinancialMetrics(
        balance=Decimal("1240500"),
        monthly_burn=Decimal("85000"),
        runway=Decimal("14.594"),
    )

    report = FallbackAiAdvisor().investor_report(metrics, [])

    assert report.startswith("Subject:")
    assert "(demo)" in report
    assert "$1,240,500" in report
    assert "$85,000" in report
    assert "14.6 months" in report

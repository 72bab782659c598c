"""Tests for the use cases backed by the AI advisor."""

from decimal import Decimal
from unittest.mock import MagicMock

from orchestra.application.use_cases import (
    AskAssistantUseCase,
    CategorizeTransactionsUseCase,
    DashboardSession,
    GenerateInvestorReportUseCase,
    GetExecutiveBriefingUseCase,
    SimulateScenarioUseCase,
)
from orchestra.domain.constants import BASELINE_MONTHLY_BURN
from orchestra.domain.models import (
    ActionType,
    Alert,
    AlertSeverity,
    CashflowPoint,
    FinancialSnapshot,
    ScenarioForecast,
    StrategicAction,
    Transaction,
    TransactionAnalysis,
    TransactionStatus,
    TransactionType,
)
from orchestra.infrastructure.fallback_advisor import FallbackAiAdvisor


def _txn(index: int) -> Transaction:
    return Transaction(
        id=f"t{index}",
        date="2023-10-24",
        description=f"Vendor {index}",
        amount=Decimal("-100"),
        type=TransactionType.EXPENSE,
        category="Uncategorized",
        status=TransactionStatus.PENDING,
    )


def _point(month: str, balance: str, projected: bool = False):
    return CashflowPoint(
        month, Decimal("0"), Decimal("0"), Decimal(balance), projected
    )


def _session(transactions=None, cashflow=None) -> DashboardSession:
    snapshot = FinancialSnapshot(
        transactions=transactions
        if transactions is not None
        else [_txn(i) for i in range(1, 21)],
        cashflow=cashflow
        if cashflow is not None
        else [
            _point("Oct 20", "1300000"),
            _point("Oct 21", "1290000"),
            _point("Oct 22", "1280000"),
            _point("Oct 23", "1270000"),
            _point("Oct 24", "1260000"),
            _point("Oct 25", "1255500", projected=True),
        ],
        alerts=[Alert("a1", AlertSeverity.HIGH, "Unusual outflow", "now")],
    )
    return DashboardSession(snapshot, logger=MagicMock())


def test_briefing_passes_metrics_and_recent_transactions() -> None:
    """The summary uses live metrics and actions see 15 transactions."""
    session = _session()
    advisor = MagicMock()
    advisor.executive_summary.return_value = "Runway is fine."
    advisor.strategic_actions.return_value = [
        StrategicAction("Cut SaaS", "$1k/mo", ActionType.SAVING),
    ]

    briefing = GetExecutiveBriefingUseCase(
        session=session,
        advisor=advisor,
        logger=MagicMock(),
    ).execute()

    assert briefing.summary == "Runway is fine."
    assert briefing.actions[0].type == ActionType.SAVING
    balance, burn, runway, alerts = advisor.executive_summary.call_args.args
    assert balance == Decimal("1255500")
    assert burn == BASELINE_MONTHLY_BURN
    assert runway == Decimal("1255500") / BASELINE_MONTHLY_BURN
    assert alerts == session.snapshot.alerts
    (sent,) = advisor.strategic_actions.call_args.args
    assert [t.id for t in sent] == [f"t{i}" for i in range(1, 16)]


def test_investor_report_uses_session_metrics() -> None:
    session = _session()
    advisor = MagicMock()
    advisor.investor_report.return_value = "Subject: Update"

    report = GenerateInvestorReportUseCase(
        session=session,
        advisor=advisor,
    ).execute()

    assert report == "Subject: Update"
    metrics, cashflow = advisor.investor_report.call_args.args
    assert metrics == session.metrics
    assert cashflow == session.snapshot.cashflow


def test_categorize_sends_ten_most_recent_and_merges() -> None:
    session = _session()
    advisor = MagicMock()
    advisor.analyze_transactions.side_effect = lambda batch: [
        TransactionAnalysis(
            id=t.id,
            category="Software",
            risk_score=20.0,
            is_anomaly=False,
        )
        for t in batch
    ]

    updated = CategorizeTransactionsUseCase(
        session=session,
        advisor=advisor,
        logger=MagicMock(),
    ).execute()

    assert updated == 10
    (batch,) = advisor.analyze_transactions.call_args.args
    assert [t.id for t in batch] == [f"t{i}" for i in range(1, 11)]
    ledger = session.snapshot.transactions
    assert {t.category for t in ledger[:10]} == {"Software"}
    assert {t.status for t in ledger[:10]} == {TransactionStatus.COMPLETED}
    assert ledger[10].category == "Uncategorized"


def test_categorize_failure_leaves_ledger_unchanged() -> None:
    """An empty analysis (the failure default) changes nothing."""
    session = _session()
    before = session.snapshot.transactions
    advisor = MagicMock()
    advisor.analyze_transactions.return_value = []

    updated = CategorizeTransactionsUseCase(
        session=session,
        advisor=advisor,
        logger=MagicMock(),
    ).execute()

    assert updated == 0
    assert session.snapshot.transactions == before


def test_categorize_empty_ledger_skips_advisor() -> None:
    advisor = MagicMock()

    updated = CategorizeTransactionsUseCase(
        session=_session(transactions=[]),
        advisor=advisor,
        logger=MagicMock(),
    ).execute()

    assert updated == 0
    advisor.analyze_transactions.assert_not_called()


def test_simulate_appends_projection_to_history() -> None:
    """Three recent actual points are sent; projected points follow."""
    session = _session()
    advisor = MagicMock()
    advisor.forecast_scenario.return_value = ScenarioForecast(
        explanation="Hiring shortens runway.",
        data=[
            _point("Nov", "1200000", projected=True),
            _point("Dec", "1150000", projected=True),
            _point("Jan", "1100000", projected=True),
        ],
    )

    outcome = SimulateScenarioUseCase(
        session=session,
        advisor=advisor,
        logger=MagicMock(),
    ).execute("  Hire a Sales Manager ($8k/mo) ")

    history, scenario = advisor.forecast_scenario.call_args.args
    assert [p.month for p in history] == ["Oct 22", "Oct 23", "Oct 24"]
    assert scenario == "Hire a Sales Manager ($8k/mo)"
    assert outcome.explanation == "Hiring shortens runway."
    assert outcome.projected_points == 3
    assert [p.month for p in outcome.series][-4:] == [
        "Oct 24", "Nov", "Dec", "Jan",
    ]
    assert len(outcome.series) == 8
    assert session.snapshot.cashflow[-1].month == "Oct 25"


def test_simulate_without_projection_keeps_series() -> None:
    """A failed forecast echoes history and the chart stays unchanged."""
    session = _session()
    advisor = MagicMock()
    advisor.forecast_scenario.side_effect = lambda history, _s: (
        ScenarioForecast(explanation="unavailable", data=list(history))
    )

    outcome = SimulateScenarioUseCase(
        session=session,
        advisor=advisor,
        logger=MagicMock(),
    ).execute("Revenue drops by 20%")

    assert outcome.series == session.snapshot.cashflow
    assert outcome.projected_points == 0


def test_simulate_blank_scenario_returns_none() -> None:
    advisor = MagicMock()

    outcome = SimulateScenarioUseCase(
        session=_session(),
        advisor=advisor,
        logger=MagicMock(),
    ).execute("   ")

    assert outcome is None
    advisor.forecast_scenario.assert_not_called()


def test_assistant_context_holds_metrics_and_five_transactions() -> None:
    session = _session()
    advisor = MagicMock()
    advisor.chat.return_value = "You have about 14 months."
    use_case = AskAssistantUseCase(session=session, advisor=advisor)

    reply = use_case.execute("What's my runway?")

    assert reply == "You have about 14 months."
    message, context = advisor.chat.call_args.args
    assert message == "What's my runway?"
    assert context.balance == session.metrics.balance
    assert context.runway == session.metrics.runway
    assert [t.id for t in context.recent_transactions] == [
        "t1", "t2", "t3", "t4", "t5",
    ]


def test_assistant_ignores_blank_message() -> None:
    advisor = MagicMock()

    reply = AskAssistantUseCase(session=_session(), advisor=advisor).execute(
        " "
    )

    assert reply is None
    advisor.chat.assert_not_called()


def test_fallback_categorization_keeps_existing_risk_reason() -> None:
    flagged = Transaction(
        id="t4",
        date="2023-10-23",
        description="Unknown Vendor 994X",
        amount=Decimal("-12000"),
        type=TransactionType.EXPENSE,
        category="Uncategorized",
        status=TransactionStatus.PENDING,
        risk_score=85,
        risk_reason="High amount for new vendor",
        is_anomaly=True,
    )
    session = _session(transactions=[flagged])

    CategorizeTransactionsUseCase(
        session=session,
        advisor=FallbackAiAdvisor(),
        logger=MagicMock(),
    ).execute()

    merged = session.snapshot.find_transaction("t4")
    assert merged.category == "Uncategorized (No API)"
    assert merged.risk_reason == "High amount for new vendor"

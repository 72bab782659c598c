"""Tests for the Gemini advisor with a fake model."""

import json
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

from orchestra.domain.models import (
    Alert,
    AlertSeverity,
    AssistantContext,
    CashflowPoint,
    FinancialMetrics,
    Transaction,
    TransactionStatus,
    TransactionType,
)
from orchestra.infrastructure import ai_defaults
from orchestra.infrastructure import gemini_advisor as gemini_module
from orchestra.infrastructure.gemini_advisor import GeminiAiAdvisor


class _FakeModel:
    def __init__(self, text=None, error=None) -> None:
        self.text = text
        self.error = error
        self.calls = []

    def generate_content(self, prompt, **kwargs):
        self.calls.append((prompt, kwargs))
        if self.error is not None:
            raise self.error
        return SimpleNamespace(text=self.text)


def _advisor(model, logger=None) -> GeminiAiAdvisor:
    return GeminiAiAdvisor(
        "key",
        model=model,
        logger=logger or MagicMock(),
    )


def _txn() -> Transaction:
    return Transaction(
        "t4",
        "2023-10-23",
        "Unknown Vendor 994X",
        Decimal("-12000"),
        TransactionType.EXPENSE,
        "Uncategorized",
        TransactionStatus.PENDING,
    )


def _history():
    return [
        CashflowPoint("Oct 22", Decimal("0"), Decimal("10"), Decimal("90")),
        CashflowPoint("Oct 23", Decimal("0"), Decimal("10"), Decimal("80")),
    ]


def _context() -> AssistantContext:
    return AssistantContext(
        balance=Decimal("1240500"),
        monthly_burn=Decimal("85000"),
        runway=Decimal("14.6"),
        recent_transactions=(_txn(),),
    )


def test_constructor_configures_sdk_when_no_model_given(monkeypatch):
    """Without an injected model the SDK is configured with the key."""
    fake_genai = MagicMock()
    monkeypatch.setattr(gemini_module, "genai", fake_genai)

    GeminiAiAdvisor("secret", model_name="gemini-x", logger=MagicMock())

    fake_genai.configure.assert_called_once_with(api_key="secret")
    fake_genai.GenerativeModel.assert_called_once_with("gemini-x")


def test_executive_summary_returns_stripped_text() -> None:
    model = _FakeModel(text="  Runway is healthy.\n")
    alerts = [
        Alert("a1", AlertSeverity.HIGH, "Unusual outflow", "now"),
        Alert("a3", AlertSeverity.LOW, "Resolved one", "then", True),
    ]

    summary = _advisor(model).executive_summary(
        Decimal("1240500"), Decimal("85000"), Decimal("14.6"), alerts
    )

    assert summary == "Runway is healthy."
    prompt, kwargs = model.calls[0]
    assert "$1,240,500" in prompt
    assert "Unusual outflow" in prompt
    assert "Resolved one" not in prompt
    assert "generation_config" in kwargs


def test_executive_summary_empty_reply_uses_placeholder() -> None:
    summary = _advisor(_FakeModel(text="")).executive_summary(
        Decimal("1"), Decimal("1"), Decimal("1"), []
    )

    assert summary == ai_defaults.SUMMARY_EMPTY


def test_executive_summary_failure_returns_safe_text() -> None:
    logger = MagicMock()
    advisor = _advisor(_FakeModel(error=RuntimeError("quota")), logger)

    summary = advisor.executive_summary(
        Decimal("1"), Decimal("1"), Decimal("1"), []
    )

    assert summary == ai_defaults.SUMMARY_UNAVAILABLE
    logger.error.assert_called_once()


def test_investor_report_failure_returns_safe_text() -> None:
    metrics = FinancialMetrics(Decimal("1"), Decimal("1"), Decimal("1"))

    report = _advisor(_FakeModel(error=ValueError("blocked"))).investor_report(
        metrics, _history()
    )

    assert report == ai_defaults.REPORT_UNAVAILABLE


def test_strategic_actions_parses_json_reply() -> None:
    reply = json.dumps(
        [
            {"action": "A", "impact": "x", "type": "saving"},
            {"action": "B", "impact": "y", "type": "risk"},
            {"action": "C", "impact": "z", "type": "growth"},
        ]
    )
    model = _FakeModel(text=reply)

    actions = _advisor(model).strategic_actions([_txn()])

    assert [a.action for a in actions] == ["A", "B", "C"]
    _, kwargs = model.calls[0]
    assert kwargs["generation_config"] is not None


def test_strategic_actions_schema_mismatch_returns_empty() -> None:
    reply = json.dumps([{"action": "A", "impact": "x", "type": "saving"}])
    logger = MagicMock()

    actions = _advisor(_FakeModel(text=reply), logger).strategic_actions([])

    assert actions == []
    logger.error.assert_called_once()


def test_analyze_transactions_maps_results() -> None:
    reply = json.dumps(
        [
            {
                "id": "t4",
                "category": "Vendor",
                "riskScore": 88,
                "riskReason": "Large unknown payee",
                "isAnomaly": True,
            }
        ]
    )

    (result,) = _advisor(_FakeModel(text=reply)).analyze_transactions(
        [_txn()]
    )

    assert result.id == "t4"
    assert result.is_anomaly is True


def test_analyze_transactions_empty_input_skips_model() -> None:
    model = _FakeModel(text="[]")

    assert _advisor(model).analyze_transactions([]) == []
    assert model.calls == []


def test_analyze_transactions_failure_returns_empty() -> None:
    results = _advisor(
        _FakeModel(error=RuntimeError("down"))
    ).analyze_transactions([_txn()])

    assert results == []


def test_forecast_failure_echoes_history() -> None:
    history = _history()

    forecast = _advisor(_FakeModel(text="{}")).forecast_scenario(
        history, "Revenue drops by 20%"
    )

    assert forecast.data == history
    assert forecast.explanation == ai_defaults.FORECAST_UNAVAILABLE


def test_forecast_parses_projection() -> None:
    reply = json.dumps(
        {
            "explanation": "Revenue dip shortens runway.",
            "data": [
                {"month": "Nov", "income": 0, "expenses": 9, "balance": 70},
                {"month": "Dec", "income": 0, "expenses": 9, "balance": 61},
                {"month": "Jan", "income": 0, "expenses": 9, "balance": 52},
            ],
        }
    )
    model = _FakeModel(text=reply)

    forecast = _advisor(model).forecast_scenario(_history(), "dip")

    assert forecast.data[0].projected is True
    assert forecast.data[0].month == "Nov"
    prompt, _ = model.calls[0]
    assert '"dip"' in prompt


def test_forecast_with_partial_projection_echoes_history() -> None:
    reply = json.dumps(
        {
            "explanation": "Only one period.",
            "data": [
                {"month": "Nov", "income": 0, "expenses": 9, "balance": 70},
            ],
        }
    )
    history = _history()

    forecast = _advisor(_FakeModel(text=reply)).forecast_scenario(
        history, "dip"
    )

    assert forecast.data == history
    assert forecast.explanation == ai_defaults.FORECAST_UNAVAILABLE


def test_chat_returns_reply_and_grounds_prompt() -> None:
    model = _FakeModel(text="About 14.6 months.")

    reply = _advisor(model).chat("What's my runway?", _context())

    assert reply == "About 14.6 months."
    prompt, kwargs = model.calls[0]
    assert "What's my runway?" in prompt
    assert "Unknown Vendor 994X" in prompt
    assert kwargs == {}


def test_chat_failure_and_empty_replies() -> None:
    assert _advisor(_FakeModel(error=RuntimeError("x"))).chat(
        "hi", _context()
    ) == ai_defaults.CHAT_APOLOGY
    assert _advisor(_FakeModel(text=None)).chat(
        "hi", _context()
    ) == ai_defaults.CHAT_EMPTY

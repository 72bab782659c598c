"""Tests for the briefing_cli adapter."""

from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

from orchestra.adapters import briefing_cli
from orchestra.domain.models import (
    ActionType,
    FinancialMetrics,
    StrategicAction,
)


def test_main_runs_use_case_and_prints_briefing(monkeypatch, capsys):
    """The CLI should wire the use case and print metrics and actions."""
    fake_logger = MagicMock()
    session = SimpleNamespace(
        metrics=FinancialMetrics(
            balance=Decimal("1240500"),
            monthly_burn=Decimal("85000"),
            runway=Decimal("14.594"),
        )
    )
    advisor = object()
    fake_use_case = MagicMock()
    fake_use_case.execute.return_value = SimpleNamespace(
        summary="Cash is stable.",
        actions=[
            StrategicAction("Renegotiate AWS", "$2k/mo", ActionType.SAVING),
        ],
    )

    monkeypatch.setattr(briefing_cli, "get_app_logger", lambda: fake_logger)
    monkeypatch.setattr(
        briefing_cli, "build_dashboard_session", lambda: session
    )
    monkeypatch.setattr(briefing_cli, "build_ai_advisor", lambda: advisor)

    def _fake_use_case(session, advisor, logger):
        assert logger is fake_logger
        return fake_use_case

    monkeypatch.setattr(
        briefing_cli,
        "GetExecutiveBriefingUseCase",
        _fake_use_case,
    )

    briefing_cli.main()

    fake_use_case.execute.assert_called_once()
    out = capsys.readouterr().out
    assert "$1,240,500" in out
    assert "$85,000" in out
    assert "14.6 months" in out
    assert "Cash is stable." in out
    assert "[saving] Renegotiate AWS ($2k/mo)" in out

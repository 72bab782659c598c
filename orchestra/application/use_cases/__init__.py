"""Application use cases package."""

from .ask_assistant import AskAssistantUseCase
from .categorize_transactions import CategorizeTransactionsUseCase
from .dashboard_session import DashboardSession
from .demo_narrative import DemoNarrativeController
from .generate_investor_report import GenerateInvestorReportUseCase
from .get_executive_briefing import (
    ExecutiveBriefing,
    GetExecutiveBriefingUseCase,
)
from .simulate_scenario import ScenarioOutcome, SimulateScenarioUseCase
from .sync_integration import (
    SyncIntegrationUseCase,
    UploadTransactionsUseCase,
)

__all__ = [
    "AskAssistantUseCase",
    "CategorizeTransactionsUseCase",
    "DashboardSession",
    "DemoNarrativeController",
    "GenerateInvestorReportUseCase",
    "ExecutiveBriefing",
    "GetExecutiveBriefingUseCase",
    "ScenarioOutcome",
    "SimulateScenarioUseCase",
    "SyncIntegrationUseCase",
    "UploadTransactionsUseCase",
]

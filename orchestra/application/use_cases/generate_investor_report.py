"""Use case drafting the investor update."""

from orchestra.application.ports.ai_advisor import AiAdvisorPort
from orchestra.application.use_cases.dashboard_session import DashboardSession


class GenerateInvestorReportUseCase:
    """Draft an investor update from the live metrics and cashflow."""

    def __init__(
        self,
        session: DashboardSession,
        advisor: AiAdvisorPort,
    ) -> None:
        self._session = session
        self._advisor = advisor

    def execute(self) -> str:
        return self._advisor.investor_report(
            self._session.metrics,
            self._session.snapshot.cashflow,
        )


__all__ = ["GenerateInvestorReportUseCase"]

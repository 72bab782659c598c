"""Use case producing the dashboard's executive briefing."""

from dataclasses import dataclass, field

from orchestra.application.ports.ai_advisor import AiAdvisorPort
from orchestra.application.use_cases.constants import STRATEGY_CONTEXT_SIZE
from orchestra.application.use_cases.dashboard_session import DashboardSession
from orchestra.domain.models import StrategicAction
from orchestra.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class ExecutiveBriefing:
    """Summary text and suggested actions shown on the dashboard."""

    summary: str
    actions: list[StrategicAction] = field(default_factory=list)


class GetExecutiveBriefingUseCase:
    """Ask the advisor for a briefing on the current session state."""

    def __init__(
        self,
        session: DashboardSession,
        advisor: AiAdvisorPort,
        logger=None,
    ) -> None:
        self._session = session
        self._advisor = advisor
        self._logger = logger or get_app_logger()

    def execute(self) -> ExecutiveBriefing:
        """Return the executive summary and strategic actions.

        Returns:
            ExecutiveBriefing: Advisor output for the live metrics.
        """
        metrics = self._session.metrics
        snapshot = self._session.snapshot
        summary = self._advisor.executive_summary(
            metrics.balance,
            metrics.monthly_burn,
            metrics.runway,
            snapshot.alerts,
        )
        actions = self._advisor.strategic_actions(
            snapshot.transactions[:STRATEGY_CONTEXT_SIZE]
        )
        self._logger.info(
            f"Executive briefing built with {len(actions)} actions"
        )
        return ExecutiveBriefing(summary=summary, actions=actions)


__all__ = ["GetExecutiveBriefingUseCase", "ExecutiveBriefing"]

"""Use case simulating a what-if scenario on the cashflow."""

from dataclasses import dataclass

from orchestra.application.ports.ai_advisor import AiAdvisorPort
from orchestra.application.use_cases.constants import FORECAST_HISTORY_POINTS
from orchestra.application.use_cases.dashboard_session import DashboardSession
from orchestra.domain.models import CashflowPoint
from orchestra.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class ScenarioOutcome:
    """Series to chart for a scenario, with the advisor's explanation.

    Attributes:
        explanation: Advisor commentary on the scenario impact.
        series: Historical points followed by the scenario projection, or
            the unchanged session series when no projection came back.
        projected_points: Number of forecast points appended.
    """

    explanation: str
    series: tuple[CashflowPoint, ...]
    projected_points: int = 0


class SimulateScenarioUseCase:
    """Project the next periods under a free-text scenario.

    The session cashflow is read but never replaced; the outcome is meant
    for a separate scenario chart.
    """

    def __init__(
        self,
        session: DashboardSession,
        advisor: AiAdvisorPort,
        logger=None,
    ) -> None:
        self._session = session
        self._advisor = advisor
        self._logger = logger or get_app_logger()

    def execute(self, scenario: str) -> ScenarioOutcome | None:
        """Run the scenario.

        Args:
            scenario: Free-text description, e.g. "Revenue drops by 20%".

        Returns:
            ScenarioOutcome | None: None when the scenario is blank.
        """
        if not scenario.strip():
            return None
        series = self._session.snapshot.cashflow
        historical = tuple(point for point in series if not point.projected)
        recent = historical[-FORECAST_HISTORY_POINTS:]

        forecast = self._advisor.forecast_scenario(recent, scenario.strip())
        projected = tuple(point for point in forecast.data if point.projected)
        self._logger.info(
            f"Scenario simulated with {len(projected)} projected points"
        )
        if not projected:
            return ScenarioOutcome(
                explanation=forecast.explanation,
                series=series,
            )
        return ScenarioOutcome(
            explanation=forecast.explanation,
            series=(*historical, *projected),
            projected_points=len(projected),
        )


__all__ = ["SimulateScenarioUseCase", "ScenarioOutcome"]

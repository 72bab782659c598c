"""Use case answering chat questions about the session's finances."""

from orchestra.application.ports.ai_advisor import AiAdvisorPort
from orchestra.application.use_cases.constants import ASSISTANT_CONTEXT_SIZE
from orchestra.application.use_cases.dashboard_session import DashboardSession
from orchestra.domain.models import AssistantContext


class AskAssistantUseCase:
    """Build the assistant context and forward the question."""

    def __init__(
        self,
        session: DashboardSession,
        advisor: AiAdvisorPort,
    ) -> None:
        self._session = session
        self._advisor = advisor

    def build_context(self) -> AssistantContext:
        metrics = self._session.metrics
        return AssistantContext(
            balance=metrics.balance,
            monthly_burn=metrics.monthly_burn,
            runway=metrics.runway,
            recent_transactions=self._session.snapshot.transactions[
                :ASSISTANT_CONTEXT_SIZE
            ],
        )

    def execute(self, message: str) -> str | None:
        """Return the assistant reply, or None for a blank message."""
        if not message.strip():
            return None
        return self._advisor.chat(message.strip(), self.build_context())


__all__ = ["AskAssistantUseCase"]

"""Use case running AI categorization over the latest transactions."""

from orchestra.application.ports.ai_advisor import AiAdvisorPort
from orchestra.application.use_cases.constants import ANALYSIS_BATCH_SIZE
from orchestra.application.use_cases.dashboard_session import DashboardSession
from orchestra.infrastructure.logging.logger import get_app_logger


class CategorizeTransactionsUseCase:
    """Categorize and risk-score the most recent transactions."""

    def __init__(
        self,
        session: DashboardSession,
        advisor: AiAdvisorPort,
        logger=None,
        batch_size: int = ANALYSIS_BATCH_SIZE,
    ) -> None:
        """Initialize the use case.

        Args:
            session: Session whose ledger is analysed and updated.
            advisor: AI advisor producing the analysis.
            logger: Optional logger compatible with logging.Logger-like API.
            batch_size: Number of most recent transactions to send.
        """
        self._session = session
        self._advisor = advisor
        self._logger = logger or get_app_logger()
        self._batch_size = batch_size

    def execute(self) -> int:
        """Analyse the batch and merge the results into the ledger.

        Returns:
            int: Number of transactions updated.
        """
        batch = self._session.snapshot.transactions[: self._batch_size]
        if not batch:
            return 0
        results = self._advisor.analyze_transactions(batch)
        updated = self._session.snapshot.apply_categorization(results)
        self._logger.info(
            f"Categorized {updated} of {len(batch)} transactions"
        )
        return updated


__all__ = ["CategorizeTransactionsUseCase"]

"""Use cases importing data from integrations and uploaded files."""

from orchestra.application.ports.integrations import IntegrationFeedPort
from orchestra.application.use_cases.dashboard_session import DashboardSession
from orchestra.domain.models import ImportResult
from orchestra.infrastructure.logging.logger import get_app_logger


class SyncIntegrationUseCase:
    """Sync one named integration and import what it returns."""

    def __init__(
        self,
        session: DashboardSession,
        feed: IntegrationFeedPort,
        logger=None,
    ) -> None:
        self._session = session
        self._feed = feed
        self._logger = logger or get_app_logger()

    def execute(self, integration_name: str) -> ImportResult | None:
        """Run the sync.

        Args:
            integration_name: Name of the integration to sync.

        Returns:
            ImportResult | None: None when the integration is unknown.
        """
        snapshot = self._session.snapshot
        if not snapshot.mark_integration_syncing(integration_name):
            self._logger.warning(
                f"Unknown integration requested: {integration_name}"
            )
            return None
        batch = self._feed.sync(integration_name)
        snapshot.mark_integration_synced(integration_name)
        self._logger.info(f"Integration synced: {integration_name}")
        return self._session.import_transactions(batch)


class UploadTransactionsUseCase:
    """Import transactions from an uploaded statement."""

    def __init__(
        self,
        session: DashboardSession,
        feed: IntegrationFeedPort,
    ) -> None:
        self._session = session
        self._feed = feed

    def execute(self, filename: str | None = None) -> ImportResult:
        return self._session.import_transactions(self._feed.upload(filename))


__all__ = ["SyncIntegrationUseCase", "UploadTransactionsUseCase"]

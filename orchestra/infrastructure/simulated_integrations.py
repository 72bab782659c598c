"""Simulated integration feed.

No bank, ERP or payment processor is contacted. Each sync or upload waits
for a configurable delay and returns the same synthetic batch: a new
retainer payment and an infrastructure cost spike flagged as an anomaly.
"""

from collections.abc import Callable
from datetime import date
from decimal import Decimal
import itertools
import time

from orchestra.domain.models import (
    Transaction,
    TransactionStatus,
    TransactionType,
)
from orchestra.infrastructure.logging.logger import get_app_logger

DEFAULT_UPLOAD_DELAY_SECONDS = 1.5


class SimulatedIntegrationFeed:
    """IntegrationFeedPort implementation returning synthetic batches."""

    def __init__(
        self,
        sync_delay_seconds: float = 2.0,
        upload_delay_seconds: float = DEFAULT_UPLOAD_DELAY_SECONDS,
        sleep: Callable[[float], None] = time.sleep,
        today: Callable[[], date] = date.today,
        logger=None,
    ) -> None:
        """Initialize the feed.

        Args:
            sync_delay_seconds: Simulated latency of a sync.
            upload_delay_seconds: Simulated processing time of an upload.
            sleep: Sleep function, replaceable in tests.
            today: Date provider for the generated entries.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._sync_delay = sync_delay_seconds
        self._upload_delay = upload_delay_seconds
        self._sleep = sleep
        self._today = today
        self._logger = logger or get_app_logger()
        self._batch_sequence = itertools.count(1)

    def sync(self, integration_name: str) -> list[Transaction]:
        self._logger.info(f"Simulating sync for {integration_name}")
        self._sleep(self._sync_delay)
        return self._synthetic_batch()

    def upload(self, filename: str | None = None) -> list[Transaction]:
        self._logger.info(f"Simulating upload of {filename or 'statement'}")
        self._sleep(self._upload_delay)
        return self._synthetic_batch()

    def _synthetic_batch(self) -> list[Transaction]:
        batch_no = next(self._batch_sequence)
        stamp = f"{time.time_ns()}_{batch_no}"
        day = self._today().isoformat()
        return [
            Transaction(
                id=f"new_{stamp}_1",
                date=day,
                description="New Client Retainer",
                amount=Decimal("8500"),
                type=TransactionType.INCOME,
                category="Revenue",
                status=TransactionStatus.COMPLETED,
            ),
            Transaction(
                id=f"new_{stamp}_2",
                date=day,
                description="Server Costs Spike",
                amount=Decimal("-3200"),
                type=TransactionType.EXPENSE,
                category="Infrastructure",
                status=TransactionStatus.COMPLETED,
                risk_score=65,
                is_anomaly=True,
            ),
        ]


__all__ = ["SimulatedIntegrationFeed"]

"""Port for external data feeds (bank, ERP, payments, file uploads)."""

from typing import Protocol

from orchestra.domain.models import Transaction


class IntegrationFeedPort(Protocol):
    """Port returning new transactions from connected sources."""

    def sync(self, integration_name: str) -> list[Transaction]:
        """Pull new transactions for a named integration."""

    def upload(self, filename: str | None = None) -> list[Transaction]:
        """Process an uploaded statement and return its transactions."""


__all__ = ["IntegrationFeedPort"]

"""Composition root for wiring infrastructure adapters."""

from orchestra.application.ports.ai_advisor import AiAdvisorPort
from orchestra.application.ports.integrations import IntegrationFeedPort
from orchestra.application.use_cases.dashboard_session import DashboardSession
from orchestra.domain.models import FinancialSnapshot
from orchestra.domain.services import generate_mock_cashflow
from orchestra.infrastructure.fallback_advisor import FallbackAiAdvisor
from orchestra.infrastructure.gemini_advisor import GeminiAiAdvisor
from orchestra.infrastructure.logging.logger import get_app_logger
from orchestra.infrastructure.seed_data import (
    seed_alerts,
    seed_integrations,
    seed_transactions,
)
from orchestra.infrastructure.settings import AdvisorSettings
from orchestra.infrastructure.simulated_integrations import (
    SimulatedIntegrationFeed,
)
from orchestra.infrastructure.single_flight_advisor import (
    SingleFlightAiAdvisor,
)


def build_ai_advisor(
    settings: AdvisorSettings | None = None,
) -> AiAdvisorPort:
    """Return the advisor selected by configuration.

    The choice between the live Gemini advisor and the offline fallback is
    made here, once; both are wrapped in the single-flight guard.
    """
    resolved = settings or AdvisorSettings.from_env()
    logger = get_app_logger()
    if resolved.has_credentials:
        logger.info(f"Using Gemini advisor with model {resolved.model}")
        inner: AiAdvisorPort = GeminiAiAdvisor(
            resolved.api_key,
            model_name=resolved.model,
            logger=logger,
        )
    else:
        logger.warning("No Gemini API key configured; using demo advisor")
        inner = FallbackAiAdvisor()
    return SingleFlightAiAdvisor(inner, logger=logger)


def build_integration_feed(
    settings: AdvisorSettings | None = None,
) -> IntegrationFeedPort:
    """Return the simulated integration feed."""
    resolved = settings or AdvisorSettings.from_env()
    return SimulatedIntegrationFeed(
        sync_delay_seconds=resolved.sync_delay_seconds,
        logger=get_app_logger(),
    )


def build_snapshot() -> FinancialSnapshot:
    """Return a snapshot loaded with the seed data and crisis cashflow."""
    return FinancialSnapshot(
        transactions=seed_transactions(),
        cashflow=generate_mock_cashflow(True),
        alerts=seed_alerts(),
        integrations=seed_integrations(),
    )


def build_dashboard_session(
    settings: AdvisorSettings | None = None,
    demo_mode: bool | None = None,
) -> DashboardSession:
    """Return a fresh session over seed data.

    Args:
        settings: Optional settings; read from the environment otherwise.
        demo_mode: Optional override of ``settings.demo_mode``.
    """
    resolved = settings or AdvisorSettings.from_env()
    return DashboardSession(
        build_snapshot(),
        demo_mode=resolved.demo_mode if demo_mode is None else demo_mode,
        logger=get_app_logger(),
    )


__all__ = [
    "build_ai_advisor",
    "build_integration_feed",
    "build_snapshot",
    "build_dashboard_session",
]

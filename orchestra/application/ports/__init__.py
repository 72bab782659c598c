"""Application ports package."""

from .ai_advisor import AiAdvisorPort
from .integrations import IntegrationFeedPort

__all__ = ["AiAdvisorPort", "IntegrationFeedPort"]

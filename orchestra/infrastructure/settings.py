"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from typing import Optional

from orchestra.infrastructure.logging.logger import get_app_logger

API_KEY_VARIABLES = ("GEMINI_API_KEY", "GOOGLE_API_KEY", "API_KEY")
DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_SYNC_DELAY_SECONDS = 2.0
_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class AdvisorSettings:
    """Settings for the AI advisor and the simulated integrations.

    Attributes:
        api_key: Gemini credential; None selects the offline fallback.
        model: Gemini model name.
        demo_mode: Start sessions inside the scripted demo tour.
        sync_delay_seconds: Simulated latency of integration syncs.
    """

    api_key: Optional[str] = None
    model: str = DEFAULT_MODEL
    demo_mode: bool = False
    sync_delay_seconds: float = DEFAULT_SYNC_DELAY_SECONDS

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_key)

    @classmethod
    def from_env(cls) -> "AdvisorSettings":
        """Build settings from environment variables.

        Returns:
            AdvisorSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        model = os.getenv("GEMINI_MODEL", DEFAULT_MODEL).strip()
        demo_flag = os.getenv("ORCHESTRA_DEMO_MODE", "").strip().lower()
        return cls(
            api_key=cls._read_api_key(),
            model=model or DEFAULT_MODEL,
            demo_mode=demo_flag in _TRUTHY,
            sync_delay_seconds=cls._read_delay(
                os.getenv("ORCHESTRA_SYNC_DELAY_SECONDS"),
                logger=logger,
            ),
        )

    @staticmethod
    def _read_api_key() -> Optional[str]:
        """Return the first non-blank credential variable, if any."""
        for name in API_KEY_VARIABLES:
            value = (os.getenv(name) or "").strip()
            if value:
                return value
        return None

    @staticmethod
    def _read_delay(raw_value: Optional[str], logger) -> float:
        """Parse the sync delay, falling back to the default.

        Args:
            raw_value: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            float: Non-negative delay in seconds.
        """
        if raw_value is None or not raw_value.strip():
            return DEFAULT_SYNC_DELAY_SECONDS
        try:
            delay = float(raw_value)
        except ValueError:
            logger.warning(
                f"Invalid ORCHESTRA_SYNC_DELAY_SECONDS={raw_value!r}; "
                f"using {DEFAULT_SYNC_DELAY_SECONDS}"
            )
            return DEFAULT_SYNC_DELAY_SECONDS
        if delay < 0:
            logger.warning(
                f"Negative ORCHESTRA_SYNC_DELAY_SECONDS={raw_value!r}; "
                "using 0"
            )
            return 0.0
        return delay


__all__ = ["AdvisorSettings"]

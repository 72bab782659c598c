"""Domain policies package."""

from .burn_rate import (
    BaselineBurnRatePolicy,
    BurnRatePolicy,
    NarrativeBurnRatePolicy,
    has_open_critical_alert,
)

__all__ = [
    "BaselineBurnRatePolicy",
    "BurnRatePolicy",
    "NarrativeBurnRatePolicy",
    "has_open_critical_alert",
]

"""Domain services package."""

from .cashflow_generator import day_label, generate_mock_cashflow
from .metrics import compute_metrics, compute_runway
from .narrative import DemoStep, NarrativeEvent, next_step

__all__ = [
    "day_label",
    "generate_mock_cashflow",
    "compute_metrics",
    "compute_runway",
    "DemoStep",
    "NarrativeEvent",
    "next_step",
]

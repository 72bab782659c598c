"""Shared constants for application use cases."""

ACTION_ITEMS_VIEW = "action_items"
DASHBOARD_VIEWS = ("discover", "predict", ACTION_ITEMS_VIEW, "guard")

ANALYSIS_BATCH_SIZE = 10
STRATEGY_CONTEXT_SIZE = 15
ASSISTANT_CONTEXT_SIZE = 5
FORECAST_HISTORY_POINTS = 3


__all__ = [
    "ACTION_ITEMS_VIEW",
    "DASHBOARD_VIEWS",
    "ANALYSIS_BATCH_SIZE",
    "STRATEGY_CONTEXT_SIZE",
    "ASSISTANT_CONTEXT_SIZE",
    "FORECAST_HISTORY_POINTS",
]

"""Safe replies used when a live advisor call fails or is rejected."""

from collections.abc import Sequence

from orchestra.domain.models import CashflowPoint, ScenarioForecast

SUMMARY_UNAVAILABLE = "Unable to generate AI insights at this moment."
SUMMARY_EMPTY = "Analysis unavailable."
REPORT_UNAVAILABLE = (
    "The investor report could not be generated right now. "
    "Please try again in a moment."
)
CHAT_APOLOGY = "I'm sorry, I encountered an error processing your request."
CHAT_EMPTY = "I'm having trouble accessing the financial data right now."
FORECAST_UNAVAILABLE = (
    "The forecast could not be generated right now; "
    "showing the current projection."
)


def unavailable_forecast(
    history: Sequence[CashflowPoint],
) -> ScenarioForecast:
    """Return the forecast input unchanged with a neutral explanation."""
    return ScenarioForecast(
        explanation=FORECAST_UNAVAILABLE,
        data=list(history),
    )


__all__ = [
    "SUMMARY_UNAVAILABLE",
    "SUMMARY_EMPTY",
    "REPORT_UNAVAILABLE",
    "CHAT_APOLOGY",
    "CHAT_EMPTY",
    "FORECAST_UNAVAILABLE",
    "unavailable_forecast",
]

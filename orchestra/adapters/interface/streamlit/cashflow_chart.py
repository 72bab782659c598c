"""Cashflow chart presentation logic for the Streamlit UI.

Data preparation is pure and testable; ``build_cashflow_chart`` only turns
the prepared rows into an Altair layer (actual balance as a filled area,
projection as a dashed line).
"""

from collections.abc import Sequence

import altair as alt

from orchestra.domain.models import CashflowPoint

ACTUAL_LABEL = "Actual"
FORECAST_LABEL = "Forecast"
ACTUAL_COLOR = "#6c5ce7"
FORECAST_COLOR = "#f4a261"


def prepare_cashflow_rows(
    series: Sequence[CashflowPoint],
) -> list[dict[str, str | float | int]]:
    """Return Altair-ready rows for a cashflow series.

    The last actual point is repeated as the first forecast row so the two
    segments join on the chart.

    Args:
        series: Chronological cashflow series.

    Returns:
        list[dict]: One row per point with ``order``, ``month``,
        ``balance`` and ``kind``.
    """
    rows: list[dict[str, str | float | int]] = []
    last_actual: dict[str, str | float | int] | None = None
    bridged = False
    for order, point in enumerate(series):
        kind = FORECAST_LABEL if point.projected else ACTUAL_LABEL
        row = {
            "order": order,
            "month": point.month,
            "balance": float(point.balance),
            "kind": kind,
        }
        if point.projected and not bridged and last_actual is not None:
            rows.append({**last_actual, "kind": FORECAST_LABEL})
            bridged = True
        if not point.projected:
            last_actual = row
        rows.append(row)
    return rows


def build_cashflow_chart(
    series: Sequence[CashflowPoint],
    height: int = 320,
) -> alt.LayerChart:
    """Build the cashflow balance chart."""
    data = alt.Data(values=prepare_cashflow_rows(series))
    x_axis = alt.X(
        "month:N",
        sort=alt.EncodingSortField(field="order", order="ascending"),
        axis=alt.Axis(title=None, labelAngle=0, labelOverlap=True),
    )
    y_axis = alt.Y(
        "balance:Q",
        axis=alt.Axis(title="Balance ($)", format="~s"),
        scale=alt.Scale(zero=False),
    )
    tooltip = [
        alt.Tooltip("month:N"),
        alt.Tooltip("balance:Q", format=",.0f"),
        alt.Tooltip("kind:N"),
    ]

    actual = alt.Chart(data).transform_filter(
        alt.datum.kind == ACTUAL_LABEL
    ).mark_area(
        line={"color": ACTUAL_COLOR},
        color=ACTUAL_COLOR,
        opacity=0.25,
    ).encode(x=x_axis, y=y_axis, tooltip=tooltip)

    forecast = alt.Chart(data).transform_filter(
        alt.datum.kind == FORECAST_LABEL
    ).mark_line(
        color=FORECAST_COLOR,
        strokeDash=[6, 4],
    ).encode(x=x_axis, y=y_axis, tooltip=tooltip)

    return alt.layer(actual, forecast).properties(height=height)


__all__ = [
    "prepare_cashflow_rows",
    "build_cashflow_chart",
    "ACTUAL_LABEL",
    "FORECAST_LABEL",
]

"""Synthetic daily cashflow used by the demo charts."""

from datetime import date, timedelta
from decimal import Decimal
import math
import random

from orchestra.domain.models.ledger import CashflowPoint
from orchestra.utils.decimal_utils import coerce_decimal

OPENING_BALANCE = 1_240_000.0
PAYROLL_OUTFLOW = 40_000.0
SALES_INFLOW = 25_000.0
NOISE_SCALE = 15_000.0
CRISIS_DAILY_BURN = 4_500
CALM_DAILY_BURN = 2_000


def day_label(day: date) -> str:
    """Return a short label such as ``Oct 24``."""
    return f"{day:%b} {day.day}"


def generate_mock_cashflow(
    crisis: bool = True,
    today: date | None = None,
    rng: random.Random | None = None,
    history_days: int = 90,
    projection_days: int = 14,
) -> list[CashflowPoint]:
    """Generate noisy history followed by a flat-burn projection.

    History runs from ``today - history_days`` to ``today`` inclusive.
    Payroll leaves every 30 days and sales land every 15 days, on top of
    a noise term skewed slightly positive. The projection burns a fixed
    daily amount, higher in crisis mode.

    Args:
        crisis: Use the crisis burn for the projection.
        today: Reference date, defaults to ``date.today()``.
        rng: Random source, injectable for deterministic output.
        history_days: Number of days before ``today`` to generate.
        projection_days: Number of projected days after ``today``.

    Returns:
        list[CashflowPoint]: Chronological series.
    """
    today = today or date.today()
    rng = rng or random.Random()
    balance = OPENING_BALANCE
    points: list[CashflowPoint] = []

    for offset in range(history_days, -1, -1):
        volatility = (rng.random() - 0.4) * NOISE_SCALE
        if offset % 30 == 0:
            balance -= PAYROLL_OUTFLOW
        if offset % 15 == 0:
            balance += SALES_INFLOW
        balance += volatility
        points.append(
            CashflowPoint(
                month=day_label(today - timedelta(days=offset)),
                income=_money(max(volatility, 0.0)),
                expenses=_money(abs(min(volatility, 0.0))),
                balance=Decimal(math.floor(balance)),
                projected=False,
            )
        )

    daily_burn = CRISIS_DAILY_BURN if crisis else CALM_DAILY_BURN
    for offset in range(1, projection_days + 1):
        balance -= daily_burn
        points.append(
            CashflowPoint(
                month=day_label(today + timedelta(days=offset)),
                income=Decimal("0"),
                expenses=Decimal(daily_burn),
                balance=Decimal(math.floor(balance)),
                projected=True,
            )
        )
    return points


def _money(value: float) -> Decimal:
    return coerce_decimal(round(value, 2))


__all__ = ["generate_mock_cashflow", "day_label"]

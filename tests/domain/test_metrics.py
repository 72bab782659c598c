"""Tests for derived metrics and burn-rate policies."""

from decimal import Decimal

from orchestra.domain.constants import (
    BASELINE_MONTHLY_BURN,
    CRISIS_MONTHLY_BURN,
    RESOLVED_MONTHLY_BURN,
    RUNWAY_SENTINEL_MONTHS,
)
from orchestra.domain.models import Alert, AlertSeverity, CashflowPoint
from orchestra.domain.policies import (
    BaselineBurnRatePolicy,
    NarrativeBurnRatePolicy,
    has_open_critical_alert,
)
from orchestra.domain.services import compute_metrics, compute_runway


def _point(month: str, balance: str, projected: bool = False) -> CashflowPoint:
    return CashflowPoint(
        month=month,
        income=Decimal("0"),
        expenses=Decimal("0"),
        balance=Decimal(balance),
        projected=projected,
    )


def _alert(severity: AlertSeverity, resolved: bool = False) -> Alert:
    return Alert("a", severity, "msg", "now", resolved)


def test_compute_runway_divides_balance_by_burn() -> None:
    """1,240,500 over 128,400 should give roughly 9.66 months."""
    runway = compute_runway(Decimal("1240500"), Decimal("128400"))

    assert round(runway, 2) == Decimal("9.66")


def test_compute_runway_returns_sentinel_for_non_positive_burn() -> None:
    assert compute_runway(Decimal("1000"), Decimal("0")) == (
        RUNWAY_SENTINEL_MONTHS
    )
    assert compute_runway(Decimal("1000"), Decimal("-5")) == (
        RUNWAY_SENTINEL_MONTHS
    )


def test_compute_metrics_uses_last_point_balance() -> None:
    """Balance comes from the last point, projected or not."""
    series = [_point("Oct 1", "1000000"), _point("Oct 2", "850000", True)]

    metrics = compute_metrics([], series, [], BaselineBurnRatePolicy())

    assert metrics.balance == Decimal("850000")
    assert metrics.monthly_burn == BASELINE_MONTHLY_BURN
    assert metrics.runway == Decimal("850000") / BASELINE_MONTHLY_BURN


def test_compute_metrics_on_empty_series_has_zero_balance() -> None:
    metrics = compute_metrics([], [], [], BaselineBurnRatePolicy())

    assert metrics.balance == Decimal("0")
    assert metrics.runway == Decimal("0")


def test_compute_metrics_with_zero_burn_returns_sentinel() -> None:
    metrics = compute_metrics(
        [],
        [_point("Oct 1", "500")],
        [],
        BaselineBurnRatePolicy(Decimal("0")),
    )

    assert metrics.runway == RUNWAY_SENTINEL_MONTHS


def test_baseline_policy_ignores_alerts() -> None:
    policy = BaselineBurnRatePolicy()

    assert policy.monthly_burn([], [_alert(AlertSeverity.HIGH)]) == (
        BASELINE_MONTHLY_BURN
    )


def test_narrative_policy_switches_on_open_high_alert() -> None:
    """Crisis burn while a high alert is open, resolved burn afterwards."""
    policy = NarrativeBurnRatePolicy()

    assert policy.monthly_burn([], [_alert(AlertSeverity.HIGH)]) == (
        CRISIS_MONTHLY_BURN
    )
    assert policy.monthly_burn(
        [], [_alert(AlertSeverity.HIGH, resolved=True)]
    ) == RESOLVED_MONTHLY_BURN
    assert policy.monthly_burn([], [_alert(AlertSeverity.MEDIUM)]) == (
        RESOLVED_MONTHLY_BURN
    )


def test_has_open_critical_alert() -> None:
    assert has_open_critical_alert([_alert(AlertSeverity.HIGH)])
    assert not has_open_critical_alert([])
    assert not has_open_critical_alert([_alert(AlertSeverity.LOW)])

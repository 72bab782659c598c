"""Domain constants for the dashboard and its scripted demo."""

from decimal import Decimal

UNCATEGORIZED = "Uncategorized"

BASELINE_MONTHLY_BURN = Decimal("85000")
CRISIS_MONTHLY_BURN = Decimal("125000")
RESOLVED_MONTHLY_BURN = Decimal("78000")

# Reported when burn is zero or negative ("effectively infinite").
RUNWAY_SENTINEL_MONTHS = Decimal("99")

DEMO_ALERT_ID = "a1"
DEMO_TRANSACTION_ID = "t4"
CORRECTED_DESCRIPTION = "Corrected: Vendor Refund"

JUST_NOW = "Just now"


__all__ = [
    "UNCATEGORIZED",
    "BASELINE_MONTHLY_BURN",
    "CRISIS_MONTHLY_BURN",
    "RESOLVED_MONTHLY_BURN",
    "RUNWAY_SENTINEL_MONTHS",
    "DEMO_ALERT_ID",
    "DEMO_TRANSACTION_ID",
    "CORRECTED_DESCRIPTION",
    "JUST_NOW",
]

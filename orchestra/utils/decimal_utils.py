"""Helpers for Decimal money values."""

from decimal import Decimal, InvalidOperation


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Floats coming from JSON payloads are routed through ``str`` so that
    ``-3200.0`` becomes ``Decimal("-3200.0")`` rather than its binary
    expansion.

    Args:
        value: Raw numeric value from seed data, generators or AI payloads.

    Returns:
        Decimal: Normalized numeric value (zero for None or garbage).
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except InvalidOperation:
        return Decimal("0")


def format_money(value: Decimal, decimals: int = 0) -> str:
    """Format a money amount with thousands separators and a dollar sign."""
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.{decimals}f}"


def format_plain_amount(value: Decimal) -> str:
    """Format the absolute amount without separators (e.g. ``3200``)."""
    normalized = abs(value)
    if normalized == normalized.to_integral_value():
        return str(normalized.quantize(Decimal("1")))
    return str(normalized)


__all__ = ["coerce_decimal", "format_money", "format_plain_amount"]

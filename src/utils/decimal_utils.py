"""Helpers for Decimal normalization."""

from decimal import ROUND_HALF_UP, Decimal


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_half_up(value) -> int:
    """Round to the nearest integer, halves away from zero.

    Args:
        value: Numeric value to round.

    Returns:
        int: Rounded value.
    """
    return int(coerce_decimal(value).quantize(Decimal("1"), ROUND_HALF_UP))


__all__ = ["coerce_decimal", "round_half_up"]

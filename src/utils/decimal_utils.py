"""Helpers for Decimal normalization and rounding."""

from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")
ZERO = Decimal("0")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from a record loader or caller.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_cents(value: Decimal) -> Decimal:
    """Round a monetary amount to two decimal places (half up)."""
    if not value.is_finite():
        return value
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


__all__ = ["CENT", "ZERO", "coerce_decimal", "round_cents"]

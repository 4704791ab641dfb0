"""Decimal helpers shared by the points and regional-bonus rules."""

from decimal import ROUND_HALF_UP, Decimal

ONE = Decimal("1")
CENT = Decimal("0.01")


def as_decimal(value: float | int | Decimal) -> Decimal:
    """Convert via str() so 1.3 stays 1.3 rather than its binary expansion."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_half_up(value: Decimal) -> int:
    """
    Round to the nearest integer, halves away from zero.

    Examples:
        >>> round_half_up(Decimal("12.5"))
        13
        >>> round_half_up(Decimal("12.49"))
        12
    """
    return int(value.quantize(ONE, rounding=ROUND_HALF_UP))


def to_display_multiplier(value: Decimal) -> float:
    """Multiplier rounded to two decimals for display/audit."""
    return float(value.quantize(CENT, rounding=ROUND_HALF_UP))

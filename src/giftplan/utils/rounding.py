"""Half-up rounding on the exact binary value of a float."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round ``value`` to ``ndigits`` decimals, ties away from zero."""
    quantum = Decimal(1).scaleb(-ndigits)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def round_unit(value: float) -> int:
    """Round to the nearest whole currency unit."""
    return int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))

"""Cent rounding shared by both engines.

Every monetary step is rounded before it feeds the next one, so schedules
depend on the exact cadence of round2 calls, not just on the formulas.
"""

from decimal import Decimal, ROUND_HALF_UP

TWO_PLACES = Decimal("0.01")


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """Floats go through their shortest repr, so 1.005 stays 1.005."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round2(value: Decimal | int | float | str) -> Decimal:
    """Round half-up (ties away from zero) to whole cents.

    1.005 rounds to 1.01 rather than to the 1.00 its binary float value
    would give.
    """
    return to_decimal(value).quantize(TWO_PLACES, ROUND_HALF_UP)

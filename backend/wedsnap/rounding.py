"""Whole-rupee rounding shared by the models and the engine."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

_RUPEE = Decimal(1)


def round_half_up(value: int | float | Decimal) -> int:
    """Round ``value`` to a whole rupee, halves away from zero.

    Floats go through ``str`` so ``8000.5`` rounds as written rather than
    as its binary approximation.
    """
    amount = value if isinstance(value, Decimal) else Decimal(str(value))
    return int(amount.quantize(_RUPEE, rounding=ROUND_HALF_UP))

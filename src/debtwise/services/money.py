"""Money rounding helpers shared by the payoff services."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

CENT = Decimal("0.01")
TENTH = Decimal("0.1")
HALF_CENT = 0.005
PAID_OFF_EPSILON = 0.01


def round_half_up(value: float, quantum: Decimal = CENT) -> float:
    """Round ``value`` to ``quantum``, half away from zero, at any magnitude."""

    # str() keeps the shortest repr so 1.005 rounds up like the literal reads
    amount = Decimal(str(value))
    with localcontext() as ctx:
        # Room for every integer digit plus the quantum's decimals
        ctx.prec = max(ctx.prec, amount.adjusted() - quantum.as_tuple().exponent + 2)
        return float(amount.quantize(quantum, rounding=ROUND_HALF_UP))


def round_money(value: float) -> float:
    """Round to cents, half away from zero."""

    return round_half_up(value, CENT)


def clamp_to_zero(value: float) -> float:
    """Return ``value`` rounded to cents and never below zero.

    Anything smaller in magnitude than half a cent, or not finite, is ``0.0``.
    """

    value = float(value)
    if not math.isfinite(value) or abs(value) < HALF_CENT:
        return 0.0
    return max(0.0, round_money(value))


def money_add(a: float, b: float) -> float:
    """Full-precision sum that snaps sub-half-cent results to zero."""

    total = a + b
    return 0.0 if abs(total) < HALF_CENT else total


def money_sub(a: float, b: float) -> float:
    """Full-precision difference that never goes negative."""

    diff = a - b
    return 0.0 if diff < HALF_CENT else diff


def is_paid_off(balance: float) -> bool:
    """A balance of one cent or less counts as paid off."""

    return balance <= PAID_OFF_EPSILON

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from vehicle_costs.domain.errors import InternalError

ZERO = Decimal("0")
ONE = Decimal("1")
CENT = Decimal("0.01")
UNIT = Decimal("1")
MONTHS_PER_YEAR = 12


def to_cents(amount: Decimal) -> Decimal:
    """Round an amount to 2 decimal places using ROUND_HALF_UP."""
    return ensure_finite(amount).quantize(CENT, rounding=ROUND_HALF_UP)


def to_units(amount: Decimal) -> Decimal:
    """Round an amount to whole currency units using ROUND_HALF_UP."""
    return ensure_finite(amount).quantize(UNIT, rounding=ROUND_HALF_UP)


def ensure_finite(amount: Decimal) -> Decimal:
    if not amount.is_finite():
        raise InternalError("Computed amount is not finite", amount=str(amount))
    return amount


def percent(value: Decimal) -> Decimal:
    """Convert a percentage (7.5) to a fraction (0.075)."""
    return value / Decimal("100")

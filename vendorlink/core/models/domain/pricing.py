"""Money arithmetic.

All amounts are ``Decimal`` and rounded half-up to two decimal places, which
is what a ``Numeric(10, 2)`` column stores.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Tuple

CENTS = Decimal("0.01")


def to_money(value: Decimal | int | str) -> Decimal:
    """Round a value to cents."""
    return Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


def line_total(price_per_unit: Decimal, quantity: int) -> Decimal:
    """Total amount of one order line."""
    return to_money(Decimal(price_per_unit) * quantity)


def group_savings(regular_price: Decimal, group_price: Decimal, quantity: int) -> Decimal:
    """Amount saved by buying ``quantity`` units at the group price instead of the regular one."""
    return to_money((Decimal(regular_price) - Decimal(group_price)) * quantity)


def total_savings(shares: Iterable[Tuple[Decimal, Decimal, int]]) -> Decimal:
    """Sum ``group_savings`` over ``(regular_price, group_price, quantity)`` tuples."""
    return to_money(sum((group_savings(r, g, q) for r, g, q in shares), Decimal("0")))


def average_rating(ratings: Iterable[int]) -> float:
    """Average of review ratings rounded to one decimal place, 0 when there are none."""
    values = list(ratings)
    if not values:
        return 0.0
    mean = Decimal(sum(values)) / Decimal(len(values))
    return float(mean.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))

"""Display-only price estimate for a dex lock offer.

Float arithmetic throughout. Results are for display and must not be
used for settlement.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

from .args import Mode
from .protocol import CAPACITY_DIVISOR, MIN_TOTAL_PRICE, SHANNONS_PER_UNIT


@dataclass(frozen=True)
class PriceQuote:
    total: float
    capacity: float
    formula: str
    below_minimum: bool

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "capacity": self.capacity,
            "formula": self.formula,
            "below_minimum": self.below_minimum,
        }


def _pow10(exp: int) -> float:
    # float ** raises on overflow instead of returning inf
    try:
        return 10.0 ** float(exp)
    except OverflowError:
        return math.inf


def compute_total_price(mode: int, amount: int, price_base: int, price_pow: int) -> float:
    """Total price in smallest units.

    Mode 0 prices ``amount`` (8-decimal units) at ``price_base * 10^price_pow``
    per whole token; modes 1 and 2 price the cell as a whole.
    """
    if mode == Mode.UDT:
        return float(amount) * _pow10(price_pow) / float(SHANNONS_PER_UNIT) * float(price_base)
    return float(price_base) * _pow10(price_pow)


def capacity_units(total: float) -> float:
    return total / CAPACITY_DIVISOR


def quote_price(mode: int, amount: int, price_base: int, price_pow: int) -> PriceQuote:
    total = compute_total_price(mode, amount, price_base, price_pow)
    if mode == Mode.UDT:
        formula = f"{amount} * {price_base} * 10^{price_pow} / 10^8 = {total} Shannons"
    else:
        formula = f"{price_base} * 10^{price_pow} = {total} Shannons"
    return PriceQuote(
        total=total,
        capacity=capacity_units(total),
        formula=formula,
        below_minimum=total < MIN_TOTAL_PRICE,
    )

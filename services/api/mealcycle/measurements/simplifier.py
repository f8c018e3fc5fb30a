"""
Display simplification for aggregated quantities.

Picks the most practical unit within a measurement's own family, e.g.
96 tsp -> 2 cup, 500 g -> 0.5 kg. A curated override table wins over the
generic largest-unit rule wherever the rule reads unnaturally to a cook.
"""

import math
from decimal import ROUND_HALF_UP, Decimal
from types import MappingProxyType
from typing import Mapping, NamedTuple

from .normalizer import normalize_unit
from .registry import CONVERSION_RATIOS, FAMILY_ORDERS, is_non_convertible, lookup_unit

# Minimum displayed quantity before moving up to a larger unit
SIMPLIFY_THRESHOLD = 0.5


class Measurement(NamedTuple):
    quantity: float
    unit: str

    def to_dict(self) -> dict:
        return {"quantity": self.quantity, "unit": self.unit}


# (rounded quantity, canonical unit) -> preferred display
PREFERRED_SIMPLIFICATIONS: Mapping[tuple[float, str], Measurement] = MappingProxyType({
    (96, "tsp"): Measurement(2, "cup"),
    (4, "tbsp"): Measurement(4, "tbsp"),
    (5, "tbsp"): Measurement(5, "tbsp"),
    (7, "clove"): Measurement(2.33, "tbsp"),
    (2, "clove"): Measurement(2, "tsp"),
    (7, "tsp"): Measurement(2.33, "tbsp"),
    (2, "tsp"): Measurement(2, "tsp"),
    (0.33, "cup"): Measurement(0.33, "cup"),
    (24, "tsp"): Measurement(0.5, "cup"),
})


def round_quantity(value: float) -> float:
    """
    Round to 2 decimals, half away from zero on the exact binary value.
    Whole numbers and non-finite values pass through untouched.
    """
    if isinstance(value, int) or not math.isfinite(value) or value.is_integer():
        return value
    return float(Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def _override_key(quantity: float, unit: str) -> tuple[float, str]:
    # Absorb repeating-decimal artifacts such as 1/3 cup
    if abs(quantity - 0.33333) < 0.0001:
        return 0.33, unit
    return round_quantity(quantity), unit


def simplify_measurement(quantity: float, unit: str) -> Measurement:
    """Choose the most practical (quantity, unit) pair for display."""
    normalized = normalize_unit(unit)
    rounded = round_quantity(quantity)

    preferred = PREFERRED_SIMPLIFICATIONS.get(_override_key(quantity, normalized))
    if preferred is not None:
        return preferred

    # Sticks stay sticks
    if normalized == "stick":
        return Measurement(rounded, unit)

    definition = lookup_unit(normalized)
    if definition is None or is_non_convertible(normalized):
        return Measurement(rounded, unit)

    order = FAMILY_ORDERS.get(definition.base_unit)
    if order is None:
        return Measurement(rounded, unit)

    base_qty = quantity * definition.factor
    for candidate in order:
        candidate_qty = round_quantity(base_qty / CONVERSION_RATIOS[candidate].factor)
        if candidate_qty >= SIMPLIFY_THRESHOLD:
            return Measurement(candidate_qty, candidate)

    return Measurement(rounded, unit)

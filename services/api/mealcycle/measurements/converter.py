"""
Quantity conversion between canonical units.

Handles same-family ratios, metric/imperial bridging for volume (ml <-> tsp)
and weight (g <-> oz), and the butter stick <-> teaspoon density link.
Everything else, including count-style and unknown units, has no path and
yields None.
"""

import logging
from typing import Optional

from .normalizer import normalize_unit
from .registry import G_PER_OZ, ML_PER_TSP, TSP_PER_STICK, lookup_unit

logger = logging.getLogger("mealcycle.measurements")

# (metric base, imperial base) -> metric units per imperial base unit
_BASE_BRIDGES = {
    ("ml", "tsp"): ML_PER_TSP,
    ("g", "oz"): G_PER_OZ,
}


def convert_measurement(quantity: float, from_unit: str, to_unit: str) -> Optional[float]:
    """
    Convert quantity from one unit to another.
    Returns None when no conversion path exists.
    """
    if from_unit == to_unit:
        return quantity

    norm_from = normalize_unit(from_unit)
    norm_to = normalize_unit(to_unit)

    # Case/plural-only difference
    if norm_from == norm_to:
        return quantity

    from_def = lookup_unit(norm_from)
    to_def = lookup_unit(norm_to)

    if from_def is None or to_def is None:
        logger.warning(
            f"Cannot convert: unit not defined or not convertible. "
            f"From: {from_unit} ({norm_from}), To: {to_unit} ({norm_to})"
        )
        return None

    base_qty = quantity * from_def.factor

    # Case 1: Same base unit (tsp -> cup, g -> kg)
    if from_def.base_unit == to_def.base_unit:
        return base_qty / to_def.factor

    # Case 2: Metric <-> imperial of the same physical quantity
    pair = (from_def.base_unit, to_def.base_unit)
    if pair in _BASE_BRIDGES:
        return (base_qty / _BASE_BRIDGES[pair]) / to_def.factor
    if pair[::-1] in _BASE_BRIDGES:
        return (base_qty * _BASE_BRIDGES[pair[::-1]]) / to_def.factor

    # Case 3: Butter stick <-> imperial volume
    if norm_from == "stick" and to_def.base_unit == "tsp":
        # quantity is a count of sticks here, not grams
        return (quantity * TSP_PER_STICK) / to_def.factor
    if from_def.base_unit == "tsp" and norm_to == "stick":
        # Target is a stick count; the stick's gram factor does not apply
        return base_qty / TSP_PER_STICK

    logger.warning(
        f"No conversion from {from_unit} ({norm_from}, base: {from_def.base_unit}) "
        f"to {to_unit} ({norm_to}, base: {to_def.base_unit}) without density"
    )
    return None


def can_convert(from_unit: str, to_unit: str) -> bool:
    """Whether quantities in from_unit can be expressed in to_unit."""
    return convert_measurement(1, from_unit, to_unit) is not None

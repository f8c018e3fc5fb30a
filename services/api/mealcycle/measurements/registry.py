"""
Unit registry for the measurement engine.

Static tables only: conversion factors to a per-family base unit, the
bridging factors between base units of the same physical quantity, and the
set of count-style units that never convert.
"""

import math
from types import MappingProxyType
from typing import Literal, Mapping, NamedTuple, Optional

Family = Literal["volume_imperial", "volume_metric", "weight_imperial", "weight_metric"]
Measure = Literal["volume", "weight"]


class UnitDefinition(NamedTuple):
    symbol: str
    base_unit: str
    factor: float  # one `symbol` expressed in `base_unit`


def _define(symbol: str, base_unit: str, factor: float) -> tuple[str, UnitDefinition]:
    return symbol, UnitDefinition(symbol, base_unit, factor)


# --- Data Tables ---

CONVERSION_RATIOS: Mapping[str, UnitDefinition] = MappingProxyType(dict([
    # Volume (metric, base: ml)
    _define("ml", "ml", 1),
    _define("l", "ml", 1000),
    # Volume (imperial, base: tsp)
    _define("tsp", "tsp", 1),
    _define("tbsp", "tsp", 3),
    _define("floz", "tsp", 6),
    _define("cup", "tsp", 48),
    _define("pt", "tsp", 96),
    _define("qt", "tsp", 192),
    _define("gal", "tsp", 768),
    # Weight (metric, base: g)
    _define("g", "g", 1),
    _define("kg", "g", 1000),
    # Weight (imperial, base: oz)
    _define("oz", "oz", 1),
    _define("lb", "oz", 16),
    # Density-linked kitchen units
    _define("stick", "g", 113),  # US stick of butter
    _define("clove", "tsp", 1),  # 1 medium garlic clove, minced
]))

# Base-unit bridges within the same physical quantity
ML_PER_TSP = 4.92892
G_PER_OZ = 28.349523125

# 1 stick = 1/2 cup; only valid for butter
TSP_PER_STICK = 24

NON_CONVERTIBLE_UNITS: frozenset[str] = frozenset({
    "unit", "pinch", "slice", "can", "jar", "bunch", "head", "stalk", "leaf",
    "sprig", "filet", "piece", "each", "to taste", "small", "garnish",
    "slices", "loaf", "optional", "medium",
})

# Lowercase variant -> canonical symbol
UNIT_VARIATIONS: Mapping[str, str] = MappingProxyType({
    "cups": "cup",
    "lbs": "lb", "pounds": "lb", "pound": "lb",
    "g": "g", "grams": "g", "gram": "g",
    "kg": "kg", "kilograms": "kg", "kilogram": "kg",
    "oz": "oz", "ounces": "oz", "ounce": "oz",
    "tsp": "tsp", "teaspoons": "tsp", "teaspoon": "tsp",
    "tbsp": "tbsp", "tablespoons": "tbsp", "tablespoon": "tbsp",
    "ml": "ml", "milliliters": "ml", "milliliter": "ml",
    "l": "l", "liters": "l", "liter": "l",
    "floz": "floz", "fluidounces": "floz", "fluidounce": "floz",
    "pt": "pt", "pints": "pt", "pint": "pt",
    "qt": "qt", "quarts": "qt", "quart": "qt",
    "gal": "gal", "gallons": "gal", "gallon": "gal",
    "tsp.": "tsp", "tbsp.": "tbsp", "tbs": "tbsp",
    "oz.": "oz", "lb.": "lb", "lbs.": "lb",
    "fl oz": "floz", "fl. oz.": "floz", "fluid ounce": "floz", "fluid ounces": "floz",
    "cloves": "clove",
    "pinches": "pinch",
    "sticks": "stick",
})

FAMILIES: Mapping[str, Family] = MappingProxyType({
    "tsp": "volume_imperial",
    "ml": "volume_metric",
    "oz": "weight_imperial",
    "g": "weight_metric",
})

MEASURES: Mapping[str, Measure] = MappingProxyType({
    "tsp": "volume",
    "ml": "volume",
    "oz": "weight",
    "g": "weight",
})

# Simplification candidates per base unit, largest first
FAMILY_ORDERS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "tsp": ("gal", "qt", "pt", "cup", "floz", "tbsp", "tsp"),
    "ml": ("l", "ml"),
    "oz": ("lb", "oz"),
    "g": ("kg", "g"),
})


# --- Lookups ---

def lookup_unit(symbol: str) -> Optional[UnitDefinition]:
    """Return the definition of a canonical unit, or None."""
    return CONVERSION_RATIOS.get(symbol)


def is_non_convertible(symbol: str) -> bool:
    return symbol in NON_CONVERTIBLE_UNITS


def is_known_unit(symbol: str) -> bool:
    """True for registry keys and count-style units."""
    return symbol in CONVERSION_RATIOS or symbol in NON_CONVERTIBLE_UNITS


def family_of(symbol: str) -> Optional[Family]:
    definition = lookup_unit(symbol)
    if definition is None:
        return None
    return FAMILIES.get(definition.base_unit)


def measure_of(base_unit: str) -> Optional[Measure]:
    return MEASURES.get(base_unit)


def _check_tables() -> None:
    for symbol, definition in CONVERSION_RATIOS.items():
        if definition.base_unit not in FAMILIES:
            raise RuntimeError(f"Unit '{symbol}' has no family (base '{definition.base_unit}')")
        if not (definition.factor > 0 and math.isfinite(definition.factor)):
            raise RuntimeError(f"Unit '{symbol}' has invalid factor {definition.factor}")


_check_tables()

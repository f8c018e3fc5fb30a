import math

import pytest

from mealcycle.measurements import Measurement, lookup_unit, normalize_unit, simplify_measurement
from mealcycle.measurements.simplifier import PREFERRED_SIMPLIFICATIONS, round_quantity


def test_generic_heuristic():
    assert simplify_measurement(500, "g") == Measurement(0.5, "kg")
    assert simplify_measurement(250, "g") == Measurement(250, "g")
    assert simplify_measurement(750, "ml") == Measurement(0.75, "l")
    assert simplify_measurement(1500, "ml") == Measurement(1.5, "l")
    assert simplify_measurement(30, "oz") == Measurement(1.88, "lb")
    assert simplify_measurement(12, "oz") == Measurement(0.75, "lb")
    assert simplify_measurement(8, "oz") == Measurement(0.5, "lb")
    assert simplify_measurement(3, "tsp") == Measurement(0.5, "floz")


def test_below_threshold_keeps_original_unit():
    assert simplify_measurement(0.1, "g") == Measurement(0.1, "g")
    assert simplify_measurement(0.25, "Teaspoons") == Measurement(0.25, "Teaspoons")


def test_overrides():
    assert simplify_measurement(96, "tsp") == Measurement(2, "cup")
    assert simplify_measurement(4, "tbsp") == Measurement(4, "tbsp")
    assert simplify_measurement(5, "tbsp") == Measurement(5, "tbsp")
    assert simplify_measurement(7, "cloves") == Measurement(2.33, "tbsp")
    assert simplify_measurement(2, "cloves") == Measurement(2, "tsp")
    assert simplify_measurement(0.33333, "cup") == Measurement(0.33, "cup")
    assert simplify_measurement(24, "tsp") == Measurement(0.5, "cup")


def test_override_beats_heuristic():
    # Largest-fit alone would give 0.5 qt, 1.17 floz and 0.67 tbsp
    assert simplify_measurement(96, "Teaspoons") == Measurement(2, "cup")
    assert simplify_measurement(7, "tsp") == Measurement(2.33, "tbsp")
    assert simplify_measurement(2, "tsp") == Measurement(2, "tsp")


def test_override_key_uses_rounded_quantity():
    assert simplify_measurement(96.0, "tsp") == Measurement(2, "cup")
    assert simplify_measurement(4.001, "tbsp") == Measurement(4, "tbsp")
    assert simplify_measurement(1 / 3, "cup") == Measurement(0.33, "cup")


@pytest.mark.parametrize("key", list(PREFERRED_SIMPLIFICATIONS))
def test_every_override_is_returned_verbatim(key):
    quantity, unit = key
    assert simplify_measurement(quantity, unit) is PREFERRED_SIMPLIFICATIONS[key]


def test_sticks_are_never_simplified():
    assert simplify_measurement(1, "stick") == Measurement(1, "stick")
    assert simplify_measurement(2.5, "Sticks") == Measurement(2.5, "Sticks")
    assert simplify_measurement(0.3333, "stick") == Measurement(0.33, "stick")


def test_non_convertible_and_unknown_units_keep_original_string():
    assert simplify_measurement(1, "pinch") == Measurement(1, "pinch")
    assert simplify_measurement(2, "Cans") == Measurement(2, "Cans")
    assert simplify_measurement(3.456, "Handful") == Measurement(3.46, "Handful")


def test_to_dict():
    assert simplify_measurement(500, "g").to_dict() == {"quantity": 0.5, "unit": "kg"}


def test_round_quantity_matches_display_rounding():
    assert round_quantity(0.125) == 0.13
    assert round_quantity(1.875) == 1.88
    assert round_quantity(2.675) == 2.67  # binary value is just below the half
    assert round_quantity(5) == 5
    assert isinstance(round_quantity(5), int)
    assert math.isnan(round_quantity(float("nan")))
    assert round_quantity(float("inf")) == float("inf")


def _base_amount(quantity, unit):
    definition = lookup_unit(normalize_unit(unit))
    return quantity * definition.factor, definition.factor


@pytest.mark.parametrize("unit", ["tsp", "tbsp", "cup", "floz", "qt", "ml", "l", "g", "kg", "oz", "lb", "clove"])
@pytest.mark.parametrize("quantity", [0.2, 0.75, 1, 3.3, 13, 47, 120, 999.99, 2500])
def test_simplified_amount_is_conserved(quantity, unit):
    if (round_quantity(quantity), unit) in PREFERRED_SIMPLIFICATIONS:
        pytest.skip("override")

    result = simplify_measurement(quantity, unit)

    before, factor_in = _base_amount(quantity, unit)
    after, factor_out = _base_amount(result.quantity, result.unit)
    assert lookup_unit(normalize_unit(result.unit)).base_unit == lookup_unit(unit).base_unit
    assert abs(after - before) <= 0.005 * max(factor_in, factor_out) + 1e-9

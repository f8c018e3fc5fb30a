from .registry import (
    CONVERSION_RATIOS,
    NON_CONVERTIBLE_UNITS,
    UnitDefinition,
    family_of,
    is_non_convertible,
    lookup_unit,
)
from .normalizer import normalize_unit
from .converter import can_convert, convert_measurement
from .simplifier import Measurement, simplify_measurement

__all__ = [
    "CONVERSION_RATIOS",
    "NON_CONVERTIBLE_UNITS",
    "UnitDefinition",
    "family_of",
    "is_non_convertible",
    "lookup_unit",
    "normalize_unit",
    "can_convert",
    "convert_measurement",
    "Measurement",
    "simplify_measurement",
]

"""
Router for unit conversion utilities.
"""

import logging

from fastapi import APIRouter, HTTPException

from ..measurements import (
    CONVERSION_RATIOS,
    NON_CONVERTIBLE_UNITS,
    convert_measurement,
    family_of,
    normalize_unit,
    simplify_measurement,
)
from ..schemas import (
    UnitConvertRequest,
    UnitConvertResponse,
    UnitDefinitionOut,
    UnitNormalizeResponse,
    UnitRegistryResponse,
    UnitSimplifyRequest,
    UnitSimplifyResponse,
)

logger = logging.getLogger("mealcycle.units")

router = APIRouter()


@router.get("/normalize", response_model=UnitNormalizeResponse)
def normalize(unit: str):
    """Canonical registry key for a recipe-authored unit string."""
    canonical = normalize_unit(unit)
    return UnitNormalizeResponse(
        raw=unit,
        unit=canonical,
        convertible=canonical in CONVERSION_RATIOS,
        family=family_of(canonical),
    )


@router.post("/convert", response_model=UnitConvertResponse)
def convert_units(req: UnitConvertRequest):
    """
    Convert a quantity from one unit to another.
    """
    result = convert_measurement(req.qty, req.from_unit, req.to_unit)
    if result is None:
        logger.info(f"Rejected conversion {req.qty} {req.from_unit} -> {req.to_unit}")
        raise HTTPException(
            status_code=400,
            detail=f"No conversion path from '{req.from_unit}' to '{req.to_unit}'",
        )
    return UnitConvertResponse(qty=result, from_unit=req.from_unit, to_unit=req.to_unit)


@router.post("/simplify", response_model=UnitSimplifyResponse)
def simplify_units(req: UnitSimplifyRequest):
    """Render a quantity in its most practical display unit."""
    result = simplify_measurement(req.qty, req.unit)
    return UnitSimplifyResponse(qty=result.quantity, unit=result.unit)


@router.get("/registry", response_model=UnitRegistryResponse)
def get_registry():
    return UnitRegistryResponse(
        units=[UnitDefinitionOut(**d._asdict()) for d in CONVERSION_RATIOS.values()],
        non_convertible=sorted(NON_CONVERTIBLE_UNITS),
    )

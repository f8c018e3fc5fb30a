"""
Pydantic schemas for the measurement and grocery APIs.
"""

from typing import Optional, Literal

from pydantic import BaseModel, Field

# --- Units ---

class UnitNormalizeResponse(BaseModel):
    raw: str
    unit: str
    convertible: bool
    family: Optional[Literal["volume_imperial", "volume_metric", "weight_imperial", "weight_metric"]] = None

class UnitConvertRequest(BaseModel):
    qty: float
    from_unit: str
    to_unit: str

class UnitConvertResponse(BaseModel):
    qty: float
    from_unit: str
    to_unit: str

class UnitSimplifyRequest(BaseModel):
    qty: float
    unit: str

class UnitSimplifyResponse(BaseModel):
    qty: float
    unit: str

class UnitDefinitionOut(BaseModel):
    symbol: str
    base_unit: str
    factor: float

class UnitRegistryResponse(BaseModel):
    units: list[UnitDefinitionOut]
    non_convertible: list[str]

# --- Grocery ---

class IngredientLineIn(BaseModel):
    name: str
    quantity: Optional[float] = None
    unit: Optional[str] = None
    recipe_id: Optional[str] = None

class ShoppingListRequest(BaseModel):
    lines: list[IngredientLineIn]
    # recipe_id -> scale factor (servings ordered / base yield)
    multipliers: dict[str, float] = {}

class ShoppingListItemOut(BaseModel):
    key: str
    name: str
    quantity: Optional[float]
    unit: str
    original_quantity: Optional[float]
    original_unit: str
    recipe_ids: list[str] = []

class ShoppingListResponse(BaseModel):
    items: list[ShoppingListItemOut]

class RecipeScaleRequest(BaseModel):
    lines: list[IngredientLineIn]
    base_yield: float = Field(gt=0)
    target_yield: float = Field(ge=0)

class ScaledIngredientOut(BaseModel):
    name: str
    quantity: Optional[float]
    unit: str

class RecipeScaleResponse(BaseModel):
    factor: float
    items: list[ScaledIngredientOut]

from fastapi import APIRouter

from .. import schemas
from ..services.shopping_list import (
    IngredientLine,
    aggregate_ingredients,
    scale_ingredients,
    yield_multiplier,
)

router = APIRouter()


def _to_lines(lines: list[schemas.IngredientLineIn]) -> list[IngredientLine]:
    return [IngredientLine(line.name, line.quantity, line.unit, line.recipe_id) for line in lines]


@router.post("/aggregate", response_model=schemas.ShoppingListResponse)
def aggregate_shopping_list(request: schemas.ShoppingListRequest):
    """Sum ingredient lines from ordered recipes into a shopping list."""
    items = aggregate_ingredients(_to_lines(request.lines), request.multipliers)
    return schemas.ShoppingListResponse(
        items=[schemas.ShoppingListItemOut(**item.to_dict()) for item in items]
    )


@router.post("/scale", response_model=schemas.RecipeScaleResponse)
def scale_recipe(request: schemas.RecipeScaleRequest):
    """Scale a recipe's ingredient list to a new yield."""
    scaled = scale_ingredients(_to_lines(request.lines), request.base_yield, request.target_yield)
    return schemas.RecipeScaleResponse(
        factor=yield_multiplier(request.base_yield, request.target_yield),
        items=[
            schemas.ScaledIngredientOut(name=s.name, quantity=s.quantity, unit=s.unit)
            for s in scaled
        ],
    )

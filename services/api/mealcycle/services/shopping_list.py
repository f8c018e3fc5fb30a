"""
Shopping list aggregation and recipe scaling.

Sums ingredient lines harvested from recipes and orders into one line per
ingredient and unit family, then renders each total in a display-friendly
unit. Lines whose units cannot be converted into each other are kept as
separate entries rather than summed.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from ..measurements import convert_measurement, normalize_unit, simplify_measurement
from .ingredient_normalize import normalize_ingredient_key

logger = logging.getLogger("mealcycle.grocery")

DEFAULT_UNIT = "unit"


@dataclass(frozen=True)
class IngredientLine:
    name: str
    quantity: Optional[float]
    unit: Optional[str] = None
    recipe_id: Optional[str] = None


@dataclass
class ShoppingListItem:
    key: str
    name: str
    quantity: Optional[float]
    unit: str
    original_quantity: Optional[float]
    original_unit: str
    recipe_ids: list[str] = field(default_factory=list)

    def to_dict(self):
        return {
            "key": self.key,
            "name": self.name,
            "quantity": self.quantity,
            "unit": self.unit,
            "original_quantity": self.original_quantity,
            "original_unit": self.original_unit,
            "recipe_ids": list(self.recipe_ids),
        }


@dataclass(frozen=True)
class ScaledIngredient:
    name: str
    quantity: Optional[float]
    unit: str


def yield_multiplier(base_yield: float, target_yield: float) -> float:
    """Factor to scale a recipe written for base_yield up or down to target_yield."""
    if base_yield <= 0:
        raise ValueError(f"base_yield must be positive, got {base_yield}")
    return target_yield / base_yield


def _add_recipe(item: ShoppingListItem, recipe_id: Optional[str]) -> None:
    if recipe_id is not None and recipe_id not in item.recipe_ids:
        item.recipe_ids.append(recipe_id)


def aggregate_ingredients(
    lines: Iterable[IngredientLine],
    multipliers: Optional[dict[str, float]] = None,
) -> list[ShoppingListItem]:
    """
    Build a shopping list from ingredient lines.

    multipliers maps recipe_id -> scale factor (e.g. servings ordered over
    the recipe's base yield); lines without a recipe or multiplier count once.
    """
    multipliers = multipliers or {}
    groups: dict[str, list[ShoppingListItem]] = {}

    for line in lines:
        key = normalize_ingredient_key(line.name)
        if not key:
            logger.debug(f"Skipping ingredient line without a name: {line!r}")
            continue

        unit = line.unit or DEFAULT_UNIT
        group = groups.setdefault(key, [])

        # Unquantified lines ("salt, to taste") collapse per unit
        if line.quantity is None:
            target = next(
                (b for b in group if b.original_quantity is None
                 and normalize_unit(b.original_unit) == normalize_unit(unit)),
                None,
            )
            if target is None:
                target = ShoppingListItem(key, line.name.strip(), None, unit, None, unit)
                group.append(target)
            _add_recipe(target, line.recipe_id)
            continue

        qty = line.quantity * multipliers.get(line.recipe_id, 1.0)

        merged = False
        for bucket in group:
            if bucket.original_quantity is None:
                continue
            converted = convert_measurement(qty, unit, bucket.original_unit)
            if converted is not None:
                bucket.original_quantity += converted
                _add_recipe(bucket, line.recipe_id)
                merged = True
                break

        if not merged:
            if group:
                logger.info(f"Keeping '{line.name}' in {unit} as a separate shopping line")
            bucket = ShoppingListItem(key, line.name.strip(), None, unit, qty, unit)
            _add_recipe(bucket, line.recipe_id)
            group.append(bucket)

    items = []
    for group in groups.values():
        for item in group:
            if item.original_quantity is not None:
                display = simplify_measurement(item.original_quantity, item.original_unit)
                item.quantity = display.quantity
                item.unit = display.unit
            items.append(item)

    items.sort(key=lambda i: (i.name.lower(), i.unit))
    logger.info(f"Aggregated ingredient lines into {len(items)} shopping list items")
    return items


def scale_ingredients(
    lines: Iterable[IngredientLine],
    base_yield: float,
    target_yield: float,
) -> list[ScaledIngredient]:
    """Scale a recipe's ingredients to a new yield, simplified for display."""
    factor = yield_multiplier(base_yield, target_yield)

    scaled = []
    for line in lines:
        unit = line.unit or DEFAULT_UNIT
        if line.quantity is None:
            scaled.append(ScaledIngredient(line.name, None, unit))
            continue
        display = simplify_measurement(line.quantity * factor, unit)
        scaled.append(ScaledIngredient(line.name, display.quantity, display.unit))
    return scaled

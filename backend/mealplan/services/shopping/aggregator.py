"""
Combine recipe ingredient lines into one shopping-list line per ingredient
and display unit.

Lines are scaled to the planned servings, converted to base units and summed
per bucket (see services.units.keys). Each bucket is resolved once, through the
ingredient override when one applies and the generic metric display otherwise.
A final pass merges lines that resolved to the same ingredient and unit, e.g.
garlic cloves coming from a count bucket and from a teaspoon bucket.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from mealplan.config import settings
from mealplan.logging import get_logger
from mealplan.schemas.shopping import ShoppingListItem
from mealplan.services.units.catalog import MeasurementSystem, normalize_unit
from mealplan.services.units.converter import from_base, round_half_up, to_base
from mealplan.services.units.keys import bucket_key
from mealplan.services.units.overrides import apply_override

logger = get_logger(__name__)


@dataclass
class IngredientLine:
    ingredient_id: str
    name: str
    quantity: float
    unit: str
    category: Optional[str] = None


@dataclass
class PlannedRecipe:
    title: str
    servings: float
    ingredients: List[IngredientLine]
    planned_servings: Optional[float] = None  # None: cook the recipe as written

    @property
    def multiplier(self) -> float:
        if self.planned_servings is None or not self.servings or self.servings <= 0:
            return 1.0
        return self.planned_servings / self.servings


@dataclass
class _Bucket:
    ingredient_id: str
    name: str
    category: Optional[str]
    system: MeasurementSystem
    base_quantity: float = 0.0
    original_units: List[str] = field(default_factory=list)
    recipes: List[str] = field(default_factory=list)


def _add_unique(items: List[str], value: str) -> None:
    if value not in items:
        items.append(value)


def _collect(recipes: Iterable[PlannedRecipe]) -> dict[str, _Bucket]:
    buckets: dict[str, _Bucket] = {}
    for recipe in recipes:
        multiplier = recipe.multiplier
        for line in recipe.ingredients:
            base = to_base(line.quantity * multiplier, line.unit)
            key = bucket_key(line.ingredient_id, line.name, line.unit)
            if base.system == MeasurementSystem.UNKNOWN:
                # Unrecognised units are never summed with each other
                key = f"{key}-{normalize_unit(line.unit)}"
                if settings.warn_on_unknown_units:
                    logger.warning(
                        "aggregate.unknown_unit ingredient=%s unit=%r recipe=%s",
                        line.name,
                        line.unit,
                        recipe.title,
                    )
            bucket = buckets.get(key)
            if bucket is None:
                bucket = _Bucket(
                    ingredient_id=line.ingredient_id,
                    name=line.name,
                    category=line.category,
                    system=base.system,
                )
                buckets[key] = bucket
            bucket.base_quantity += base.quantity
            _add_unique(bucket.original_units, line.unit)
            _add_unique(bucket.recipes, recipe.title)
    return buckets


def _resolve(bucket: _Bucket) -> ShoppingListItem:
    display = apply_override(bucket.name, bucket.base_quantity, bucket.system, bucket.original_units)
    if display is None:
        display = from_base(bucket.base_quantity, bucket.system, bucket.original_units[0])
    return ShoppingListItem(
        ingredient_id=bucket.ingredient_id,
        name=bucket.name,
        category=bucket.category,
        quantity=display.quantity,
        unit=display.unit,
        recipes=list(bucket.recipes),
    )


def _merge(items: Iterable[ShoppingListItem]) -> List[ShoppingListItem]:
    merged: dict[str, ShoppingListItem] = {}
    for item in items:
        key = f"{item.ingredient_id}-{item.unit}"
        existing = merged.get(key)
        if existing is None:
            merged[key] = item
            continue
        existing.quantity = round_half_up(existing.quantity + item.quantity, 2)
        for title in item.recipes:
            _add_unique(existing.recipes, title)
    return list(merged.values())


def aggregate_ingredients(recipes: Iterable[PlannedRecipe]) -> List[ShoppingListItem]:
    recipes = list(recipes)
    logger.info("aggregate.start recipes=%s", len(recipes))
    buckets = _collect(recipes)
    items = _merge(_resolve(bucket) for bucket in buckets.values())
    logger.info("aggregate.end buckets=%s items=%s", len(buckets), len(items))
    return items

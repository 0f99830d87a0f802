"""Measurement-unit normalization and aggregation for shopping lists."""

from mealplan.services.units.catalog import (
    BASE_UNITS,
    UNIT_CATALOG,
    MeasurementSystem,
    UnitEntry,
    base_unit,
    classify,
)
from mealplan.services.units.converter import (
    BaseQuantity,
    DisplayQuantity,
    can_combine,
    from_base,
    preferred_display_unit,
    to_base,
)
from mealplan.services.units.keys import aggregation_key, bucket_key, count_sub_key
from mealplan.services.units.overrides import (
    INGREDIENT_OVERRIDES,
    IngredientOverride,
    apply_override,
    get_override,
)
from mealplan.services.units.validator import UNIT_TYPES, VALID_UNITS, is_valid_unit

__all__ = [
    "BASE_UNITS",
    "UNIT_CATALOG",
    "MeasurementSystem",
    "UnitEntry",
    "base_unit",
    "classify",
    "BaseQuantity",
    "DisplayQuantity",
    "can_combine",
    "from_base",
    "preferred_display_unit",
    "to_base",
    "aggregation_key",
    "bucket_key",
    "count_sub_key",
    "INGREDIENT_OVERRIDES",
    "IngredientOverride",
    "apply_override",
    "get_override",
    "UNIT_TYPES",
    "VALID_UNITS",
    "is_valid_unit",
]

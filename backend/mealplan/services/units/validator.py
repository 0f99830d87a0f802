"""Allow-list of unit spellings accepted when a recipe is written."""

from types import MappingProxyType
from typing import Mapping

from mealplan.services.units.catalog import UNIT_CATALOG, MeasurementSystem, as_system, normalize_unit

UNIT_TYPES: Mapping[MeasurementSystem, tuple[str, ...]] = MappingProxyType({
    MeasurementSystem.WEIGHT: ("g", "kg", "mg", "oz", "lb"),
    MeasurementSystem.VOLUME: (
        "ml", "l", "dl", "cl", "tsp", "tbsp", "fl oz", "cup", "pt", "qt", "gal",
        "wineglass", "coffee cup", "tea cup",
    ),
    MeasurementSystem.COUNT: (
        "piece", "pcs", "unit", "item", "clove", "head", "bulb", "stalk", "stick",
        "slice", "leaf", "sprig", "bunch", "ear", "fillet", "strip",
    ),
    MeasurementSystem.SMALL_QUANTITY: ("pinch", "dash", "drop", "smidgen", "handful", "scoop"),
    # Picker grouping only; the catalog counts size words as items
    MeasurementSystem.SIZE: ("small", "medium", "large", "extra-large"),
    MeasurementSystem.PACKAGE: ("pack", "packet"),
})

VALID_UNITS: frozenset[str] = frozenset(
    spelling for spellings in UNIT_TYPES.values() for spelling in spellings
)

_uncatalogued = VALID_UNITS.difference(UNIT_CATALOG)
if _uncatalogued:
    raise ValueError(f"allow-listed units missing from catalog: {sorted(_uncatalogued)}")


def is_valid_unit(unit: str) -> bool:
    return normalize_unit(unit) in VALID_UNITS


def units_for_system(system: MeasurementSystem) -> tuple[str, ...]:
    """Allow-listed spellings for one system, e.g. for a unit picker."""
    return UNIT_TYPES.get(as_system(system), ())

"""
Unit catalog: every recognised unit spelling mapped to its measurement system
and the factor that converts one unit into the system's base unit.

Weight converts to grams and volume to millilitres. The remaining systems are
grouping-only: their members share a bucket but are never converted into one
another, so their factor is always 1.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional


class MeasurementSystem(str, Enum):
    WEIGHT = "weight"
    VOLUME = "volume"
    COUNT = "count"
    SMALL_QUANTITY = "small_quantity"
    SIZE = "size"
    PACKAGE = "package"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value


CONVERTIBLE_SYSTEMS = frozenset({MeasurementSystem.WEIGHT, MeasurementSystem.VOLUME})
GROUPING_SYSTEMS = frozenset(set(MeasurementSystem) - CONVERTIBLE_SYSTEMS)

BASE_UNITS: Mapping[MeasurementSystem, str] = MappingProxyType({
    MeasurementSystem.WEIGHT: "g",
    MeasurementSystem.VOLUME: "ml",
    MeasurementSystem.COUNT: "piece",
    MeasurementSystem.SMALL_QUANTITY: "pinch",
    MeasurementSystem.SIZE: "medium",
    MeasurementSystem.PACKAGE: "pack",
    MeasurementSystem.UNKNOWN: "unknown",
})


@dataclass(frozen=True)
class UnitEntry:
    system: MeasurementSystem
    factor: float = 1.0


def _entries(system: MeasurementSystem, factor: float, *spellings: str) -> dict[str, UnitEntry]:
    entry = UnitEntry(system=system, factor=factor)
    return {spelling: entry for spelling in spellings}


def _build_catalog() -> Mapping[str, UnitEntry]:
    W = MeasurementSystem.WEIGHT
    V = MeasurementSystem.VOLUME
    groups = [
        # Weight, metric (base: g)
        _entries(W, 0.001, "mg", "milligram", "milligrams"),
        _entries(W, 1, "g", "gram", "grams"),
        _entries(W, 1000, "kg", "kilogram", "kilograms"),
        # Weight, imperial
        _entries(W, 28.35, "oz", "ounce", "ounces"),
        _entries(W, 453.59, "lb", "lbs", "pound", "pounds"),
        # Volume, metric (base: ml)
        _entries(V, 1, "ml", "milliliter", "milliliters"),
        _entries(V, 10, "cl", "centiliter", "centiliters"),
        _entries(V, 100, "dl", "deciliter", "deciliters"),
        _entries(V, 1000, "l", "liter", "liters", "litre", "litres"),
        # Volume, imperial/US customary
        _entries(V, 4.93, "tsp", "teaspoon", "teaspoons"),
        _entries(V, 14.79, "tbsp", "tablespoon", "tablespoons"),
        _entries(V, 29.57, "fl oz", "fluid ounce", "fluid ounces"),
        _entries(V, 236.59, "cup", "cups"),
        _entries(V, 473.18, "pt", "pint", "pints"),
        _entries(V, 946.35, "qt", "quart", "quarts"),
        _entries(V, 3785.41, "gal", "gallon", "gallons"),
        # Old cookbook measures: wineglass ~ 1/2 cup, tea cup ~ 3/4 cup, coffee cup ~ 1 cup
        _entries(V, 118.29, "wineglass", "wineglasses"),
        _entries(V, 177.44, "tea cup", "tea cups", "teacup", "teacups"),
        _entries(V, 236.59, "coffee cup", "coffee cups"),
        # Count (base: piece)
        _entries(
            MeasurementSystem.COUNT, 1,
            "piece", "pieces", "pcs", "unit", "units", "item", "items",
            "clove", "cloves", "head", "heads", "bulb", "bulbs",
            "stalk", "stalks", "stick", "sticks", "slice", "slices",
            "leaf", "leaves", "sprig", "sprigs", "bunch", "bunches",
            "ear", "ears", "fillet", "fillets", "strip", "strips", "whole",
            # Size words count items, e.g. "2 large eggs"
            "small", "medium", "large", "extra-large",
        ),
        # Small quantity (base: pinch)
        _entries(
            MeasurementSystem.SMALL_QUANTITY, 1,
            "pinch", "pinches", "dash", "dashes", "drop", "drops", "smidgen",
            "handful", "handfuls", "scoop", "scoops",
        ),
        # Package (base: pack)
        _entries(
            MeasurementSystem.PACKAGE, 1,
            "pack", "packs", "packet", "packets", "can", "cans", "jar", "jars",
            "bottle", "bottles", "box", "boxes", "bag", "bags",
        ),
    ]
    catalog: dict[str, UnitEntry] = {}
    for group in groups:
        for spelling, entry in group.items():
            if spelling in catalog:
                raise ValueError(f"unit spelling {spelling!r} registered twice")
            catalog[spelling] = entry
    return MappingProxyType(catalog)


UNIT_CATALOG: Mapping[str, UnitEntry] = _build_catalog()


def normalize_unit(unit: str) -> str:
    return (unit or "").strip().lower()


def lookup(unit: str) -> Optional[UnitEntry]:
    """Return the catalog entry for a unit spelling, or None if unrecognised."""
    return UNIT_CATALOG.get(normalize_unit(unit))


def classify(unit: str) -> MeasurementSystem:
    """Measurement system of a unit spelling. Unrecognised spellings are UNKNOWN."""
    entry = lookup(unit)
    return entry.system if entry else MeasurementSystem.UNKNOWN


def as_system(value: object) -> MeasurementSystem:
    """Coerce a system name or member; anything else is UNKNOWN."""
    try:
        return MeasurementSystem(value)
    except ValueError:
        return MeasurementSystem.UNKNOWN


def base_unit(system: MeasurementSystem) -> str:
    return BASE_UNITS[as_system(system)]

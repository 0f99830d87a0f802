"""
Base-unit conversion for shopping-list aggregation.

Quantities are summed in their system's base unit (g or ml) and converted back
to a display unit picked by magnitude. Display output is always metric.
"""

import math
from dataclasses import dataclass
from typing import Sequence

from mealplan.services.units.catalog import (
    GROUPING_SYSTEMS,
    UNIT_CATALOG,
    MeasurementSystem,
    as_system,
    base_unit,
    classify,
    lookup,
)


@dataclass(frozen=True)
class BaseQuantity:
    quantity: float
    system: MeasurementSystem
    original_unit: str


@dataclass(frozen=True)
class DisplayQuantity:
    quantity: float
    unit: str


# Largest first; the first threshold the base quantity reaches wins.
DISPLAY_THRESHOLDS: dict[MeasurementSystem, tuple[tuple[float, str], ...]] = {
    MeasurementSystem.WEIGHT: ((1000, "kg"), (1, "g"), (0, "mg")),
    MeasurementSystem.VOLUME: ((1000, "l"), (0, "ml")),
}


def round_half_up(value: float, places: int = 0) -> float:
    """Round half up (2.5 -> 3); round() would give 2."""
    scale = 10 ** places
    return math.floor(value * scale + 0.5) / scale


def to_base(quantity: float, unit: str) -> BaseQuantity:
    entry = lookup(unit)
    if entry is None:
        return BaseQuantity(quantity=quantity, system=MeasurementSystem.UNKNOWN, original_unit=unit)
    return BaseQuantity(quantity=quantity * entry.factor, system=entry.system, original_unit=unit)


def from_base(quantity: float, system: MeasurementSystem, original_unit: str) -> DisplayQuantity:
    """
    Convert a base-unit quantity to a display quantity.

    Grouping-only systems keep the original unit label. Weight and volume walk
    DISPLAY_THRESHOLDS, e.g. 1500 g -> 1.5 kg, 0.5 g -> 500 mg.
    """
    system = as_system(system)
    if system in GROUPING_SYSTEMS:
        return DisplayQuantity(quantity=round_half_up(quantity, 2), unit=original_unit)

    for threshold, unit in DISPLAY_THRESHOLDS[system]:
        if quantity >= threshold:
            factor = UNIT_CATALOG[unit].factor
            return DisplayQuantity(quantity=round_half_up(quantity / factor, 2), unit=unit)

    # Below every threshold (negative totals): leave in the base unit
    return DisplayQuantity(quantity=round_half_up(quantity, 2), unit=base_unit(system))


def can_combine(unit_a: str, unit_b: str) -> bool:
    system_a = classify(unit_a)
    system_b = classify(unit_b)
    if MeasurementSystem.UNKNOWN in (system_a, system_b):
        return False
    return system_a == system_b


def preferred_display_unit(
    quantity: float, system: MeasurementSystem, original_units: Sequence[str]
) -> str:
    """Unit a combined quantity would be displayed in."""
    system = as_system(system)
    if system in GROUPING_SYSTEMS:
        return original_units[0] if original_units else "unit"
    first = original_units[0] if original_units else base_unit(system)
    return from_base(quantity, system, first).unit

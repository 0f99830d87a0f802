"""
Bucket keys for shopping-list aggregation.

Entries sharing a key are summed in base units before display conversion.
The coarse key is ingredient + measurement system. Count/size entries of an
ingredient whose override multiplies items out (garlic: 1 head -> 10 cloves)
are split further so that "4 clove" and "1 head" never land in one bucket and
get summed to 5 of nothing in particular.
"""

from typing import Literal, Optional

from mealplan.services.units.catalog import MeasurementSystem, as_system, classify
from mealplan.services.units.overrides import get_override, matches_target_unit

CountSubKey = Literal["target", "other"]


def aggregation_key(ingredient_id: str, unit: str) -> str:
    return f"{ingredient_id}-{classify(unit).value}"


def count_sub_key(ingredient_name: str, unit: str, system: MeasurementSystem) -> Optional[CountSubKey]:
    """
    'target' if the unit already is the override's to_unit (singular or +s),
    'other' if it needs the size multiplication, None when no split applies.
    """
    if as_system(system) not in (MeasurementSystem.COUNT, MeasurementSystem.SIZE):
        return None
    override = get_override(ingredient_name)
    if override is None or override.size is None:
        return None
    return "target" if matches_target_unit(unit, override.to_unit) else "other"


def bucket_key(ingredient_id: str, ingredient_name: str, unit: str) -> str:
    """Coarse aggregation key with the count sub-key folded in when present."""
    key = aggregation_key(ingredient_id, unit)
    sub_key = count_sub_key(ingredient_name, unit, classify(unit))
    return f"{key}-{sub_key}" if sub_key else key

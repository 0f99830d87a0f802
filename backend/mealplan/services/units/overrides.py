"""
Ingredient-specific display overrides.

After generic base-unit aggregation, some ingredients read better in a
shopping unit than in grams or millilitres: garlic in cloves, herbs in bunches,
vegetables in pieces. Each override carries one conversion path per system it
can translate from:

    VolumePath(ml_per_unit)    ml  -> to_unit
    WeightPath(g_per_unit)     g   -> to_unit
    SizePath(units_per_item)   1 head/piece/medium -> N x to_unit

Reference factors:
    Garlic:       1 clove ~ 1 tsp = 4.93 ml ~ 4 g; 1 head ~ 10 cloves
    Onion:        1 medium ~ 1 cup chopped = 236.59 ml ~ 150 g
    Carrot:       1 medium ~ 1/2 cup sliced = 118 ml ~ 80 g
    Bell pepper:  1 medium ~ 3/4 cup = 177 ml ~ 120 g
    Zucchini:     1 medium ~ 1 cup = 236.59 ml ~ 200 g
    Eggplant:     1 medium ~ 4 cups = 946 ml ~ 500 g
    Cucumber:     1 medium ~ 1 1/2 cups = 355 ml ~ 200 g
    Butter:       0.96 g per ml
    Parmesan:     0.42 g per ml grated
    Feta:         0.63 g per ml crumbled
    Herbs:        1 bunch ~ 1 cup packed = 236.59 ml ~ 60 g
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Sequence, Union

from mealplan.services.units.catalog import MeasurementSystem, as_system, normalize_unit
from mealplan.services.units.converter import DisplayQuantity, round_half_up


@dataclass(frozen=True)
class VolumePath:
    ml_per_unit: float


@dataclass(frozen=True)
class WeightPath:
    g_per_unit: float


@dataclass(frozen=True)
class SizePath:
    units_per_item: float


ConversionPath = Union[VolumePath, WeightPath, SizePath]


@dataclass(frozen=True)
class IngredientOverride:
    to_unit: str
    paths: tuple[ConversionPath, ...]
    round: bool = True

    def __post_init__(self) -> None:
        if not self.paths:
            raise ValueError(f"override to {self.to_unit!r} needs at least one conversion path")
        kinds = [type(path) for path in self.paths]
        if len(kinds) != len(set(kinds)):
            raise ValueError(f"override to {self.to_unit!r} has duplicate conversion paths")

    def _path(self, kind: type) -> Optional[ConversionPath]:
        for path in self.paths:
            if isinstance(path, kind):
                return path
        return None

    @property
    def volume(self) -> Optional[VolumePath]:
        return self._path(VolumePath)

    @property
    def weight(self) -> Optional[WeightPath]:
        return self._path(WeightPath)

    @property
    def size(self) -> Optional[SizePath]:
        return self._path(SizePath)


def _produce(ml: float, g: float, per_item: float, to_unit: str = "piece") -> IngredientOverride:
    return IngredientOverride(to_unit, (VolumePath(ml), WeightPath(g), SizePath(per_item)))


def _by_weight(g_per_ml: float) -> IngredientOverride:
    return IngredientOverride("g", (VolumePath(1 / g_per_ml), WeightPath(1)), round=False)


_HERB_BUNCH = IngredientOverride("bunch", (VolumePath(236.59), WeightPath(60)))

INGREDIENT_OVERRIDES: Mapping[str, IngredientOverride] = MappingProxyType({
    # Produce -> clove / piece
    "garlic": _produce(4.93, 4, 10, to_unit="clove"),
    "onion": _produce(236.59, 150, 1),
    "carrot": _produce(118, 80, 1),
    "bell pepper": _produce(177, 120, 1),
    "green bell pepper": _produce(177, 120, 1),
    "red bell pepper": _produce(177, 120, 1),
    "yellow bell pepper": _produce(177, 120, 1),
    "zucchini": _produce(236.59, 200, 1),
    "eggplant": _produce(946, 500, 1),
    "cucumber": _produce(355, 200, 1),
    # Dairy / fats -> grams, two decimals
    "butter": _by_weight(0.96),
    "parmesan cheese": _by_weight(0.42),
    "feta cheese": _by_weight(0.63),
    # Herbs -> bunch
    "parsley": _HERB_BUNCH,
    "cilantro": _HERB_BUNCH,
    "mint": _HERB_BUNCH,
    "dill": _HERB_BUNCH,
    "basil": _HERB_BUNCH,
})


def get_override(ingredient_name: str) -> Optional[IngredientOverride]:
    return INGREDIENT_OVERRIDES.get((ingredient_name or "").strip().lower())


def matches_target_unit(unit: str, to_unit: str) -> bool:
    # Plural by trailing "s" only; irregular plurals are not recognised.
    unit = normalize_unit(unit)
    target = to_unit.lower()
    return unit == target or unit == target + "s"


def _raw_quantity(
    override: IngredientOverride,
    base_quantity: float,
    system: MeasurementSystem,
    original_units: Sequence[str],
) -> Optional[float]:
    if system == MeasurementSystem.VOLUME:
        volume = override.volume
        return base_quantity / volume.ml_per_unit if volume and volume.ml_per_unit else None
    if system == MeasurementSystem.WEIGHT:
        weight = override.weight
        return base_quantity / weight.g_per_unit if weight and weight.g_per_unit else None
    if system in (MeasurementSystem.COUNT, MeasurementSystem.SIZE):
        size = override.size
        if size is None:
            return base_quantity
        if all(matches_target_unit(unit, override.to_unit) for unit in original_units):
            # Bucket already in the target unit (4 clove -> 4 clove)
            return base_quantity
        # Generic item units get multiplied out (1 head -> 10 clove)
        return base_quantity * size.units_per_item
    # small_quantity, package and unknown have no override path
    return None


def apply_override(
    ingredient_name: str,
    base_quantity: float,
    system: MeasurementSystem,
    original_units: Sequence[str],
) -> Optional[DisplayQuantity]:
    """
    Re-express one aggregated bucket in the ingredient's shopping unit.

    base_quantity is the bucket total in base units (ml, g, or the summed
    count). Call once per bucket after summing, never per raw entry.

    Returns None when the ingredient has no override or the override has no
    path for this system; callers fall back to from_base().
    """
    override = get_override(ingredient_name)
    if override is None:
        return None

    raw = _raw_quantity(override, base_quantity, as_system(system), original_units)
    if raw is None:
        return None

    if override.round:
        quantity = max(1.0, round_half_up(raw))
    else:
        quantity = round_half_up(raw, 2)
    return DisplayQuantity(quantity=quantity, unit=override.to_unit)

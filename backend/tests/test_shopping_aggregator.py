"""Tests for combining recipe ingredient lines into shopping-list items."""

import logging

import pytest

from mealplan.config import settings
from mealplan.services.shopping.aggregator import (
    IngredientLine,
    PlannedRecipe,
    aggregate_ingredients,
)


def _recipe(title, *lines, servings=4, planned_servings=None):
    return PlannedRecipe(
        title=title,
        servings=servings,
        ingredients=list(lines),
        planned_servings=planned_servings,
    )


def test_cross_unit_weight_lines_become_one_item():
    items = aggregate_ingredients([
        _recipe("Bread", IngredientLine("ing-flour", "flour", 600, "g", "Baking")),
        _recipe("Cake", IngredientLine("ing-flour", "flour", 15, "oz", "Baking")),
    ])
    assert len(items) == 1
    item = items[0]
    assert item.quantity == 1.03
    assert item.unit == "kg"
    assert item.category == "Baking"
    assert item.recipes == ["Bread", "Cake"]


def test_garlic_clove_and_head_resolved_separately(garlic_recipes):
    items = aggregate_ingredients(garlic_recipes)
    assert len(items) == 1
    assert items[0].quantity == 14
    assert items[0].unit == "clove"
    assert items[0].recipes == ["Garlic Bread", "Roast Chicken"]


def test_garlic_cloves_from_count_and_volume_merge():
    items = aggregate_ingredients([
        _recipe(
            "Aioli",
            IngredientLine("ing-garlic", "garlic", 4, "clove"),
            IngredientLine("ing-garlic", "garlic", 1, "tsp"),
        ),
    ])
    assert [(i.quantity, i.unit) for i in items] == [(5, "clove")]


def test_servings_multiplier_scales_lines():
    items = aggregate_ingredients([
        _recipe("Pancakes", IngredientLine("ing-flour", "flour", 200, "g"), planned_servings=8),
    ])
    assert items[0].quantity == 400
    assert items[0].unit == "g"


def test_multiplier_defaults_to_recipe_as_written():
    assert _recipe("A").multiplier == 1
    assert _recipe("A", servings=0, planned_servings=2).multiplier == 1
    assert _recipe("A", servings=4, planned_servings=2).multiplier == 0.5


def test_volume_total_switches_to_litres():
    items = aggregate_ingredients([
        _recipe("Soup", IngredientLine("ing-stock", "chicken stock", 3, "cups")),
        _recipe("Risotto", IngredientLine("ing-stock", "chicken stock", 500, "ml")),
    ])
    assert items[0].unit == "l"
    assert items[0].quantity == pytest.approx(1.21)


def test_count_without_override_sums_by_coarse_key():
    items = aggregate_ingredients([
        _recipe("Omelette", IngredientLine("ing-egg", "eggs", 2, "piece")),
        _recipe("Cake", IngredientLine("ing-egg", "eggs", 3, "pieces")),
    ])
    assert [(i.quantity, i.unit) for i in items] == [(5, "piece")]


def test_size_and_count_lines_sum_without_override():
    items = aggregate_ingredients([
        _recipe("Omelette", IngredientLine("ing-egg", "eggs", 2, "large")),
        _recipe("Cake", IngredientLine("ing-egg", "eggs", 1, "whole")),
    ])
    assert [(i.quantity, i.unit) for i in items] == [(3, "large")]


def test_onion_medium_and_pieces_merge_into_pieces():
    items = aggregate_ingredients([
        _recipe("Curry", IngredientLine("ing-onion", "onion", 1, "medium")),
        _recipe("Salsa", IngredientLine("ing-onion", "onion", 2, "piece")),
    ])
    assert [(i.quantity, i.unit) for i in items] == [(3, "piece")]


def test_butter_tablespoons_become_grams():
    items = aggregate_ingredients([
        _recipe("Toast", IngredientLine("ing-butter", "butter", 3, "tbsp")),
        _recipe("Cookies", IngredientLine("ing-butter", "butter", 100, "g")),
    ])
    assert len(items) == 1
    assert items[0].unit == "g"
    assert items[0].quantity == pytest.approx(142.6)


def test_unknown_units_are_not_summed_together(caplog):
    with caplog.at_level(logging.WARNING):
        items = aggregate_ingredients([
            _recipe(
                "Mystery",
                IngredientLine("ing-x", "saffron", 2, "blorp"),
                IngredientLine("ing-x", "saffron", 3, "zing"),
                IngredientLine("ing-x", "saffron", 1, "Blorp"),
            ),
        ])
    assert sorted((i.quantity, i.unit) for i in items) == [(3, "blorp"), (3, "zing")]
    assert "aggregate.unknown_unit" in caplog.text


def test_unknown_unit_warning_can_be_disabled(monkeypatch, caplog):
    monkeypatch.setattr(settings, "warn_on_unknown_units", False)
    with caplog.at_level(logging.WARNING):
        aggregate_ingredients([_recipe("Mystery", IngredientLine("ing-x", "saffron", 2, "blorp"))])
    assert "aggregate.unknown_unit" not in caplog.text


def test_separate_ingredients_stay_separate():
    items = aggregate_ingredients([
        _recipe(
            "Salad",
            IngredientLine("ing-parsley", "parsley", 0.25, "cup"),
            IngredientLine("ing-mint", "mint", 2, "tbsp"),
        ),
    ])
    assert {(i.ingredient_id, i.quantity, i.unit) for i in items} == {
        ("ing-parsley", 1, "bunch"),
        ("ing-mint", 1, "bunch"),
    }


def test_empty_input():
    assert aggregate_ingredients([]) == []


def test_override_rounds_bucket_total_not_each_line():
    items = aggregate_ingredients([
        _recipe("Tabbouleh", IngredientLine("ing-parsley", "parsley", 0.2, "cup")),
        _recipe("Chimichurri", IngredientLine("ing-parsley", "parsley", 0.2, "cup")),
        _recipe("Gremolata", IngredientLine("ing-parsley", "parsley", 0.2, "cup")),
    ])
    assert [(i.quantity, i.unit) for i in items] == [(1, "bunch")]
    assert items[0].recipes == ["Tabbouleh", "Chimichurri", "Gremolata"]


def test_minimum_one_applies_to_bucket_not_each_line():
    line = IngredientLine("ing-garlic", "garlic", 0.4, "tsp")
    items = aggregate_ingredients([_recipe("Dressing", *([line] * 5))])
    assert [(i.quantity, i.unit) for i in items] == [(2, "clove")]

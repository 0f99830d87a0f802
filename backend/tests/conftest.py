import sys
from pathlib import Path

import pytest

BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

from mealplan.services.shopping.aggregator import IngredientLine, PlannedRecipe


@pytest.fixture(name="garlic_recipes")
def garlic_recipes_fixture():
    return [
        PlannedRecipe(
            title="Garlic Bread",
            servings=4,
            ingredients=[IngredientLine("ing-garlic", "garlic", 4, "clove", "Produce")],
        ),
        PlannedRecipe(
            title="Roast Chicken",
            servings=4,
            ingredients=[IngredientLine("ing-garlic", "garlic", 1, "head", "Produce")],
        ),
    ]

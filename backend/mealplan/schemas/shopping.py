from pydantic import BaseModel


class ShoppingListItem(BaseModel):
    ingredient_id: str
    name: str
    category: str | None = None
    quantity: float
    unit: str
    recipes: list[str] = []  # titles of the recipes that contributed

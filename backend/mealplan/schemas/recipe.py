from pydantic import BaseModel, Field, field_validator

from mealplan.services.units.validator import is_valid_unit


class IngredientInput(BaseModel):
    name: str = Field(min_length=1)
    quantity: float = Field(gt=0)
    unit: str = Field(min_length=1)
    notes: str | None = None

    @field_validator("quantity")
    @classmethod
    def _at_most_two_decimals(cls, value: float) -> float:
        # Tolerate float noise such as 0.1 + 0.2
        if abs(value - round(value, 2)) >= 0.001:
            raise ValueError("Quantity must have at most 2 decimal places")
        return value

    @field_validator("unit")
    @classmethod
    def _known_unit(cls, value: str) -> str:
        if not is_valid_unit(value):
            raise ValueError(
                "Invalid unit of measurement. Please use a valid unit (e.g., g, kg, ml, cup, piece)."
            )
        return value.strip()

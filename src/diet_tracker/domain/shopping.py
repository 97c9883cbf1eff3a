"""Shopping list domain models."""

from dataclasses import dataclass

CATEGORIES = (
    "Fruits",
    "Vegetables",
    "Meat",
    "Dairy",
    "Grains",
    "Spices",
    "Oils",
    "Sweeteners",
    "Other",
)
DEFAULT_CATEGORY = "Other"
SERVING_UNIT = "serving"


@dataclass(frozen=True)
class RecipeComponent:
    """One raw ingredient of a single serving of a prepared food."""

    name: str
    amount: float
    unit: str
    category: str


@dataclass(frozen=True)
class Ingredient:
    """Raw ingredient line on a shopping list."""

    name: str
    amount: float
    unit: str
    category: str = DEFAULT_CATEGORY

    def __str__(self) -> str:
        return f"{self.name} ({self.amount:g} {self.unit})"

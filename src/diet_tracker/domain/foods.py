"""Domain models for logged and planned foods."""

from dataclasses import dataclass

MEAL_TYPES = ("breakfast", "lunch", "snack", "dinner")


@dataclass(frozen=True)
class FoodEntry:
    """A food eaten or planned, with optional detailed nutrients.

    Nutrient fields are ``None`` when only the calorie count is known; such
    entries contribute zero to every nutrient total except calories.
    Sodium is in milligrams, every other nutrient in grams.
    """

    name: str
    grams: float
    calories: int
    protein_g: float | None = None
    carbs_g: float | None = None
    fat_g: float | None = None
    fiber_g: float | None = None
    sugar_g: float | None = None
    sodium_mg: float | None = None

    @property
    def has_nutrients(self) -> bool:
        """Return True when any detailed nutrient is present."""
        return any(
            value is not None
            for value in (
                self.protein_g,
                self.carbs_g,
                self.fat_g,
                self.fiber_g,
                self.sugar_g,
                self.sodium_mg,
            )
        )

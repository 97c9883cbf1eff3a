"""Domain models for personalized diet recommendations."""

from dataclasses import dataclass, field
from enum import Enum

from diet_tracker.domain.foods import FoodEntry


class DietType(str, Enum):
    """Supported diet styles."""

    BALANCED = "BALANCED"
    LOW_CARB = "LOW_CARB"
    HIGH_PROTEIN = "HIGH_PROTEIN"
    VEGETARIAN = "VEGETARIAN"
    VEGAN = "VEGAN"


class WeightGoal(str, Enum):
    """Direction of the user's weight target."""

    LOSE = "LOSE"
    MAINTAIN = "MAINTAIN"
    GAIN = "GAIN"


@dataclass(frozen=True)
class DietProfile:
    """User preferences that shape recommendations."""

    diet_type: DietType = DietType.BALANCED
    weight_goal: WeightGoal = WeightGoal.MAINTAIN
    health_conditions: list[str] = field(default_factory=list)
    excluded_foods: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class MacroDistribution:
    """Daily macronutrient targets in grams."""

    protein_g: int
    carbs_g: int
    fat_g: int

    def __str__(self) -> str:
        return f"Protein: {self.protein_g}g, Carbs: {self.carbs_g}g, Fat: {self.fat_g}g"


@dataclass(frozen=True)
class RecommendedMeal:
    """Suggested foods for one meal with its targets."""

    meal_type: str
    foods: list[FoodEntry]
    target_calories: int
    target_protein_g: int
    target_carbs_g: int
    target_fat_g: int

    @property
    def total_calories(self) -> int:
        return sum(food.calories for food in self.foods)


@dataclass(frozen=True)
class DietRecommendation:
    """Full recommendation for a day."""

    daily_calories: int
    macros: MacroDistribution
    meals: list[RecommendedMeal]
    guidelines: list[str]

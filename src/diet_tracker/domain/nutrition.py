"""Nutrition goal and report models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NutritionGoal:
    """Daily nutrition targets for a user."""

    calorie_goal: int
    protein_goal_g: float
    carb_goal_g: float
    fat_goal_g: float


DEFAULT_GOAL = NutritionGoal(
    calorie_goal=2000, protein_goal_g=50.0, carb_goal_g=250.0, fat_goal_g=70.0
)


def percentage_of(total: float, goal: float) -> float:
    """Return total as a percentage of goal, or 0 when the goal is not positive."""
    if goal <= 0:
        return 0.0
    return total * 100.0 / goal


@dataclass(frozen=True)
class NutritionReport:
    """Nutrient totals for one date compared with the goal in effect."""

    date: str
    total_calories: int
    total_protein_g: float
    total_carbs_g: float
    total_fat_g: float
    total_fiber_g: float
    total_sugar_g: float
    total_sodium_mg: float
    goal: NutritionGoal

    @property
    def calorie_percentage(self) -> float:
        return percentage_of(self.total_calories, self.goal.calorie_goal)

    @property
    def protein_percentage(self) -> float:
        return percentage_of(self.total_protein_g, self.goal.protein_goal_g)

    @property
    def carb_percentage(self) -> float:
        return percentage_of(self.total_carbs_g, self.goal.carb_goal_g)

    @property
    def fat_percentage(self) -> float:
        return percentage_of(self.total_fat_g, self.goal.fat_goal_g)


@dataclass(frozen=True)
class PeriodSummary:
    """Reports for several dates with summed totals and daily averages."""

    reports: list[NutritionReport]
    total_calories: int
    total_protein_g: float
    total_carbs_g: float
    total_fat_g: float
    avg_calories: float
    avg_protein_g: float
    avg_carbs_g: float
    avg_fat_g: float

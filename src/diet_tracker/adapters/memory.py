"""In-memory repositories used by default and in tests."""

from dataclasses import dataclass, field

from diet_tracker.domain.foods import FoodEntry
from diet_tracker.domain.nutrition import NutritionGoal
from diet_tracker.domain.recommendations import DietProfile
from diet_tracker.services.meals import FoodLogRepository
from diet_tracker.services.nutrition import GoalRepository
from diet_tracker.services.recommendations import DietProfileRepository


@dataclass
class InMemoryGoalRepository(GoalRepository):
    """Nutrition goals keyed by username."""

    goals: dict[str, NutritionGoal] = field(default_factory=dict)

    def get_goal(self, username: str) -> NutritionGoal | None:
        return self.goals.get(username)

    def save_goal(self, username: str, goal: NutritionGoal) -> None:
        self.goals[username] = goal


@dataclass
class InMemoryFoodLogRepository(FoodLogRepository):
    """Food logs keyed by (username, date) and plans by (username, date, meal)."""

    food_logs: dict[tuple[str, str], list[FoodEntry]] = field(default_factory=dict)
    meal_plans: dict[tuple[str, str, str], list[FoodEntry]] = field(
        default_factory=dict
    )

    def add_food_log(self, username: str, date: str, food: FoodEntry) -> None:
        self.food_logs.setdefault((username, date), []).append(food)

    def list_food_log(self, username: str, date: str) -> list[FoodEntry]:
        return list(self.food_logs.get((username, date), []))

    def add_meal_plan(
        self, username: str, date: str, meal_type: str, food: FoodEntry
    ) -> None:
        self.meal_plans.setdefault((username, date, meal_type), []).append(food)

    def list_meal_plan(
        self, username: str, date: str, meal_type: str
    ) -> list[FoodEntry]:
        return list(self.meal_plans.get((username, date, meal_type), []))


@dataclass
class InMemoryDietProfileRepository(DietProfileRepository):
    """Diet profiles keyed by username."""

    profiles: dict[str, DietProfile] = field(default_factory=dict)

    def get_profile(self, username: str) -> DietProfile | None:
        return self.profiles.get(username)

    def save_profile(self, username: str, profile: DietProfile) -> None:
        self.profiles[username] = profile

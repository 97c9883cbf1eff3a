"""Supabase repository for food logs and meal plans."""

from dataclasses import dataclass

from supabase import Client

from diet_tracker.domain.foods import FoodEntry
from diet_tracker.services.meals import FoodLogRepository

_FOOD_COLUMNS = (
    "name, grams, calories, protein_g, carbs_g, fat_g, fiber_g, sugar_g, sodium_mg"
)


@dataclass
class SupabaseFoodLogRepository(FoodLogRepository):
    """Supabase implementation for food logs and meal plans."""

    client: Client

    def add_food_log(self, username: str, date: str, food: FoodEntry) -> None:
        """Insert a food log row."""
        response = (
            self.client.table("food_logs")
            .insert({"username": username, "date": date, **_food_payload(food)})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create food log")

    def list_food_log(self, username: str, date: str) -> list[FoodEntry]:
        """Return the foods logged on a date."""
        response = (
            self.client.table("food_logs")
            .select(_FOOD_COLUMNS)
            .eq("username", username)
            .eq("date", date)
            .order("id", desc=False)
            .execute()
        )
        return [_parse_food(row) for row in response.data or []]

    def add_meal_plan(
        self, username: str, date: str, meal_type: str, food: FoodEntry
    ) -> None:
        """Insert a planned meal row."""
        response = (
            self.client.table("meal_plans")
            .insert(
                {
                    "username": username,
                    "date": date,
                    "meal_type": meal_type,
                    **_food_payload(food),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create meal plan")

    def list_meal_plan(
        self, username: str, date: str, meal_type: str
    ) -> list[FoodEntry]:
        """Return the foods planned for a meal."""
        response = (
            self.client.table("meal_plans")
            .select(_FOOD_COLUMNS)
            .eq("username", username)
            .eq("date", date)
            .eq("meal_type", meal_type)
            .order("id", desc=False)
            .execute()
        )
        return [_parse_food(row) for row in response.data or []]


def _food_payload(food: FoodEntry) -> dict[str, object]:
    return {
        "name": food.name,
        "grams": food.grams,
        "calories": food.calories,
        "protein_g": food.protein_g,
        "carbs_g": food.carbs_g,
        "fat_g": food.fat_g,
        "fiber_g": food.fiber_g,
        "sugar_g": food.sugar_g,
        "sodium_mg": food.sodium_mg,
    }


def _parse_food(row: dict[str, object]) -> FoodEntry:
    return FoodEntry(
        name=str(row.get("name", "")),
        grams=float(row.get("grams") or 0.0),
        calories=int(row.get("calories") or 0),
        protein_g=_optional_float(row.get("protein_g")),
        carbs_g=_optional_float(row.get("carbs_g")),
        fat_g=_optional_float(row.get("fat_g")),
        fiber_g=_optional_float(row.get("fiber_g")),
        sugar_g=_optional_float(row.get("sugar_g")),
        sodium_mg=_optional_float(row.get("sodium_mg")),
    )


def _optional_float(value: object) -> float | None:
    if isinstance(value, int | float):
        return float(value)
    return None

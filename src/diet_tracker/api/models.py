"""Request models for the HTTP API."""

import datetime

from pydantic import BaseModel, Field, field_validator

from diet_tracker.domain.foods import FoodEntry
from diet_tracker.domain.recommendations import DietProfile, DietType, WeightGoal
from diet_tracker.services.meals import MAX_YEAR, MIN_YEAR, is_valid_date


class GoalsRequest(BaseModel):
    """Daily nutrition targets."""

    calorie_goal: int = Field(gt=0)
    protein_goal_g: float = Field(gt=0)
    carb_goal_g: float = Field(gt=0)
    fat_goal_g: float = Field(gt=0)


class FoodRequest(BaseModel):
    """A food eaten on a date."""

    date: datetime.date
    name: str = Field(min_length=1)
    grams: float = Field(gt=0)
    calories: int = Field(ge=0)
    protein_g: float | None = Field(default=None, ge=0)
    carbs_g: float | None = Field(default=None, ge=0)
    fat_g: float | None = Field(default=None, ge=0)
    fiber_g: float | None = Field(default=None, ge=0)
    sugar_g: float | None = Field(default=None, ge=0)
    sodium_mg: float | None = Field(default=None, ge=0)

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        cleaned = value.strip()
        if not cleaned:
            raise ValueError("name must not be blank")
        return cleaned

    @field_validator("date")
    @classmethod
    def check_supported_date(cls, value: datetime.date) -> datetime.date:
        if not is_valid_date(value.year, value.month, value.day):
            raise ValueError(f"date must be between {MIN_YEAR} and {MAX_YEAR}")
        return value

    def to_entry(self) -> FoodEntry:
        return FoodEntry(
            name=self.name,
            grams=self.grams,
            calories=self.calories,
            protein_g=self.protein_g,
            carbs_g=self.carbs_g,
            fat_g=self.fat_g,
            fiber_g=self.fiber_g,
            sugar_g=self.sugar_g,
            sodium_mg=self.sodium_mg,
        )


class MealPlanRequest(FoodRequest):
    """A food planned for a meal."""

    meal_type: str = Field(min_length=1)


class BodyMetricsRequest(BaseModel):
    """Body data used for calorie estimates."""

    gender: str = Field(min_length=1)
    age: int = Field(gt=0)
    height_cm: float = Field(gt=0)
    weight_kg: float = Field(gt=0)
    activity_level: int = 1


class DietProfileRequest(BaseModel):
    """Diet preferences for recommendations."""

    diet_type: DietType = DietType.BALANCED
    weight_goal: WeightGoal = WeightGoal.MAINTAIN
    health_conditions: list[str] = Field(default_factory=list)
    excluded_foods: list[str] = Field(default_factory=list)

    def to_profile(self) -> DietProfile:
        return DietProfile(
            diet_type=self.diet_type,
            weight_goal=self.weight_goal,
            health_conditions=list(self.health_conditions),
            excluded_foods=list(self.excluded_foods),
        )

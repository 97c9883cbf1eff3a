"""Personalized diet recommendations."""

import logging
import math
from dataclasses import dataclass
from typing import Protocol

from diet_tracker.catalog import Catalog
from diet_tracker.domain.foods import FoodEntry
from diet_tracker.domain.recommendations import (
    DietProfile,
    DietRecommendation,
    DietType,
    MacroDistribution,
    RecommendedMeal,
    WeightGoal,
)
from diet_tracker.services.nutrition import suggested_calories

PROTEIN_KCAL_PER_G = 4
CARB_KCAL_PER_G = 4
FAT_KCAL_PER_G = 9
MAX_FOODS_PER_MEAL = 3

# protein, carbs, fat as fractions of daily calories
_MACRO_SPLITS = {
    DietType.BALANCED: (0.25, 0.50, 0.25),
    DietType.LOW_CARB: (0.30, 0.20, 0.50),
    DietType.HIGH_PROTEIN: (0.40, 0.30, 0.30),
    DietType.VEGETARIAN: (0.20, 0.60, 0.20),
    DietType.VEGAN: (0.20, 0.60, 0.20),
}

_WEIGHT_GOAL_FACTORS = {
    WeightGoal.LOSE: 0.85,
    WeightGoal.MAINTAIN: 1.0,
    WeightGoal.GAIN: 1.15,
}

# meal label, option meal type, share of the daily targets
_MEAL_SHARES = (
    ("Breakfast", "breakfast", 0.25),
    ("Lunch", "lunch", 0.35),
    ("Dinner", "dinner", 0.30),
    ("Snack", "snack", 0.10),
)

_MEAT_WORDS = ("chicken", "beef", "fish", "meat")
_ANIMAL_PRODUCT_WORDS = (*_MEAT_WORDS, "milk", "cheese", "egg", "yogurt")

_DIET_GUIDELINES = {
    DietType.BALANCED: (
        "Focus on a balanced diet with a variety of whole foods.",
        "Include lean proteins, complex carbohydrates, and healthy fats in each meal.",
        "Aim for at least 5 servings of fruits and vegetables per day.",
    ),
    DietType.LOW_CARB: (
        "Limit intake of bread, pasta, rice, and other high-carb foods.",
        "Focus on non-starchy vegetables, proteins, and healthy fats.",
        "Choose low glycemic index carbohydrates when consumed.",
    ),
    DietType.HIGH_PROTEIN: (
        "Include a protein source with every meal.",
        "Focus on lean protein sources like chicken, fish, lean beef, eggs, "
        "and plant proteins.",
        "Space protein intake throughout the day for optimal muscle protein "
        "synthesis.",
    ),
    DietType.VEGETARIAN: (
        "Ensure adequate protein intake from eggs, dairy, legumes, tofu, and "
        "plant proteins.",
        "Include a variety of plant foods to get all essential amino acids.",
        "Consider supplementing with vitamin B12 if not consuming dairy or eggs "
        "regularly.",
    ),
    DietType.VEGAN: (
        "Focus on complete protein sources like tofu, tempeh, seitan, and "
        "complementary protein combinations.",
        "Include a variety of plant foods to ensure adequate nutrient intake.",
        "Consider supplements for vitamin B12, vitamin D, omega-3, and possibly "
        "iron.",
    ),
}

_WEIGHT_GUIDELINES = {
    WeightGoal.LOSE: (
        "Maintain a moderate calorie deficit of about 15% below maintenance level.",
        "Include regular physical activity, combining cardio and strength training.",
        "Focus on protein intake to preserve muscle mass during weight loss.",
    ),
    WeightGoal.GAIN: (
        "Maintain a calorie surplus of about 15% above maintenance level.",
        "Focus on strength training to promote muscle growth.",
        "Ensure adequate protein intake to support muscle protein synthesis.",
    ),
    WeightGoal.MAINTAIN: (
        "Monitor your weight regularly and adjust calories as needed to maintain.",
        "Focus on overall nutrition quality rather than restriction.",
        "Include regular physical activity for overall health benefits.",
    ),
}

# first matching keyword wins for a condition
_CONDITION_GUIDELINES = (
    (
        "diabetes",
        (
            "Monitor carbohydrate intake and focus on low glycemic index foods.",
            "Maintain consistent meal timing to help regulate blood sugar levels.",
            "Limit added sugars and highly processed foods.",
        ),
    ),
    (
        "hypertension",
        (
            "Limit sodium intake to less than 2,300 mg per day.",
            "Focus on foods rich in potassium, magnesium, and calcium.",
            "Include foods with heart-healthy omega-3 fatty acids like fatty fish.",
        ),
    ),
    (
        "cholesterol",
        (
            "Limit saturated and trans fats.",
            "Include foods rich in soluble fiber like oats, beans, and fruits.",
            "Consider plant sterols and stanols to help lower cholesterol.",
        ),
    ),
)

_logger = logging.getLogger(__name__)


class DietProfileRepository(Protocol):
    """Persistence interface for diet profiles."""

    def get_profile(self, username: str) -> DietProfile | None:
        """Return the stored profile for a user, if any."""

    def save_profile(self, username: str, profile: DietProfile) -> None:
        """Insert or replace a user's profile."""


@dataclass
class DietRecommendationService:
    """Builds calorie, macro and meal recommendations for a user."""

    repository: DietProfileRepository
    catalog: Catalog

    def set_profile(self, username: str, profile: DietProfile) -> bool:
        """Store a user's diet profile."""
        self.repository.save_profile(username, profile)
        _logger.info(
            "Diet profile saved: user=%s diet=%s goal=%s",
            username,
            profile.diet_type.value,
            profile.weight_goal.value,
        )
        return True

    def get_profile(self, username: str) -> DietProfile:
        """Return the user's profile or the balanced/maintain default."""
        return self.repository.get_profile(username) or DietProfile()

    def recommend(  # noqa: PLR0913
        self,
        username: str,
        gender: str,
        age: int,
        height_cm: float,
        weight_kg: float,
        activity_level: int,
    ) -> DietRecommendation:
        """Return a daily recommendation based on body data and profile."""
        profile = self.get_profile(username)
        base = suggested_calories(gender, age, height_cm, weight_kg, activity_level)
        calories = adjust_for_weight_goal(base, profile.weight_goal)
        macros = macro_distribution(calories, profile.diet_type)
        meals = [
            self._recommend_meal(label, meal_type, share, calories, macros, profile)
            for label, meal_type, share in _MEAL_SHARES
        ]
        return DietRecommendation(
            daily_calories=calories,
            macros=macros,
            meals=meals,
            guidelines=dietary_guidelines(profile),
        )

    def _recommend_meal(  # noqa: PLR0913
        self,
        label: str,
        meal_type: str,
        share: float,
        calories: int,
        macros: MacroDistribution,
        profile: DietProfile,
    ) -> RecommendedMeal:
        target_calories = int(calories * share)
        options = filter_options(self.catalog.options_for(meal_type), profile)
        return RecommendedMeal(
            meal_type=label,
            foods=_select_foods(options, target_calories),
            target_calories=target_calories,
            target_protein_g=int(macros.protein_g * share),
            target_carbs_g=int(macros.carbs_g * share),
            target_fat_g=int(macros.fat_g * share),
        )


def adjust_for_weight_goal(calories: int, weight_goal: WeightGoal) -> int:
    """Apply a 15% deficit or surplus for weight loss or gain."""
    return int(calories * _WEIGHT_GOAL_FACTORS[weight_goal])


def macro_distribution(calories: int, diet_type: DietType) -> MacroDistribution:
    """Split calories into macronutrient grams for a diet type."""
    protein, carbs, fat = _MACRO_SPLITS[diet_type]
    return MacroDistribution(
        protein_g=_round_half_up(calories * protein / PROTEIN_KCAL_PER_G),
        carbs_g=_round_half_up(calories * carbs / CARB_KCAL_PER_G),
        fat_g=_round_half_up(calories * fat / FAT_KCAL_PER_G),
    )


def filter_options(options: list[FoodEntry], profile: DietProfile) -> list[FoodEntry]:
    """Drop options excluded by the profile or its diet type."""
    excluded = [food.lower() for food in profile.excluded_foods if food.strip()]
    if profile.diet_type is DietType.VEGAN:
        excluded.extend(_ANIMAL_PRODUCT_WORDS)
    elif profile.diet_type is DietType.VEGETARIAN:
        excluded.extend(_MEAT_WORDS)
    return [
        option
        for option in options
        if not any(word in option.name.lower() for word in excluded)
    ]


def dietary_guidelines(profile: DietProfile) -> list[str]:
    """Return guidance lines for a profile."""
    guidelines = [
        *_DIET_GUIDELINES[profile.diet_type],
        *_WEIGHT_GUIDELINES[profile.weight_goal],
    ]
    for condition in profile.health_conditions:
        lowered = condition.lower()
        for keyword, lines in _CONDITION_GUIDELINES:
            if keyword in lowered:
                guidelines.extend(lines)
                break
    return guidelines


def _select_foods(options: list[FoodEntry], target_calories: int) -> list[FoodEntry]:
    selected: list[FoodEntry] = []
    total = 0
    for option in options:
        if len(selected) >= MAX_FOODS_PER_MEAL or total >= target_calories:
            break
        selected.append(option)
        total += option.calories
    return selected


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)

"""Nutrition goals, daily reports and calorie suggestions."""

import logging
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Protocol

from diet_tracker.domain.foods import FoodEntry
from diet_tracker.domain.nutrition import (
    DEFAULT_GOAL,
    NutritionGoal,
    NutritionReport,
    PeriodSummary,
)

_ACTIVITY_FACTORS = {
    1: 1.2,  # sedentary
    2: 1.375,  # lightly active
    3: 1.55,  # moderately active
    4: 1.725,  # very active
    5: 1.9,  # extra active
}
_SEDENTARY_FACTOR = _ACTIVITY_FACTORS[1]

_logger = logging.getLogger(__name__)


class GoalRepository(Protocol):
    """Persistence interface for per-user nutrition goals."""

    def get_goal(self, username: str) -> NutritionGoal | None:
        """Return the stored goal for a user, if any."""

    def save_goal(self, username: str, goal: NutritionGoal) -> None:
        """Insert or replace the goal for a user."""


class FoodLogSource(Protocol):
    """Read access to logged foods."""

    def get_food_log(self, username: str, date: str) -> list[FoodEntry]:
        """Return the foods a user logged on a date."""


@dataclass
class NutritionAggregator:
    """Aggregates logged foods into reports compared against user goals."""

    goal_repository: GoalRepository
    food_log: FoodLogSource | None = None

    def set_goals(
        self,
        username: str,
        calorie_goal: int,
        protein_goal_g: float,
        carb_goal_g: float,
        fat_goal_g: float,
    ) -> bool:
        """Store goals for a user, replacing any previous ones."""
        goal = NutritionGoal(
            calorie_goal=calorie_goal,
            protein_goal_g=protein_goal_g,
            carb_goal_g=carb_goal_g,
            fat_goal_g=fat_goal_g,
        )
        self.goal_repository.save_goal(username, goal)
        _logger.info("Nutrition goals saved: user=%s", username)
        return True

    def get_goals(self, username: str) -> NutritionGoal:
        """Return the user's goals or the default goals when none are stored."""
        return self.goal_repository.get_goal(username) or DEFAULT_GOAL

    def build_report(
        self, username: str, date: str, entries: Iterable[FoodEntry]
    ) -> NutritionReport:
        """Sum the nutrients of a day's entries and attach the current goals."""
        calories = 0
        protein = carbs = fat = fiber = sugar = sodium = 0.0
        for entry in entries:
            calories += entry.calories
            protein += entry.protein_g or 0.0
            carbs += entry.carbs_g or 0.0
            fat += entry.fat_g or 0.0
            fiber += entry.fiber_g or 0.0
            sugar += entry.sugar_g or 0.0
            sodium += entry.sodium_mg or 0.0
        return NutritionReport(
            date=date,
            total_calories=calories,
            total_protein_g=protein,
            total_carbs_g=carbs,
            total_fat_g=fat,
            total_fiber_g=fiber,
            total_sugar_g=sugar,
            total_sodium_mg=sodium,
            goal=self.get_goals(username),
        )

    def build_daily_report(self, username: str, date: str) -> NutritionReport:
        """Build a report from the foods logged on a date."""
        return self.build_report(username, date, self._logged_foods(username, date))

    def build_weekly_report(
        self, username: str, dates: Sequence[str]
    ) -> list[NutritionReport]:
        """Build one report per date, in the order given.

        Dates are expected to be the seven days of a week but are not checked;
        repeated or unordered dates produce repeated or unordered reports.
        Blank dates are skipped.
        """
        return [
            self.build_daily_report(username, date)
            for date in dates
            if date and date.strip()
        ]

    def _logged_foods(self, username: str, date: str) -> list[FoodEntry]:
        if self.food_log is None:
            return []
        return self.food_log.get_food_log(username, date)


def summarize_period(reports: Sequence[NutritionReport]) -> PeriodSummary:
    """Return totals and per-day averages for a list of daily reports."""
    total_calories = sum(report.total_calories for report in reports)
    total_protein = sum(report.total_protein_g for report in reports)
    total_carbs = sum(report.total_carbs_g for report in reports)
    total_fat = sum(report.total_fat_g for report in reports)
    days = max(len(reports), 1)
    return PeriodSummary(
        reports=list(reports),
        total_calories=total_calories,
        total_protein_g=total_protein,
        total_carbs_g=total_carbs,
        total_fat_g=total_fat,
        avg_calories=total_calories / days,
        avg_protein_g=total_protein / days,
        avg_carbs_g=total_carbs / days,
        avg_fat_g=total_fat / days,
    )


def suggested_calories(
    gender: str,
    age: int,
    height_cm: float,
    weight_kg: float,
    activity_level: int,
) -> int:
    """Estimate daily calories with the Mifflin-St Jeor equation.

    ``gender`` is matched case-insensitively; values starting with ``m`` are
    male, anything else uses the female constant. Activity levels outside 1-5
    fall back to sedentary.
    """
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age
    bmr = base + 5 if gender.strip().lower().startswith("m") else base - 161
    factor = _ACTIVITY_FACTORS.get(activity_level)
    if factor is None:
        _logger.warning(
            "Unknown activity level %s, using sedentary factor", activity_level
        )
        factor = _SEDENTARY_FACTOR
    return math.floor(bmr * factor + 0.5)

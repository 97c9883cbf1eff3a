"""Meal planning and food logging service."""

import calendar
import logging
from dataclasses import dataclass
from typing import Protocol

from diet_tracker.domain.foods import MEAL_TYPES, FoodEntry

MIN_YEAR = 2025
MAX_YEAR = 2100
DECEMBER = 12

_logger = logging.getLogger(__name__)


class FoodLogRepository(Protocol):
    """Persistence interface for food logs and meal plans."""

    def add_food_log(self, username: str, date: str, food: FoodEntry) -> None:
        """Append a food to the user's log for a date."""

    def list_food_log(self, username: str, date: str) -> list[FoodEntry]:
        """Return the foods logged by a user on a date."""

    def add_meal_plan(
        self, username: str, date: str, meal_type: str, food: FoodEntry
    ) -> None:
        """Append a food to a planned meal."""

    def list_meal_plan(
        self, username: str, date: str, meal_type: str
    ) -> list[FoodEntry]:
        """Return the foods planned for a meal."""


@dataclass
class MealPlanningService:
    """Records eaten and planned foods keyed by user and date."""

    repository: FoodLogRepository

    def log_food(self, username: str, date: str, food: FoodEntry) -> bool:
        """Log a food for a date; return False when the request is incomplete."""
        if not _present(username) or not _present(date):
            return False
        self.repository.add_food_log(username, date, food)
        _logger.info("Food logged: user=%s date=%s food=%s", username, date, food.name)
        return True

    def add_meal_plan(
        self, username: str, date: str, meal_type: str, food: FoodEntry
    ) -> bool:
        """Plan a food for a meal; return False for unknown meal types."""
        if not _present(username) or not _present(date):
            return False
        normalized = meal_type.strip().lower()
        if normalized not in MEAL_TYPES:
            return False
        self.repository.add_meal_plan(username, date, normalized, food)
        _logger.info(
            "Meal planned: user=%s date=%s meal=%s food=%s",
            username,
            date,
            normalized,
            food.name,
        )
        return True

    def get_food_log(self, username: str, date: str) -> list[FoodEntry]:
        """Return the foods logged on a date (empty when none)."""
        if not _present(username) or not _present(date):
            return []
        return self.repository.list_food_log(username, date)

    def get_meal_plan(
        self, username: str, date: str, meal_type: str
    ) -> list[FoodEntry]:
        """Return the foods planned for a meal (empty when none)."""
        if not _present(username) or not _present(date):
            return []
        return self.repository.list_meal_plan(
            username, date, meal_type.strip().lower()
        )

    def get_total_calories(self, username: str, date: str) -> int:
        """Return the calories logged on a date."""
        return sum(food.calories for food in self.get_food_log(username, date))


def is_valid_date(year: int, month: int, day: int) -> bool:
    """Return True for a real calendar date within the supported years."""
    if year < MIN_YEAR or year > MAX_YEAR:
        return False
    if month < 1 or month > DECEMBER:
        return False
    return 1 <= day <= calendar.monthrange(year, month)[1]


def format_date(year: int, month: int, day: int) -> str:
    """Format a date as YYYY-MM-DD."""
    return f"{year:04d}-{month:02d}-{day:02d}"


def _present(value: str | None) -> bool:
    return bool(value and value.strip())

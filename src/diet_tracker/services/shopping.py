"""Shopping list consolidation from planned meals."""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace
from datetime import date, timedelta
from typing import Protocol

from diet_tracker.catalog import Catalog
from diet_tracker.domain.foods import MEAL_TYPES, FoodEntry
from diet_tracker.domain.shopping import CATEGORIES, SERVING_UNIT, Ingredient

_logger = logging.getLogger(__name__)


class MealPlanSource(Protocol):
    """Read access to planned meals."""

    def get_meal_plan(
        self, username: str, date: str, meal_type: str
    ) -> list[FoodEntry]:
        """Return the foods planned for a meal."""


@dataclass
class ShoppingListConsolidator:
    """Turns planned foods into a merged, categorized ingredient list."""

    catalog: Catalog

    def expand(self, foods: Iterable[FoodEntry]) -> list[Ingredient]:
        """Expand foods into raw ingredients.

        Each distinct food name is expanded once with its one-serving recipe;
        amounts are not scaled by grams or by how often the food was logged.
        Foods without a recipe become a single ``serving`` placeholder.
        """
        ingredients: list[Ingredient] = []
        seen: set[str] = set()
        for food in foods:
            if food.name in seen:
                continue
            seen.add(food.name)
            recipe = self.catalog.recipe_for(food.name)
            if recipe is None:
                ingredients.append(
                    Ingredient(
                        name=food.name,
                        amount=1.0,
                        unit=SERVING_UNIT,
                        category=self.catalog.category_for(food.name),
                    )
                )
                continue
            ingredients.extend(
                Ingredient(
                    name=component.name,
                    amount=component.amount,
                    unit=component.unit,
                    category=component.category,
                )
                for component in recipe
            )
        return ingredients

    @staticmethod
    def merge(ingredients: Iterable[Ingredient]) -> list[Ingredient]:
        """Sum amounts of ingredients sharing the same name and unit.

        The merged entry keeps the category of the first ingredient in its
        group. Results are new objects in first-seen order.
        """
        merged: dict[tuple[str, str], Ingredient] = {}
        for ingredient in ingredients:
            key = (ingredient.name, ingredient.unit)
            current = merged.get(key)
            if current is None:
                merged[key] = replace(ingredient)
            else:
                merged[key] = replace(
                    current, amount=current.amount + ingredient.amount
                )
        return list(merged.values())

    @staticmethod
    def categorize(ingredients: Iterable[Ingredient]) -> dict[str, list[Ingredient]]:
        """Group ingredients by category.

        Known categories come first in their display order; any other
        category gets its own group after them.
        """
        groups: dict[str, list[Ingredient]] = {}
        for ingredient in ingredients:
            groups.setdefault(ingredient.category, []).append(ingredient)
        ordered = {
            category: groups[category] for category in CATEGORIES if category in groups
        }
        for category, items in groups.items():
            ordered.setdefault(category, items)
        return ordered

    @staticmethod
    def total_cost(
        ingredients: Iterable[Ingredient], prices: Mapping[str, float]
    ) -> float:
        """Return the sum of amount times unit price; unpriced items cost 0."""
        return sum(
            ingredient.amount * prices.get(ingredient.name, 0.0)
            for ingredient in ingredients
        )


@dataclass
class ShoppingListService:
    """Builds shopping lists from a user's meal plans."""

    consolidator: ShoppingListConsolidator
    meal_plans: MealPlanSource

    def generate(
        self, username: str, start_date: date, end_date: date
    ) -> list[Ingredient]:
        """Return the merged ingredients for every meal planned in a date range."""
        foods: list[FoodEntry] = []
        day = start_date
        while day <= end_date:
            for meal_type in MEAL_TYPES:
                foods.extend(
                    self.meal_plans.get_meal_plan(username, day.isoformat(), meal_type)
                )
            day += timedelta(days=1)
        ingredients = self.consolidator.merge(self.consolidator.expand(foods))
        _logger.info(
            "Shopping list generated: user=%s foods=%s ingredients=%s",
            username,
            len(foods),
            len(ingredients),
        )
        return ingredients

    def total_cost(self, ingredients: Iterable[Ingredient]) -> float:
        """Price a list with the catalog's ingredient prices."""
        return self.consolidator.total_cost(
            ingredients, self.consolidator.catalog.ingredient_prices
        )

"""Shared test fixtures."""

import pytest

from diet_tracker.adapters.memory import (
    InMemoryDietProfileRepository,
    InMemoryFoodLogRepository,
    InMemoryGoalRepository,
)
from diet_tracker.catalog import Catalog, load_catalog
from diet_tracker.config import Settings
from diet_tracker.containers import AppContainer
from diet_tracker.domain.foods import FoodEntry
from diet_tracker.services.meals import MealPlanningService
from diet_tracker.services.nutrition import NutritionAggregator
from diet_tracker.services.recommendations import DietRecommendationService
from diet_tracker.services.shopping import (
    ShoppingListConsolidator,
    ShoppingListService,
)

APPLE = FoodEntry(
    name="Apple",
    grams=100,
    calories=52,
    protein_g=0.3,
    carbs_g=14.0,
    fat_g=0.2,
    fiber_g=2.4,
    sugar_g=10.3,
    sodium_mg=1.0,
)
EGG = FoodEntry(
    name="Egg",
    grams=50,
    calories=78,
    protein_g=6.3,
    carbs_g=0.6,
    fat_g=5.3,
    fiber_g=0.0,
    sugar_g=0.6,
    sodium_mg=62.0,
)
MILK = FoodEntry(
    name="Milk",
    grams=100,
    calories=42,
    protein_g=3.4,
    carbs_g=5.0,
    fat_g=1.0,
    fiber_g=0.0,
    sugar_g=5.0,
    sodium_mg=44.0,
)
SCRAMBLED_EGGS = FoodEntry(name="Scrambled Eggs", grams=150, calories=220)


@pytest.fixture
def settings() -> Settings:
    return Settings(storage_backend="memory")


@pytest.fixture
def catalog() -> Catalog:
    return load_catalog()


@pytest.fixture
def goal_repository() -> InMemoryGoalRepository:
    return InMemoryGoalRepository()


@pytest.fixture
def food_log_repository() -> InMemoryFoodLogRepository:
    return InMemoryFoodLogRepository()


@pytest.fixture
def profile_repository() -> InMemoryDietProfileRepository:
    return InMemoryDietProfileRepository()


@pytest.fixture
def meal_planning_service(
    food_log_repository: InMemoryFoodLogRepository,
) -> MealPlanningService:
    return MealPlanningService(food_log_repository)


@pytest.fixture
def aggregator(
    goal_repository: InMemoryGoalRepository,
    meal_planning_service: MealPlanningService,
) -> NutritionAggregator:
    return NutritionAggregator(
        goal_repository=goal_repository, food_log=meal_planning_service
    )


@pytest.fixture
def consolidator(catalog: Catalog) -> ShoppingListConsolidator:
    return ShoppingListConsolidator(catalog)


@pytest.fixture
def shopping_list_service(
    consolidator: ShoppingListConsolidator,
    meal_planning_service: MealPlanningService,
) -> ShoppingListService:
    return ShoppingListService(
        consolidator=consolidator, meal_plans=meal_planning_service
    )


@pytest.fixture
def recommendation_service(
    profile_repository: InMemoryDietProfileRepository, catalog: Catalog
) -> DietRecommendationService:
    return DietRecommendationService(repository=profile_repository, catalog=catalog)


@pytest.fixture
def container(  # noqa: PLR0913
    settings: Settings,
    catalog: Catalog,
    meal_planning_service: MealPlanningService,
    aggregator: NutritionAggregator,
    shopping_list_service: ShoppingListService,
    recommendation_service: DietRecommendationService,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        catalog=catalog,
        meal_planning_service=meal_planning_service,
        nutrition_aggregator=aggregator,
        shopping_list_service=shopping_list_service,
        recommendation_service=recommendation_service,
    )

"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from diet_tracker.adapters.memory import (
    InMemoryDietProfileRepository,
    InMemoryFoodLogRepository,
    InMemoryGoalRepository,
)
from diet_tracker.adapters.supabase_diet_profile_repository import (
    SupabaseDietProfileRepository,
)
from diet_tracker.adapters.supabase_food_log_repository import (
    SupabaseFoodLogRepository,
)
from diet_tracker.adapters.supabase_goal_repository import SupabaseGoalRepository
from diet_tracker.catalog import Catalog, load_catalog
from diet_tracker.config import STORAGE_SUPABASE, Settings, parse_storage_backend
from diet_tracker.services.meals import FoodLogRepository, MealPlanningService
from diet_tracker.services.nutrition import GoalRepository, NutritionAggregator
from diet_tracker.services.recommendations import (
    DietProfileRepository,
    DietRecommendationService,
)
from diet_tracker.services.shopping import (
    ShoppingListConsolidator,
    ShoppingListService,
)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog: Catalog
    meal_planning_service: MealPlanningService
    nutrition_aggregator: NutritionAggregator
    shopping_list_service: ShoppingListService
    recommendation_service: DietRecommendationService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    goal_repository, food_log_repository, profile_repository = _build_repositories(
        resolved_settings
    )
    catalog = load_catalog()
    meal_planning_service = MealPlanningService(food_log_repository)
    nutrition_aggregator = NutritionAggregator(
        goal_repository=goal_repository,
        food_log=meal_planning_service,
    )
    shopping_list_service = ShoppingListService(
        consolidator=ShoppingListConsolidator(catalog),
        meal_plans=meal_planning_service,
    )
    recommendation_service = DietRecommendationService(
        repository=profile_repository,
        catalog=catalog,
    )
    return AppContainer(
        settings=resolved_settings,
        catalog=catalog,
        meal_planning_service=meal_planning_service,
        nutrition_aggregator=nutrition_aggregator,
        shopping_list_service=shopping_list_service,
        recommendation_service=recommendation_service,
    )


def _build_repositories(
    settings: Settings,
) -> tuple[GoalRepository, FoodLogRepository, DietProfileRepository]:
    if parse_storage_backend(settings.storage_backend) != STORAGE_SUPABASE:
        return (
            InMemoryGoalRepository(),
            InMemoryFoodLogRepository(),
            InMemoryDietProfileRepository(),
        )
    if not settings.supabase_url or not settings.supabase_service_key:
        raise RuntimeError(
            "Supabase storage requires SUPABASE_URL and SUPABASE_SERVICE_KEY"
        )
    client = create_client(settings.supabase_url, settings.supabase_service_key)
    return (
        SupabaseGoalRepository(client),
        SupabaseFoodLogRepository(client),
        SupabaseDietProfileRepository(client),
    )

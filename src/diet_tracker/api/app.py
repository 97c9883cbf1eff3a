"""FastAPI application factory."""

import logging
from dataclasses import asdict
from datetime import date, timedelta

from fastapi import FastAPI, HTTPException, Request, status

from diet_tracker.api.models import (
    BodyMetricsRequest,
    DietProfileRequest,
    FoodRequest,
    GoalsRequest,
    MealPlanRequest,
)
from diet_tracker.app_logging import configure_logging
from diet_tracker.containers import AppContainer
from diet_tracker.domain.foods import MEAL_TYPES, FoodEntry
from diet_tracker.domain.nutrition import NutritionGoal, NutritionReport
from diet_tracker.domain.recommendations import DietProfile, DietRecommendation
from diet_tracker.domain.shopping import Ingredient
from diet_tracker.services.meals import MAX_YEAR, MIN_YEAR, is_valid_date
from diet_tracker.services.nutrition import suggested_calories, summarize_period

WEEK_DAYS = 7
MAX_SHOPPING_LIST_DAYS = 31


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Diet Tracker")
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/users/{username}/goals")
    async def get_goals(username: str, request: Request) -> dict[str, object]:
        """Return the user's goals or the defaults."""
        state_container: AppContainer = request.app.state.container
        return _goal_payload(state_container.nutrition_aggregator.get_goals(username))

    @app.put("/users/{username}/goals")
    async def set_goals(
        username: str, payload: GoalsRequest, request: Request
    ) -> dict[str, object]:
        """Replace the user's goals."""
        state_container: AppContainer = request.app.state.container
        aggregator = state_container.nutrition_aggregator
        try:
            aggregator.set_goals(
                username,
                payload.calorie_goal,
                payload.protein_goal_g,
                payload.carb_goal_g,
                payload.fat_goal_g,
            )
        except Exception as exc:
            logger.exception("Failed to save goals", extra={"username": username})
            raise _storage_error() from exc
        return _goal_payload(aggregator.get_goals(username))

    @app.post("/users/{username}/food-log", status_code=status.HTTP_201_CREATED)
    async def log_food(
        username: str, payload: FoodRequest, request: Request
    ) -> dict[str, object]:
        """Log a food for a date."""
        state_container: AppContainer = request.app.state.container
        meals = state_container.meal_planning_service
        day = payload.date.isoformat()
        try:
            saved = meals.log_food(username, day, payload.to_entry())
        except Exception as exc:
            logger.exception("Failed to log food", extra={"username": username})
            raise _storage_error() from exc
        if not saved:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST)
        return {
            "date": day,
            "foods": [
                _food_payload(food) for food in meals.get_food_log(username, day)
            ],
            "total_calories": meals.get_total_calories(username, day),
        }

    @app.post("/users/{username}/meal-plan", status_code=status.HTTP_201_CREATED)
    async def add_meal_plan(
        username: str, payload: MealPlanRequest, request: Request
    ) -> dict[str, object]:
        """Plan a food for a meal."""
        state_container: AppContainer = request.app.state.container
        meals = state_container.meal_planning_service
        day = payload.date.isoformat()
        try:
            saved = meals.add_meal_plan(
                username, day, payload.meal_type, payload.to_entry()
            )
        except Exception as exc:
            logger.exception("Failed to plan meal", extra={"username": username})
            raise _storage_error() from exc
        if not saved:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"meal_type must be one of: {', '.join(MEAL_TYPES)}",
            )
        meal_type = payload.meal_type.strip().lower()
        return {
            "date": day,
            "meal_type": meal_type,
            "foods": [
                _food_payload(food)
                for food in meals.get_meal_plan(username, day, meal_type)
            ],
        }

    @app.get("/users/{username}/reports/daily")
    async def daily_report(
        username: str, date: date, request: Request
    ) -> dict[str, object]:
        """Return the nutrition report for one day."""
        state_container: AppContainer = request.app.state.container
        _require_supported_date(date)
        report = state_container.nutrition_aggregator.build_daily_report(
            username, date.isoformat()
        )
        return _report_payload(report)

    @app.get("/users/{username}/reports/weekly")
    async def weekly_report(
        username: str, start: date, request: Request
    ) -> dict[str, object]:
        """Return seven daily reports starting at a date, with period totals.

        The dates are generated here and never blank, so the response always
        holds exactly seven reports.
        """
        state_container: AppContainer = request.app.state.container
        _require_supported_date(start)
        days = [start + timedelta(days=offset) for offset in range(WEEK_DAYS)]
        _require_supported_date(days[-1])
        dates = [day.isoformat() for day in days]
        reports = state_container.nutrition_aggregator.build_weekly_report(
            username, dates
        )
        summary = summarize_period(reports)
        return {
            "reports": [_report_payload(report) for report in summary.reports],
            "total_calories": summary.total_calories,
            "total_protein_g": summary.total_protein_g,
            "total_carbs_g": summary.total_carbs_g,
            "total_fat_g": summary.total_fat_g,
            "avg_calories": summary.avg_calories,
            "avg_protein_g": summary.avg_protein_g,
            "avg_carbs_g": summary.avg_carbs_g,
            "avg_fat_g": summary.avg_fat_g,
        }

    @app.get("/users/{username}/shopping-list")
    async def shopping_list(
        username: str, start: date, end: date, request: Request
    ) -> dict[str, object]:
        """Return the consolidated shopping list for a date range."""
        state_container: AppContainer = request.app.state.container
        _require_supported_date(start)
        _require_supported_date(end)
        if (end - start).days >= MAX_SHOPPING_LIST_DAYS:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=f"date range must not exceed {MAX_SHOPPING_LIST_DAYS} days",
            )
        service = state_container.shopping_list_service
        ingredients = service.generate(username, start, end)
        categorized = service.consolidator.categorize(ingredients)
        return {
            "start": start.isoformat(),
            "end": end.isoformat(),
            "categories": {
                category: [_ingredient_payload(item) for item in items]
                for category, items in categorized.items()
            },
            "total_items": len(ingredients),
            "total_cost": round(service.total_cost(ingredients), 2),
        }

    @app.get("/users/{username}/diet-profile")
    async def get_diet_profile(username: str, request: Request) -> dict[str, object]:
        """Return the user's diet profile."""
        state_container: AppContainer = request.app.state.container
        return _profile_payload(
            state_container.recommendation_service.get_profile(username)
        )

    @app.put("/users/{username}/diet-profile")
    async def set_diet_profile(
        username: str, payload: DietProfileRequest, request: Request
    ) -> dict[str, object]:
        """Replace the user's diet profile."""
        state_container: AppContainer = request.app.state.container
        service = state_container.recommendation_service
        try:
            service.set_profile(username, payload.to_profile())
        except Exception as exc:
            logger.exception(
                "Failed to save diet profile", extra={"username": username}
            )
            raise _storage_error() from exc
        return _profile_payload(service.get_profile(username))

    @app.post("/users/{username}/recommendation")
    async def recommendation(
        username: str, payload: BodyMetricsRequest, request: Request
    ) -> dict[str, object]:
        """Return a personalized diet recommendation."""
        state_container: AppContainer = request.app.state.container
        result = state_container.recommendation_service.recommend(
            username,
            payload.gender,
            payload.age,
            payload.height_cm,
            payload.weight_kg,
            payload.activity_level,
        )
        return _recommendation_payload(result)

    @app.post("/calories/suggested")
    async def calories(payload: BodyMetricsRequest) -> dict[str, int]:
        """Return the suggested daily calories for body data."""
        return {
            "calories": suggested_calories(
                payload.gender,
                payload.age,
                payload.height_cm,
                payload.weight_kg,
                payload.activity_level,
            )
        }

    @app.get("/catalog/foods")
    async def catalog_foods(request: Request) -> dict[str, object]:
        """Return common foods with nutrients."""
        state_container: AppContainer = request.app.state.container
        return {
            "foods": [
                _food_payload(food)
                for food in state_container.catalog.common_foods_with_nutrients()
            ]
        }

    @app.get("/catalog/options/{meal_type}")
    async def catalog_options(meal_type: str, request: Request) -> dict[str, object]:
        """Return sample foods for a meal type."""
        state_container: AppContainer = request.app.state.container
        options = state_container.catalog.options_for(meal_type)
        if not options:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return {
            "meal_type": meal_type.lower(),
            "options": [_food_payload(food) for food in options],
        }

    @app.get("/catalog/diet-plans")
    async def catalog_diet_plans(request: Request) -> dict[str, object]:
        """Return example diet plans."""
        state_container: AppContainer = request.app.state.container
        return {"plans": state_container.catalog.example_diet_plans()}

    return app


def _require_supported_date(value: date) -> None:
    if not is_valid_date(value.year, value.month, value.day):
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"date must be between {MIN_YEAR} and {MAX_YEAR}",
        )


def _storage_error() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail="Storage is unavailable, please try again.",
    )


def _food_payload(food: FoodEntry) -> dict[str, object]:
    return asdict(food)


def _goal_payload(goal: NutritionGoal) -> dict[str, object]:
    return asdict(goal)


def _ingredient_payload(ingredient: Ingredient) -> dict[str, object]:
    return {
        "name": ingredient.name,
        "amount": ingredient.amount,
        "unit": ingredient.unit,
    }


def _report_payload(report: NutritionReport) -> dict[str, object]:
    return {
        "date": report.date,
        "total_calories": report.total_calories,
        "total_protein_g": report.total_protein_g,
        "total_carbs_g": report.total_carbs_g,
        "total_fat_g": report.total_fat_g,
        "total_fiber_g": report.total_fiber_g,
        "total_sugar_g": report.total_sugar_g,
        "total_sodium_mg": report.total_sodium_mg,
        "goal": _goal_payload(report.goal),
        "calorie_percentage": report.calorie_percentage,
        "protein_percentage": report.protein_percentage,
        "carb_percentage": report.carb_percentage,
        "fat_percentage": report.fat_percentage,
    }


def _profile_payload(profile: DietProfile) -> dict[str, object]:
    return {
        "diet_type": profile.diet_type.value,
        "weight_goal": profile.weight_goal.value,
        "health_conditions": profile.health_conditions,
        "excluded_foods": profile.excluded_foods,
    }


def _recommendation_payload(result: DietRecommendation) -> dict[str, object]:
    return {
        "daily_calories": result.daily_calories,
        "macros": asdict(result.macros),
        "meals": [
            {
                "meal_type": meal.meal_type,
                "foods": [_food_payload(food) for food in meal.foods],
                "total_calories": meal.total_calories,
                "target_calories": meal.target_calories,
                "target_protein_g": meal.target_protein_g,
                "target_carbs_g": meal.target_carbs_g,
                "target_fat_g": meal.target_fat_g,
            }
            for meal in result.meals
        ],
        "guidelines": result.guidelines,
    }

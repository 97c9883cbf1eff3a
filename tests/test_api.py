"""Tests for the HTTP API."""

from dataclasses import dataclass, replace

from fastapi.testclient import TestClient

from diet_tracker.api.app import create_app
from diet_tracker.containers import AppContainer
from diet_tracker.domain.nutrition import NutritionGoal
from diet_tracker.services.nutrition import NutritionAggregator


@dataclass
class FailingGoalRepository:
    """Goal repository whose writes always fail."""

    def get_goal(self, username: str) -> NutritionGoal | None:
        return None

    def save_goal(self, username: str, goal: NutritionGoal) -> None:
        raise RuntimeError("storage down")


def _client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))


def test_health(container: AppContainer) -> None:
    response = _client(container).get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_goals_default_and_update(container: AppContainer) -> None:
    client = _client(container)

    default = client.get("/users/alice/goals")
    updated = client.put(
        "/users/alice/goals",
        json={
            "calorie_goal": 1800,
            "protein_goal_g": 90,
            "carb_goal_g": 200,
            "fat_goal_g": 60,
        },
    )

    assert default.json()["calorie_goal"] == 2000
    assert updated.status_code == 200
    assert updated.json() == {
        "calorie_goal": 1800,
        "protein_goal_g": 90.0,
        "carb_goal_g": 200.0,
        "fat_goal_g": 60.0,
    }
    assert client.get("/users/alice/goals").json()["calorie_goal"] == 1800


def test_goals_reject_non_positive_values(container: AppContainer) -> None:
    response = _client(container).put(
        "/users/alice/goals",
        json={
            "calorie_goal": 0,
            "protein_goal_g": 90,
            "carb_goal_g": 200,
            "fat_goal_g": 60,
        },
    )

    assert response.status_code == 422


def test_goal_storage_failure_returns_503(container: AppContainer) -> None:
    failing = replace(
        container,
        nutrition_aggregator=NutritionAggregator(
            goal_repository=FailingGoalRepository()
        ),
    )

    response = _client(failing).put(
        "/users/alice/goals",
        json={
            "calorie_goal": 1800,
            "protein_goal_g": 90,
            "carb_goal_g": 200,
            "fat_goal_g": 60,
        },
    )

    assert response.status_code == 503


def test_food_log_and_daily_report(container: AppContainer) -> None:
    client = _client(container)

    logged = client.post(
        "/users/alice/food-log",
        json={
            "date": "2025-03-01",
            "name": "Apple",
            "grams": 100,
            "calories": 52,
            "protein_g": 0.3,
            "carbs_g": 14.0,
            "fat_g": 0.2,
        },
    )
    client.post(
        "/users/alice/food-log",
        json={"date": "2025-03-01", "name": "Toast", "grams": 30, "calories": 80},
    )
    report = client.get("/users/alice/reports/daily", params={"date": "2025-03-01"})

    assert logged.status_code == 201
    assert logged.json()["total_calories"] == 52
    body = report.json()
    assert body["total_calories"] == 132
    assert body["total_carbs_g"] == 14.0
    assert body["calorie_percentage"] == 6.6
    assert body["goal"]["calorie_goal"] == 2000


def test_food_log_validation(container: AppContainer) -> None:
    response = _client(container).post(
        "/users/alice/food-log",
        json={"date": "not-a-date", "name": "Apple", "grams": 100, "calories": 52},
    )

    assert response.status_code == 422


def test_meal_plan_rejects_unknown_meal_type(container: AppContainer) -> None:
    response = _client(container).post(
        "/users/alice/meal-plan",
        json={
            "date": "2025-03-01",
            "meal_type": "brunch",
            "name": "Scrambled Eggs",
            "grams": 150,
            "calories": 220,
        },
    )

    assert response.status_code == 400


def test_weekly_report_covers_seven_days(container: AppContainer) -> None:
    client = _client(container)
    client.post(
        "/users/alice/food-log",
        json={"date": "2025-03-03", "name": "Toast", "grams": 30, "calories": 70},
    )

    response = client.get("/users/alice/reports/weekly", params={"start": "2025-03-01"})

    body = response.json()
    assert [report["date"] for report in body["reports"]] == [
        "2025-03-01",
        "2025-03-02",
        "2025-03-03",
        "2025-03-04",
        "2025-03-05",
        "2025-03-06",
        "2025-03-07",
    ]
    assert body["total_calories"] == 70
    assert body["avg_calories"] == 10.0


def test_shopping_list_from_meal_plans(container: AppContainer) -> None:
    client = _client(container)
    planned = client.post(
        "/users/alice/meal-plan",
        json={
            "date": "2025-03-01",
            "meal_type": "Breakfast",
            "name": "Scrambled Eggs",
            "grams": 150,
            "calories": 220,
        },
    )

    response = client.get(
        "/users/alice/shopping-list",
        params={"start": "2025-03-01", "end": "2025-03-07"},
    )

    assert planned.status_code == 201
    assert planned.json()["meal_type"] == "breakfast"
    body = response.json()
    assert list(body["categories"]) == ["Dairy", "Spices"]
    assert body["categories"]["Spices"] == [
        {"name": "Salt", "amount": 1.0, "unit": "pinch"}
    ]
    assert body["total_items"] == 3
    assert body["total_cost"] == 11.65


def test_diet_profile_and_recommendation(container: AppContainer) -> None:
    client = _client(container)

    saved = client.put(
        "/users/alice/diet-profile",
        json={"diet_type": "LOW_CARB", "weight_goal": "LOSE"},
    )
    response = client.post(
        "/users/alice/recommendation",
        json={
            "gender": "M",
            "age": 30,
            "height_cm": 180,
            "weight_kg": 80,
            "activity_level": 3,
        },
    )

    assert saved.json()["diet_type"] == "LOW_CARB"
    body = response.json()
    assert body["daily_calories"] == 2345
    assert body["macros"] == {"protein_g": 176, "carbs_g": 117, "fat_g": 130}
    assert [meal["meal_type"] for meal in body["meals"]] == [
        "Breakfast",
        "Lunch",
        "Dinner",
        "Snack",
    ]


def test_diet_profile_rejects_unknown_diet(container: AppContainer) -> None:
    response = _client(container).put(
        "/users/alice/diet-profile", json={"diet_type": "CARNIVORE"}
    )

    assert response.status_code == 422


def test_suggested_calories_endpoint(container: AppContainer) -> None:
    response = _client(container).post(
        "/calories/suggested",
        json={
            "gender": "M",
            "age": 30,
            "height_cm": 180,
            "weight_kg": 80,
            "activity_level": 3,
        },
    )

    assert response.json() == {"calories": 2759}


def test_catalog_endpoints(container: AppContainer) -> None:
    client = _client(container)

    foods = client.get("/catalog/foods").json()["foods"]
    options = client.get("/catalog/options/Dinner")
    missing = client.get("/catalog/options/brunch")
    plans = client.get("/catalog/diet-plans").json()["plans"]

    assert len(foods) == 15
    assert options.json()["meal_type"] == "dinner"
    assert len(options.json()["options"]) == 8
    assert missing.status_code == 404
    assert len(plans) == 5


def test_food_log_rejects_blank_name(container: AppContainer) -> None:
    client = _client(container)

    response = client.post(
        "/users/alice/food-log",
        json={"date": "2025-03-01", "name": "   ", "grams": 100, "calories": 52},
    )

    assert response.status_code == 422
    assert container.meal_planning_service.get_food_log("alice", "2025-03-01") == []


def test_food_log_stores_stripped_name(container: AppContainer) -> None:
    response = _client(container).post(
        "/users/alice/food-log",
        json={"date": "2025-03-01", "name": "  Apple ", "grams": 100, "calories": 52},
    )

    assert response.status_code == 201
    assert response.json()["foods"][0]["name"] == "Apple"


def test_food_log_rejects_unsupported_year(container: AppContainer) -> None:
    client = _client(container)

    too_early = client.post(
        "/users/alice/food-log",
        json={"date": "1900-01-01", "name": "Apple", "grams": 100, "calories": 52},
    )
    too_late = client.post(
        "/users/alice/meal-plan",
        json={
            "date": "2101-01-01",
            "meal_type": "lunch",
            "name": "Apple",
            "grams": 100,
            "calories": 52,
        },
    )

    assert too_early.status_code == 422
    assert too_late.status_code == 422


def test_reports_reject_unsupported_dates(container: AppContainer) -> None:
    client = _client(container)

    daily = client.get("/users/alice/reports/daily", params={"date": "2024-12-31"})
    weekly = client.get("/users/alice/reports/weekly", params={"start": "2100-12-28"})

    assert daily.status_code == 422
    assert weekly.status_code == 422


def test_weekly_report_always_has_seven_reports(container: AppContainer) -> None:
    response = _client(container).get(
        "/users/alice/reports/weekly", params={"start": "2100-12-25"}
    )

    assert response.status_code == 200
    assert len(response.json()["reports"]) == 7


def test_shopping_list_rejects_long_or_unsupported_ranges(
    container: AppContainer,
) -> None:
    client = _client(container)

    too_long = client.get(
        "/users/alice/shopping-list",
        params={"start": "2025-01-01", "end": "2600-12-31"},
    )
    one_day_over = client.get(
        "/users/alice/shopping-list",
        params={"start": "2025-03-01", "end": "2025-04-01"},
    )
    early_start = client.get(
        "/users/alice/shopping-list",
        params={"start": "2024-12-30", "end": "2025-01-02"},
    )
    longest = client.get(
        "/users/alice/shopping-list",
        params={"start": "2025-03-01", "end": "2025-03-31"},
    )

    assert too_long.status_code == 422
    assert one_day_over.status_code == 422
    assert early_start.status_code == 422
    assert longest.status_code == 200


def test_shopping_list_inverted_range_is_empty(container: AppContainer) -> None:
    response = _client(container).get(
        "/users/alice/shopping-list",
        params={"start": "2025-03-07", "end": "2025-03-01"},
    )

    assert response.status_code == 200
    assert response.json()["total_items"] == 0

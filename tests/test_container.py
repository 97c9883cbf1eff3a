"""Tests for container wiring."""

import pytest

from diet_tracker.config import Settings, parse_storage_backend
from diet_tracker.containers import build_container
from tests.conftest import APPLE


def test_build_container_creates_services(settings: Settings) -> None:
    container = build_container(settings)

    assert container.meal_planning_service is not None
    assert container.shopping_list_service.consolidator.catalog is container.catalog


def test_container_services_share_storage(settings: Settings) -> None:
    container = build_container(settings)

    container.meal_planning_service.log_food("alice", "2025-03-01", APPLE)
    report = container.nutrition_aggregator.build_daily_report("alice", "2025-03-01")

    assert report.total_calories == 52


def test_supabase_backend_requires_credentials() -> None:
    settings = Settings(
        storage_backend="supabase", supabase_url=None, supabase_service_key=None
    )

    with pytest.raises(RuntimeError):
        build_container(settings)


def test_parse_storage_backend() -> None:
    assert parse_storage_backend(" Supabase ") == "supabase"
    assert parse_storage_backend("memory") == "memory"
    assert parse_storage_backend("redis") == "memory"
    assert parse_storage_backend(None) == "memory"

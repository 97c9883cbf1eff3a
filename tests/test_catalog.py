"""Tests for the bundled catalog."""

from diet_tracker.catalog import Catalog
from diet_tracker.domain.foods import MEAL_TYPES
from diet_tracker.domain.shopping import CATEGORIES


def test_category_lookup(catalog: Catalog) -> None:
    assert catalog.category_for("Apple") == "Fruits"
    assert catalog.category_for("Eggs") == "Dairy"
    assert catalog.category_for("Salt") == "Spices"
    assert catalog.category_for("Unobtainium") == "Other"


def test_recipe_categories_are_known(catalog: Catalog) -> None:
    for components in catalog.recipes.values():
        for component in components:
            assert component.category in CATEGORIES


def test_every_meal_option_has_a_recipe(catalog: Catalog) -> None:
    for meal_type in MEAL_TYPES:
        options = catalog.options_for(meal_type)
        assert len(options) == 8
        for option in options:
            assert catalog.recipe_for(option.name) is not None


def test_options_lookup_is_case_insensitive(catalog: Catalog) -> None:
    assert catalog.options_for("Dinner") == catalog.dinner_options()
    assert catalog.breakfast_options()[0].name == "Scrambled Eggs"
    assert catalog.options_for("brunch") == []


def test_common_foods_carry_nutrients(catalog: Catalog) -> None:
    foods = catalog.common_foods_with_nutrients()

    assert len(foods) == 15
    assert all(food.has_nutrients for food in foods)


def test_example_diet_plans(catalog: Catalog) -> None:
    plans = catalog.example_diet_plans()

    assert len(plans) == 5
    assert plans[0].startswith("Balanced Diet Plan")


def test_catalog_tables_are_read_only(catalog: Catalog) -> None:
    plans = catalog.example_diet_plans()
    plans.clear()

    assert len(catalog.example_diet_plans()) == 5
    assert "Milk" in catalog.ingredient_prices

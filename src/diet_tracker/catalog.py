"""Static food, recipe and ingredient catalogs."""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from diet_tracker.domain.foods import MEAL_TYPES, FoodEntry
from diet_tracker.domain.shopping import DEFAULT_CATEGORY, RecipeComponent

_INGREDIENT_CATEGORIES: dict[str, tuple[str, ...]] = {
    "Fruits": (
        "Apple",
        "Avocado",
        "Banana",
        "Blueberry",
        "Dried Cranberries",
        "Lemon",
        "Lime",
        "Orange",
        "Raspberry",
        "Strawberry",
    ),
    "Vegetables": (
        "Bell Pepper",
        "Broccoli",
        "Cabbage",
        "Carrot",
        "Cauliflower",
        "Chickpeas",
        "Cucumber",
        "Eggplant",
        "Garlic",
        "Kale",
        "Lentils",
        "Lettuce",
        "Olives",
        "Onion",
        "Potato",
        "Spinach",
        "Sweet Potato",
        "Tomato",
        "Zucchini",
    ),
    "Meat": (
        "Beef Steak",
        "Chicken Breast",
        "Ground Beef",
        "Salmon",
        "Shrimp",
        "Tuna",
        "Turkey",
        "White Fish",
    ),
    "Dairy": (
        "Almond Milk",
        "Butter",
        "Cheese",
        "Cottage Cheese",
        "Eggs",
        "Feta Cheese",
        "Greek Yogurt",
        "Milk",
        "Parmesan Cheese",
        "Soy Milk",
        "Yogurt",
    ),
    "Grains": (
        "Bread",
        "Brown Rice",
        "Crackers",
        "Flour",
        "Oats",
        "Pasta",
        "Pita Bread",
        "Quinoa",
        "Tortilla",
        "White Rice",
        "Whole Wheat Bread",
        "Whole Wheat Pasta",
    ),
    "Spices": ("Curry Powder", "Parsley", "Pepper", "Rosemary", "Salt"),
    "Oils": ("Coconut Oil", "Olive Oil"),
    "Sweeteners": ("Dark Chocolate", "Honey", "Maple Syrup"),
    "Other": (
        "Almond Butter",
        "Almonds",
        "Chia Seeds",
        "Coconut Milk",
        "Flax Seeds",
        "Hot Sauce",
        "Hummus",
        "Mayonnaise",
        "Peanut Butter",
        "Peanuts",
        "Protein Bar",
        "Soy Sauce",
        "Tempeh",
        "Tofu",
        "Tomato Sauce",
        "Vinegar",
        "Walnuts",
    ),
}

_INGREDIENT_PRICES: dict[str, float] = {
    "Tomato": 1.20,
    "Cucumber": 0.90,
    "Lettuce": 1.50,
    "Carrot": 0.75,
    "Onion": 0.60,
    "Garlic": 0.85,
    "Potato": 0.95,
    "Sweet Potato": 1.25,
    "Broccoli": 2.10,
    "Cauliflower": 2.30,
    "Spinach": 1.85,
    "Kale": 2.15,
    "Bell Pepper": 1.35,
    "Zucchini": 1.15,
    "Eggplant": 1.40,
    "Apple": 0.85,
    "Banana": 0.60,
    "Orange": 0.95,
    "Strawberry": 3.50,
    "Blueberry": 4.20,
    "Raspberry": 4.10,
    "Avocado": 2.15,
    "Lemon": 0.75,
    "Lime": 0.80,
    "Chicken Breast": 4.50,
    "Ground Beef": 5.75,
    "Salmon": 7.95,
    "Tuna": 6.50,
    "Eggs": 3.25,
    "Tofu": 2.75,
    "Tempeh": 3.25,
    "Turkey": 5.25,
    "Shrimp": 8.50,
    "Milk": 1.95,
    "Almond Milk": 2.75,
    "Soy Milk": 2.50,
    "Yogurt": 3.50,
    "Greek Yogurt": 4.25,
    "Cheese": 4.50,
    "Feta Cheese": 5.25,
    "Cottage Cheese": 3.95,
    "White Rice": 2.25,
    "Brown Rice": 2.75,
    "Quinoa": 4.50,
    "Oats": 2.95,
    "Bread": 2.50,
    "Whole Wheat Bread": 3.25,
    "Pasta": 1.80,
    "Whole Wheat Pasta": 2.50,
    "Almonds": 5.95,
    "Walnuts": 6.50,
    "Peanuts": 3.95,
    "Chia Seeds": 4.75,
    "Flax Seeds": 3.95,
    "Peanut Butter": 4.25,
    "Almond Butter": 6.95,
    "Olive Oil": 7.95,
    "Coconut Oil": 8.50,
    "Soy Sauce": 3.25,
    "Honey": 4.95,
    "Maple Syrup": 6.75,
    "Salt": 1.25,
    "Pepper": 1.95,
    "Tomato Sauce": 2.25,
    "Hot Sauce": 3.50,
    "Vinegar": 2.75,
    "Hummus": 3.95,
    "Butter": 4.25,
    "Tortilla": 2.50,
    "Flour": 1.50,
    "Protein Bar": 2.50,
    "Dark Chocolate": 3.75,
    "Crackers": 2.20,
    "Chickpeas": 1.85,
    "Parsley": 1.30,
    "Pita Bread": 2.75,
    "Parmesan Cheese": 6.50,
    "Olives": 3.75,
    "Coconut Milk": 3.25,
    "Curry Powder": 3.50,
    "Rosemary": 2.25,
    "Lentils": 2.45,
    "Beef Steak": 12.50,
    "White Fish": 9.25,
    "Cabbage": 1.50,
    "Mayonnaise": 3.25,
    "Dried Cranberries": 4.85,
}

# food name -> (ingredient, amount, unit) for one serving
_RECIPES: dict[str, tuple[tuple[str, float, str], ...]] = {
    "Scrambled Eggs": (
        ("Eggs", 2, "unit"),
        ("Milk", 2, "tbsp"),
        ("Salt", 1, "pinch"),
    ),
    "Oatmeal with Fruits": (
        ("Oats", 80, "g"),
        ("Milk", 200, "ml"),
        ("Banana", 1, "unit"),
        ("Strawberry", 50, "g"),
        ("Honey", 15, "ml"),
    ),
    "Greek Yogurt with Honey": (
        ("Greek Yogurt", 200, "g"),
        ("Honey", 20, "ml"),
        ("Blueberry", 30, "g"),
    ),
    "Whole Grain Toast with Avocado": (
        ("Whole Wheat Bread", 2, "slice"),
        ("Avocado", 1, "unit"),
        ("Lemon", 0.5, "unit"),
        ("Salt", 1, "g"),
        ("Pepper", 1, "g"),
    ),
    "Smoothie Bowl": (
        ("Banana", 1, "unit"),
        ("Strawberry", 100, "g"),
        ("Blueberry", 50, "g"),
        ("Greek Yogurt", 100, "g"),
        ("Almond Milk", 100, "ml"),
        ("Honey", 10, "ml"),
    ),
    "Pancakes with Maple Syrup": (
        ("Flour", 150, "g"),
        ("Eggs", 2, "unit"),
        ("Milk", 200, "ml"),
        ("Butter", 30, "g"),
        ("Maple Syrup", 50, "ml"),
    ),
    "Breakfast Burrito": (
        ("Eggs", 2, "unit"),
        ("Tortilla", 1, "unit"),
        ("Bell Pepper", 0.5, "unit"),
        ("Onion", 0.5, "unit"),
        ("Cheese", 30, "g"),
        ("Salt", 1, "g"),
        ("Pepper", 1, "g"),
    ),
    "Fruit and Nut Granola": (
        ("Oats", 100, "g"),
        ("Almonds", 30, "g"),
        ("Walnuts", 20, "g"),
        ("Honey", 30, "ml"),
        ("Dried Cranberries", 20, "g"),
        ("Coconut Oil", 15, "ml"),
    ),
    "Grilled Chicken Salad": (
        ("Chicken Breast", 150, "g"),
        ("Lettuce", 100, "g"),
        ("Tomato", 1, "unit"),
        ("Cucumber", 0.5, "unit"),
        ("Olive Oil", 15, "ml"),
        ("Lemon", 0.5, "unit"),
        ("Salt", 2, "g"),
        ("Pepper", 1, "g"),
    ),
    "Quinoa Bowl with Vegetables": (
        ("Quinoa", 80, "g"),
        ("Bell Pepper", 0.5, "unit"),
        ("Cucumber", 0.5, "unit"),
        ("Tomato", 1, "unit"),
        ("Avocado", 0.5, "unit"),
        ("Olive Oil", 10, "ml"),
        ("Lemon", 0.5, "unit"),
    ),
    "Turkey and Avocado Sandwich": (
        ("Whole Wheat Bread", 2, "slice"),
        ("Turkey", 100, "g"),
        ("Avocado", 0.5, "unit"),
        ("Lettuce", 20, "g"),
        ("Tomato", 0.5, "unit"),
    ),
    "Vegetable Soup with Bread": (
        ("Carrot", 1, "unit"),
        ("Potato", 1, "unit"),
        ("Onion", 0.5, "unit"),
        ("Zucchini", 0.5, "unit"),
        ("Olive Oil", 10, "ml"),
        ("Bread", 1, "slice"),
        ("Salt", 2, "g"),
    ),
    "Tuna Salad Wrap": (
        ("Tuna", 100, "g"),
        ("Tortilla", 1, "unit"),
        ("Mayonnaise", 15, "g"),
        ("Lettuce", 30, "g"),
        ("Cucumber", 0.5, "unit"),
    ),
    "Falafel with Hummus": (
        ("Chickpeas", 150, "g"),
        ("Onion", 0.5, "unit"),
        ("Garlic", 2, "clove"),
        ("Parsley", 10, "g"),
        ("Hummus", 60, "g"),
        ("Pita Bread", 1, "unit"),
        ("Olive Oil", 15, "ml"),
    ),
    "Caesar Salad with Grilled Chicken": (
        ("Chicken Breast", 120, "g"),
        ("Lettuce", 150, "g"),
        ("Parmesan Cheese", 20, "g"),
        ("Bread", 1, "slice"),
        ("Olive Oil", 15, "ml"),
        ("Lemon", 0.5, "unit"),
    ),
    "Mediterranean Pasta Salad": (
        ("Whole Wheat Pasta", 100, "g"),
        ("Tomato", 1, "unit"),
        ("Cucumber", 0.5, "unit"),
        ("Olives", 30, "g"),
        ("Feta Cheese", 40, "g"),
        ("Olive Oil", 15, "ml"),
    ),
    "Apple with Peanut Butter": (
        ("Apple", 1, "unit"),
        ("Peanut Butter", 30, "g"),
    ),
    "Greek Yogurt with Berries": (
        ("Greek Yogurt", 150, "g"),
        ("Strawberry", 50, "g"),
        ("Blueberry", 50, "g"),
        ("Honey", 10, "ml"),
    ),
    "Mixed Nuts": (
        ("Almonds", 20, "g"),
        ("Walnuts", 15, "g"),
        ("Peanuts", 15, "g"),
    ),
    "Hummus with Carrot Sticks": (
        ("Hummus", 60, "g"),
        ("Carrot", 2, "unit"),
    ),
    "Protein Bar": (("Protein Bar", 1, "unit"),),
    "Fruit Smoothie": (
        ("Banana", 1, "unit"),
        ("Strawberry", 80, "g"),
        ("Yogurt", 100, "g"),
        ("Milk", 100, "ml"),
    ),
    "Dark Chocolate Square": (("Dark Chocolate", 30, "g"),),
    "Cheese and Crackers": (
        ("Cheese", 40, "g"),
        ("Crackers", 40, "g"),
    ),
    "Grilled Salmon with Vegetables": (
        ("Salmon", 200, "g"),
        ("Broccoli", 100, "g"),
        ("Carrot", 1, "unit"),
        ("Olive Oil", 15, "ml"),
        ("Lemon", 1, "unit"),
        ("Garlic", 2, "clove"),
        ("Salt", 2, "g"),
        ("Pepper", 1, "g"),
    ),
    "Beef Stir Fry with Rice": (
        ("Ground Beef", 150, "g"),
        ("White Rice", 80, "g"),
        ("Bell Pepper", 1, "unit"),
        ("Onion", 0.5, "unit"),
        ("Soy Sauce", 15, "ml"),
        ("Olive Oil", 10, "ml"),
    ),
    "Vegetable Curry with Tofu": (
        ("Tofu", 150, "g"),
        ("Coconut Milk", 150, "ml"),
        ("Curry Powder", 5, "g"),
        ("Cauliflower", 100, "g"),
        ("Spinach", 50, "g"),
        ("Brown Rice", 80, "g"),
    ),
    "Spaghetti with Tomato Sauce": (
        ("Pasta", 120, "g"),
        ("Tomato Sauce", 150, "ml"),
        ("Garlic", 2, "clove"),
        ("Parmesan Cheese", 15, "g"),
        ("Olive Oil", 10, "ml"),
    ),
    "Baked Chicken with Sweet Potato": (
        ("Chicken Breast", 180, "g"),
        ("Sweet Potato", 1, "unit"),
        ("Rosemary", 2, "g"),
        ("Olive Oil", 15, "ml"),
        ("Salt", 2, "g"),
    ),
    "Lentil Soup with Bread": (
        ("Lentils", 100, "g"),
        ("Carrot", 1, "unit"),
        ("Onion", 0.5, "unit"),
        ("Garlic", 1, "clove"),
        ("Bread", 1, "slice"),
        ("Olive Oil", 10, "ml"),
    ),
    "Grilled Steak with Mashed Potatoes": (
        ("Beef Steak", 200, "g"),
        ("Potato", 2, "unit"),
        ("Butter", 20, "g"),
        ("Milk", 50, "ml"),
        ("Salt", 2, "g"),
        ("Pepper", 1, "g"),
    ),
    "Fish Tacos with Slaw": (
        ("White Fish", 150, "g"),
        ("Tortilla", 2, "unit"),
        ("Cabbage", 80, "g"),
        ("Lime", 1, "unit"),
        ("Mayonnaise", 15, "g"),
    ),
}

_MEAL_OPTIONS: dict[str, tuple[tuple[str, float, int], ...]] = {
    "breakfast": (
        ("Scrambled Eggs", 150, 220),
        ("Oatmeal with Fruits", 250, 350),
        ("Greek Yogurt with Honey", 200, 180),
        ("Whole Grain Toast with Avocado", 120, 240),
        ("Smoothie Bowl", 300, 280),
        ("Pancakes with Maple Syrup", 180, 450),
        ("Breakfast Burrito", 220, 380),
        ("Fruit and Nut Granola", 100, 410),
    ),
    "lunch": (
        ("Grilled Chicken Salad", 350, 320),
        ("Quinoa Bowl with Vegetables", 280, 390),
        ("Turkey and Avocado Sandwich", 230, 450),
        ("Vegetable Soup with Bread", 400, 280),
        ("Tuna Salad Wrap", 250, 330),
        ("Falafel with Hummus", 300, 480),
        ("Caesar Salad with Grilled Chicken", 320, 370),
        ("Mediterranean Pasta Salad", 280, 410),
    ),
    "snack": (
        ("Apple with Peanut Butter", 150, 220),
        ("Greek Yogurt with Berries", 180, 160),
        ("Mixed Nuts", 50, 290),
        ("Hummus with Carrot Sticks", 150, 180),
        ("Protein Bar", 60, 200),
        ("Fruit Smoothie", 250, 190),
        ("Dark Chocolate Square", 30, 170),
        ("Cheese and Crackers", 100, 230),
    ),
    "dinner": (
        ("Grilled Salmon with Vegetables", 350, 420),
        ("Beef Stir Fry with Rice", 400, 520),
        ("Vegetable Curry with Tofu", 350, 380),
        ("Spaghetti with Tomato Sauce", 320, 450),
        ("Baked Chicken with Sweet Potato", 380, 390),
        ("Lentil Soup with Bread", 400, 350),
        ("Grilled Steak with Mashed Potatoes", 350, 550),
        ("Fish Tacos with Slaw", 300, 410),
    ),
}

# name, grams, calories, protein, carbs, fat, fiber, sugar, sodium (mg)
_CommonFoodRow = tuple[str, float, int, float, float, float, float, float, float]
_COMMON_FOODS: tuple[_CommonFoodRow, ...] = (
    ("Apple", 100, 52, 0.3, 14.0, 0.2, 2.4, 10.3, 1.0),
    ("Banana", 100, 89, 1.1, 22.8, 0.3, 2.6, 12.2, 1.0),
    ("Chicken Breast", 100, 165, 31.0, 0.0, 3.6, 0.0, 0.0, 74.0),
    ("Salmon", 100, 206, 22.0, 0.0, 13.0, 0.0, 0.0, 59.0),
    ("Brown Rice", 100, 112, 2.6, 23.5, 0.9, 1.8, 0.4, 5.0),
    ("Egg", 50, 78, 6.3, 0.6, 5.3, 0.0, 0.6, 62.0),
    ("Broccoli", 100, 34, 2.8, 6.6, 0.4, 2.6, 1.7, 33.0),
    ("Greek Yogurt", 100, 59, 10.0, 3.6, 0.4, 0.0, 3.6, 36.0),
    ("Almonds", 30, 173, 6.0, 6.1, 14.9, 3.5, 1.2, 0.3),
    ("Sweet Potato", 100, 86, 1.6, 20.1, 0.1, 3.0, 4.2, 55.0),
    ("Avocado", 100, 160, 2.0, 8.5, 14.7, 6.7, 0.7, 7.0),
    ("Oatmeal", 100, 68, 2.5, 12.0, 1.4, 2.0, 0.0, 2.0),
    ("Whole Wheat Bread", 30, 76, 3.6, 14.0, 1.1, 2.0, 1.5, 152.0),
    ("Milk", 100, 42, 3.4, 5.0, 1.0, 0.0, 5.0, 44.0),
    ("Ground Beef (Lean)", 100, 250, 26.0, 0.0, 15.0, 0.0, 0.0, 70.0),
)

_DIET_PLANS: tuple[str, ...] = (
    "Balanced Diet Plan:\n"
    "- Focus on whole foods with a balance of all macronutrients\n"
    "- Sample Day: Eggs and oatmeal for breakfast, chicken salad for lunch, "
    "salmon with vegetables and quinoa for dinner, yogurt and fruit for snacks.",
    "Low-Carb Diet Plan:\n"
    "- Reduces carbohydrate intake and increases protein and fat\n"
    "- Sample Day: Eggs and avocado for breakfast, chicken and vegetable salad "
    "for lunch, steak with non-starchy vegetables for dinner, nuts and cheese "
    "for snacks.",
    "High-Protein Diet Plan:\n"
    "- Emphasizes protein intake with moderate carbs and fat\n"
    "- Sample Day: Protein smoothie for breakfast, turkey wrap for lunch, "
    "chicken breast with sweet potato and vegetables for dinner, Greek yogurt "
    "for snacks.",
    "Vegetarian Diet Plan:\n"
    "- Plant-based diet that includes dairy and eggs but no meat\n"
    "- Sample Day: Greek yogurt with granola for breakfast, hummus wrap for "
    "lunch, bean and vegetable stir-fry for dinner, cheese and crackers for "
    "snacks.",
    "Vegan Diet Plan:\n"
    "- Entirely plant-based diet with no animal products\n"
    "- Sample Day: Tofu scramble for breakfast, lentil soup for lunch, tempeh "
    "stir-fry with vegetables and rice for dinner, fruit and nuts for snacks.",
)


@dataclass(frozen=True)
class Catalog:
    """Read-only lookup tables shared by the services."""

    recipes: Mapping[str, tuple[RecipeComponent, ...]]
    ingredient_categories: Mapping[str, str]
    ingredient_prices: Mapping[str, float]
    meal_options: Mapping[str, tuple[FoodEntry, ...]]
    common_foods: tuple[FoodEntry, ...]
    diet_plans: tuple[str, ...]

    def recipe_for(self, food_name: str) -> tuple[RecipeComponent, ...] | None:
        """Return the one-serving recipe for a food, if known."""
        return self.recipes.get(food_name)

    def category_for(self, name: str) -> str:
        """Return the shopping category for an ingredient or food name."""
        return self.ingredient_categories.get(name, DEFAULT_CATEGORY)

    def options_for(self, meal_type: str) -> list[FoodEntry]:
        """Return the sample foods for a meal type (empty when unknown)."""
        return list(self.meal_options.get(meal_type.lower(), ()))

    def breakfast_options(self) -> list[FoodEntry]:
        return self.options_for("breakfast")

    def lunch_options(self) -> list[FoodEntry]:
        return self.options_for("lunch")

    def snack_options(self) -> list[FoodEntry]:
        return self.options_for("snack")

    def dinner_options(self) -> list[FoodEntry]:
        return self.options_for("dinner")

    def common_foods_with_nutrients(self) -> list[FoodEntry]:
        return list(self.common_foods)

    def example_diet_plans(self) -> list[str]:
        return list(self.diet_plans)


def load_catalog() -> Catalog:
    """Build the default catalog from the bundled tables."""
    categories = {
        name: category
        for category, names in _INGREDIENT_CATEGORIES.items()
        for name in names
    }
    recipes = {
        food: tuple(
            RecipeComponent(
                name=name,
                amount=float(amount),
                unit=unit,
                category=categories.get(name, DEFAULT_CATEGORY),
            )
            for name, amount, unit in components
        )
        for food, components in _RECIPES.items()
    }
    meal_options = {
        meal_type: tuple(
            FoodEntry(name=name, grams=float(grams), calories=calories)
            for name, grams, calories in _MEAL_OPTIONS[meal_type]
        )
        for meal_type in MEAL_TYPES
    }
    common_foods = tuple(
        FoodEntry(
            name=name,
            grams=float(grams),
            calories=calories,
            protein_g=protein,
            carbs_g=carbs,
            fat_g=fat,
            fiber_g=fiber,
            sugar_g=sugar,
            sodium_mg=sodium,
        )
        for name, grams, calories, protein, carbs, fat, fiber, sugar, sodium in (
            _COMMON_FOODS
        )
    )
    return Catalog(
        recipes=MappingProxyType(recipes),
        ingredient_categories=MappingProxyType(categories),
        ingredient_prices=MappingProxyType(dict(_INGREDIENT_PRICES)),
        meal_options=MappingProxyType(meal_options),
        common_foods=common_foods,
        diet_plans=_DIET_PLANS,
    )

"""Shared construction of imported recipes and the importer result type."""
from typing import List, NamedTuple

from mealplan.domain.Ingredient import Ingredient
from mealplan.domain.MealSlot import MealSlot
from mealplan.domain.Recipe import DEFAULT_INSTRUCTIONS, Recipe, zero_nutrition
from mealplan.utilities.config import DEFAULT_COOK_TIME, DEFAULT_CUISINE
from mealplan.utilities.constants import MEAL_CATEGORY


class ImportResult(NamedTuple):
    meals: List[MealSlot]
    recipes: List[Recipe]

    def to_dict(self):
        return {
            "meals": [m.to_dict() for m in self.meals],
            "recipes": [r.to_dict() for r in self.recipes],
            "count": len(self.meals),
        }


def build_imported_recipe(recipe_id: str, name: str, meal_type: str, ingredients: List[Ingredient],
                          description: str = "", instructions: List[str] = None) -> Recipe:
    """A one-serving recipe with default metadata for data that only carries ingredients."""
    category = MEAL_CATEGORY.get(meal_type, "Dinner")
    return Recipe(
        id=recipe_id,
        name=name,
        description=description or f"Imported meal with {len(ingredients)} ingredients",
        cook_time=DEFAULT_COOK_TIME,
        servings=1,
        difficulty="Medium",
        category=category,
        cuisine=DEFAULT_CUISINE,
        image="",
        ingredients=ingredients,
        instructions=instructions or list(DEFAULT_INSTRUCTIONS),
        nutrition=zero_nutrition(),
        meal_types=[category],
    )


__all__ = ['ImportResult', 'build_imported_recipe']

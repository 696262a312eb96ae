"""Nutrition aggregation logic for a week of meal slots."""
from collections import defaultdict
from typing import Dict, Any, Iterable

from mealplan.domain.MealSlot import MealSlot
from mealplan.domain.Recipe import NUTRITION_KEYS
from mealplan.utilities.constants import DAYS


def compute_week_nutrition(meals: Iterable[MealSlot]) -> Dict[str, Any]:
    """Aggregate nutrition for the given slots, scaled by each slot's serving ratio.

    Returns structure:
    {
      'days': {
         'Monday': {'calories': float, 'protein': g, 'carbs': g, 'fat': g, 'fiber': g,
                    'meals': { 'Breakfast': { 'name': str, 'servings': n, 'calories': ..., ... }, ... }},
         ...
      },
      'week_totals': { 'calories': float, 'protein': g, 'carbs': g, 'fat': g, 'fiber': g }
    }
    """
    days_result: Dict[str, Dict[str, Any]] = {}
    totals = defaultdict(float)

    for meal in meals:
        if meal.recipe is None:
            continue
        ratio = meal.serving_ratio()
        scaled = {key: meal.recipe.nutrition.get(key, 0) * ratio for key in NUTRITION_KEYS}
        day = days_result.setdefault(meal.day, dict({key: 0.0 for key in NUTRITION_KEYS}, meals={}))
        day['meals'][meal.meal_type] = dict(
            scaled, name=meal.recipe.name, servings=meal.servings or meal.recipe.servings
        )
        for key, value in scaled.items():
            day[key] += value
            totals[key] += value

    ordered_days = {d: days_result[d] for d in DAYS if d in days_result}
    return {
        'days': ordered_days,
        'week_totals': {key: totals[key] for key in NUTRITION_KEYS},
    }


__all__ = ["compute_week_nutrition"]

"""CSV meal-plan importer.

Rows carry one ingredient each (day, meal type, ingredient, portion and an
optional recipe id / name). Rows are grouped per (day, meal type); each group
becomes one Recipe and one MealSlot.
"""
import logging
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from mealplan.domain.Ingredient import Ingredient
from mealplan.domain.MealSlot import MealSlot
from mealplan.domain.Recipe import Recipe
from mealplan.logic.importing.builders import ImportResult, build_imported_recipe
from mealplan.logic.importing.dialects import (
    DEFAULT_DIALECTS, ColumnDialect, resolve_day, resolve_header, resolve_meal_type
)
from mealplan.logic.importing.errors import FormatError
from mealplan.logic.parsing.categories import categorize
from mealplan.logic.parsing.portions import parse_portion
from mealplan.logic.parsing.rows import parse_row
from mealplan.logic.parsing.text_extractor import capitalize_first
from mealplan.utilities.ids import uuid_ids

logger = logging.getLogger(__name__)

HEADER_ERROR = ("CSV must have columns for Day (or Día), MealType (or Tiempo), "
                "Ingredient (or Ingrediente), and Portion (or Porción)")


class _MealGroup:
    def __init__(self):
        self.ingredients: List[Ingredient] = []
        self.recipe_id: str = ""
        self.recipe_name: str = ""


def _cell(row: Sequence[str], index: Optional[int]) -> str:
    if index is None or index >= len(row):
        return ""
    return row[index].strip()


def import_csv(text: str, id_factory: Optional[Callable[[str], str]] = None,
               dialects: Sequence[ColumnDialect] = DEFAULT_DIALECTS) -> ImportResult:
    """Parse CSV text into meal slots and deduplicated recipes.

    Raises:
        FormatError: fewer than two non-blank lines, unrecognized header, or no meals found.
    """
    new_id = id_factory or uuid_ids
    lines = [line.strip() for line in (text or "").lstrip("\ufeff").split("\n")]
    lines = [line for line in lines if line]
    if len(lines) < 2:
        raise FormatError("CSV file must contain at least a header row and one data row.")

    header = parse_row(lines[0])
    resolved = resolve_header(header, dialects)
    if resolved is None:
        raise FormatError(HEADER_ERROR)
    dialect, columns = resolved
    logger.debug("CSV header %s resolved with dialect %s: %s", header, dialect.name, columns)

    groups: Dict[Tuple[str, str], _MealGroup] = {}
    skipped = 0
    for line_no, line in enumerate(lines[1:], start=2):
        row = parse_row(line)
        day = resolve_day(_cell(row, columns.day))
        meal_type = resolve_meal_type(_cell(row, columns.meal_type))
        ingredient_name = _cell(row, columns.ingredient)
        portion = _cell(row, columns.portion)

        if not day or not meal_type or not ingredient_name:
            logger.debug("Skipping row %d: missing day/meal type/ingredient (%s)", line_no, row)
            skipped += 1
            continue
        if not portion or portion.lower() == "nan":
            logger.debug("Skipping row %d: no portion for %s", line_no, ingredient_name)
            skipped += 1
            continue

        amount, unit = parse_portion(portion)
        group = groups.setdefault((day, meal_type), _MealGroup())
        group.ingredients.append(Ingredient(
            id=new_id("ingredient"),
            name=ingredient_name,
            amount=amount,
            unit=unit,
            category=categorize(ingredient_name),
        ))
        group.recipe_id = group.recipe_id or _cell(row, columns.recipe_id)
        group.recipe_name = group.recipe_name or _cell(row, columns.recipe_name)

    meals: List[MealSlot] = []
    recipes: List[Recipe] = []
    recipe_map: Dict[str, Recipe] = {}
    for (day, meal_type), group in groups.items():
        recipe = _resolve_recipe(group, meal_type, recipe_map, new_id)
        if recipe.id not in recipe_map:
            recipe_map[recipe.id] = recipe
            recipes.append(recipe)
        meals.append(MealSlot(day, meal_type, recipe=recipe, servings=1))

    if not meals:
        raise FormatError("No meal plan data found in the CSV. Please ensure the CSV contains "
                          "meal plan data with the correct format.")
    logger.info(f"Imported {len(meals)} meals and {len(recipes)} recipes from CSV "
                f"({skipped} rows skipped, dialect {dialect.name})")
    return ImportResult(meals, recipes)


def _resolve_recipe(group: _MealGroup, meal_type: str, recipe_map: Dict[str, Recipe],
                    new_id: Callable[[str], str]) -> Recipe:
    # First occurrence wins: a reused recipe keeps the ingredients it was built with
    if group.recipe_id and group.recipe_id in recipe_map:
        return recipe_map[group.recipe_id]
    if group.recipe_name:
        for existing in recipe_map.values():
            if existing.name == group.recipe_name:
                return existing
        name = group.recipe_name
    else:
        name = capitalize_first(", ".join(ing.name for ing in group.ingredients[:3]))
    return build_imported_recipe(
        recipe_id=group.recipe_id or new_id("imported-csv"),
        name=name,
        meal_type=meal_type,
        ingredients=group.ingredients,
    )


__all__ = ['import_csv', 'HEADER_ERROR']

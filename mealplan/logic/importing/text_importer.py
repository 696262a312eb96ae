"""Importer for meal plans extracted from PDFs as plain text.

The text is a sequence of lines where short marker lines name the day
("Lunes") or the meal ("Desayuno", "Colación M") and the lines after them
describe the food in free text. Each description line becomes a Recipe via the
free-text extractor; the first one under a (day, meal) marker pair fills that
slot and later ones are kept as alternative recipes.
"""
import re
import logging
from typing import Callable, Dict, List, Optional, Tuple

from mealplan.domain.MealSlot import MealSlot, slot_id
from mealplan.domain.Recipe import Recipe
from mealplan.logic.importing.builders import ImportResult, build_imported_recipe
from mealplan.logic.importing.dialects import DAY_VOCABULARY, MEAL_TYPE_VOCABULARY, fold
from mealplan.logic.importing.errors import FormatError
from mealplan.logic.parsing.text_extractor import extract_from_text
from mealplan.utilities.constants import MIN_MEAL_LINE_LENGTH
from mealplan.utilities.ids import uuid_ids

logger = logging.getLogger(__name__)

MAX_MARKER_WORDS = 4


def _marker_pattern(vocabulary: Dict[str, str]) -> re.Pattern:
    words = sorted(vocabulary, key=len, reverse=True)
    return re.compile(r'\b(' + '|'.join(re.escape(w) for w in words) + r')\b')


DAY_MARKER = _marker_pattern(DAY_VOCABULARY)
MEAL_MARKER = _marker_pattern(MEAL_TYPE_VOCABULARY)


def _find_marker(folded: str, pattern: re.Pattern, vocabulary: Dict[str, str]) -> Optional[str]:
    if len(folded.split()) > MAX_MARKER_WORDS:
        return None
    match = pattern.search(folded)
    return vocabulary[match.group(1)] if match else None


def import_text(text: str, id_factory: Optional[Callable[[str], str]] = None) -> ImportResult:
    """Parse marker-structured text into meal slots and recipes.

    Raises:
        FormatError: when no meal could be extracted.
    """
    new_id = id_factory or uuid_ids
    lines = [line.strip() for line in (text or "").split("\n")]
    lines = [line for line in lines if line]

    meals: List[MealSlot] = []
    recipes: List[Recipe] = []
    seen_recipes: Dict[Tuple[str, str], Recipe] = {}
    filled = set()
    current_day = ""
    current_meal = ""

    for line in lines:
        folded = fold(line)
        day = _find_marker(folded, DAY_MARKER, DAY_VOCABULARY)
        if day:
            current_day = day
            continue
        meal_type = _find_marker(folded, MEAL_MARKER, MEAL_TYPE_VOCABULARY)
        if meal_type:
            current_meal = meal_type
            continue
        if not current_day or not current_meal or len(line) <= MIN_MEAL_LINE_LENGTH:
            continue
        if folded == "opcional":
            continue

        draft = extract_from_text(line, id_factory=new_id)
        if draft is None:
            continue
        key = (draft.name, draft.description)
        recipe = seen_recipes.get(key)
        if recipe is None:
            recipe = build_imported_recipe(
                recipe_id=new_id("imported"),
                name=draft.name,
                meal_type=current_meal,
                ingredients=draft.ingredients,
                description=draft.description,
                instructions=draft.instructions,
            )
            seen_recipes[key] = recipe
            recipes.append(recipe)

        cell = slot_id(current_day, current_meal)
        if cell in filled:
            logger.debug("Slot %s already filled; keeping %r as an alternative", cell, recipe.name)
            continue
        filled.add(cell)
        meals.append(MealSlot(current_day, current_meal, recipe=recipe, servings=1))

    if not meals:
        raise FormatError("No meal plan data found in the text. Please ensure it contains day and "
                          "meal markers followed by meal descriptions.")
    logger.info(f"Imported {len(meals)} meals and {len(recipes)} recipes from text")
    return ImportResult(meals, recipes)


__all__ = ['import_text']

"""Free-text meal extraction for PDF-sourced lines.

Lines look like "Preparar 150 g de pollo con verduras y 1 taza de arroz". Every
"<number> <unit> de <name>" phrase becomes an Ingredient; the rest of the line is
kept only as the recipe description.
"""
import re
import logging
from typing import Callable, List, NamedTuple, Optional

from mealplan.domain.Ingredient import Ingredient
from mealplan.domain.Recipe import DEFAULT_INSTRUCTIONS
from mealplan.logic.parsing.categories import categorize
from mealplan.logic.parsing.units import normalize_unit
from mealplan.utilities.constants import MIN_TEXT_LINE_LENGTH
from mealplan.utilities.ids import uuid_ids

logger = logging.getLogger(__name__)

_NUMBER = r'(\d+(?:[.,]\d+)?)'
# Name stops at punctuation or right before a linking word ("pollo con verduras" -> "pollo")
_NAME = r'([^,.;]+?)(?=\s+(?:con|y|e|en|para|sin|al|o)\b|\s*[,.;]|\s*$)'


def _phrase(units: str) -> re.Pattern:
    return re.compile(_NUMBER + r'\s*(' + units + r')\s+de\s+' + _NAME, re.IGNORECASE)


QUANTITY_PATTERNS: List[re.Pattern] = [
    _phrase(r'kilogramos?|kilos?|kg|gramos?|grs?|g'),                 # weight
    _phrase(r'mililitros?|ml|litros?|lts?|l'),                          # volume
    _phrase(r'tazas?|cucharaditas?|cdita|cdta|cucharadas?|cda'),        # spoons
    _phrase(r'piezas?|pzas?|latas?|rebanadas?'),                        # count
]


class RecipeDraft(NamedTuple):
    name: str
    description: str
    ingredients: List[Ingredient]
    instructions: List[str]
    remainder: str


def capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:]


def extract_from_text(line: str, id_factory: Optional[Callable[[str], str]] = None) -> Optional[RecipeDraft]:
    """Extract a recipe draft from one description line; None for noise lines."""
    if not line or len(line) < MIN_TEXT_LINE_LENGTH:
        return None
    new_id = id_factory or uuid_ids
    clean_text = line.strip()

    ingredients: List[Ingredient] = []
    scratch = clean_text
    for pattern in QUANTITY_PATTERNS:
        for match in pattern.finditer(clean_text):
            name = match.group(3).strip()
            ingredients.append(Ingredient(
                id=new_id('ingredient'),
                name=name,
                amount=float(match.group(1).replace(',', '.')),
                unit=normalize_unit(match.group(2)),
                category=categorize(name),
            ))
            scratch = scratch.replace(match.group(0), '', 1)

    if ingredients:
        recipe_name = f"{ingredients[0].name} recipe"
    else:
        words = [word for word in clean_text.split() if len(word) > 2]
        recipe_name = ' '.join(words[:3]) or clean_text
    logger.debug("Extracted %d ingredients from %r", len(ingredients), clean_text)

    return RecipeDraft(
        name=capitalize_first(recipe_name),
        description=clean_text,
        ingredients=ingredients,
        instructions=list(DEFAULT_INSTRUCTIONS),
        remainder=' '.join(scratch.split()),
    )


__all__ = ['QUANTITY_PATTERNS', 'RecipeDraft', 'capitalize_first', 'extract_from_text']

"""Shopping list builder.

Provides generate_shopping_list(meals, id_factory=None): merges every assigned recipe's
ingredients across the week, scaled by each slot's serving ratio.
"""
import unicodedata
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from mealplan.domain.MealSlot import MealSlot
from mealplan.domain.ShoppingList import ShoppingListItem
from mealplan.utilities.constants import CATEGORY_ORDER
from mealplan.utilities.ids import uuid_ids


def _collation_key(name: str) -> Tuple[str, str]:
    # Accent- and case-insensitive first, raw string as tie-break
    decomposed = unicodedata.normalize('NFKD', name or '')
    base = ''.join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()
    return base, name or ''


def _category_rank(category: str) -> int:
    try:
        return CATEGORY_ORDER.index(category)
    except ValueError:
        return len(CATEGORY_ORDER)


def sort_key(item: ShoppingListItem):
    return (_category_rank(item.category), _collation_key(item.name))


def generate_shopping_list(meals: Iterable[MealSlot],
                           id_factory: Optional[Callable[[str], str]] = None) -> List[ShoppingListItem]:
    """Aggregate ingredients of all assigned slots into a sorted shopping list.

    Args:
        meals: MealSlot objects; slots without a recipe are ignored.
        id_factory: builds item ids from the first ingredient id ("item" when empty),
            so ids stay unique even when ingredient ids repeat.

    Returns:
        New ShoppingListItem objects (completed=False), one per (name, unit),
        ordered by category priority and then by name.
    """
    new_id = id_factory or uuid_ids
    merged: Dict[Tuple[str, str], ShoppingListItem] = {}
    for meal in meals:
        recipe = meal.recipe
        if recipe is None:
            continue
        ratio = meal.serving_ratio()
        for ingredient in recipe.ingredients:
            key = (ingredient.name, ingredient.unit)
            amount = ingredient.amount * ratio
            item = merged.get(key)
            if item is None:
                merged[key] = ShoppingListItem(
                    id=new_id(ingredient.id or "item"),
                    name=ingredient.name,
                    amount=amount,
                    unit=ingredient.unit,
                    category=ingredient.category,
                    completed=False,
                    recipe_names=[recipe.name],
                )
            else:
                item.amount += amount
                item.add_recipe_name(recipe.name)

    return sorted(merged.values(), key=sort_key)


__all__ = ['generate_shopping_list', 'sort_key']

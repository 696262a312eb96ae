"""MealSlot domain entity: one (day, meal type) cell of the weekly grid."""
from typing import Dict, Iterable, List, Optional
from mealplan.domain.Recipe import Recipe
from mealplan.utilities.constants import DAYS, MEAL_TYPES


def slot_id(day: str, meal_type: str) -> str:
    return f"{day}-{meal_type}"


class MealSlot:
    def __init__(self, day: str, meal_type: str, recipe: Optional[Recipe] = None,
                 servings: Optional[float] = None, id: Optional[str] = None):
        if day not in DAYS:
            raise ValueError(f"Unknown day: {day!r}")
        if meal_type not in MEAL_TYPES:
            raise ValueError(f"Unknown meal type: {meal_type!r}")
        self.id = id or slot_id(day, meal_type)
        self.day = day
        self.meal_type = meal_type
        self.recipe = recipe
        self.servings = servings

    def serving_ratio(self) -> float:
        '''
        Effective scale factor for the assigned recipe: (servings or recipe.servings) / recipe.servings.
        '''
        if self.recipe is None:
            raise ValueError(f"Slot {self.id} has no recipe assigned")
        return self.recipe.serving_ratio(self.servings)

    def __str__(self) -> str:
        recipe = self.recipe.name if self.recipe else "-"
        return f"{self.id}: {recipe} ({self.servings or '-'} servings)"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data)
        recipe = d.get("recipe")
        return MealSlot(
            day=d.get("day", ""),
            meal_type=d.get("mealType", d.get("meal_type", "")),
            recipe=Recipe.from_dict(recipe) if recipe else None,
            servings=d.get("servings"),
            id=d.get("id"),
        )

    def to_dict(self):
        data = {"id": self.id, "day": self.day, "mealType": self.meal_type}
        if self.recipe is not None:
            data["recipe"] = self.recipe.to_dict()
        if self.servings is not None:
            data["servings"] = self.servings
        return data


def empty_week() -> List[MealSlot]:
    """The fixed 7 x 5 grid of empty slots, Monday breakfast first."""
    return [MealSlot(day, meal_type) for day in DAYS for meal_type in MEAL_TYPES]


def place_meals(week: Iterable[MealSlot], meals: Iterable[MealSlot]) -> List[MealSlot]:
    """Return a new grid where each slot of `meals` replaces the grid cell with the same id."""
    by_id: Dict[str, MealSlot] = {m.id: m for m in meals}
    return [by_id.get(slot.id, slot) for slot in week]

"""ShoppingList aggregate: merged ingredient totals for a week, with check-off state."""
from typing import Dict, Iterable, List, Optional, Tuple
from mealplan.domain.Ingredient import OTHER


class ShoppingListItem:
    def __init__(self, id: str = "", name: str = "", amount: float = 0, unit: str = "",
                 category: str = OTHER, completed: bool = False,
                 recipe_names: Optional[List[str]] = None):
        self.id = id
        self.name = name
        self.amount = amount
        self.unit = unit
        self.category = category
        self.completed = completed
        self.recipe_names = recipe_names[:] if recipe_names else []

    @property
    def key(self) -> Tuple[str, str]:
        '''Merge key used by the aggregator.'''
        return (self.name, self.unit)

    def add_recipe_name(self, recipe_name: str):
        if recipe_name not in self.recipe_names:
            self.recipe_names.append(recipe_name)

    def __str__(self) -> str:
        mark = "✓" if self.completed else "○"
        return f"{mark} {self.amount:g} {self.unit} {self.name}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return ShoppingListItem(
            id=str(d.get("id", "")),
            name=d.get("name", ""),
            amount=float(d.get("amount", 0) or 0),
            unit=d.get("unit", ""),
            category=d.get("category", OTHER),
            completed=bool(d.get("completed", False)),
            recipe_names=list(d.get("recipeNames", [])),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "amount": self.amount,
            "unit": self.unit,
            "category": self.category,
            "completed": self.completed,
            "recipeNames": list(self.recipe_names),
        }


class ShoppingList:
    def __init__(self, items: Optional[Iterable[ShoppingListItem]] = None):
        self.items: List[ShoppingListItem] = list(items) if items else []

    def get_items(self):
        return self.items

    def carry_over_completed(self, previous: Iterable[ShoppingListItem]) -> "ShoppingList":
        '''
        Copies `completed` flags from a previously generated list onto items with the same (name, unit).
        Items that did not exist before stay unchecked.
        '''
        done: Dict[Tuple[str, str], bool] = {item.key: item.completed for item in previous}
        for item in self.items:
            if done.get(item.key):
                item.completed = True
        return self

    def toggle(self, item_id: str) -> bool:
        for item in self.items:
            if item.id == item_id:
                item.completed = not item.completed
                return item.completed
        raise ValueError(f"Item '{item_id}' not found in shopping list.")

    def completed_count(self) -> int:
        return sum(1 for item in self.items if item.completed)

    def by_category(self) -> Dict[str, List[ShoppingListItem]]:
        '''Groups items by category, preserving list order inside each group.'''
        groups: Dict[str, List[ShoppingListItem]] = {}
        for item in self.items:
            groups.setdefault(item.category, []).append(item)
        return groups

    def __len__(self) -> int:
        return len(self.items)

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(item) for item in self.items)
        return f"Shopping List ({self.completed_count()}/{len(self.items)}):\n\t{items_str}"

    def __repr__(self) -> str:
        return self.__str__()

    def to_dict(self):
        return [item.to_dict() for item in self.items]

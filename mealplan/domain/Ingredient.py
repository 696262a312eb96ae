"""Ingredient domain entity: name, amount, unit and grocery category."""
from typing import Final, List

PRODUCE: Final[str] = "Produce"
DAIRY_EGGS: Final[str] = "Dairy & Eggs"
MEAT_SEAFOOD: Final[str] = "Meat & Seafood"
PANTRY: Final[str] = "Pantry"
FROZEN: Final[str] = "Frozen"
BAKERY: Final[str] = "Bakery"
BEVERAGES: Final[str] = "Beverages"
OTHER: Final[str] = "Other"

GROCERY_CATEGORIES: Final[List[str]] = [
    PRODUCE, DAIRY_EGGS, MEAT_SEAFOOD, PANTRY, FROZEN, BAKERY, BEVERAGES, OTHER
]


class Ingredient:
    def __init__(self, id: str = "", name: str = "", amount: float = 0, unit: str = "piece",
                 category: str = OTHER):
        if category not in GROCERY_CATEGORIES:
            raise ValueError(f"Unknown grocery category: {category!r}")
        if amount < 0:
            raise ValueError(f"Amount cannot be negative: {amount}")
        self.id = id
        self.name = name
        self.amount = amount
        self.unit = unit
        self.category = category

    def scaled(self, ratio: float) -> "Ingredient":
        '''Returns a copy with the amount multiplied by ratio (never mutates self).'''
        return Ingredient(self.id, self.name, self.amount * ratio, self.unit, self.category)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ingredient):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __str__(self) -> str:
        return f"{self.name} - {self.amount:g} {self.unit} ({self.category})"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates an Ingredient object from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        return Ingredient(
            id=str(d.get("id", "")),
            name=d.get("name", ""),
            amount=float(d.get("amount", 0) or 0),
            unit=d.get("unit", "piece") or "piece",
            category=d.get("category", OTHER) or OTHER,
        )

    def to_dict(self):
        '''Converts the Ingredient object to a plain dictionary.'''
        return {
            "id": self.id,
            "name": self.name,
            "amount": self.amount,
            "unit": self.unit,
            "category": self.category,
        }

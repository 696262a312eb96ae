"""Recipe domain entity: base servings, ingredients, instructions and nutrition info."""
from mealplan.domain.Ingredient import Ingredient
from typing import List, Dict, Optional

DIFFICULTIES = ("Easy", "Medium", "Hard")
RECIPE_CATEGORIES = ("Breakfast", "Lunch", "Dinner", "Snack")
NUTRITION_KEYS = ("calories", "protein", "carbs", "fat", "fiber")

DEFAULT_INSTRUCTIONS = [
    "Prepare all ingredients as listed",
    "Follow traditional cooking methods for this dish",
    "Cook until done and serve hot",
]


def zero_nutrition() -> Dict[str, float]:
    return {key: 0 for key in NUTRITION_KEYS}


class Recipe:
    def __init__(self, id: str = "", name: str = "", description: str = "", cook_time: int = 30,
                 servings: int = 1, difficulty: str = "Medium", category: str = "Dinner",
                 cuisine: str = "", image: str = "", ingredients: Optional[List[Ingredient]] = None,
                 instructions: Optional[List[str]] = None, nutrition: Optional[Dict[str, float]] = None,
                 meal_types: Optional[List[str]] = None):
        self.id = id
        self.name = name
        self.description = description
        self.cook_time = cook_time
        self.servings = servings
        self.difficulty = difficulty
        self.category = category
        self.cuisine = cuisine
        self.image = image
        self.ingredients = ingredients[:] if ingredients else []
        self.instructions = instructions[:] if instructions else []
        n = nutrition or {}
        # Normalize key synonyms
        if 'carbohydrates' in n and 'carbs' not in n:
            n = dict(n, carbs=n['carbohydrates'])
        self.nutrition = {key: n.get(key, 0) or 0 for key in NUTRITION_KEYS}
        self.meal_types = meal_types[:] if meal_types else [category]

    def serving_ratio(self, servings: Optional[float] = None) -> float:
        """Scale factor from the base serving count to `servings` (falsy means base)."""
        if not self.servings or self.servings <= 0:
            raise ValueError(f"Recipe '{self.name}' has no positive base servings: {self.servings}")
        target = servings or self.servings
        if target <= 0:
            raise ValueError(f"Servings must be positive: {target}")
        return target / self.servings

    def scaled_ingredients(self, servings: Optional[float] = None) -> List[Ingredient]:
        ratio = self.serving_ratio(servings)
        return [ing.scaled(ratio) for ing in self.ingredients]

    def __str__(self) -> str:
        return f"{self.name} - {self.servings} servings - {len(self.ingredients)} ingredients - {self.category}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data)
        return Recipe(
            id=str(d.get("id", "")),
            name=d.get("name", ""),
            description=d.get("description", ""),
            cook_time=int(d.get("cookTime", d.get("cook_time", 30)) or 0),
            servings=d.get("servings", 1),
            difficulty=d.get("difficulty", "Medium"),
            category=d.get("category", "Dinner"),
            cuisine=d.get("cuisine", ""),
            image=d.get("image", ""),
            ingredients=[Ingredient.from_dict(ing) for ing in d.get("ingredients", [])],
            instructions=list(d.get("instructions", [])),
            nutrition=d.get("nutrition"),
            meal_types=d.get("mealTypes"),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "cookTime": self.cook_time,
            "servings": self.servings,
            "difficulty": self.difficulty,
            "category": self.category,
            "cuisine": self.cuisine,
            "image": self.image,
            "ingredients": [ing.to_dict() for ing in self.ingredients],
            "instructions": self.instructions,
            "mealTypes": self.meal_types,
            "nutrition": dict(self.nutrition),
        }

"""
Input validation schemas using Pydantic for the HTTP layer.

Field names follow the camelCase data model so that validated payloads can be
handed to the domain `from_dict` constructors unchanged.
"""
from pydantic import BaseModel, Field, field_validator
from typing import List, Literal, Optional

from mealplan.domain.MealSlot import MealSlot
from mealplan.domain.ShoppingList import ShoppingListItem

GroceryCategory = Literal[
    'Produce', 'Dairy & Eggs', 'Meat & Seafood', 'Pantry', 'Frozen', 'Bakery', 'Beverages', 'Other'
]
DAY_PATTERN = r'^(Monday|Tuesday|Wednesday|Thursday|Friday|Saturday|Sunday)$'
MEAL_TYPE_PATTERN = r'^(Breakfast|Morning Snack|Lunch|Afternoon Snack|Dinner)$'


class IngredientInput(BaseModel):
    """Schema for ingredient input validation."""
    id: str = ""
    name: str = Field(..., min_length=1, max_length=200)
    amount: float = Field(..., ge=0)
    unit: str = Field(default="piece", max_length=20)
    category: GroceryCategory = 'Other'

    @field_validator('name', 'unit')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        if isinstance(v, str):
            return v.strip()
        return v


class NutritionInput(BaseModel):
    calories: float = Field(default=0, ge=0)
    protein: float = Field(default=0, ge=0)
    carbs: float = Field(default=0, ge=0)
    fat: float = Field(default=0, ge=0)
    fiber: float = Field(default=0, ge=0)


class RecipeInput(BaseModel):
    """Schema for recipe input validation."""
    id: str = ""
    name: str = Field(..., min_length=1, max_length=200)
    description: str = ""
    cookTime: int = Field(default=30, ge=0)
    servings: float = Field(default=1, gt=0)
    difficulty: Literal['Easy', 'Medium', 'Hard'] = 'Medium'
    category: Literal['Breakfast', 'Lunch', 'Dinner', 'Snack'] = 'Dinner'
    cuisine: str = ""
    image: str = ""
    ingredients: List[IngredientInput] = Field(default_factory=list)
    instructions: List[str] = Field(default_factory=list)
    nutrition: NutritionInput = Field(default_factory=NutritionInput)
    mealTypes: Optional[List[Literal['Breakfast', 'Lunch', 'Dinner', 'Snack']]] = None

    @field_validator('instructions')
    @classmethod
    def validate_instructions(cls, v):
        """Filter out empty steps."""
        return [step.strip() for step in v if step and step.strip()]


class MealSlotInput(BaseModel):
    """Schema for one weekly grid cell."""
    id: Optional[str] = None
    day: str = Field(..., pattern=DAY_PATTERN)
    mealType: str = Field(..., pattern=MEAL_TYPE_PATTERN)
    recipe: Optional[RecipeInput] = None
    servings: Optional[float] = Field(default=None, gt=0)

    def to_domain(self) -> MealSlot:
        return MealSlot.from_dict(self.model_dump(exclude_none=True))


class ShoppingListItemInput(BaseModel):
    """Schema for a previously generated shopping list item."""
    id: str = ""
    name: str = Field(..., min_length=1)
    amount: float = Field(default=0, ge=0)
    unit: str = ""
    category: GroceryCategory = 'Other'
    completed: bool = False
    recipeNames: List[str] = Field(default_factory=list)

    def to_domain(self) -> ShoppingListItem:
        return ShoppingListItem.from_dict(self.model_dump())


class MealsRequest(BaseModel):
    meals: List[MealSlotInput]

    def to_domain(self) -> List[MealSlot]:
        return [m.to_domain() for m in self.meals]


class ShoppingListRequest(MealsRequest):
    """Meals to aggregate, optionally with the previous list whose check-offs are kept."""
    previous: Optional[List[ShoppingListItemInput]] = None


class ShoppingListExportRequest(BaseModel):
    items: List[ShoppingListItemInput]


class TextImportRequest(BaseModel):
    text: str = Field(..., min_length=1)

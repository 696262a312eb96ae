from typing import Final, List, Dict

DAYS: Final[List[str]] = [
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"
]
MEAL_TYPES: Final[List[str]] = [
    "Breakfast", "Morning Snack", "Lunch", "Afternoon Snack", "Dinner"
]

# Slot codes used by the app's own CSV export ("Tiempo" column)
MEAL_TYPE_CODES: Final[Dict[str, str]] = {
    "Breakfast": "Breakfast",
    "Morning Snack": "Snack M",
    "Lunch": "Lunch",
    "Afternoon Snack": "Snack V",
    "Dinner": "Dinner",
}

# Meal type -> recipe category
MEAL_CATEGORY: Final[Dict[str, str]] = {
    "Breakfast": "Breakfast",
    "Morning Snack": "Snack",
    "Lunch": "Lunch",
    "Afternoon Snack": "Snack",
    "Dinner": "Dinner",
}

# Shopping list ordering (differs from the declaration order of the categories)
CATEGORY_ORDER: Final[List[str]] = [
    "Produce", "Dairy & Eggs", "Meat & Seafood", "Bakery", "Frozen", "Pantry", "Beverages", "Other"
]

MIN_TEXT_LINE_LENGTH: Final[int] = 5
MIN_MEAL_LINE_LENGTH: Final[int] = 10

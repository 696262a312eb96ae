import unittest
from mealplan.domain.MealSlot import MealSlot
from mealplan.domain.Recipe import Recipe
from mealplan.logic.reporting.nutrition import compute_week_nutrition


class TestComputeWeekNutrition(unittest.TestCase):

    def setUp(self):
        self.oats = Recipe(id="r1", name="Avena", servings=1,
                           nutrition={"calories": 300, "protein": 10, "carbs": 50, "fat": 5, "fiber": 8})
        self.soup = Recipe(id="r2", name="Sopa", servings=4,
                           nutrition={"calories": 200, "protein": 6, "carbs": 20, "fat": 4, "fiber": 3})

    def test_scaled_totals(self):
        report = compute_week_nutrition([
            MealSlot("Tuesday", "Dinner", self.soup, servings=2),
            MealSlot("Monday", "Breakfast", self.oats, servings=2),
            MealSlot("Monday", "Lunch", self.soup),
            MealSlot("Friday", "Lunch"),
        ])
        self.assertEqual(list(report["days"]), ["Monday", "Tuesday"])
        monday = report["days"]["Monday"]
        self.assertEqual(monday["calories"], 800)
        self.assertEqual(monday["meals"]["Breakfast"]["servings"], 2)
        self.assertEqual(monday["meals"]["Lunch"]["name"], "Sopa")
        self.assertEqual(report["days"]["Tuesday"]["protein"], 3)
        self.assertEqual(report["week_totals"]["calories"], 900)
        self.assertEqual(report["week_totals"]["fiber"], 16 + 3 + 1.5)

    def test_empty(self):
        report = compute_week_nutrition([])
        self.assertEqual(report["days"], {})
        self.assertEqual(report["week_totals"]["calories"], 0)

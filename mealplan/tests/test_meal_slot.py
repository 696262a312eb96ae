import unittest
from mealplan.domain.Ingredient import Ingredient
from mealplan.domain.MealSlot import MealSlot, empty_week, place_meals, slot_id
from mealplan.domain.Recipe import Recipe


class TestMealSlot(unittest.TestCase):

    def setUp(self):
        self.recipe = Recipe(id="r1", name="Tacos", servings=2,
                             ingredients=[Ingredient("i1", "Tortilla", 4, "piece", "Bakery")])

    def test_id_is_day_and_meal_type(self):
        slot = MealSlot("Monday", "Lunch", self.recipe)
        self.assertEqual(slot.id, "Monday-Lunch")
        self.assertEqual(slot_id("Friday", "Morning Snack"), "Friday-Morning Snack")

    def test_rejects_unknown_day_or_meal(self):
        with self.assertRaises(ValueError):
            MealSlot("Lunes", "Lunch")
        with self.assertRaises(ValueError):
            MealSlot("Monday", "Brunch")

    def test_serving_ratio(self):
        self.assertEqual(MealSlot("Monday", "Lunch", self.recipe).serving_ratio(), 1)
        self.assertEqual(MealSlot("Monday", "Lunch", self.recipe, servings=4).serving_ratio(), 2)
        self.assertEqual(MealSlot("Monday", "Lunch", self.recipe, servings=0).serving_ratio(), 1)
        with self.assertRaises(ValueError):
            MealSlot("Monday", "Lunch").serving_ratio()

    def test_dict_roundtrip(self):
        slot = MealSlot("Tuesday", "Dinner", self.recipe, servings=3)
        data = slot.to_dict()
        self.assertEqual(data["mealType"], "Dinner")
        restored = MealSlot.from_dict(data)
        self.assertEqual(restored.to_dict(), data)
        self.assertNotIn("recipe", MealSlot("Tuesday", "Dinner").to_dict())

    def test_empty_week(self):
        week = empty_week()
        self.assertEqual(len(week), 35)
        self.assertEqual(len({slot.id for slot in week}), 35)
        self.assertEqual(week[0].id, "Monday-Breakfast")
        self.assertEqual(week[-1].id, "Sunday-Dinner")
        self.assertTrue(all(slot.recipe is None for slot in week))

    def test_place_meals(self):
        week = empty_week()
        placed = place_meals(week, [MealSlot("Wednesday", "Lunch", self.recipe, servings=1)])
        self.assertEqual(len(placed), 35)
        filled = [slot for slot in placed if slot.recipe is not None]
        self.assertEqual([slot.id for slot in filled], ["Wednesday-Lunch"])
        self.assertTrue(all(slot.recipe is None for slot in week))

import csv
import io
import json
import tempfile
import unittest
from pathlib import Path

from mealplan.domain.Ingredient import Ingredient
from mealplan.domain.MealSlot import MealSlot
from mealplan.domain.Recipe import Recipe
from mealplan.domain.ShoppingList import ShoppingListItem
from mealplan.logic.importing.csv_importer import import_csv
from mealplan.logic.shopping.list_builder import generate_shopping_list
from mealplan.utilities.export_import import (
    format_amount, meal_plan_to_csv, shopping_list_to_csv, shopping_list_to_text, write_json, write_text
)


class TestShoppingListExport(unittest.TestCase):

    def setUp(self):
        self.items = [
            ShoppingListItem("a", "Jitomate", 400, "g", "Produce", completed=True, recipe_names=["Tinga", "Salsa"]),
            ShoppingListItem("b", "Leche", 0.25, "cup", "Dairy & Eggs"),
        ]

    def test_format_amount(self):
        self.assertEqual(format_amount(2.0), "2")
        self.assertEqual(format_amount(0.25), "0.25")
        self.assertEqual(format_amount(1 / 3), "0.33")

    def test_text(self):
        self.assertEqual(shopping_list_to_text(self.items), "✓ 400 g Jitomate\n○ 0.25 cup Leche")

    def test_csv(self):
        rows = list(csv.DictReader(io.StringIO(shopping_list_to_csv(self.items))))
        self.assertEqual(len(rows), 2)
        self.assertEqual(rows[0]["Item"], "Jitomate")
        self.assertEqual(rows[0]["Completed"], "yes")
        self.assertEqual(rows[0]["Recipes"], "Tinga; Salsa")
        self.assertEqual(rows[1]["Amount"], "0.25")

    def test_write_files(self):
        with tempfile.TemporaryDirectory() as tmp:
            text_path = write_text("hola", Path(tmp) / "list.txt")
            self.assertEqual(text_path.read_text(encoding="utf-8"), "hola")
            json_path = write_json([i.to_dict() for i in self.items], Path(tmp) / "list.json")
            self.assertEqual(json.loads(json_path.read_text(encoding="utf-8"))[0]["name"], "Jitomate")


class TestMealPlanCsvExport(unittest.TestCase):

    def setUp(self):
        self.salad = Recipe(id="r1", name="Ensalada", servings=2, ingredients=[
            Ingredient("i1", "Lechuga, romana", 1, "piece", "Produce"),
            Ingredient("i2", "Aceite", 2, "tbsp", "Pantry"),
            Ingredient("i3", "Sal", 0, "g", "Pantry"),
        ])
        self.fruit = Recipe(id="r2", name="Fruta", servings=1, ingredients=[
            Ingredient("i4", "Manzana", 1, "piece", "Produce"),
        ])
        self.meals = [
            MealSlot("Tuesday", "Lunch", self.salad, servings=4),
            MealSlot("Monday", "Afternoon Snack", self.fruit),
            MealSlot("Monday", "Dinner"),
        ]

    def test_rows(self):
        lines = meal_plan_to_csv(self.meals).split("\n")
        self.assertEqual(lines, [
            "Día,Tiempo,Ingrediente,Porción",
            "Monday,Snack V,Manzana,1piece",
            'Tuesday,Lunch,"Lechuga, romana",2piece',
            "Tuesday,Lunch,Aceite,4tbsp",
            "Tuesday,Lunch,Sal,nan",
        ])

    def test_reimport_gives_same_shopping_list(self):
        exported = meal_plan_to_csv(self.meals)
        reimported = import_csv(exported)
        self.assertEqual([m.id for m in reimported.meals], ["Monday-Afternoon Snack", "Tuesday-Lunch"])
        before = {(i.name, i.unit): i.amount for i in generate_shopping_list(self.meals) if i.amount}
        again = {(i.name, i.unit): i.amount for i in generate_shopping_list(reimported.meals)}
        self.assertEqual(before, again)

    def test_zero_amounts_dropped_on_reimport(self):
        reimported = import_csv(meal_plan_to_csv(self.meals))
        lunch = reimported.meals[1].recipe
        self.assertEqual([i.name for i in lunch.ingredients], ["Lechuga, romana", "Aceite"])

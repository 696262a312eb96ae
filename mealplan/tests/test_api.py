import unittest
from fastapi.testclient import TestClient
from mealplan.api.api_run import app

CSV_PLAN = "Día,Tiempo,Ingrediente,Porción\nLunes,Desayuno,Huevo,2pza\nLunes,Desayuno,Jitomate,100g\n"


def _meal(day, meal_type, servings=None):
    meal = {
        "day": day,
        "mealType": meal_type,
        "recipe": {
            "id": "r1",
            "name": "Huevos a la mexicana",
            "servings": 1,
            "category": "Breakfast",
            "ingredients": [
                {"id": "i1", "name": "Huevo", "amount": 2, "unit": "piece", "category": "Dairy & Eggs"},
                {"id": "i2", "name": "Jitomate", "amount": 100, "unit": "g", "category": "Produce"},
            ],
            "nutrition": {"calories": 250, "protein": 14},
        },
    }
    if servings is not None:
        meal["servings"] = servings
    return meal


class TestImportAPI(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def test_import_csv(self):
        resp = self.client.post('/api/import/csv',
                                files={"file": ("plan.csv", CSV_PLAN.encode("utf-8"), "text/csv")})
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["count"], 1)
        self.assertEqual(data["meals"][0]["id"], "Monday-Breakfast")
        self.assertEqual(len(data["recipes"][0]["ingredients"]), 2)

    def test_import_csv_bad_header(self):
        resp = self.client.post('/api/import/csv',
                                files={"file": ("plan.csv", b"Dia,Tiempo,Porcion\nLunes,Desayuno,1", "text/csv")})
        self.assertEqual(resp.status_code, 400)
        self.assertIn("Ingredient", resp.json()["detail"])

    def test_import_csv_empty_file(self):
        resp = self.client.post('/api/import/csv', files={"file": ("plan.csv", b"", "text/csv")})
        self.assertEqual(resp.status_code, 400)

    def test_import_text(self):
        resp = self.client.post('/api/import/text', json={"text": "Lunes\nComida\n150 g de pollo con verduras"})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["meals"][0]["recipe"]["name"], "Pollo recipe")

    def test_import_text_without_meals(self):
        resp = self.client.post('/api/import/text', json={"text": "nada que importar"})
        self.assertEqual(resp.status_code, 400)

    def test_import_pdf_invalid(self):
        resp = self.client.post('/api/import/pdf',
                                files={"file": ("plan.pdf", b"not a pdf", "application/pdf")})
        self.assertEqual(resp.status_code, 400)


class TestShoppingListAPI(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def test_empty_week(self):
        resp = self.client.get('/api/week/empty')
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(len(resp.json()["meals"]), 35)

    def test_shopping_list(self):
        payload = {"meals": [_meal("Monday", "Breakfast"), _meal("Tuesday", "Breakfast", servings=3)]}
        resp = self.client.post('/api/shopping-list', json=payload)
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["count"], 2)
        self.assertEqual(data["completed"], 0)
        self.assertEqual([i["name"] for i in data["items"]], ["Jitomate", "Huevo"])
        self.assertEqual(data["items"][1]["amount"], 8)
        self.assertEqual(data["items"][1]["recipeNames"], ["Huevos a la mexicana"])

    def test_shopping_list_keeps_previous_check_offs(self):
        payload = {
            "meals": [_meal("Monday", "Breakfast")],
            "previous": [{"name": "Huevo", "unit": "piece", "amount": 6, "completed": True}],
        }
        data = self.client.post('/api/shopping-list', json=payload).json()
        done = {i["name"]: i["completed"] for i in data["items"]}
        self.assertEqual(done, {"Jitomate": False, "Huevo": True})
        self.assertEqual(data["completed"], 1)

    def test_shopping_list_rejects_unknown_day(self):
        resp = self.client.post('/api/shopping-list', json={"meals": [_meal("Lunes", "Breakfast")]})
        self.assertEqual(resp.status_code, 422)

    def test_export_formats(self):
        items = [{"name": "Huevo", "amount": 4, "unit": "piece", "category": "Dairy & Eggs", "completed": True}]
        text = self.client.post('/api/shopping-list/export', json={"items": items})
        self.assertEqual(text.status_code, 200)
        self.assertEqual(text.text, "✓ 4 piece Huevo")
        csv_resp = self.client.post('/api/shopping-list/export?format=csv', json={"items": items})
        self.assertIn("Dairy & Eggs,Huevo,4,piece,yes,", csv_resp.text)
        pdf = self.client.post('/api/shopping-list/export?format=pdf', json={"items": items})
        self.assertEqual(pdf.headers["content-type"], "application/pdf")
        self.assertTrue(pdf.content.startswith(b"%PDF"))
        bad = self.client.post('/api/shopping-list/export?format=xml', json={"items": items})
        self.assertEqual(bad.status_code, 422)


class TestMealPlanExportAPI(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def test_export_csv(self):
        resp = self.client.post('/api/meal-plan/export-csv', json={"meals": [_meal("Monday", "Morning Snack", 2)]})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.text.split("\n"), [
            "Día,Tiempo,Ingrediente,Porción",
            "Monday,Snack M,Huevo,4piece",
            "Monday,Snack M,Jitomate,200g",
        ])

    def test_nutrition(self):
        resp = self.client.post('/api/nutrition', json={"meals": [_meal("Monday", "Breakfast", 2)]})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["week_totals"]["calories"], 500)

    def test_export_pdf(self):
        resp = self.client.post('/export_pdf', json={"meals": [_meal("Monday", "Breakfast")]})
        self.assertEqual(resp.status_code, 200)
        self.assertTrue(resp.content.startswith(b"%PDF"))

from fastapi import (
    FastAPI,
    File,
    HTTPException,
    Query,
    Response,
    UploadFile,
)

import logging

from mealplan.domain.MealSlot import empty_week
from mealplan.domain.ShoppingList import ShoppingList
from mealplan.infra.pdf_utils import (
    extract_pdf_text,
    generate_pdf_for_shopping_list,
    generate_pdf_for_week,
)
from mealplan.logic.importing.csv_importer import import_csv
from mealplan.logic.importing.errors import FormatError
from mealplan.logic.importing.text_importer import import_text
from mealplan.logic.reporting.nutrition import compute_week_nutrition
from mealplan.logic.shopping.list_builder import generate_shopping_list
from mealplan.utilities.config import MAX_UPLOAD_BYTES
from mealplan.utilities.export_import import (
    meal_plan_to_csv,
    shopping_list_to_csv,
    shopping_list_to_text,
)
from mealplan.utilities.validators import (
    MealsRequest,
    ShoppingListExportRequest,
    ShoppingListRequest,
    TextImportRequest,
)

# Logging
logger = logging.getLogger("mealplan_app")

# Initialize FastAPI app
app = FastAPI(title="Meal Plan Import & Shopping List API")


# -------------------- Helpers --------------------
async def _read_upload(file: UploadFile) -> bytes:
    data = await file.read()
    if len(data) > MAX_UPLOAD_BYTES:
        logger.warning("Rejected upload %s: %d bytes", file.filename, len(data))
        raise HTTPException(status_code=400, detail=f"File too large (max {MAX_UPLOAD_BYTES} bytes)")
    if not data:
        raise HTTPException(status_code=400, detail="Empty file")
    return data


def _decode(data: bytes, filename: str) -> str:
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError:
        logger.warning("Rejected upload %s: not UTF-8", filename)
        raise HTTPException(status_code=400, detail="File must be UTF-8 encoded text")


def _run_import(importer, text: str, source: str):
    try:
        result = importer(text)
    except FormatError as e:
        logger.info("Import from %s rejected: %s", source, e)
        raise HTTPException(status_code=400, detail=str(e))
    return result.to_dict()


# -------------------- API: Import --------------------
@app.post('/api/import/csv')
async def api_import_csv(file: UploadFile = File(...)):
    data = await _read_upload(file)
    return _run_import(import_csv, _decode(data, file.filename), file.filename or "csv")


@app.post('/api/import/text')
def api_import_text(payload: TextImportRequest):
    return _run_import(import_text, payload.text, "text")


@app.post('/api/import/pdf')
async def api_import_pdf(file: UploadFile = File(...)):
    data = await _read_upload(file)
    try:
        text = extract_pdf_text(data)
    except ValueError as e:
        logger.warning("Rejected upload %s: %s", file.filename, e)
        raise HTTPException(status_code=400, detail="Failed to parse PDF. Please ensure it's a valid PDF file.")
    return _run_import(import_text, text, file.filename or "pdf")


# -------------------- API: Week grid --------------------
@app.get('/api/week/empty')
def api_empty_week():
    return {"meals": [slot.to_dict() for slot in empty_week()]}


# -------------------- API: Shopping List (JSON) --------------------
@app.post('/api/shopping-list')
def api_shopping_list(payload: ShoppingListRequest):
    shopping_list = ShoppingList(generate_shopping_list(payload.to_domain()))
    if payload.previous:
        shopping_list.carry_over_completed(p.to_domain() for p in payload.previous)
    items = shopping_list.to_dict()
    return {"items": items, "count": len(items), "completed": shopping_list.completed_count()}


@app.post('/api/shopping-list/export')
def api_shopping_list_export(payload: ShoppingListExportRequest,
                             format: str = Query(default="text", pattern="^(text|csv|pdf)$")):
    items = [i.to_domain() for i in payload.items]
    if format == "csv":
        return Response(content=shopping_list_to_csv(items), media_type="text/csv",
                        headers={"Content-Disposition": "attachment; filename=shopping-list.csv"})
    if format == "pdf":
        return Response(content=generate_pdf_for_shopping_list(items), media_type="application/pdf",
                        headers={"Content-Disposition": "attachment; filename=shopping-list.pdf"})
    return Response(content=shopping_list_to_text(items), media_type="text/plain",
                    headers={"Content-Disposition": "attachment; filename=shopping-list.txt"})


# -------------------- API: Meal plan exports --------------------
@app.post('/api/meal-plan/export-csv')
def api_meal_plan_export_csv(payload: MealsRequest):
    return Response(content=meal_plan_to_csv(payload.to_domain()), media_type="text/csv",
                    headers={"Content-Disposition": "attachment; filename=meal-plan-normalized.csv"})


@app.post('/api/nutrition')
def api_nutrition(payload: MealsRequest):
    return compute_week_nutrition(payload.to_domain())


@app.post("/export_pdf")
def export_pdf(payload: MealsRequest):
    pdf_bytes = generate_pdf_for_week(payload.to_domain())
    return Response(content=pdf_bytes, media_type="application/pdf",
                    headers={"Content-Disposition": "attachment; filename=meal-plan.pdf"})

import io
import logging
from typing import Iterable

import fitz  # PyMuPDF
from reportlab.lib.pagesizes import A4, landscape
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet

from mealplan.domain.MealSlot import MealSlot
from mealplan.domain.ShoppingList import ShoppingListItem
from mealplan.utilities.constants import DAYS, MEAL_TYPES
from mealplan.utilities.export_import import format_amount

logger = logging.getLogger(__name__)

_HEADER_STYLE = [
    ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#4CAF50")),
    ("TEXTCOLOR", (0, 0), (-1, 0), colors.whitesmoke),
    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
    ("FONTSIZE", (0, 0), (-1, 0), 11),
    ("BOTTOMPADDING", (0, 0), (-1, 0), 8),
    ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
    ("VALIGN", (0, 0), (-1, -1), "TOP"),
]


def extract_pdf_text(data: bytes) -> str:
    """Return the text of every page, pages separated by newlines.

    Raises:
        ValueError: if the bytes are not a readable PDF.
    """
    try:
        doc = fitz.open(stream=data, filetype="pdf")
    except Exception as e:
        raise ValueError(f"Unreadable PDF: {e}") from e
    try:
        pages = [page.get_text() for page in doc]
    finally:
        doc.close()
    logger.debug("Extracted text from %d PDF pages", len(pages))
    return "\n".join(pages)


def generate_pdf_for_week(meals: Iterable[MealSlot], title: str = "Meal Plan") -> bytes:
    """Generate a PDF table: one row per day, one column per meal type."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=landscape(A4),
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )
    styles = getSampleStyleSheet()
    elements = [Paragraph(title, styles["Title"]), Spacer(1, 16)]

    grid = {(m.day, m.meal_type): m for m in meals}
    data = [["Day"] + list(MEAL_TYPES)]
    for day in DAYS:
        row = [day]
        for meal_type in MEAL_TYPES:
            slot = grid.get((day, meal_type))
            if slot is None or slot.recipe is None:
                row.append("-")
            else:
                servings = slot.servings or slot.recipe.servings
                row.append(Paragraph(f"{slot.recipe.name} (x{format_amount(servings)})", styles["BodyText"]))
        data.append(row)

    table = Table(data, repeatRows=1, colWidths=[90] + [140] * len(MEAL_TYPES))
    table.setStyle(TableStyle(_HEADER_STYLE))
    elements.append(table)
    doc.build(elements)
    return buf.getvalue()


def generate_pdf_for_shopping_list(items: Iterable[ShoppingListItem], title: str = "Shopping List") -> bytes:
    """Generate a PDF checklist grouped by category (items are expected pre-sorted)."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(buf, pagesize=A4, rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20)
    styles = getSampleStyleSheet()
    elements = [Paragraph(title, styles["Title"]), Spacer(1, 12)]

    data = [["", "Item", "Amount", "Category"]]
    for item in items:
        data.append([
            "x" if item.completed else "",
            item.name,
            f"{format_amount(item.amount)} {item.unit}",
            item.category,
        ])
    table = Table(data, repeatRows=1, colWidths=[20, 230, 100, 120])
    table.setStyle(TableStyle(_HEADER_STYLE))
    elements.append(table)
    doc.build(elements)
    return buf.getvalue()

"""
Export and import helpers for shopping lists and meal plans.
"""
import csv
import io
import json
import logging
from pathlib import Path
from typing import Iterable, List

from mealplan.domain.MealSlot import MealSlot
from mealplan.domain.ShoppingList import ShoppingListItem
from mealplan.utilities.constants import DAYS, MEAL_TYPES, MEAL_TYPE_CODES

logger = logging.getLogger(__name__)

MEAL_PLAN_CSV_HEADER = ['Día', 'Tiempo', 'Ingrediente', 'Porción']
SHOPPING_CSV_HEADER = ['Category', 'Item', 'Amount', 'Unit', 'Completed', 'Recipes']


def format_amount(amount: float) -> str:
    """2.0 -> "2", 0.25 -> "0.25", 1.3333 -> "1.33"."""
    if float(amount).is_integer():
        return str(int(amount))
    return f"{amount:.2f}".rstrip('0').rstrip('.')


def shopping_list_to_text(items: Iterable[ShoppingListItem]) -> str:
    """One line per item: check mark, amount, unit, name."""
    return "\n".join(
        f"{'✓' if item.completed else '○'} {format_amount(item.amount)} {item.unit} {item.name}"
        for item in items
    )


def shopping_list_to_csv(items: Iterable[ShoppingListItem]) -> str:
    buf = io.StringIO()
    writer = csv.DictWriter(buf, fieldnames=SHOPPING_CSV_HEADER, lineterminator="\n")
    writer.writeheader()
    for item in items:
        writer.writerow({
            'Category': item.category,
            'Item': item.name,
            'Amount': format_amount(item.amount),
            'Unit': item.unit,
            'Completed': 'yes' if item.completed else 'no',
            'Recipes': '; '.join(item.recipe_names),
        })
    return buf.getvalue()


def meal_plan_to_csv(meals: Iterable[MealSlot]) -> str:
    """Normalized export (Día,Tiempo,Ingrediente,Porción) that import_csv reads back.

    Rows follow day order then meal-type order; amounts are scaled by each slot's
    serving ratio. A zero amount is written as "nan", which import_csv skips, so
    those ingredients do not come back on re-import.
    """
    assigned: List[MealSlot] = [m for m in meals if m.recipe is not None]
    assigned.sort(key=lambda m: (DAYS.index(m.day), MEAL_TYPES.index(m.meal_type)))

    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(MEAL_PLAN_CSV_HEADER)
    for meal in assigned:
        code = MEAL_TYPE_CODES.get(meal.meal_type, meal.meal_type)
        for ingredient in meal.recipe.scaled_ingredients(meal.servings):
            portion = f"{format_amount(ingredient.amount)}{ingredient.unit}" if ingredient.amount else "nan"
            writer.writerow([meal.day, code, ingredient.name, portion])
    return buf.getvalue().rstrip("\n")


def write_text(content: str, output_path: Path) -> Path:
    output_path = Path(output_path)
    with open(output_path, 'w', encoding='utf-8') as f:
        f.write(content)
    logger.info(f"Exported {output_path.stat().st_size} bytes to {output_path}")
    return output_path


def write_json(data, output_path: Path) -> Path:
    output_path = Path(output_path)
    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
    logger.info(f"Exported JSON to {output_path}")
    return output_path


# CLI interface
if __name__ == "__main__":
    import argparse
    from mealplan.infra.pdf_utils import extract_pdf_text
    from mealplan.logic.importing.csv_importer import import_csv
    from mealplan.logic.importing.errors import FormatError
    from mealplan.logic.importing.text_importer import import_text
    from mealplan.logic.shopping.list_builder import generate_shopping_list

    parser = argparse.ArgumentParser(description='Import a meal plan and export its shopping list')
    parser.add_argument('file', help='Input CSV, PDF or text file')
    parser.add_argument('--format', choices=['text', 'csv', 'json'], default='text', help='Output format')
    parser.add_argument('--output', help='Output file path (stdout if omitted)')

    args = parser.parse_args()
    source = Path(args.file)
    try:
        if source.suffix.lower() == '.csv':
            result = import_csv(source.read_text(encoding='utf-8'))
        elif source.suffix.lower() == '.pdf':
            result = import_text(extract_pdf_text(source.read_bytes()))
        else:
            result = import_text(source.read_text(encoding='utf-8'))
    except FormatError as e:
        print(f"✗ Import failed: {e}")
        raise SystemExit(1)

    items = generate_shopping_list(result.meals)
    if args.format == 'csv':
        content = shopping_list_to_csv(items)
    elif args.format == 'json':
        content = json.dumps([i.to_dict() for i in items], indent=2, ensure_ascii=False)
    else:
        content = shopping_list_to_text(items)

    if args.output:
        print(f"✓ Exported to: {write_text(content, Path(args.output))}")
    else:
        print(content)

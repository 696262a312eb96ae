"""Keyword-based grocery categorization of ingredient names.

Groups are tested top to bottom and the first group with a keyword contained in
the lower-cased name wins, so the order below is part of the behaviour
("fresa" contains "res" and lands in Meat & Seafood).
"""
from typing import List, Tuple
from mealplan.domain.Ingredient import (
    BAKERY, DAIRY_EGGS, MEAT_SEAFOOD, OTHER, PANTRY, PRODUCE
)

CATEGORY_KEYWORDS: List[Tuple[str, Tuple[str, ...]]] = [
    (MEAT_SEAFOOD, (
        'pollo', 'res', 'pescado', 'carne', 'atún', 'atun', 'salmón', 'pavo', 'molida',
        'filete', 'falda', 'pechuga', 'bistec', 'jamon', 'jamón',
    )),
    (DAIRY_EGGS, (
        'huevo', 'leche', 'queso', 'yogurt', 'crema', 'panela',
    )),
    (PRODUCE, (
        'tomate', 'cebolla', 'lechuga', 'espinaca', 'apio', 'pepino', 'zanahoria', 'jitomate',
        'nopales', 'calabacitas', 'chayote', 'jicama', 'perejil', 'manzana', 'piña', 'naranja',
        'fresa', 'papaya', 'melón', 'almendras', 'almendra', 'nuez', 'cacahuate', 'verdura',
    )),
    (BAKERY, (
        'pan', 'tortilla', 'tostada',
    )),
    (PANTRY, (
        'aceite', 'sal', 'pimienta', 'avena', 'arroz', 'frijol', 'lentejas', 'mayonesa',
        'canela', 'limón', 'salsa', 'sopa',
    )),
]


def categorize(name: str) -> str:
    lower_name = (name or '').lower()
    for category, keywords in CATEGORY_KEYWORDS:
        if any(keyword in lower_name for keyword in keywords):
            return category
    return OTHER


__all__ = ['CATEGORY_KEYWORDS', 'categorize']

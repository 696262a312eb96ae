"""Unit normalization: Spanish/English/abbreviated unit tokens -> canonical unit."""
from typing import Dict

# Unit mappings (lowercase input -> canonical unit)
UNIT_MAPPINGS: Dict[str, str] = {
    'g': 'g', 'gr': 'g', 'grs': 'g', 'gramo': 'g', 'gramos': 'g', 'gram': 'g', 'grams': 'g',
    'kg': 'kg', 'kilo': 'kg', 'kilos': 'kg', 'kilogramo': 'kg', 'kilogramos': 'kg',
    'kilogram': 'kg', 'kilograms': 'kg',
    'ml': 'ml', 'mililitro': 'ml', 'mililitros': 'ml', 'milliliter': 'ml', 'milliliters': 'ml',
    'l': 'l', 'lt': 'l', 'lts': 'l', 'litro': 'l', 'litros': 'l', 'liter': 'l', 'liters': 'l',
    'tza': 'cup', 'tzas': 'cup', 'taza': 'cup', 'tazas': 'cup', 'cup': 'cup', 'cups': 'cup',
    'cdta': 'tsp', 'cdita': 'tsp', 'ctdita': 'tsp', 'cucharadita': 'tsp', 'cucharaditas': 'tsp',
    'tsp': 'tsp', 'teaspoon': 'tsp', 'teaspoons': 'tsp',
    'cda': 'tbsp', 'ctda': 'tbsp', 'cucharada': 'tbsp', 'cucharadas': 'tbsp',
    'tbsp': 'tbsp', 'tablespoon': 'tbsp', 'tablespoons': 'tbsp',
    '': 'piece', 'pza': 'piece', 'pzas': 'piece', 'pieza': 'piece', 'piezas': 'piece',
    'piece': 'piece', 'pieces': 'piece',
    'lata': 'can', 'latas': 'can', 'can': 'can', 'cans': 'can',
    'rbn': 'slice', 'rebanada': 'slice', 'rebanadas': 'slice', 'slice': 'slice', 'slices': 'slice',
    'mitad': 'half', 'mitades': 'half', 'half': 'half',
}


def normalize_unit(raw: str) -> str:
    """Map a unit token to its canonical form; unknown tokens are returned trimmed but otherwise unchanged."""
    if raw is None:
        return 'piece'
    key = raw.strip().lower()
    if key not in UNIT_MAPPINGS:
        key = key.rstrip('.')  # "cda." / "gr."
    return UNIT_MAPPINGS.get(key, raw.strip())


__all__ = ['UNIT_MAPPINGS', 'normalize_unit']

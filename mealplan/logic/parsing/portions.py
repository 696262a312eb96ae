"""Portion parsing: "150g", "0.5/2tza", "1/2", "3 piece" -> Portion(amount, unit)."""
import re
from typing import NamedTuple
from mealplan.logic.parsing.units import normalize_unit

# Order matters: compound fraction (decimal numerator), simple fraction, plain number
COMPOUND_FRACTION = re.compile(r'^(\d+(?:\.\d+)?)\s*/\s*(\d+)\s*(.*)$')
SIMPLE_FRACTION = re.compile(r'^(\d+)\s*/\s*(\d+)\s*(.*)$')
LEADING_NUMBER = re.compile(r'^(\d+(?:\.\d+)?)\s*(.*)$')


class Portion(NamedTuple):
    amount: float
    unit: str


DEFAULT_PORTION = Portion(1.0, 'piece')


def _unit_from(rest: str) -> str:
    return normalize_unit(rest.strip() or 'piece')


def _divide(match) -> Portion:
    denominator = float(match.group(2))
    if denominator == 0:
        return DEFAULT_PORTION
    return Portion(float(match.group(1)) / denominator, _unit_from(match.group(3)))


def parse_portion(raw: str) -> Portion:
    """Parse a quantity string. Never raises; ambiguous input falls back to 1 piece."""
    portion = (raw or '').strip()
    if not portion or portion.lower() == 'nan':
        return DEFAULT_PORTION

    match = COMPOUND_FRACTION.match(portion)
    if match:
        return _divide(match)

    match = SIMPLE_FRACTION.match(portion)
    if match:
        return _divide(match)

    match = LEADING_NUMBER.match(portion)
    if match:
        return Portion(float(match.group(1)), _unit_from(match.group(2)))

    return Portion(1.0, normalize_unit(portion))


__all__ = ['Portion', 'DEFAULT_PORTION', 'parse_portion']

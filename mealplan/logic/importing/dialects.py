"""Header dialects and day / meal-type vocabularies for meal-plan imports.

A dialect knows which header cells carry the day, meal type, ingredient and
portion (plus optional recipe id / name). Dialects are tried in order and the
first one whose required columns are all present resolves the header.
Comparisons are case-insensitive and ignore diacritics ("Porción" == "porcion").
"""
import unicodedata
from typing import Dict, List, NamedTuple, Optional, Sequence, Tuple


def fold(text: str) -> str:
    '''Lower-case, strip accents and collapse whitespace.'''
    decomposed = unicodedata.normalize('NFKD', text or '')
    stripped = ''.join(ch for ch in decomposed if not unicodedata.combining(ch))
    return ' '.join(stripped.lower().split())


class ColumnMap(NamedTuple):
    day: int
    meal_type: int
    ingredient: int
    portion: int
    recipe_id: Optional[int] = None
    recipe_name: Optional[int] = None


class ColumnDialect:
    def __init__(self, name: str, day: Sequence[str], meal_type: Sequence[str],
                 ingredient: Sequence[str], portion: Sequence[str],
                 recipe_id: Sequence[str] = (), recipe_name: Sequence[str] = ()):
        self.name = name
        self.required: List[Tuple[str, Sequence[str]]] = [
            ('day', day), ('meal_type', meal_type), ('ingredient', ingredient), ('portion', portion)
        ]
        self.optional: List[Tuple[str, Sequence[str]]] = [
            ('recipe_id', recipe_id), ('recipe_name', recipe_name)
        ]

    @staticmethod
    def _find(header: Sequence[str], tokens: Sequence[str]) -> Optional[int]:
        folded = [fold(cell) for cell in header]
        for index, cell in enumerate(folded):
            if any(token in cell for token in tokens):
                return index
        return None

    def matches(self, header: Sequence[str]) -> bool:
        return all(self._find(header, tokens) is not None for _, tokens in self.required)

    def resolve_columns(self, header: Sequence[str]) -> ColumnMap:
        found = {}
        for role, tokens in self.required + self.optional:
            found[role] = self._find(header, tokens) if tokens else None
        if any(found[role] is None for role, _ in self.required):
            raise ValueError(f"Header does not match dialect '{self.name}': {list(header)}")
        return ColumnMap(**found)

    def __repr__(self) -> str:
        return f"ColumnDialect({self.name!r})"


DEFAULT_DIALECTS: List[ColumnDialect] = [
    # The app's own export: Day,MealType,Ingredient,Portion[,RecipeId,RecipeName]
    ColumnDialect('app-export', day=('day',), meal_type=('mealtype',), ingredient=('ingredient',),
                  portion=('portion',), recipe_id=('recipeid',), recipe_name=('recipename',)),
    # Nutritionist spreadsheets: Día,Tiempo,Ingrediente,Porción
    ColumnDialect('spanish', day=('dia',), meal_type=('tiempo',), ingredient=('ingrediente',),
                  portion=('porcion',), recipe_id=('recipeid', 'id receta'),
                  recipe_name=('recipename', 'nombre receta')),
    ColumnDialect('generic', day=('day', 'dia'), meal_type=('mealtype', 'meal', 'tiempo', 'time'),
                  ingredient=('ingredient',), portion=('portion', 'porcion', 'quantity', 'cantidad'),
                  recipe_id=('recipeid',), recipe_name=('recipename',)),
]


def resolve_header(header: Sequence[str], dialects: Sequence[ColumnDialect] = DEFAULT_DIALECTS
                   ) -> Optional[Tuple[ColumnDialect, ColumnMap]]:
    for dialect in dialects:
        if dialect.matches(header):
            return dialect, dialect.resolve_columns(header)
    return None


# Folded token -> canonical English day
DAY_VOCABULARY: Dict[str, str] = {
    'monday': 'Monday', 'tuesday': 'Tuesday', 'wednesday': 'Wednesday', 'thursday': 'Thursday',
    'friday': 'Friday', 'saturday': 'Saturday', 'sunday': 'Sunday',
    'lunes': 'Monday', 'martes': 'Tuesday', 'miercoles': 'Wednesday', 'jueves': 'Thursday',
    'viernes': 'Friday', 'sabado': 'Saturday', 'domingo': 'Sunday',
}

# Folded token -> canonical meal type (full names, app slot codes, Spanish names)
MEAL_TYPE_VOCABULARY: Dict[str, str] = {
    'breakfast': 'Breakfast',
    'morning snack': 'Morning Snack',
    'snack m': 'Morning Snack',
    'lunch': 'Lunch',
    'afternoon snack': 'Afternoon Snack',
    'snack v': 'Afternoon Snack',
    'dinner': 'Dinner',
    'desayuno': 'Breakfast',
    'colacion m': 'Morning Snack',
    'comida': 'Lunch',
    'colacion v': 'Afternoon Snack',
    'cena': 'Dinner',
}


def resolve_day(token: str) -> Optional[str]:
    return DAY_VOCABULARY.get(fold(token))


def resolve_meal_type(token: str) -> Optional[str]:
    return MEAL_TYPE_VOCABULARY.get(fold(token))


__all__ = [
    'fold', 'ColumnMap', 'ColumnDialect', 'DEFAULT_DIALECTS', 'resolve_header',
    'DAY_VOCABULARY', 'MEAL_TYPE_VOCABULARY', 'resolve_day', 'resolve_meal_type'
]

"""Shopping list aggregation.

Provides aggregate(recipes): one line per (name, unit) with summed amounts,
sorted by ingredient name under a fixed collation.
"""
import logging
import unicodedata
from typing import Dict, Iterable, List, Tuple
from kochbuch.domain.Ingredient import Ingredient
from kochbuch.domain.Recipe import Recipe

logger = logging.getLogger(__name__)


def _strip_accents(text: str) -> str:
    decomposed = unicodedata.normalize('NFD', text)
    return ''.join(c for c in decomposed if not unicodedata.combining(c))


def collation_key(name: str) -> Tuple[str, str, str]:
    """Sort key for ingredient names, independent of the platform locale.

    Primary: accents removed and case folded, so 'Äpfel' sorts with 'Apfel'
    (German dictionary order). Secondary: case folded with accents. Tertiary:
    the raw name.
    """
    name = name or ''
    folded = unicodedata.normalize('NFC', name).casefold()
    return (_strip_accents(folded), folded, name)


def flatten(recipes: Iterable[Recipe]) -> List[Ingredient]:
    result: List[Ingredient] = []
    for recipe in recipes:
        result.extend(recipe.ingredients)
    return result


def aggregate(recipes: Iterable[Recipe]) -> List[Ingredient]:
    """Merge the ingredient lists of the given recipes into a shopping list.

    Lines are grouped by (name, unit); amounts are summed within a group and
    never across units. Missing amounts count as 0. The result is sorted by
    name; lines with equal names keep the order in which they were first seen.

    Args:
        recipes: Selected recipes (order does not matter).

    Returns:
        New list of Ingredient, empty when no recipes are given.
    """
    totals: Dict[Tuple[str, str], Ingredient] = {}
    for ing in flatten(recipes):
        key = ing.key
        current = totals.get(key) or Ingredient(ing.name, 0, ing.unit)
        totals[key] = current.with_amount(current.amount + (ing.amount or 0))

    shopping_list = list(totals.values())
    shopping_list.sort(key=lambda i: collation_key(i.name))
    logger.debug(f"Aggregated {len(shopping_list)} shopping list lines")
    return shopping_list


__all__ = ['aggregate', 'collation_key', 'flatten']

"""Ordered ingredient list of the recipe being edited.

The functions take the current snapshot (any sequence of Ingredient) and return
an EditResult holding the new tuple. They never raise on bad input: a rejected
operation returns the unchanged snapshot with an outcome other than APPLIED.
"""
from __future__ import annotations
import logging
from typing import Any, Optional, Sequence, Tuple
from pydantic import ValidationError
from kochbuch.domain.Ingredient import Ingredient
from kochbuch.domain.Recipe import Recipe
from kochbuch.events.Event_Bus import EventBus
from kochbuch.events.event_helpers import publish_edit_rejected
from kochbuch.logic.editing.results import EditOutcome, EditResult, applied, rejected
from kochbuch.utilities.constants import DIRECTIONS
from kochbuch.utilities.validators import CandidateIngredient

logger = logging.getLogger(__name__)

__all__ = ['add_ingredient', 'remove_ingredient', 'move_ingredient', 'IngredientEditor']


def _candidate(candidate: Any) -> Optional[Ingredient]:
    """Validated copy of the candidate, or None when a field is missing or empty."""
    if isinstance(candidate, Ingredient):
        data = candidate.to_dict()
    elif isinstance(candidate, dict):
        data = candidate
    else:
        return None
    try:
        parsed = CandidateIngredient.model_validate(data)
    except ValidationError:
        return None
    return Ingredient(parsed.name, parsed.amount, parsed.unit)


def _index_of(items: Sequence[Ingredient], target: Any) -> int:
    for i, item in enumerate(items):
        if item is target or item == target:
            return i
    return -1


def add_ingredient(items: Sequence[Ingredient], candidate: Any) -> EditResult:
    """Append the candidate unless a field is empty or its name is already listed."""
    ingredient = _candidate(candidate)
    if ingredient is None:
        return rejected(items, EditOutcome.INVALID)
    if any((item.name or "").strip() == ingredient.name for item in items):
        return rejected(items, EditOutcome.DUPLICATE)
    return applied((*items, ingredient))


def remove_ingredient(items: Sequence[Ingredient], target: Any) -> EditResult:
    pos = _index_of(items, target)
    if pos < 0:
        return rejected(items, EditOutcome.NOT_FOUND)
    return applied((*items[:pos], *items[pos + 1:]))


def move_ingredient(items: Sequence[Ingredient], target: Any, direction: int) -> EditResult:
    """Swap the target with its neighbour above (-1) or below (+1).

    Moving past either end is rejected with OUT_OF_BOUNDS; the list never wraps.
    """
    if isinstance(direction, bool) or not isinstance(direction, int) or direction not in DIRECTIONS:
        return rejected(items, EditOutcome.INVALID)
    pos = _index_of(items, target)
    if pos < 0:
        return rejected(items, EditOutcome.NOT_FOUND)
    new_pos = pos + direction
    if not 0 <= new_pos < len(items):
        return rejected(items, EditOutcome.OUT_OF_BOUNDS)
    moved = list(items)
    moved[pos], moved[new_pos] = moved[new_pos], moved[pos]
    return applied(moved)


class IngredientEditor:
    """Holds the ingredient snapshot of one recipe while it is being edited."""

    def __init__(self, items: Optional[Sequence[Ingredient]] = None, bus: Optional[EventBus] = None):
        self._initial: Tuple[Ingredient, ...] = tuple(items or ())
        self.items: Tuple[Ingredient, ...] = self._initial
        self._bus = bus

    @classmethod
    def from_recipe(cls, recipe: Recipe, bus: Optional[EventBus] = None) -> "IngredientEditor":
        return cls(recipe.ingredients, bus=bus)

    def _apply(self, operation: str, result: EditResult, subject: Any) -> EditResult:
        if result.applied:
            self.items = result.items
        else:
            logger.debug(f"{operation} rejected ({result.outcome.value}): {subject!r}")
            publish_edit_rejected(operation, result.outcome, subject, bus=self._bus)
        return result

    def add(self, candidate: Any) -> EditResult:
        return self._apply("add", add_ingredient(self.items, candidate), candidate)

    def remove(self, target: Any) -> EditResult:
        return self._apply("remove", remove_ingredient(self.items, target), target)

    def move(self, target: Any, direction: int) -> EditResult:
        return self._apply("move", move_ingredient(self.items, target, direction), target)

    @property
    def changed(self) -> bool:
        return self.items != self._initial

    def submit(self, recipe: Recipe) -> Recipe:
        '''Returns the recipe carrying the edited ingredient list, ready to hand to the store.'''
        logger.info(f"Submitting {len(self.items)} ingredients for recipe '{recipe.slug or recipe.name}'")
        return recipe.replace(ingredients=self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(item) for item in self.items)
        return f"Ingredients:\n\t{items_str}"

    __repr__ = __str__

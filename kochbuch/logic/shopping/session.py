"""Shopping session: selected recipes and the shopping list derived from them.

Every selection change recomputes the list synchronously and announces both
the new selection and the new list on the event bus.
"""
from __future__ import annotations
import logging
from typing import Optional
from kochbuch.domain.Recipe import Recipe
from kochbuch.domain.SelectionSet import SelectionSet
from kochbuch.domain.ShoppingList import ShoppingList
from kochbuch.events.Event_Bus import EventBus, GLOBAL_EVENT_BUS
from kochbuch.events.event_helpers import publish_selection_changed, publish_shopping_list_updated
from kochbuch.logic.shopping.aggregator import aggregate

logger = logging.getLogger(__name__)


def build_shopping_list(selection: SelectionSet) -> ShoppingList:
    return ShoppingList(aggregate(selection.recipes()))


class ShoppingSession:
    def __init__(self, selection: Optional[SelectionSet] = None, event_bus: Optional[EventBus] = None):
        self._event_bus = event_bus or GLOBAL_EVENT_BUS
        self.selection = selection or SelectionSet()
        self.shopping_list = build_shopping_list(self.selection)

    def set_event_bus(self, bus: EventBus):
        self._event_bus = bus
        return self

    def is_selected(self, recipe: Recipe) -> bool:
        return self.selection.contains(recipe)

    def toggle(self, recipe: Recipe) -> ShoppingList:
        '''
        Adds the recipe to the selection or removes it, then rebuilds the shopping list.
        '''
        self.selection = self.selection.toggle(recipe)
        selected = self.selection.contains(recipe)
        logger.info(f"{'Selected' if selected else 'Deselected'} recipe '{recipe.name}' ({len(self.selection)} selected)")
        publish_selection_changed(self.selection, recipe, selected, bus=self._event_bus)
        return self._recompute()

    def clear(self) -> ShoppingList:
        self.selection = SelectionSet()
        return self._recompute()

    def _recompute(self) -> ShoppingList:
        self.shopping_list = build_shopping_list(self.selection)
        publish_shopping_list_updated(self.shopping_list, bus=self._event_bus)
        return self.shopping_list

    def __str__(self) -> str:
        return f"{self.selection}\n{self.shopping_list}"

    __repr__ = __str__

"""Event helper utilities.

Helpers that build the payloads for shopping and editor events and publish
them on a bus (the global one unless another is passed).

Quick import:
    from kochbuch.events.event_helpers import (
        publish_selection_changed, publish_shopping_list_updated, publish_edit_rejected,
        SELECTION_CHANGED, SHOPPING_LIST_UPDATED, EDIT_REJECTED
    )

"""
from __future__ import annotations
from typing import Any, Optional
from .Event_Bus import (
    EventBus, GLOBAL_EVENT_BUS,
    SELECTION_CHANGED, SHOPPING_LIST_UPDATED, EDIT_REJECTED
)

__all__ = [
    'publish_selection_changed', 'publish_shopping_list_updated', 'publish_edit_rejected',
    'SELECTION_CHANGED', 'SHOPPING_LIST_UPDATED', 'EDIT_REJECTED'
]


def publish_selection_changed(selection: Any, recipe: Any, selected: bool,
                              bus: Optional[EventBus] = None):
    """Publish a selection.changed event."""
    (bus or GLOBAL_EVENT_BUS).publish(SELECTION_CHANGED, {
        'selection': selection,
        'recipe': recipe,
        'selected': selected
    })


def publish_shopping_list_updated(shopping_list: Any, bus: Optional[EventBus] = None):
    """Publish the freshly computed shopping list.

    Payload structure:
        {
          'shopping_list': <ShoppingList>,
          'count': <int>
        }
    """
    (bus or GLOBAL_EVENT_BUS).publish(SHOPPING_LIST_UPDATED, {
        'shopping_list': shopping_list,
        'count': len(shopping_list)
    })


def publish_edit_rejected(operation: str, outcome: Any, ingredient: Any,
                          bus: Optional[EventBus] = None):
    """Publish an editor.rejected event so the UI can tell the user the list did not change."""
    (bus or GLOBAL_EVENT_BUS).publish(EDIT_REJECTED, {
        'operation': operation,
        'outcome': outcome,
        'ingredient': ingredient
    })

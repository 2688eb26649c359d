"""Simple Event Bus / Observer implementation for selection and editor notifications.

Event names used so far:
  selection.changed -> payload {"selection": SelectionSet, "recipe": Recipe, "selected": bool}
  shopping_list.updated -> payload {"shopping_list": ShoppingList, "count": int}
  editor.rejected -> payload {"operation": str, "outcome": EditOutcome, "ingredient": Ingredient}

Subscribers are callables taking (event_name, payload). Delivery is synchronous,
in subscription order.
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
SELECTION_CHANGED = "selection.changed"
SHOPPING_LIST_UPDATED = "shopping_list.updated"
EDIT_REJECTED = "editor.rejected"


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		try:
			self._subscribers[event_name].remove(callback)
		except (ValueError, KeyError):
			pass

	def publish(self, event_name: str, payload: Any):
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception:
				# one failing subscriber must not starve the rest
				logger.exception(f"Error delivering {event_name} to {cb}")


# A singleton-like instance (can be imported)
GLOBAL_EVENT_BUS = EventBus()


__all__ = [
	'EventBus', 'GLOBAL_EVENT_BUS',
	'SELECTION_CHANGED', 'SHOPPING_LIST_UPDATED', 'EDIT_REJECTED'
]

"""Event bus for inventory alerts.

Event names:
  inventory.low_stock -> payload {"item": InventoryItem, "remaining": int, "threshold": int}
  inventory.item_updated -> payload {"item": InventoryItem, "before": int, "after": int, "direction": str}
  inventory.item_added -> payload {"item": InventoryItem}

Subscribers are callables taking (event_name, payload). Subscribing and
publishing may happen from request worker threads, so the subscriber table is
guarded by a lock; callbacks themselves run outside it.
"""
from __future__ import annotations
import logging
from collections import defaultdict
from threading import Lock
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

INVENTORY_LOW_STOCK = "inventory.low_stock"
INVENTORY_ITEM_UPDATED = "inventory.item_updated"
INVENTORY_ITEM_ADDED = "inventory.item_added"

Subscriber = Callable[[str, Any], None]


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Subscriber]] = defaultdict(list)
		self._lock = Lock()

	def subscribe(self, event_name: str, callback: Subscriber):
		with self._lock:
			if callback not in self._subscribers[event_name]:
				self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Subscriber):
		with self._lock:
			if callback in self._subscribers.get(event_name, []):
				self._subscribers[event_name].remove(callback)

	def publish(self, event_name: str, payload: Any) -> int:
		"""Deliver to every subscriber; returns how many took the event without raising."""
		with self._lock:
			targets = list(self._subscribers.get(event_name, []))
		delivered = 0
		for cb in targets:
			try:
				cb(event_name, payload)
				delivered += 1
			except Exception:
				logger.exception("Error delivering %s to %r", event_name, cb)
		return delivered


GLOBAL_EVENT_BUS = EventBus()


__all__ = [
	'EventBus', 'GLOBAL_EVENT_BUS', 'Subscriber',
	'INVENTORY_LOW_STOCK', 'INVENTORY_ITEM_UPDATED', 'INVENTORY_ITEM_ADDED'
]

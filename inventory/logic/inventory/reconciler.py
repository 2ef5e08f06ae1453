"""Inventory reconciler: applies a ParsedIntent to one item of a Ledger.

The new quantity is written to the store first (when one is given) and only
copied into the in-memory ledger once that write succeeded, so memory and
store never diverge on a failed write.
"""
from __future__ import annotations
import logging
from datetime import datetime
from typing import Optional, Union

from inventory.domain.Ledger import Ledger
from inventory.domain.ParsedIntent import Direction, ParsedIntent
from inventory.events.event_helpers import publish_item_updated
from inventory.infra.Inventory_Repository import InventoryStore, StoreError
from inventory.logic import status
from inventory.logic.results import ItemNotFound, PersistenceFailed, Updated

logger = logging.getLogger(__name__)

__all__ = ["compute_quantity", "reconcile"]


def compute_quantity(quantity: int, delta: int, direction: Direction) -> int:
    """Add is unbounded above; Consume is clamped at zero."""
    if direction is Direction.ADD:
        return quantity + delta
    return max(0, quantity - delta)


def reconcile(intent: ParsedIntent, ledger: Ledger, store: Optional[InventoryStore] = None,
              *, now: Optional[datetime] = None) -> Union[Updated, ItemNotFound, PersistenceFailed]:
    item = ledger.find_match(intent.item_fragment)
    if item is None:
        names = ledger.item_names()
        logger.info("No inventory item matches %r", intent.item_fragment)
        return ItemNotFound(intent, names, status.not_found(intent.item_fragment, names))

    before = item.quantity
    after = compute_quantity(before, intent.quantity_delta, intent.direction)
    timestamp = now or datetime.now()

    if store is not None:
        try:
            store.update_quantity(item.id, after, timestamp)
        except StoreError as e:
            logger.error("Store rejected update of %s (id=%s): %s", item.name, item.id, e)
            return PersistenceFailed(item.name, e, status.persistence_failed(item.name, e))

    ledger.apply_quantity(item.id, after, timestamp)
    publish_item_updated(item, before, after, intent.direction.value, bus=ledger.event_bus)

    action = "Added" if intent.is_adding else "Used"
    logger.info("%s %d %s: %d -> %d", action, intent.quantity_delta, item.name, before, after)
    return Updated(item, intent, before, after,
                   status.updated(action, intent.quantity_delta, item.name, before, after))

"""Event helper utilities.

Helpers that publish inventory events on a bus (the global one unless a
specific bus is passed, which is what the Ledger does).

Quick import:
    from inventory.events.event_helpers import (
        publish_low_stock, publish_item_updated, publish_item_added,
    )
"""
from __future__ import annotations
from typing import Any, Optional
from .Event_Bus import (
    EventBus, GLOBAL_EVENT_BUS,
    INVENTORY_LOW_STOCK, INVENTORY_ITEM_UPDATED, INVENTORY_ITEM_ADDED
)

__all__ = [
    'publish_low_stock', 'publish_item_updated', 'publish_item_added',
    'INVENTORY_LOW_STOCK', 'INVENTORY_ITEM_UPDATED', 'INVENTORY_ITEM_ADDED'
]


def publish_low_stock(item: Any, remaining: int, threshold: int, bus: Optional[EventBus] = None):
    """Publish an inventory.low_stock event."""
    (bus or GLOBAL_EVENT_BUS).publish(INVENTORY_LOW_STOCK, {
        'item': item,
        'remaining': remaining,
        'threshold': threshold
    })


def publish_item_updated(item: Any, before: int, after: int, direction: str,
                         bus: Optional[EventBus] = None):
    """Publish an inventory.item_updated event."""
    (bus or GLOBAL_EVENT_BUS).publish(INVENTORY_ITEM_UPDATED, {
        'item': item,
        'before': before,
        'after': after,
        'direction': direction
    })


def publish_item_added(item: Any, bus: Optional[EventBus] = None):
    """Publish an inventory.item_added event."""
    (bus or GLOBAL_EVENT_BUS).publish(INVENTORY_ITEM_ADDED, {'item': item})

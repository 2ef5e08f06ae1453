"""Item registration: appends a new item to a Ledger (and to the store, when given)."""
from __future__ import annotations
import logging
from datetime import datetime
from typing import Optional, Union

from inventory.domain.InventoryItem import InventoryItem
from inventory.domain.Ledger import Ledger
from inventory.events.event_helpers import publish_item_added
from inventory.infra.Inventory_Repository import InventoryStore, StoreError
from inventory.logic import status
from inventory.logic.results import LedgerOutOfSync, PersistenceFailed, Registered
from inventory.utilities.constants import (
    DEFAULT_LOW_STOCK_THRESHOLD, DEFAULT_QUANTITY, DEFAULT_UNIT, SAMPLE_ITEM_NAME
)

logger = logging.getLogger(__name__)

__all__ = ["register_item"]


def register_item(ledger: Ledger, store: Optional[InventoryStore] = None, *,
                  name: Optional[str] = None,
                  quantity: int = DEFAULT_QUANTITY,
                  unit: str = DEFAULT_UNIT,
                  low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
                  now: Optional[datetime] = None) -> Union[Registered, LedgerOutOfSync, PersistenceFailed]:
    """Register a new item.

    Without a store the id is ``max(existing ids) + 1``. With a store the
    store assigns the id and the stored fields become the new ledger entry. If that
    id is already in the (stale) ledger, LedgerOutOfSync is returned and the
    ledger is left alone.
    """
    name = name or SAMPLE_ITEM_NAME.format(n=len(ledger) + 1)
    timestamp = now or datetime.now()
    fields = {
        "name": name,
        "quantity": quantity,
        "unit": unit,
        "low_stock_threshold": low_stock_threshold,
        "last_updated": timestamp.isoformat(),
    }

    if store is None:
        item = InventoryItem.from_dict({**fields, "id": ledger.next_id()})
    else:
        try:
            item = InventoryItem.from_dict(store.insert_item(fields))
        except StoreError as e:
            logger.error("Store rejected new item %s: %s", name, e)
            return PersistenceFailed(name, e, status.persistence_failed(name, e))
        if ledger.get_item(item.id) is not None:
            logger.warning("Store assigned id %s to %s, which the ledger already holds", item.id, item.name)
            return LedgerOutOfSync(item, status.out_of_sync(item.name))

    ledger.add_item(item)
    publish_item_added(item, bus=ledger.event_bus)
    logger.info("Registered %s with id %s", item.name, item.id)
    return Registered(item, status.registered(item.name))

"""Web-facing observers for inventory events.

This module subscribes to an EventBus for:
  - inventory.low_stock
  - inventory.item_updated
  - inventory.item_added

and stores a lightweight in-memory ring buffer of recent events that the
FastAPI layer exposes at /api/inventory/alerts, so a page can show alerts and
highlight changed rows without reloading the whole inventory.

Design:
  * Each event stored with an auto-increment integer id (cursor) so clients
    can request only newer events (since=<last_id_seen>).
  * A simple Lock guards the buffer; sync endpoints run in a threadpool.
  * A MAX_EVENTS cap prevents unbounded memory growth.
"""
from __future__ import annotations
from typing import List, Dict, Any, Optional
from threading import Lock
from datetime import datetime, timezone
import logging

from .Event_Bus import (
    EventBus, GLOBAL_EVENT_BUS,
    INVENTORY_LOW_STOCK, INVENTORY_ITEM_UPDATED, INVENTORY_ITEM_ADDED
)

logger = logging.getLogger(__name__)

_lock = Lock()
_events: List[Dict[str, Any]] = []
_next_id = 1
MAX_EVENTS = 300  # keep a few hundred recent events
_subscribed_to: Optional[EventBus] = None

_OBSERVED = (INVENTORY_LOW_STOCK, INVENTORY_ITEM_UPDATED, INVENTORY_ITEM_ADDED)


def _record(event_name: str, payload: Any):  # signature expected by EventBus
    global _next_id
    with _lock:
        evt = {
            'id': _next_id,
            'type': event_name,
            'ts': datetime.now(timezone.utc).isoformat()
        }
        if isinstance(payload, dict):
            item = payload.get('item')
            if item is not None and hasattr(item, 'name'):
                evt['item_id'] = item.id
                evt['name'] = item.name
                evt['unit'] = item.unit
                evt['quantity'] = item.quantity
            for k in ('remaining', 'threshold', 'before', 'after', 'direction'):
                if k in payload:
                    evt[k] = payload[k]
        _events.append(evt)
        _next_id += 1
        if len(_events) > MAX_EVENTS:
            del _events[: len(_events) - MAX_EVENTS]


def start(bus: Optional[EventBus] = None):
    """Idempotent start: subscribe observers once per bus."""
    global _subscribed_to
    bus = bus or GLOBAL_EVENT_BUS
    if _subscribed_to is bus:
        return
    if _subscribed_to is not None:
        stop()
    for name in _OBSERVED:
        bus.subscribe(name, _record)
    _subscribed_to = bus
    logger.debug("Web observers subscribed to %d inventory events", len(_OBSERVED))


def stop():
    """Unsubscribe from the current bus and drop buffered events."""
    global _subscribed_to, _next_id
    if _subscribed_to is not None:
        for name in _OBSERVED:
            _subscribed_to.unsubscribe(name, _record)
    _subscribed_to = None
    with _lock:
        _events.clear()
        _next_id = 1


def get_events(since: int | None = None) -> Dict[str, Any]:
    """Return events newer than 'since' (exclusive).

    If since is None, returns the last N (up to MAX_EVENTS) events.
    Response includes next_cursor (largest id) so client can poll with since=next_cursor.
    """
    with _lock:
        if since is None:
            data = list(_events)
        else:
            data = [e for e in _events if e['id'] > since]
        next_cursor = _events[-1]['id'] if _events else since or 0
    return {'events': data, 'next_cursor': next_cursor}


__all__ = ['start', 'stop', 'get_events']

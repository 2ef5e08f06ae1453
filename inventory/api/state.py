"""Application state: the one ledger, store and capture session the API works on."""
from __future__ import annotations
import logging
from threading import Lock
from typing import Any, Dict, Optional

from inventory.events import web_observers
from inventory.events.Event_Bus import EventBus, GLOBAL_EVENT_BUS
from inventory.infra.Inventory_Repository import (
    InMemoryInventoryStore, InventoryStore, JsonInventoryStore, load_ledger
)
from inventory.infra.paths import INVENTORY_FILE
from inventory.logic.inventory.analysis import compute_low_stock, serialize_item
from inventory.logic.inventory.registration import register_item
from inventory.logic.results import LedgerOutOfSync, Outcome
from inventory.logic.voice.capture import CaptureSession
from inventory.logic.voice.processor import CommandOutcome, VoiceCommandProcessor
from inventory.utilities import config
from inventory.utilities.highlight import HighlightTracker
from inventory.utilities.validators import CaptureEventInput, ItemInput

logger = logging.getLogger("inventory_app")


def build_store(kind: str = config.INVENTORY_STORE) -> InventoryStore:
    if kind == 'memory':
        return InMemoryInventoryStore()
    if kind != 'json':
        logger.warning("Unknown INVENTORY_STORE %r, using the JSON file store", kind)
    return JsonInventoryStore(INVENTORY_FILE)


class InventoryService:
    def __init__(self, store: Optional[InventoryStore] = None, *,
                 seed: bool = config.INVENTORY_SEED_DEMO,
                 strict_direction: bool = config.STRICT_DIRECTION,
                 highlight_seconds: float = config.HIGHLIGHT_SECONDS,
                 bus: Optional[EventBus] = None):
        self.store = store if store is not None else build_store()
        self.seed = seed
        self.bus = bus or GLOBAL_EVENT_BUS
        self.strict_direction = strict_direction
        self.capture = CaptureSession()
        self.highlight = HighlightTracker(highlight_seconds)
        self._lock = Lock()
        web_observers.start(self.bus)
        self.reload()

    def reload(self) -> str:
        """Full read from the store; replaces the in-memory ledger."""
        with self._lock:
            result = load_ledger(self.store, seed=self.seed, bus=self.bus)
            self.ledger = result.ledger
            self.processor = VoiceCommandProcessor(self.ledger, self.store,
                                                   strict_direction=self.strict_direction)
            self.status = result.status
            return self.status

    def _record(self, outcome: Outcome):
        self.status = outcome.status
        self.highlight.mark(outcome.changed_item_id)

    def process(self, transcript: str) -> CommandOutcome:
        with self._lock:
            outcome = self.processor.process(transcript)
            self._record(outcome.result)
            return outcome

    def register(self, payload: ItemInput) -> Outcome:
        with self._lock:
            result = register_item(self.ledger, self.store, name=payload.name,
                                   quantity=payload.quantity, unit=payload.unit,
                                   low_stock_threshold=payload.low_stock_threshold)
            self._record(result)
        if isinstance(result, LedgerOutOfSync):
            # the row is in the store already; a full read picks it up
            self.reload()
            self.status = result.status
        return result

    def handle_capture_event(self, payload: CaptureEventInput) -> Dict[str, Any]:
        """Advance the capture state machine; a final transcript is processed right away."""
        outcome = None
        if payload.event == 'start':
            self.capture.start()
        elif payload.event == 'result':
            self.capture.receive_transcript(payload.transcript)
            outcome = self.process(payload.transcript)
        elif payload.event == 'error':
            self.capture.receive_error(payload.error or 'unknown')
        elif payload.event == 'unsupported':
            self.capture.unsupported()
        else:
            self.capture.stop()
        status = outcome.status if outcome is not None else self.capture.status
        if outcome is None:
            self.status = status
        return {
            'capture': self.capture.to_dict(),
            'outcome': outcome.to_dict() if outcome is not None else None,
            'status': status,
        }

    def snapshot(self) -> Dict[str, Any]:
        highlighted = self.highlight.current()
        items = [serialize_item(item, highlighted_id=highlighted) for item in self.ledger]
        return {
            'items': items,
            'count': len(items),
            'highlighted_item_id': highlighted,
            'status': self.status,
        }

    def low_stock(self) -> Dict[str, Any]:
        low = compute_low_stock(self.ledger)
        return {'items': low, 'count': len(low)}

    def shutdown(self):
        self.highlight.cancel()
        self.capture.stop()

"""Discriminated results returned by the interpreter, reconciler and registration.

Every operation reports its outcome as one of these objects instead of raising.
Callers branch on ``kind`` (or ``isinstance``) and show ``status`` to the user.
"""
from __future__ import annotations
from typing import List, Optional

from inventory.domain.InventoryItem import InventoryItem
from inventory.domain.ParsedIntent import ParsedIntent


class Outcome:
    kind = "outcome"
    ok = False

    def __init__(self, status: str):
        self.status = status

    @property
    def changed_item_id(self) -> Optional[int]:
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status={self.status!r})"


class Unrecognized(Outcome):
    """No command pattern matched the transcript."""
    kind = "unrecognized"

    def __init__(self, transcript: str, status: str):
        super().__init__(status)
        self.transcript = transcript


class ItemNotFound(Outcome):
    """A command matched but no ledger item resolves its fragment."""
    kind = "not_found"

    def __init__(self, intent: ParsedIntent, available: List[str], status: str):
        super().__init__(status)
        self.intent = intent
        self.available = available

    @property
    def fragment(self) -> str:
        return self.intent.item_fragment


class Updated(Outcome):
    """Exactly one item's quantity changed."""
    kind = "updated"
    ok = True

    def __init__(self, item: InventoryItem, intent: ParsedIntent, before: int, after: int, status: str):
        super().__init__(status)
        self.item = item
        self.intent = intent
        self.before = before
        self.after = after

    @property
    def changed_item_id(self) -> Optional[int]:
        return self.item.id

    @property
    def low_stock(self) -> bool:
        return self.item.is_low_stock


class Registered(Outcome):
    kind = "registered"
    ok = True

    def __init__(self, item: InventoryItem, status: str):
        super().__init__(status)
        self.item = item

    @property
    def changed_item_id(self) -> Optional[int]:
        return self.item.id


class LedgerOutOfSync(Outcome):
    """The store saved the item under an id the in-memory ledger already uses.

    The ledger is stale; a full reload from the store brings the new item in.
    """
    kind = "out_of_sync"

    def __init__(self, item: InventoryItem, status: str):
        super().__init__(status)
        self.item = item


class PersistenceFailed(Outcome):
    """The store rejected a write; the in-memory ledger was left as it was."""
    kind = "persistence_failed"

    def __init__(self, item_name: str, error: Exception, status: str):
        super().__init__(status)
        self.item_name = item_name
        self.error = error


__all__ = [
    'Outcome', 'Unrecognized', 'ItemNotFound', 'Updated', 'Registered',
    'LedgerOutOfSync', 'PersistenceFailed'
]

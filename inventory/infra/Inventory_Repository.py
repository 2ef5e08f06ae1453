"""Inventory repository: the store contract plus file and in-memory implementations.

A store answers three calls: list every item in creation order, update the
quantity and timestamp of one item, and insert a new item returning the
stored fields with their assigned id. Failures are raised as StoreError and
turned into status results by the logic layer.
"""
import copy
import json
import logging
import os
import shutil
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from inventory.domain.Ledger import Ledger
from inventory.events.Event_Bus import EventBus
from inventory.infra.paths import INVENTORY_FILE
from inventory.logic import status
from inventory.utilities.constants import SEED_INVENTORY

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Raised when the backing store rejects a read or a write."""


class InventoryStore:
    def list_items(self) -> List[Dict[str, Any]]:
        raise NotImplementedError

    def update_quantity(self, item_id: int, quantity: int, last_updated: datetime) -> None:
        raise NotImplementedError

    def insert_item(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        raise NotImplementedError


def _next_id(rows: List[Dict[str, Any]]) -> int:
    return max((int(r['id']) for r in rows), default=0) + 1


def _apply_update(rows: List[Dict[str, Any]], item_id: int, quantity: int, last_updated: datetime):
    for row in rows:
        if int(row['id']) == item_id:
            row['quantity'] = quantity
            row['last_updated'] = last_updated.isoformat()
            return
    raise StoreError(f"Item {item_id} does not exist")


class InMemoryInventoryStore(InventoryStore):
    """Process-local store; used for ephemeral runs and tests."""

    def __init__(self, rows: Optional[List[Dict[str, Any]]] = None):
        self._rows: List[Dict[str, Any]] = copy.deepcopy(rows) if rows else []

    def list_items(self):
        return copy.deepcopy(self._rows)

    def update_quantity(self, item_id, quantity, last_updated):
        _apply_update(self._rows, item_id, quantity, last_updated)

    def insert_item(self, fields):
        row = dict(fields)
        row['id'] = _next_id(self._rows)
        self._rows.append(row)
        return dict(row)


class JsonInventoryStore(InventoryStore):
    """Stores the ledger as a JSON list in a single file, rewritten atomically."""

    def __init__(self, path: Path = INVENTORY_FILE):
        self.path = Path(path)

    def _read(self) -> List[Dict[str, Any]]:
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                rows = json.load(f)
        except FileNotFoundError:
            logger.warning(f"Inventory file not found: {self.path}. Starting empty.")
            return []
        except json.JSONDecodeError as e:
            raise StoreError(f"Invalid JSON in {self.path.name}: {e}") from e
        except OSError as e:
            raise StoreError(str(e)) from e
        if not isinstance(rows, list):
            raise StoreError(f"{self.path.name} does not contain a list of items")
        return rows

    def _atomic_write(self, rows: List[Dict[str, Any]]):
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=str(self.path.parent), prefix=".inventory_", suffix=".json")
        except OSError as e:
            raise StoreError(str(e)) from e
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as tmp:
                json.dump(rows, tmp, indent=2, ensure_ascii=False)
            shutil.move(tmp_path, self.path)
        except OSError as e:
            raise StoreError(str(e)) from e
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)

    def list_items(self):
        return self._read()

    def update_quantity(self, item_id, quantity, last_updated):
        rows = self._read()
        _apply_update(rows, item_id, quantity, last_updated)
        self._atomic_write(rows)

    def insert_item(self, fields):
        rows = self._read()
        row = dict(fields)
        row['id'] = _next_id(rows)
        rows.append(row)
        self._atomic_write(rows)
        return dict(row)


class LoadResult:
    def __init__(self, ledger: Ledger, error: Optional[Exception] = None):
        self.ledger = ledger
        self.error = error

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def status(self) -> str:
        if self.error is not None:
            return status.load_failed(self.error)
        return status.IDLE_STATUS


def load_ledger(store: InventoryStore, *, seed: bool = False, bus: Optional[EventBus] = None) -> LoadResult:
    """Read every item from the store into a fresh Ledger.

    With ``seed`` an empty store is first filled with the demo items. On a
    read failure the returned ledger is empty and the error is reported.
    """
    ledger = Ledger(bus)
    try:
        rows = store.list_items()
        if not rows and seed:
            now = datetime.now().isoformat()
            rows = [store.insert_item({**{k: v for k, v in entry.items() if k != 'id'}, 'last_updated': now})
                    for entry in SEED_INVENTORY]
            logger.info("Seeded inventory with %d demo items", len(rows))
        ledger.from_dict(rows)
    except (StoreError, ValueError, KeyError, TypeError) as e:
        logger.error(f"Error loading inventory: {e}")
        return LoadResult(Ledger(bus), e)
    logger.info("Loaded %d inventory items", len(ledger))
    return LoadResult(ledger)


__all__ = [
    'StoreError', 'InventoryStore', 'InMemoryInventoryStore', 'JsonInventoryStore',
    'LoadResult', 'load_ledger'
]

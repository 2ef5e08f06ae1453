from datetime import datetime
import unittest
from inventory.domain.InventoryItem import InventoryItem
from inventory.domain.Ledger import Ledger
from inventory.events.Event_Bus import EventBus, INVENTORY_ITEM_ADDED
from inventory.infra.Inventory_Repository import InMemoryInventoryStore, StoreError
from inventory.logic.inventory.registration import register_item
from inventory.logic.results import LedgerOutOfSync, PersistenceFailed, Registered


class RejectingStore(InMemoryInventoryStore):
    def insert_item(self, fields):
        raise StoreError("quota exceeded")


class TestRegistration(unittest.TestCase):

    def setUp(self):
        self.bus = EventBus()
        self.ledger = Ledger(self.bus)
        self.ledger.add_item(InventoryItem(1, "Syringes", 25, "pieces", 10))
        self.ledger.add_item(InventoryItem(7, "Gauze", 12, "packs", 5))

    def test_defaults_match_sample_item(self):
        stamp = datetime(2024, 2, 2, 10, 0)
        result = register_item(self.ledger, now=stamp)
        self.assertIsInstance(result, Registered)
        item = result.item
        self.assertEqual(item.id, 8)
        self.assertEqual(item.name, "Sample Item 3")
        self.assertEqual((item.quantity, item.unit, item.low_stock_threshold), (20, "pieces", 5))
        self.assertEqual(item.last_updated, stamp)
        self.assertIs(self.ledger.get_items()[-1], item)
        self.assertEqual(result.status, "✅ Added new item Sample Item 3")

    def test_caller_supplied_fields(self):
        result = register_item(self.ledger, name="Saline", quantity=4, unit="bags", low_stock_threshold=2)
        self.assertEqual(result.item.name, "Saline")
        self.assertFalse(result.item.is_low_stock)

    def test_store_assigns_id(self):
        store = InMemoryInventoryStore([{"id": 40, "name": "Old", "quantity": 1}])
        result = register_item(self.ledger, store, name="Saline")
        self.assertEqual(result.item.id, 41)
        self.assertEqual(store.list_items()[-1]["name"], "Saline")

    def test_store_failure_leaves_ledger(self):
        result = register_item(self.ledger, RejectingStore(), name="Saline")
        self.assertIsInstance(result, PersistenceFailed)
        self.assertIn("Saline", result.status)
        self.assertEqual(len(self.ledger), 2)

    def test_store_id_already_in_stale_ledger(self):
        ledger = Ledger(self.bus)
        ledger.add_item(InventoryItem(2, "Bandages", 15, "rolls", 5))
        store = InMemoryInventoryStore([{"id": 1, "name": "Syringes", "quantity": 25}])
        result = register_item(ledger, store, name="Saline")
        self.assertIsInstance(result, LedgerOutOfSync)
        self.assertEqual(result.kind, "out_of_sync")
        self.assertEqual(result.item.id, 2)
        self.assertIn("Saline", result.status)
        self.assertEqual(ledger.item_names(), ["Bandages"])
        self.assertEqual([r["name"] for r in store.list_items()], ["Syringes", "Saline"])

    def test_publishes_item_added(self):
        events = []
        self.bus.subscribe(INVENTORY_ITEM_ADDED, lambda name, payload: events.append(payload["item"].name))
        register_item(self.ledger, name="Saline")
        self.assertEqual(events, ["Saline"])


if __name__ == '__main__':
    unittest.main()

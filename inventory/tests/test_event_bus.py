from datetime import datetime
import unittest
from inventory.domain.InventoryItem import InventoryItem
from inventory.domain.Ledger import Ledger
from inventory.events import web_observers
from inventory.events.Event_Bus import EventBus, INVENTORY_LOW_STOCK
from inventory.events.event_helpers import publish_item_updated


class TestEventBus(unittest.TestCase):

    def test_subscribe_publish_unsubscribe(self):
        bus = EventBus()
        seen = []
        listener = lambda name, payload: seen.append((name, payload))
        bus.subscribe("x", listener)
        bus.subscribe("x", listener)
        bus.publish("x", 1)
        bus.unsubscribe("x", listener)
        bus.publish("x", 2)
        self.assertEqual(seen, [("x", 1)])

    def test_failing_subscriber_does_not_stop_delivery(self):
        bus = EventBus()
        seen = []

        def broken(name, payload):
            raise RuntimeError("boom")

        bus.subscribe("x", broken)
        bus.subscribe("x", lambda name, payload: seen.append(payload))
        with self.assertLogs("inventory.events.Event_Bus", level="ERROR"):
            delivered = bus.publish("x", "ok")
        self.assertEqual(seen, ["ok"])
        self.assertEqual(delivered, 1)

    def test_publish_without_subscribers(self):
        bus = EventBus()
        self.assertEqual(bus.publish(INVENTORY_LOW_STOCK, {}), 0)
        bus.unsubscribe(INVENTORY_LOW_STOCK, print)


class TestWebObservers(unittest.TestCase):

    def setUp(self):
        self.bus = EventBus()
        web_observers.start(self.bus)

    def tearDown(self):
        web_observers.stop()

    def test_records_low_stock_with_cursor(self):
        ledger = Ledger(self.bus)
        ledger.add_item(InventoryItem(3, "Lidocaine", 8, "vials", 3))
        ledger.apply_quantity(3, 2, datetime.now())

        snapshot = web_observers.get_events()
        self.assertEqual(len(snapshot["events"]), 1)
        evt = snapshot["events"][0]
        self.assertEqual(evt["type"], INVENTORY_LOW_STOCK)
        self.assertEqual((evt["item_id"], evt["name"], evt["remaining"], evt["threshold"]), (3, "Lidocaine", 2, 3))

        cursor = snapshot["next_cursor"]
        publish_item_updated(ledger.get_item(3), 2, 1, "consume", bus=self.bus)
        newer = web_observers.get_events(cursor)
        self.assertEqual([e["after"] for e in newer["events"]], [1])
        self.assertEqual(web_observers.get_events(newer["next_cursor"])["events"], [])

    def test_start_is_idempotent(self):
        web_observers.start(self.bus)
        publish_item_updated(InventoryItem(1, "Gauze", 3, "packs", 5), 4, 3, "consume", bus=self.bus)
        self.assertEqual(len(web_observers.get_events()["events"]), 1)


if __name__ == '__main__':
    unittest.main()

"""
Warehouse Registry Tests
========================
One instance per name, lazy creation, default name, reset hook.
"""

import os
import sys
import threading
import unittest
import uuid
from decimal import Decimal
from unittest import mock

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from warehouse import get_warehouse, reset_registry, warehouse_names
from warehouse import config
from warehouse import registry


class TestRegistry(unittest.TestCase):

    def setUp(self):
        reset_registry()

    def tearDown(self):
        reset_registry()

    def test_default_instance(self):
        """No name resolves to the configured default."""
        w = get_warehouse()
        self.assertIsNotNone(w)
        self.assertEqual(w.name, config.DEFAULT_WAREHOUSE_NAME)
        self.assertIs(get_warehouse(), w)
        self.assertIs(get_warehouse(config.DEFAULT_WAREHOUSE_NAME), w)

    def test_default_name_is_configurable(self):
        with mock.patch.object(config, "DEFAULT_WAREHOUSE_NAME", "Central"):
            w = get_warehouse()
        self.assertEqual(w.name, "Central")
        self.assertIs(get_warehouse("Central"), w)

    def test_named_instance(self):
        w = get_warehouse("MyStore")
        self.assertEqual(w.name, "MyStore")

    def test_same_name_same_instance(self):
        self.assertIs(get_warehouse("Just a name"), get_warehouse("Just a name"))

    def test_different_names_different_instances(self):
        a = get_warehouse("A")
        b = get_warehouse("B")
        self.assertIsNot(a, b)
        a.add_product(uuid.uuid4(), "Milk", "Dairy", Decimal("1"))
        self.assertTrue(b.is_empty())

    def test_state_survives_lookup(self):
        """Products added through one reference are visible through the next."""
        pid = uuid.uuid4()
        get_warehouse("Shared").add_product(pid, "Milk", "Dairy", Decimal("9.99"))
        self.assertIsNotNone(get_warehouse("Shared").get_product_by_id(pid))

    def test_clock_only_used_on_creation(self):
        first = get_warehouse("Timed")
        other_clock = mock.Mock()
        self.assertIs(get_warehouse("Timed", clock=other_clock), first)
        first.add_product(uuid.uuid4(), "Milk", "Dairy", Decimal("1"))
        other_clock.assert_not_called()

    def test_names_in_creation_order(self):
        for name in ("b", "a", "c", "a"):
            get_warehouse(name)
        self.assertEqual(warehouse_names(), ["b", "a", "c"])

    def test_reset_forgets_instances(self):
        before = get_warehouse("Temp")
        before.add_product(uuid.uuid4(), "Milk", "Dairy", Decimal("1"))
        reset_registry()
        self.assertEqual(warehouse_names(), [])
        after = get_warehouse("Temp")
        self.assertIsNot(after, before)
        self.assertTrue(after.is_empty())

    def test_concurrent_first_access_creates_once(self):
        """Racing get-or-create calls on an unseen name all see one instance."""
        threads_n = 16
        barrier = threading.Barrier(threads_n)
        seen = []
        seen_lock = threading.Lock()

        real_create = registry._create
        create_calls = []

        def counting_create(name, clock=None):
            create_calls.append(name)
            return real_create(name, clock=clock)

        def worker():
            barrier.wait()
            w = get_warehouse("Contended")
            with seen_lock:
                seen.append(w)

        with mock.patch.object(registry, "_create", counting_create):
            threads = [threading.Thread(target=worker) for _ in range(threads_n)]
            for t in threads:
                t.start()
            for t in threads:
                t.join(timeout=5.0)

        self.assertEqual(len(seen), threads_n)
        self.assertEqual(len({id(w) for w in seen}), 1)
        self.assertEqual(create_calls, ["Contended"])


if __name__ == '__main__':
    unittest.main()

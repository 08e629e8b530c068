"""Tests for the slot arena behind the work queue and the item registry."""
from __future__ import annotations

import unittest

from core.errors import InvariantViolation
from core.registry import SlotRegistry


class TestSlotRegistryInsert(unittest.TestCase):

    def test_ids_are_dense_from_zero(self):
        reg = SlotRegistry("test")
        self.assertEqual([reg.insert(v) for v in "abc"], [0, 1, 2])

    def test_freed_slot_is_reused_before_growing(self):
        reg = SlotRegistry("test")
        for v in "abc":
            reg.insert(v)
        reg.remove(1)
        self.assertEqual(reg.insert("d"), 1)
        self.assertEqual(reg.insert("e"), 3)

    def test_lowest_free_slot_wins(self):
        reg = SlotRegistry("test")
        for v in "abcd":
            reg.insert(v)
        reg.remove(3)
        reg.remove(1)
        self.assertEqual(reg.insert("x"), 1)
        self.assertEqual(reg.insert("y"), 3)

    def test_live_ids_are_stable(self):
        reg = SlotRegistry("test")
        a = reg.insert("a")
        b = reg.insert("b")
        reg.remove(a)
        reg.insert("c")
        self.assertEqual(reg.get(b), "b")


class TestSlotRegistryAccess(unittest.TestCase):

    def setUp(self):
        self.reg = SlotRegistry("test")
        for v in (10, 11, 12, 13):
            self.reg.insert(v)
        self.reg.remove(1)

    def test_get_freed_slot_is_fatal(self):
        with self.assertRaises(InvariantViolation):
            self.reg.get(1)

    def test_get_out_of_range_is_fatal(self):
        with self.assertRaises(InvariantViolation):
            self.reg.get(99)
        with self.assertRaises(InvariantViolation):
            self.reg.get(-1)

    def test_double_remove_is_fatal(self):
        with self.assertRaises(InvariantViolation):
            self.reg.remove(1)

    def test_contains(self):
        self.assertTrue(self.reg.contains(0))
        self.assertFalse(self.reg.contains(1))
        self.assertFalse(self.reg.contains(42))

    def test_first_scans_in_slot_order(self):
        self.assertEqual(self.reg.first(lambda v: v > 10), (2, 12))
        self.assertIsNone(self.reg.first(lambda v: v > 100))

    def test_iteration_skips_holes(self):
        self.assertEqual(list(self.reg), [(0, 10), (2, 12), (3, 13)])
        self.assertEqual(len(self.reg), 3)

    def test_remove_if_returns_freed_ids(self):
        self.assertEqual(self.reg.remove_if(lambda v: v % 2 == 0), [0, 2])
        self.assertEqual(list(self.reg), [(3, 13)])


if __name__ == "__main__":
    unittest.main()

"""Tests for matching idle robots to unassigned work."""
from __future__ import annotations

import unittest

from core.errors import InvariantViolation
from core.event_bus import EventBus
from production.work_queue import WorkQueue
from workers.robot import Sleep
from workers.robot_manager import RobotManager


class TestAssignWork(unittest.TestCase):

    def setUp(self):
        self.bus = EventBus()
        self.queue = WorkQueue(self.bus)
        self.robots = RobotManager()

    def test_single_robot_single_entry(self):
        robot = self.robots.spawn((0.5, 0.5))
        entry_id = self.queue.publish((3, 3))

        self.assertEqual(self.robots.assign_work(self.queue), 1)

        self.assertEqual(robot.assigned_work, entry_id)
        self.assertEqual(self.queue.get(entry_id).assigned_robot, robot.robot_id)
        self.assertEqual(self.bus.count("WORK_ASSIGNED"), 1)

    def test_matches_in_creation_order(self):
        first = self.robots.spawn((9.5, 0.5))
        second = self.robots.spawn((0.5, 0.5))
        near_second = self.queue.publish((0, 0))
        near_first = self.queue.publish((9, 0))

        self.robots.assign_work(self.queue)

        # no distance ranking: oldest robot takes the oldest entry
        self.assertEqual(first.assigned_work, near_second)
        self.assertEqual(second.assigned_work, near_first)

    def test_more_work_than_robots(self):
        robot = self.robots.spawn((0.5, 0.5))
        for x in range(3):
            self.queue.publish((x, 0))

        self.assertEqual(self.robots.assign_work(self.queue), 1)
        self.assertEqual(robot.assigned_work, 0)
        self.assertEqual(self.queue.pending_count(), 2)

    def test_more_robots_than_work(self):
        robots = [self.robots.spawn((0.5, 0.5)) for _ in range(3)]
        self.queue.publish((1, 1))

        self.assertEqual(self.robots.assign_work(self.queue), 1)
        self.assertEqual([r.assigned_work for r in robots], [0, None, None])
        self.assertEqual(self.robots.busy_count(), 1)

    def test_robot_not_waiting_is_skipped(self):
        busy = self.robots.spawn((0.5, 0.5))
        busy.push_state(Sleep(1.0))
        idle = self.robots.spawn((0.5, 0.5))
        self.queue.publish((1, 1))

        self.robots.assign_work(self.queue)

        self.assertIsNone(busy.assigned_work)
        self.assertEqual(idle.assigned_work, 0)

    def test_assigned_robot_is_not_reassigned(self):
        robot = self.robots.spawn((0.5, 0.5))
        self.queue.publish((1, 1))
        self.robots.assign_work(self.queue)
        self.queue.publish((2, 2))

        self.assertEqual(self.robots.assign_work(self.queue), 0)
        self.assertEqual(robot.assigned_work, 0)
        self.assertIsNone(self.queue.get(1).assigned_robot)

    def test_empty_queue_is_a_no_op(self):
        self.robots.spawn((0.5, 0.5))
        self.assertEqual(self.robots.assign_work(self.queue), 0)
        self.assertEqual(self.bus.count("WORK_ASSIGNED"), 0)

    def test_double_assignment_is_fatal(self):
        self.queue.publish((1, 1))
        entry = self.queue.request()
        self.queue.assign(entry, 0)
        with self.assertRaises(InvariantViolation):
            self.queue.assign(entry, 1)

    def test_robot_ids_follow_creation_order(self):
        ids = [self.robots.spawn((0.5, 0.5)).robot_id for _ in range(3)]
        self.assertEqual(ids, [0, 1, 2])
        self.assertEqual([r.robot_id for r in self.robots], ids)


if __name__ == "__main__":
    unittest.main()

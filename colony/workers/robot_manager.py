# workers/robot_manager.py — owns all robots, assigns work, ticks them in order

from __future__ import annotations
import logging
from typing import Iterator, TYPE_CHECKING

from workers.robot import Robot, StepContext

if TYPE_CHECKING:
    from production.work_queue import WorkQueue

logger = logging.getLogger(__name__)


class RobotManager:
    """
    Creates and ticks all Robot instances.

    Robots are kept in creation order and updated strictly one after the
    other, so no robot observes another robot's half-finished step.
    """

    def __init__(self) -> None:
        self._robots: list[Robot] = []

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def spawn(self, position) -> Robot:
        robot = Robot(robot_id=len(self._robots), position=position)
        self._robots.append(robot)
        logger.debug("Spawned %r", robot)
        return robot

    # ------------------------------------------------------------------
    # Scheduling
    # ------------------------------------------------------------------

    def assign_work(self, work_queue: WorkQueue) -> int:
        """
        Match waiting robots to unassigned work until one side runs out.

        Robots are taken in creation order and entries in id order; neither
        side is ranked by distance. Returns the number of assignments made.
        """
        waiting = [robot for robot in self._robots if robot.is_waiting and robot.assigned_work is None]

        assigned = 0
        while waiting:
            entry = work_queue.request()
            if entry is None:
                break

            robot = waiting.pop(0)
            work_queue.assign(entry, robot.robot_id)
            robot.assigned_work = entry.entry_id
            assigned += 1

        if assigned:
            logger.debug("Processed %d work entries", assigned)
        return assigned

    # ------------------------------------------------------------------
    # Update
    # ------------------------------------------------------------------

    def update(self, ctx: StepContext) -> None:
        for robot in self._robots:
            robot.update(ctx)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def busy_count(self) -> int:
        return sum(1 for r in self._robots if r.assigned_work is not None)

    def __iter__(self) -> Iterator[Robot]:
        return iter(self._robots)

    def __len__(self) -> int:
        return len(self._robots)

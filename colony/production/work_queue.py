# production/work_queue.py — build requests waiting for, or claimed by, a robot

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Iterator, Optional, TYPE_CHECKING

from core.errors import InvariantViolation
from core.registry import SlotRegistry

if TYPE_CHECKING:
    from core.event_bus import EventBus

logger = logging.getLogger(__name__)


@dataclass
class WorkEntry:
    """
    A request to finish constructing exactly one tile.
    Only the robot named in assigned_robot may finish it.
    """
    target_tile: tuple[int, int]
    entry_id: int = -1
    assigned_robot: Optional[int] = None

    @property
    def is_assigned(self) -> bool:
        return self.assigned_robot is not None

    def __repr__(self) -> str:
        return f"WorkEntry({self.entry_id} @{self.target_tile} robot={self.assigned_robot})"


class WorkQueue:
    """
    Sparse registry of build requests.

    The world layer publishes one entry when a tile enters construction; the
    scheduler hands the lowest-id unassigned entry to an idle robot; that
    robot finishes it when the tile completes. The queue does not check for
    duplicate targets.
    """

    def __init__(self, event_bus: EventBus) -> None:
        self._bus = event_bus
        self._entries: SlotRegistry[WorkEntry] = SlotRegistry("work queue")

    def publish(self, target_tile: tuple[int, int]) -> int:
        entry = WorkEntry(target_tile=tuple(target_tile))
        entry.entry_id = self._entries.insert(entry)
        logger.debug("Published: %r", entry)
        self._bus.publish("WORK_PUBLISHED", {"entry": entry})
        return entry.entry_id

    def request(self) -> Optional[WorkEntry]:
        """Lowest-id unassigned entry, or None. The caller may assign it."""
        found = self._entries.first(lambda entry: not entry.is_assigned)
        return found[1] if found else None

    def assign(self, entry: WorkEntry, robot_id: int) -> None:
        if entry.is_assigned:
            raise InvariantViolation(f"{entry!r} is already assigned")
        entry.assigned_robot = robot_id
        logger.debug("Assigned %r to robot %d", entry, robot_id)
        self._bus.publish("WORK_ASSIGNED", {"entry": entry, "robot_id": robot_id})

    def finish(self, entry_id: int, robot_id: Optional[int] = None) -> None:
        """Free the entry's slot. With robot_id, only its assignee may finish it."""
        entry = self._entries.get(entry_id)
        if robot_id is not None and entry.assigned_robot != robot_id:
            raise InvariantViolation(f"robot {robot_id} cannot finish {entry!r}")
        self._entries.remove(entry_id)
        logger.debug("Finished: %r", entry)
        self._bus.publish("WORK_FINISHED", {"entry": entry, "queue": self})

    def get(self, entry_id: int) -> WorkEntry:
        return self._entries.get(entry_id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def pending_count(self) -> int:
        return sum(1 for _, entry in self._entries if not entry.is_assigned)

    def __iter__(self) -> Iterator[WorkEntry]:
        for _, entry in self._entries:
            yield entry

    def __len__(self) -> int:
        return len(self._entries)

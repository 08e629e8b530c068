# core/event_bus.py — lightweight publish/subscribe event system

from collections import Counter, defaultdict
from typing import Callable


class EventBus:
    """
    Lets the work queue, the scheduler and the colony announce milestones
    without knowing who is listening (HUD counters, tests, logging).

    Events used across the system:
      "WORK_PUBLISHED"         data: {"entry": WorkEntry}
      "WORK_ASSIGNED"          data: {"entry": WorkEntry, "robot_id": int}
      "WORK_FINISHED"          data: {"entry": WorkEntry, "queue": WorkQueue}
      "ITEM_SPAWNED"           data: {"item_id": int, "item": Item}
      "CONSTRUCTION_COMPLETE"  data: {"tile": (x, y), "tile_class": int}

    Listeners run synchronously, inside the publishing call, so they observe
    the simulation mid-tick and must not mutate it.
    """

    def __init__(self) -> None:
        self._listeners: dict[str, list[Callable]] = defaultdict(list)
        self._counts: Counter = Counter()

    def subscribe(self, event_type: str, callback: Callable) -> None:
        self._listeners[event_type].append(callback)

    def unsubscribe(self, event_type: str, callback: Callable) -> None:
        listeners = self._listeners[event_type]
        if callback in listeners:
            listeners.remove(callback)

    def publish(self, event_type: str, data: dict = None) -> None:
        self._counts[event_type] += 1
        for callback in list(self._listeners[event_type]):
            callback(data or {})

    def count(self, event_type: str) -> int:
        """How many times event_type has been published on this bus."""
        return self._counts[event_type]


# Global singleton
bus = EventBus()

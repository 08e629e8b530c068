# core/registry.py — sparse slot arena shared by the work queue and item registry

from __future__ import annotations
from typing import Callable, Generic, Iterator, Optional, TypeVar

from core.errors import InvariantViolation

T = TypeVar("T")


class SlotRegistry(Generic[T]):
    """
    Slot-indexed collection mapping a dense integer id to an optional entry.

    Insertion reuses the lowest freed slot before growing, so ids stay small.
    An id is stable for as long as its entry lives and is only handed out
    again after the entry has been removed. Lookups are linear scans in
    slot order, which gives older entries an implicit (not strict) priority.
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._slots: list[Optional[T]] = []

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def insert(self, entry: T) -> int:
        for slot_id, existing in enumerate(self._slots):
            if existing is None:
                self._slots[slot_id] = entry
                return slot_id
        self._slots.append(entry)
        return len(self._slots) - 1

    def remove(self, slot_id: int) -> T:
        entry = self.get(slot_id)
        self._slots[slot_id] = None
        return entry

    def remove_if(self, predicate: Callable[[T], bool]) -> list[int]:
        """Free every slot whose entry matches. Returns the freed ids."""
        removed = []
        for slot_id, entry in enumerate(self._slots):
            if entry is not None and predicate(entry):
                self._slots[slot_id] = None
                removed.append(slot_id)
        return removed

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get(self, slot_id: int) -> T:
        entry = None
        if 0 <= slot_id < len(self._slots):
            entry = self._slots[slot_id]
        if entry is None:
            raise InvariantViolation(f"{self._name}: no live entry in slot {slot_id}")
        return entry

    def contains(self, slot_id: int) -> bool:
        return 0 <= slot_id < len(self._slots) and self._slots[slot_id] is not None

    def first(self, predicate: Callable[[T], bool]) -> Optional[tuple[int, T]]:
        """Lowest-id live entry matching predicate, or None."""
        for slot_id, entry in enumerate(self._slots):
            if entry is not None and predicate(entry):
                return slot_id, entry
        return None

    def __iter__(self) -> Iterator[tuple[int, T]]:
        for slot_id, entry in enumerate(self._slots):
            if entry is not None:
                yield slot_id, entry

    def __len__(self) -> int:
        return sum(1 for entry in self._slots if entry is not None)

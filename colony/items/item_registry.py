# items/item_registry.py — live items, their physics, and exclusive claims

from __future__ import annotations
import logging
import math
from typing import Callable, Iterator, Optional, TYPE_CHECKING

import pygame

from core.registry import SlotRegistry
from items.item import Item, ItemState
from settings import GRAVITY, GROUND_PROBE, ITEM_LIFETIME

if TYPE_CHECKING:
    from world.tilemap import TileMap

logger = logging.getLogger(__name__)


class ItemRegistry:
    """
    Owns every item in the world, keyed by a stable slot id.

    Robots reference items only by id. Looking up an id whose item has been
    removed raises InvariantViolation: it means some robot kept a reference
    it no longer owns.
    """

    def __init__(self) -> None:
        self._items: SlotRegistry[Item] = SlotRegistry("items")

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def add(self, item: Item) -> int:
        item_id = self._items.insert(item)
        logger.debug("Item %d added at (%.2f, %.2f)", item_id, item.position.x, item.position.y)
        return item_id

    def remove(self, item_id: int) -> Item:
        item = self._items.remove(item_id)
        logger.debug("Item %d was removed", item_id)
        return item

    def remove_if(self, predicate: Callable[[Item], bool]) -> list[int]:
        removed = self._items.remove_if(predicate)
        for item_id in removed:
            logger.debug("Item %d was removed", item_id)
        return removed

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------

    def get_mut(self, item_id: int) -> Item:
        return self._items.get(item_id)

    def contains(self, item_id: int) -> bool:
        return self._items.contains(item_id)

    def __iter__(self) -> Iterator[tuple[int, Item]]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    # ------------------------------------------------------------------
    # Claims
    # ------------------------------------------------------------------

    def claim_resource(self, requester_position: pygame.Vector2) -> Optional[int]:
        """
        Claim the first resting, unclaimed item in slot order.

        requester_position is accepted for a future nearest-item policy but
        is not used: selection is first-found, not closest.
        """
        found = self._items.first(lambda item: item.state == ItemState.STATIC and not item.claimed)
        if found is None:
            return None

        item_id, item = found
        item.claimed = True
        logger.debug("Item %d claimed", item_id)
        return item_id

    # ------------------------------------------------------------------
    # Tick
    # ------------------------------------------------------------------

    def update(self, tiles: TileMap, delta: float) -> None:
        for _, item in self._items:
            if item.state != ItemState.CARRIED:
                self._apply_gravity(item, tiles, delta)

            if item.claimed:
                item.lifetime = ITEM_LIFETIME
            else:
                item.lifetime -= delta

        self.remove_if(lambda item: item.lifetime <= 0)

    @staticmethod
    def _apply_gravity(item: Item, tiles: TileMap, delta: float) -> None:
        new_x = item.position.x
        new_y = item.position.y - GRAVITY * delta

        # Probe cells left of or below the map saturate to column or row 0
        probe_x = max(0, math.floor(new_x))
        probe_y = max(0, math.floor(new_y - GROUND_PROBE))

        if tiles.is_solid(probe_x, probe_y):
            # Landed: keep the old position
            item.state = ItemState.STATIC
        else:
            item.position.update(new_x, new_y)
            item.state = ItemState.FALLING

# items/item.py — a resource unit lying in, falling through, or carried across the world

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum

import pygame

from settings import ITEM_LIFETIME


class ItemState(Enum):
    STATIC  = "STATIC"    # resting on solid ground
    FALLING = "FALLING"   # simulated by gravity
    CARRIED = "CARRIED"   # position owned by the carrying robot


@dataclass
class Item:
    """
    One unit of food/building material.

    claimed=True means exactly one robot is on its way to pick it up (or has
    it). Claimed items do not age, so they cannot expire under an en-route
    robot.
    """
    position: pygame.Vector2 = field(default_factory=pygame.Vector2)
    lifetime: float          = ITEM_LIFETIME
    state: ItemState         = ItemState.FALLING
    claimed: bool            = False

    def __repr__(self) -> str:
        return (f"Item(({self.position.x:.2f}, {self.position.y:.2f}) {self.state.value}"
                f"{' claimed' if self.claimed else ''} ttl={self.lifetime:.1f})")

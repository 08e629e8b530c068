# items/spawner.py — drops new food items into a rectangular region

from __future__ import annotations
import logging
import random

import pygame

from items.item import Item, ItemState
from settings import ITEM_LIFETIME

logger = logging.getLogger(__name__)


class FoodSpawner:
    """Region in world units: (left, bottom, width, height)."""

    def __init__(self, region: tuple[float, float, float, float]) -> None:
        self.left, self.bottom, self.width, self.height = region

    def spawn(self, rng: random.Random) -> Item:
        x = rng.uniform(self.left, self.left + self.width)
        y = rng.uniform(self.bottom, self.bottom + self.height)
        logger.debug("Spawning food at %.2f, %.2f", x, y)
        return Item(
            position=pygame.Vector2(x, y),
            lifetime=ITEM_LIFETIME,
            state=ItemState.FALLING,
            claimed=False,
        )

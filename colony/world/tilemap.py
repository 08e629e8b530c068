# world/tilemap.py — y-up tile grid shared by items, robots and the view

from __future__ import annotations
import math
from typing import Iterator, Optional

import pygame

from core.errors import InvariantViolation
from world.tile import Tile


class TileMap:
    """
    Owns the 2D grid of Tile objects.

    World space is y-up with one world unit per tile: tile (x, y) covers
    [x, x+1) x [y, y+1) and row 0 is the bottom of the map.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        # tiles[y][x]
        self.tiles: list[list[Tile]] = [
            [Tile() for _ in range(width)]
            for _ in range(height)
        ]

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Optional[Tile]:
        if self.in_bounds(x, y):
            return self.tiles[y][x]
        return None

    def get_mut(self, x: int, y: int) -> Tile:
        """Like get(), for callers that hold a reference they know is valid."""
        tile = self.get(x, y)
        if tile is None:
            raise InvariantViolation(f"tile ({x}, {y}) is outside the {self.width}x{self.height} map")
        return tile

    def is_solid(self, x: int, y: int) -> bool:
        tile = self.get(x, y)
        return tile is not None and tile.is_solid()

    def for_each(self) -> Iterator[tuple[int, int, Tile]]:
        """Column-major: x outer, y inner (bottom to top)."""
        for x in range(self.width):
            for y in range(self.height):
                yield x, y, self.tiles[y][x]

    def construction_sites(self) -> list[tuple[int, int]]:
        return [(x, y) for x, y, tile in self.for_each() if tile.is_under_construction()]

    # ------------------------------------------------------------------
    # Coordinates
    # ------------------------------------------------------------------

    @staticmethod
    def tile_center(x: int, y: int) -> pygame.Vector2:
        return pygame.Vector2(x + 0.5, y + 0.5)

    @staticmethod
    def cell_of(point) -> tuple[int, int]:
        return math.floor(point[0]), math.floor(point[1])

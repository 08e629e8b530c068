# ui/world_view.py — draws tiles, construction sites, robots and items

from __future__ import annotations
import pygame
from typing import TYPE_CHECKING

from items.item import ItemState
from settings import (
    TILE_SIZE, TILE_COLORS, COL_GRID_LINE, COL_CONSTRUCTION,
    COL_ROBOT, COL_ROBOT_BUSY,
    COL_ITEM_FALLING, COL_ITEM_STATIC, COL_ITEM_CLAIMED, COL_ITEM_CARRIED,
)

if TYPE_CHECKING:
    from world.camera import Camera
    from world.colony import Colony


_ITEM_COLORS = {
    ItemState.FALLING: COL_ITEM_FALLING,
    ItemState.STATIC:  COL_ITEM_STATIC,
    ItemState.CARRIED: COL_ITEM_CARRIED,
}

ROBOT_RADIUS = int(TILE_SIZE * 0.35)
ITEM_RADIUS  = max(3, TILE_SIZE // 10)


class WorldView:
    """
    Read-only renderer. Only iterates the colony's tiles, items and robots;
    never mutates simulation state.
    """

    def __init__(self, colony: Colony) -> None:
        self._colony = colony

    def draw(self, screen: pygame.Surface, camera: Camera) -> None:
        self._draw_tiles(screen, camera)
        self._draw_robots(screen, camera)
        self._draw_items(screen, camera)

    def _draw_tiles(self, screen: pygame.Surface, camera: Camera) -> None:
        viewport = screen.get_rect()
        for x, y, tile in self._colony.tiles.for_each():
            rect = camera.tile_rect(x, y)
            if not rect.colliderect(viewport):
                continue

            pygame.draw.rect(screen, TILE_COLORS.get(tile.tile_class, (255, 0, 255)), rect)
            pygame.draw.rect(screen, COL_GRID_LINE, rect, 1)

            job = tile.construction
            if job is not None:
                # Target class preview plus a hatched frame
                inner = rect.inflate(-TILE_SIZE // 3, -TILE_SIZE // 3)
                pygame.draw.rect(screen, TILE_COLORS[job.target_class], inner)
                pygame.draw.rect(screen, COL_CONSTRUCTION, rect.inflate(-4, -4), 3)
                for i in range(job.resources_needed):
                    pip = pygame.Rect(rect.x + 6 + i * 9, rect.y + 6, 6, 6)
                    pygame.draw.rect(screen, COL_CONSTRUCTION, pip)

    def _draw_robots(self, screen: pygame.Surface, camera: Camera) -> None:
        for robot in self._colony.robots:
            if not camera.is_visible(robot.position.x, robot.position.y):
                continue
            sx, sy = camera.world_to_screen(robot.position.x, robot.position.y)
            color = COL_ROBOT_BUSY if robot.assigned_work is not None else COL_ROBOT
            pygame.draw.circle(screen, color, (int(sx), int(sy)), ROBOT_RADIUS)
            pygame.draw.circle(screen, (40, 40, 50), (int(sx), int(sy)), ROBOT_RADIUS, 2)

    def _draw_items(self, screen: pygame.Surface, camera: Camera) -> None:
        for _, item in self._colony.items:
            if not camera.is_visible(item.position.x, item.position.y):
                continue
            sx, sy = camera.world_to_screen(item.position.x, item.position.y)
            color = _ITEM_COLORS[item.state]
            if item.claimed and item.state != ItemState.CARRIED:
                color = COL_ITEM_CLAIMED
            pygame.draw.circle(screen, color, (int(sx), int(sy)), ITEM_RADIUS)

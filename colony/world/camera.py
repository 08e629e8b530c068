# world/camera.py — viewport into the y-up colony world

import math

import pygame
from settings import (
    SCREEN_W, VIEWPORT_H, TILE_SIZE, CAMERA_SPEED, CAMERA_START
)


class Camera:
    """
    Maintains the world-space point (in tile units) shown at the centre of
    the viewport. World y grows upwards, screen y grows downwards.

    Coordinate conversion:
      screen = (world - position) * TILE_SIZE, y flipped, + viewport centre
      world  = the inverse
    """

    def __init__(self, position=CAMERA_START) -> None:
        self.position = pygame.Vector2(position)

    def update(self, dt: float, keys) -> None:
        """Pan camera with WASD or arrow keys. dt = real seconds."""
        axes = pygame.Vector2(0, 0)

        if keys[pygame.K_LEFT]  or keys[pygame.K_a]:
            axes.x -= 1
        if keys[pygame.K_RIGHT] or keys[pygame.K_d]:
            axes.x += 1
        if keys[pygame.K_UP]    or keys[pygame.K_w]:
            axes.y += 1
        if keys[pygame.K_DOWN]  or keys[pygame.K_s]:
            axes.y -= 1

        if axes.length_squared() != 0:
            self.position += axes.normalize() * CAMERA_SPEED * dt

    def world_to_screen(self, wx: float, wy: float) -> tuple[float, float]:
        sx = (wx - self.position.x) * TILE_SIZE + SCREEN_W / 2
        sy = VIEWPORT_H / 2 - (wy - self.position.y) * TILE_SIZE
        return sx, sy

    def screen_to_world(self, sx: float, sy: float) -> tuple[float, float]:
        wx = (sx - SCREEN_W / 2) / TILE_SIZE + self.position.x
        wy = (VIEWPORT_H / 2 - sy) / TILE_SIZE + self.position.y
        return wx, wy

    def screen_to_tile(self, sx: float, sy: float) -> tuple[int, int]:
        wx, wy = self.screen_to_world(sx, sy)
        return math.floor(wx), math.floor(wy)

    def tile_rect(self, x: int, y: int) -> pygame.Rect:
        """Screen rect covering tile (x, y)."""
        # top-left on screen is the tile's (x, y + 1) corner
        sx, sy = self.world_to_screen(x, y + 1)
        return pygame.Rect(round(sx), round(sy), TILE_SIZE, TILE_SIZE)

    def is_visible(self, world_x: float, world_y: float, margin: int = 32) -> bool:
        sx, sy = self.world_to_screen(world_x, world_y)
        return (-margin < sx < SCREEN_W + margin and
                -margin < sy < VIEWPORT_H + margin)

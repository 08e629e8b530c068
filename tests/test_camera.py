"""Tests for the camera transform and the build-on-release input behaviour."""
from __future__ import annotations

import random
import unittest
from collections import defaultdict

import pygame

from core.event_bus import EventBus
from core.game import BuildingBehavior
from settings import CAMERA_SPEED, CLASS_CORE, CLASS_WALL, SCREEN_W, TILE_SIZE, VIEWPORT_H
from world.camera import Camera
from world.colony import Colony

LAYOUT = (
    "......\n"
    ".FF...\n"
    "......\n"
    ".w..c.\n"
    "######\n"
)


class TestCamera(unittest.TestCase):

    def setUp(self):
        self.camera = Camera(position=(3.0, 2.0))

    def test_camera_position_is_viewport_centre(self):
        self.assertEqual(self.camera.world_to_screen(3.0, 2.0), (SCREEN_W / 2, VIEWPORT_H / 2))

    def test_world_y_points_up(self):
        _, low = self.camera.world_to_screen(3.0, 2.0)
        _, high = self.camera.world_to_screen(3.0, 3.0)
        self.assertEqual(low - high, TILE_SIZE)

    def test_screen_to_world_inverts(self):
        sx, sy = self.camera.world_to_screen(4.25, 0.75)
        wx, wy = self.camera.screen_to_world(sx, sy)
        self.assertAlmostEqual(wx, 4.25)
        self.assertAlmostEqual(wy, 0.75)

    def test_screen_to_tile_floors(self):
        sx, sy = self.camera.world_to_screen(-0.5, 1.5)
        self.assertEqual(self.camera.screen_to_tile(sx, sy), (-1, 1))

    def test_tile_rect_top_left_is_upper_corner(self):
        rect = self.camera.tile_rect(3, 2)
        self.assertEqual(rect.topleft, (SCREEN_W // 2, VIEWPORT_H // 2 - TILE_SIZE))
        self.assertEqual(rect.size, (TILE_SIZE, TILE_SIZE))

    def test_pan_with_keys(self):
        keys = defaultdict(bool)
        keys[pygame.K_d] = True
        self.camera.update(0.5, keys)
        self.assertAlmostEqual(self.camera.position.x, 3.0 + CAMERA_SPEED * 0.5)

    def test_diagonal_pan_is_normalised(self):
        keys = defaultdict(bool)
        keys[pygame.K_UP] = True
        keys[pygame.K_RIGHT] = True
        self.camera.update(1.0, keys)
        moved = self.camera.position - pygame.Vector2(3.0, 2.0)
        self.assertAlmostEqual(moved.length(), CAMERA_SPEED)
        self.assertGreater(moved.y, 0)


class TestBuildingBehavior(unittest.TestCase):

    def setUp(self):
        self.colony = Colony.load(LAYOUT, random.Random(1), EventBus())
        self.behavior = BuildingBehavior()

    def click(self, tile, build_class=CLASS_WALL) -> bool:
        self.behavior.update(True, tile, build_class, self.colony)
        return self.behavior.update(False, tile, build_class, self.colony)

    def test_builds_on_release(self):
        self.assertFalse(self.behavior.update(True, (0, 3), CLASS_WALL, self.colony))
        self.assertEqual(len(self.colony.work_queue), 2)
        self.assertTrue(self.behavior.update(False, (0, 3), CLASS_WALL, self.colony))
        self.assertEqual(len(self.colony.work_queue), 3)

    def test_holding_button_builds_once(self):
        for _ in range(5):
            self.behavior.update(True, (0, 3), CLASS_CORE, self.colony)
        self.assertEqual(len(self.colony.work_queue), 2)

    def test_existing_buildings_are_left_alone(self):
        self.colony.tiles.get_mut(5, 2).set_class(CLASS_CORE)
        self.assertFalse(self.click((5, 2)))

    def test_flesh_can_be_built_over(self):
        self.assertTrue(self.click((0, 0), CLASS_CORE))

    def test_off_map_is_ignored(self):
        self.assertFalse(self.click((40, 40)))

    def test_repeated_click_on_site_is_ignored(self):
        self.assertTrue(self.click((0, 3)))
        self.assertFalse(self.click((0, 3)))
        self.assertEqual(len(self.colony.work_queue), 3)


if __name__ == "__main__":
    unittest.main()

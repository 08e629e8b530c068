# core/game.py — master game class, main loop

from __future__ import annotations
import logging
import random
import pygame
from settings import SCREEN_W, SCREEN_H, VIEWPORT_H, TITLE, FPS, COL_BG, BUILDABLE_CLASSES

from core.event_bus import EventBus
from core.clock import SimClock
from world.colony import Colony
from world.camera import Camera
from ui.hud import HUD
from ui.world_view import WorldView

logger = logging.getLogger(__name__)


class BuildingBehavior:
    """
    Starts a construction where the mouse is when the interact button is
    released. Tiles that already hold a buildable class are left alone.
    """

    def __init__(self) -> None:
        self._prev_button = False

    def update(self, button_down: bool, hover_tile: tuple[int, int], build_class: int, colony: Colony) -> bool:
        """True if a construction was started this frame."""
        released = self._prev_button and not button_down
        self._prev_button = button_down
        if not released:
            return False

        tile = colony.tiles.get(*hover_tile)
        if tile is None or tile.tile_class in BUILDABLE_CLASSES:
            return False
        return colony.start_construction(hover_tile, build_class) is not None


class Game:
    """
    Top-level orchestrator. Initialises all subsystems in dependency order,
    then runs the main game loop.

    Initialization order:
      1. pygame + display
      2. EventBus + SimClock
      3. Colony (tiles, work queue, robots, pre-warmed items)
      4. Camera, WorldView
      5. HUD
    """

    def __init__(self, layout_text: str, seed: int, event_bus: EventBus) -> None:
        pygame.init()
        pygame.display.set_caption(TITLE)
        self._screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
        self._pg_clock = pygame.time.Clock()

        # Core
        self._bus = event_bus
        self._clock = SimClock()

        # World
        self._colony = Colony.load(layout_text, random.Random(seed), event_bus)
        self._camera = Camera()
        self._view = WorldView(self._colony)

        # Input
        self._building = BuildingBehavior()
        self._interact_down = False
        self._hover_tile = (0, 0)

        # UI
        self._hud = HUD(self._clock, self._colony, event_bus)

        self._running = True
        self._debug = False
        logger.info("Game started with seed %d", seed)

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------

    def run(self) -> None:
        while self._running:
            dt_ms = self._pg_clock.tick(FPS)
            dt = dt_ms / 1000.0

            self._handle_events()
            self._update(dt)
            self._draw()

        self._colony.close()
        pygame.quit()

    # ------------------------------------------------------------------
    # Event handling
    # ------------------------------------------------------------------

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._running = False

            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self._running = False
                elif event.key == pygame.K_SPACE:
                    self._clock.cycle_speed()
                elif event.key == pygame.K_F1:
                    self._debug = not self._debug

            # Give HUD first chance to consume the event
            if self._hud.handle_event(event):
                continue

            if event.type == pygame.MOUSEMOTION and event.pos[1] < VIEWPORT_H:
                self._hover_tile = self._camera.screen_to_tile(*event.pos)
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 and event.pos[1] < VIEWPORT_H:
                self._interact_down = True
            if event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                self._interact_down = False

    # ------------------------------------------------------------------
    # Update
    # ------------------------------------------------------------------

    def _update(self, dt: float) -> None:
        self._building.update(self._interact_down, self._hover_tile, self._hud.build_class, self._colony)

        # Camera pan (keyboard, real time)
        keys = pygame.key.get_pressed()
        self._camera.update(dt, keys)

        delta = self._clock.advance(dt)
        if delta > 0:
            self._colony.update(delta)

        self._hud.update()

    # ------------------------------------------------------------------
    # Draw
    # ------------------------------------------------------------------

    def _draw(self) -> None:
        self._screen.fill(COL_BG)

        self._view.draw(self._screen, self._camera)
        self._draw_hover()

        if self._debug:
            self._draw_debug()

        # HUD (always on top, screen space)
        self._hud.draw(self._screen)

        self._draw_speed_indicator()

        pygame.display.flip()

    def _draw_hover(self) -> None:
        rect = self._camera.tile_rect(*self._hover_tile)
        pygame.draw.rect(self._screen, (255, 255, 100), rect, 2)

    def _draw_speed_indicator(self) -> None:
        font = pygame.font.SysFont("Arial", 14)
        speed = self._clock.speed
        label = "PAUSED" if speed == 0 else f"{speed}x"
        color = (220, 80, 80) if speed == 0 else (100, 200, 100)
        surf = font.render(label, True, color)
        self._screen.blit(surf, (SCREEN_W - surf.get_width() - 10, 8))

    def _draw_debug(self) -> None:
        font = pygame.font.SysFont("Arial", 12)
        lines = [
            f"FPS: {self._pg_clock.get_fps():.0f}",
            f"Tile: {self._hover_tile}",
            f"Ticks: {self._clock.ticks}  sim {self._clock.elapsed:.1f}s",
        ]
        lines.extend(repr(robot) for robot in self._colony.robots)
        for i, line in enumerate(lines):
            surf = font.render(line, True, (200, 200, 100))
            self._screen.blit(surf, (8, 8 + i * 16))

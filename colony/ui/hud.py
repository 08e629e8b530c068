# ui/hud.py — root HUD container, always in screen space

from __future__ import annotations
import pygame
from typing import TYPE_CHECKING
from settings import SCREEN_W, HUD_HEIGHT, VIEWPORT_H, COL_HUD_BG
from ui.clock_panel import ClockPanel
from ui.colony_panel import ColonyPanel

if TYPE_CHECKING:
    from core.clock import SimClock
    from core.event_bus import EventBus
    from world.colony import Colony


class HUD:
    """
    Bottom strip HUD layout (1280 × HUD_HEIGHT):

      Clock(200) | Colony(rest)
    """

    CLOCK_W  = 200
    COLONY_W = SCREEN_W - 200

    def __init__(self, clock: SimClock, colony: Colony, event_bus: EventBus) -> None:
        hud_y = VIEWPORT_H

        self._clock_panel = ClockPanel(
            pygame.Rect(0, hud_y, self.CLOCK_W, HUD_HEIGHT),
            clock,
        )
        self.colony_panel = ColonyPanel(
            pygame.Rect(self.CLOCK_W, hud_y, self.COLONY_W, HUD_HEIGHT),
            colony,
            event_bus,
        )

    @property
    def build_class(self) -> int:
        return self.colony_panel.build_class

    def handle_event(self, event: pygame.Event) -> bool:
        if self._clock_panel.handle_event(event):
            return True
        if self.colony_panel.handle_event(event):
            return True
        return False

    def update(self) -> None:
        self._clock_panel.update()
        self.colony_panel.update()

    def draw(self, screen: pygame.Surface) -> None:
        hud_rect = pygame.Rect(0, VIEWPORT_H, SCREEN_W, HUD_HEIGHT)
        pygame.draw.rect(screen, COL_HUD_BG, hud_rect)

        self._clock_panel.draw(screen)
        self.colony_panel.draw(screen)

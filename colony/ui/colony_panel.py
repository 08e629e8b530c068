# ui/colony_panel.py — colony counters and the build-class selector

from __future__ import annotations
import pygame
from typing import TYPE_CHECKING
from ui.button import Button
from settings import (
    CLASS_CORE, CLASS_WALL, TILE_COLORS,
    COL_PANEL_BG, COL_PANEL_BORDER, COL_WHITE, FONT_SM, FONT_MD
)

if TYPE_CHECKING:
    from core.event_bus import EventBus
    from world.colony import Colony


class ColonyPanel:
    """
    Two columns:
      robots busy/total, pending work, live items, finished builds
      [Wall] [Core]: the class a click will start constructing
    """

    def __init__(self, rect: pygame.Rect, colony: Colony, event_bus: EventBus) -> None:
        self.rect = rect
        self._colony = colony
        self._bus = event_bus
        self.build_class = CLASS_WALL

        self._font_md = pygame.font.SysFont("Arial", FONT_MD, bold=True)
        self._font_sm = pygame.font.SysFont("Arial", FONT_SM)

        btn_w, btn_h = 64, 24
        bx = rect.right - btn_w - 8
        self._class_buttons = {
            CLASS_WALL: Button(pygame.Rect(bx, rect.y + 12, btn_w, btn_h), "Wall",
                               callback=lambda: self._select(CLASS_WALL), hotkey=pygame.K_q),
            CLASS_CORE: Button(pygame.Rect(bx, rect.y + 44, btn_w, btn_h), "Core",
                               callback=lambda: self._select(CLASS_CORE), hotkey=pygame.K_e),
        }

    def _select(self, tile_class: int) -> None:
        self.build_class = tile_class

    def handle_event(self, event: pygame.Event) -> bool:
        for btn in self._class_buttons.values():
            if btn.handle_event(event):
                return True
        return False

    def update(self) -> None:
        for tile_class, btn in self._class_buttons.items():
            btn.active = (tile_class == self.build_class)

    def draw(self, surface: pygame.Surface) -> None:
        pygame.draw.rect(surface, COL_PANEL_BG, self.rect)
        pygame.draw.rect(surface, COL_PANEL_BORDER, self.rect, 1)

        colony = self._colony
        lines = [
            f"Robots   {colony.robots.busy_count()}/{len(colony.robots)} busy",
            f"Work     {colony.work_queue.pending_count()} pending / {len(colony.work_queue)} open",
            f"Items    {len(colony.items)}",
            f"Built    {self._bus.count('CONSTRUCTION_COMPLETE')}",
        ]
        for i, line in enumerate(lines):
            font = self._font_md if i == 0 else self._font_sm
            surf = font.render(line, True, COL_WHITE)
            surface.blit(surf, (self.rect.x + 8, self.rect.y + 6 + i * 19))

        for tile_class, btn in self._class_buttons.items():
            swatch = pygame.Rect(btn.rect.x - 18, btn.rect.y + 6, 12, 12)
            pygame.draw.rect(surface, TILE_COLORS[tile_class], swatch)
            btn.draw(surface)

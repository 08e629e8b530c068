# ui/clock_panel.py — elapsed simulated time and speed control buttons

from __future__ import annotations
import pygame
from typing import TYPE_CHECKING
from ui.button import Button
from settings import SPEED_STEPS, COL_WHITE, COL_PANEL_BG, COL_PANEL_BORDER, FONT_LG

if TYPE_CHECKING:
    from core.clock import SimClock


class ClockPanel:
    """
    Displays:
      - Elapsed simulated time
      - Speed control buttons: [||] [1x] [2x] [4x], also on keys 1-4
    """

    def __init__(self, rect: pygame.Rect, clock: SimClock) -> None:
        self.rect = rect
        self._clock = clock
        self._font_lg = pygame.font.SysFont("Arial", FONT_LG, bold=True)

        btn_w, btn_h = 36, 24
        btn_y = rect.y + rect.height - btn_h - 8
        self._speed_buttons: list[Button] = []
        for i, speed in enumerate(SPEED_STEPS):
            bx = rect.x + 8 + i * (btn_w + 6)
            self._speed_buttons.append(Button(
                pygame.Rect(bx, btn_y, btn_w, btn_h),
                "||" if speed == 0 else f"{speed}x",
                callback=lambda i=i: self._clock.set_speed_index(i),
                hotkey=pygame.K_1 + i,
            ))

    def handle_event(self, event: pygame.Event) -> bool:
        for btn in self._speed_buttons:
            if btn.handle_event(event):
                return True
        return False

    def update(self) -> None:
        speed = self._clock.speed
        for i, btn in enumerate(self._speed_buttons):
            btn.active = (SPEED_STEPS[i] == speed)

    def draw(self, surface: pygame.Surface) -> None:
        pygame.draw.rect(surface, COL_PANEL_BG, self.rect)
        pygame.draw.rect(surface, COL_PANEL_BORDER, self.rect, 1)

        time_surf = self._font_lg.render(self._clock.format(), True, COL_WHITE)
        surface.blit(time_surf, (self.rect.x + 8, self.rect.y + 8))

        for btn in self._speed_buttons:
            btn.draw(surface)

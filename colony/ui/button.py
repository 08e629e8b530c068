# ui/button.py — HUD toggle button, clicked or triggered from the keyboard

from __future__ import annotations
from typing import Callable, Optional

import pygame
from settings import (
    COL_BTN_NORMAL, COL_BTN_HOVER, COL_BTN_ACTIVE, COL_BTN_TEXT, COL_BTN_HINT, FONT_SM
)


class Button:
    """
    `active` only changes how the button is drawn; the owning panel sets it
    each frame from whatever the button selects. A hotkey, if given, is
    printed in the button's top-left corner.
    """

    def __init__(
        self,
        rect: pygame.Rect,
        label: str,
        callback: Callable[[], None],
        hotkey: Optional[int] = None,
    ) -> None:
        self.rect = rect
        self.label = label
        self.callback = callback
        self.hotkey = hotkey
        self.active = False
        self._hover = False
        self._font = pygame.font.SysFont("Arial", FONT_SM, bold=True)
        self._hint_font = pygame.font.SysFont("Arial", FONT_SM - 4)

    def _triggered_by(self, event: pygame.Event) -> bool:
        if event.type == pygame.MOUSEBUTTONDOWN:
            return event.button == 1 and self.rect.collidepoint(event.pos)
        if event.type == pygame.KEYDOWN:
            return self.hotkey is not None and event.key == self.hotkey
        return False

    def handle_event(self, event: pygame.Event) -> bool:
        """True if the event was consumed by this button."""
        if event.type == pygame.MOUSEMOTION:
            self._hover = self.rect.collidepoint(event.pos)
            return False

        if self._triggered_by(event):
            self.callback()
            return True
        return False

    def draw(self, surface: pygame.Surface) -> None:
        if self.active:
            fill = COL_BTN_ACTIVE
        else:
            fill = COL_BTN_HOVER if self._hover else COL_BTN_NORMAL

        pygame.draw.rect(surface, fill, self.rect, border_radius=4)
        pygame.draw.rect(surface, (80, 80, 110), self.rect, 1, border_radius=4)

        label = self._font.render(self.label, True, COL_BTN_TEXT)
        surface.blit(label, label.get_rect(center=self.rect.center))

        if self.hotkey is not None:
            hint = self._hint_font.render(pygame.key.name(self.hotkey).upper(), True, COL_BTN_HINT)
            surface.blit(hint, (self.rect.x + 3, self.rect.y + 1))

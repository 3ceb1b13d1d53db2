"""
K-Pop Choreo Formation Editor - UI Widgets

Toolbar buttons. They respond to the mouse and to finger taps, so the
toolbar stays usable on a touch screen.
"""

from typing import Callable

import pygame
from pygame import Surface, Rect

from choreo.core.constants import (
    COLOR_BUTTON,
    COLOR_BUTTON_ACTIVE,
    COLOR_BUTTON_BORDER,
    COLOR_BUTTON_HOVER,
    COLOR_TEXT,
)


class Button:
    """Toolbar button fired by a left click or a finger tap.

    A toggle button passes is_active, which is read at render time so the
    highlight always matches the setting it controls.
    """

    def __init__(
        self,
        rect: Rect,
        text: str,
        callback: Callable[[], None],
        is_active: Callable[[], bool] | None = None,
    ):
        self.rect = rect
        self.text = text
        self.callback = callback
        self.is_active = is_active
        self.hovered = False

    @property
    def active(self) -> bool:
        return self.is_active is not None and self.is_active()

    def contains(self, pos: tuple[float, float]) -> bool:
        return self.rect.collidepoint(int(pos[0]), int(pos[1]))

    def press(self, pos: tuple[float, float]) -> bool:
        """Fire the callback if pos is on the button. Returns True if fired."""
        if not self.contains(pos):
            return False
        self.callback()
        return True

    def handle_event(self, event: pygame.event.Event, screen_size: tuple[int, int]) -> bool:
        """
        Handle a mouse or finger event.

        Args:
            event: pygame event
            screen_size: Window size, used to place normalized finger positions

        Returns:
            True if the event pressed this button
        """
        if event.type == pygame.MOUSEMOTION:
            self.hovered = self.contains(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            return self.press(event.pos)
        elif event.type == pygame.FINGERDOWN:
            return self.press((event.x * screen_size[0], event.y * screen_size[1]))
        return False

    def render(self, screen: Surface, font: pygame.font.Font):
        if self.active:
            color = COLOR_BUTTON_ACTIVE
        elif self.hovered:
            color = COLOR_BUTTON_HOVER
        else:
            color = COLOR_BUTTON
        pygame.draw.rect(screen, color, self.rect)
        pygame.draw.rect(screen, COLOR_BUTTON_BORDER, self.rect, 1)

        text_surf = font.render(self.text, True, COLOR_TEXT)
        screen.blit(text_surf, text_surf.get_rect(center=self.rect.center))

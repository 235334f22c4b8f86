"""
Reusable UI components for the overlay chrome.

Provides the overlay colour theme and a clickable Button.
"""
import pygame
from typing import Callable, Optional, Tuple


# Overlay Theme Colors
PANEL_COLOR = (17, 24, 39)
PANEL_BORDER = (76, 52, 112)
TEXT_COLOR = (255, 255, 255)
ACCENT_COLOR = (192, 132, 252)
MUTED_TEXT = (156, 163, 175)
DANGER_COLOR = (248, 113, 113)
BUTTON_COLOR = (147, 51, 234)
BUTTON_HOVER = (126, 34, 206)
ICON_COLOR = (156, 163, 175)
ICON_HOVER = (255, 255, 255)


class Button:
    """Clickable button with hover effect."""

    def __init__(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        text: str,
        callback: Optional[Callable] = None,
        font_size: int = 28,
        flat: bool = False
    ):
        """
        Args:
            x, y, width, height: Button rectangle
            text: Label
            callback: Called with no arguments on left click
            font_size: Label font size
            flat: Draw the label only (icon style), without a filled background
        """
        self.rect = pygame.Rect(x, y, width, height)
        self.text = text
        self.callback = callback
        self.font_size = font_size
        self.flat = flat
        self.hovered = False
        self.visible = True
        self._font = None

    @property
    def font(self):
        if self._font is None:
            self._font = pygame.font.Font(None, self.font_size)
        return self._font

    def draw(self, surface: pygame.Surface):
        """Draw the button."""
        if not self.visible:
            return

        if self.flat:
            text_color = ICON_HOVER if self.hovered else ICON_COLOR
        else:
            color = BUTTON_HOVER if self.hovered else BUTTON_COLOR
            pygame.draw.rect(surface, color, self.rect, border_radius=8)
            text_color = TEXT_COLOR

        text_surf = self.font.render(self.text, True, text_color)
        text_rect = text_surf.get_rect(center=self.rect.center)
        surface.blit(text_surf, text_rect)

    def contains(self, pos: Tuple[int, int]) -> bool:
        return self.visible and bool(self.rect.collidepoint(pos))

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Handle pygame event.

        Returns:
            True if button was clicked, False otherwise
        """
        if not self.visible:
            self.hovered = False
            return False

        if event.type == pygame.MOUSEMOTION:
            self.hovered = self.contains(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.contains(event.pos):
                if self.callback:
                    self.callback()
                return True
        return False

"""
Snake Overlay - modal window hosting a game session.

Plays the part of the hosting application: it owns the window and frame
loop, draws the panel chrome (title, score, close button, game-over message
with a restart button, touch hint) and hands the board to SnakeRenderer.
The simulation speed is set by the session's tick timer, never by the frame
rate.
"""
import logging
from typing import Any, Dict, Optional

import pygame

from ..game.renderer import SnakeRenderer
from ..game.session import GameSession
from ..utils.config_loader import Config
from .ui_components import (
    Button,
    ACCENT_COLOR,
    DANGER_COLOR,
    MUTED_TEXT,
    PANEL_BORDER,
    PANEL_COLOR,
    TEXT_COLOR,
)

logger = logging.getLogger(__name__)

WINDOW_BG = (8, 8, 12)
MARGIN = 16
HEADER_HEIGHT = 76
FOOTER_HEIGHT = 130
HINT_TEXT = "Touch screen corners to control the snake"


class SnakeOverlay:
    """
    Standalone overlay window for the Snake game.

    Controls:
        Arrow Keys / WASD: Move
        Click / touch: Move towards that side of the window
        R or "Play Again": Restart
        ESC or "X": Close
    """

    def __init__(self, config: Optional[Config] = None, session: Optional[GameSession] = None):
        """
        Build the overlay layout.

        Args:
            config: Application configuration (defaults to Config())
            session: Game session to host (defaults to a new GameSession)
        """
        self.config = config or Config()
        self.session = session or GameSession()
        display = self.config.display

        self.renderer = SnakeRenderer(cell_size=display.cell_size)
        board_size = self.renderer.get_preferred_size()[0]

        panel_width = board_size + display.padding * 2
        panel_height = HEADER_HEIGHT + board_size + FOOTER_HEIGHT + display.padding
        self.window_width = panel_width + MARGIN * 2
        self.window_height = panel_height + MARGIN * 2

        self.panel_rect = pygame.Rect(MARGIN, MARGIN, panel_width, panel_height)
        self.board_top = MARGIN + HEADER_HEIGHT
        self.board_left = MARGIN + display.padding
        self.board_size = board_size
        self.renderer.set_render_area(self.board_left, self.board_top, board_size, board_size)

        self.close_button = Button(
            MARGIN + panel_width - 40, MARGIN + 8, 32, 32, "X",
            callback=self.close, font_size=32, flat=True
        )
        self.restart_button = Button(
            self.window_width // 2 - 80, self.board_top + board_size + 52, 160, 44,
            "Play Again", callback=self.restart
        )
        self.restart_button.visible = False

        self.surface: Optional[pygame.Surface] = None
        self.running = False
        self._snapshot: Optional[Dict[str, Any]] = None
        self._fonts: Dict[str, Any] = {}

    # Lifecycle

    def open(self, surface: Optional[pygame.Surface] = None) -> None:
        """
        Open the overlay and start the game session.

        Args:
            surface: Surface to draw on (creates a window if None)
        """
        if self.running:
            return

        pygame.init()
        if surface is None:
            surface = pygame.display.set_mode((self.window_width, self.window_height))
            pygame.display.set_caption(self.config.display.title)
        self.surface = surface

        self._fonts = {
            "title": pygame.font.Font(None, 36),
            "score": pygame.font.Font(None, 28),
            "message": pygame.font.Font(None, 30),
            "hint": pygame.font.Font(None, 20),
        }

        self.session.add_listener(self._on_snapshot)
        self.session.start()
        self.running = True
        logger.info("Overlay opened (%dx%d)", self.window_width, self.window_height)

    def close(self) -> None:
        """Stop the session and end the frame loop."""
        if not self.running:
            return
        self.session.stop()
        self.running = False
        logger.info("Overlay closed")

    def restart(self) -> None:
        self.session.reset()

    def _on_snapshot(self, snapshot: Dict[str, Any]) -> None:
        self._snapshot = snapshot
        self.restart_button.visible = snapshot["game_over"]

    # Events

    def handle_event(self, event: pygame.event.Event) -> None:
        """Route one pygame event to the chrome or the session."""
        if event.type == pygame.QUIT:
            self.close()
            return

        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.close()
                return
            if event.key == pygame.K_r:
                self.restart()
                return

        if self.close_button.handle_event(event):
            return
        if self.restart_button.handle_event(event):
            return

        if self.surface is not None:
            self.session.handle_event(event, self.surface.get_size())

    # Drawing

    def draw(self) -> None:
        """Draw the current snapshot and chrome."""
        if self.surface is None:
            return
        snapshot = self._snapshot or self.session.snapshot()
        surface = self.surface

        surface.fill(WINDOW_BG)
        pygame.draw.rect(surface, PANEL_COLOR, self.panel_rect, border_radius=12)
        pygame.draw.rect(surface, PANEL_BORDER, self.panel_rect, 1, border_radius=12)

        center_x = self.window_width // 2
        self._blit_centered("title", "Snake Game", TEXT_COLOR, center_x, MARGIN + 24)
        self._blit_centered("score", f"Score: {snapshot['score']}", ACCENT_COLOR, center_x, MARGIN + 56)
        self.close_button.draw(surface)

        self.renderer.render(snapshot, surface)

        board_bottom = self.board_top + self.board_size
        if snapshot["game_over"]:
            self._blit_centered("message", "Game Over!", DANGER_COLOR, center_x, board_bottom + 28)
            self.restart_button.draw(surface)

        self._blit_centered("hint", HINT_TEXT, MUTED_TEXT, center_x, board_bottom + FOOTER_HEIGHT - 16)

    def _blit_centered(self, font_key: str, text: str, color, center_x: int, center_y: int):
        text_surf = self._fonts[font_key].render(text, True, color)
        text_rect = text_surf.get_rect(center=(center_x, center_y))
        self.surface.blit(text_surf, text_rect)

    # Main loop

    def run(self) -> int:
        """
        Run the overlay until it is closed.

        Returns:
            The final score
        """
        self.open()
        clock = pygame.time.Clock()
        try:
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)
                    if not self.running:
                        break
                if not self.running:
                    break
                self.draw()
                pygame.display.flip()
                clock.tick(self.config.display.render_fps)
        finally:
            self.close()
            pygame.quit()
        return self.session.score

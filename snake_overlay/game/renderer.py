"""
Snake Game Renderer - Pygame-based visualization implementing RendererInterface.
"""

import pygame
from typing import Dict, Any, Tuple

from ..core.renderer_interface import RendererInterface
from .snake_game import GRID_SIZE


# Colors
BOARD_COLOR = (31, 41, 55)
GRID_COLOR = (45, 55, 72)
BORDER_COLOR = (88, 60, 130)
SNAKE_HEAD_COLOR = (192, 132, 252)
SNAKE_BODY_COLOR = (168, 85, 247)
HEAD_GLOW_COLOR = (120, 70, 170)
FOOD_COLOR = (239, 68, 68)
FOOD_GLOW_COLOR = (120, 40, 45)


class SnakeRenderer(RendererInterface):
    """
    Renders Snake snapshots onto a square board area.

    Cell positions are proportional: a cell at index i along an axis starts
    at i / grid_size of the board's extent, so the board scales to whatever
    area the host assigns.
    """

    def __init__(self, cell_size: int = 25, grid_size: int = GRID_SIZE):
        """
        Initialize the renderer.

        Args:
            cell_size: Preferred size of each grid cell in pixels
            grid_size: Number of cells along each axis
        """
        self._cell_size = cell_size
        self._grid_size = grid_size
        self._offset_x = 0
        self._offset_y = 0
        self._board_size = grid_size * cell_size

    def get_preferred_size(self) -> Tuple[int, int]:
        """Get the preferred render size."""
        return (self._grid_size * self._cell_size, self._grid_size * self._cell_size)

    def set_render_area(self, x: int, y: int, width: int, height: int) -> None:
        """Fit the square board inside the given area, top-left aligned."""
        self._offset_x = x
        self._offset_y = y
        self._board_size = min(width, height)

    def cell_rect(self, x: int, y: int, grid_size: int) -> Tuple[int, int, int]:
        """
        Map a cell to pixel space.

        Returns:
            (left, top, size) of the cell within the board area
        """
        left = self._offset_x + round(x / grid_size * self._board_size)
        top = self._offset_y + round(y / grid_size * self._board_size)
        size = max(1, round(self._board_size / grid_size))
        return left, top, size

    def render(self, game_state: Dict[str, Any], surface: pygame.Surface) -> None:
        """
        Render the game state to a surface.

        Args:
            game_state: Snapshot from SnakeGame.get_state()
            surface: Pygame surface to draw on
        """
        grid_size = game_state.get("grid_size", self._grid_size)

        board_rect = pygame.Rect(self._offset_x, self._offset_y, self._board_size, self._board_size)
        pygame.draw.rect(surface, BOARD_COLOR, board_rect, border_radius=8)

        # Subtle grid
        for i in range(1, grid_size):
            pos = round(i / grid_size * self._board_size)
            pygame.draw.line(
                surface, GRID_COLOR,
                (self._offset_x + pos, self._offset_y),
                (self._offset_x + pos, self._offset_y + self._board_size)
            )
            pygame.draw.line(
                surface, GRID_COLOR,
                (self._offset_x, self._offset_y + pos),
                (self._offset_x + self._board_size, self._offset_y + pos)
            )

        self._draw_food(surface, game_state["food"], grid_size)

        for i, segment in enumerate(game_state["snake"]):
            left, top, size = self.cell_rect(segment["x"], segment["y"], grid_size)
            if i == 0:
                glow = pygame.Rect(left - 2, top - 2, size + 4, size + 4)
                pygame.draw.rect(surface, HEAD_GLOW_COLOR, glow, border_radius=4)
                color = SNAKE_HEAD_COLOR
            else:
                color = SNAKE_BODY_COLOR
            pygame.draw.rect(surface, color, pygame.Rect(left, top, size, size), border_radius=3)

        pygame.draw.rect(surface, BORDER_COLOR, board_rect, 1, border_radius=8)

    def _draw_food(self, surface: pygame.Surface, food: Dict[str, int], grid_size: int):
        left, top, size = self.cell_rect(food["x"], food["y"], grid_size)
        center = (left + size // 2, top + size // 2)
        radius = max(2, size * 2 // 5)
        pygame.draw.circle(surface, FOOD_GLOW_COLOR, center, radius + 3)
        pygame.draw.circle(surface, FOOD_COLOR, center, radius)

"""
Abstract renderer interface for Snake Overlay.

The presentation layer is driven purely by state snapshots produced by the
engine. Renderers never read or mutate engine internals.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    import pygame


class RendererInterface(ABC):
    """
    Abstract renderer for game visualization.

    Renderers draw a game snapshot onto a surface.
    """

    @abstractmethod
    def render(self, game_state: Dict[str, Any], surface: "pygame.Surface") -> None:
        """
        Render a snapshot to a surface.

        Args:
            game_state: Snapshot dictionary from SnakeGame.get_state()
            surface: Surface to draw on
        """
        pass

    @abstractmethod
    def get_preferred_size(self) -> Tuple[int, int]:
        """
        Get the preferred render size.

        Returns:
            Tuple of (width, height) in pixels
        """
        pass

    def set_render_area(self, x: int, y: int, width: int, height: int) -> None:
        """
        Set the area where this renderer should draw.

        Args:
            x: Left edge x coordinate
            y: Top edge y coordinate
            width: Width of render area
            height: Height of render area
        """
        pass

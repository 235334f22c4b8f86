"""
Input translation - pointer zones and keys to snake directions.

Touch control is quadrant based: whichever axis the pointer is further from
the viewport centre along decides the direction. A pointer exactly on a
diagonal (equal offsets) selects nothing.
"""
import logging
import math
from numbers import Real
from typing import Optional

from .snake_game import Direction

logger = logging.getLogger(__name__)


def _is_finite_number(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def translate_pointer_input(
    pointer_x: float,
    pointer_y: float,
    viewport_width: float,
    viewport_height: float
) -> Optional[Direction]:
    """
    Map a pointer position to a direction.

    Args:
        pointer_x: Pointer x in viewport pixels
        pointer_y: Pointer y in viewport pixels
        viewport_width: Viewport width in pixels
        viewport_height: Viewport height in pixels

    Returns:
        The selected Direction, or None on a tie or malformed input
    """
    values = (pointer_x, pointer_y, viewport_width, viewport_height)
    if not all(_is_finite_number(v) for v in values):
        logger.debug("Ignoring malformed pointer input %r", values)
        return None
    if viewport_width <= 0 or viewport_height <= 0:
        logger.debug("Ignoring pointer input for empty viewport %sx%s", viewport_width, viewport_height)
        return None

    offset_x = pointer_x - viewport_width / 2
    offset_y = pointer_y - viewport_height / 2

    if abs(offset_x) > abs(offset_y):
        return Direction.RIGHT if offset_x > 0 else Direction.LEFT
    if abs(offset_y) > abs(offset_x):
        return Direction.DOWN if offset_y > 0 else Direction.UP
    return None


def key_to_direction(key: int) -> Optional[Direction]:
    """
    Map an arrow or WASD key code to a direction.

    Args:
        key: pygame key code

    Returns:
        The Direction for the key, or None for any other key
    """
    import pygame

    key_map = {
        pygame.K_UP: Direction.UP,
        pygame.K_w: Direction.UP,
        pygame.K_DOWN: Direction.DOWN,
        pygame.K_s: Direction.DOWN,
        pygame.K_LEFT: Direction.LEFT,
        pygame.K_a: Direction.LEFT,
        pygame.K_RIGHT: Direction.RIGHT,
        pygame.K_d: Direction.RIGHT,
    }
    return key_map.get(key)

"""
Snake game module.

Only the pygame-free engine and input translation are exported here; the
session and renderer modules import pygame and are imported explicitly.
"""

from .snake_game import (
    SnakeGame,
    Direction,
    Point,
    GRID_SIZE,
    INITIAL_TICK_INTERVAL_MS,
    MIN_TICK_INTERVAL_MS,
)
from .input import translate_pointer_input, key_to_direction

__all__ = [
    'SnakeGame',
    'Direction',
    'Point',
    'GRID_SIZE',
    'INITIAL_TICK_INTERVAL_MS',
    'MIN_TICK_INTERVAL_MS',
    'translate_pointer_input',
    'key_to_direction',
]

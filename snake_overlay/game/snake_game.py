"""
Snake Game Core - Pure game logic without rendering.

The engine is a two-state machine (running / game over) on a fixed 20x20
grid. It never touches pygame, so it can be driven by any timer and any
presentation layer.
"""
from dataclasses import dataclass
from typing import List, Tuple, Optional, Dict, Any, Union
from enum import Enum
import logging
import random

logger = logging.getLogger(__name__)


GRID_SIZE = 20
INITIAL_TICK_INTERVAL_MS = 150.0
MIN_TICK_INTERVAL_MS = 50.0
SPEED_FACTOR = 0.95
FOOD_SCORE = 10


class Direction(Enum):
    """Unit step applied to the head each tick. y grows downwards."""
    RIGHT = (1, 0)
    LEFT = (-1, 0)
    DOWN = (0, 1)
    UP = (0, -1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @classmethod
    def coerce(cls, value: Any) -> Optional["Direction"]:
        """
        Convert a Direction or a (dx, dy) pair to a Direction.

        Returns:
            The matching Direction, or None if value is not a unit step
        """
        if isinstance(value, cls):
            return value
        try:
            dx, dy = value
            if isinstance(dx, bool) or isinstance(dy, bool):
                return None
            step = (int(dx), int(dy))
        except (TypeError, ValueError, OverflowError):
            return None
        if step != (dx, dy):
            return None
        try:
            return cls(step)
        except ValueError:
            return None


@dataclass(frozen=True)
class Point:
    """A cell on the game grid."""
    x: int
    y: int

    def __add__(self, direction: Direction) -> "Point":
        return Point(self.x + direction.dx, self.y + direction.dy)

    def in_bounds(self, size: int = GRID_SIZE) -> bool:
        return 0 <= self.x < size and 0 <= self.y < size

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary for serialization."""
        return {"x": self.x, "y": self.y}


INITIAL_SNAKE: Tuple[Point, ...] = (Point(5, 5),)
INITIAL_DIRECTION = Direction.RIGHT


class SnakeGame:
    """
    Core Snake game logic.

    The snake moves one cell per tick in the pending direction. Landing on
    food grows the snake by one, adds FOOD_SCORE points and shortens the tick
    interval by SPEED_FACTOR down to MIN_TICK_INTERVAL_MS. Leaving the grid
    or running into any snake cell ends the game and leaves the snake as it
    was on the last valid tick.

    Reversal input is accepted as-is. Turning straight back into the neck is
    resolved by the next tick as a self-collision rather than rejected here.
    """

    grid_size = GRID_SIZE

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Initialize the game.

        Args:
            rng: Random source for food placement (defaults to a fresh Random)
        """
        self._rng = rng or random.Random()

        # Game state (initialized in reset)
        self.snake: List[Point] = []
        self.food: Point = Point(0, 0)
        self.direction: Direction = INITIAL_DIRECTION
        self.score: int = 0
        self.tick_interval_ms: float = INITIAL_TICK_INTERVAL_MS
        self.game_over: bool = False

        self.reset()

    @property
    def head(self) -> Point:
        return self.snake[0]

    def reset(self) -> Dict[str, Any]:
        """
        Reset game state and return the initial snapshot.

        Returns:
            Dictionary containing the initial game state
        """
        self.snake = list(INITIAL_SNAKE)
        self.direction = INITIAL_DIRECTION
        self.score = 0
        self.tick_interval_ms = INITIAL_TICK_INTERVAL_MS
        self.game_over = False

        self.place_food()
        logger.info("Game reset, food at (%d, %d)", self.food.x, self.food.y)

        return self.get_state()

    def place_food(self) -> Point:
        """
        Place food at a random cell not on the snake.

        Rejection sampling: uniform draws over the whole grid until a free
        cell comes up. Never returns while the snake fills every cell.

        Returns:
            The new food location
        """
        occupied = set(self.snake)
        while True:
            food = Point(
                self._rng.randrange(self.grid_size),
                self._rng.randrange(self.grid_size),
            )
            if food not in occupied:
                self.food = food
                logger.debug("Food placed at (%d, %d)", food.x, food.y)
                return food

    def set_direction(self, direction: Union[Direction, Tuple[int, int]]) -> bool:
        """
        Overwrite the direction used by the next tick.

        Args:
            direction: A Direction or a (dx, dy) unit step

        Returns:
            True if the direction was stored, False if the input was ignored
        """
        new_dir = Direction.coerce(direction)
        if new_dir is None:
            logger.debug("Ignoring invalid direction %r", direction)
            return False
        self.direction = new_dir
        return True

    def handle_pointer(
        self,
        pointer_x: float,
        pointer_y: float,
        viewport_width: float,
        viewport_height: float
    ) -> bool:
        """
        Apply a pointer/touch position as a direction change.

        Returns:
            True if the pointer selected a direction, False on a tie or bad input
        """
        from .input import translate_pointer_input

        new_dir = translate_pointer_input(pointer_x, pointer_y, viewport_width, viewport_height)
        if new_dir is None:
            return False
        return self.set_direction(new_dir)

    def tick(self) -> bool:
        """
        Advance the game by one step.

        Returns:
            True if the snake moved, False if the game is (or just became) over
        """
        if self.game_over:
            return False

        new_head = self.head + self.direction

        if self.is_collision(new_head):
            self.game_over = True
            logger.info("Game over at (%d, %d), score %d", new_head.x, new_head.y, self.score)
            return False

        self.snake.insert(0, new_head)

        if new_head == self.food:
            self.score += FOOD_SCORE
            self.tick_interval_ms = max(self.tick_interval_ms * SPEED_FACTOR, MIN_TICK_INTERVAL_MS)
            self.place_food()
        else:
            self.snake.pop()

        return True

    def is_collision(self, point: Point) -> bool:
        """
        Check if point is off the grid or on any snake cell.

        The current tail counts as occupied even though a plain move would
        vacate it this tick.
        """
        if not point.in_bounds(self.grid_size):
            return True
        return point in self.snake

    def get_state(self) -> Dict[str, Any]:
        """
        Get a snapshot of the current game state for rendering.

        The dictionary is built fresh on every call; changing it has no
        effect on the game.
        """
        return {
            "snake": [p.to_dict() for p in self.snake],
            "food": self.food.to_dict(),
            "direction": [self.direction.dx, self.direction.dy],
            "score": self.score,
            "game_over": self.game_over,
            "tick_interval_ms": self.tick_interval_ms,
            "grid_size": self.grid_size,
        }

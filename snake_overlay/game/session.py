"""
Game Session - lifecycle owner for one running Snake overlay.

A session acquires the tick timer when started and releases it, together
with every snapshot listener, when stopped. Anything that reaches a stopped
session (a late timer event, a touch that was already queued) is ignored.
"""
import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

import pygame

from ..core.timer_interface import TickTimer
from .input import key_to_direction
from .snake_game import Direction, SnakeGame

logger = logging.getLogger(__name__)

SnapshotListener = Callable[[Dict[str, Any]], None]

TICK_EVENT = pygame.USEREVENT + 1


class PygameTickTimer(TickTimer):
    """
    Repeating timer backed by pygame.time.set_timer.

    Each expiry posts an event of `event_type` to the pygame queue; the
    session turns those events into ticks.
    """

    def __init__(self, event_type: int = TICK_EVENT):
        self.event_type = event_type
        self._interval_ms: Optional[float] = None

    def start(self, interval_ms: float) -> None:
        # set_timer replaces any earlier timer for the same event type
        pygame.time.set_timer(self.event_type, max(1, int(round(interval_ms))))
        self._interval_ms = interval_ms

    def cancel(self) -> None:
        pygame.time.set_timer(self.event_type, 0)
        self._interval_ms = None

    @property
    def active(self) -> bool:
        return self._interval_ms is not None

    @property
    def interval_ms(self) -> Optional[float]:
        return self._interval_ms


class GameSession:
    """
    Binds a SnakeGame to a tick timer, input events and snapshot listeners.

    Usage:
        with GameSession() as session:
            session.add_listener(draw)
            ...
            session.handle_event(event, screen.get_size())
    """

    def __init__(self, game: Optional[SnakeGame] = None, timer: Optional[TickTimer] = None):
        """
        Create a session.

        Args:
            game: Engine to drive (defaults to a new SnakeGame)
            timer: Tick timer (defaults to a PygameTickTimer)
        """
        self.game = game or SnakeGame()
        self.timer = timer or PygameTickTimer()
        self._listeners: List[SnapshotListener] = []
        self._active = False

    def __enter__(self) -> "GameSession":
        self.start()
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.stop()

    @property
    def active(self) -> bool:
        return self._active

    @property
    def game_over(self) -> bool:
        return self.game.game_over

    @property
    def score(self) -> int:
        return self.game.score

    def snapshot(self) -> Dict[str, Any]:
        """Current game snapshot."""
        return self.game.get_state()

    # Lifecycle

    def start(self) -> None:
        """Acquire the tick timer and begin publishing snapshots."""
        if self._active:
            return
        self._active = True
        self._schedule()
        logger.info("Session started")
        self._publish()

    def reset(self) -> Dict[str, Any]:
        """
        Restart the game from the initial configuration.

        Returns:
            The fresh snapshot
        """
        state = self.game.reset()
        if self._active:
            self._schedule()
            self._publish()
        return state

    def stop(self) -> None:
        """Cancel the timer and detach all listeners."""
        if not self._active:
            return
        self._active = False
        self.timer.cancel()
        self._listeners.clear()
        logger.info("Session stopped, final score %d", self.game.score)

    # Listeners

    def add_listener(self, listener: SnapshotListener) -> None:
        """Register a callback receiving a snapshot after every tick or input."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: SnapshotListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # Timer and input

    def on_timer(self) -> bool:
        """
        Run one tick.

        Returns:
            True if the snake moved
        """
        if not self._active:
            return False

        interval = self.game.tick_interval_ms
        moved = self.game.tick()
        if self.game.tick_interval_ms != interval:
            self._schedule()

        self._publish()
        return moved

    def set_direction(self, direction: Direction) -> bool:
        """Forward a direction change to the game."""
        if not self._active:
            return False
        changed = self.game.set_direction(direction)
        if changed:
            self._publish()
        return changed

    def handle_pointer(
        self,
        pointer_x: float,
        pointer_y: float,
        viewport_width: float,
        viewport_height: float
    ) -> bool:
        """Forward a pointer/touch position to the game."""
        if not self._active:
            return False
        changed = self.game.handle_pointer(pointer_x, pointer_y, viewport_width, viewport_height)
        if changed:
            self._publish()
        return changed

    def handle_event(self, event: "pygame.event.Event", viewport_size: Tuple[int, int]) -> bool:
        """
        Dispatch a pygame event.

        Args:
            event: Event from the pygame queue
            viewport_size: (width, height) of the window receiving pointer input

        Returns:
            True if the event was consumed by the session
        """
        if not self._active:
            return False

        width, height = viewport_size
        event_type = getattr(self.timer, "event_type", None)

        if event_type is not None and event.type == event_type:
            self.on_timer()
            return True

        if event.type == pygame.KEYDOWN:
            direction = key_to_direction(event.key)
            if direction is None:
                return False
            self.set_direction(direction)
            return True

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            x, y = event.pos
            self.handle_pointer(x, y, width, height)
            return True

        if event.type == pygame.FINGERDOWN:
            # Finger coordinates are normalised to 0..1
            self.handle_pointer(event.x * width, event.y * height, width, height)
            return True

        return False

    def _schedule(self) -> None:
        self.timer.cancel()
        self.timer.start(self.game.tick_interval_ms)
        logger.debug("Tick timer set to %.1f ms", self.game.tick_interval_ms)

    def _publish(self) -> None:
        state = self.game.get_state()
        for listener in list(self._listeners):
            listener(state)

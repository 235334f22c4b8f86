"""
Abstract tick timer interface.

A session owns exactly one repeating timer. The interval in force when the
timer is started governs every following period, so a new interval only
takes effect after cancelling and starting again.
"""

from abc import ABC, abstractmethod
from typing import Optional


class TickTimer(ABC):
    """Repeating timer that drives SnakeGame.tick()."""

    @abstractmethod
    def start(self, interval_ms: float) -> None:
        """
        Schedule the repeating timer, replacing any existing schedule.

        Args:
            interval_ms: Period between ticks in milliseconds
        """
        pass

    @abstractmethod
    def cancel(self) -> None:
        """Cancel the timer. Safe to call when not running."""
        pass

    @property
    @abstractmethod
    def active(self) -> bool:
        """True while a schedule is in force."""
        pass

    @property
    @abstractmethod
    def interval_ms(self) -> Optional[float]:
        """Interval of the current schedule, or None when cancelled."""
        pass

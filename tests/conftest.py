"""
Pytest configuration and fixtures for Snake Overlay tests.

This module sets up pygame mocking so the session, renderer and overlay can
be tested without a display or actual pygame initialization. The engine
itself never imports pygame.
"""

import random
import sys
from pathlib import Path
from typing import List, Optional
from unittest.mock import MagicMock

import pytest


# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))
sys.path.insert(0, str(PROJECT_ROOT / "scripts"))

from snake_overlay.core.timer_interface import TickTimer  # noqa: E402


def create_mock_pygame():
    """Create a mock of the parts of pygame the overlay uses."""
    mock_pygame = MagicMock()

    # Basic initialization
    mock_pygame.init.return_value = (6, 0)  # (success, fail) count
    mock_pygame.quit.return_value = None

    # Display
    mock_surface = MagicMock()
    mock_surface.get_width.return_value = 612
    mock_surface.get_height.return_value = 778
    mock_surface.get_size.return_value = (612, 778)
    mock_pygame.display.set_mode.return_value = mock_surface
    mock_pygame.display.set_caption.return_value = None
    mock_pygame.display.flip.return_value = None

    # Fonts
    mock_font = MagicMock()
    mock_font.render.return_value = MagicMock()  # Returns a surface
    mock_font.size.return_value = (100, 30)  # (width, height)
    mock_pygame.font.Font.return_value = mock_font

    # Drawing
    mock_pygame.draw.rect.return_value = None
    mock_pygame.draw.line.return_value = None
    mock_pygame.draw.circle.return_value = None

    # Events
    mock_pygame.event.get.return_value = []

    # Constants
    mock_pygame.QUIT = 256
    mock_pygame.KEYDOWN = 768
    mock_pygame.KEYUP = 769
    mock_pygame.MOUSEMOTION = 1024
    mock_pygame.MOUSEBUTTONDOWN = 1025
    mock_pygame.MOUSEBUTTONUP = 1026
    mock_pygame.FINGERDOWN = 1792
    mock_pygame.USEREVENT = 32866
    mock_pygame.K_ESCAPE = 27
    mock_pygame.K_SPACE = 32
    mock_pygame.K_UP = 273
    mock_pygame.K_DOWN = 274
    mock_pygame.K_RIGHT = 275
    mock_pygame.K_LEFT = 276
    mock_pygame.K_w = 119
    mock_pygame.K_a = 97
    mock_pygame.K_s = 115
    mock_pygame.K_d = 100
    mock_pygame.K_r = 114

    # Time
    mock_clock = MagicMock()
    mock_clock.tick.return_value = 16  # ~60fps
    mock_pygame.time.Clock.return_value = mock_clock
    mock_pygame.time.set_timer.return_value = None

    # Rect
    mock_pygame.Rect = MagicMock(side_effect=lambda *args: MagicMock(
        x=args[0] if args else 0,
        y=args[1] if len(args) > 1 else 0,
        width=args[2] if len(args) > 2 else 0,
        height=args[3] if len(args) > 3 else 0,
        collidepoint=MagicMock(return_value=False)
    ))

    return mock_pygame


@pytest.fixture(scope="session", autouse=True)
def mock_pygame_module():
    """
    Session-scoped fixture that mocks pygame before any imports.

    This runs automatically for all tests and ensures pygame is mocked
    before the session, renderer and overlay modules are imported.
    """
    mock_pygame = create_mock_pygame()

    # Store original module if it exists
    original_pygame = sys.modules.get('pygame')

    # Install mock
    sys.modules['pygame'] = mock_pygame

    yield mock_pygame

    # Restore original (or remove mock)
    if original_pygame:
        sys.modules['pygame'] = original_pygame
    else:
        del sys.modules['pygame']


@pytest.fixture
def mock_screen(mock_pygame_module):
    """Provide a mock pygame screen surface."""
    screen = MagicMock()
    screen.get_size.return_value = (400, 400)
    screen.fill.return_value = None
    screen.blit.return_value = None
    return screen


class FakeTimer(TickTimer):
    """TickTimer that records schedules instead of firing."""

    event_type = 99

    def __init__(self):
        self.starts: List[float] = []
        self.cancels = 0
        self._interval_ms: Optional[float] = None

    def start(self, interval_ms: float) -> None:
        self.starts.append(interval_ms)
        self._interval_ms = interval_ms

    def cancel(self) -> None:
        self.cancels += 1
        self._interval_ms = None

    @property
    def active(self) -> bool:
        return self._interval_ms is not None

    @property
    def interval_ms(self) -> Optional[float]:
        return self._interval_ms


@pytest.fixture
def fake_timer():
    """Provide a recording tick timer."""
    return FakeTimer()


@pytest.fixture
def game():
    """Provide a SnakeGame with seeded food placement."""
    from snake_overlay.game.snake_game import SnakeGame

    return SnakeGame(rng=random.Random(1234))


@pytest.fixture
def session(mock_pygame_module, game, fake_timer):
    """Provide an unstarted GameSession on a fake timer."""
    from snake_overlay.game.session import GameSession

    return GameSession(game=game, timer=fake_timer)

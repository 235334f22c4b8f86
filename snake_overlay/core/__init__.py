"""
Core abstractions for Snake Overlay.

Provides the abstract interfaces the engine's collaborators implement.
"""

from .renderer_interface import RendererInterface
from .timer_interface import TickTimer

__all__ = [
    'RendererInterface',
    'TickTimer',
]

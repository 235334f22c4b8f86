from .overlay import SnakeOverlay
from .ui_components import (
    Button,
    PANEL_COLOR, TEXT_COLOR, ACCENT_COLOR, DANGER_COLOR
)

__all__ = [
    "SnakeOverlay",
    "Button",
    "PANEL_COLOR",
    "TEXT_COLOR",
    "ACCENT_COLOR",
    "DANGER_COLOR",
]

# Snake Overlay Source Package
"""
Snake Overlay - Classic Snake as a modal overlay.

Modules:
- core: Abstract interfaces for renderers and tick timers
- game: Game engine, input translation, session lifecycle and renderer
- visualization: Overlay window and UI components
- utils: Configuration and logging
"""

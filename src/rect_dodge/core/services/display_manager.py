"""
display_manager.py
------------------
Window creation and per-frame presentation.

Responsibilities:
- Create the (optionally resizable) window
- Report the current drawable size every frame
- Flip the finished frame to the screen
"""

import pygame

from rect_dodge.core.debug.debug_logger import DebugLogger
from rect_dodge.core.runtime.game_settings import Display


class DisplayManager:
    """Owns the pygame window surface."""

    def __init__(self, width: int = Display.WIDTH, height: int = Display.HEIGHT,
                 resizable: bool = Display.RESIZABLE):
        """
        Args:
            width: Initial window width
            height: Initial window height
            resizable: Allow the user to resize the window
        """
        DebugLogger.init_entry("DisplayManager")

        self.resizable = resizable
        self.window = None
        self._create_window(width, height)

        DebugLogger.init_sub(f"Display Mode: Windowed ({width}x{height})", level=1)

    def _create_window(self, width: int, height: int):
        flags = pygame.RESIZABLE if self.resizable else 0
        self.window = pygame.display.set_mode((width, height), flags)

    # ===========================================================
    # Queries
    # ===========================================================

    def get_size(self) -> tuple:
        """Current drawable area as (width, height)."""
        return self.window.get_size()

    def get_game_surface(self) -> pygame.Surface:
        return self.window

    # ===========================================================
    # Events & Presentation
    # ===========================================================

    def handle_resize(self, event):
        """Recreate the window surface after a VIDEORESIZE event."""
        if event.type != pygame.VIDEORESIZE:
            return
        self._create_window(event.w, event.h)
        DebugLogger.state(f"Window resized to {event.w}x{event.h}", category="display")

    def render(self):
        pygame.display.flip()

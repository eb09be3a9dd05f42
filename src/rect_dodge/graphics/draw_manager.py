"""
draw_manager.py
---------------
Layered draw queue for colored rectangles and text.

Responsibilities:
- Collect draw_rect / draw_text submissions during a frame
- Cache fonts by size
- Render queued items to the target surface in layer order
"""

import pygame

from rect_dodge.core.debug.debug_logger import DebugLogger
from rect_dodge.core.runtime.game_settings import Colors


class DrawManager:
    """Handles all rendering operations with layered batching."""

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, background=Colors.RED, font_name=None):
        """
        Args:
            background: Clear color for each frame
            font_name: System font name (pygame default font if None)
        """
        self.background = tuple(background)
        self.font_name = font_name

        self._fonts = {}
        self._layers = {}         # {layer: [(kind, payload), ...]}
        self._layer_keys_cache = []
        self._layers_dirty = False

        DebugLogger.init_entry("DrawManager")

    # ===========================================================
    # Fonts
    # ===========================================================

    def get_font(self, size: int) -> pygame.font.Font:
        """Return a cached font for the given pixel size."""
        size = int(size)
        font = self._fonts.get(size)
        if font is not None:
            return font

        if not pygame.font.get_init():
            pygame.font.init()

        if self.font_name and self.font_name.lower() in pygame.font.get_fonts():
            font = pygame.font.SysFont(self.font_name, size)
        else:
            if self.font_name:
                DebugLogger.warn(f"Font '{self.font_name}' unavailable, using default", category="drawing")
                self.font_name = None
            font = pygame.font.Font(None, size)

        self._fonts[size] = font
        return font

    def measure_text(self, content: str, font_size: int) -> tuple:
        """Rendered (width, height) of a text string."""
        return self.get_font(font_size).size(content)

    # ===========================================================
    # Queue Management
    # ===========================================================

    def clear(self):
        """Clear all draw queues for a new frame."""
        for items in self._layers.values():
            items.clear()

    def _queue(self, layer: int, item):
        if layer not in self._layers:
            self._layers[layer] = []
            self._layers_dirty = True
        self._layers[layer].append(item)

    def draw_rect(self, x, y, width, height, color, layer=0):
        """Queue a filled rectangle."""
        rect = pygame.Rect(int(x), int(y), int(width), int(height))
        self._queue(layer, ("rect", (rect, tuple(color), 0)))

    def draw_outline(self, x, y, width, height, color, layer=0, line_width=1):
        """Queue a rectangle outline (debug overlay)."""
        rect = pygame.Rect(int(x), int(y), int(width), int(height))
        self._queue(layer, ("rect", (rect, tuple(color), line_width)))

    def draw_text(self, content, x, y, font_size, color, layer=0):
        """Queue a text string with its top-left at (x, y)."""
        self._queue(layer, ("text", (str(content), int(x), int(y), int(font_size), tuple(color))))

    def queued_count(self) -> int:
        return sum(len(items) for items in self._layers.values())

    # ===========================================================
    # Rendering
    # ===========================================================

    def render(self, target_surface):
        """Render all queued items to the target surface, lowest layer first."""
        target_surface.fill(self.background)

        if self._layers_dirty:
            self._layer_keys_cache = sorted(self._layers.keys())
            self._layers_dirty = False

        for layer in self._layer_keys_cache:
            for kind, payload in self._layers[layer]:
                if kind == "rect":
                    rect, color, line_width = payload
                    pygame.draw.rect(target_surface, color, rect, line_width)
                else:
                    content, x, y, font_size, color = payload
                    surface = self.get_font(font_size).render(content, True, color)
                    target_surface.blit(surface, (x, y))

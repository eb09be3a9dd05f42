"""
main_loop.py
------------
Pygame adapter loop: timing, events, update, render.

Responsibilities:
- Initialize pygame and the platform services
- Feed delta-time, input and screen size to the GameScene each frame
- Render queued draw calls, then let the scene sweep destroyed entities
- Drive the debug overlay and slow-frame warnings
"""

import time

import pygame

from rect_dodge.core.debug.debug_hud import DebugHUD
from rect_dodge.core.debug.debug_logger import DebugLogger
from rect_dodge.core.runtime.game_config import GameConfig
from rect_dodge.core.runtime.game_settings import Display, Debug
from rect_dodge.core.services.display_manager import DisplayManager
from rect_dodge.core.services.input_manager import InputManager
from rect_dodge.graphics.draw_manager import DrawManager
from rect_dodge.scenes.game_scene import GameScene
from rect_dodge.ui.hud_manager import HUDManager


class MainLoop:
    """Runs one GameScene frame per rendered frame until the window closes."""

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, config: GameConfig = None):
        """
        Args:
            config: Gameplay configuration (loaded from game.json if None)
        """
        DebugLogger.section("Initializing MainLoop")

        self._init_pygame()
        self._init_core_systems()
        self._init_scene(config)

    def _init_pygame(self):
        pygame.init()
        pygame.font.init()
        pygame.display.set_caption(Display.CAPTION)

        DebugLogger.init_entry("Pygame")
        DebugLogger.init_sub("Configured Window Caption")

    def _init_core_systems(self):
        self.display = DisplayManager()
        self.input_manager = InputManager()
        self.hud = HUDManager()
        self.draw_manager = DrawManager(background=self.hud.background)
        self.debug_hud = DebugHUD()
        self._last_perf_warn_time = 0.0

    def _init_scene(self, config):
        config = config or GameConfig.load()
        self.scene = GameScene(
            self.input_manager,
            config=config,
            hud=self.hud,
            screen_size=self.display.get_size(),
        )

        self.clock = pygame.time.Clock()
        self.running = True

        DebugLogger.init_entry("Main Loop Runtime")
        DebugLogger.init_sub("Game Clock Initialized", level=1)

    # ===========================================================
    # Main Loop
    # ===========================================================

    def run(self):
        """Execute the loop until quit, then shut pygame down."""
        DebugLogger.section("Game Loop")

        while self.running:
            # Only blocking point: wait for the next frame slot.
            # The full elapsed time is passed on, even after a long stall.
            frame_time = self.clock.tick(Display.FPS) / 1000.0

            self._handle_events()
            if not self.running:
                break

            self._run_frame(frame_time)

        pygame.quit()
        DebugLogger.system("Pygame terminated")

    def _run_frame(self, dt: float):
        start_total = time.perf_counter()

        self.input_manager.update()
        width, height = self.display.get_size()
        self.scene.update(dt, width, height)
        update_ms = (time.perf_counter() - start_total) * 1000

        t_render = time.perf_counter()
        self.draw_manager.clear()
        self.scene.draw(self.draw_manager)
        self.debug_hud.draw(self.draw_manager, self.scene)
        self.draw_manager.render(self.display.get_game_surface())
        self.display.render()
        render_ms = (time.perf_counter() - t_render) * 1000

        # Destroyed entities have now been drawn once
        self.scene.end_frame()

        frame_time_ms = (time.perf_counter() - start_total) * 1000
        self.debug_hud.record_frame_metrics(frame_time_ms, update_ms, render_ms, self.clock.get_fps())
        self._check_slow_frame(frame_time_ms, update_ms, render_ms)

    # ===========================================================
    # Event Handling
    # ===========================================================

    def _handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                DebugLogger.action("Quit signal received")
                return

            if event.type == pygame.VIDEORESIZE:
                self.display.handle_resize(event)
                continue

            action = self.input_manager.match_system_key(event)
            if action == "quit":
                self.running = False
                DebugLogger.action("Quit key pressed")
                return
            if action == "toggle_debug":
                self.debug_hud.toggle()

    def _check_slow_frame(self, frame_time_ms: float, update_ms: float, render_ms: float):
        """Log a warning for slow frames (throttled to 1/second)."""
        if frame_time_ms <= Debug.FRAME_TIME_WARNING:
            return

        now = time.perf_counter()
        if now - self._last_perf_warn_time > 1.0:
            self._last_perf_warn_time = now
            DebugLogger.warn(
                f"SLOW FRAME: {frame_time_ms:.2f}ms "
                f"(Update={update_ms:.2f} | Render={render_ms:.2f})",
                category="performance"
            )

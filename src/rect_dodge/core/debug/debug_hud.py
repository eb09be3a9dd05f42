"""
debug_hud.py
------------
Developer overlay toggled with F3: frame metrics, entity counts and
footprint outlines. Metrics are tracked even while the overlay is hidden.
"""

import time

from rect_dodge.core.debug.debug_logger import DebugLogger
from rect_dodge.core.runtime.game_settings import Debug, Layers
from rect_dodge.core.runtime.session_stats import get_session_stats


class DebugHUD:
    """Performance and simulation overlay."""

    FONT_SIZE = 18
    LINE_HEIGHT = 18
    TEXT_COLOR = (255, 255, 255)

    def __init__(self, visible: bool = None):
        self.visible = Debug.HUD_VISIBLE if visible is None else visible

        self.smoothed_fps = 0.0
        self.min_fps = float('inf')
        self.max_fps = 0.0
        self.min_fps_time = None

        self.frame_time = 0.0
        self.update_time = 0.0
        self.render_time = 0.0

        DebugLogger.init_entry("DebugHUD")

    def toggle(self):
        self.visible = not self.visible
        state = "shown" if self.visible else "hidden"
        DebugLogger.action(f"DebugHUD {state}", category="debug_hud")

    # ===========================================================
    # Metrics
    # ===========================================================

    def record_frame_metrics(self, frame_time_ms: float, update_ms: float,
                             render_ms: float, fps: float):
        """
        Record timing for the frame that just finished.

        Args:
            frame_time_ms: Wall time of the whole frame
            update_ms: Scene update time
            render_ms: Draw + present time
            fps: Instantaneous frames per second
        """
        self.frame_time = frame_time_ms
        self.update_time = update_ms
        self.render_time = render_ms

        # Exponential moving average
        self.smoothed_fps = (
            self.smoothed_fps * 0.9 + fps * 0.1
            if self.smoothed_fps > 0 else fps
        )

        if fps > self.max_fps:
            self.max_fps = fps

        if 0 < fps < self.min_fps:
            self.min_fps = fps
            self.min_fps_time = time.strftime("%H:%M:%S")

    # ===========================================================
    # Rendering
    # ===========================================================

    def draw(self, draw_manager, scene=None):
        """Queue the overlay (only when visible)."""
        if not self.visible:
            return

        lines = [
            f"FPS: {self.smoothed_fps:.1f} (min {self._fmt_min()} / max {self.max_fps:.1f})",
            f"Frame: {self.frame_time:.2f}ms  Update: {self.update_time:.2f}ms  "
            f"Render: {self.render_time:.2f}ms",
        ]

        if scene is not None:
            state = scene.state
            lines.append(
                f"Enemies: {len(state.enemies)}  Projectiles: {len(state.projectiles)}"
            )
            lines.append(f"Spawn timer: {state.spawn_timer:.2f}s  Mode: {state.mode.value}")
            if state.player is not None:
                p = state.player
                lines.append(f"Player: ({p.pos.x:.0f}, {p.pos.y:.0f})  "
                             f"vel ({p.velocity.x:.2f}, {p.velocity.y:.2f})")

            spawned = scene.spawn_manager.get_spawn_stats()
            lines.append(
                f"Spawned: enemies {spawned['enemy']}  projectiles {spawned['projectile']}"
            )
            stats = get_session_stats()
            lines.append(
                f"Checks: {scene.simulation.collision_manager.last_check_count}  "
                f"Accuracy: {stats.accuracy:.0%}"
            )
            if state.is_playing:
                self._draw_outlines(draw_manager, state)

        lines.append(f"Queued draws: {draw_manager.queued_count()}")

        x, y = 10, 60
        for line in lines:
            draw_manager.draw_text(line, x, y, self.FONT_SIZE, self.TEXT_COLOR, Layers.DEBUG)
            y += self.LINE_HEIGHT

    def _draw_outlines(self, draw_manager, state):
        entities = [state.player, *state.enemies, *state.projectiles]
        for entity in entities:
            rect = entity.rect
            draw_manager.draw_outline(
                rect.x, rect.y, rect.width, rect.height,
                Debug.OUTLINE_COLOR, Layers.DEBUG, Debug.OUTLINE_WIDTH
            )

    def _fmt_min(self) -> str:
        return "-" if self.min_fps == float('inf') else f"{self.min_fps:.1f}"

"""
game_scene.py
-------------
Playing / GameOver state machine around the simulation step.

Frame protocol (driven by MainLoop):
    scene.update(dt, width, height)   # restart check or one simulation step
    scene.draw(draw_manager)          # entities + HUD, or the Game Over prompt
    scene.end_frame()                 # sweep destroyed entities, commit Game Over
"""

from rect_dodge.core.debug.debug_logger import DebugLogger
from rect_dodge.core.runtime.game_config import GameConfig
from rect_dodge.core.runtime.game_settings import Display, Layers
from rect_dodge.core.runtime.game_state import GameMode, GameState
from rect_dodge.core.runtime.session_stats import get_session_stats
from rect_dodge.systems.simulation_step import SimulationStep
from rect_dodge.systems.spawn_manager import SpawnManager
from rect_dodge.ui.hud_manager import HUDManager


class GameScene:
    """Owns the GameState and moves it between PLAYING and GAME_OVER."""

    def __init__(self, input_manager, config: GameConfig = None,
                 spawn_manager: SpawnManager = None, hud: HUDManager = None,
                 screen_size=(Display.WIDTH, Display.HEIGHT)):
        """
        Args:
            input_manager: Action source (action_held / action_pressed)
            config: Gameplay configuration (defaults if None)
            spawn_manager: Entity factory (built from config if None)
            hud: HUD renderer (loaded from hud.yaml if None)
            screen_size: Drawable size used to place the first player
        """
        DebugLogger.section("Initializing Scene: GameScene")

        self.input_manager = input_manager
        self.config = config or (spawn_manager.config if spawn_manager else GameConfig())
        self.spawn_manager = spawn_manager or SpawnManager(self.config)
        self.hud = hud or HUDManager()

        self.simulation = SimulationStep(self.spawn_manager)
        self.state = GameState(self.spawn_manager, self.config)

        self.screen_width, self.screen_height = screen_size
        self._start_game()

        DebugLogger.init_sub(f"Restart trigger: {self.config.restart_trigger}")
        DebugLogger.init_sub(f"Player collision: {self.config.player_collision}")

    # ===========================================================
    # State Transitions
    # ===========================================================

    def _start_game(self):
        self.state.reset(self.screen_width, self.screen_height)
        stats = get_session_stats()
        stats.reset()
        stats.add_game()
        DebugLogger.state("Mode -> PLAYING", category="game_state")

    def _enter_game_over(self):
        self.state.mode = GameMode.GAME_OVER
        self.state.game_over_pending = False
        stats = get_session_stats()
        DebugLogger.state(
            f"Mode -> GAME_OVER (score={self.state.score}, best={stats.high_score})",
            category="game_state"
        )

    def _restart_requested(self) -> bool:
        if self.config.restart_trigger == "held":
            return self.input_manager.action_held("restart")
        return self.input_manager.action_pressed("restart")

    # ===========================================================
    # Frame Protocol
    # ===========================================================

    def update(self, dt: float, screen_width: float, screen_height: float):
        """
        Advance one frame.

        Args:
            dt: Frame delta-time in seconds
            screen_width: Current drawable width
            screen_height: Current drawable height
        """
        self.screen_width = screen_width
        self.screen_height = screen_height

        if self.state.is_game_over:
            if self._restart_requested():
                DebugLogger.action("Restart requested", category="game_state")
                self._start_game()
            return

        self.simulation.advance(
            self.state, dt, self.input_manager, screen_width, screen_height
        )

    def draw(self, draw_manager):
        """Queue this frame's draw calls."""
        if self.state.is_game_over:
            self.hud.draw_game_over(draw_manager, self.screen_width, self.screen_height)
            return

        for enemy in self.state.enemies:
            enemy.draw(draw_manager, Layers.ENEMIES)
        for projectile in self.state.projectiles:
            projectile.draw(draw_manager, Layers.PROJECTILES)
        self.state.player.draw(draw_manager, Layers.PLAYER)

        self.hud.draw_score(draw_manager, self.state.score, get_session_stats().high_score)

    def end_frame(self):
        """Remove destroyed entities, then commit a pending Game Over."""
        if not self.state.is_playing:
            return

        self.simulation.cleanup(self.state)

        if self.state.game_over_pending:
            self._enter_game_over()

    # ===========================================================
    # Queries
    # ===========================================================

    @property
    def mode(self) -> GameMode:
        return self.state.mode

    @property
    def player(self):
        return self.state.player

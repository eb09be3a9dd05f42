"""
game_state.py
-------------
Owned per-run simulation state: score, entity collections, spawn timer and
the Playing/GameOver mode.

GameState holds data only. Mode transitions are driven by GameScene and the
per-frame work by SimulationStep.
"""

from enum import Enum

from rect_dodge.core.debug.debug_logger import DebugLogger
from rect_dodge.core.runtime.game_config import GameConfig


class GameMode(Enum):
    """Top-level game modes."""
    PLAYING = "playing"
    GAME_OVER = "game_over"


class GameState:
    """All state that persists across frames and is rebuilt on restart."""

    def __init__(self, spawn_manager, config: GameConfig = None):
        """
        Args:
            spawn_manager: SpawnManager used to (re)create the player
            config: Gameplay configuration (spawn interval)
        """
        self.spawn_manager = spawn_manager
        self.config = config or spawn_manager.config

        self.score = 0
        self.player = None
        self.enemies = []
        self.projectiles = []
        self.spawn_timer = self.config.spawn_interval
        self.mode = GameMode.PLAYING

        # Raised by the simulation step, committed to GAME_OVER at frame end
        self.game_over_pending = False

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def reset(self, screen_width: float, screen_height: float):
        """Restore initial values and place a fresh player."""
        self.score = 0
        self.enemies.clear()
        self.projectiles.clear()
        self.spawn_timer = self.config.spawn_interval
        self.player = self.spawn_manager.spawn_player(screen_width, screen_height)
        self.mode = GameMode.PLAYING
        self.game_over_pending = False

        DebugLogger.state("Game state reset", category="game_state")

    # ===========================================================
    # Queries
    # ===========================================================

    @property
    def is_playing(self) -> bool:
        return self.mode is GameMode.PLAYING

    @property
    def is_game_over(self) -> bool:
        return self.mode is GameMode.GAME_OVER

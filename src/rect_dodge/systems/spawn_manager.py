"""
spawn_manager.py
----------------
Builds the three entity roles from their configured profiles.

Responsibilities
----------------
- Place the player at its canonical start position.
- Drop enemies at a random horizontal position on the top edge.
- Launch projectiles from the player's current position.
- Keep lifetime spawn counts for the debug overlay.
"""

import random

from rect_dodge.core.debug.debug_logger import DebugLogger
from rect_dodge.core.runtime.game_config import GameConfig
from rect_dodge.entities.moving_entity import MovingEntity


ENEMY_DIRECTION = (0.0, 1.0)
PROJECTILE_DIRECTION = (0.0, -1.0)


class SpawnManager:
    """Factory for player, enemy and projectile entities."""

    # ===========================================================
    # Initialization
    # ===========================================================
    def __init__(self, config: GameConfig = None, rng: random.Random = None):
        """
        Args:
            config: Gameplay configuration (defaults if None)
            rng: Random source for enemy placement (fresh random.Random if None)
        """
        self.config = config or GameConfig()
        self.rng = rng or random.Random()

        self._spawn_stats = {
            "player": 0,
            "enemy": 0,
            "projectile": 0,
        }

        DebugLogger.init_entry("SpawnManager Initialized")

    # ===========================================================
    # Entity Spawning
    # ===========================================================
    def spawn_player(self, screen_width: float, screen_height: float) -> MovingEntity:
        """Player centered horizontally, a fixed offset above the bottom edge."""
        profile = self.config.player
        x = screen_width / 2 - profile.size / 2
        y = screen_height - self.config.player_bottom_offset

        player = MovingEntity(
            x, y,
            velocity=(0.0, 0.0),
            speed=profile.speed,
            size=profile.size,
            color=profile.color,
        )
        self._record("player", player)
        return player

    def spawn_enemy(self, screen_width: float) -> MovingEntity:
        """Enemy at a uniform random x on the top edge, heading down."""
        profile = self.config.enemy
        x = self.rng.uniform(0.0, screen_width)

        enemy = MovingEntity(
            x, 0.0,
            velocity=ENEMY_DIRECTION,
            speed=profile.speed,
            size=profile.size,
            color=profile.color,
        )
        self._record("enemy", enemy)
        return enemy

    def spawn_projectile(self, player: MovingEntity) -> MovingEntity:
        """
        Projectile heading up from the player.

        The anchor is player.pos plus size / 3 on both axes, which puts it
        diagonally inside the player's footprint rather than centered.
        """
        profile = self.config.projectile
        offset = player.size / 3
        projectile = MovingEntity(
            player.pos.x + offset,
            player.pos.y + offset,
            velocity=PROJECTILE_DIRECTION,
            speed=profile.speed,
            size=profile.size,
            color=profile.color,
        )
        self._record("projectile", projectile)
        return projectile

    def _record(self, role: str, entity: MovingEntity):
        self._spawn_stats[role] += 1
        DebugLogger.trace(
            f"Spawned {role} at ({entity.pos.x:.0f}, {entity.pos.y:.0f})",
            category="entity_spawn"
        )

    # ===========================================================
    # Statistics
    # ===========================================================
    def get_spawn_stats(self) -> dict:
        """Lifetime spawn counts per role."""
        return dict(self._spawn_stats)

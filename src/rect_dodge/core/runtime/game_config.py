"""
game_config.py
--------------
Typed gameplay configuration built from game_settings defaults and the
optional config/game.json overrides.
"""

from dataclasses import dataclass, field

from rect_dodge.core.debug.debug_logger import DebugLogger
from rect_dodge.core.runtime.game_settings import (
    PlayerDefaults,
    EnemyDefaults,
    ProjectileDefaults,
    Spawning,
    Rules,
)
from rect_dodge.core.services.config_manager import load_config


PLAYER_COLLISION_MODES = ("ignore", "game_over")
RESTART_TRIGGERS = ("pressed", "held")


@dataclass
class EntityProfile:
    """Per-role spawn parameters."""
    speed: float
    size: float
    color: tuple

    def __post_init__(self):
        if self.size <= 0:
            raise ValueError(f"Entity size must be positive, got {self.size}")
        self.color = tuple(self.color)


@dataclass
class GameConfig:
    player: EntityProfile = field(default_factory=lambda: EntityProfile(
        PlayerDefaults.SPEED, PlayerDefaults.SIZE, PlayerDefaults.COLOR))
    enemy: EntityProfile = field(default_factory=lambda: EntityProfile(
        EnemyDefaults.SPEED, EnemyDefaults.SIZE, EnemyDefaults.COLOR))
    projectile: EntityProfile = field(default_factory=lambda: EntityProfile(
        ProjectileDefaults.SPEED, ProjectileDefaults.SIZE, ProjectileDefaults.COLOR))

    player_bottom_offset: float = PlayerDefaults.BOTTOM_OFFSET
    spawn_interval: float = Spawning.ENEMY_INTERVAL

    player_collision: str = Rules.PLAYER_COLLISION
    restart_trigger: str = Rules.RESTART_TRIGGER
    cull_offscreen_projectiles: bool = Rules.CULL_OFFSCREEN_PROJECTILES

    def __post_init__(self):
        if self.spawn_interval <= 0:
            raise ValueError(f"spawn_interval must be positive, got {self.spawn_interval}")

        if self.player_collision not in PLAYER_COLLISION_MODES:
            DebugLogger.warn(
                f"Unknown player_collision '{self.player_collision}', "
                f"using '{Rules.PLAYER_COLLISION}'",
                category="loading"
            )
            self.player_collision = Rules.PLAYER_COLLISION

        if self.restart_trigger not in RESTART_TRIGGERS:
            DebugLogger.warn(
                f"Unknown restart_trigger '{self.restart_trigger}', "
                f"using '{Rules.RESTART_TRIGGER}'",
                category="loading"
            )
            self.restart_trigger = Rules.RESTART_TRIGGER

    # ===========================================================
    # Construction
    # ===========================================================

    @classmethod
    def from_dict(cls, data: dict) -> "GameConfig":
        """
        Build a config from a game.json-shaped dict.

        Missing keys keep their defaults.
        """
        defaults = cls()
        entities = data.get("entities") or {}
        rules = data.get("rules") or {}
        spawning = data.get("spawning") or {}

        return cls(
            player=_profile(entities.get("player"), defaults.player),
            enemy=_profile(entities.get("enemy"), defaults.enemy),
            projectile=_profile(entities.get("projectile"), defaults.projectile),
            player_bottom_offset=float(
                (entities.get("player") or {}).get("bottom_offset", defaults.player_bottom_offset)
            ),
            spawn_interval=float(spawning.get("enemy_interval", defaults.spawn_interval)),
            player_collision=rules.get("player_collision", defaults.player_collision),
            restart_trigger=rules.get("restart_trigger", defaults.restart_trigger),
            cull_offscreen_projectiles=bool(
                rules.get("cull_offscreen_projectiles", defaults.cull_offscreen_projectiles)
            ),
        )

    @classmethod
    def load(cls, filename: str = "game.json") -> "GameConfig":
        """Load game.json from the config directory, falling back to defaults."""
        return cls.from_dict(load_config(filename))


def _profile(data, fallback: EntityProfile) -> EntityProfile:
    if not data:
        return EntityProfile(fallback.speed, fallback.size, fallback.color)
    return EntityProfile(
        speed=float(data.get("speed", fallback.speed)),
        size=float(data.get("size", fallback.size)),
        color=data.get("color", fallback.color),
    )

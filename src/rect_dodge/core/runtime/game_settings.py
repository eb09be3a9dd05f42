"""
game_settings.py
----------------
Centralized constants for all game systems.

Gameplay values here are the defaults; config/game.json may override them
through GameConfig.
"""


# ===========================================================
# Display & Performance
# ===========================================================

class Display:
    """Window configuration."""
    WIDTH: int = 800
    HEIGHT: int = 600
    FPS: int = 60
    CAPTION: str = "Rect Dodge"
    RESIZABLE: bool = True


# ===========================================================
# Rendering Layers
# ===========================================================

class Layers:
    """Z-order for rendering."""
    ENEMIES: int = 300
    PROJECTILES: int = 350
    PLAYER: int = 400
    UI: int = 600
    OVERLAY: int = 700
    DEBUG: int = 900


# ===========================================================
# Colors
# ===========================================================

class Colors:
    RED = (230, 41, 55)
    GREEN = (0, 228, 48)
    BLUE = (0, 121, 241)
    YELLOW = (253, 249, 0)
    WHITE = (255, 255, 255)


# ===========================================================
# Entity Defaults
# ===========================================================

class PlayerDefaults:
    SPEED: float = 250.0
    SIZE: float = 60.0
    COLOR = Colors.GREEN
    BOTTOM_OFFSET: float = 100.0


class EnemyDefaults:
    SPEED: float = 200.0
    SIZE: float = 30.0
    COLOR = Colors.GREEN


class ProjectileDefaults:
    SPEED: float = 400.0
    SIZE: float = 25.0
    COLOR = Colors.YELLOW


# ===========================================================
# Spawning & Rules
# ===========================================================

class Spawning:
    ENEMY_INTERVAL: float = 1.0


class Rules:
    """Gameplay rule switches, overridable from game.json."""
    PLAYER_COLLISION: str = "ignore"         # "ignore" | "game_over"
    RESTART_TRIGGER: str = "pressed"         # "pressed" | "held"
    CULL_OFFSCREEN_PROJECTILES: bool = False


# ===========================================================
# Debug Display
# ===========================================================

class Debug:
    """Visual debug toggles -- not related to logging."""
    HUD_VISIBLE: bool = False
    FRAME_TIME_WARNING: float = 16.67
    OUTLINE_COLOR = (255, 255, 0)
    OUTLINE_WIDTH: int = 1

"""
Runtime configuration exports.

Provides game-wide constants, the typed gameplay config and session stats.
"""

from rect_dodge.core.runtime.game_settings import (
    Display,
    Layers,
    Colors,
    Rules,
    Debug,
)
from rect_dodge.core.runtime.game_config import GameConfig
from rect_dodge.core.runtime.session_stats import get_session_stats

__all__ = [
    # Display & Rendering
    'Display',
    'Layers',
    'Colors',
    # Configuration
    'Rules',
    'GameConfig',
    # Debug
    'Debug',
    # Session
    'get_session_stats',
]

"""
Scene module exports.
"""

from rect_dodge.scenes.game_scene import GameScene

__all__ = ['GameScene']

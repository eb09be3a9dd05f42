"""
Entity module exports.

There is one entity shape. Player, enemy and projectile differ only in how
SpawnManager builds them.
"""

from rect_dodge.entities.moving_entity import MovingEntity

__all__ = ['MovingEntity']

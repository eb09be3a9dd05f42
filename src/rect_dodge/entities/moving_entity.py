"""
moving_entity.py
----------------
The single entity shape shared by the player, enemies and projectiles.

Coordinate System
-----------------
- self.pos is the top-left corner of the square footprint
- Origin is the top-left of the screen, y grows downward
- Collision uses the distance between positions, with size as the radius

Roles are decided only by which SpawnManager method built the entity and
which GameState collection holds it. There is no type tag on the entity.
"""

import pygame


class MovingEntity:
    """A colored square that moves along its velocity at a fixed speed."""

    __slots__ = ('pos', 'velocity', 'speed', 'size', 'color', 'pending_destroy')

    def __init__(self, x: float, y: float, velocity=(0.0, 0.0),
                 speed: float = 0.0, size: float = 1.0, color=(255, 255, 255)):
        """
        Args:
            x: Top-left X position
            y: Top-left Y position
            velocity: Direction vector (scaled by speed during integration)
            speed: Units per second
            size: Edge length of the square footprint
            color: RGB tuple, display only
        """
        self.pos = pygame.Vector2(x, y)
        self.velocity = pygame.Vector2(velocity)
        self.speed = speed
        self.size = size
        self.color = color
        self.pending_destroy = False

    # ===================================================================
    # Core Update
    # ===================================================================

    def integrate(self, dt: float):
        """Advance position by velocity * speed * dt. No bounds clamping."""
        self.pos += self.velocity * self.speed * dt

    # ===================================================================
    # Lifecycle
    # ===================================================================

    def mark_destroyed(self):
        """Flag for removal at the end of the frame."""
        self.pending_destroy = True

    # ===================================================================
    # Geometry
    # ===================================================================

    def distance_to(self, other: "MovingEntity") -> float:
        return self.pos.distance_to(other.pos)

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(int(self.pos.x), int(self.pos.y), int(self.size), int(self.size))

    # ===================================================================
    # Rendering
    # ===================================================================

    def draw(self, draw_manager, layer: int = 0):
        """Queue the footprint as a filled rectangle."""
        draw_manager.draw_rect(self.pos.x, self.pos.y, self.size, self.size, self.color, layer)

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} "
            f"pos=({self.pos.x:.1f}, {self.pos.y:.1f}) "
            f"vel=({self.velocity.x:.2f}, {self.velocity.y:.2f}) "
            f"size={self.size:g}"
            f"{' destroyed' if self.pending_destroy else ''}>"
        )

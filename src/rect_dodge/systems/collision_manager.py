"""
collision_manager.py
--------------------
Pairwise distance checks between enemies, projectiles and the player.

Detects collisions and marks entities; scoring and the player response
are reported back to the caller.
"""

from rect_dodge.core.debug.debug_logger import DebugLogger


class CollisionResult:
    """Outcome of one detection pass."""

    __slots__ = ('hits', 'player_hits')

    def __init__(self):
        self.hits = 0          # projectile-enemy pairs that scored
        self.player_hits = 0   # enemies touching the player

    @property
    def player_touched(self) -> bool:
        return self.player_hits > 0


class CollisionManager:
    """
    Brute-force collision over the live collections.

    Enemy-major outer loop, projectile inner loop. A projectile that already
    hit an enemy this frame is still tested against later enemies, so one
    projectile can score more than once in a single frame.
    """

    def __init__(self):
        self._checks = 0
        DebugLogger.init_entry("CollisionManager Initialized")

    def detect(self, enemies, projectiles, player=None) -> CollisionResult:
        """
        Mark colliding projectile/enemy pairs and test enemies against the player.

        Args:
            enemies: Enemy collection
            projectiles: Projectile collection
            player: Player entity, or None to skip the player test

        Returns:
            CollisionResult with the number of scoring pairs and player contacts
        """
        result = CollisionResult()
        checks = 0

        for enemy in enemies:
            radius = enemy.size

            for projectile in projectiles:
                checks += 1
                if enemy.distance_to(projectile) < radius:
                    enemy.mark_destroyed()
                    projectile.mark_destroyed()
                    result.hits += 1

            if player is not None and player.distance_to(enemy) < player.size:
                result.player_hits += 1

        self._checks = checks

        if result.hits:
            DebugLogger.trace(f"{result.hits} projectile hit(s) in {checks} checks")
        if result.player_touched:
            DebugLogger.trace(f"Player touched by {result.player_hits} enemy(ies)")

        return result

    @property
    def last_check_count(self) -> int:
        """Projectile-enemy pairs tested in the most recent pass."""
        return self._checks

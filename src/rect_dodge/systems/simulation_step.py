"""
simulation_step.py
------------------
One frame of Playing-mode simulation.

Phase order (matters for correctness):
1. Spawn check      - countdown, one enemy when it expires
2. Input            - player velocity from held keys, fire on rising edge
3. Movement         - player, projectiles, enemies
4. Collision        - projectile/enemy pairs score, player contact per rules
5. Boundary loss    - enemies past the bottom edge end the game

Cleanup is a separate call made after the frame has been drawn, so entities
destroyed this frame are still rendered once.
"""

import pygame

from rect_dodge.core.debug.debug_logger import DebugLogger
from rect_dodge.core.runtime.session_stats import get_session_stats
from rect_dodge.systems.collision_manager import CollisionManager


class SimulationStep:
    """Advances a GameState by one frame."""

    def __init__(self, spawn_manager, collision_manager: CollisionManager = None):
        """
        Args:
            spawn_manager: SpawnManager used for enemies and projectiles
            collision_manager: Collision detector (created if None)
        """
        self.spawn_manager = spawn_manager
        self.config = spawn_manager.config
        self.collision_manager = collision_manager or CollisionManager()

    # ===========================================================
    # Frame Update
    # ===========================================================

    def advance(self, state, dt: float, input_manager,
                screen_width: float, screen_height: float) -> bool:
        """
        Run phases 1-5 on the given state.

        Args:
            state: GameState in PLAYING mode
            dt: Frame delta-time in seconds
            input_manager: Object answering action_held / action_pressed
            screen_width: Current drawable width
            screen_height: Current drawable height

        Returns:
            bool: True if this frame raised the game-over condition
        """
        stats = get_session_stats()
        stats.add_time(dt)

        self._update_spawn_timer(state, dt, screen_width)
        self._apply_input(state, input_manager)
        self._move_entities(state, dt)
        self._resolve_collisions(state)
        self._check_boundaries(state, screen_height)

        return state.game_over_pending

    # ===========================================================
    # Phases
    # ===========================================================

    def _update_spawn_timer(self, state, dt: float, screen_width: float):
        """Count down; on expiry spawn one enemy and restart the full interval."""
        state.spawn_timer -= dt
        if state.spawn_timer <= 0:
            state.enemies.append(self.spawn_manager.spawn_enemy(screen_width))
            # Overshoot is discarded, not carried into the next interval
            state.spawn_timer = self.config.spawn_interval

    def _apply_input(self, state, input_manager):
        state.player.velocity = self.resolve_move_vector(input_manager)

        if input_manager.action_pressed("fire"):
            state.projectiles.append(self.spawn_manager.spawn_projectile(state.player))
            get_session_stats().add_shot()

    @staticmethod
    def resolve_move_vector(input_manager) -> pygame.Vector2:
        """
        Unit direction from the held movement actions, or the zero vector.

        Right wins over left and up wins over down when both are held.
        """
        move = pygame.Vector2(0, 0)

        if input_manager.action_held("move_right"):
            move.x = 1.0
        elif input_manager.action_held("move_left"):
            move.x = -1.0

        if input_manager.action_held("move_up"):
            move.y = -1.0
        elif input_manager.action_held("move_down"):
            move.y = 1.0

        if move.length_squared() > 0:
            move.normalize_ip()
        return move

    def _move_entities(self, state, dt: float):
        state.player.integrate(dt)
        for projectile in state.projectiles:
            projectile.integrate(dt)
        for enemy in state.enemies:
            enemy.integrate(dt)

        if self.config.cull_offscreen_projectiles:
            for projectile in state.projectiles:
                if projectile.pos.y + projectile.size < 0:
                    projectile.mark_destroyed()

    def _resolve_collisions(self, state):
        projectiles = state.projectiles
        if self.config.cull_offscreen_projectiles:
            # Culled this frame; off-screen shots never score
            projectiles = [p for p in projectiles if not p.pending_destroy]

        result = self.collision_manager.detect(state.enemies, projectiles, state.player)

        if result.hits:
            state.score += result.hits
            stats = get_session_stats()
            stats.add_score(result.hits)
            stats.add_kill(result.hits)

        if result.player_touched and self.config.player_collision == "game_over":
            if not state.game_over_pending:
                DebugLogger.state("Player hit by enemy", category="game_state")
            state.game_over_pending = True

    def _check_boundaries(self, state, screen_height: float):
        """Enemies below the bottom edge are destroyed and end the game."""
        for enemy in state.enemies:
            if enemy.pos.y > screen_height:
                enemy.mark_destroyed()
                get_session_stats().add_escape()
                if not state.game_over_pending:
                    DebugLogger.state(
                        f"Enemy crossed bottom edge at x={enemy.pos.x:.0f}",
                        category="game_state"
                    )
                state.game_over_pending = True

    # ===========================================================
    # Cleanup
    # ===========================================================

    def cleanup(self, state) -> int:
        """
        Drop destroyed enemies and projectiles, keeping survivor order.

        Returns:
            int: Number of entities removed
        """
        before = len(state.enemies) + len(state.projectiles)

        state.enemies[:] = [e for e in state.enemies if not e.pending_destroy]
        state.projectiles[:] = [p for p in state.projectiles if not p.pending_destroy]

        removed = before - len(state.enemies) - len(state.projectiles)
        if removed > 0:
            DebugLogger.state(f"Cleaned up {removed} entities", category="entity_cleanup")
        return removed

"""
test_collision_manager.py
-------------------------
Regression tests for projectile/enemy and player/enemy detection.
"""

from rect_dodge.entities.moving_entity import MovingEntity
from rect_dodge.systems.collision_manager import CollisionManager


def enemy_at(x, y):
    return MovingEntity(x, y, velocity=(0, 1), speed=200, size=30)


def projectile_at(x, y):
    return MovingEntity(x, y, velocity=(0, -1), speed=400, size=25)


class TestProjectileHits:

    def test_hit_inside_enemy_radius(self):
        enemy = enemy_at(100, 100)
        projectile = projectile_at(110, 105)

        result = CollisionManager().detect([enemy], [projectile])

        assert result.hits == 1
        assert enemy.pending_destroy
        assert projectile.pending_destroy

    def test_miss_outside_radius(self):
        enemy = enemy_at(100, 100)
        projectile = projectile_at(200, 200)

        result = CollisionManager().detect([enemy], [projectile])

        assert result.hits == 0
        assert not enemy.pending_destroy
        assert not projectile.pending_destroy

    def test_distance_equal_to_size_is_not_a_hit(self):
        enemy = enemy_at(0, 0)
        projectile = projectile_at(30, 0)
        assert CollisionManager().detect([enemy], [projectile]).hits == 0

    def test_radius_is_enemy_size_not_projectile_size(self):
        enemy = enemy_at(0, 0)
        projectile = projectile_at(27, 0)  # > projectile size 25, < enemy size 30
        assert CollisionManager().detect([enemy], [projectile]).hits == 1

    def test_one_projectile_scores_against_several_enemies(self):
        """No early exit once a projectile has matched."""
        enemies = [enemy_at(100, 100), enemy_at(110, 100)]
        projectile = projectile_at(105, 100)

        result = CollisionManager().detect(enemies, [projectile])

        assert result.hits == 2
        assert all(e.pending_destroy for e in enemies)

    def test_one_enemy_hit_by_two_projectiles_scores_twice(self):
        enemy = enemy_at(100, 100)
        projectiles = [projectile_at(100, 105), projectile_at(105, 100)]

        result = CollisionManager().detect([enemy], projectiles)

        assert result.hits == 2

    def test_empty_collections(self):
        manager = CollisionManager()
        result = manager.detect([], [])
        assert result.hits == 0
        assert manager.last_check_count == 0

    def test_check_count_is_pairwise(self):
        manager = CollisionManager()
        manager.detect([enemy_at(0, 0), enemy_at(500, 0)],
                       [projectile_at(900, 900)] * 3)
        assert manager.last_check_count == 6


class TestPlayerContact:

    def test_player_contact_reported_without_marking(self):
        player = MovingEntity(100, 100, size=60)
        enemy = enemy_at(130, 130)

        result = CollisionManager().detect([enemy], [], player)

        assert result.player_touched
        assert result.player_hits == 1
        assert not player.pending_destroy
        assert not enemy.pending_destroy

    def test_no_contact_outside_player_size(self):
        player = MovingEntity(100, 100, size=60)
        enemy = enemy_at(100, 200)
        assert not CollisionManager().detect([enemy], [], player).player_touched

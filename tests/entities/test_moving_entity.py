"""
test_moving_entity.py
---------------------
Regression tests for the shared MovingEntity shape.

Covers:
- Position integration
- Destroy flag lifecycle
- Distance and footprint helpers
- Draw submission
"""

import pytest
import pygame

from rect_dodge.entities.moving_entity import MovingEntity


# ===========================================================
# Integration
# ===========================================================

class TestIntegrate:

    @pytest.mark.parametrize("velocity, speed, dt", [
        ((0.0, 1.0), 200.0, 1 / 60),
        ((0.0, -1.0), 400.0, 0.033),
        ((0.6, 0.8), 250.0, 0.5),
        ((0.0, 0.0), 250.0, 1.0),
    ])
    def test_position_advances_by_velocity_speed_dt(self, velocity, speed, dt):
        entity = MovingEntity(10.0, 20.0, velocity=velocity, speed=speed, size=30)
        before = pygame.Vector2(entity.pos)

        entity.integrate(dt)

        expected = before + pygame.Vector2(velocity) * speed * dt
        assert entity.pos.x == pytest.approx(expected.x)
        assert entity.pos.y == pytest.approx(expected.y)

    def test_no_clamping_off_screen(self):
        """Entities may travel arbitrarily far; bounds are the owner's concern."""
        entity = MovingEntity(0.0, 0.0, velocity=(0, -1), speed=400, size=25)
        entity.integrate(10.0)
        assert entity.pos.y == pytest.approx(-4000.0)

    def test_zero_dt_is_noop(self):
        entity = MovingEntity(5.0, 5.0, velocity=(1, 0), speed=100, size=10)
        entity.integrate(0.0)
        assert entity.pos == pygame.Vector2(5.0, 5.0)

    def test_velocity_is_copied(self):
        direction = pygame.Vector2(0, 1)
        entity = MovingEntity(0, 0, velocity=direction, speed=1, size=1)
        direction.y = 5
        assert entity.velocity == pygame.Vector2(0, 1)


# ===========================================================
# Lifecycle
# ===========================================================

class TestLifecycle:

    def test_new_entity_not_destroyed(self):
        entity = MovingEntity(0, 0, size=10)
        assert entity.pending_destroy is False

    def test_mark_destroyed_is_idempotent(self):
        entity = MovingEntity(0, 0, size=10)
        entity.mark_destroyed()
        entity.mark_destroyed()
        assert entity.pending_destroy is True


# ===========================================================
# Geometry & Rendering
# ===========================================================

def test_distance_to_uses_positions():
    a = MovingEntity(100, 100, size=30)
    b = MovingEntity(110, 105, size=25)
    assert a.distance_to(b) == pytest.approx(11.1803, rel=1e-4)


def test_rect_matches_footprint():
    entity = MovingEntity(12.7, 40.2, size=60)
    rect = entity.rect
    assert (rect.x, rect.y, rect.width, rect.height) == (12, 40, 60, 60)


def test_draw_submits_square(mock_draw_manager):
    entity = MovingEntity(3.0, 4.0, size=25, color=(253, 249, 0))
    entity.draw(mock_draw_manager, layer=7)
    mock_draw_manager.draw_rect.assert_called_once_with(3.0, 4.0, 25, 25, (253, 249, 0), 7)


def test_repr_flags_destroyed():
    entity = MovingEntity(1, 2, size=3)
    entity.mark_destroyed()
    assert "destroyed" in repr(entity)

"""
conftest.py
-----------
Shared pytest configuration and fixtures for rect-dodge tests.

Contains:
- Headless SDL setup so pygame imports without a display
- Mock DrawManager / InputManager fixtures
- Session stats and logger isolation between tests
"""

import os
import sys
import random
from unittest.mock import MagicMock

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

# Allow running the suite from a checkout without installing
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from rect_dodge.core.debug.debug_logger import LoggerConfig  # noqa: E402
from rect_dodge.core.runtime.game_config import GameConfig  # noqa: E402
from rect_dodge.core.runtime.session_stats import reset_session_stats  # noqa: E402
from rect_dodge.systems.spawn_manager import SpawnManager  # noqa: E402


SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600


# ===========================================================
# Isolation
# ===========================================================

@pytest.fixture(autouse=True)
def quiet_logger():
    """Silence console logging for every test."""
    previous = LoggerConfig.ENABLE_LOGGING
    LoggerConfig.ENABLE_LOGGING = False
    yield
    LoggerConfig.ENABLE_LOGGING = previous


@pytest.fixture(autouse=True)
def fresh_session_stats():
    """Each test starts with a new SessionStats singleton."""
    reset_session_stats()
    yield
    reset_session_stats()


# ===========================================================
# Common Mock Fixtures
# ===========================================================

@pytest.fixture
def mock_draw_manager():
    """Mock for DrawManager with the draw submission API."""
    draw_manager = MagicMock()
    draw_manager.draw_rect = MagicMock()
    draw_manager.draw_text = MagicMock()
    draw_manager.draw_outline = MagicMock()
    draw_manager.measure_text.return_value = (400, 40)
    return draw_manager


@pytest.fixture
def mock_input_manager():
    """Mock for InputManager with nothing held or pressed."""
    return make_input()


@pytest.fixture
def input_factory():
    """Factory for InputManager mocks with chosen held/pressed actions."""
    return make_input


def make_input(held=(), pressed=()):
    """
    Build an InputManager stand-in.

    Args:
        held: Action names reported by action_held
        pressed: Action names reported by action_pressed
    """
    held = set(held)
    pressed = set(pressed)

    input_manager = MagicMock()
    input_manager.action_held.side_effect = lambda action: action in held
    input_manager.action_pressed.side_effect = lambda action: action in pressed
    return input_manager


# ===========================================================
# Game Fixtures
# ===========================================================

@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def spawn_manager(config):
    """SpawnManager with a seeded random source."""
    return SpawnManager(config, rng=random.Random(1234))


# ===========================================================
# Pytest Configuration
# ===========================================================

def pytest_configure(config):
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "regression: marks tests as regression tests")


def pytest_collection_modifyitems(config, items):
    """Tag everything not explicitly marked integration as a unit test."""
    for item in items:
        if item.get_closest_marker("integration") is None:
            item.add_marker(pytest.mark.unit)

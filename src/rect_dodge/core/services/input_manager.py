"""
input_manager.py
----------------
Keyboard polling with named actions and edge detection.

Provides:
- Held state for continuous actions (movement)
- Rising edges for one-shot actions (fire, restart)
- System hotkeys handled from the event queue (debug overlay, quit)
"""

import pygame

from rect_dodge.core.debug.debug_logger import DebugLogger


# ===========================================================
# Default Key Bindings
# ===========================================================

DEFAULT_KEY_BINDINGS = {
    "gameplay": {
        "move_left": [pygame.K_LEFT, pygame.K_a],
        "move_right": [pygame.K_RIGHT, pygame.K_d],
        "move_up": [pygame.K_UP, pygame.K_w],
        "move_down": [pygame.K_DOWN, pygame.K_s],
        "fire": [pygame.K_SPACE],
        "restart": [pygame.K_RETURN, pygame.K_KP_ENTER],
    },
    "system": {
        "toggle_debug": [pygame.K_F3],
        "quit": [pygame.K_ESCAPE],
    },
}


class InputManager:
    """
    Action-based keyboard input.

    Usage:
        input_manager.update()                      # once per frame
        if input_manager.action_pressed("fire"):    # rising edge
            ...
        if input_manager.action_held("move_left"):  # level
            ...
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, key_bindings=None):
        """
        Args:
            key_bindings: Custom bindings dict (DEFAULT_KEY_BINDINGS if None)
        """
        self.key_bindings = key_bindings or DEFAULT_KEY_BINDINGS

        self._action_keys = {
            action: tuple(keys)
            for action, keys in self.key_bindings["gameplay"].items()
        }
        self._actions = {
            action: {"pressed": False, "held": False, "prev_held": False}
            for action in self._action_keys
        }

        self._validate_bindings()
        DebugLogger.init_entry("InputManager")

    def _validate_bindings(self):
        """Warn if system keys overlap with gameplay keys."""
        system_keys = set()
        for keys in self.key_bindings.get("system", {}).values():
            system_keys.update(keys)

        gameplay_keys = set()
        for keys in self._action_keys.values():
            gameplay_keys.update(keys)

        overlap = system_keys & gameplay_keys
        if overlap:
            DebugLogger.warn(f"Overlapping system keys: {overlap}", category="input")

    # ===========================================================
    # Public API: Action Queries
    # ===========================================================

    def action_pressed(self, action: str) -> bool:
        """True only on the frame the action went down."""
        state = self._actions.get(action)
        return state["pressed"] if state else False

    def action_held(self, action: str) -> bool:
        """True every frame the action is down."""
        state = self._actions.get(action)
        return state["held"] if state else False

    # ===========================================================
    # Frame Update
    # ===========================================================

    def update(self, keys=None):
        """
        Poll the keyboard. Call once per frame.

        Args:
            keys: Key state sequence (pygame.key.get_pressed() if None)
        """
        if keys is None:
            keys = pygame.key.get_pressed()

        for action in self._actions:
            self._update_action_state(action, keys)

    def _update_action_state(self, action: str, keys):
        """
        Compare this frame to the previous one:
        - pressed: False -> True
        - held: current state
        """
        state = self._actions[action]
        current_held = self._is_action_down(action, keys)
        prev_held = state["prev_held"]

        state["pressed"] = current_held and not prev_held
        state["held"] = current_held
        state["prev_held"] = current_held

        if state["pressed"]:
            DebugLogger.trace(f"Action pressed: {action}", category="input")

    # ===========================================================
    # System Input (Global Hotkeys)
    # ===========================================================

    def match_system_key(self, event):
        """
        Map a KEYDOWN event to a system action name.

        Returns:
            str or None: "toggle_debug", "quit", or None
        """
        if event.type != pygame.KEYDOWN:
            return None

        for action, keys in self.key_bindings.get("system", {}).items():
            if event.key in keys:
                return action
        return None

    # ===========================================================
    # Internal Helpers
    # ===========================================================

    def _is_action_down(self, action: str, keys) -> bool:
        for key in self._action_keys.get(action, ()):
            if keys[key]:
                return True
        return False

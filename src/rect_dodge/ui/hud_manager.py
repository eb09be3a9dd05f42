"""
hud_manager.py
--------------
Score readout and Game Over prompt, laid out from config/hud.yaml.
"""

from rect_dodge.core.debug.debug_logger import DebugLogger
from rect_dodge.core.runtime.game_settings import Layers
from rect_dodge.core.services.config_manager import load_config


DEFAULT_HUD = {
    "background": [230, 41, 55],
    "score": {
        "format": "Score: {score}",
        "position": [10, 10],
        "font_size": 40,
        "color": [0, 121, 241],
        "show_high_score": False,
        "high_score_format": "Best: {high_score}",
        "high_score_gap": 8,
    },
    "game_over": {
        "text": "Game Over! Press [ENTER] to continue",
        "font_size": 40,
        "color": [255, 255, 255],
    },
}


def load_hud_config(filename: str = "hud.yaml") -> dict:
    """HUD layout from config/ (or an absolute path), deep-merged over DEFAULT_HUD."""
    return load_config(filename, DEFAULT_HUD)


class HUDManager:
    """Queues the HUD text for the current game mode."""

    def __init__(self, config: dict = None):
        """
        Args:
            config: Parsed HUD layout (loaded from hud.yaml if None)
        """
        self.config = config if config is not None else load_hud_config()
        self.score_cfg = self.config["score"]
        self.game_over_cfg = self.config["game_over"]

        DebugLogger.init_entry("HUDManager")

    @property
    def background(self) -> tuple:
        return tuple(self.config["background"])

    def draw_score(self, draw_manager, score: int, high_score: int = 0):
        """Score readout at the configured top-left position."""
        cfg = self.score_cfg
        x, y = cfg["position"]
        size = cfg["font_size"]

        text = cfg["format"].format(score=score)
        draw_manager.draw_text(text, x, y, size, cfg["color"], Layers.UI)

        if cfg.get("show_high_score"):
            width, _ = draw_manager.measure_text(text, size)
            best = cfg["high_score_format"].format(high_score=high_score)
            draw_manager.draw_text(
                best, x + width + cfg["high_score_gap"], y, size, cfg["color"], Layers.UI
            )

    def draw_game_over(self, draw_manager, screen_width: float, screen_height: float):
        """Prompt centered on the screen."""
        cfg = self.game_over_cfg
        text = cfg["text"]
        size = cfg["font_size"]

        width, height = draw_manager.measure_text(text, size)
        x = screen_width / 2 - width / 2
        y = screen_height / 2 - height / 2
        draw_manager.draw_text(text, x, y, size, cfg["color"], Layers.OVERLAY)

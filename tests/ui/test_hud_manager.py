"""
test_hud_manager.py
-------------------
Tests for hud.yaml loading and HUD draw submissions.
"""

import pytest

from rect_dodge.core.runtime.game_settings import Layers
from rect_dodge.ui.hud_manager import DEFAULT_HUD, HUDManager, load_hud_config


# ===========================================================
# Loading
# ===========================================================

class TestLoadHudConfig:

    def test_bundled_layout(self):
        config = load_hud_config()

        assert config["background"] == [230, 41, 55]
        assert config["score"]["position"] == [10, 10]
        assert config["game_over"]["text"] == "Game Over! Press [ENTER] to continue"

    def test_partial_file_merges_per_section(self, tmp_path):
        path = tmp_path / "hud.yaml"
        path.write_text("score:\n  font_size: 24\n", encoding="utf-8")

        config = load_hud_config(str(path))

        assert config["score"]["font_size"] == 24
        assert config["score"]["format"] == "Score: {score}"
        assert config["game_over"] == DEFAULT_HUD["game_over"]

    def test_empty_file_is_default(self, tmp_path):
        path = tmp_path / "hud.yaml"
        path.write_text("", encoding="utf-8")
        assert load_hud_config(str(path)) == DEFAULT_HUD

    def test_notes_ignored(self, tmp_path):
        path = tmp_path / "hud.yaml"
        path.write_text(
            "_notes: HUD layout\n"
            "game_over:\n"
            "  _notes: centered prompt\n"
            "  font_size: 32\n",
            encoding="utf-8",
        )

        config = load_hud_config(str(path))

        assert "_notes" not in config
        assert "_notes" not in config["game_over"]
        assert config["game_over"]["font_size"] == 32
        assert config["game_over"]["text"] == DEFAULT_HUD["game_over"]["text"]

    def test_missing_file_is_default(self, tmp_path):
        assert load_hud_config(str(tmp_path / "absent.yaml")) == DEFAULT_HUD

    def test_defaults_not_mutated(self, tmp_path):
        path = tmp_path / "hud.yaml"
        path.write_text("score:\n  font_size: 12\n", encoding="utf-8")
        load_hud_config(str(path))
        assert DEFAULT_HUD["score"]["font_size"] == 40


# ===========================================================
# Drawing
# ===========================================================

@pytest.fixture
def hud():
    return HUDManager(load_hud_config())


class TestHudDraw:

    def test_background_is_tuple(self, hud):
        assert hud.background == (230, 41, 55)

    def test_score_text(self, hud, mock_draw_manager):
        hud.draw_score(mock_draw_manager, 12)

        mock_draw_manager.draw_text.assert_called_once_with(
            "Score: 12", 10, 10, 40, [0, 121, 241], Layers.UI
        )

    def test_high_score_shown_when_enabled(self, mock_draw_manager):
        config = load_hud_config()
        config["score"]["show_high_score"] = True
        hud = HUDManager(config)

        hud.draw_score(mock_draw_manager, 2, high_score=9)

        assert mock_draw_manager.draw_text.call_count == 2
        best_call = mock_draw_manager.draw_text.call_args_list[1]
        assert best_call.args[0] == "Best: 9"
        assert best_call.args[1] == 10 + 400 + 8

    def test_game_over_centered(self, hud, mock_draw_manager):
        hud.draw_game_over(mock_draw_manager, 800, 600)

        mock_draw_manager.measure_text.assert_called_once_with(
            "Game Over! Press [ENTER] to continue", 40
        )
        mock_draw_manager.draw_text.assert_called_once_with(
            "Game Over! Press [ENTER] to continue", 200, 280, 40,
            [255, 255, 255], Layers.OVERLAY
        )

"""Smoke tests for drawing a frame off-screen."""

import pygame
import pytest

from game.level_manager import GameCore
from game.ui_manager import UIManager
from utils.colors import get_palette
from utils.helpers import format_time, format_score


@pytest.fixture(scope="module")
def surface():
    pygame.init()
    yield pygame.Surface((800, 636))
    pygame.quit()


class TestDrawFrame:
    """Tests for UIManager.draw_frame."""

    def test_draws_playing_frame(self, surface):
        """Walls use the theme color, the player box is drawn."""
        core = GameCore(800, 600, seed=2).init()
        ui = UIManager('dark')
        frame = core.frame()
        ui.draw_frame(surface, frame, 600, 800, 36)

        x, y, _, _ = frame.wall_rects[0]
        assert surface.get_at((x + 1, y + 1))[:3] == get_palette('dark')['wall']

        px, py, pw, ph = frame.player_rect
        assert surface.get_at((int(px + pw / 2), int(py + ph / 2)))[:3] != get_palette('dark')['bg']

    def test_draws_game_over(self, surface):
        """The game-over overlay renders without errors."""
        core = GameCore(800, 600, seed=2).init()
        for _ in range(15):
            core.timer_tick()
        ui = UIManager()
        ui.draw_frame(surface, core.frame(), 600, 800, 36)

    def test_set_theme(self):
        """Switching theme swaps the palette."""
        ui = UIManager('light')
        ui.set_theme('dark')
        assert ui.palette == get_palette('dark')


class TestHelpers:
    """Tests for HUD formatting."""

    def test_format_time(self):
        """Seconds render as MM:SS, never negative."""
        assert format_time(75) == "01:15"
        assert format_time(-3) == "00:00"

    def test_format_score(self):
        """Scores get thousands separators."""
        assert format_score(12345) == "12,345"

"""Tests for the pygame shell: events, countdown timer, theme and resize."""

import pygame
import pytest

from game.settings_store import SettingsStore
from main import MazeGame, COUNTDOWN_EVENT
from utils.constants import PANEL_H, TIMER_INTERVAL_MS


@pytest.fixture
def timer_calls(monkeypatch):
    """Record set_timer calls instead of arming real timers."""
    calls = []
    monkeypatch.setattr(pygame.time, "set_timer", lambda event, millis, *args: calls.append((event, millis)))
    return calls


@pytest.fixture
def settings_path(tmp_path):
    return tmp_path / "settings.json"


@pytest.fixture
def game(timer_calls, settings_path):
    game = MazeGame(seed=3, settings=SettingsStore(settings_path))
    pygame.event.clear()
    yield game
    pygame.quit()


def post_key(key):
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=key))


def post_countdown(count=1):
    for _ in range(count):
        pygame.event.post(pygame.event.Event(COUNTDOWN_EVENT))


def run_frame(game):
    ticks = game.handle_events()
    game.update(ticks)
    return ticks


def end_game(game):
    """Run the clock out through the event loop."""
    game.core.round_state.time_remaining = 1
    post_countdown()
    run_frame(game)
    assert game.core.is_over


class TestCountdown:
    """Tests for the one-second countdown timer."""

    def test_armed_on_start(self, game, timer_calls):
        """The timer is armed when the game opens."""
        assert timer_calls == [(COUNTDOWN_EVENT, TIMER_INTERVAL_MS)]

    def test_events_tick_the_clock(self, game):
        """Each countdown event takes one second off."""
        post_countdown(3)
        assert run_frame(game) == 3
        assert game.frame.time_remaining == 12

    def test_stops_on_game_over(self, game, timer_calls):
        """Running out of time disarms the timer."""
        end_game(game)
        assert game.frame.is_over
        assert timer_calls[-1] == (COUNTDOWN_EVENT, 0)

    def test_not_stopped_twice(self, game, timer_calls):
        """Later frames after game over leave the timer alone."""
        end_game(game)
        count = len(timer_calls)
        run_frame(game)
        assert len(timer_calls) == count


class TestKeys:
    """Tests for R, T and ESC."""

    def test_restart_rearms_timer(self, game, timer_calls):
        """R after game over restarts and re-arms the countdown."""
        end_game(game)
        post_key(pygame.K_r)
        run_frame(game)

        assert timer_calls[-1] == (COUNTDOWN_EVENT, TIMER_INTERVAL_MS)
        assert not game.core.is_over
        assert (game.frame.score, game.frame.round, game.frame.time_remaining) == (0, 1, 15)

    def test_tick_before_restart_is_dropped(self, game):
        """A countdown queued ahead of R does not reach the new game."""
        end_game(game)
        post_countdown()
        post_key(pygame.K_r)

        assert run_frame(game) == 0
        assert game.frame.time_remaining == 15
        assert not game.frame.is_over

    def test_tick_before_restart_mid_game(self, game):
        """Restarting while playing also starts from a full clock."""
        post_countdown(2)
        post_key(pygame.K_r)
        run_frame(game)
        assert game.frame.time_remaining == 15

    def test_tick_after_restart_counts(self, game):
        """A countdown that arrives after R belongs to the new game."""
        end_game(game)
        post_key(pygame.K_r)
        post_countdown()
        assert run_frame(game) == 1
        assert game.frame.time_remaining == 14

    def test_theme_toggle_persists(self, game, settings_path):
        """T flips the theme and writes it to the settings file."""
        assert game.theme == "light"

        post_key(pygame.K_t)
        run_frame(game)
        assert game.theme == "dark"
        assert game.ui_manager.theme == "dark"
        assert SettingsStore(settings_path).load_theme() == "dark"

        post_key(pygame.K_t)
        run_frame(game)
        assert SettingsStore(settings_path).load_theme() == "light"

    def test_saved_theme_loaded(self, timer_calls, settings_path):
        """A new session opens with the stored theme."""
        SettingsStore(settings_path).save_theme("dark")
        game = MazeGame(seed=3, settings=SettingsStore(settings_path))
        assert game.ui_manager.theme == "dark"
        pygame.quit()

    def test_escape_quits(self, game):
        """ESC stops the loop."""
        post_key(pygame.K_ESCAPE)
        game.handle_events()
        assert not game.running

    def test_window_close_quits(self, game):
        """Closing the window stops the loop."""
        pygame.event.post(pygame.event.Event(pygame.QUIT))
        game.handle_events()
        assert not game.running


class TestResize:
    """Tests for window resize reaching the game core."""

    def post_resize(self, w, h):
        pygame.event.post(pygame.event.Event(pygame.VIDEORESIZE, w=w, h=h, size=(w, h)))

    def test_resize_rebuilds_maze(self, game):
        """A resize event regenerates the maze for the new maze area."""
        game.core.round_state.score = 4
        old_grid = game.core.grid

        self.post_resize(640, 480)
        run_frame(game)

        assert (game.screen_w, game.screen_h) == (640, 480)
        assert (game.core.viewport_width, game.core.viewport_height) == (640, 480 - PANEL_H)
        assert game.core.grid is not old_grid
        assert game.core.grid.dimensions == (11, 16)
        assert game.frame.wall_rects == game.core.grid.wall_rectangles()
        assert game.frame.score == 4

    def test_resize_below_minimum(self, game):
        """Tiny windows are held at the minimum size."""
        self.post_resize(100, 100)
        run_frame(game)

        assert game.display_manager.get_size() == (320, 240)
        assert game.core.grid.dimensions == (5, 8)

    def test_same_size_ignored(self, game):
        """A resize to the current size keeps the maze."""
        grid = game.core.grid
        assert game.display_manager.handle_resize(*game.display_manager.get_size()) is False
        assert game.core.grid is grid


class TestRender:
    """Tests for drawing through the shell."""

    def test_render_frame(self, game):
        """A full frame draws and flips without errors."""
        run_frame(game)
        game.render()

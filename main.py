"""
Maze Dash - reach the goal before the clock runs out
"""

import sys

import pygame

from game.level_manager import GameCore
from game.controls import intent_from_keys
from game.display_manager import DisplayManager
from game.ui_manager import UIManager
from game.settings_store import SettingsStore
from maze.difficulty import DEFAULT_DIFFICULTY
from utils.constants import FPS, PANEL_H, TIMER_INTERVAL_MS, DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT
from utils.logger import configure_logging, get_logger
from config import GAME_TITLE, GAME_VERSION

log = get_logger('main')

COUNTDOWN_EVENT = pygame.USEREVENT + 1
WINDOWSIZECHANGED_EVENT = getattr(pygame, "WINDOWSIZECHANGED", None)


class MazeGame:
    """
    Main game class: pygame window, input, timers and drawing around GameCore
    """
    def __init__(self, config=DEFAULT_DIFFICULTY, seed=None, settings=None):
        pygame.init()

        # Theme preference
        self.settings = settings or SettingsStore()
        self.theme = self.settings.load_theme()
        self.ui_manager = UIManager(self.theme)

        # Display manager
        self.display_manager = DisplayManager()
        self.display_manager.set_resize_callback(self._on_screen_resize)
        self.screen = self.display_manager.create_screen(
            DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT,
            title=f"{GAME_TITLE} v{GAME_VERSION}"
        )
        self.screen_w, self.screen_h = self.display_manager.get_size()

        # Game core fills everything above the HUD panel
        self.core = GameCore(self.screen_w, self.maze_height, config=config, seed=seed).init()
        self.frame = self.core.frame()

        self.clock = pygame.time.Clock()
        self.running = True
        self._start_countdown()

    @property
    def maze_height(self):
        return self.screen_h - PANEL_H

    def _start_countdown(self):
        """(Re)arm the one-second countdown timer"""
        pygame.time.set_timer(COUNTDOWN_EVENT, TIMER_INTERVAL_MS)

    def _stop_countdown(self):
        pygame.time.set_timer(COUNTDOWN_EVENT, 0)

    def _extract_resize_event_size(self, event):
        """Return (w, h) for resize events across pygame versions."""
        if event.type == pygame.VIDEORESIZE:
            return (event.w, event.h)

        if WINDOWSIZECHANGED_EVENT is not None and event.type == WINDOWSIZECHANGED_EVENT:
            return (
                getattr(event, "x", getattr(event, "w", self.screen_w)),
                getattr(event, "y", getattr(event, "h", self.screen_h))
            )

        return None

    def handle_events(self):
        """
        Handle input events

        Returns:
            Number of countdown ticks delivered this frame
        """
        countdown_ticks = 0

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                return countdown_ticks

            if event.type == COUNTDOWN_EVENT:
                countdown_ticks += 1
                continue

            resize_size = self._extract_resize_event_size(event)
            if resize_size:
                self.display_manager.handle_resize(*resize_size)
                continue

            if event.type == pygame.KEYDOWN and self._handle_keydown(event.key):
                # Ticks counted before a restart belong to the old game
                countdown_ticks = 0

        return countdown_ticks

    def _handle_keydown(self, key):
        """
        Handle key press

        Returns:
            True if the game was restarted
        """
        if key == pygame.K_ESCAPE:
            self.running = False
        elif key == pygame.K_r:
            self._restart()
            return True
        elif key == pygame.K_t:
            self._toggle_theme()
        return False

    def _restart(self):
        self.core.restart()
        self._start_countdown()
        self.frame = self.core.frame()

    def _toggle_theme(self):
        self.theme = self.settings.toggle_theme(self.theme)
        self.ui_manager.set_theme(self.theme)
        log.info("Theme switched to %s", self.theme)

    def _on_screen_resize(self, new_width, new_height):
        """Resize callback: the maze is rebuilt for the new viewport"""
        self.screen = self.display_manager.get_screen()
        self.screen_w, self.screen_h = new_width, new_height
        self.core.resize(self.screen_w, self.maze_height)
        self.frame = self.core.frame()

    def update(self, countdown_ticks):
        """Advance the core one frame"""
        was_over = self.core.is_over
        intent = intent_from_keys(pygame.key.get_pressed())
        self.frame = self.core.tick(intent, pending_seconds=countdown_ticks)

        if self.frame.is_over and not was_over:
            self._stop_countdown()

    def render(self):
        """Render current frame"""
        self.ui_manager.draw_frame(self.screen, self.frame, self.maze_height, self.screen_w, PANEL_H)
        pygame.display.flip()

    def run(self):
        """Main game loop"""
        while self.running:
            self.clock.tick(FPS)

            countdown_ticks = self.handle_events()
            if not self.running:
                break
            self.update(countdown_ticks)
            self.render()

        self._stop_countdown()
        pygame.quit()


def main():
    """Entry point"""
    configure_logging()
    game = MazeGame()
    game.run()
    sys.exit()


if __name__ == "__main__":
    main()

"""
Display Manager - owns the resizable window and tells the game when it changes size
"""

import pygame

from utils.constants import MIN_WINDOW_WIDTH, MIN_WINDOW_HEIGHT, DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT
from utils.logger import get_logger

log = get_logger('display')


def clamp_window_size(width, height):
    """Raise a requested size to the window minimum"""
    return max(MIN_WINDOW_WIDTH, width), max(MIN_WINDOW_HEIGHT, height)


class DisplayManager:
    """
    Window surface plus a single resize listener
    """
    def __init__(self):
        self.screen = None
        self.screen_width = DEFAULT_WINDOW_WIDTH
        self.screen_height = DEFAULT_WINDOW_HEIGHT
        self.resize_callback = None

    def set_resize_callback(self, callback):
        """
        Args:
            callback: Function(new_width, new_height), called after the window changed size
        """
        self.resize_callback = callback

    def _open(self, width, height):
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        self.screen_width, self.screen_height = self.screen.get_size()

    def create_screen(self, width, height, title=None):
        """
        Open the window at no less than the minimum size

        Returns:
            pygame.Surface: The screen surface
        """
        self._open(*clamp_window_size(width, height))
        if title:
            pygame.display.set_caption(title)
        return self.screen

    def handle_resize(self, event_w, event_h):
        """
        Adopt the size reported by a VIDEORESIZE / WINDOWSIZECHANGED event

        pygame 2 usually resizes the display surface itself; the window is
        only reopened when the minimum clamp changed the requested size.

        Returns:
            True if the size changed and the callback ran
        """
        size = clamp_window_size(event_w, event_h)
        if size == self.get_size():
            return False

        surface = pygame.display.get_surface()
        if surface is not None and surface.get_size() == size:
            self.screen = surface
            self.screen_width, self.screen_height = size
        else:
            self._open(*size)

        log.debug("Window resized to %dx%d", self.screen_width, self.screen_height)
        if self.resize_callback:
            self.resize_callback(self.screen_width, self.screen_height)
        return True

    def get_screen(self):
        return self.screen

    def get_size(self):
        return (self.screen_width, self.screen_height)

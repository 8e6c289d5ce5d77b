"""
Settings Store - persists the theme preference to JSON
"""

import json
from pathlib import Path
from datetime import datetime

from config import GAME_VERSION
from utils.constants import SETTINGS_FILE, THEME_LIGHT, THEME_DARK, THEMES
from utils.logger import get_logger

log = get_logger('settings')


class SettingsStore:
    """
    Loads and saves the theme preference

    Read or write failures are logged and fall back to the light theme;
    they never reach the player.
    """
    def __init__(self, path=SETTINGS_FILE):
        """
        Args:
            path: JSON file holding the settings
        """
        self.path = Path(path)

    def load_theme(self):
        """
        Returns:
            str: Saved theme, or THEME_LIGHT if missing or unreadable
        """
        if not self.path.exists():
            return THEME_LIGHT

        try:
            with open(self.path, 'r') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            log.warning("Settings load failed: %s", e)
            return THEME_LIGHT

        theme = data.get('theme') if isinstance(data, dict) else None
        if theme not in THEMES:
            log.warning("Unknown theme %r in %s, using %s", theme, self.path, THEME_LIGHT)
            return THEME_LIGHT
        return theme

    def save_theme(self, theme):
        """
        Args:
            theme: THEME_LIGHT or THEME_DARK

        Returns:
            bool: True if save successful
        """
        if theme not in THEMES:
            raise ValueError(f"Unknown theme: {theme!r}")

        data = {
            'theme': theme,
            'metadata': {
                'timestamp': datetime.now().isoformat(),
                'version': GAME_VERSION
            }
        }

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, 'w') as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            log.warning("Settings save failed: %s", e)
            return False

        log.debug("Theme saved: %s", theme)
        return True

    def toggle_theme(self, current):
        """Switch light <-> dark, persist, and return the new theme"""
        new_theme = THEME_LIGHT if current == THEME_DARK else THEME_DARK
        self.save_theme(new_theme)
        return new_theme

    def __repr__(self):
        return f"SettingsStore(path={self.path})"

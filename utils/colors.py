"""
Color palettes for Maze Dash (light and dark themes)
"""

# Light theme
COLOR_BG_LIGHT = (245, 245, 240)
COLOR_WALL_LIGHT = (40, 44, 52)
COLOR_TEXT_LIGHT = (30, 30, 30)
COLOR_PANEL_BG_LIGHT = (225, 225, 220)

# Dark theme
COLOR_BG_DARK = (20, 22, 28)
COLOR_WALL_DARK = (230, 230, 230)
COLOR_TEXT_DARK = (210, 210, 210)
COLOR_PANEL_BG_DARK = (12, 14, 18)

# Shared colors
COLOR_PLAYER = (70, 140, 255)
COLOR_START = (255, 200, 60)
COLOR_GOAL = (60, 200, 120)
COLOR_MARKER_TEXT = (20, 20, 20)
COLOR_TEXT_HIGHLIGHT = (255, 230, 160)
COLOR_GAME_OVER = (220, 80, 80)
COLOR_OVERLAY = (10, 12, 16, 200)

PALETTES = {
    'light': {
        'bg': COLOR_BG_LIGHT,
        'wall': COLOR_WALL_LIGHT,
        'text': COLOR_TEXT_LIGHT,
        'panel': COLOR_PANEL_BG_LIGHT,
    },
    'dark': {
        'bg': COLOR_BG_DARK,
        'wall': COLOR_WALL_DARK,
        'text': COLOR_TEXT_DARK,
        'panel': COLOR_PANEL_BG_DARK,
    },
}


def get_palette(theme):
    """Palette for a theme name, light if unknown"""
    return PALETTES.get(theme, PALETTES['light'])

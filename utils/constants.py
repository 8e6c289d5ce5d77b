"""
Global constants for Maze Dash
"""

# Screen settings
CELL_SIZE = 40
FPS = 60

# Minimum window size
MIN_WINDOW_WIDTH = 320
MIN_WINDOW_HEIGHT = 240
DEFAULT_WINDOW_WIDTH = 960
DEFAULT_WINDOW_HEIGHT = 720

# HUD panel below the maze
PANEL_H = 36

# Grid generation
MIN_GRID_DIM = 5            # Smallest rows/cols that still has an interior
MIN_GOAL_DISTANCE = 10      # Euclidean distance in cells
GOAL_MAX_ATTEMPTS = 500
START_MAX_ATTEMPTS = 500

# Direction vectors (drow, dcol): up, right, down, left
DIRS = [
    (-1, 0),
    (0, 1),
    (1, 0),
    (0, -1),
]

# Player box
PLAYER_SIZE = 20

# Physics (per frame)
ACCELERATION = 1.0
FRICTION = 0.85
STOP_THRESHOLD = 0.01
COLLISION_PADDING = 2

# Rounds
BASE_SPEED = 7.5
SPEED_STEP = 0.3
ROUND_TIME = 15
TIME_BONUS = 15
TIMER_INTERVAL_MS = 1000

# Themes
THEME_LIGHT = 'light'
THEME_DARK = 'dark'
THEMES = (THEME_LIGHT, THEME_DARK)

# Settings file
SETTINGS_FILE = "saves/settings.json"

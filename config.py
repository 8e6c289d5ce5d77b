GAME_TITLE = "Maze Dash"
GAME_VERSION = "1.0.0"

"""
Logging setup for Maze Dash

Usage:
    from utils.logger import get_logger

    log = get_logger('generator')
    log.info("Maze generated")

Configuration:
    MAZE_LOG_LEVEL=DEBUG     # default level (WARNING if unset)

    Or programmatically:
        configure_logging(level='DEBUG')
"""

import logging
import os

ROOT_LOGGER = 'maze_dash'
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_configured = False


def configure_logging(level=None):
    """
    Configure the root game logger once.

    Args:
        level: Level name or number; falls back to MAZE_LOG_LEVEL, then WARNING
    """
    global _configured

    if level is None:
        level = os.environ.get('MAZE_LOG_LEVEL', 'WARNING')
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    root = logging.getLogger(ROOT_LOGGER)
    if not _configured:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        _configured = True
    root.setLevel(level)


def get_logger(module):
    """
    Get a logger for the specified module.

    Args:
        module: Short module name (e.g. 'generator', 'game_state')

    Returns:
        logging.Logger under the game's root logger
    """
    return logging.getLogger(f"{ROOT_LOGGER}.{module}")

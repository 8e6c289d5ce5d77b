"""Shared fixtures for maze tests."""

import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import numpy as np
import pytest

from maze.maze_core import GridModel


def _parse_layout(layout):
    """'#' is wall, anything else is path."""
    return np.array([[ch == "#" for ch in line] for line in layout], dtype=np.bool_)


@pytest.fixture
def grid_from_layout():
    """Factory building a GridModel from a list of strings."""
    def build(layout, start, goal, cell_size=40, agent_size=(20, 20)):
        return GridModel(_parse_layout(layout), cell_size, start, goal, agent_size)
    return build


SMALL_LAYOUT = [
    "#####",
    "#...#",
    "###.#",
    "#...#",
    "#####",
]


@pytest.fixture
def small_grid(grid_from_layout):
    """5x5 S-shaped corridor, start top-left, goal bottom-left."""
    return grid_from_layout(SMALL_LAYOUT, start=(1, 1), goal=(3, 1))


@pytest.fixture
def room_grid(grid_from_layout):
    """Open 28x12 room inside a wall ring."""
    rows, cols = 14, 30
    layout = []
    for r in range(rows):
        if r in (0, rows - 1):
            layout.append("#" * cols)
        else:
            layout.append("#" + "." * (cols - 2) + "#")
    return grid_from_layout(layout, start=(2, 2), goal=(11, 27))


@pytest.fixture
def narrow_room_grid(grid_from_layout):
    """3-column wide room, column 4 is solid wall."""
    layout = [
        "#######",
        "#...###",
        "#...###",
        "#...###",
        "#...###",
        "#...###",
        "#######",
    ]
    return grid_from_layout(layout, start=(1, 1), goal=(5, 3))

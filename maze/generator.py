"""
Maze generation - randomized backtracking on a wall-cell lattice
"""

import random

import numpy as np

from utils.constants import (
    CELL_SIZE, PLAYER_SIZE, DIRS, MIN_GRID_DIM,
    MIN_GOAL_DISTANCE, GOAL_MAX_ATTEMPTS, START_MAX_ATTEMPTS
)
from utils.logger import get_logger
from maze.maze_core import GridModel, cell_distance

log = get_logger('generator')


def grid_dimensions(viewport_width, viewport_height, cell_size):
    """(rows, cols) that fit the viewport, never below MIN_GRID_DIM"""
    cols = int(viewport_width // cell_size)
    rows = int(viewport_height // cell_size)
    return max(MIN_GRID_DIM, rows), max(MIN_GRID_DIM, cols)


def _shuffled_dirs(rng):
    dirs = list(DIRS)
    rng.shuffle(dirs)
    return dirs


def in_interior(rows, cols, row, col):
    """Check if a cell lies inside the outer wall ring"""
    return 1 <= row <= rows - 2 and 1 <= col <= cols - 2


# ========== CARVER: DFS BACKTRACKER ==========

def carve_steps(rows, cols, rng=None):
    """
    Depth-First Search with backtracking - step generator

    Carving starts at (1, 1) and jumps two cells at a time, clearing the
    cell in between. Each stack frame keeps its own shuffled direction list,
    so the visit order matches the recursive formulation.
    """
    rng = rng or random.Random()

    cells = np.ones((rows, cols), dtype=np.bool_)
    cells[1, 1] = False
    stack = [(1, 1, _shuffled_dirs(rng))]

    yield {"cells": cells, "current": (1, 1), "carved": None, "done": False}

    while stack:
        row, col, dirs = stack[-1]
        if not dirs:
            stack.pop()
            continue

        drow, dcol = dirs.pop(0)
        trow, tcol = row + 2 * drow, col + 2 * dcol
        if in_interior(rows, cols, trow, tcol) and cells[trow, tcol]:
            cells[row + drow, col + dcol] = False
            cells[trow, tcol] = False
            stack.append((trow, tcol, _shuffled_dirs(rng)))
            yield {"cells": cells, "current": (trow, tcol), "carved": ((row, col), (trow, tcol)), "done": False}

    yield {"cells": cells, "current": (1, 1), "carved": None, "done": True}


def carve(rows, cols, rng=None):
    """Run the carver to completion and return the cell array"""
    last_state = None
    for state in carve_steps(rows, cols, rng):
        last_state = state
    return last_state['cells']


# ========== START / GOAL PLACEMENT ==========

def _random_interior(rows, cols, rng):
    return rng.randint(1, rows - 2), rng.randint(1, cols - 2)


def pick_start(cells, rng, max_attempts=START_MAX_ATTEMPTS):
    """Resample interior cells until a path cell turns up"""
    rows, cols = cells.shape
    for _ in range(max_attempts):
        row, col = _random_interior(rows, cols, rng)
        if not cells[row, col]:
            return row, col
    # (1, 1) is always carved
    return 1, 1


def pick_goal(cells, start, rng, min_distance=MIN_GOAL_DISTANCE, max_attempts=GOAL_MAX_ATTEMPTS):
    """
    Resample interior path cells until one is farther than min_distance
    from start. Grids too small for that fall back to the farthest path
    cell after max_attempts.

    Returns:
        (cell, used_fallback)
    """
    rows, cols = cells.shape
    for _ in range(max_attempts):
        cell = _random_interior(rows, cols, rng)
        if cells[cell]:
            continue
        if cell_distance(cell, start) > min_distance:
            return cell, False

    path = [(int(r), int(c)) for r, c in zip(*np.nonzero(~cells))]
    farthest = max(path, key=lambda c: cell_distance(c, start))
    return farthest, True


# ========== PUBLIC ENTRY ==========

def generate(viewport_width, viewport_height, cell_size=CELL_SIZE,
             agent_size=(PLAYER_SIZE, PLAYER_SIZE), seed=None, rng=None,
             min_goal_distance=MIN_GOAL_DISTANCE):
    """
    Generate a new maze for a viewport

    Args:
        viewport_width, viewport_height: Viewport size in pixels
        cell_size: Cell edge length in pixels
        agent_size: (width, height) of the player box
        seed: Optional seed (ignored when rng is given)
        rng: Optional random.Random instance
        min_goal_distance: Required start/goal separation in cells

    Returns:
        GridModel
    """
    if cell_size <= 0:
        raise ValueError(f"cell_size must be positive, got {cell_size}")
    agent_w, agent_h = agent_size
    if agent_w <= 0 or agent_h <= 0 or agent_w > cell_size or agent_h > cell_size:
        raise ValueError(f"agent size {agent_size} must fit inside a {cell_size}px cell")

    if rng is None:
        rng = random.Random(seed)

    rows, cols = grid_dimensions(viewport_width, viewport_height, cell_size)
    cells = carve(rows, cols, rng)

    start = pick_start(cells, rng)
    goal, used_fallback = pick_goal(cells, start, rng, min_distance=min_goal_distance)
    if used_fallback:
        log.debug("No goal beyond %s cells in %dx%d grid, using farthest cell %s",
                  min_goal_distance, cols, rows, goal)

    grid = GridModel(cells, cell_size, start, goal, agent_size)
    log.info("Maze generated: %dx%d cells, start=%s goal=%s distance=%.2f",
             cols, rows, start, goal, grid.start_goal_distance())
    return grid

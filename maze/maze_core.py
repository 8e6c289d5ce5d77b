"""
Core maze grid - wall/path cells, start/goal placement, flood fill
"""

import math
from collections import deque

import numpy as np

from utils.constants import DIRS


def cell_distance(a, b):
    """Euclidean distance between two (row, col) cells"""
    return math.hypot(a[0] - b[0], a[1] - b[1])


class GridModel:
    """
    Maze grid with cell-based representation
    Each cell is either a wall (True) or a path (False)

    A GridModel is never edited after construction; regeneration builds a
    new one.
    """
    def __init__(self, cells, cell_size, start_cell, goal_cell, agent_size):
        """
        Args:
            cells: 2D numpy bool array (rows, cols), True = wall
            cell_size: Cell edge length in pixels
            start_cell: (row, col) of the start cell
            goal_cell: (row, col) of the goal cell
            agent_size: (width, height) of the player box in pixels
        """
        self.cells = np.asarray(cells, dtype=np.bool_)
        self.rows, self.cols = self.cells.shape
        self.cell_size = cell_size
        self.start_cell = tuple(start_cell)
        self.goal_cell = tuple(goal_cell)
        self.agent_size = tuple(agent_size)

        self._wall_rects = self._scan_wall_rects()

    @property
    def dimensions(self):
        """(rows, cols)"""
        return self.rows, self.cols

    @property
    def pixel_size(self):
        """(width, height) of the grid in pixels"""
        return self.cols * self.cell_size, self.rows * self.cell_size

    def in_bounds(self, row, col):
        """Check if coordinates are within grid bounds"""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_wall_at(self, row, col):
        """Wall check; anything outside the grid counts as wall"""
        if not self.in_bounds(row, col):
            return True
        return bool(self.cells[row, col])

    @property
    def start_pixel_position(self):
        """Top-left of the player box centered in the start cell"""
        row, col = self.start_cell
        agent_w, agent_h = self.agent_size
        x = col * self.cell_size + (self.cell_size - agent_w) / 2
        y = row * self.cell_size + (self.cell_size - agent_h) / 2
        return x, y

    @property
    def goal_pixel_position(self):
        """Top-left corner of the goal cell"""
        row, col = self.goal_cell
        return col * self.cell_size, row * self.cell_size

    @property
    def start_rect(self):
        row, col = self.start_cell
        return (col * self.cell_size, row * self.cell_size, self.cell_size, self.cell_size)

    @property
    def goal_rect(self):
        """The goal occupies the full cell"""
        x, y = self.goal_pixel_position
        return (x, y, self.cell_size, self.cell_size)

    def _scan_wall_rects(self):
        rects = []
        size = self.cell_size
        for row, col in zip(*np.nonzero(self.cells)):
            rects.append((int(col) * size, int(row) * size, size, size))
        return rects

    def wall_rectangles(self):
        """(x, y, w, h) rectangle per wall cell"""
        return list(self._wall_rects)

    def path_cells(self):
        """All non-wall cells as (row, col) tuples"""
        return [(int(r), int(c)) for r, c in zip(*np.nonzero(~self.cells))]

    def open_neighbors(self, row, col):
        """Adjacent path cells"""
        res = []
        for drow, dcol in DIRS:
            nr, nc = row + drow, col + dcol
            if not self.is_wall_at(nr, nc):
                res.append((nr, nc))
        return res

    def reachable_from(self, cell):
        """BFS flood fill over path cells, returns the set of reached cells"""
        if self.is_wall_at(*cell):
            return set()

        q = deque([cell])
        seen = {cell}
        while q:
            row, col = q.popleft()
            for n in self.open_neighbors(row, col):
                if n not in seen:
                    seen.add(n)
                    q.append(n)
        return seen

    def start_goal_distance(self):
        return cell_distance(self.start_cell, self.goal_cell)

    def __repr__(self):
        return (f"GridModel(size={self.cols}x{self.rows}, cell={self.cell_size}, "
                f"start={self.start_cell}, goal={self.goal_cell})")

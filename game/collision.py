"""
Collision detection - player box against maze wall cells
"""

import math

from numba import njit

from utils.constants import COLLISION_PADDING


@njit(cache=True)
def point_blocked(cells, cell_size, px, py):
    """
    Map a pixel point to its cell; outside the grid counts as wall.
    """
    rows, cols = cells.shape
    col = int(math.floor(px / cell_size))
    row = int(math.floor(py / cell_size))
    if row < 0 or row >= rows or col < 0 or col >= cols:
        return True
    return bool(cells[row, col])


@njit(cache=True)
def box_hits_wall(cells, cell_size, x, y, w, h, pad):
    """
    Five-point box test: the four corners pulled in by pad, then the center.

    A wall that cuts through the box without covering any of the five
    points is not reported.
    """
    left = x + pad
    right = x + w - pad
    top = y + pad
    bottom = y + h - pad

    if point_blocked(cells, cell_size, left, top):
        return True
    if point_blocked(cells, cell_size, right, top):
        return True
    if point_blocked(cells, cell_size, left, bottom):
        return True
    if point_blocked(cells, cell_size, right, bottom):
        return True
    return point_blocked(cells, cell_size, x + w / 2.0, y + h / 2.0)


def rects_overlap(a, b):
    """AABB overlap test on (x, y, w, h) tuples; touching edges do not count"""
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    return ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by


class CollisionOracle:
    """
    Answers whether a box at a position overlaps any wall of one grid
    """
    def __init__(self, grid, padding=COLLISION_PADDING):
        """
        Args:
            grid: GridModel to test against
            padding: Corner inset in pixels
        """
        self.grid = grid
        self.padding = float(padding)
        self._cells = grid.cells
        self._cell_size = float(grid.cell_size)

    def collides(self, box_x, box_y, box_w, box_h):
        """True if any of the five sample points lands in a wall cell"""
        return bool(box_hits_wall(
            self._cells, self._cell_size,
            float(box_x), float(box_y), float(box_w), float(box_h),
            self.padding
        ))

    def reached_goal(self, rect):
        """AABB test between a box and the goal cell"""
        return rects_overlap(rect, self.grid.goal_rect)

    def __repr__(self):
        return f"CollisionOracle(grid={self.grid!r}, padding={self.padding})"

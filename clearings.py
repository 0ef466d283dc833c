# clearings.py - Open rectangles reserved for player-built structures
"""
A map gets a fixed number of clearings placed around soft bias points. The
first clearing is the player's default start and build location.

Water is synthesized first and marks its cells occupied. A clearing that would
land on occupied cells slides sideways to the nearest free spot in its rows.
When there is none it stays where the bias put it and the pipeline rejects the
map (see find_clearing_overlap and map_gen.GenerationError).
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from constants import CLEARING_BIAS, CLEARING_SIZE_RANGE, CLEARING_BORDER

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Clearing:
    """
    Axis-aligned cell rectangle. Bounds are inclusive on all four sides.

    cx, cy is the world-space center of the rectangle.
    """
    left: int
    top: int
    right: int
    bottom: int
    cx: float
    cy: float

    @property
    def width(self):
        return self.right - self.left + 1

    @property
    def height(self):
        return self.bottom - self.top + 1

    @property
    def center(self):
        return (self.cx, self.cy)

    def contains_cell(self, col, row):
        return self.left <= col <= self.right and self.top <= row <= self.bottom

    def get_cells(self):
        """All (col, row) cells inside this clearing."""
        cells = []
        for row in range(self.top, self.bottom + 1):
            for col in range(self.left, self.right + 1):
                cells.append((col, row))
        return cells

    def to_dict(self) -> dict:
        return {
            'left': self.left,
            'top': self.top,
            'right': self.right,
            'bottom': self.bottom,
            'cx': self.cx,
            'cy': self.cy,
            'w': self.width,
            'h': self.height,
        }

    def __repr__(self):
        return f"<Clearing ({self.left},{self.top})-({self.right},{self.bottom})>"


def is_in_clearing(col, row, clearings):
    for c in clearings:
        if c.contains_cell(col, row):
            return True
    return False


def _is_free(grid, left, top, w, h):
    return not grid.occupied[top:top + h, left:left + w].any()


def _slide_to_free(grid, left, top, w, h, border):
    """Nearest left column (0, +1, -1, +2, ...) where the rectangle is unoccupied."""
    lo = border
    hi = grid.cols - w - border
    for offset in range(grid.cols):
        for candidate in (left + offset, left - offset) if offset else (left,):
            if lo <= candidate <= hi and _is_free(grid, candidate, top, w, h):
                return candidate
    return None


def place_clearings(grid, rng, bias: Optional[List[Tuple[float, float]]] = None) -> List[Clearing]:
    """
    Place one clearing per bias point and mark its cells occupied.

    Each clearing is 5-6 cells on a side, centered on its bias point and
    clamped so it stays at least one cell away from the map border, then slid
    sideways off any cells already occupied by water or an earlier clearing.
    """
    if bias is None:
        bias = CLEARING_BIAS
    border = CLEARING_BORDER
    tile = grid.tile_size

    clearings = []
    for fx, fy in bias:
        prefer_col = int(grid.cols * fx)
        prefer_row = int(grid.rows * fy)
        w = rng.randint(*CLEARING_SIZE_RANGE)
        h = rng.randint(*CLEARING_SIZE_RANGE)

        left = max(border, min(prefer_col - w // 2, grid.cols - w - border))
        top = max(border, min(prefer_row - h // 2, grid.rows - h - border))

        free_left = _slide_to_free(grid, left, top, w, h, border)
        if free_left is None:
            logger.debug("No free spot for clearing at (%d, %d)", left, top)
        else:
            left = free_left
        right = left + w - 1
        bottom = top + h - 1

        clearing = Clearing(
            left=left, top=top, right=right, bottom=bottom,
            cx=(left + right) / 2 * tile + tile / 2,
            cy=(top + bottom) / 2 * tile + tile / 2,
        )
        clearings.append(clearing)

        for col, row in clearing.get_cells():
            grid.mark_occupied(col, row)

    return clearings


def find_clearing_overlap(grid, clearings, water_cells):
    """
    Find the first clearing that sits on top of water.

    Returns:
        (index, clearing) of the first offending clearing, or None
    """
    for i, clearing in enumerate(clearings):
        for col, row in clearing.get_cells():
            if grid.key(col, row) in water_cells:
                return i, clearing
    return None

# grid.py - Logical cell lattice over the continuous world
"""
The world is continuous (pixel coordinates) but every placement decision is
made on a fixed column/row lattice. Cells are identified either by (col, row)
or by a packed integer key (row * cols + col) used for set membership.

The occupancy flags only live for the duration of one generation run.
"""

import math

import numpy as np

from constants import WORLD_WIDTH, WORLD_HEIGHT, TILE_SIZE


class Grid:
    """Column/row lattice with per-cell occupancy."""

    def __init__(self, world_width=WORLD_WIDTH, world_height=WORLD_HEIGHT, tile_size=TILE_SIZE):
        self.world_width = world_width
        self.world_height = world_height
        self.tile_size = tile_size
        self.cols = world_width // tile_size
        self.rows = world_height // tile_size
        self.occupied = np.zeros((self.rows, self.cols), dtype=bool)

    def __repr__(self):
        return f"<Grid {self.cols}x{self.rows} tile={self.tile_size}>"

    # ─── Coordinates ───

    def to_cell(self, x, y):
        """World position -> (col, row). Positions outside the world map outside the grid."""
        return int(math.floor(x / self.tile_size)), int(math.floor(y / self.tile_size))

    def to_world(self, col, row):
        """(col, row) -> world position of the cell center."""
        half = self.tile_size / 2
        return col * self.tile_size + half, row * self.tile_size + half

    def in_bounds(self, col, row):
        return 0 <= col < self.cols and 0 <= row < self.rows

    # ─── Cell keys ───

    def key(self, col, row):
        return row * self.cols + col

    def from_key(self, key):
        """Packed key -> (col, row)."""
        row, col = divmod(key, self.cols)
        return col, row

    # ─── Occupancy ───

    def mark_occupied(self, col, row):
        if self.in_bounds(col, row):
            self.occupied[row, col] = True

    def is_occupied(self, col, row):
        return self.in_bounds(col, row) and bool(self.occupied[row, col])

    # ─── Masks ───

    def mask(self, keys):
        """Boolean (rows, cols) array with True at every key in `keys`."""
        out = np.zeros((self.rows, self.cols), dtype=bool)
        if keys:
            flat = np.fromiter(keys, dtype=np.int64, count=len(keys))
            out.flat[flat] = True
        return out

    def keys_of(self, mask):
        """Inverse of mask(): the set of keys whose cell is True."""
        return frozenset(int(k) for k in np.flatnonzero(mask))


def dilate(mask):
    """8-neighbour dilation of a boolean grid mask (no wrap-around at the edges)."""
    rows, cols = mask.shape
    padded = np.zeros((rows + 2, cols + 2), dtype=bool)
    padded[1:-1, 1:-1] = mask
    out = np.zeros_like(mask)
    for dy in (-1, 0, 1):
        for dx in (-1, 0, 1):
            out |= padded[1 + dy:1 + dy + rows, 1 + dx:1 + dx + cols]
    return out

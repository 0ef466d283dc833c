# crossing.py - Walkable crossing band over a river
import math

from constants import CROSSING_WINDOW, CROSSING_HALF_WIDTH


def find_crossing_row(grid, water_cells):
    """
    Find the row nearest the vertical middle of the map that contains water.

    Rows are tried outward from the midpoint of the search window in
    alternating order (mid, mid-1, mid+1, mid-2, ...). The first row
    holding at least one water cell wins.

    Returns:
        The row index, or None when no row in the window has water.
    """
    min_row = int(math.floor(grid.rows * CROSSING_WINDOW[0]))
    max_row = int(math.floor(grid.rows * CROSSING_WINDOW[1]))
    mid = (min_row + max_row) // 2

    for offset in range(max_row - min_row + 1):
        if offset % 2 == 0:
            row = mid + offset // 2
        else:
            row = mid - (offset + 1) // 2
        if row < min_row or row > max_row:
            continue
        if any(grid.key(col, row) in water_cells for col in range(grid.cols)):
            return row
    return None


def place_crossing(grid, water_cells, half_width=CROSSING_HALF_WIDTH):
    """Carve a (2 * half_width + 1)-row band of walkable cells through the water.

    Only cells that are water become crossing cells, so the result is always a
    subset of `water_cells`. Empty when no row in the search window has water.
    """
    row = find_crossing_row(grid, water_cells)
    if row is None:
        return frozenset()

    crossing = set()
    for r in range(row - half_width, row + half_width + 1):
        if r < 0 or r >= grid.rows:
            continue
        for col in range(grid.cols):
            key = grid.key(col, r)
            if key in water_cells:
                crossing.add(key)
    return frozenset(crossing)

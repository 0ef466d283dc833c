import os
import random
import sys

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from crossing import find_crossing_row, place_crossing
from grid import Grid
from water import RiverStrategy


def test_river_crossing_is_a_three_row_band_of_water():
    grid = Grid()
    water = RiverStrategy().synthesize(grid, random.Random(42))
    crossing = place_crossing(grid, water.cells)

    assert crossing
    assert crossing <= water.cells
    # Window is rows 11..25 on a 37-row map, midpoint 18
    assert {grid.from_key(k)[1] for k in crossing} == {17, 18, 19}
    assert len(crossing) == 9


def test_no_water_means_no_crossing():
    grid = Grid()
    assert find_crossing_row(grid, frozenset()) is None
    assert place_crossing(grid, frozenset()) == frozenset()


def test_search_prefers_rows_near_the_middle():
    grid = Grid()
    cells = {grid.key(10, 11), grid.key(10, 20), grid.key(10, 16)}
    # 18, 17, 19, 16, 20, ...: row 16 is tried before row 20
    assert find_crossing_row(grid, cells) == 16
    assert find_crossing_row(grid, {grid.key(3, 19), grid.key(3, 17)}) == 17


def test_water_outside_the_window_is_ignored():
    grid = Grid()
    cells = {grid.key(5, row) for row in (0, 1, 2, 30, 36)}
    assert find_crossing_row(grid, cells) is None
    assert place_crossing(grid, cells) == frozenset()


def test_crossing_only_takes_water_cells_at_the_edge_of_the_band():
    grid = Grid()
    cells = {grid.key(7, 11), grid.key(8, 11)}
    crossing = place_crossing(grid, cells)
    assert crossing == frozenset(cells)

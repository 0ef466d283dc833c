import os
import sys

import numpy as np

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from grid import Grid, dilate


def test_default_grid_is_50_by_37():
    grid = Grid()
    assert (grid.cols, grid.rows) == (50, 37)
    assert grid.occupied.shape == (37, 50)
    assert not grid.occupied.any()


def test_cell_centers_round_trip():
    grid = Grid()
    for col, row in [(0, 0), (49, 36), (17, 5), (25, 18)]:
        x, y = grid.to_world(col, row)
        assert grid.to_cell(x, y) == (col, row)


def test_positions_inside_a_cell_map_to_that_cell():
    grid = Grid()
    assert grid.to_cell(0, 0) == (0, 0)
    assert grid.to_cell(63.9, 63.9) == (0, 0)
    assert grid.to_cell(64, 64) == (1, 1)
    assert grid.to_cell(-1, 10) == (-1, 0)


def test_keys_round_trip():
    grid = Grid()
    seen = set()
    for row in range(grid.rows):
        for col in range(grid.cols):
            key = grid.key(col, row)
            assert grid.from_key(key) == (col, row)
            seen.add(key)
    assert len(seen) == grid.cols * grid.rows


def test_occupancy_ignores_out_of_bounds():
    grid = Grid()
    grid.mark_occupied(3, 4)
    grid.mark_occupied(-1, 4)
    grid.mark_occupied(50, 4)
    assert grid.is_occupied(3, 4)
    assert not grid.is_occupied(-1, 4)
    assert int(grid.occupied.sum()) == 1


def test_mask_and_keys_of_are_inverse():
    grid = Grid()
    keys = {grid.key(0, 0), grid.key(10, 3), grid.key(49, 36)}
    mask = grid.mask(keys)
    assert mask[3, 10]
    assert grid.keys_of(mask) == frozenset(keys)
    assert grid.keys_of(grid.mask(set())) == frozenset()


def test_dilate_does_not_wrap_around_edges():
    mask = np.zeros((4, 5), dtype=bool)
    mask[1, 4] = True
    grown = dilate(mask)
    assert grown[0:3, 3:5].all()
    assert not grown[:, 0].any()
    assert int(grown.sum()) == 6

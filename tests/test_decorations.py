import math
import os
import sys

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from biomes import get_biome
from clearings import is_in_clearing
from grid import Grid
from map_gen import generate_map

EPS = 1e-9


def _min_pair_distance(a, b=None):
    best = math.inf
    if b is None:
        for i, p in enumerate(a):
            for q in a[i + 1:]:
                best = min(best, math.hypot(p.x - q.x, p.y - q.y))
    else:
        for p in a:
            for q in b:
                best = min(best, math.hypot(p.x - q.x, p.y - q.y))
    return best


def _assert_outside_clearings_and_water(result, items):
    grid = Grid()
    for d in items:
        col, row = grid.to_cell(d.x, d.y)
        assert not is_in_clearing(col, row, result.clearings)
        assert grid.key(col, row) not in result.water.cells


def test_woodland_spacing_rules():
    result = generate_map("woodland", seed=101)
    deco = get_biome("woodland").decorations
    trees, bushes, rocks = result.decorations.trees, result.decorations.bushes, result.decorations.rocks

    assert 0 < len(trees) <= deco.trees.count
    assert 0 < len(bushes) <= deco.bushes.count
    assert 0 < len(rocks) <= deco.rocks.count
    assert _min_pair_distance(trees) >= deco.trees.min_dist - EPS
    assert _min_pair_distance(bushes) >= deco.bushes.min_dist - EPS
    assert _min_pair_distance(bushes, trees) >= deco.bushes.tree_clearance - EPS
    assert _min_pair_distance(rocks) >= deco.rocks.min_dist - EPS
    assert _min_pair_distance(rocks, trees) >= deco.rocks.tree_clearance - EPS


def test_desert_spacing_rules():
    result = generate_map("desert", seed=55)
    deco = get_biome("desert").decorations
    assert _min_pair_distance(result.decorations.trees) >= deco.trees.min_dist - EPS
    assert _min_pair_distance(result.decorations.rocks, result.decorations.trees) >= deco.rocks.tree_clearance - EPS


def test_nothing_grows_in_clearings_or_water():
    for biome_id, seed in (("woodland", 3), ("desert", 4)):
        result = generate_map(biome_id, seed=seed)
        _assert_outside_clearings_and_water(result, result.decorations.all())


def test_only_trees_and_rocks_collide():
    result = generate_map("woodland", seed=9)
    trees = result.obstacles.get_by_kind("tree")
    rocks = result.obstacles.get_by_kind("rock")
    assert len(trees) == len(result.decorations.trees)
    assert len(rocks) == len(result.decorations.rocks)
    for tree, collider in zip(result.decorations.trees, trees):
        assert (collider.x, collider.y) == (tree.x, tree.y + 12)
        assert (collider.width, collider.height) == (16, 16)


def test_berry_bushes_carry_an_anchor_above_them():
    result = generate_map("woodland", seed=12)
    for bush in result.decorations.bushes:
        if bush.is_berry:
            assert bush.anchor == (bush.x, bush.y - 10)
            assert bush.texture == "bush-berry"
        else:
            assert bush.anchor is None
            assert bush.texture == "bush"


def test_textures_come_from_biome_pools():
    result = generate_map("desert", seed=5)
    for tree in result.decorations.trees:
        assert tree.texture in ("palm-canopy-1", "palm-canopy-2")
    for flower in result.decorations.flowers:
        assert flower.texture in ("desert-flower-orange", "desert-flower-pink", "tumbleweed")
        assert 40 <= flower.x <= 3200 - 40

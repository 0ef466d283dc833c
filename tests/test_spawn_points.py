import os
import random
import sys

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from biomes import get_biome
from grid import Grid
from map_gen import generate_map
from spawn_points import compute_item_spawn_points, water_bank_spawns


def _source_tree(point, trees):
    px, py = point
    matches = [t for t in trees if t[1] == py - 20 and abs(t[0] - px) <= 15]
    assert len(matches) == 1
    return matches[0]


def test_every_item_type_has_an_entry():
    for biome_id in ("woodland", "desert"):
        biome = get_biome(biome_id)
        result = generate_map(biome_id, seed=31)
        assert set(result.item_spawn_points) == set(biome.item_spawn_counts)


def test_berries_are_exactly_the_berry_anchors():
    result = generate_map("woodland", seed=17)
    anchors = result.decorations.berry_positions
    assert result.item_spawn_points["berries"] == anchors
    if any(b.is_berry for b in result.decorations.bushes):
        assert result.item_spawn_points["berries"]


def test_tree_foods_use_disjoint_trees():
    result = generate_map("woodland", seed=23)
    trees = result.decorations.tree_positions
    mushrooms = result.item_spawn_points["mushrooms"]
    acorns = result.item_spawn_points["acorns"]

    assert 0 < len(mushrooms) <= 12
    assert len(acorns) <= 12
    mushroom_trees = {_source_tree(p, trees) for p in mushrooms}
    acorn_trees = {_source_tree(p, trees) for p in acorns}
    assert len(mushroom_trees) == len(mushrooms)
    assert not (mushroom_trees & acorn_trees)


def test_fish_spawn_on_dry_land_next_to_the_river():
    result = generate_map("woodland", seed=29)
    grid = Grid()
    fish = result.item_spawn_points["fish"]
    assert fish
    for x, y in fish:
        col, row = grid.to_cell(x, y)
        assert grid.key(col, row) not in result.water.cells
        assert grid.key(col - 1, row) in result.water.cells or grid.key(col + 1, row) in result.water.cells
    rows = [grid.to_cell(x, y)[1] for x, y in fish]
    assert rows == sorted(rows)
    assert all((row - 2) % 3 == 0 for row in rows)


def test_oasis_bank_spawns_one_per_edge_cell():
    result = generate_map("desert", seed=37)
    grid = Grid()
    points = water_bank_spawns(grid, result.water)
    assert points
    assert result.item_spawn_points["desert-fish"] == points
    for x, y in points:
        assert grid.key(*grid.to_cell(x, y)) not in result.water.cells


def test_rock_items_jitter_around_rocks():
    result = generate_map("desert", seed=41)
    beetles = result.item_spawn_points["beetles"]
    rocks = result.decorations.rock_positions
    assert len(beetles) == len(rocks)
    for (bx, by), (rx, ry) in zip(beetles, rocks):
        assert abs(bx - rx) <= 20 and abs(by - ry) <= 20


def test_building_materials_have_every_supply():
    result = generate_map("woodland", seed=43)
    rocks = len(result.decorations.rocks)
    # 3 per non-start clearing, 10 near edges, 1 per rock, 6 scattered
    expected = 3 * 2 + 10 + rocks + 6
    for item_type in ("planks", "stones", "straw"):
        assert len(result.item_spawn_points[item_type]) == expected
        for x, y in result.item_spawn_points[item_type]:
            assert -20 <= x <= 3220 and -20 <= y <= 2420


def test_rederiving_keeps_source_positions():
    result = generate_map("woodland", seed=47)
    biome = get_biome("woodland")
    grid = Grid()

    first = compute_item_spawn_points(biome, result.decorations, result.water,
                                      result.clearings, grid, random.Random(1))
    second = compute_item_spawn_points(biome, result.decorations, result.water,
                                       result.clearings, grid, random.Random(2))

    assert first["berries"] == second["berries"]
    assert first["fish"] == second["fish"]
    trees = result.decorations.tree_positions
    for points in (first["mushrooms"], second["mushrooms"]):
        assert {_source_tree(p, trees) for p in points} <= set(trees)
    assert len(first["planks"]) == len(second["planks"])

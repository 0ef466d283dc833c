# spawn_points.py - Collectible item spawn points derived from placed features
"""
Item spawn points are never rolled independently: each item type takes its
candidates from the map feature it belongs to, so berries sit under berry
bushes, fish along the water and so on.

Roles (declared per biome in ITEM_ROLES):
    berry - exactly the berry bush anchors
    tree  - under a random tree; tree-food types split the shuffled tree list
            into disjoint slices of up to TREE_FOOD_PER_TYPE trees
    water - along the water's edge
    rock  - around every rock
Building materials (any item named in a portal stage cost) are spread over the
non-start clearings, the map edges, the rocks, and a few uniform draws, so
there is always more than one supply.

Item types without a rule still get an (empty) entry.
"""

import logging
from typing import Dict, List, Tuple

from constants import (
    TREE_FOOD_PER_TYPE, TREE_FOOD_JITTER_X, TREE_FOOD_OFFSET_Y, ROCK_ITEM_JITTER,
    RIVER_BANK_FIRST_ROW, RIVER_BANK_ROW_STEP,
    MATERIAL_PER_CLEARING, MATERIAL_CLEARING_JITTER, MATERIAL_EDGE_COUNT,
    MATERIAL_EDGE_INSET, MATERIAL_EDGE_DEPTH, MATERIAL_SCATTER_COUNT, MATERIAL_SCATTER_MARGIN,
    DIRECTIONS,
)
from water import OASIS

logger = logging.getLogger(__name__)

Point = Tuple[float, float]


def water_bank_spawns(grid, water) -> List[Point]:
    """
    Dry positions along the water's edge.

    Oasis: one position per pond edge cell (the first dry neighbour found).
    River: one position every RIVER_BANK_ROW_STEP rows, on the dry cell next
    to the first water cell of that row.
    """
    points = []
    cells = water.cells

    if water.kind == OASIS:
        for key in sorted(cells):
            col, row = grid.from_key(key)
            for dc, dr in DIRECTIONS:
                ncol, nrow = col + dc, row + dr
                if grid.in_bounds(ncol, nrow) and grid.key(ncol, nrow) not in cells:
                    points.append(grid.to_world(ncol, nrow))
                    break
        return points

    for row in range(RIVER_BANK_FIRST_ROW, grid.rows - RIVER_BANK_FIRST_ROW, RIVER_BANK_ROW_STEP):
        for col in range(grid.cols):
            if grid.key(col, row) not in cells:
                continue
            left_dry = grid.in_bounds(col - 1, row) and grid.key(col - 1, row) not in cells
            right_dry = grid.in_bounds(col + 1, row) and grid.key(col + 1, row) not in cells
            if left_dry or right_dry:
                points.append(grid.to_world(col - 1 if left_dry else col + 1, row))
                break
    return points


def _jitter(rng, x, y, radius):
    return (x + rng.uniform(-radius, radius), y + rng.uniform(-radius, radius))


def material_spawns(grid, clearings, rock_positions, rng) -> List[Point]:
    """Spawn candidates for one building material type."""
    points = []
    width, height = grid.world_width, grid.world_height

    # In clearings (skip first - player start)
    for c in clearings[1:]:
        for _ in range(MATERIAL_PER_CLEARING):
            points.append(_jitter(rng, c.cx, c.cy, MATERIAL_CLEARING_JITTER))

    # Near map edges
    for _ in range(MATERIAL_EDGE_COUNT):
        depth = MATERIAL_EDGE_INSET + rng.random() * MATERIAL_EDGE_DEPTH
        edge = rng.randrange(4)
        if edge == 0:
            points.append((depth, rng.random() * height))
        elif edge == 1:
            points.append((width - depth, rng.random() * height))
        elif edge == 2:
            points.append((rng.random() * width, depth))
        else:
            points.append((rng.random() * width, height - depth))

    # Near rocks
    for rx, ry in rock_positions:
        points.append(_jitter(rng, rx, ry, ROCK_ITEM_JITTER))

    # Scattered
    margin = MATERIAL_SCATTER_MARGIN
    for _ in range(MATERIAL_SCATTER_COUNT):
        points.append((margin + rng.random() * (width - 2 * margin),
                       margin + rng.random() * (height - 2 * margin)))

    return points


def compute_item_spawn_points(biome, decorations, water, clearings, grid, rng) -> Dict[str, List[Point]]:
    """
    Build the item type -> candidate positions registry.

    Args:
        biome: Biome whose item roster, roles and portal costs drive the rules
        decorations: DecorationResult of the decoration pass
        water: Finished WaterLayout
        clearings: Finished clearing list (first one is the player start)
        grid: Grid of the map
        rng: random.Random used for shuffles and jitter only
    """
    roles = biome.item_roles
    points = {item_type: [] for item_type in biome.item_spawn_counts}

    # Food at berry bushes
    for item_type in roles.berry:
        if item_type in points:
            points[item_type].extend(decorations.berry_positions)

    # Food under trees, each type on its own trees
    shuffled_trees = list(decorations.tree_positions)
    rng.shuffle(shuffled_trees)
    tree_idx = 0
    for item_type in roles.tree:
        if item_type not in points:
            continue
        count = min(TREE_FOOD_PER_TYPE, len(shuffled_trees) - tree_idx)
        for tx, ty in shuffled_trees[tree_idx:tree_idx + count]:
            points[item_type].append((tx + rng.uniform(-TREE_FOOD_JITTER_X, TREE_FOOD_JITTER_X),
                                      ty + TREE_FOOD_OFFSET_Y))
        tree_idx += count

    # Food along the water
    water_types = [t for t in roles.water if t in points]
    if water_types:
        bank_points = water_bank_spawns(grid, water)
        for item_type in water_types:
            points[item_type].extend(bank_points)

    # Food around rocks
    rock_positions = decorations.rock_positions
    for item_type in roles.rock:
        if item_type not in points:
            continue
        for rx, ry in rock_positions:
            points[item_type].append(_jitter(rng, rx, ry, ROCK_ITEM_JITTER))

    # Building materials, data-driven from the portal costs
    for item_type in biome.building_materials():
        if item_type not in points:
            continue
        points[item_type].extend(material_spawns(grid, clearings, rock_positions, rng))

    for item_type, candidates in points.items():
        if not candidates:
            logger.debug("Item '%s' has no spawn candidates", item_type)
    return points

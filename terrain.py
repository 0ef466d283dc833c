# terrain.py - Per-cell terrain classification and water colliders

from dataclasses import dataclass
from typing import List

import numpy as np

from clearings import is_in_clearing
from world_objects import WATER as WATER_OBSTACLE

# Cell type constants
BASE = 0
WATER = 1
CROSSING = 2
BANK = 3
CLEARING = 4

TILE_NAMES = {
    BASE: "base",
    WATER: "water",
    CROSSING: "crossing",
    BANK: "bank",
    CLEARING: "clearing",
}


@dataclass(frozen=True)
class WaterTile:
    """Handle for one blocking water tile, for ambient animation by the renderer."""
    col: int
    row: int
    x: float
    y: float
    texture: str


class TerrainLayout:
    """
    Tile type and texture variant of every cell.

    `kinds` and `variants` are (rows, cols) numpy arrays indexed [row, col].
    """

    def __init__(self, terrain, kinds, variants, water_tiles):
        self.terrain = terrain
        self.kinds = kinds
        self.variants = variants
        self.water_tiles: List[WaterTile] = water_tiles

    def kind_at(self, col, row):
        return int(self.kinds[row, col])

    def texture_key(self, col, row):
        return texture_key(self.terrain, self.kind_at(col, row), int(self.variants[row, col]))

    def count(self, kind):
        return int(np.sum(self.kinds == kind))

    def to_dict(self):
        return {
            'kinds': self.kinds.tolist(),
            'variants': self.variants.tolist(),
            'legend': {str(k): v for k, v in TILE_NAMES.items()},
        }


def texture_key(terrain, kind, variant):
    """Texture key for a tile class and variant index, as the asset pipeline names them."""
    if kind == WATER:
        return f"terrain-{terrain.water}-{variant}"
    if kind == CROSSING:
        base, count = terrain.crossing_tile, terrain.crossing_variants
    elif kind == BANK:
        base, count = terrain.bank_tile, terrain.bank_variants
    elif kind == CLEARING:
        base, count = terrain.clearing_tile, terrain.clearing_variants
    else:
        return f"{terrain.base}-{variant}"
    return f"{base}-{variant}" if count > 1 else base


def variant_count(terrain, kind):
    return {
        BASE: terrain.base_variants,
        WATER: terrain.water_variants,
        CROSSING: terrain.crossing_variants,
        BANK: terrain.bank_variants,
        CLEARING: terrain.clearing_variants,
    }[kind]


def classify(key, col, row, water, clearings):
    """Crossing > water > bank > clearing > base."""
    if key in water.crossing:
        return CROSSING
    if key in water.cells:
        return WATER
    if key in water.bank:
        return BANK
    if is_in_clearing(col, row, clearings):
        return CLEARING
    return BASE


def paint_terrain(grid, terrain, water, clearings, obstacles, rng):
    """
    Classify every cell in raster order and pick its texture variant.

    Every water cell that is not part of the crossing registers a tile-sized
    obstacle; this is the only source of water collision. Banks and crossings
    stay walkable.
    """
    kinds = np.full((grid.rows, grid.cols), BASE, dtype=np.int8)
    variants = np.zeros((grid.rows, grid.cols), dtype=np.int8)
    water_tiles = []
    tile = grid.tile_size

    for row in range(grid.rows):
        for col in range(grid.cols):
            key = grid.key(col, row)
            kind = classify(key, col, row, water, clearings)
            variant = rng.randrange(max(1, variant_count(terrain, kind)))
            kinds[row, col] = kind
            variants[row, col] = variant

            if kind == WATER:
                wx, wy = grid.to_world(col, row)
                obstacles.add(wx, wy, tile, tile, WATER_OBSTACLE)
                water_tiles.append(WaterTile(col=col, row=row, x=wx, y=wy,
                                             texture=texture_key(terrain, kind, variant)))

    return TerrainLayout(terrain, kinds, variants, water_tiles)

# decorations.py - Trees, bushes, rocks and flowers
"""
Decorations are scattered by bounded rejection sampling: pick a random cell,
throw it away if it is inside a clearing, in water, or too close to an
already placed decoration it must not crowd, and keep it otherwise.

Spacing rules (center to center, pixels):
    trees   - other trees (biome min_dist)
    bushes  - other bushes (min_dist) and trees (tree_clearance)
    rocks   - other rocks (min_dist) and trees (tree_clearance)
    flowers - none; they scatter uniformly and only avoid clearings/water

Trees and rocks register a small obstacle at their base. Bushes and flowers
are walk-through.

When the attempt budget runs out before the quota is filled the result is
simply smaller; that is not an error.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from constants import (
    TREE_ATTEMPT_FACTOR, BUSH_ATTEMPT_FACTOR, ROCK_ATTEMPT_FACTOR, DECORATION_BORDER,
    BERRY_ANCHOR_OFFSET, FLOWER_MARGIN, TREE_COLLIDER, ROCK_COLLIDER,
)
from clearings import is_in_clearing
from world_objects import TREE as TREE_OBSTACLE, ROCK as ROCK_OBSTACLE

logger = logging.getLogger(__name__)

TREE = 'tree'
BUSH = 'bush'
ROCK = 'rock'
FLOWER = 'flower'

PLAIN = 'plain'
BERRY = 'berry'


@dataclass(frozen=True)
class Decoration:
    """A single placed decoration."""
    kind: str  # 'tree', 'bush', 'rock' or 'flower'
    x: float   # World coords
    y: float
    texture: str
    variant: Optional[str] = None  # 'plain' or 'berry' for bushes
    anchor: Optional[Tuple[float, float]] = None  # Item spawn anchor (berry bushes only)

    @property
    def position(self):
        return (self.x, self.y)

    @property
    def is_berry(self):
        return self.variant == BERRY

    def to_dict(self) -> dict:
        data = {'kind': self.kind, 'x': self.x, 'y': self.y, 'texture': self.texture}
        if self.variant is not None:
            data['variant'] = self.variant
        if self.anchor is not None:
            data['anchor'] = list(self.anchor)
        return data


@dataclass(frozen=True)
class DecorationResult:
    """Everything the decoration pass placed, grouped by kind."""
    trees: List[Decoration] = field(default_factory=list)
    bushes: List[Decoration] = field(default_factory=list)
    rocks: List[Decoration] = field(default_factory=list)
    flowers: List[Decoration] = field(default_factory=list)

    @property
    def tree_positions(self):
        return [t.position for t in self.trees]

    @property
    def rock_positions(self):
        return [r.position for r in self.rocks]

    @property
    def berry_positions(self):
        """Spawn anchors of every berry bush, in placement order."""
        return [b.anchor for b in self.bushes if b.is_berry]

    def all(self):
        return self.trees + self.bushes + self.rocks + self.flowers

    def to_dict(self) -> dict:
        return {
            'trees': [d.to_dict() for d in self.trees],
            'bushes': [d.to_dict() for d in self.bushes],
            'rocks': [d.to_dict() for d in self.rocks],
            'flowers': [d.to_dict() for d in self.flowers],
        }


def _too_close(x, y, others, min_dist):
    for d in others:
        if math.hypot(x - d.x, y - d.y) < min_dist:
            return True
    return False


class DecorationPlacer:
    """Places every decoration class for one map."""

    def __init__(self, grid, config, clearings, water, obstacles, rng):
        """
        Args:
            grid: Grid of the map being generated
            config: DecorationConfig of the biome
            clearings: Finished clearing list
            water: Finished WaterLayout
            obstacles: ObstacleGroup that trees and rocks register into
            rng: random.Random for every draw
        """
        self.grid = grid
        self.config = config
        self.clearings = clearings
        self.water = water
        self.obstacles = obstacles
        self.rng = rng

    def place_all(self):
        trees = self.place_trees()
        bushes = self.place_bushes(trees)
        rocks = self.place_rocks(trees)
        flowers = self.place_flowers()
        return DecorationResult(trees=trees, bushes=bushes, rocks=rocks, flowers=flowers)

    # ─── Helpers ───

    def _random_cell(self):
        border = DECORATION_BORDER
        col = border + self.rng.randrange(self.grid.cols - 2 * border)
        row = border + self.rng.randrange(self.grid.rows - 2 * border)
        return col, row

    def _is_excluded(self, col, row):
        """Clearings and water never get decorations."""
        if is_in_clearing(col, row, self.clearings):
            return True
        return self.grid.key(col, row) in self.water.cells

    def _log_fill(self, kind, placed, target):
        if placed < target:
            logger.debug("Placed %d/%d %ss", placed, target, kind)

    # ─── Trees ───

    def _tree_texture(self):
        cfg = self.config.trees
        if cfg.whole_trees:
            return self.rng.choice(cfg.whole_trees)
        if cfg.canopies:
            return self.rng.choice(cfg.canopies)
        return cfg.trunk or TREE

    def place_trees(self):
        cfg = self.config.trees
        trees = []

        for _ in range(cfg.count * TREE_ATTEMPT_FACTOR):
            if len(trees) >= cfg.count:
                break

            col, row = self._random_cell()
            if self._is_excluded(col, row):
                continue

            wx, wy = self.grid.to_world(col, row)
            if _too_close(wx, wy, trees, cfg.min_dist):
                continue

            offset_y, w, h = TREE_COLLIDER
            self.obstacles.add(wx, wy + offset_y, w, h, TREE_OBSTACLE)
            trees.append(Decoration(kind=TREE, x=wx, y=wy, texture=self._tree_texture()))

        self._log_fill(TREE, len(trees), cfg.count)
        return trees

    # ─── Bushes ───

    def place_bushes(self, trees):
        """Bushes keep clear of trees and each other; some of them carry berries."""
        cfg = self.config.bushes
        bushes = []

        for _ in range(cfg.count * BUSH_ATTEMPT_FACTOR):
            if len(bushes) >= cfg.count:
                break

            col, row = self._random_cell()
            if self._is_excluded(col, row):
                continue

            wx, wy = self.grid.to_world(col, row)
            if _too_close(wx, wy, trees, cfg.tree_clearance):
                continue
            if _too_close(wx, wy, bushes, cfg.min_dist):
                continue

            if self.rng.random() < cfg.berry_chance:
                bushes.append(Decoration(kind=BUSH, x=wx, y=wy, texture=cfg.berry,
                                         variant=BERRY, anchor=(wx, wy - BERRY_ANCHOR_OFFSET)))
            else:
                bushes.append(Decoration(kind=BUSH, x=wx, y=wy, texture=cfg.plain, variant=PLAIN))

        self._log_fill(BUSH, len(bushes), cfg.count)
        return bushes

    # ─── Rocks ───

    def place_rocks(self, trees):
        cfg = self.config.rocks
        rocks = []

        for _ in range(cfg.count * ROCK_ATTEMPT_FACTOR):
            if len(rocks) >= cfg.count:
                break

            col, row = self._random_cell()
            if self._is_excluded(col, row):
                continue

            wx, wy = self.grid.to_world(col, row)
            if _too_close(wx, wy, trees, cfg.tree_clearance):
                continue
            if _too_close(wx, wy, rocks, cfg.min_dist):
                continue

            offset_y, w, h = ROCK_COLLIDER
            self.obstacles.add(wx, wy + offset_y, w, h, ROCK_OBSTACLE)
            rocks.append(Decoration(kind=ROCK, x=wx, y=wy, texture=cfg.texture))

        self._log_fill(ROCK, len(rocks), cfg.count)
        return rocks

    # ─── Flowers ───

    def place_flowers(self):
        """One uniform draw per flower; draws landing in a clearing or water are dropped."""
        cfg = self.config.flowers
        flowers = []
        if not cfg.variants:
            return flowers

        margin = FLOWER_MARGIN
        for _ in range(cfg.count):
            wx = margin + self.rng.random() * (self.grid.world_width - 2 * margin)
            wy = margin + self.rng.random() * (self.grid.world_height - 2 * margin)
            col, row = self.grid.to_cell(wx, wy)
            if self._is_excluded(col, row):
                continue
            flowers.append(Decoration(kind=FLOWER, x=wx, y=wy, texture=self.rng.choice(cfg.variants)))

        return flowers

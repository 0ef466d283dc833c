# animal_zones.py - Candidate spawn points for each animal type
"""
Every animal type in a biome's roster gets a list of candidate spawn points,
oversampled to twice its population so the spawner has room to jitter and
de-duplicate.

Generic rule:
    bold animals accept any valid sample; shy animals additionally have to be
    near one of the map edges.

Biome variants can replace the generic rule per animal type with a policy
object (see biomes/woodland.py and biomes/desert.py). A policy is any callable
policy(context, count, rng) -> list of (x, y); the ones defined here also
expose accepts(context, x, y) describing the spatial rule they enforce.
"""

import logging
import math
from dataclasses import dataclass
from typing import Dict, List, Tuple

from constants import (
    ANIMAL_CANDIDATE_FACTOR, ANIMAL_ATTEMPT_FACTOR, ANIMAL_SPAWN_MARGIN,
    ANIMAL_TREE_CLEARANCE, ANIMAL_MIN_SPACING, SHY_EDGE_FRACTION, WATER_POINT_SEARCH,
)
from clearings import is_in_clearing

logger = logging.getLogger(__name__)

Point = Tuple[float, float]


@dataclass(frozen=True)
class SpawnContext:
    """Finished map features the animal placement rules look at."""
    grid: object
    clearings: list
    water: object
    trees: List[Point]

    @property
    def width(self):
        return self.grid.world_width

    @property
    def height(self):
        return self.grid.world_height


def _dist(x1, y1, x2, y2):
    return math.hypot(x1 - x2, y1 - y2)


# =============================================================================
# PREDICATES
# =============================================================================
# A predicate is predicate(context, x, y) -> bool

def anywhere(ctx, x, y):
    return True


def near_edges(margin_x, margin_y, edges=("left", "right", "top", "bottom")):
    """Within margin_x of the left/right edge or margin_y of the top/bottom edge."""
    def predicate(ctx, x, y):
        return (("left" in edges and x < margin_x)
                or ("right" in edges and x > ctx.width - margin_x)
                or ("top" in edges and y < margin_y)
                or ("bottom" in edges and y > ctx.height - margin_y))
    return predicate


def shy_edges(ctx, x, y):
    """Generic rule for shy animals: within a quarter of the map of any edge."""
    return near_edges(ctx.width * SHY_EDGE_FRACTION, ctx.height * SHY_EDGE_FRACTION)(ctx, x, y)


def far_from_clearings(min_dist):
    """Farther than min_dist from every clearing center."""
    def predicate(ctx, x, y):
        return all(_dist(x, y, c.cx, c.cy) > min_dist for c in ctx.clearings)
    return predicate


def dense_trees(radius, min_trees):
    """At least min_trees trees within radius."""
    def predicate(ctx, x, y):
        nearby = 0
        for tx, ty in ctx.trees:
            if _dist(x, y, tx, ty) < radius:
                nearby += 1
                if nearby >= min_trees:
                    return True
        return False
    return predicate


def inside_bounds(margin):
    """Farther than margin from every edge."""
    def predicate(ctx, x, y):
        return margin < x < ctx.width - margin and margin < y < ctx.height - margin
    return predicate


def away_from_sides(margin):
    """Farther than margin from the left and right edges."""
    def predicate(ctx, x, y):
        return margin < x < ctx.width - margin
    return predicate


# =============================================================================
# SAMPLING
# =============================================================================

def pick_spawn_points(ctx, count, rng, predicate=anywhere):
    """
    Rejection-sample up to `count` points.

    A sample is rejected when it is inside a clearing, on top of a tree,
    too close to an already accepted point, or fails `predicate`. Gives up
    after count * ANIMAL_ATTEMPT_FACTOR draws and returns what it has.
    """
    margin = ANIMAL_SPAWN_MARGIN
    points = []
    for _ in range(count * ANIMAL_ATTEMPT_FACTOR):
        if len(points) >= count:
            break

        x = margin + rng.random() * (ctx.width - 2 * margin)
        y = margin + rng.random() * (ctx.height - 2 * margin)

        col, row = ctx.grid.to_cell(x, y)
        if is_in_clearing(col, row, ctx.clearings):
            continue
        if any(_dist(x, y, tx, ty) < ANIMAL_TREE_CLEARANCE for tx, ty in ctx.trees):
            continue
        if any(_dist(x, y, px, py) < ANIMAL_MIN_SPACING for px, py in points):
            continue
        if predicate(ctx, x, y):
            points.append((x, y))
    return points


def water_edge_points(ctx, row_step=None):
    """
    Dry cells next to water, one per water cell.

    For every water cell (every `row_step`-th row when given) the nearest dry
    cell within WATER_POINT_SEARCH columns, scanning left to right, becomes a
    point at that cell's center.
    """
    grid = ctx.grid
    cells = ctx.water.cells
    points = []
    for key in sorted(cells):
        col, row = grid.from_key(key)
        if row_step and row % row_step != 0:
            continue
        for dc in range(-WATER_POINT_SEARCH, WATER_POINT_SEARCH + 1):
            ncol = col + dc
            if grid.in_bounds(ncol, row) and grid.key(ncol, row) not in cells:
                points.append(grid.to_world(ncol, row))
                break
    return points


# =============================================================================
# POLICIES
# =============================================================================

class SampledPolicy:
    """Rejection sampling filtered by a predicate."""

    def __init__(self, predicate=anywhere):
        self.predicate = predicate

    def __call__(self, ctx, count, rng):
        return pick_spawn_points(ctx, count, rng, self.predicate)

    def accepts(self, ctx, x, y):
        return self.predicate(ctx, x, y)


class WaterEdgePolicy:
    """
    Points on dry land right next to water.

    Falls back to unrestricted sampling when the water offers fewer points
    than requested.
    """

    def __init__(self, row_step=None):
        self.row_step = row_step
        self.fallback = SampledPolicy()

    def __call__(self, ctx, count, rng):
        points = water_edge_points(ctx, self.row_step)
        if len(points) < count:
            logger.debug("Only %d water edge points for %d animals, sampling anywhere",
                         len(points), count)
            return self.fallback(ctx, count, rng)
        rng.shuffle(points)
        return points[:count]

    def accepts(self, ctx, x, y, count=None):
        points = water_edge_points(ctx, self.row_step)
        if count is not None and len(points) < count:
            return self.fallback.accepts(ctx, x, y)
        return (x, y) in points


class ClearingRingPolicy:
    """Jittered points straight around clearing centers, no rejection sampling."""

    def __init__(self, jitter, per_clearing):
        self.jitter = jitter
        self.per_clearing = per_clearing

    def __call__(self, ctx, count, rng):
        points = []
        for c in ctx.clearings:
            for _ in range(self.per_clearing):
                points.append((c.cx + rng.uniform(-self.jitter, self.jitter),
                               c.cy + rng.uniform(-self.jitter, self.jitter)))
        return points[:count]

    def accepts(self, ctx, x, y):
        return any(abs(x - c.cx) <= self.jitter and abs(y - c.cy) <= self.jitter
                   for c in ctx.clearings)


def generic_policy(animal):
    """The default shy/bold rule for an animal config."""
    return SampledPolicy(shy_edges if animal.shy else anywhere)


def active_policy(biome, animal_type):
    """The policy that decides where `animal_type` spawns in `biome`."""
    return biome.animal_override(animal_type) or generic_policy(biome.animals[animal_type])


def compute_animal_spawn_zones(biome, ctx, rng) -> Dict[str, List[Point]]:
    """
    Candidate spawn points for every animal in the biome roster.

    Each list holds at most ANIMAL_CANDIDATE_FACTOR * population points.
    """
    zones = {}
    for animal_type, animal in biome.animals.items():
        wanted = animal.count * ANIMAL_CANDIDATE_FACTOR
        points = active_policy(biome, animal_type)(ctx, wanted, rng)[:wanted]
        if len(points) < wanted:
            logger.debug("Animal '%s': %d/%d spawn candidates", animal_type, len(points), wanted)
        zones[animal_type] = points
    return zones

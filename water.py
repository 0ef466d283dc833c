# water.py - Water feature synthesis (river paths and oasis ponds)
"""
Two interchangeable strategies produce the water cells of a map:

- RiverStrategy: a single 3-cell wide channel that meanders from the top row
  to the bottom row. Because it spans every row, a crossing can always be cut.
- OasisStrategy: 2-3 small elliptical ponds spread across the map. Ponds have
  no crossing; players walk around them.

Both return a WaterLayout and mark every water cell occupied on the grid.
"""

import math
from dataclasses import dataclass, field, replace
from typing import FrozenSet, List

from constants import (
    RIVER_WIDTH, RIVER_START_RANGE, RIVER_AMPLITUDE_RANGE, RIVER_FREQUENCY_RANGE,
    RIVER_EDGE_INSET, POND_COUNT_RANGE, POND_ATTEMPTS_PER_POND, POND_MIN_SPACING,
    POND_EDGE_MARGIN, POND_RADIUS_RANGE,
)
from grid import dilate

RIVER = "river"
OASIS = "oasis"


@dataclass(frozen=True)
class Pond:
    """One elliptical oasis pond."""
    col: int
    row: int
    rx: int
    ry: int
    cells: FrozenSet[int] = frozenset()


@dataclass(frozen=True)
class WaterLayout:
    """
    Water cells of one map plus the cells derived from them.

    All cell sets hold packed grid keys (see Grid.key).
    """
    kind: str
    cells: FrozenSet[int]
    bank: FrozenSet[int]
    ponds: List[Pond] = field(default_factory=list)
    crossing: FrozenSet[int] = frozenset()

    def with_crossing(self, crossing):
        return replace(self, crossing=frozenset(crossing))

    def is_water(self, key):
        return key in self.cells

    def blocks(self, key):
        """Water blocks movement everywhere except on the crossing."""
        return key in self.cells and key not in self.crossing


def bank_cells(grid, cells):
    """Cells 8-adjacent to water but not water themselves."""
    water = grid.mask(cells)
    return grid.keys_of(dilate(water) & ~water)


def _round_half_up(value):
    return int(math.floor(value + 0.5))


class RiverStrategy:
    """Meandering full-height channel."""

    kind = RIVER
    has_crossing = True

    def __init__(self, width=RIVER_WIDTH):
        self.width = width

    def synthesize(self, grid, rng):
        cells = set()
        half = self.width // 2

        base = grid.cols * rng.uniform(*RIVER_START_RANGE)
        amplitude = rng.uniform(*RIVER_AMPLITUDE_RANGE)
        frequency = rng.uniform(*RIVER_FREQUENCY_RANGE)
        phase = rng.uniform(0, math.pi * 2)

        lo = RIVER_EDGE_INSET
        hi = grid.cols - 1 - RIVER_EDGE_INSET
        for row in range(grid.rows):
            center = base + math.sin(row * frequency + phase) * amplitude
            center = max(lo, min(center, hi))
            center_col = _round_half_up(center)
            for w in range(-half, half + 1):
                col = center_col + w
                if grid.in_bounds(col, row):
                    cells.add(grid.key(col, row))
                    grid.mark_occupied(col, row)

        cells = frozenset(cells)
        return WaterLayout(kind=self.kind, cells=cells, bank=bank_cells(grid, cells))


class OasisStrategy:
    """A few spread-out elliptical ponds."""

    kind = OASIS
    has_crossing = False

    def synthesize(self, grid, rng):
        pond_count = rng.randint(*POND_COUNT_RANGE)
        margin = POND_EDGE_MARGIN

        centers = []
        for _ in range(pond_count * POND_ATTEMPTS_PER_POND):
            if len(centers) >= pond_count:
                break
            col = margin + rng.randrange(max(1, grid.cols - 2 * margin))
            row = margin + rng.randrange(max(1, grid.rows - 2 * margin))
            if any(math.hypot(col - pc, row - pr) < POND_MIN_SPACING for pc, pr in centers):
                continue
            centers.append((col, row))

        ponds = []
        cells = set()
        for cx, cy in centers:
            rx = rng.randint(*POND_RADIUS_RANGE)
            ry = rng.randint(*POND_RADIUS_RANGE)
            pond_cells = set()
            for row in range(cy - ry, cy + ry + 1):
                for col in range(cx - rx, cx + rx + 1):
                    if not grid.in_bounds(col, row):
                        continue
                    dx = (col - cx) / rx
                    dy = (row - cy) / ry
                    if dx * dx + dy * dy <= 1.0:
                        pond_cells.add(grid.key(col, row))
                        grid.mark_occupied(col, row)
            ponds.append(Pond(col=cx, row=cy, rx=rx, ry=ry, cells=frozenset(pond_cells)))
            cells |= pond_cells

        cells = frozenset(cells)
        return WaterLayout(kind=self.kind, cells=cells, bank=bank_cells(grid, cells), ponds=ponds)


WATER_STRATEGIES = {
    RIVER: RiverStrategy,
    OASIS: OasisStrategy,
}


def get_water_strategy(water_type):
    """Look up the strategy for a biome's `water_type`."""
    try:
        return WATER_STRATEGIES[water_type]()
    except KeyError:
        raise ValueError(f"Unknown water type: {water_type}") from None

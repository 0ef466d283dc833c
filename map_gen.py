# map_gen.py - Procedural map generation for one biome
"""
MapGenerator turns a Biome into a playable map:

    1. Water (river or oasis ponds)
    2. Clearings (first one is the player start)
    3. Crossing over the river
    4. Terrain tiles + water colliders
    5. Decorations (trees, bushes, rocks, flowers)
    6. Item spawn points
    7. Animal spawn zones

Each run is validated before it is returned. A run that leaves the river
without a crossing, or drops a clearing on water, raises GenerationError;
generate() retries with fresh draws from the same random source and only lets
the error through when every attempt failed.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from constants import GENERATION_MAX_ATTEMPTS, SEED_RANGE
from animal_zones import SpawnContext, compute_animal_spawn_zones
from biomes import Biome, get_biome
from clearings import Clearing, place_clearings, find_clearing_overlap
from crossing import place_crossing
from decorations import DecorationPlacer, DecorationResult
from grid import Grid
from spawn_points import compute_item_spawn_points
from terrain import TerrainLayout, WaterTile, paint_terrain
from water import WaterLayout
from world_objects import ObstacleGroup

logger = logging.getLogger(__name__)

Point = Tuple[float, float]

# GenerationError kinds
UNREACHABLE = 'unreachable'
CLEARING_OVERLAP = 'clearing_overlap'


class GenerationError(Exception):
    """A generated map is broken and must not be used."""

    def __init__(self, kind, message):
        super().__init__(message)
        self.kind = kind


@dataclass(frozen=True)
class GenerationResult:
    """Everything one generation run produced. Read-only for the caller."""
    seed: int
    biome_id: str
    cols: int
    rows: int
    house_plot_position: Point
    item_spawn_points: Dict[str, List[Point]]
    animal_spawn_zones: Dict[str, List[Point]]
    obstacles: ObstacleGroup
    clearings: List[Clearing]
    water_tiles: List[WaterTile]
    water: WaterLayout
    terrain: TerrainLayout
    decorations: DecorationResult = field(default_factory=DecorationResult)

    @property
    def start_clearing(self):
        return self.clearings[0]

    def to_dict(self) -> dict:
        """JSON-serializable snapshot, for debugging and previews."""
        return {
            "seed": self.seed,
            "biome": self.biome_id,
            "cols": self.cols,
            "rows": self.rows,
            "house_plot_position": list(self.house_plot_position),
            "clearings": [c.to_dict() for c in self.clearings],
            "water": sorted(self.water.cells),
            "bank": sorted(self.water.bank),
            "crossing": sorted(self.water.crossing),
            "terrain": self.terrain.to_dict(),
            "decorations": self.decorations.to_dict(),
            "obstacles": self.obstacles.to_list(),
            "item_spawn_points": {k: [list(p) for p in v] for k, v in self.item_spawn_points.items()},
            "animal_spawn_zones": {k: [list(p) for p in v] for k, v in self.animal_spawn_zones.items()},
        }


class MapGenerator:
    def __init__(self, biome: Biome, seed: Optional[int] = None):
        self.biome = biome
        self.seed = seed if seed is not None else random.randint(*SEED_RANGE)
        self.rng = random.Random(self.seed)

    def generate(self, max_attempts=GENERATION_MAX_ATTEMPTS) -> GenerationResult:
        """Generate a validated map, retrying broken runs up to max_attempts times."""
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")
        error = None
        for attempt in range(1, max_attempts + 1):
            try:
                result = self.generate_once()
            except GenerationError as exc:
                error = exc
                logger.warning("Map attempt %d/%d for '%s' (seed %s) rejected: %s",
                               attempt, max_attempts, self.biome.id, self.seed, exc)
                continue
            logger.info(
                "Generated '%s' map (seed %s, attempt %d): %d water cells, %d trees, "
                "%d bushes, %d rocks, %d obstacles",
                self.biome.id, self.seed, attempt, len(result.water.cells),
                len(result.decorations.trees), len(result.decorations.bushes),
                len(result.decorations.rocks), len(result.obstacles),
            )
            return result
        raise error

    def generate_once(self) -> GenerationResult:
        """Run the pipeline a single time. Raises GenerationError for a broken map."""
        biome = self.biome
        rng = self.rng
        grid = Grid(biome.world_width, biome.world_height, biome.tile_size)
        obstacles = ObstacleGroup()

        # 1. Water
        strategy = biome.water_strategy()
        water = strategy.synthesize(grid, rng)

        # 2. Clearings
        clearings = place_clearings(grid, rng)

        # 3. Crossing
        if strategy.has_crossing:
            water = water.with_crossing(place_crossing(grid, water.cells))

        self._validate(grid, strategy, water, clearings)

        # 4. Terrain
        terrain = paint_terrain(grid, biome.terrain, water, clearings, obstacles, rng)

        # 5. Decorations
        placer = DecorationPlacer(grid, biome.decorations, clearings, water, obstacles, rng)
        decorations = placer.place_all()

        # 6. Item spawn points
        item_spawn_points = compute_item_spawn_points(biome, decorations, water, clearings, grid, rng)

        # 7. Animal spawn zones
        context = SpawnContext(grid=grid, clearings=clearings, water=water,
                               trees=decorations.tree_positions)
        animal_spawn_zones = compute_animal_spawn_zones(biome, context, rng)

        house_plot = clearings[0]
        return GenerationResult(
            seed=self.seed,
            biome_id=biome.id,
            cols=grid.cols,
            rows=grid.rows,
            house_plot_position=(house_plot.cx, house_plot.cy),
            item_spawn_points=item_spawn_points,
            animal_spawn_zones=animal_spawn_zones,
            obstacles=obstacles,
            clearings=clearings,
            water_tiles=terrain.water_tiles,
            water=water,
            terrain=terrain,
            decorations=decorations,
        )

    def _validate(self, grid, strategy, water, clearings):
        if strategy.has_crossing and not water.crossing:
            raise GenerationError(UNREACHABLE, "no water row to carve a crossing through")

        overlap = find_clearing_overlap(grid, clearings, water.cells)
        if overlap is not None:
            index, clearing = overlap
            raise GenerationError(CLEARING_OVERLAP, f"clearing {index} {clearing!r} sits on water")


def generate_map(biome, seed=None, max_attempts=GENERATION_MAX_ATTEMPTS):
    """Generate a map for a Biome instance or a registered biome id."""
    if not isinstance(biome, Biome):
        biome = get_biome(biome)
    return MapGenerator(biome, seed=seed).generate(max_attempts=max_attempts)

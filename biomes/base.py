# base.py - Biome configuration model
"""
A Biome bundles everything one generation run is parameterized by: terrain
palette, decoration quotas, animal roster, item roster and the building
progression costs.

Biome data is written as plain JSON-serializable dicts (see woodland.py and
desert.py). Biome parses that data into typed sections once, so the generator
never digs through raw dicts.

Biome variants (Woodland, Desert) subclass Biome to add their animal-zone
overrides. A Biome built straight from a dict uses the generic shy/bold rule
for every animal.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from constants import (
    WORLD_WIDTH, WORLD_HEIGHT, TILE_SIZE, CROSSING_TILE,
    BUSH_MIN_DIST, BUSH_TREE_CLEARANCE, ROCK_MIN_DIST, ROCK_TREE_CLEARANCE,
)
from water import get_water_strategy


@dataclass(frozen=True)
class TerrainConfig:
    base: str
    base_variants: int
    water: str
    water_variants: int
    water_type: str
    clearing_tile: str
    bank_tile: str
    crossing_tile: str = CROSSING_TILE
    clearing_variants: int = 1
    bank_variants: int = 1
    crossing_variants: int = 1


@dataclass(frozen=True)
class TreeConfig:
    count: int
    min_dist: float
    trunk: Optional[str] = None
    canopies: List[str] = field(default_factory=list)
    whole_trees: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class BushConfig:
    count: int
    berry_chance: float
    plain: str
    berry: str
    min_dist: float = BUSH_MIN_DIST
    tree_clearance: float = BUSH_TREE_CLEARANCE


@dataclass(frozen=True)
class RockConfig:
    count: int
    texture: str
    min_dist: float = ROCK_MIN_DIST
    tree_clearance: float = ROCK_TREE_CLEARANCE


@dataclass(frozen=True)
class FlowerConfig:
    count: int
    variants: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class DecorationConfig:
    trees: TreeConfig
    bushes: BushConfig
    rocks: RockConfig
    flowers: FlowerConfig


@dataclass(frozen=True)
class AnimalConfig:
    type: str
    count: int
    shy: bool = False
    tameable: bool = True
    speed: float = 0
    flee_speed: float = 0
    texture: Optional[str] = None
    favorite_food: Optional[str] = None
    required_feedings: int = 1


@dataclass(frozen=True)
class PortalStage:
    name: str
    cost: Dict[str, int]


@dataclass(frozen=True)
class ItemRoles:
    """Which item types spawn from which map feature."""
    berry: List[str] = field(default_factory=list)
    tree: List[str] = field(default_factory=list)
    water: List[str] = field(default_factory=list)
    rock: List[str] = field(default_factory=list)


def _decorations_from_dict(data):
    return DecorationConfig(
        trees=TreeConfig(**data["trees"]),
        bushes=BushConfig(**data["bushes"]),
        rocks=RockConfig(**data["rocks"]),
        flowers=FlowerConfig(**data.get("flowers", {"count": 0})),
    )


class Biome:
    """
    One biome's full configuration.

    Subclasses set `ANIMAL_OVERRIDES` to replace the generic animal placement
    rule for named animal types. An override is a callable
    policy(context, count, rng) -> list of (x, y) (see animal_zones.py).
    """

    ANIMAL_OVERRIDES: Dict[str, Callable] = {}

    def __init__(self, data):
        self.id = data["id"]
        self.name = data.get("name", self.id.title())
        self.next_biome = data.get("next_biome")
        self.background_color = data.get("background_color")

        self.world_width = data.get("world_width", WORLD_WIDTH)
        self.world_height = data.get("world_height", WORLD_HEIGHT)
        self.tile_size = data.get("tile_size", TILE_SIZE)

        self.terrain = TerrainConfig(**data["terrain"])
        self.decorations = _decorations_from_dict(data["decorations"])
        self.animals = {
            animal_type: AnimalConfig(**{"type": animal_type, **cfg})
            for animal_type, cfg in data.get("animals", {}).items()
        }
        self.item_spawn_counts = dict(data.get("item_spawn_counts", {}))
        self.portal_stages = [
            PortalStage(name=stage["name"], cost=dict(stage["cost"]))
            for stage in data.get("portal_stages", [])
        ]
        self.item_roles = ItemRoles(**data.get("item_roles", {}))

        # Fail on a bad water type now, not halfway through generation
        self.water_strategy()

    @classmethod
    def from_dict(cls, data):
        """Build a biome from a raw config dict."""
        return cls(data)

    def water_strategy(self):
        """Fresh water strategy instance for this biome's `water_type`."""
        return get_water_strategy(self.terrain.water_type)

    def building_materials(self):
        """Item types named in any progression-stage cost, in first-seen order."""
        mats = []
        for stage in self.portal_stages:
            for item_type in stage.cost:
                if item_type not in mats:
                    mats.append(item_type)
        return mats

    def animal_override(self, animal_type):
        """Override policy for an animal type, or None to use the generic rule."""
        return self.ANIMAL_OVERRIDES.get(animal_type)

    def __repr__(self):
        return f"<{type(self).__name__} '{self.id}'>"

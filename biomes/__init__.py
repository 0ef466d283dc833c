# biomes - Biome configurations and the biome registry
"""
Each biome module holds the data for one biome (terrain palette, decoration
quotas, animal roster, items, portal costs) plus its Biome variant class.

    get_biome('desert')          -> Desert instance
    get_next_biome('woodland')   -> the biome after woodland, or None
    find_animal_config('camel')  -> AnimalConfig from whichever biome has it
"""

from .base import (
    Biome,
    TerrainConfig,
    DecorationConfig,
    TreeConfig,
    BushConfig,
    RockConfig,
    FlowerConfig,
    AnimalConfig,
    PortalStage,
    ItemRoles,
)
from .woodland import Woodland
from .desert import Desert

BIOMES = {
    "woodland": Woodland(),
    "desert": Desert(),
}

DEFAULT_BIOME = "woodland"


def get_biome(biome_id):
    """Get a biome by id. Unknown ids fall back to the woodland."""
    return BIOMES.get(biome_id) or BIOMES[DEFAULT_BIOME]


def get_next_biome(current_id):
    """Get the biome after the given one (or None at the end of the progression)."""
    current = get_biome(current_id)
    return get_biome(current.next_biome) if current.next_biome else None


def find_animal_config(animal_type):
    """
    Search ALL biomes for an animal config by type name.
    Used to restore tamed animals that originated in a different biome.
    """
    for biome in BIOMES.values():
        if animal_type in biome.animals:
            return biome.animals[animal_type]
    return None


__all__ = [
    'Biome',
    'Woodland',
    'Desert',
    'TerrainConfig',
    'DecorationConfig',
    'TreeConfig',
    'BushConfig',
    'RockConfig',
    'FlowerConfig',
    'AnimalConfig',
    'PortalStage',
    'ItemRoles',
    'BIOMES',
    'DEFAULT_BIOME',
    'get_biome',
    'get_next_biome',
    'find_animal_config',
]

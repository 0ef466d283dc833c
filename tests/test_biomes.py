import copy
import os
import sys

import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from biomes import (
    BIOMES, Biome, Desert, Woodland, find_animal_config, get_biome, get_next_biome,
)
from biomes.woodland import CONFIG as WOODLAND_CONFIG
from constants import TILE_SIZE, WORLD_HEIGHT, WORLD_WIDTH


def test_registry_lookup_and_fallback():
    assert isinstance(get_biome("woodland"), Woodland)
    assert isinstance(get_biome("desert"), Desert)
    assert get_biome("tundra") is BIOMES["woodland"]
    assert get_biome(None) is BIOMES["woodland"]


def test_progression_order():
    assert get_next_biome("woodland").id == "desert"
    assert get_next_biome("desert") is None


def test_find_animal_config_searches_every_biome():
    camel = find_animal_config("camel")
    assert camel.type == "camel"
    assert camel.count == 5
    assert find_animal_config("bear").shy is False
    assert find_animal_config("dragon") is None


def test_building_materials_follow_stage_costs():
    assert get_biome("woodland").building_materials() == ["planks", "stones", "straw"]
    assert get_biome("desert").building_materials() == ["urns", "mummies", "scepters"]


def test_parsed_sections():
    woodland = get_biome("woodland")
    assert woodland.terrain.water_type == "river"
    assert woodland.terrain.crossing_tile == "terrain-bridge"
    assert woodland.decorations.bushes.min_dist == 40
    assert woodland.decorations.trees.count == 80
    assert woodland.animals["deer"].count == 4
    assert (woodland.world_width, woodland.world_height, woodland.tile_size) == (
        WORLD_WIDTH, WORLD_HEIGHT, TILE_SIZE)
    assert get_biome("desert").item_roles.rock == ["beetles"]


def test_from_dict_has_no_overrides():
    plain = Biome.from_dict(WOODLAND_CONFIG)
    assert plain.id == "woodland"
    assert plain.animal_override("bear") is None
    assert get_biome("woodland").animal_override("bear") is not None


def test_unknown_water_type_fails_at_load():
    data = copy.deepcopy(WOODLAND_CONFIG)
    data["terrain"]["water_type"] = "lava"
    with pytest.raises(ValueError):
        Biome.from_dict(data)


def test_world_size_comes_from_config():
    data = copy.deepcopy(WOODLAND_CONFIG)
    data.update(world_width=1280, world_height=960, tile_size=32)
    small = Biome.from_dict(data)
    assert (small.world_width, small.world_height, small.tile_size) == (1280, 960, 32)

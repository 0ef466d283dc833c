# woodland.py - Woodland biome: river, dense forest, first stop of the progression
# Edit the dicts below to retune the woodland without touching the generator

from animal_zones import (
    SampledPolicy, WaterEdgePolicy, ClearingRingPolicy,
    far_from_clearings, near_edges, dense_trees, shy_edges,
)
from .base import Biome

# =============================================================================
# TERRAIN
# =============================================================================
TERRAIN = {
    "base": "terrain-grass",        # terrain-grass-0..2
    "base_variants": 3,
    "water": "water",               # terrain-water-0..2
    "water_variants": 3,
    "water_type": "river",          # 'river' or 'oasis'
    "clearing_tile": "terrain-dirt",
    "bank_tile": "terrain-sand",
}

# =============================================================================
# DECORATIONS
# =============================================================================
DECORATIONS = {
    "trees": {"count": 80, "min_dist": 80, "trunk": "tree-trunk", "canopies": ["tree-canopy-1", "tree-canopy-2"]},
    "bushes": {"count": 40, "berry_chance": 0.3, "plain": "bush", "berry": "bush-berry"},
    "rocks": {"count": 20, "texture": "rock"},
    "flowers": {"count": 50, "variants": ["flower-red", "flower-yellow", "flower-purple"]},
}

# =============================================================================
# ANIMALS
# =============================================================================
# Keyed by animal type; count is the population the spawner aims for
ANIMALS = {
    "bear":     {"texture": "animal-bear",     "favorite_food": "fish",      "tameable": True, "shy": False, "speed": 35, "flee_speed": 50, "required_feedings": 2, "count": 2},
    "wolf":     {"texture": "animal-wolf",     "favorite_food": "fish",      "tameable": True, "shy": True,  "speed": 40, "flee_speed": 65, "required_feedings": 2, "count": 2},
    "badger":   {"texture": "animal-badger",   "favorite_food": "mushrooms", "tameable": True, "shy": True,  "speed": 35, "flee_speed": 55, "required_feedings": 2, "count": 2},
    "capybara": {"texture": "animal-capybara", "favorite_food": "berries",   "tameable": True, "shy": False, "speed": 25, "flee_speed": 40, "required_feedings": 2, "count": 2},
    "deer":     {"texture": "animal-deer",     "favorite_food": "berries",   "tameable": True, "shy": True,  "speed": 45, "flee_speed": 70, "required_feedings": 2, "count": 4},
    "rabbit":   {"texture": "animal-rabbit",   "favorite_food": "mushrooms", "tameable": True, "shy": True,  "speed": 50, "flee_speed": 80, "required_feedings": 2, "count": 6},
    "fox":      {"texture": "animal-fox",      "favorite_food": "fish",      "tameable": True, "shy": True,  "speed": 40, "flee_speed": 65, "required_feedings": 2, "count": 3},
    "bird":     {"texture": "animal-bird",     "favorite_food": "acorns",    "tameable": True, "shy": True,  "speed": 50, "flee_speed": 80, "required_feedings": 2, "count": 5},
}

# =============================================================================
# ITEMS
# =============================================================================
# Desired spawn counts, used by the spawner; every key gets a spawn point list
ITEM_SPAWN_COUNTS = {
    "berries": 10,
    "mushrooms": 8,
    "acorns": 8,
    "fish": 8,
    "planks": 16,
    "stones": 14,
    "straw": 12,
}

# Which map feature each food item grows from
ITEM_ROLES = {
    "berry": ["berries"],
    "tree": ["mushrooms", "acorns"],
    "water": ["fish"],
    "rock": [],
}

# Portal build stages; every cost key counts as a building material
PORTAL_STAGES = [
    {"name": "Magic Circle", "cost": {"planks": 3}},
    {"name": "Base & Arch", "cost": {"planks": 3, "stones": 3}},
    {"name": "Runes & Activate", "cost": {"straw": 3}},
]

CONFIG = {
    "id": "woodland",
    "name": "Woodland",
    "next_biome": "desert",
    "background_color": "#87CEEB",
    "terrain": TERRAIN,
    "decorations": DECORATIONS,
    "animals": ANIMALS,
    "item_spawn_counts": ITEM_SPAWN_COUNTS,
    "item_roles": ITEM_ROLES,
    "portal_stages": PORTAL_STAGES,
}


class Woodland(Biome):
    """River woodland. Bears keep to the deep forest, capybaras to the river."""

    ANIMAL_OVERRIDES = {
        "bear": SampledPolicy(far_from_clearings(400)),
        "wolf": SampledPolicy(near_edges(600, 400)),
        "badger": SampledPolicy(dense_trees(200, 3)),
        "capybara": WaterEdgePolicy(row_step=6),
        "deer": ClearingRingPolicy(jitter=150, per_clearing=3),
        "rabbit": SampledPolicy(),
        "fox": SampledPolicy(shy_edges),
        "bird": SampledPolicy(),
    }

    def __init__(self, data=None):
        super().__init__(CONFIG if data is None else data)

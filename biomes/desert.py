# desert.py - Desert biome: oasis ponds, palms and cacti, end of the progression

from animal_zones import (
    SampledPolicy, WaterEdgePolicy,
    far_from_clearings, near_edges, inside_bounds, away_from_sides, shy_edges,
)
from .base import Biome

# =============================================================================
# TERRAIN
# =============================================================================
TERRAIN = {
    "base": "desert-sand",           # desert-sand-0..2
    "base_variants": 3,
    "water": "water",                # reuse water textures
    "water_variants": 3,
    "water_type": "oasis",           # small ponds instead of river
    "clearing_tile": "desert-packed",
    "bank_tile": "desert-oasis-bank",
}

# =============================================================================
# DECORATIONS
# =============================================================================
# Berry bushes are fruiting cacti here
DECORATIONS = {
    "trees": {"count": 35, "min_dist": 100, "trunk": "palm-trunk", "canopies": ["palm-canopy-1", "palm-canopy-2"]},
    "bushes": {"count": 35, "berry_chance": 0.25, "plain": "cactus", "berry": "cactus-fruit"},
    "rocks": {"count": 30, "texture": "sandstone-rock"},
    "flowers": {"count": 40, "variants": ["desert-flower-orange", "desert-flower-pink", "tumbleweed"]},
}

# =============================================================================
# ANIMALS
# =============================================================================
ANIMALS = {
    "camel":      {"texture": "animal-camel",      "favorite_food": "dates",        "tameable": True, "shy": False, "speed": 30, "flee_speed": 45, "required_feedings": 2, "count": 5},
    "crocodile":  {"texture": "animal-crocodile",  "favorite_food": "desert-fish",  "tameable": True, "shy": False, "speed": 25, "flee_speed": 40, "required_feedings": 2, "count": 2},
    "snake":      {"texture": "animal-snake",      "favorite_food": "beetles",      "tameable": True, "shy": True,  "speed": 45, "flee_speed": 70, "required_feedings": 2, "count": 3},
    "scorpion":   {"texture": "animal-scorpion",   "favorite_food": "beetles",      "tameable": True, "shy": True,  "speed": 35, "flee_speed": 55, "required_feedings": 2, "count": 3},
    "lizard":     {"texture": "animal-lizard",     "favorite_food": "beetles",      "tameable": True, "shy": True,  "speed": 50, "flee_speed": 75, "required_feedings": 2, "count": 4},
    "vulture":    {"texture": "animal-vulture",    "favorite_food": "desert-fish",  "tameable": True, "shy": True,  "speed": 40, "flee_speed": 65, "required_feedings": 2, "count": 3},
    "fennec":     {"texture": "animal-fennec",     "favorite_food": "dates",        "tameable": True, "shy": True,  "speed": 50, "flee_speed": 80, "required_feedings": 2, "count": 4},
    "roadrunner": {"texture": "animal-roadrunner", "favorite_food": "cactus-fruit", "tameable": True, "shy": True,  "speed": 55, "flee_speed": 85, "required_feedings": 2, "count": 5},
}

# =============================================================================
# ITEMS
# =============================================================================
ITEM_SPAWN_COUNTS = {
    "dates": 16,
    "beetles": 16,
    "cactus-fruit": 14,
    "desert-fish": 14,
    "urns": 16,
    "mummies": 14,
    "scepters": 12,
}

ITEM_ROLES = {
    "berry": ["cactus-fruit"],
    "tree": ["dates"],
    "water": ["desert-fish"],
    "rock": ["beetles"],
}

PORTAL_STAGES = [
    {"name": "Magic Circle", "cost": {"urns": 3}},
    {"name": "Base & Arch", "cost": {"urns": 3, "mummies": 3}},
    {"name": "Runes & Activate", "cost": {"scepters": 3}},
]

CONFIG = {
    "id": "desert",
    "name": "Desert",
    "next_biome": None,  # end of the line (for now)
    "background_color": "#F0E68C",
    "terrain": TERRAIN,
    "decorations": DECORATIONS,
    "animals": ANIMALS,
    "item_spawn_counts": ITEM_SPAWN_COUNTS,
    "item_roles": ITEM_ROLES,
    "portal_stages": PORTAL_STAGES,
}


class Desert(Biome):
    """Oasis desert. Crocodiles stay by the ponds, camels out in the open."""

    ANIMAL_OVERRIDES = {
        "camel": SampledPolicy(inside_bounds(300)),
        "crocodile": WaterEdgePolicy(),
        "snake": SampledPolicy(away_from_sides(200)),
        "scorpion": SampledPolicy(near_edges(600, 500, edges=("left", "right", "bottom"))),
        "lizard": SampledPolicy(),
        "vulture": SampledPolicy(far_from_clearings(350)),
        "fennec": SampledPolicy(shy_edges),
        "roadrunner": SampledPolicy(),
    }

    def __init__(self, data=None):
        super().__init__(CONFIG if data is None else data)

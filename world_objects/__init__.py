# world_objects - Physical objects placed in the generated world
"""
This module contains classes representing physical things a generated map
hands to the rest of the game:
- obstacles: Static colliders for water, tree trunks and rocks

These are purely representational - they describe what exists in the world,
not the logic of how it is generated (that's in map_gen.py).
"""

from .obstacles import (
    WATER,
    TREE,
    ROCK,
    Obstacle,
    ObstacleGroup,
)

__all__ = [
    'WATER',
    'TREE',
    'ROCK',
    'Obstacle',
    'ObstacleGroup',
]

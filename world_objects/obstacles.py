# obstacles.py - Static colliders registered during map generation
"""
Physical obstacles produced by the map generator.

Obstacles:
- Are axis-aligned boxes centered on float world coordinates
- Come from three sources: water tiles, tree trunks, and rocks
- Are handed to the physics layer as-is; nothing here moves or changes them

Bushes, flowers, banks and crossings never register an obstacle.
"""

from dataclasses import dataclass
from typing import List, Optional

WATER = 'water'
TREE = 'tree'
ROCK = 'rock'


@dataclass(frozen=True)
class Obstacle:
    """A single blocking box."""
    x: float  # Center, world coords
    y: float
    width: float
    height: float
    kind: str  # 'water', 'tree' or 'rock'

    def contains_point(self, x: float, y: float) -> bool:
        """Check if a point is inside this box (edges inclusive on the low side)."""
        half_w = self.width / 2
        half_h = self.height / 2
        return (self.x - half_w <= x < self.x + half_w
                and self.y - half_h <= y < self.y + half_h)

    def to_dict(self) -> dict:
        return {
            'x': self.x,
            'y': self.y,
            'width': self.width,
            'height': self.height,
            'kind': self.kind,
        }


class ObstacleGroup:
    """
    All obstacles of one generated map.

    Items are stored in a flat list and filtered by kind/distance when needed.
    """

    def __init__(self):
        self.obstacles: List[Obstacle] = []

    def add(self, x: float, y: float, width: float, height: float, kind: str) -> Obstacle:
        """
        Register a new obstacle.

        Args:
            x, y: Center of the box in world coords
            width, height: Box size in pixels
            kind: 'water', 'tree' or 'rock'

        Returns:
            The created Obstacle
        """
        obstacle = Obstacle(x=x, y=y, width=width, height=height, kind=kind)
        self.obstacles.append(obstacle)
        return obstacle

    def get_by_kind(self, kind: str) -> List[Obstacle]:
        return [o for o in self.obstacles if o.kind == kind]

    def get_obstacles_near(self, x: float, y: float, radius: float,
                           kind: Optional[str] = None) -> List[Obstacle]:
        """
        Get all obstacles whose center is within radius of a position.

        Args:
            x, y: Center position
            radius: Search radius
            kind: Only return obstacles of this kind (None for all)
        """
        nearby = []
        for o in self.obstacles:
            if kind is not None and o.kind != kind:
                continue
            dx = o.x - x
            dy = o.y - y
            if (dx * dx + dy * dy) ** 0.5 <= radius:
                nearby.append(o)
        return nearby

    def blocks_point(self, x: float, y: float) -> bool:
        """True if any obstacle covers the point."""
        return any(o.contains_point(x, y) for o in self.obstacles)

    def to_list(self) -> List[dict]:
        return [o.to_dict() for o in self.obstacles]

    def __iter__(self):
        return iter(self.obstacles)

    def __len__(self) -> int:
        return len(self.obstacles)

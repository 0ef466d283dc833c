#!/usr/bin/env python3
import argparse
import json
import logging
import os
import sys

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from biomes import BIOMES, get_biome
from map_gen import MapGenerator
from terrain import BASE, WATER, CROSSING, BANK, CLEARING

TILE_COLORS = {
    "woodland": {
        BASE: "#7CB068",
        WATER: "#3C78B4",
        CROSSING: "#8B5A2B",
        BANK: "#E3D08A",
        CLEARING: "#A89880",
    },
    "desert": {
        BASE: "#F0E68C",
        WATER: "#3C78B4",
        CROSSING: "#8B5A2B",
        BANK: "#7FB069",
        CLEARING: "#D4AA78",
    },
}

DECORATION_STYLE = {
    # kind: (marker, color, size)
    "tree": ("^", "#2D5A27", 40),
    "bush": ("o", "#4F7942", 18),
    "berry": ("o", "#B0245A", 18),
    "rock": ("s", "#6B6B7A", 22),
    "flower": (".", "#F2A7C3", 12),
}


def render_map(result, filename='map.png', show_spawns=False):
    """Render a generated map: terrain cells, decorations, clearings and spawn points."""
    colors = TILE_COLORS.get(result.biome_id, TILE_COLORS["woodland"])
    kinds = result.terrain.kinds
    tile = get_biome(result.biome_id).tile_size

    rgb = np.zeros((result.rows, result.cols, 3))
    for kind, color in colors.items():
        rgb[kinds == kind] = hex_to_rgb(color)

    fig, ax = plt.subplots(figsize=(14, 10.5))
    ax.imshow(rgb, extent=(0, result.cols, result.rows, 0))

    # Decorations are in world coords; draw them in cell units
    deco = result.decorations
    for kind, items in (("tree", deco.trees), ("rock", deco.rocks), ("flower", deco.flowers)):
        if items:
            marker, color, size = DECORATION_STYLE[kind]
            ax.scatter([d.x / tile for d in items], [d.y / tile for d in items],
                       marker=marker, c=color, s=size, label=kind.title())
    for variant_key, label in (("bush", "Bush"), ("berry", "Berry bush")):
        items = [b for b in deco.bushes if b.is_berry == (variant_key == "berry")]
        if items:
            marker, color, size = DECORATION_STYLE[variant_key]
            ax.scatter([d.x / tile for d in items], [d.y / tile for d in items],
                       marker=marker, c=color, s=size, label=label)

    for i, c in enumerate(result.clearings):
        ax.add_patch(plt.Rectangle((c.left, c.top), c.width, c.height, fill=False,
                                   edgecolor="#FFFFFF" if i == 0 else "#333333", linewidth=1.5))

    if show_spawns:
        for animal_type, points in result.animal_spawn_zones.items():
            if points:
                ax.scatter([x / tile for x, _ in points], [y / tile for _, y in points],
                           marker="x", s=20, label=animal_type)

    ax.set_title(f"{result.biome_id} (seed: {result.seed})")
    ax.set_xlim(0, result.cols)
    ax.set_ylim(result.rows, 0)
    ax.legend(loc="upper left", bbox_to_anchor=(1.01, 1.0), fontsize=8)

    plt.savefig(filename, dpi=150, bbox_inches='tight')
    plt.close()


def hex_to_rgb(hex_color):
    """Convert hex color to RGB tuple (0-1 range)."""
    return [int(hex_color[i:i+2], 16) / 255 for i in (1, 3, 5)]


def main():
    parser = argparse.ArgumentParser(description='Generate and preview a procedural biome map')

    # Generation parameters
    parser.add_argument('--biome', choices=sorted(BIOMES), default='woodland', help='Biome to generate')
    parser.add_argument('--seed', type=int, default=None, help='Random seed for generation')
    parser.add_argument('--attempts', type=int, default=None, help='Max pipeline attempts')

    # Output options
    parser.add_argument('--output', type=str, default='map.png', help='Output image filename')
    parser.add_argument('--json', action='store_true', help='Also output JSON data')
    parser.add_argument('--spawns', action='store_true', help='Draw animal spawn candidates')
    parser.add_argument('--verbose', action='store_true', help='Debug logging')

    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")

    generator = MapGenerator(get_biome(args.biome), seed=args.seed)
    result = generator.generate() if args.attempts is None else generator.generate(max_attempts=args.attempts)

    # Output JSON if requested
    if args.json:
        json_filename = args.output.rsplit('.', 1)[0] + '.json'
        with open(json_filename, 'w') as f:
            json.dump(result.to_dict(), f, indent=2)
        print(f"JSON saved to: {json_filename}")

    # Render image
    render_map(result, args.output, show_spawns=args.spawns)

    # Print stats
    deco = result.decorations
    berries = sum(1 for b in deco.bushes if b.is_berry)
    items = sum(len(v) for v in result.item_spawn_points.values())
    animals = sum(len(v) for v in result.animal_spawn_zones.values())

    print(f"Seed: {result.seed} | Water: {len(result.water.cells)}, Crossing: {len(result.water.crossing)}, "
          f"Trees: {len(deco.trees)}, Bushes: {len(deco.bushes)} ({berries} berry), Rocks: {len(deco.rocks)}, "
          f"Item spawns: {items}, Animal spawns: {animals}")
    print(f"Image saved to: {args.output}")


if __name__ == "__main__":
    main()

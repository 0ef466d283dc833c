# constants.py - World dimensions and map generation tuning
# This file defines HOW maps are generated, not WHAT is in them (that's in biomes/*.py files)

# =============================================================================
# WORLD SETTINGS
# =============================================================================
WORLD_WIDTH = 3200   # World width in pixels
WORLD_HEIGHT = 2400  # World height in pixels
TILE_SIZE = 64       # Pixels per grid cell (50 x 37 cells with the defaults)

DIRECTIONS_CARDINAL = [(-1, 0), (1, 0), (0, -1), (0, 1)] # Cardinal directions
DIRECTIONS_DIAGONAL = [(-1, -1), (1, -1), (-1, 1), (1, 1)] # Diagonal directions
DIRECTIONS = DIRECTIONS_CARDINAL + DIRECTIONS_DIAGONAL # All 8 directions (cardinal first, then diagonal)

# =============================================================================
# GENERATION SETTINGS
# =============================================================================
GENERATION_MAX_ATTEMPTS = 10  # Full pipeline retries before a GenerationError propagates
SEED_RANGE = (1, 99999)       # Range for seeds picked when none is given

# =============================================================================
# RIVER SETTINGS (path water strategy)
# =============================================================================
RIVER_WIDTH = 3                  # Band width in cells
RIVER_START_RANGE = (0.4, 0.6)   # Base column as a fraction of the map width
RIVER_AMPLITUDE_RANGE = (4.0, 7.0)  # Meander amplitude in cells
RIVER_FREQUENCY_RANGE = (0.06, 0.09)  # Meander frequency per row
RIVER_EDGE_INSET = 3             # Center column stays this many cells from the map edges

# =============================================================================
# OASIS SETTINGS (cluster water strategy)
# =============================================================================
POND_COUNT_RANGE = (2, 3)        # Ponds per map (inclusive)
POND_ATTEMPTS_PER_POND = 30      # Placement attempts = this * pond count
POND_MIN_SPACING = 12            # Minimum distance between pond centers in cells
POND_EDGE_MARGIN = 5             # Pond centers stay this many cells from the map edges
POND_RADIUS_RANGE = (2, 3)       # Ellipse semi-axes in cells (inclusive)

# =============================================================================
# CROSSING SETTINGS
# =============================================================================
CROSSING_WINDOW = (0.3, 0.7)     # Rows searched for a crossing, as fractions of the map height
CROSSING_HALF_WIDTH = 1          # Rows carved above and below the crossing row (3-row band)
CROSSING_TILE = "terrain-bridge"

# =============================================================================
# CLEARING SETTINGS
# =============================================================================
# Soft placement bias as (column fraction, row fraction); the first entry is the player start
CLEARING_BIAS = [
    (0.3, 0.5),
    (0.7, 0.25),
    (0.5, 0.8),
]
CLEARING_SIZE_RANGE = (5, 6)     # Clearing width/height in cells (inclusive)
CLEARING_BORDER = 1              # Clearings stay this many cells from the map border

# =============================================================================
# DECORATION SETTINGS
# =============================================================================
TREE_ATTEMPT_FACTOR = 5          # Attempts = count * factor
BUSH_ATTEMPT_FACTOR = 4
ROCK_ATTEMPT_FACTOR = 4
DECORATION_BORDER = 1            # Decorations never sample the outermost ring of cells

BUSH_MIN_DIST = 40               # Bush to bush spacing in pixels
BUSH_TREE_CLEARANCE = 50         # Bush to tree spacing (avoids canopy overlap)
ROCK_MIN_DIST = 50               # Rock to rock spacing
ROCK_TREE_CLEARANCE = 50         # Rock to tree spacing
BERRY_ANCHOR_OFFSET = 10         # Berry spawn anchor sits this many pixels above the bush
FLOWER_MARGIN = 40               # Flowers scatter this far inside the world bounds

# Colliders: (offset_y, width, height) relative to the decoration position
TREE_COLLIDER = (12, 16, 16)     # Trunk base
ROCK_COLLIDER = (0, 20, 16)

# =============================================================================
# ITEM SPAWN SETTINGS
# =============================================================================
TREE_FOOD_PER_TYPE = 12          # Max trees handed to each tree-food item type
TREE_FOOD_JITTER_X = 15          # +/- horizontal jitter under a tree
TREE_FOOD_OFFSET_Y = 20          # Tree food drops this far below the trunk point
ROCK_ITEM_JITTER = 20            # +/- jitter around a rock
RIVER_BANK_FIRST_ROW = 2         # River bank sampling starts at this row...
RIVER_BANK_ROW_STEP = 3          # ...and takes one position every N rows

# Building materials are scattered from several independent sources
MATERIAL_PER_CLEARING = 3        # Per non-start clearing
MATERIAL_CLEARING_JITTER = 40
MATERIAL_EDGE_COUNT = 10         # Near a random map edge
MATERIAL_EDGE_INSET = 80         # Edge band starts this far in...
MATERIAL_EDGE_DEPTH = 200        # ...and is this deep
MATERIAL_SCATTER_COUNT = 6       # Uniformly scattered
MATERIAL_SCATTER_MARGIN = 150

# =============================================================================
# ANIMAL SPAWN SETTINGS
# =============================================================================
ANIMAL_CANDIDATE_FACTOR = 2      # Candidates generated = population count * factor
ANIMAL_ATTEMPT_FACTOR = 20       # Sampling attempts = candidates * factor
ANIMAL_SPAWN_MARGIN = 100        # Candidates stay this far inside the world bounds
ANIMAL_TREE_CLEARANCE = 50       # Never spawn on top of a tree
ANIMAL_MIN_SPACING = 100         # Candidates of one animal type keep this far apart
SHY_EDGE_FRACTION = 0.25         # Shy animals stay within this fraction of the width/height of an edge
WATER_POINT_SEARCH = 2           # Columns searched either side of a water cell for dry land

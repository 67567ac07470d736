# Movement costs
# Cost of an axis-aligned step between neighbouring cells (unit step scaled x10)
STRAIGHT_COST = 10
# Cost of a diagonal step (~10 * sqrt(2), kept integral to avoid floats)
DIAGONAL_COST = 14

# Grid settings
# Half the side length of one cell in world units
NODE_RADIUS = 0.5
# Tile values in grid files: 0 = walkable, 1 = blocked
TILE_EMPTY = 0
TILE_WALL = 1
# Grid file: JSON definition of the default walkability map
GRID_FILE = 'grids/default.json'

# Seeker settings
# Movement speed in world units per second for path-following agents
SEEKER_SPEED = 4.0
# Distance under which a seeker counts a waypoint as reached (world units)
WAYPOINT_REACHED_DISTANCE = 1e-3

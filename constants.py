# --- Map Configuration Defaults ---
DEFAULT_MAP_WIDTH = 3
DEFAULT_MAP_HEIGHT = 3
DEFAULT_MAP_SEED = 0
MAX_SEED = 2**64 - 1  # Seeds are 64-bit unsigned
MIN_CELL_COUNT = 2  # A map needs at least two cells to carve anything

# --- Map Sizing (players -> grid) ---
DEFAULT_PLAYER_COUNT = 5
DEFAULT_PLAYER_SPACE = 3  # Cells per player along each axis

# --- Grid Structure ---
# Neighbour offsets (d_column, d_row). Order matters: it is the shuffle input order.
NEIGHBOUR_OFFSETS = ((1, 0), (-1, 0), (0, 1), (0, -1))

# --- Wall Geometry ---
BOUNDARY_OFFSET = 0.5  # Outer wall sits half a cell beyond the outermost centers
WALL_HALF_LENGTH = 0.5

# --- World Space (renderer consumers) ---
RENDER_CELL_SIZE = 100.0
RENDER_OFFSET = (2.0, 2.0)  # Subtracted before scaling, in cell units

# --- Tolerances ---
GEOMETRY_TOLERANCE = 1e-9  # For floating point comparisons

# --- Visualization ---
VIS_FIGSIZE_PER_CELL = 0.6
VIS_MIN_FIGSIZE = 4.0
VIS_DPI = 150
VIS_WALL_LINE_STYLE = "k-"
VIS_WALL_LINE_LW = 1.5
VIS_WALL_LINE_ALPHA = 0.9
VIS_BOUNDARY_LINE_LW = 2.5
VIS_LINK_LINE_STYLE = "g-"
VIS_LINK_LINE_LW = 1.0
VIS_LINK_LINE_ALPHA = 0.7
VIS_CELL_MARKER = "o"
VIS_CELL_MARKER_SIZE = 3
VIS_CELL_MARKER_COLOR = "grey"
VIS_SOLUTION_LINE_STYLE = "r-"
VIS_SOLUTION_LINE_LW = 2.0
VIS_SOLUTION_LINE_ALPHA = 0.9
VIS_ENTRY_MARKER = "go"
VIS_EXIT_MARKER = "ro"
VIS_ENTRY_EXIT_MARKER_SIZE = 8

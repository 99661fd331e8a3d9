# --- Grid Structure ---
DEFAULT_ROWS = 3  # Cells stacked vertically
DEFAULT_COLS = 6  # Cells side by side

# --- Play Area ---
DEFAULT_WIDTH = 1200.0  # Total play-area width (pixels or any unit)
DEFAULT_HEIGHT = 600.0  # Total play-area height

# --- Walls ---
WALL_THICKNESS = 5.0  # Thickness of carved-maze walls
BOUNDARY_THICKNESS = 2.0  # Thickness of the four enclosing walls

# --- Start / Goal ---
GOAL_SIZE_RATIO = 0.7  # Goal square as a fraction of one cell
BALL_RADIUS_RATIO = 0.25  # Ball radius as a fraction of the smaller unit length

# --- Cell Directions ---
DIR_UP = "up"
DIR_RIGHT = "right"
DIR_DOWN = "down"
DIR_LEFT = "left"

# (direction, row offset, column offset), in the order neighbours are listed
# before shuffling.
NEIGHBOUR_OFFSETS = (
    (DIR_UP, -1, 0),
    (DIR_RIGHT, 0, 1),
    (DIR_DOWN, 1, 0),
    (DIR_LEFT, 0, -1),
)

# --- STL Export ---
MAZE_STL_WALL_HEIGHT = 40.0
MAZE_STL_BASE_HEIGHT = MAZE_STL_WALL_HEIGHT / 4.0

# --- Visualization ---
VIS_FIG_WIDTH = 12.0  # Inches; height follows the play-area aspect ratio
VIS_WALL_COLOR = "red"
VIS_BOUNDARY_COLOR = "black"
VIS_GOAL_COLOR = "green"
VIS_BALL_COLOR = "blue"
VIS_BACKGROUND_COLOR = "#14151f"
VIS_SOLUTION_LINE_STYLE = "y-"
VIS_SOLUTION_LINE_LW = 2.0
VIS_SOLUTION_LINE_ALPHA = 0.9

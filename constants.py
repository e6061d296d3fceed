# --- Grid Sizes ---
DEFAULT_PATH_WIDTH = 37  # Logical (backtracking) grid, in cells
DEFAULT_PATH_HEIGHT = 21
DEFAULT_PIXEL_WIDTH = 25  # Size of one wireframe cell in the PNG, in pixels
DEFAULT_PIXEL_HEIGHT = 25

# --- Wireframe Scaling ---
WIREFRAME_SCALE = 2  # Logical cell i renders at wireframe position 2i+1
WIREFRAME_OFFSET = 1

# --- Directions ---
DIR_NORTH = "N"
DIR_EAST = "E"
DIR_SOUTH = "S"
DIR_WEST = "W"
DIR_NONE = " "  # Terminal marker, not a movement

# --- Output ---
OUTPUT_DIR = "output"
OUTPUT_FILE_ASCII = "ascii.txt"
OUTPUT_FILE_PATH = "path.txt"
OUTPUT_FILE_PNG = "maze.png"
OUTPUT_FILE_STL = "maze.stl"

# --- ASCII Rendering ---
MAZE_PATH_CHAR = " "
MAZE_WALL_CHAR = "#"

# --- PNG Rendering ---
PATH_COLOR = (192, 192, 192)
WALL_COLOR = (0, 0, 0)

# --- STL Rendering ---
STL_CELL_SIZE = 1.0  # Footprint of one wireframe cell
STL_WALL_HEIGHT = 1.5
STL_BASE_HEIGHT = 0.5

# levelgen/core/constants.py
"""
Default tuning values for platform layout generation and the preview window.

Coordinate System:
- World space has its origin at the horizontal center of the ground line.
- X-axis: Increases from left to right (-WORLD_WIDTH/2 to WORLD_WIDTH/2).
- Y-axis: Increases upwards (GROUND_Y to WORLD_HEIGHT).
- Screen space (pygame) flips the Y-axis; see levelgen.systems.camera.
"""

# === Platform Generation Settings ===
NUMBER_OF_PLATFORMS = 20
WORLD_WIDTH = 50.0
WORLD_HEIGHT = 20.0
GROUND_Y = 0.0

# === Movement Constraints ===
MAX_JUMP_HEIGHT = 3.0     # Max Y distance the player can jump UP
MAX_JUMP_DISTANCE = 5.0   # Max X distance for gaps, climbs and drops
MAX_FALL_DISTANCE = 8.0   # Max Y distance the player can safely fall
MIN_PLATFORM_SPACING = 2.0
PLATFORM_SIZE = (3.0, 0.5)  # Wide platforms for walking

STARTING_POSITION = (0.0, 2.0)

# Vertical band in which two platforms count as level with each other
LEVEL_TOLERANCE = 1.0

# === Placement Loop ===
REQUEUE_PROBABILITY = 0.7        # chance a placed platform becomes a base
MAX_ATTEMPTS_PER_PLATFORM = 5    # attempt budget = target * this
RANDOM_ATTEMPTS_PER_ITERATION = 10

# === Directed Sampling ===
# Movement category weights: gap jump, climb, drop
GAP_JUMP_WEIGHT = 0.4
CLIMB_WEIGHT = 0.3
DROP_WEIGHT = 0.3

GAP_MIN_DISTANCE = 2.0
GAP_VERTICAL_JITTER = (-0.5, 1.0)
CLIMB_MIN_HEIGHT = 1.0
DROP_MIN_DISTANCE = 1.0
HORIZONTAL_DRIFT = 2.0

# Lowest y a sampled platform may take, relative to the ground
MIN_HEIGHT_ABOVE_GROUND = 1.0

# === Ground Baseline ===
GROUND_SEGMENT_WIDTH = 10.0

# === Minimum viable values (used by validation and clamping) ===
MIN_WORLD_SIZE = 5.0
MIN_MOVEMENT_VALUE = 1.0
MIN_PLATFORM_SPACING_VALUE = 0.5
MIN_PLATFORM_DIMENSION = 0.1

# === Preview Window ===
WIDTH, HEIGHT = 960, 540
FPS = 60
PIXELS_PER_UNIT = 16
SCREEN_MARGIN = 40

# Colors
BG = (18, 20, 27)
WHITE = (240, 240, 240)
ACCENT = (255, 199, 95)
RED = (220, 72, 72)
GREEN = (80, 200, 120)
CYAN = (80, 220, 220)
BLUE = (90, 140, 240)
MAGENTA = (210, 90, 210)
YELLOW = (230, 210, 80)

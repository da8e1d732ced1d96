# --- DIRECTIONS ---
# Sprites face right by default, LEFT mirrors them horizontally.
LEFT = -1
RIGHT = 1

# --- BEHAVIOR IDS ---
# Index order matters: it is the order of the BEHAVIORS table in behaviors.py.
NO_BEHAVIOR = -1
MOVE = 0
WAIT = 1
TRAVERSE = 2
BEHAVIOR_NAMES = {MOVE: "Move", WAIT: "Wait", TRAVERSE: "Traverse"}

# Returned by Behavior.step
CONTINUE = 'CONTINUE'
DONE = 'DONE'

# --- MOVE ---
MOVE_MIN_SPEED = 25
MOVE_SPEED_RANGE = 10
MOVE_MIN_FRACTION = 0.1
MOVE_MAX_FRACTION = 0.9
EDGE_MARGIN = 30  # also the out-of-bounds culling margin

# --- WAIT (milliseconds) ---
WAIT_MIN_TIME = 500
WAIT_TIME_RANGE = 3000

# --- TRAVERSE ---
TRAVERSE_MIN_SPEED = 2
TRAVERSE_SPEED_RANGE = 10
FOOT_OFFSET = 20  # sprite top to feet

# --- SCENE LAYOUT (fractions of viewport height) ---
SNOW_LINE = 0.95
HILL_OVERLAY_TOP = 0.3
HILL_OVERLAY_HEIGHT = 0.7

# --- POPULATION ---
POPULATION_MIN = 20
POPULATION_SPREAD = 10
SPAWN_RIGHT_MARGIN = 30
SPAWN_BAND_PADDING = 5

# --- HILLS ---
HILL_MAX_HEIGHT_PERCENT = 60
HILL_MIN_HEIGHT_PERCENT = 20
HILL_HEIGHT_JITTER = 5
HILL_MIN_STEP = 25
HILL_STEP_RANGE = 50
HILL_PEAK_CHANCE = 0.25
HILL_BOTTOM_OVERHANG = 50
HILL_SIDE_OVERHANG = 25

# --- DEFAULTS (used when config.json leaves a key out) ---
DEFAULT_WIDTH = 1280
DEFAULT_HEIGHT = 720
DEFAULT_FPS = 60
DEFAULT_CAPTION = "Penguins"
DEFAULT_ASSET_DIR = "images"
DEFAULT_PENGUIN_IMAGE = "penguin.png"
DEFAULT_HILL_OVERLAY_IMAGE = "hill_overlay.png"
PENGUIN_SCALE = 0.3
SKY_COLOR = (174, 212, 235)
HILL_COLOR = (0, 0, 0)
SNOW_COLOR = (255, 255, 255)

# Placeholder sprite size, roughly the proportions of the shipped artwork
PLACEHOLDER_PENGUIN_SIZE = (120, 160)
PLACEHOLDER_TEXTURE_SIZE = (512, 256)

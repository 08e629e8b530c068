# settings.py — single source of truth for all constants

# --- Display ---
SCREEN_W = 1280
SCREEN_H = 720
TITLE = "Robot Colony"
FPS = 60

# --- Tile Grid ---
TILE_SIZE = 64              # screen pixels per world unit (one tile)

# Tile classes. Anything other than EMPTY is solid.
CLASS_EMPTY = 0
CLASS_FLESH = 1
CLASS_WALL  = 2
CLASS_CORE  = 3

BUILDABLE_CLASSES = (CLASS_WALL, CLASS_CORE)

# target class -> (build seconds, resource units)
CONSTRUCTION_COSTS = {
    CLASS_WALL: (2.0, 1),
    CLASS_CORE: (2.0, 2),
}

# --- Layout ---
# Rows are listed top to bottom; world row 0 is the last line.
#   .  empty          #  flesh           W  wall          C  core
#   w  wall site      c  core site       F  food spawner region (empty)
LAYOUT_CHARS = {
    ".": (CLASS_EMPTY, None),
    "F": (CLASS_EMPTY, None),
    "#": (CLASS_FLESH, None),
    "W": (CLASS_WALL, None),
    "C": (CLASS_CORE, None),
    "w": (CLASS_EMPTY, CLASS_WALL),
    "c": (CLASS_EMPTY, CLASS_CORE),
}
SPAWNER_CHAR = "F"

DEFAULT_LAYOUT = """\
########################
#......................#
#...FFFFFFFFFF.........#
#......................#
#......................#
#......................#
#.................c....#
#......................#
#....w.w.w.............#
#######..........#######
########################
"""

# --- Camera ---
CAMERA_SPEED = 2.0          # world units per second when panning
CAMERA_START = (12.0, 5.5)

# --- Simulation Speed ---
SPEED_STEPS = [0, 1, 2, 4]  # 0 = paused
MAX_FRAME_DELTA = 0.1       # real seconds; longer frames are clamped

# --- Items ---
GRAVITY = 1.5               # world units per second
GROUND_PROBE = 0.1          # how far below an item the ground test looks
ITEM_LIFETIME = 60.0        # seconds; also the ceiling for claimed items
FOOD_SPAWN_INTERVAL = 4.0   # seconds between spawns

# World pre-warm at load: rounds of (steps x delta item updates, then one spawn)
PREWARM_ROUNDS = 6
PREWARM_STEPS = 20
PREWARM_DELTA = 0.2

# --- Robots ---
ROBOT_SPAWN_LIMIT = 2
ROBOT_SPEED = 2.0           # world units per second at multiplier 1.0
CARRY_OFFSET = (0.0, 0.35)  # carried item sits above its carrier
PICKUP_OFFSET = (0.0, 0.2)
PICKUP_RADIUS = 0.3
WANDER_RADIUS = 0.4
WANDER_SPEED = 0.25
WANDER_SLEEP = 0.5
RETRY_SLEEP = 1.0           # back-off when no resource can be claimed

# --- Colors ---
COL_BG         = (25, 25, 35)
COL_GRID_LINE  = (45, 45, 55)
COL_WHITE      = (220, 220, 220)

TILE_COLORS = {
    CLASS_EMPTY: (40, 30, 38),
    CLASS_FLESH: (150, 70, 80),
    CLASS_WALL:  (110, 110, 125),
    CLASS_CORE:  (60, 170, 200),
}
COL_CONSTRUCTION = (230, 190, 60)

COL_ROBOT        = (200, 200, 210)
COL_ROBOT_BUSY   = (100, 200, 100)
COL_ITEM_FALLING = (240, 150, 60)
COL_ITEM_STATIC  = (240, 210, 80)
COL_ITEM_CLAIMED = (120, 220, 120)
COL_ITEM_CARRIED = (255, 255, 140)

# --- UI ---
HUD_HEIGHT        = 90
VIEWPORT_H        = SCREEN_H - HUD_HEIGHT

COL_HUD_BG        = (18, 18, 28)
COL_PANEL_BG      = (28, 28, 42)
COL_PANEL_BORDER  = (60, 60, 90)

COL_BTN_NORMAL    = (55, 55, 80)
COL_BTN_HOVER     = (80, 80, 115)
COL_BTN_ACTIVE    = (40, 120, 200)
COL_BTN_HINT      = (150, 150, 175)
COL_BTN_TEXT      = (200, 200, 220)

FONT_SM = 13
FONT_MD = 17
FONT_LG = 22

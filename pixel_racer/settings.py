# ============================================================================
# VERSION INFO
# ============================================================================
VERSION = "0.1.0"

# ============================================================================
# DISPLAY SETTINGS
# ============================================================================
# Simulation and drawing always happen at this fixed logical resolution.
# The window only scales the finished frame.
LOGICAL_WIDTH = 320
LOGICAL_HEIGHT = 240
FPS = 60

# Viewport (the area the logical canvas is scaled into)
MAX_CONTAINER_WIDTH = 900
MAX_CONTAINER_HEIGHT = 760
TOPBAR_HEIGHT = 40
HINT_HEIGHT = 28
WINDOW_WIDTH = LOGICAL_WIDTH * 3
WINDOW_HEIGHT = LOGICAL_HEIGHT * 3 + TOPBAR_HEIGHT + HINT_HEIGHT

# ============================================================================
# TIMING
# ============================================================================
MAX_DT = 0.033 # seconds, longest step a single frame may simulate

# ============================================================================
# VEHICLE TUNING
# ============================================================================
MAX_SPEED = 160.0     # px/s
REVERSE_CAP = -30.0   # px/s, light reverse
ACCEL = 120.0         # px/s^2
BRAKE_DECEL = 170.0   # px/s^2
FRICTION = 80.0       # px/s^2 natural decel
TURN_RATE = 2.2       # px per tick at zero speed
HEADING_DAMPING = 0.85
HEADING_TILT = 0.05   # radians of sprite rotation per unit of heading bias

CAR_SCREEN_Y = LOGICAL_HEIGHT - 40 # fixed row the car is drawn on
CAR_HALF_WIDTH = 7

# ============================================================================
# ROAD
# ============================================================================
ROAD_WIDTH = 120.0
ROAD_FREQUENCY = 0.0025
ROAD_AMPLITUDE_1 = 40.0
ROAD_AMPLITUDE_2 = 18.0
ROAD_SECONDARY_RATIO = 0.37
ROAD_PHASE = 1.2
ROAD_BORDER = 2
DASH_PERIOD = 6.0

COLLISION_MARGIN = CAR_HALF_WIDTH
RESTITUTION = 0.7

# ============================================================================
# DISTANCE & HUD
# ============================================================================
DISTANCE_SCALE = 0.8 # px travelled -> meters
KMH_SCALE = 0.6      # px/s -> km/h shown on the HUD
BEST_KEY = "race_best"

# ============================================================================
# KEY BINDINGS (pygame key names)
# ============================================================================
KEYS_ACCELERATE = ("up", "w")
KEYS_BRAKE = ("down", "s")
KEYS_STEER_LEFT = ("left", "a")
KEYS_STEER_RIGHT = ("right", "d")
KEYS_TOGGLE_PAUSE = ("space", "escape")

# ============================================================================
# COLORS
# ============================================================================
COLOR_BG = (11, 13, 26)
COLOR_DITHER = (15, 18, 48)
COLOR_ROAD = (42, 46, 82)
COLOR_ROAD_EDGE = (247, 213, 74)
COLOR_CENTER_LINE = (216, 230, 255)
COLOR_CAR_BODY = (255, 47, 109)
COLOR_CAR_NOSE = (255, 209, 223)
COLOR_CAR_WHEEL = (17, 17, 17)
COLOR_HUD_BG = (0, 26, 20)
COLOR_HUD_TEXT = (0, 255, 209)
COLOR_PAUSE_DIM = (0, 0, 0, 153)
COLOR_WINDOW_BG = (6, 7, 14)
COLOR_BUTTON = (42, 46, 82)
COLOR_BUTTON_PRIMARY = (255, 47, 109)
COLOR_TEXT = (200, 200, 200)
COLOR_HIGHLIGHT = (255, 200, 0)

HUD_ALPHA = 217 # 0.85 opacity

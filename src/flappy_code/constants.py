"""
constants.py: Centralized configuration for game, storage and rendering settings.
"""

# -------- Viewport Config --------
DEFAULT_WIDTH = 400
DEFAULT_HEIGHT = 600
MIN_VIEW_WIDTH = 320
MAX_VIEW_WIDTH = 520
VIEW_ASPECT = 1.35              # height = width * VIEW_ASPECT

# Time handling
RENDER_FPS = 60
MAX_FRAME_DT = 0.05             # Never integrate more than 50ms per step (seconds)

# -------- Player Config --------
PLAYER_SIZE = 36                # Side of the square bounding box
PLAYER_X_RATIO = 0.15           # Resting x as a fraction of viewport width
PLAYER_Y_RATIO = 0.45           # Resting y as a fraction of viewport height
PLAYER_GLYPH = "< />"

# -------- Physics Config (Pixels / Second / Second) --------
GRAVITY_ACCEL = 1100.0          # Vertical acceleration (pixels/s^2)
JUMP_VELOCITY = -340.0          # Velocity set by a flap (pixels/s)
ROTATION_DIVISOR = 600.0        # rotation = velocity / ROTATION_DIVISOR
MIN_ROTATION = -1.0             # radians
MAX_ROTATION = 1.2              # radians

# -------- Pipe Config --------
PIPE_WIDTH = 64
PIPE_GAP = 140
PIPE_SPEED_PPS = 160.0          # Horizontal speed (pixels/second)
PIPE_SPAWN_INTERVAL = 1.5       # Seconds between spawns
PIPE_MIN_TOP = 60               # Smallest top segment height
PIPE_BOTTOM_MARGIN = 80         # Space kept below the gap for the bottom segment
PIPE_CLEANUP_MARGIN = 20        # How far past the left edge before removal
PIPE_SYMBOLS = ("{ }", "<>", "();", "==", "=>", "++")

# -------- Storage Config --------
STORAGE_KEY = "flappy_code_best_v3"
DB_FILE = "flappy_code.db"

# -------- Colors (RGB) --------
COLOR_BG_TOP = (15, 58, 87)
COLOR_BG_BOTTOM = (7, 32, 55)
COLOR_PIPE = (20, 184, 166)
COLOR_PIPE_TEXT = (0, 31, 37)
COLOR_PLAYER = (255, 209, 102)
COLOR_PLAYER_SCREEN = (8, 51, 68)
COLOR_PLAYER_TEXT = (230, 240, 251)
COLOR_GROUND = (20, 37, 55)
COLOR_HUD = (255, 255, 255)
COLOR_PANEL = (0, 0, 0, 160)
COLOR_GAME_OVER = (255, 80, 80)

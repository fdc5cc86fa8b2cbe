"""Game-wide constants for Zombie Typer.

Screen dimensions, colors, font sizes, tuning knobs for spawning, scoring and
difficulty scaling, storage keys, and logging configuration.
"""
import os

WIDTH, HEIGHT = 960, 540           # 16:9 window
FPS = 60                           # target frame rate
BG_COLOR = (25, 28, 33)            # dark background
FIELD_COLOR = (34, 38, 46)         # play field strip
TEXT_COLOR = (235, 235, 235)       # light text
DIM_TEXT_COLOR = (170, 170, 170)
ACCENT_COLOR = (255, 235, 90)      # prefix highlight / titles
ERROR_COLOR = (255, 100, 100)
ZOMBIE_COLOR = (96, 160, 88)
ZOMBIE_OUTLINE = (40, 70, 36)
HUD_PADDING = 12
FONT_NAME = "freesansbold.ttf"

# Font Size Constants
FONT_SIZE_SMALL = 14
FONT_SIZE_MEDIUM = 18
FONT_SIZE_LARGE = 28

# Play field layout
HUD_HEIGHT = 70                    # top band reserved for the HUD
INPUT_HEIGHT = 64                  # bottom band reserved for the text box
DEFAULT_FIELD_WIDTH = 600          # used when the host reports no width

# Game Settings
INITIAL_LIVES = 3
MAX_LIVES = 3
KILL_SCORE = 10
HEAL_STREAK_INTERVAL = 20          # every 20th consecutive kill restores a life
WRONG_INPUT_LIMIT = 3              # mismatches before the streak is reset

SPAWN_MARGIN = 60                  # zombies appear this far past the right edge
MISS_X = -60                       # crossing below this costs a life

# Difficulty scaling
MAX_ZOMBIE_SPEED = 360             # units per second
SPEED_PER_FACTOR = 45
SPAWN_MS_PER_FACTOR = 260
SCORE_DIVISOR = 120                # score weight in the speed/spawn factor

# Feedback timings
FLASH_MS = 200
SHAKE_MS = 400
TOAST_MS = 1400
INPUT_ERROR_MS = 400
DEATH_ANIM_MS = 280

# Storage keys
HIGH_SCORE_KEY = "zombieCoderHighScore"
SOUND_KEY = "zombieCoderSound"

# File settings
DATA_DIR = os.environ.get("ZOMBIE_TYPER_HOME", os.path.dirname(os.path.dirname(__file__)))
STORE_FILE = os.path.join(DATA_DIR, "zombie_typer.json")
LOG_FILE = os.path.join(DATA_DIR, "log.md")

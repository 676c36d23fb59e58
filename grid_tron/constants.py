"""Gameplay constants.

Pickup thresholds are single-player only; two-player rounds never spawn
NeuTron, HydroTron or GraviTron pickups.
"""

NEUTRON_BOMB_THRESHOLD = 10  # bullets needed before the NeuTron pickup appears
HYDROTRON_THRESHOLD = 3  # bombs per HydroTron
GRAVITRON_THRESHOLD = 5  # HydroTrons collected before the GraviTron appears
GRAVITRON_PROXIMITY_THRESHOLD = 3
STABILITY_THRESHOLD = 2  # bullets needed to catch the GraviTron instead of scaring it off

BULLET_SPEED = 2
INITIAL_TOKEN_COUNT = 3
HYDROTRON_TOKEN_REWARD = 2

MAX_SPAWN_ATTEMPTS = 2000

# Setup bounds
MIN_GRID_SIZE = 20
MAX_GRID_SIZE = 80
MIN_FPS = 2
MAX_FPS = 200

DEFAULT_GRID_WIDTH = 40
DEFAULT_GRID_HEIGHT = 30
DEFAULT_FPS = 15

HIGH_SCORE_KEY = "tronHighScore"

"""Engine-wide constants and debug colours."""

from dataclasses import dataclass

# game window constants
TILE_SIZE = 32.0
DEFAULT_WINDOW_WIDTH = 1600
DEFAULT_WINDOW_HEIGHT = 900
DEFAULT_WINDOW_NAME = "hi"

# game core constants
TICKS_PER_SECOND = 60
TICK_TIME = 1.0 / TICKS_PER_SECOND

# game setting constants
ZOOM_INCREMENT = 0.1
MAX_ZOOM = 1.5
MIN_ZOOM = 0.5
FPS_CAP = 120
FPS_MAX_SAMPLES = 500

# transition between maps
TRANSITION_SPEED = 300.0

# player constants
PLAYER_MAX_SPEED = 6.0
PLAYER_ACCELERATION = 0.5
PLAYER_WIDTH = 10.0
PLAYER_HEIGHT = 21.0

# map maker
MAPMAKER_TILESET_RATIO = 0.4


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255


MAP_COLLISION_TILE = Color(255, 0, 0, 100)
MAP_TRANSITION_TILE = Color(0, 255, 0, 100)
MAP_SLIPPERY_TILE = Color(0, 0, 100, 100)
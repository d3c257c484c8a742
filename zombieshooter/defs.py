"""Game-wide constants and enumerations."""

from enum import Enum, IntEnum

PI = 3.14159265358979323846
SCREEN_WIDTH = 1600
SCREEN_HEIGHT = 900
PLAYER_SPEED = 10
PLAYER_BULLET_SPEED = 16
MAX_KEYBOARD_KEYS = 350
FPS = 60
MAX_MOUSE_BUTTONS = 3
ALIEN_BULLET_SPEED = 8
MAX_STARS = 500
MAX_SND_CHANNELS = 8
MAX_NAME_LENGTH = 1000
MAX_TILES = 538

TILE_SIZE = 50
MAP_RENDER_WIDTH = SCREEN_WIDTH // TILE_SIZE
MAP_RENDER_HEIGHT = SCREEN_HEIGHT // TILE_SIZE
MAP_WIDTH = MAP_RENDER_WIDTH * 3
MAP_HEIGHT = MAP_RENDER_HEIGHT * 3

TILE_GROUND = 1
TILE_WALL = 2


class Channel(IntEnum):
    """Mixer channels; ANY lets the mixer pick a free one."""

    ANY = -1
    PLAYER = 0
    ALIEN_FIRE = 1


class Sound(IntEnum):
    """Sound effects known to the game."""

    PLAYER_FIRE = 0
    ALIEN_FIRE = 1
    PLAYER_DIE = 2
    ALIEN_DIE = 3


class GameState(Enum):
    """Top-level screens of the game."""

    MENU = 0
    TUTORIAL = 1
    SETTINGS = 2
    PLAYING = 3
    PAUSED = 4
    EXIT = 5
    MODE_SELECTION = 6


class MovePattern(Enum):
    """Enemy movement patterns."""

    LINEAR = 0
    ZIGZAG = 1
    WAVE = 2
    SPIRAL = 3
    RANDOM_DRUNK = 4
    CIRCLE = 5


class Mode(IntEnum):
    """Game modes that can be played."""

    SURVIVOR = 1
    DUNGEON = 2


class Side(IntEnum):
    """Which side an entity fights for."""

    PLAYER = 0
    ALIEN = 1
"""
Game configuration: constants, reference maze layout and the GameConfig value.
"""

from collections import namedtuple
from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
TILE = 20
FPS = 60

PLAYER_INTERVAL_MS = 150   # ms per cell
GHOST_INTERVAL_MS = 200
POWER_DURATION_MS = 5000

SCORE_DOT = 10
SCORE_POWER = 50
SCORE_GHOST = 200

START_LIVES = 3

MOUTH_STEP = 0.2

# Colours (retro-neon palette)
BLACK       = (0, 0, 0)
DARK_BLUE   = (10, 10, 40)
WALL_BLUE   = (33, 33, 222)
WALL_HIGHLIGHT = (80, 80, 255)
DOT_COLOR   = (255, 184, 174)
YELLOW      = (255, 255, 0)
WHITE       = (255, 255, 255)
RED         = (255, 0, 0)
PINK        = (255, 184, 255)
CYAN        = (0, 255, 255)
GHOST_SCARED = (33, 33, 222)
PUPIL       = (0, 0, 0)
HUD_GREY    = (180, 180, 180)

# ---------------------------------------------------------------------------
# Maze layout  (19 x 21)
# '#'=wall, '.'=dot, 'o'=power pellet, 'P'=pac-man start, anything else=floor
# ---------------------------------------------------------------------------
REFERENCE_LAYOUT = (
    "###################",
    "#........#........#",
    "#.##.###.#.###.##.#",
    "#o##.###.#.###.##o#",
    "#.................#",
    "#.##.#.#####.#.##.#",
    "#....#...#...#....#",
    "####.###.#.###.####",
    "   #.#.......#.#   ",
    "   #.#.##.##.#.#   ",
    "####.#.#   #.#.####",
    "    ....# #....    ",
    "####.#.#####.#.####",
    "   #.#.......#.#   ",
    "   #.#.#####.#.#   ",
    "####.#...#...#.####",
    "#........#........#",
    "#.##.###.#.###.##.#",
    "#o.#.....P.....#.o#",
    "##.#.#.#####.#.#.##",
    "#....#...#...#....#",
)

GhostSpawn = namedtuple("GhostSpawn", "name col row color")

GHOST_SPAWNS = (
    GhostSpawn("blinky", 9, 9, RED),
    GhostSpawn("pinky", 8, 8, PINK),
    GhostSpawn("inky", 10, 8, CYAN),
)


@dataclass(frozen=True)
class GameConfig:
    """Everything that parameterises one match."""

    layout: tuple = REFERENCE_LAYOUT
    player_interval_ms: int = PLAYER_INTERVAL_MS
    ghost_interval_ms: int = GHOST_INTERVAL_MS
    power_duration_ms: int = POWER_DURATION_MS
    dot_score: int = SCORE_DOT
    pellet_score: int = SCORE_POWER
    ghost_score: int = SCORE_GHOST
    start_lives: int = START_LIVES
    ghost_spawns: tuple = GHOST_SPAWNS
    frightened_color: tuple = GHOST_SCARED

    def __post_init__(self):
        if self.player_interval_ms <= 0 or self.ghost_interval_ms <= 0:
            raise ValueError("tick intervals must be > 0")
        if self.power_duration_ms <= 0:
            raise ValueError("power_duration_ms must be > 0")
        if min(self.dot_score, self.pellet_score, self.ghost_score) < 0:
            raise ValueError("score values must be >= 0")
        if self.start_lives < 1:
            raise ValueError("start_lives must be >= 1")
        rows = len(self.layout)
        cols = len(self.layout[0]) if rows else 0
        for spawn in self.ghost_spawns:
            if not (0 <= spawn.col < cols and 0 <= spawn.row < rows):
                raise ValueError(
                    f"ghost spawn {spawn.name!r} at ({spawn.col}, {spawn.row}) "
                    f"is outside the {cols}x{rows} layout"
                )
            if self.layout[spawn.row][spawn.col] == "#":
                raise ValueError(
                    f"ghost spawn {spawn.name!r} at ({spawn.col}, {spawn.row}) is a wall"
                )

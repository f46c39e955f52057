"""Notifications pushed from the game to score, lifecycle and audio observers."""

from dataclasses import dataclass
from enum import Enum, auto


class EventKind(Enum):
    GAME_STARTED = auto()
    GAME_RESET = auto()
    SCORE_CHANGED = auto()
    LIVES_CHANGED = auto()
    DOT_EATEN = auto()
    POWER_PELLET_EATEN = auto()
    POWER_MODE_ENDED = auto()
    GHOST_EATEN = auto()
    PLAYER_CAUGHT = auto()
    PAUSED = auto()
    RESUMED = auto()
    GAME_OVER = auto()
    GAME_WON = auto()


@dataclass(frozen=True)
class GameEvent:
    kind: EventKind
    score: int
    lives: int

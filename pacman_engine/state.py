"""
Match state: scoreboard, lifecycle phase and the two movement clocks.
"""

from dataclasses import dataclass, field
from enum import Enum, auto

from pacman_engine.config import START_LIVES


# Match lifecycle
class Phase(Enum):
    IDLE    = auto()
    RUNNING = auto()
    WON     = auto()
    LOST    = auto()


class Outcome(Enum):
    NONE = auto()
    LOST = auto()
    WON  = auto()


@dataclass
class TickClocks:
    """Time of the last player / ghost tick; None means "tick on next frame"."""

    last_player_tick: float = None
    last_ghost_tick: float = None

    def clear(self):
        self.last_player_tick = None
        self.last_ghost_tick = None

    @staticmethod
    def due(last, now, interval):
        return last is None or now - last >= interval


@dataclass
class MatchState:
    score: int = 0
    lives: int = START_LIVES
    phase: Phase = Phase.IDLE
    paused: bool = False
    collectibles_eaten: int = 0
    collectibles_total: int = 0
    clocks: TickClocks = field(default_factory=TickClocks)

    @property
    def running(self):
        return self.phase is Phase.RUNNING

    @property
    def outcome(self):
        if self.phase is Phase.WON:
            return Outcome.WON
        if self.phase is Phase.LOST:
            return Outcome.LOST
        return Outcome.NONE

    def reset(self, start_lives, collectibles_total):
        """Full reset back to a fresh, idle match."""
        self.score = 0
        self.lives = start_lives
        self.phase = Phase.IDLE
        self.paused = False
        self.collectibles_eaten = 0
        self.collectibles_total = collectibles_total
        self.clocks.clear()

    def add_score(self, points):
        self.score += points

    def record_collectible(self):
        if self.collectibles_eaten < self.collectibles_total:
            self.collectibles_eaten += 1

    def lose_life(self):
        """Take one life; return True while lives remain."""
        if self.lives > 0:
            self.lives -= 1
        return self.lives > 0

    def is_cleared(self):
        return self.collectibles_eaten == self.collectibles_total

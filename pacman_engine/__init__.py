"""
PacMan - a tick-driven maze chase engine with a pygame front end.
"""

from pacman_engine.config import GameConfig
from pacman_engine.errors import InvariantError, MazeError
from pacman_engine.events import EventKind, GameEvent
from pacman_engine.game import Game
from pacman_engine.geometry import DOWN, LEFT, RIGHT, STOP, UP, Vec, manhattan_distance
from pacman_engine.maze import Cell, Maze
from pacman_engine.state import MatchState, Outcome, Phase
from pacman_engine.timers import Scheduler

__all__ = [
    "Cell",
    "DOWN",
    "EventKind",
    "Game",
    "GameConfig",
    "GameEvent",
    "InvariantError",
    "LEFT",
    "Maze",
    "MatchState",
    "MazeError",
    "Outcome",
    "Phase",
    "RIGHT",
    "STOP",
    "Scheduler",
    "UP",
    "Vec",
    "manhattan_distance",
]

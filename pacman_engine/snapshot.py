"""Immutable view of one frame, handed to the renderer."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MazeView:
    cols: int
    rows: int
    walls: tuple
    dots: tuple
    pellets: tuple


@dataclass(frozen=True)
class PlayerView:
    pos: tuple
    dir: tuple
    mouth: float


@dataclass(frozen=True)
class GhostView:
    name: str
    pos: tuple
    dir: tuple
    frightened: bool
    color: tuple


@dataclass(frozen=True)
class Snapshot:
    phase: object
    paused: bool
    score: int
    lives: int
    maze: MazeView
    player: PlayerView
    ghosts: tuple

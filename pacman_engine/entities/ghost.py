"""
Ghosts: greedy one-step pursuers that turn edible in power mode.
"""

from enum import Enum, auto

from pacman_engine.config import GHOST_SCARED, SCORE_GHOST
from pacman_engine.errors import InvariantError
from pacman_engine.geometry import UP, Vec, manhattan_distance


class GhostMode(Enum):
    NORMAL     = auto()
    FRIGHTENED = auto()


class Ghost:
    def __init__(self, name, col, row, color, frightened_color=GHOST_SCARED,
                 points=SCORE_GHOST):
        self.name = name
        self.home = Vec(col, row)
        self.base_color = color
        self.frightened_color = frightened_color
        self.points = points
        self.reset()

    def reset(self):
        self.pos = self.home
        self.dir = UP
        self.exit_frightened()

    @property
    def col(self):
        return self.pos.col

    @property
    def row(self):
        return self.pos.row

    @property
    def frightened(self):
        return self.mode is GhostMode.FRIGHTENED

    def choose_direction(self, maze, target_col, target_row):
        """Pick the open, non-reversing direction closest to the target."""
        possible_dirs = maze.available_directions(self.col, self.row, self.dir)

        if not possible_dirs:
            # Dead end: the only way out is back
            self.dir = -self.dir
            return self.dir

        best_dir = possible_dirs[0]
        best_dist = None
        for d in possible_dirs:
            nc, nr = self.col + d.col, self.row + d.row
            dist = manhattan_distance(nc, nr, target_col, target_row)
            if best_dist is None or dist < best_dist:
                best_dist = dist
                best_dir = d
        self.dir = best_dir
        return self.dir

    def advance(self, maze, target_col, target_row):
        self.choose_direction(maze, target_col, target_row)
        ahead = self.pos + self.dir
        if maze.is_walkable(ahead.col, ahead.row):
            self.pos = ahead
        return self.pos

    def enter_frightened(self):
        self.mode = GhostMode.FRIGHTENED
        self.color = self.frightened_color

    def exit_frightened(self):
        self.mode = GhostMode.NORMAL
        self.color = self.base_color

    def collides_with(self, col, row):
        return self.pos == (col, row)

    def consumed_by(self):
        """Get eaten by pac-man: award points and go home calm."""
        if self.mode is not GhostMode.FRIGHTENED:
            raise InvariantError(f"{self.name} eaten while not frightened")
        self.reset()
        return self.points


def create_ghosts(config):
    return [
        Ghost(spawn.name, spawn.col, spawn.row, spawn.color,
              frightened_color=config.frightened_color, points=config.ghost_score)
        for spawn in config.ghost_spawns
    ]

"""
The player agent.
"""

from collections import namedtuple

from pacman_engine.config import MOUTH_STEP, SCORE_DOT, SCORE_POWER
from pacman_engine.geometry import STOP, Vec
from pacman_engine.maze import Cell

ConsumeResult = namedtuple("ConsumeResult", "ate_dot ate_pellet points")


class PacMan:
    def __init__(self, col, row, dot_score=SCORE_DOT, pellet_score=SCORE_POWER):
        self.pos = Vec(col, row)
        self.dir = STOP
        self.next_dir = STOP
        self.dot_score = dot_score
        self.pellet_score = pellet_score
        # Cosmetic only: 0 = mouth closed, 1 = fully open
        self.mouth = 0.0
        self.mouth_step = MOUTH_STEP

    @property
    def col(self):
        return self.pos.col

    @property
    def row(self):
        return self.pos.row

    def set_direction(self, d):
        """Buffer the requested heading; the latest request wins."""
        self.next_dir = d

    def advance(self, maze):
        # Turn only where the buffered direction is open
        if not Vec(*self.next_dir).is_zero():
            turn = self.pos + Vec(*self.next_dir)
            if maze.is_walkable(turn.col, turn.row):
                self.dir = Vec(*self.next_dir)

        # Blocked: stay put but keep the heading
        ahead = self.pos + self.dir
        if maze.is_walkable(ahead.col, ahead.row):
            self.pos = ahead

        self._animate_mouth()
        return self.pos

    def _animate_mouth(self):
        self.mouth += self.mouth_step
        if self.mouth > 1.0:
            self.mouth = 2.0 - self.mouth
            self.mouth_step = -self.mouth_step
        elif self.mouth < 0.0:
            self.mouth = -self.mouth
            self.mouth_step = -self.mouth_step

    def consume(self, maze, match_state):
        """Eat whatever is under pac-man and count it on the match state."""
        ate_dot = ate_pellet = False
        points = 0
        col, row = self.pos

        if maze.collectible_at(col, row) is Cell.DOT:
            maze.consume(col, row)
            points += self.dot_score
            match_state.record_collectible()
            ate_dot = True

        if maze.collectible_at(col, row) is Cell.POWER_PELLET:
            maze.consume(col, row)
            points += self.pellet_score
            match_state.record_collectible()
            ate_pellet = True

        return ConsumeResult(ate_dot, ate_pellet, points)

    def reset_to(self, col, row):
        self.pos = Vec(col, row)
        self.dir = STOP
        self.next_dir = STOP

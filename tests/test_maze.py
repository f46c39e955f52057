"""Tests for pacman_engine.maze."""

import pytest

from pacman_engine.config import REFERENCE_LAYOUT
from pacman_engine.errors import MazeError
from pacman_engine.geometry import DOWN, LEFT, RIGHT, STOP, UP
from pacman_engine.maze import Cell, Maze

CORRIDOR = (
    "#####",
    "#P.o#",
    "#####",
)


class TestMazeBuild:
    def test_reference_dimensions(self, maze):
        assert (maze.cols, maze.rows) == (19, 21)

    def test_player_start(self, maze):
        assert maze.player_start == (9, 18)

    def test_total_collectibles(self, maze):
        assert maze.total_collectibles == 176
        assert len(maze.remaining_dots()) == 172
        assert len(maze.remaining_pellets()) == 4

    def test_cell_classification(self, maze):
        assert maze.cells[0][0] is Cell.WALL
        assert maze.cells[1][1] is Cell.DOT
        assert maze.cells[3][1] is Cell.POWER_PELLET
        assert maze.cells[18][9] is Cell.FLOOR  # the 'P' marker
        assert maze.cells[11][0] is Cell.FLOOR  # blank padding

    def test_empty_layout_rejected(self):
        with pytest.raises(MazeError, match="empty"):
            Maze.build([])

    def test_non_rectangular_rejected(self):
        with pytest.raises(MazeError, match="row 1"):
            Maze.build(["#P.#", "#.#", "####"])

    def test_missing_start_rejected(self):
        with pytest.raises(MazeError, match="player start"):
            Maze.build(["#####", "#..o#", "#####"])

    def test_duplicate_start_rejected(self):
        with pytest.raises(MazeError, match="second player start"):
            Maze.build(["#####", "#P.P#", "#####"])

    def test_no_collectibles_rejected(self):
        with pytest.raises(MazeError, match="no dots"):
            Maze.build(["#####", "#P  #", "#####"])


class TestWalkability:
    @pytest.mark.parametrize("col,row", [(-1, 0), (0, -1), (-1, -1), (19, 5), (5, 21), (100, 100)])
    def test_out_of_bounds_is_not_walkable(self, maze, col, row):
        assert not maze.is_walkable(col, row)

    def test_walls_and_open_cells(self, maze):
        for row, line in enumerate(REFERENCE_LAYOUT):
            for col, ch in enumerate(line):
                assert maze.is_walkable(col, row) == (ch != '#'), (col, row)


class TestCollectibles:
    def test_collectible_at(self, maze):
        assert maze.collectible_at(10, 18) is Cell.DOT
        assert maze.collectible_at(17, 18) is Cell.POWER_PELLET
        assert maze.collectible_at(9, 18) is None
        assert maze.collectible_at(0, 0) is None
        assert maze.collectible_at(-4, 2) is None

    def test_consume_is_idempotent(self, maze):
        maze.consume(10, 18)
        maze.consume(10, 18)
        assert maze.collectible_at(10, 18) is None
        assert maze.consumed_count == 1

    def test_consume_empty_cell_is_noop(self, maze):
        maze.consume(0, 0)
        maze.consume(9, 18)
        assert maze.consumed_count == 0

    def test_remaining_lists_shrink(self, maze):
        maze.consume(10, 18)
        maze.consume(1, 3)
        assert (10, 18) not in maze.remaining_dots()
        assert (1, 3) not in maze.remaining_pellets()
        assert len(maze.remaining_dots()) == 171
        assert len(maze.remaining_pellets()) == 3

    def test_reset_restores_everything(self, maze):
        maze.consume(10, 18)
        maze.consume(17, 18)
        maze.reset()
        assert maze.consumed_count == 0
        assert maze.collectible_at(10, 18) is Cell.DOT
        assert maze.collectible_at(17, 18) is Cell.POWER_PELLET

    def test_walls_view(self, maze):
        walls = maze.walls()
        assert (0, 0) in walls
        assert (9, 18) not in walls
        assert len(walls) == sum(line.count('#') for line in REFERENCE_LAYOUT)


class TestAvailableDirections:
    def test_start_cell_opens_sideways(self, maze):
        assert maze.available_directions(9, 18) == (LEFT, RIGHT)

    def test_reverse_of_heading_excluded(self, maze):
        assert maze.available_directions(9, 18, RIGHT) == (RIGHT,)
        assert maze.available_directions(9, 18, LEFT) == (LEFT,)

    def test_zero_heading_excludes_nothing(self, maze):
        assert maze.available_directions(9, 18, STOP) == (LEFT, RIGHT)

    def test_keeps_enumeration_order(self, maze):
        # (4, 4) is a crossroads
        assert maze.available_directions(4, 4) == (UP, DOWN, LEFT, RIGHT)

    def test_dead_end_yields_nothing(self):
        corridor = Maze.build(CORRIDOR)
        assert corridor.available_directions(3, 1, RIGHT) == ()
        assert corridor.available_directions(3, 1) == (LEFT,)

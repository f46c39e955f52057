"""
Maze model: the static grid the agents move on.

The grid is parsed once from a row-major list of strings.  Walls never change;
the only mutable state is which collectibles have been consumed, and that is
cleared by ``Maze.reset``.
"""

from enum import Enum, auto

from pacman_engine.errors import MazeError
from pacman_engine.geometry import DIRECTIONS, Vec


class Cell(Enum):
    WALL = auto()
    FLOOR = auto()
    DOT = auto()
    POWER_PELLET = auto()


CHAR_TO_CELL = {
    '#': Cell.WALL,
    '.': Cell.DOT,
    'o': Cell.POWER_PELLET,
}

PLAYER_START_CHAR = 'P'


class Maze:
    def __init__(self, cells, player_start):
        self.cells = cells
        self.rows = len(cells)
        self.cols = len(cells[0])
        self.player_start = player_start
        self.total_collectibles = sum(
            1 for row in cells for cell in row
            if cell in (Cell.DOT, Cell.POWER_PELLET)
        )
        self._consumed = set()
        self._walls = self._positions(lambda c, r, cell: cell is Cell.WALL)

    @classmethod
    def build(cls, layout_rows):
        """Parse a layout into a Maze, failing fast on malformed input."""
        if not layout_rows:
            raise MazeError("maze layout is empty")
        width = len(layout_rows[0])
        if width == 0:
            raise MazeError("maze layout has zero-width rows")

        cells = []
        player_start = None
        for row_idx, row_str in enumerate(layout_rows):
            if len(row_str) != width:
                raise MazeError(
                    f"row {row_idx} has width {len(row_str)}, expected {width}"
                )
            row = []
            for col_idx, ch in enumerate(row_str):
                if ch == PLAYER_START_CHAR:
                    if player_start is not None:
                        raise MazeError(
                            f"second player start at ({col_idx}, {row_idx}); "
                            f"first was at {tuple(player_start)}"
                        )
                    player_start = Vec(col_idx, row_idx)
                row.append(CHAR_TO_CELL.get(ch, Cell.FLOOR))
            cells.append(row)

        if player_start is None:
            raise MazeError(f"maze layout has no player start marker {PLAYER_START_CHAR!r}")
        maze = cls(cells, player_start)
        if maze.total_collectibles == 0:
            raise MazeError("maze layout has no dots or power pellets")
        return maze

    def reset(self):
        """Restore every collectible."""
        self._consumed.clear()

    def in_bounds(self, col, row):
        return 0 <= col < self.cols and 0 <= row < self.rows

    def is_walkable(self, col, row):
        if not self.in_bounds(col, row):
            return False
        return self.cells[row][col] is not Cell.WALL

    def collectible_at(self, col, row):
        """Return Cell.DOT, Cell.POWER_PELLET or None for unconsumed items only."""
        if not self.in_bounds(col, row):
            return None
        cell = self.cells[row][col]
        if cell in (Cell.DOT, Cell.POWER_PELLET) and (col, row) not in self._consumed:
            return cell
        return None

    def consume(self, col, row):
        if self.collectible_at(col, row) is not None:
            self._consumed.add((col, row))

    @property
    def consumed_count(self):
        return len(self._consumed)

    def available_directions(self, col, row, exclude_heading=None):
        """Walkable directions from (col, row), minus the reverse of exclude_heading.

        The result keeps the fixed Up, Down, Left, Right order and may be empty
        in a dead end.
        """
        reverse = -Vec(*exclude_heading) if exclude_heading is not None else None
        available = []
        for d in DIRECTIONS:
            if reverse is not None and d == reverse:
                continue
            if self.is_walkable(col + d.col, row + d.row):
                available.append(d)
        return tuple(available)

    # -- read-only views for renderers ------------------------------------

    def _positions(self, predicate):
        return tuple(
            Vec(col_idx, row_idx)
            for row_idx, row in enumerate(self.cells)
            for col_idx, cell in enumerate(row)
            if predicate(col_idx, row_idx, cell)
        )

    def walls(self):
        return self._walls

    def remaining_dots(self):
        return self._positions(
            lambda c, r, cell: cell is Cell.DOT and (c, r) not in self._consumed
        )

    def remaining_pellets(self):
        return self._positions(
            lambda c, r, cell: cell is Cell.POWER_PELLET and (c, r) not in self._consumed
        )

"""Grid vectors, direction constants and the distance heuristic."""

from collections import namedtuple


class Vec(namedtuple("Vec", "col row")):
    """A grid coordinate or a unit heading. Immutable, hashable."""

    __slots__ = ()

    def __add__(self, other):
        return Vec(self.col + other.col, self.row + other.row)

    def __neg__(self):
        return Vec(-self.col, -self.row)

    def is_unit(self):
        """True for the four axis-aligned unit directions."""
        if not (isinstance(self.col, int) and isinstance(self.row, int)):
            return False
        return abs(self.col) + abs(self.row) == 1

    def is_zero(self):
        return self.col == 0 and self.row == 0


# Directions
UP    = Vec(0, -1)
DOWN  = Vec(0, 1)
LEFT  = Vec(-1, 0)
RIGHT = Vec(1, 0)
STOP  = Vec(0, 0)

# Fixed enumeration order; ghosts break distance ties by it.
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)


def manhattan_distance(x1, y1, x2, y2):
    return abs(x1 - x2) + abs(y1 - y2)

"""Exception types raised by the engine."""


class MazeError(ValueError):
    """The maze layout cannot be turned into a playable maze."""


class InvariantError(AssertionError):
    """The simulation broke one of its own rules (a programming error)."""

"""Tests for pacman_engine.geometry."""

from pacman_engine.geometry import DIRECTIONS, DOWN, LEFT, RIGHT, STOP, UP, Vec, manhattan_distance


class TestVec:
    def test_add_and_negate(self):
        assert Vec(3, 4) + RIGHT == Vec(4, 4)
        assert -UP == DOWN
        assert -LEFT == RIGHT
        assert -STOP == STOP

    def test_equal_to_plain_tuple(self):
        assert Vec(1, 2) == (1, 2)
        assert {Vec(1, 2): "a"}[(1, 2)] == "a"

    def test_unit_and_zero(self):
        assert all(d.is_unit() for d in DIRECTIONS)
        assert not STOP.is_unit()
        assert STOP.is_zero()
        assert not Vec(1, 1).is_unit()
        assert not Vec(2, 0).is_unit()
        assert not Vec(0.5, 0.5).is_unit()
        assert not Vec(1.0, 0).is_unit()

    def test_enumeration_order(self):
        assert DIRECTIONS == (UP, DOWN, LEFT, RIGHT)


class TestManhattanDistance:
    def test_matches_definition(self):
        for x1, y1, x2, y2 in [(0, 0, 3, 4), (-2, 5, 7, -1), (9, 17, 9, 17), (-3, -3, 3, 3)]:
            assert manhattan_distance(x1, y1, x2, y2) == abs(x1 - x2) + abs(y1 - y2)

    def test_zero_for_same_point(self):
        assert manhattan_distance(6, -2, 6, -2) == 0

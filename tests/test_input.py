"""Tests for pacman_engine.input."""

import pygame
import pytest

from pacman_engine.geometry import DOWN, LEFT, RIGHT, UP
from pacman_engine.input import SwipeTracker, key_direction, swipe_direction


class TestKeyMap:
    @pytest.mark.parametrize(
        "key,expected",
        [
            (pygame.K_UP, UP),
            (pygame.K_w, UP),
            (pygame.K_DOWN, DOWN),
            (pygame.K_s, DOWN),
            (pygame.K_LEFT, LEFT),
            (pygame.K_a, LEFT),
            (pygame.K_RIGHT, RIGHT),
            (pygame.K_d, RIGHT),
        ],
    )
    def test_direction_keys(self, key, expected):
        assert key_direction(key) == expected

    def test_other_keys_map_to_nothing(self):
        assert key_direction(pygame.K_q) is None


class TestSwipe:
    def test_dominant_axis(self):
        assert swipe_direction(30, 5) == RIGHT
        assert swipe_direction(-30, 5) == LEFT
        assert swipe_direction(3, -20) == UP
        assert swipe_direction(-3, 20) == DOWN

    def test_too_short(self):
        assert swipe_direction(0, 0) is None
        assert swipe_direction(4, -3, threshold=5) is None

    def test_tracker_reanchors_after_each_swipe(self):
        tracker = SwipeTracker(threshold=10)
        assert tracker.move(50, 50) is None  # not pressed
        tracker.press(0, 0)
        assert tracker.move(5, 0) is None
        assert tracker.move(20, 0) == RIGHT
        assert tracker.move(20, 30) == DOWN
        tracker.release()
        assert tracker.move(100, 30) is None

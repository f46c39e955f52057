"""
Input mapping: keyboard keys and swipe gestures to directions.
"""

import pygame

from pacman_engine.geometry import DOWN, LEFT, RIGHT, UP

KEY_MAP = {
    pygame.K_UP: UP,
    pygame.K_w: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT,
    pygame.K_d: RIGHT,
}

START_KEYS = (pygame.K_RETURN, pygame.K_SPACE)
PAUSE_KEY = pygame.K_p
QUIT_KEY = pygame.K_ESCAPE

SWIPE_THRESHOLD = 10  # pixels


def key_direction(key):
    return KEY_MAP.get(key)


def swipe_direction(dx, dy, threshold=0):
    """Direction of a drag by its dominant axis, or None if too short."""
    if max(abs(dx), abs(dy)) <= threshold:
        return None
    if abs(dx) > abs(dy):
        return RIGHT if dx > 0 else LEFT
    return DOWN if dy > 0 else UP


class SwipeTracker:
    """Turns a stream of pointer positions into direction requests.

    The anchor moves after each recognised swipe so one long drag can steer
    through several turns.
    """

    def __init__(self, threshold=SWIPE_THRESHOLD):
        self.threshold = threshold
        self.anchor = None

    def press(self, x, y):
        self.anchor = (x, y)

    def release(self):
        self.anchor = None

    def move(self, x, y):
        if self.anchor is None:
            return None
        d = swipe_direction(x - self.anchor[0], y - self.anchor[1], self.threshold)
        if d is not None:
            self.anchor = (x, y)
        return d

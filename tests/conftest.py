"""Shared fixtures for engine tests."""

import pytest

from pacman_engine.config import REFERENCE_LAYOUT
from pacman_engine.game import Game
from pacman_engine.maze import Maze


@pytest.fixture
def maze():
    return Maze.build(REFERENCE_LAYOUT)


@pytest.fixture
def game():
    g = Game()
    g.start()
    return g


@pytest.fixture
def events(game):
    received = []
    game.subscribe(received.append)
    return received

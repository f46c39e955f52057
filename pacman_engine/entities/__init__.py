"""Agents that move on the maze: the player and the ghosts."""

from pacman_engine.entities.ghost import Ghost, GhostMode, create_ghosts
from pacman_engine.entities.pacman import ConsumeResult, PacMan

__all__ = ["ConsumeResult", "Ghost", "GhostMode", "PacMan", "create_ghosts"]

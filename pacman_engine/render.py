"""
Pygame drawing of a game Snapshot.

Everything here draws onto a caller-supplied surface, so it works just as well
on an off-screen ``pygame.Surface`` as on the display.
"""

import math

import pygame

from pacman_engine.config import (
    BLACK,
    DARK_BLUE,
    DOT_COLOR,
    PUPIL,
    TILE,
    WALL_BLUE,
    WALL_HIGHLIGHT,
    WHITE,
    YELLOW,
)
from pacman_engine.geometry import DIRECTIONS, DOWN, LEFT, RIGHT, UP

MAX_MOUTH_ANGLE = 45  # degrees at mouth == 1.0


# ---------------------------------------------------------------------------
# Helper: grid -> pixel
# ---------------------------------------------------------------------------
def grid_to_pixel(col, row, offset_y=0, tile=TILE):
    """Grid cell -> pixel centre."""
    return col * tile + tile // 2, row * tile + offset_y + tile // 2


# ---------------------------------------------------------------------------
# Maze
# ---------------------------------------------------------------------------
def draw_wall_segment(surface, col, row, walls, offset_y=0, tile=TILE):
    """Draw a wall tile with bright edges towards open cells."""
    x = col * tile
    y = row * tile + offset_y
    rect = pygame.Rect(x, y, tile, tile)

    pygame.draw.rect(surface, WALL_BLUE, rect)
    inner = rect.inflate(-4, -4)
    pygame.draw.rect(surface, DARK_BLUE, inner)

    for d in DIRECTIONS:
        if (col + d.col, row + d.row) in walls:
            continue
        if d == LEFT:
            pygame.draw.line(surface, WALL_HIGHLIGHT, (x + 1, y), (x + 1, y + tile - 1), 2)
        elif d == RIGHT:
            pygame.draw.line(surface, WALL_HIGHLIGHT, (x + tile - 2, y), (x + tile - 2, y + tile - 1), 2)
        elif d == UP:
            pygame.draw.line(surface, WALL_HIGHLIGHT, (x, y + 1), (x + tile - 1, y + 1), 2)
        elif d == DOWN:
            pygame.draw.line(surface, WALL_HIGHLIGHT, (x, y + tile - 2), (x + tile - 1, y + tile - 2), 2)


def draw_maze(surface, maze, offset_y=0, ticks=0, tile=TILE):
    walls = set(maze.walls)
    for col, row in maze.walls:
        draw_wall_segment(surface, col, row, walls, offset_y, tile)

    for col, row in maze.dots:
        pygame.draw.circle(surface, DOT_COLOR, grid_to_pixel(col, row, offset_y, tile), 2)

    # Power pellets pulse
    pulse = abs(math.sin(ticks * 0.005)) * 3 + 4
    for col, row in maze.pellets:
        pygame.draw.circle(surface, DOT_COLOR, grid_to_pixel(col, row, offset_y, tile), int(pulse))


# ---------------------------------------------------------------------------
# Agents
# ---------------------------------------------------------------------------
def draw_pacman(surface, player, offset_y=0, tile=TILE):
    x, y = grid_to_pixel(player.pos[0], player.pos[1], offset_y, tile)
    mouth_angle = player.mouth * MAX_MOUTH_ANGLE

    # Start angle by facing; y grows downwards so UP is +90 here
    if player.dir == LEFT:
        start = 180 + mouth_angle
    elif player.dir == UP:
        start = 90 + mouth_angle
    elif player.dir == DOWN:
        start = 270 + mouth_angle
    else:
        start = mouth_angle

    extent = max(360 - 2 * mouth_angle, 1)
    r = tile // 2 - 1
    start_rad = math.radians(start)
    end_rad = math.radians(start + extent)

    points = [(x, y)]
    steps = 20
    for i in range(steps + 1):
        angle = start_rad + (end_rad - start_rad) * i / steps
        points.append((x + r * math.cos(angle), y - r * math.sin(angle)))
    pygame.draw.polygon(surface, YELLOW, points)


def draw_ghost(surface, ghost, offset_y=0, tile=TILE):
    cx, cy = grid_to_pixel(ghost.pos[0], ghost.pos[1], offset_y, tile)
    r = tile // 2 - 1

    # Semicircle head over a square skirt
    pygame.draw.circle(surface, ghost.color, (cx, cy - 2), r)
    pygame.draw.rect(surface, ghost.color, (cx - r, cy - 2, r * 2, r))

    if ghost.frightened:
        # Wobbly mouth, no pupils
        points = [(cx - 5 + i * 3, cy + 3 + (2 if i % 2 == 0 else -2)) for i in range(5)]
        pygame.draw.lines(surface, WHITE, False, points, 1)
        for side in (-1, 1):
            pygame.draw.circle(surface, WHITE, (cx + side * 3, cy - 3), 1)
        return

    _draw_eyes(surface, cx, cy, ghost.dir)


def _draw_eyes(surface, cx, cy, heading):
    """Eyes look toward the movement direction."""
    for side in (-1, 1):
        ex = cx + side * 4
        ey = cy - 3
        pygame.draw.ellipse(surface, WHITE, (ex - 3, ey - 3, 6, 7))
        px = ex + heading[0]
        py = ey + heading[1] * 2
        pygame.draw.circle(surface, PUPIL, (px, py), 1)


def draw_snapshot(surface, snapshot, offset_y=0, ticks=0, tile=TILE):
    surface.fill(BLACK, pygame.Rect(0, offset_y, snapshot.maze.cols * tile, snapshot.maze.rows * tile))
    draw_maze(surface, snapshot.maze, offset_y, ticks, tile)
    draw_pacman(surface, snapshot.player, offset_y, tile)
    for ghost in snapshot.ghosts:
        draw_ghost(surface, ghost, offset_y, tile)

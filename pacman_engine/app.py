"""
Pygame host: window, event pump and the frame loop that drives the engine.
"""

import argparse
import logging
import math
import sys

import pygame

from pacman_engine.config import BLACK, CYAN, FPS, HUD_GREY, RED, TILE, WALL_BLUE, WHITE, YELLOW
from pacman_engine.events import EventKind
from pacman_engine.game import Game
from pacman_engine.input import PAUSE_KEY, QUIT_KEY, START_KEYS, SwipeTracker, key_direction
from pacman_engine.render import draw_snapshot
from pacman_engine.state import Phase

logger = logging.getLogger(__name__)

HUD_HEIGHT = 3 * TILE  # rows above the maze reserved for the HUD


class App:
    def __init__(self, game=None):
        pygame.init()
        self.game = game or Game()
        self.width = self.game.maze.cols * TILE
        self.height = self.game.maze.rows * TILE + HUD_HEIGHT
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption("PacMan")
        self.clock = pygame.time.Clock()

        # Fonts
        self.font_large = pygame.font.Font(None, 48)
        self.font_medium = pygame.font.Font(None, 32)
        self.font_small = pygame.font.Font(None, 24)

        self.high_score = 0
        self.swipe = SwipeTracker()
        self.game.subscribe(self.on_game_event)

    def on_game_event(self, event):
        if event.kind in (EventKind.GAME_OVER, EventKind.GAME_WON):
            self.high_score = max(self.high_score, event.score)

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN:
                if event.key == QUIT_KEY:
                    return False
                if event.key in START_KEYS:
                    self._start_or_restart()
                elif event.key == PAUSE_KEY:
                    self.game.toggle_pause()
                else:
                    self._steer(key_direction(event.key))
            elif event.type == pygame.MOUSEBUTTONDOWN:
                self.swipe.press(*event.pos)
            elif event.type == pygame.MOUSEBUTTONUP:
                self.swipe.release()
            elif event.type == pygame.MOUSEMOTION:
                self._steer(self.swipe.move(*event.pos))
            elif event.type == pygame.FINGERDOWN:
                self.swipe.press(event.x * self.width, event.y * self.height)
            elif event.type == pygame.FINGERUP:
                self.swipe.release()
            elif event.type == pygame.FINGERMOTION:
                self._steer(self.swipe.move(event.x * self.width, event.y * self.height))
        return True

    def _start_or_restart(self):
        phase = self.game.phase
        if phase is Phase.IDLE:
            self.game.start()
        elif phase in (Phase.WON, Phase.LOST):
            logger.info("Restarting after %s", phase.name)
            self.game.full_reset(autostart=True)

    def _steer(self, d):
        # Directions only matter while the match is on
        if d is not None and self.game.phase is Phase.RUNNING:
            self.game.set_direction(d)

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------
    def draw(self):
        self.screen.fill(BLACK)
        ticks = pygame.time.get_ticks()
        snapshot = self.game.snapshot()
        draw_snapshot(self.screen, snapshot, offset_y=HUD_HEIGHT, ticks=ticks)
        self._draw_hud(snapshot)

        if snapshot.phase is Phase.IDLE:
            self._draw_banner("READY!", YELLOW, "Press ENTER to start", ticks)
        elif snapshot.phase is Phase.LOST:
            self._draw_overlay()
            self._draw_banner("GAME OVER", RED, f"Score: {snapshot.score}", ticks, prompt=True)
        elif snapshot.phase is Phase.WON:
            self._draw_overlay()
            self._draw_banner("YOU WIN!", YELLOW, f"Score: {snapshot.score}", ticks, prompt=True)
        elif snapshot.paused:
            self._draw_banner("PAUSED", CYAN, "Press P to resume", ticks)

        pygame.display.flip()

    def _draw_overlay(self):
        overlay = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 150))
        self.screen.blit(overlay, (0, 0))

    def _draw_banner(self, title, color, subtitle, ticks, prompt=False):
        txt = self.font_large.render(title, True, color)
        self.screen.blit(txt, (self.width // 2 - txt.get_width() // 2, self.height // 2 - 40))

        sub = self.font_medium.render(subtitle, True, WHITE)
        self.screen.blit(sub, (self.width // 2 - sub.get_width() // 2, self.height // 2 + 10))

        if prompt:
            restart = self.font_small.render("Press ENTER to restart", True, WHITE)
            alpha = abs(math.sin(ticks * 0.003)) * 255
            restart.set_alpha(int(alpha))
            self.screen.blit(restart, (self.width // 2 - restart.get_width() // 2, self.height // 2 + 50))

    def _draw_hud(self, snapshot):
        """Score, high score and lives above the maze."""
        score_txt = self.font_medium.render(f"SCORE {snapshot.score:>6}", True, WHITE)
        self.screen.blit(score_txt, (8, 6))

        hi_txt = self.font_small.render(f"HIGH {max(self.high_score, snapshot.score):>6}", True, HUD_GREY)
        self.screen.blit(hi_txt, (self.width - hi_txt.get_width() - 8, 8))

        # Lives as small pac-men
        for i in range(snapshot.lives):
            lx = 16 + i * 24
            ly = HUD_HEIGHT - 16
            points = [(lx, ly)]
            for j in range(16):
                angle = math.radians(30 + (300 * j / 15))
                points.append((lx + 8 * math.cos(angle), ly - 8 * math.sin(angle)))
            pygame.draw.polygon(self.screen, YELLOW, points)

        pygame.draw.line(self.screen, WALL_BLUE, (0, HUD_HEIGHT - 1), (self.width, HUD_HEIGHT - 1), 1)

    def run(self):
        running = True
        while running:
            running = self.handle_events()
            self.game.update(pygame.time.get_ticks())
            self.draw()
            self.clock.tick(FPS)
        pygame.quit()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Play PacMan.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="engine log verbosity",
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    App().run()
    return 0


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    sys.exit(main())

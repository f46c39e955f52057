"""
The simulation step: owns the maze, the match state and every agent, and is
the only place where rules spanning more than one entity live.

The host calls ``Game.update(now_ms)`` once per frame.  Player and ghost
movement each run on their own interval, so most frames do nothing but let the
renderer draw the latest ``snapshot()``.
"""

import logging

from pacman_engine.config import GameConfig
from pacman_engine.entities import PacMan, create_ghosts
from pacman_engine.events import EventKind, GameEvent
from pacman_engine.geometry import DIRECTIONS, Vec
from pacman_engine.maze import Maze
from pacman_engine.snapshot import GhostView, MazeView, PlayerView, Snapshot
from pacman_engine.state import MatchState, Phase
from pacman_engine.timers import Scheduler

logger = logging.getLogger(__name__)


class Game:
    def __init__(self, config=None, scheduler=None):
        self.config = config or GameConfig()
        self.maze = Maze.build(self.config.layout)
        self.state = MatchState(
            lives=self.config.start_lives,
            collectibles_total=self.maze.total_collectibles,
        )
        start = self.maze.player_start
        self.pacman = PacMan(start.col, start.row,
                             self.config.dot_score, self.config.pellet_score)
        self.ghosts = create_ghosts(self.config)
        self.scheduler = scheduler or Scheduler()
        self._power_timer = None
        self._listeners = []

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------
    def subscribe(self, listener):
        """Register ``listener(event)``; it is called for every GameEvent."""
        self._listeners.append(listener)

    def _emit(self, kind):
        event = GameEvent(kind, self.state.score, self.state.lives)
        for listener in list(self._listeners):
            listener(event)

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------
    @property
    def phase(self):
        return self.state.phase

    @property
    def outcome(self):
        return self.state.outcome

    @property
    def score(self):
        return self.state.score

    @property
    def lives(self):
        return self.state.lives

    @property
    def paused(self):
        return self.state.paused

    @property
    def power_mode_active(self):
        return self._power_timer is not None

    # ------------------------------------------------------------------
    # Host controls
    # ------------------------------------------------------------------
    def start(self):
        if self.state.phase is not Phase.IDLE:
            return False
        self.state.phase = Phase.RUNNING
        logger.info("Match started (%d collectibles)", self.state.collectibles_total)
        self._emit(EventKind.GAME_STARTED)
        return True

    def toggle_pause(self):
        if not self.state.running:
            return
        self.state.paused = not self.state.paused
        self._emit(EventKind.PAUSED if self.state.paused else EventKind.RESUMED)

    def set_direction(self, d):
        """Buffer a direction request from the input layer."""
        try:
            d = Vec(*d)
        except TypeError:
            logger.warning("Ignoring malformed direction %r", d)
            return False
        if d not in DIRECTIONS:
            logger.warning("Ignoring non-axis-aligned direction %r", tuple(d))
            return False
        # Store the canonical integer direction
        self.pacman.set_direction(DIRECTIONS[DIRECTIONS.index(d)])
        return True

    def soft_reset(self):
        """Put everyone back on their start cells; score and lives are kept."""
        self._reposition()
        self.state.clocks.clear()
        logger.debug("Soft reset")

    def full_reset(self, autostart=False):
        """Fresh match: new maze contents, score 0, full lives."""
        self._cancel_power_timer()
        self.maze.reset()
        self.state.reset(self.config.start_lives, self.maze.total_collectibles)
        start = self.maze.player_start
        self.pacman.reset_to(start.col, start.row)
        self.ghosts = create_ghosts(self.config)
        logger.info("Match reset")
        self._emit(EventKind.GAME_RESET)
        if autostart:
            self.start()

    # ------------------------------------------------------------------
    # Frame driver
    # ------------------------------------------------------------------
    def update(self, now):
        self.scheduler.advance_to(now)
        if not self.state.running or self.state.paused:
            return

        clocks = self.state.clocks
        if clocks.due(clocks.last_player_tick, now, self.config.player_interval_ms):
            self.step_player()
            clocks.last_player_tick = now
            if not self.state.running:
                return

        if clocks.due(clocks.last_ghost_tick, now, self.config.ghost_interval_ms):
            self.step_ghosts()
            clocks.last_ghost_tick = now

    def step_player(self):
        """One player tick: move, eat, then resolve collisions."""
        self.pacman.advance(self.maze)
        result = self.pacman.consume(self.maze, self.state)
        if result.points:
            self.state.add_score(result.points)
            if result.ate_dot:
                self._emit(EventKind.DOT_EATEN)
            if result.ate_pellet:
                self._emit(EventKind.POWER_PELLET_EATEN)
            self._emit(EventKind.SCORE_CHANGED)
        if result.ate_pellet:
            self.activate_power_mode()
        return self.resolve_collisions()

    def step_ghosts(self):
        """One ghost tick: every ghost chases pac-man's current cell."""
        target = self.pacman.pos
        for ghost in self.ghosts:
            ghost.advance(self.maze, target.col, target.row)
        return self.resolve_collisions()

    # ------------------------------------------------------------------
    # Power mode
    # ------------------------------------------------------------------
    def activate_power_mode(self):
        self._cancel_power_timer()
        for ghost in self.ghosts:
            ghost.enter_frightened()
        self._power_timer = self.scheduler.call_later(
            self.config.power_duration_ms, self._end_power_mode
        )
        logger.debug("Power mode armed for %d ms", self.config.power_duration_ms)

    def _end_power_mode(self):
        self._power_timer = None
        for ghost in self.ghosts:
            ghost.exit_frightened()
        logger.debug("Power mode expired")
        self._emit(EventKind.POWER_MODE_ENDED)

    def _cancel_power_timer(self):
        if self._power_timer is not None:
            self._power_timer.cancel()
            self._power_timer = None

    # ------------------------------------------------------------------
    # Collisions and lifecycle
    # ------------------------------------------------------------------
    def resolve_collisions(self):
        """Apply ghost contact and the win check; safe to call repeatedly."""
        if not self.state.running:
            return self.state.outcome

        col, row = self.pacman.pos
        for ghost in self.ghosts:
            if not ghost.collides_with(col, row):
                continue
            if ghost.frightened:
                self.state.add_score(ghost.consumed_by())
                logger.debug("%s eaten at (%d, %d)", ghost.name, col, row)
                self._emit(EventKind.GHOST_EATEN)
                self._emit(EventKind.SCORE_CHANGED)
            else:
                return self._player_caught(ghost)

        if self.state.is_cleared():
            self.state.phase = Phase.WON
            self._cancel_power_timer()
            logger.info("Maze cleared, final score %d", self.state.score)
            self._emit(EventKind.GAME_WON)
        return self.state.outcome

    def _player_caught(self, ghost):
        lives_left = self.state.lose_life()
        logger.info("Caught by %s, %d lives left", ghost.name, self.state.lives)
        self._emit(EventKind.PLAYER_CAUGHT)
        self._emit(EventKind.LIVES_CHANGED)
        if not lives_left:
            self.state.phase = Phase.LOST
            self._cancel_power_timer()
            logger.info("Game over, final score %d", self.state.score)
            self._emit(EventKind.GAME_OVER)
        else:
            self._reposition()
        return self.state.outcome

    def _reposition(self):
        self._cancel_power_timer()
        start = self.maze.player_start
        self.pacman.reset_to(start.col, start.row)
        for ghost in self.ghosts:
            ghost.reset()

    # ------------------------------------------------------------------
    # Render boundary
    # ------------------------------------------------------------------
    def snapshot(self):
        maze = self.maze
        return Snapshot(
            phase=self.state.phase,
            paused=self.state.paused,
            score=self.state.score,
            lives=self.state.lives,
            maze=MazeView(
                cols=maze.cols,
                rows=maze.rows,
                walls=maze.walls(),
                dots=maze.remaining_dots(),
                pellets=maze.remaining_pellets(),
            ),
            player=PlayerView(
                pos=self.pacman.pos,
                dir=self.pacman.dir,
                mouth=self.pacman.mouth,
            ),
            ghosts=tuple(
                GhostView(
                    name=g.name,
                    pos=g.pos,
                    dir=g.dir,
                    frightened=g.frightened,
                    color=g.color,
                )
                for g in self.ghosts
            ),
        )

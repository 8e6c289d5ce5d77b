"""
Game core - owns the maze, the player and the round state, one tick at a time
"""

import random

from maze.generator import generate
from maze.difficulty import DEFAULT_DIFFICULTY
from game.collision import CollisionOracle
from game.movement import MovementController
from game.game_state import RoundStateMachine
from utils.logger import get_logger

log = get_logger('level_manager')


class RenderFrame:
    """
    Geometry and HUD values for one frame; the core draws nothing itself
    """
    def __init__(self, grid, player, round_state):
        self.cell_size = grid.cell_size
        self.wall_rects = grid.wall_rectangles()
        self.start_rect = grid.start_rect
        self.goal_rect = grid.goal_rect
        self.start_position = grid.start_pixel_position
        self.goal_position = grid.goal_pixel_position
        self.player_rect = player.rect

        self.score = round_state.score
        self.round = round_state.round
        self.time_remaining = round_state.time_remaining
        self.speed = round_state.speed
        self.is_over = round_state.is_over
        self.final_score = round_state.score if round_state.is_over else None

    def __repr__(self):
        return (f"RenderFrame(player={self.player_rect}, score={self.score}, "
                f"time={self.time_remaining}, over={self.is_over})")


class GameCore:
    """
    Single owner of GridModel, Player and RoundState

    Lifecycle: construct, init(), then tick()/timer_tick() from the host
    loop; restart() and resize() rebuild the maze.
    """
    def __init__(self, viewport_width, viewport_height, config=DEFAULT_DIFFICULTY, seed=None):
        """
        Args:
            viewport_width, viewport_height: Maze area in pixels
            config: DifficultyConfig
            seed: Optional seed for reproducible mazes
        """
        self.config = config
        self.viewport_width = viewport_width
        self.viewport_height = viewport_height
        self.rng = random.Random(seed)

        self.grid = None
        self.oracle = None
        self.movement = None
        self.rounds = None
        self.initialized = False

    def init(self):
        """Build round state, first maze and player"""
        self.rounds = RoundStateMachine(self.config)
        self._regenerate()
        self.movement = MovementController(self.oracle, *self.canvas_size, config=self.config)
        self.initialized = True
        return self

    def _regenerate(self):
        cfg = self.config
        self.grid = generate(
            self.viewport_width, self.viewport_height,
            cell_size=cfg.cell_size,
            agent_size=cfg.agent_size,
            rng=self.rng,
            min_goal_distance=cfg.min_goal_distance
        )
        self.oracle = CollisionOracle(self.grid, padding=cfg.collision_padding)

    def _new_maze(self):
        """Replace the maze wholesale and put the player on the new start"""
        self._regenerate()
        self.movement.set_bounds(self.oracle, *self.canvas_size)
        self.movement.reset()

    @property
    def canvas_size(self):
        """
        Movement bounds: the viewport, grown to the grid when a tiny
        viewport forced the minimum grid size
        """
        grid_w, grid_h = self.grid.pixel_size
        return max(self.viewport_width, grid_w), max(self.viewport_height, grid_h)

    @property
    def player(self):
        return self.movement.player

    @property
    def round_state(self):
        return self.rounds.state

    @property
    def is_over(self):
        return self.rounds.is_over

    def tick(self, intent, pending_seconds=0):
        """
        One simulation step

        Movement and the goal check run before any countdown ticks that
        arrived in the same frame, so reaching the goal on the last second
        still counts.

        Args:
            intent: InputIntent sampled this frame
            pending_seconds: Countdown ticks delivered since the last frame

        Returns:
            RenderFrame
        """
        if not self.rounds.is_over:
            player = self.movement.tick(intent, self.rounds.state.speed)
            if self.oracle.reached_goal(player.rect):
                self.rounds.goal_reached()
                self._new_maze()

        for _ in range(pending_seconds):
            self.timer_tick()

        return self.frame()

    def timer_tick(self):
        """
        One countdown second

        Returns:
            True if the game just ended
        """
        return self.rounds.tick_second()

    def restart(self):
        """Fresh counters, fresh maze, player on start"""
        self.rounds.restart()
        self._new_maze()
        log.info("Game restarted with %r", self.grid)

    def resize(self, viewport_width, viewport_height):
        """Regenerate for a new viewport; round counters are kept"""
        if (viewport_width, viewport_height) == (self.viewport_width, self.viewport_height):
            return False

        self.viewport_width = viewport_width
        self.viewport_height = viewport_height
        self._new_maze()
        log.info("Viewport resized to %dx%d", viewport_width, viewport_height)
        return True

    def frame(self):
        """Current RenderFrame"""
        return RenderFrame(self.grid, self.movement.player, self.rounds.state)

    def __repr__(self):
        return f"GameCore(viewport={self.viewport_width}x{self.viewport_height}, grid={self.grid!r})"

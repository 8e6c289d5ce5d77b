"""
Movement controller - momentum, friction and per-axis wall resolution
"""

from entities.player import Player
from maze.difficulty import DEFAULT_DIFFICULTY
from utils.helpers import clamp


class MovementController:
    """
    Owns the player box and advances it one fixed step per tick.

    Axes are resolved one after the other (x, then y with the new x), so a
    blocked axis stops while the other keeps sliding along the wall.
    """
    def __init__(self, oracle, canvas_width, canvas_height, config=DEFAULT_DIFFICULTY):
        """
        Args:
            oracle: CollisionOracle for the current maze
            canvas_width, canvas_height: Clamp bounds in pixels
            config: DifficultyConfig with physics tunables
        """
        self.config = config
        self.oracle = oracle
        self.canvas_width = canvas_width
        self.canvas_height = canvas_height

        x, y = oracle.grid.start_pixel_position
        self.player = Player(x, y, config.player_width, config.player_height)

    def set_bounds(self, oracle, canvas_width, canvas_height):
        """Switch to a regenerated maze and/or new canvas"""
        self.oracle = oracle
        self.canvas_width = canvas_width
        self.canvas_height = canvas_height

    def reset(self, x=None, y=None):
        """Put the player on (x, y), default the maze start, at rest"""
        if x is None or y is None:
            x, y = self.oracle.grid.start_pixel_position
        self.player.reset_position(x, y)

    def _axis_velocity(self, velocity, negative, positive, speed):
        cfg = self.config
        if positive and not negative:
            return clamp(velocity + cfg.acceleration, -speed, speed)
        if negative and not positive:
            return clamp(velocity - cfg.acceleration, -speed, speed)

        velocity *= cfg.friction
        if abs(velocity) < cfg.stop_threshold:
            velocity = 0.0
        return velocity

    def tick(self, intent, speed):
        """
        Advance one step

        Args:
            intent: InputIntent (up/down/left/right held flags)
            speed: Current max velocity per axis

        Returns:
            The updated Player
        """
        p = self.player

        p.vx = self._axis_velocity(p.vx, intent.left, intent.right, speed)
        p.vy = self._axis_velocity(p.vy, intent.up, intent.down, speed)

        max_x = max(0.0, self.canvas_width - p.width)
        max_y = max(0.0, self.canvas_height - p.height)

        # X axis
        new_x = clamp(p.x + p.vx, 0.0, max_x)
        if self.oracle.collides(new_x, p.y, p.width, p.height):
            p.vx = 0.0
        else:
            p.x = new_x

        # Y axis, with x already resolved
        new_y = clamp(p.y + p.vy, 0.0, max_y)
        if self.oracle.collides(p.x, new_y, p.width, p.height):
            p.vy = 0.0
        else:
            p.y = new_y

        return p

    def __repr__(self):
        return f"MovementController(player={self.player!r})"

"""
Difficulty configuration for Maze Dash
Round timing, speed scaling and movement physics in one place
"""

from utils.constants import (
    CELL_SIZE, PLAYER_SIZE, BASE_SPEED, SPEED_STEP, ROUND_TIME, TIME_BONUS,
    ACCELERATION, FRICTION, STOP_THRESHOLD, COLLISION_PADDING, MIN_GOAL_DISTANCE
)


class DifficultyConfig:
    """Configuration for a game session"""
    def __init__(self, **kwargs):
        # Maze
        self.cell_size = kwargs.get('cell_size', CELL_SIZE)
        self.min_goal_distance = kwargs.get('min_goal_distance', MIN_GOAL_DISTANCE)

        # Player box
        self.player_width = kwargs.get('player_width', PLAYER_SIZE)
        self.player_height = kwargs.get('player_height', PLAYER_SIZE)

        # Speed scaling
        self.base_speed = kwargs.get('base_speed', BASE_SPEED)
        self.speed_step = kwargs.get('speed_step', SPEED_STEP)

        # Countdown (seconds)
        self.round_time = kwargs.get('round_time', ROUND_TIME)
        self.time_bonus = kwargs.get('time_bonus', TIME_BONUS)

        # Physics (per frame)
        self.acceleration = kwargs.get('acceleration', ACCELERATION)
        self.friction = kwargs.get('friction', FRICTION)
        self.stop_threshold = kwargs.get('stop_threshold', STOP_THRESHOLD)
        self.collision_padding = kwargs.get('collision_padding', COLLISION_PADDING)

    @property
    def agent_size(self):
        return self.player_width, self.player_height

    def speed_for_round(self, round_number):
        """Max velocity after round_number - 1 completed rounds"""
        return self.base_speed + self.speed_step * (round_number - 1)

    def __repr__(self):
        return (f"DifficultyConfig(cell={self.cell_size}, base_speed={self.base_speed}, "
                f"round_time={self.round_time})")


DEFAULT_DIFFICULTY = DifficultyConfig()

"""
Round State Machine - score, rounds, countdown and speed scaling
"""

from enum import Enum, auto

from maze.difficulty import DEFAULT_DIFFICULTY
from utils.logger import get_logger

log = get_logger('game_state')


class GameState(Enum):
    """Game states"""
    PLAYING = auto()
    GAME_OVER = auto()


class RoundState:
    """Mutable round counters, read by the HUD"""
    def __init__(self, score, round_number, time_remaining, speed):
        self.score = score
        self.round = round_number
        self.time_remaining = time_remaining
        self.speed = speed
        self.is_over = False

    def __repr__(self):
        return (f"RoundState(score={self.score}, round={self.round}, "
                f"time={self.time_remaining}, speed={self.speed:.2f}, over={self.is_over})")


class RoundStateMachine:
    """
    Manages round progression and the PLAYING -> GAME_OVER transition

    GAME_OVER is terminal until restart().
    """
    def __init__(self, config=DEFAULT_DIFFICULTY):
        self.config = config
        self.current_state = GameState.PLAYING
        self.previous_state = None
        self.state = self._initial_state()

    def _initial_state(self):
        cfg = self.config
        return RoundState(
            score=0,
            round_number=1,
            time_remaining=cfg.round_time,
            speed=cfg.speed_for_round(1)
        )

    def transition_to(self, new_state):
        """
        Transition to a new state

        Args:
            new_state: GameState enum value
        """
        self.previous_state = self.current_state
        self.current_state = new_state
        self._on_state_enter(new_state)

    def _on_state_enter(self, state):
        """Called when entering a new state"""
        if state == GameState.PLAYING:
            self.state.is_over = False
        elif state == GameState.GAME_OVER:
            self.state.is_over = True
            log.info("Game over: score=%d round=%d", self.state.score, self.state.round)

    def is_state(self, state):
        """Check if current state matches"""
        return self.current_state == state

    @property
    def is_over(self):
        return self.current_state == GameState.GAME_OVER

    def tick_second(self):
        """
        One countdown tick

        Returns:
            True if this tick ended the game
        """
        if self.is_over:
            return False

        self.state.time_remaining -= 1
        if self.state.time_remaining <= 0:
            self.transition_to(GameState.GAME_OVER)
            return True
        return False

    def goal_reached(self):
        """Advance to the next round; ignored once the game is over"""
        if self.is_over:
            return False

        s = self.state
        s.score += 1
        s.round += 1
        s.speed = self.config.speed_for_round(s.round)
        s.time_remaining += self.config.time_bonus
        log.info("Round %d reached: score=%d speed=%.2f time=%s",
                 s.round, s.score, s.speed, s.time_remaining)
        return True

    def restart(self):
        """Reset every counter and re-enter PLAYING"""
        self.state = self._initial_state()
        self.transition_to(GameState.PLAYING)
        log.info("Restarted")

    def __repr__(self):
        return f"RoundStateMachine(state={self.current_state.name}, {self.state!r})"

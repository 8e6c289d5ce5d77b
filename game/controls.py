"""
Keyboard controls - held keys to movement intent
"""

import pygame

# Logical key names, arrows with WASD aliases
KEY_BINDINGS = {
    'up': (pygame.K_UP, pygame.K_w),
    'down': (pygame.K_DOWN, pygame.K_s),
    'left': (pygame.K_LEFT, pygame.K_a),
    'right': (pygame.K_RIGHT, pygame.K_d),
}


class InputIntent:
    """Held/released state of the four directions for one tick"""
    __slots__ = ('up', 'down', 'left', 'right')

    def __init__(self, up=False, down=False, left=False, right=False):
        self.up = up
        self.down = down
        self.left = left
        self.right = right

    def any(self):
        return self.up or self.down or self.left or self.right

    def __eq__(self, other):
        if not isinstance(other, InputIntent):
            return NotImplemented
        return (self.up, self.down, self.left, self.right) == (other.up, other.down, other.left, other.right)

    def __repr__(self):
        return f"InputIntent(up={self.up}, down={self.down}, left={self.left}, right={self.right})"


NO_INPUT = InputIntent()


def intent_from_keys(pressed, bindings=KEY_BINDINGS):
    """
    Sample held keys once

    Args:
        pressed: Anything indexable by pygame key code, e.g. pygame.key.get_pressed()
        bindings: Logical name -> tuple of key codes

    Returns:
        InputIntent
    """
    held = {name: any(pressed[key] for key in keys) for name, keys in bindings.items()}
    return InputIntent(**held)

"""Tests for keyboard to intent mapping."""

from collections import defaultdict

import pygame

from game.controls import InputIntent, NO_INPUT, intent_from_keys


def pressed(*keys):
    state = defaultdict(bool)
    for key in keys:
        state[key] = True
    return state


class TestIntentFromKeys:
    """Tests for intent_from_keys."""

    def test_nothing_held(self):
        """No keys gives an empty intent."""
        intent = intent_from_keys(pressed())
        assert intent == NO_INPUT
        assert not intent.any()

    def test_arrows(self):
        """Arrow keys map to their directions."""
        assert intent_from_keys(pressed(pygame.K_UP)) == InputIntent(up=True)
        assert intent_from_keys(pressed(pygame.K_DOWN)) == InputIntent(down=True)
        assert intent_from_keys(pressed(pygame.K_LEFT)) == InputIntent(left=True)
        assert intent_from_keys(pressed(pygame.K_RIGHT)) == InputIntent(right=True)

    def test_wasd_aliases(self):
        """WASD behaves like the arrows."""
        assert intent_from_keys(pressed(pygame.K_w)) == InputIntent(up=True)
        assert intent_from_keys(pressed(pygame.K_s)) == InputIntent(down=True)
        assert intent_from_keys(pressed(pygame.K_a)) == InputIntent(left=True)
        assert intent_from_keys(pressed(pygame.K_d)) == InputIntent(right=True)

    def test_diagonal(self):
        """Two directions can be held at once."""
        intent = intent_from_keys(pressed(pygame.K_RIGHT, pygame.K_s))
        assert intent == InputIntent(down=True, right=True)
        assert intent.any()

    def test_custom_bindings(self):
        """Bindings can be swapped for another layout."""
        bindings = {'up': (pygame.K_i,), 'down': (pygame.K_k,), 'left': (pygame.K_j,), 'right': (pygame.K_l,)}
        assert intent_from_keys(pressed(pygame.K_j), bindings) == InputIntent(left=True)
        assert intent_from_keys(pressed(pygame.K_LEFT), bindings) == NO_INPUT

"""
conftest.py
-----------
Shared pytest configuration and fixtures for the Angler Strike tests.

Contains:
- Headless SDL set-up so pygame runs without a window or sound card
- A fresh Game instance per test
- A factory for placing enemies at fixed positions
"""

import os
import random

# Run pygame headless before it is imported anywhere
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from anglerstrike.game import Game
from config.config import SCREEN_HEIGHT, SCREEN_WIDTH


@pytest.fixture(scope="session", autouse=True)
def pygame_session():
    """Initialise pygame once for the whole test run."""
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def game():
    """A new game with a fixed random seed."""
    random.seed(1234)
    return Game(SCREEN_WIDTH, SCREEN_HEIGHT)


@pytest.fixture
def surface():
    """An off-screen drawing surface the size of the window."""
    return pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))


@pytest.fixture
def place_enemy(game):
    """Factory that spawns an enemy and pins its position, speed and lives."""

    def _place(x, y, lives=None, speed_x=-1.0):
        enemy = game.add_enemy()
        enemy.set_position(x, y)
        enemy.set_speed(speed_x, 0)
        if lives is not None:
            enemy.lives = lives
        return enemy

    return _place

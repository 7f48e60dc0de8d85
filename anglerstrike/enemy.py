"""Defines enemy types and behaviors."""

import random

import pygame

from anglerstrike.entity import Entity
from anglerstrike.logger import get_logger
from config.config import (
    ANGLER_HEIGHT,
    ANGLER_LIVES,
    ANGLER_WIDTH,
    ENEMY_SPAWN_HEIGHT_RATIO,
    ENEMY_SPEED_RANGE,
    RED,
    WHITE,
)

# Get a logger for this module
logger = get_logger(__name__)


class Enemy(Entity):
    """Base class for all enemy types.

    Enemies enter from the right edge of the screen and drift left. Subclasses
    set the size, vertical spawn position, lives and score value.
    """

    def __init__(self, game, width: int, height: int, *groups) -> None:
        """Initializes a generic enemy just off the right edge."""
        super().__init__(game, game.width, 0, width, height, *groups)
        self.set_speed(random.uniform(*ENEMY_SPEED_RANGE), 0)
        self.lives = 1
        self.score = 1

    def update(self) -> None:
        """Updates the enemy's position."""
        self.x += self.speed_x - self.game.speed
        self.sync_rect()

        # Remove once it moves completely off the left side of the screen
        if self.x + self.width < 0:
            self.marked_for_deletion = True
            logger.debug("Enemy moved off screen")

    def hit(self) -> bool:
        """Take one hit.

        Returns:
            bool: True if this hit destroyed the enemy
        """
        self.lives -= 1
        if self.lives <= 0:
            self.marked_for_deletion = True
            return True
        return False

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the enemy, with its remaining lives in debug mode."""
        pygame.draw.rect(surface, RED, self.rect)
        if self.game.debug:
            pygame.draw.rect(surface, WHITE, self.rect, 1)
            lives_text = self.game.ui.font.render(str(self.lives), True, WHITE)
            surface.blit(lives_text, (self.rect.x, self.rect.y))


class Angler(Enemy):
    """The basic enemy: a large, slow fish that takes two hits."""

    def __init__(self, game, *groups) -> None:
        super().__init__(game, ANGLER_WIDTH, ANGLER_HEIGHT, *groups)
        # Short screens pin the angler to the top edge
        max_y = max(0.0, game.height * ENEMY_SPAWN_HEIGHT_RATIO - self.height)
        self.set_position(self.x, random.random() * max_y)
        self.lives = ANGLER_LIVES
        self.score = self.lives

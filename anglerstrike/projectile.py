"""Projectiles fired by the player."""

import pygame

from anglerstrike.entity import Entity
from config.config import PROJECTILE_RANGE_RATIO, PROJECTILE_SIZE, PROJECTILE_SPEED, YELLOW


class Projectile(Entity):
    """Basic projectile fired by the player."""

    def __init__(self, game, x: float, y: float, *groups) -> None:
        """Initialize a projectile with its top-left corner at (x, y)."""
        super().__init__(game, x, y, PROJECTILE_SIZE[0], PROJECTILE_SIZE[1], *groups)
        self.set_speed(PROJECTILE_SPEED, 0)

    def update(self) -> None:
        """Move right and expire once past the projectile range."""
        self.move()
        if self.x > self.game.width * PROJECTILE_RANGE_RATIO:
            self.marked_for_deletion = True

    def draw(self, surface: pygame.Surface) -> None:
        pygame.draw.rect(surface, YELLOW, self.rect)

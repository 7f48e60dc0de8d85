"""Defines the player-controlled ship."""

import pygame

from anglerstrike.entity import Entity, remove_marked
from anglerstrike.logger import get_logger
from anglerstrike.projectile import Projectile
from config.config import (
    BLACK,
    GREEN,
    PLAYER_HEIGHT,
    PLAYER_MAX_SPEED,
    PLAYER_START_X,
    PLAYER_START_Y,
    PLAYER_WIDTH,
    PROJECTILE_OFFSET,
)

# Get a logger for this module
logger = get_logger(__name__)


class Player(Entity):
    """Represents the player-controlled ship.

    The ship only moves vertically. It owns the projectiles it fires and
    draws from the shared ammo pool held by the game.
    """

    def __init__(self, game, *groups) -> None:
        """Initializes the player at its starting position."""
        super().__init__(
            game, PLAYER_START_X, PLAYER_START_Y, PLAYER_WIDTH, PLAYER_HEIGHT, *groups
        )
        self.max_speed = PLAYER_MAX_SPEED
        self.projectiles = pygame.sprite.Group()

    def update(self) -> None:
        """Move according to the held keys, then update projectiles."""
        if pygame.K_UP in self.game.keys:
            self.speed_y = -self.max_speed
        elif pygame.K_DOWN in self.game.keys:
            self.speed_y = self.max_speed
        else:
            self.speed_y = 0
        self.move()

        # Keep the ship on screen
        max_y = self.game.height - self.height
        if self.y < 0:
            self.set_position(self.x, 0)
        elif self.y > max_y:
            self.set_position(self.x, max_y)

        self.projectiles.update()
        remove_marked(self.projectiles)

    def shoot_top(self) -> None:
        """Fire a projectile from the top cannon if there is ammo left."""
        if self.game.ammo > 0:
            Projectile(
                self.game,
                self.x + PROJECTILE_OFFSET[0],
                self.y + PROJECTILE_OFFSET[1],
                self.projectiles,
            )
            self.game.ammo -= 1
            logger.debug(f"Projectile fired, {self.game.ammo} rounds left")
        else:
            logger.debug("Out of ammo")

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the ship and its projectiles."""
        if self.game.debug:
            pygame.draw.rect(surface, GREEN, self.rect, 1)
        else:
            pygame.draw.rect(surface, BLACK, self.rect)

        for projectile in self.projectiles:
            projectile.draw(surface)

"""Debris particles knocked off damaged enemies."""

import random

import pygame

from anglerstrike.entity import Entity
from config.config import (
    DEBRIS_BROWN,
    PARTICLE_GRAVITY,
    PARTICLE_LIFETIME_MS,
    PARTICLE_SIZE_RANGE,
    PARTICLE_SPEED_X_RANGE,
    PARTICLE_SPEED_Y_RANGE,
)


class Particle(Entity):
    """Individual piece of debris.

    Particles are purely cosmetic: they drift left, arc under a constant
    gravity and disappear when their lifetime runs out or they fall below
    the bottom of the screen. They never take part in collisions.
    """

    def __init__(self, game, x: float, y: float, *groups) -> None:
        """Initialize a debris particle centred on (x, y).

        Args:
            game: The owning game instance
            x: Horizontal spawn position
            y: Vertical spawn position
            *groups: Sprite groups to add this particle to
        """
        size = random.randint(*PARTICLE_SIZE_RANGE)
        super().__init__(game, x - size / 2, y - size / 2, size, size, *groups)

        self.set_speed(
            random.uniform(*PARTICLE_SPEED_X_RANGE),
            random.uniform(*PARTICLE_SPEED_Y_RANGE),
        )
        self.gravity = PARTICLE_GRAVITY

        # Lifetime tracking
        self.lifetime = PARTICLE_LIFETIME_MS
        self.age = 0

    def update(self, delta_time: int) -> None:
        """Update the particle position and lifetime.

        Args:
            delta_time: Milliseconds elapsed since the previous frame
        """
        self.age += delta_time
        self.speed_y += self.gravity
        self.move()

        if self.age > self.lifetime or self.y > self.game.height:
            self.marked_for_deletion = True

    def draw(self, surface: pygame.Surface) -> None:
        pygame.draw.rect(surface, DEBRIS_BROWN, self.rect)


def emit_debris(game, x: float, y: float, count: int, *groups) -> None:
    """Spawn ``count`` particles at (x, y)."""
    for _ in range(count):
        Particle(game, x, y, *groups)

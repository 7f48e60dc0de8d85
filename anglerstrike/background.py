"""Manages background layers for parallax scrolling."""

import math
from typing import List, Optional

import numpy as np
import pygame

from anglerstrike.logger import get_logger
from config.config import (
    BG_LAYER_SPEED_MODIFIERS,
    BG_LAYER_STAR_DENSITY,
    BG_TILE_WIDTH,
    BLACK,
)

# Get a logger for this module
logger = get_logger(__name__)


def make_starfield(
    width: int, height: int, density: float, seed: Optional[int] = None
) -> pygame.Surface:
    """Build a procedural starfield tile.

    Args:
        width: Tile width in pixels
        height: Tile height in pixels
        density: Fraction of pixels that hold a star, between 0 and 1
        seed: Optional seed for a reproducible tile

    Returns:
        pygame.Surface: The tile, with black as its transparent colour key.
    """
    if not 0.0 <= density <= 1.0:
        raise ValueError(f"Star density must be between 0 and 1, got {density}")

    rng = np.random.default_rng(seed)

    # surfarray expects (width, height, rgb)
    pixels = np.zeros((width, height, 3), dtype=np.uint8)
    stars = rng.random((width, height)) < density
    brightness = rng.integers(120, 256, size=int(stars.sum()), dtype=np.uint8)
    pixels[stars] = brightness[:, np.newaxis]

    tile = pygame.surfarray.make_surface(pixels)
    tile.set_colorkey(BLACK)
    return tile


class Layer:
    """Represents a single horizontally scrolling background layer."""

    def __init__(self, game, image: pygame.Surface, speed_modifier: float) -> None:
        """Initializes the background layer.

        Args:
            game: The owning game instance, whose speed drives the scroll
            image: The tile to repeat horizontally
            speed_modifier: Multiplier applied to the game speed. Larger values
                            scroll faster and read as closer to the camera.
        """
        if speed_modifier < 0:
            raise ValueError(f"Speed modifier must be non-negative, got {speed_modifier}")

        self.game = game
        self.image = image
        self.speed_modifier = speed_modifier
        self.width = image.get_width()
        self.x: float = 0.0
        self.y: float = 0.0

    def update(self) -> None:
        """Updates the scroll position of the layer."""
        self.x -= self.game.speed * self.speed_modifier
        # Wrap to keep the tiling seamless, however far one step moved
        self.x %= -self.width

    def draw(self, surface: pygame.Surface) -> None:
        """Draws the tiled background layer onto the given surface."""
        needed_tiles = math.ceil(surface.get_width() / self.width) + 1
        for i in range(needed_tiles):
            surface.blit(self.image, (int(self.x) + i * self.width, int(self.y)))


class Background:
    """Pull all layer objects together to animate the world behind the action."""

    def __init__(self, game, layers: Optional[List[Layer]] = None) -> None:
        self.game = game
        if layers is None:
            layers = [
                Layer(game, make_starfield(BG_TILE_WIDTH, game.height, density), modifier)
                for modifier, density in zip(BG_LAYER_SPEED_MODIFIERS, BG_LAYER_STAR_DENSITY)
            ]
            logger.debug(f"Created {len(layers)} background layers")
        self.layers = layers

    def update(self) -> None:
        for layer in self.layers:
            layer.update()

    def draw(self, surface: pygame.Surface) -> None:
        # Slowest layer first
        for layer in self.layers:
            layer.draw(surface)

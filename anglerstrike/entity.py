"""Base class for the rectangular entities in the game."""

import pygame


class Entity(pygame.sprite.Sprite):
    """A moving rectangle with float position tracking and a deletion flag."""

    def __init__(self, game, x: float, y: float, width: int, height: int, *groups) -> None:
        """Initialize the entity.

        Args:
            game: The owning game instance
            x: Initial left coordinate
            y: Initial top coordinate
            width: Box width in pixels
            height: Box height in pixels
            *groups: Sprite groups to add this entity to
        """
        super().__init__(*groups)
        self.game = game

        self.width = width
        self.height = height

        # Track position with floats for smoother movement
        self.x: float = float(x)
        self.y: float = float(y)

        # Movement properties
        self.speed_x: float = 0
        self.speed_y: float = 0

        self.marked_for_deletion = False

        self.rect = pygame.Rect(round(self.x), round(self.y), width, height)

    def move(self) -> None:
        """Apply the current speed to the float position."""
        self.x += self.speed_x
        self.y += self.speed_y
        self.sync_rect()

    def sync_rect(self) -> None:
        """Copy the float position onto the integer rect."""
        self.rect.x = round(self.x)
        self.rect.y = round(self.y)

    def set_position(self, x: float, y: float) -> None:
        """Set the entity's position.

        Args:
            x: The x-coordinate
            y: The y-coordinate
        """
        self.x = float(x)
        self.y = float(y)
        self.sync_rect()

    def set_speed(self, speed_x: float, speed_y: float) -> None:
        """Set the entity's movement speed.

        Args:
            speed_x: Horizontal speed in pixels per frame
            speed_y: Vertical speed in pixels per frame
        """
        self.speed_x = speed_x
        self.speed_y = speed_y

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the entity onto the given surface."""
        raise NotImplementedError


def remove_marked(group: pygame.sprite.AbstractGroup) -> int:
    """Kill every sprite in ``group`` that is marked for deletion.

    Returns:
        The number of sprites removed.
    """
    marked = [sprite for sprite in group if sprite.marked_for_deletion]
    for sprite in marked:
        sprite.kill()
    return len(marked)

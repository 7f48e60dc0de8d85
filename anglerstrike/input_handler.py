"""Keeps track of the player's keyboard input."""

import pygame

from anglerstrike.logger import get_logger

# Get logger for this module
logger = get_logger(__name__)

# Keys held down for continuous movement
MOVEMENT_KEYS = (pygame.K_UP, pygame.K_DOWN)


class InputHandler:
    """Translates pygame events into game state.

    Held movement keys are stored in ``game.keys`` in the order they were
    pressed, each at most once. Space fires (or restarts a finished round)
    and ``d`` toggles the debug overlay.
    """

    def __init__(self, game) -> None:
        self.game = game

    def handle_event(self, event: pygame.event.Event) -> None:
        """Process a single event."""
        game = self.game

        if event.type == pygame.QUIT:
            game.is_running = False

        elif event.type == pygame.KEYDOWN:
            if event.key in MOVEMENT_KEYS and event.key not in game.keys:
                game.keys.append(event.key)
            elif event.key == pygame.K_SPACE:
                if game.game_over:
                    game.reset()
                else:
                    game.player.shoot_top()
            elif event.key == pygame.K_d:
                game.debug = not game.debug
                logger.info(f"Debug mode {'enabled' if game.debug else 'disabled'}")
            elif event.key == pygame.K_ESCAPE:
                game.is_running = False

        elif event.type == pygame.KEYUP:
            if event.key in game.keys:
                game.keys.remove(event.key)

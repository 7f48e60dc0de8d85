"""Main game loop: window, clock and event pump around the game state."""

import pygame

from anglerstrike.game import Game
from anglerstrike.logger import get_logger
from config.config import FPS, SCREEN_HEIGHT, SCREEN_WIDTH, SKY_BLUE, WINDOW_TITLE

# Get logger for this module
logger = get_logger(__name__)


class GameLoop:
    """Owns the display and drives the game once per frame."""

    def __init__(self, debug: bool = False) -> None:
        pygame.init()
        logger.info("Initializing game")

        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)

        self.clock = pygame.time.Clock()

        self.game = Game(SCREEN_WIDTH, SCREEN_HEIGHT)
        self.game.debug = debug

    def run(self) -> None:
        """Starts and manages the main game loop."""
        try:
            while self.game.is_running:
                self.step()
        finally:
            pygame.quit()
            logger.info("Game closed")

    def step(self) -> None:
        """Run a single frame: events, update, draw."""
        for event in pygame.event.get():
            self.game.input.handle_event(event)

        delta_time = self.clock.tick(FPS)

        self.screen.fill(SKY_BLUE)
        self.game.update(delta_time)
        self.game.draw(self.screen)
        pygame.display.flip()

"""Game state and the per-frame update and draw passes."""

from typing import List

import pygame

from anglerstrike.background import Background
from anglerstrike.collision import check_collision
from anglerstrike.enemy import Angler
from anglerstrike.entity import remove_marked
from anglerstrike.input_handler import InputHandler
from anglerstrike.logger import get_logger
from anglerstrike.particle import emit_debris
from anglerstrike.player import Player
from anglerstrike.ui import UI
from config.config import (
    AMMO_INTERVAL_MS,
    COLLISION_SCORE_PENALTY,
    ENEMY_INTERVAL_MS,
    GAME_SPEED,
    MAX_AMMO,
    PARTICLES_PER_COLLISION,
    PARTICLES_PER_DESTRUCTION,
    PARTICLES_PER_HIT,
    STARTING_AMMO,
    TIME_LIMIT_MS,
    WINNING_SCORE,
)

# Get logger for this module
logger = get_logger(__name__)


class Game:
    """All logic comes together to run the game.

    The game owns the world state and exposes two passes that the outer loop
    calls once per frame: ``update`` advances timers, moves entities and
    resolves collisions; ``draw`` renders everything onto a surface. It does
    not touch the display itself, so it can be driven headless.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.is_running = True
        self.debug = False

        self.background = Background(self)
        self.ui = UI(self)
        self.input = InputHandler(self)

        self._start_round()

    def _start_round(self) -> None:
        """Initialize everything that a new round starts from."""
        # Keys currently held down, in press order
        self.keys: List[int] = []

        # Initialize sprite groups
        self.enemies = pygame.sprite.Group()
        self.particles = pygame.sprite.Group()

        self.player = Player(self)

        # Ammo system
        self.ammo = STARTING_AMMO
        self.max_ammo = MAX_AMMO
        self.ammo_timer = 0
        self.ammo_interval = AMMO_INTERVAL_MS

        # Enemy spawning
        self.enemy_timer = 0
        self.enemy_interval = ENEMY_INTERVAL_MS

        # Scoring and round state
        self.game_over = False
        self.score = 0
        self.winning_score = WINNING_SCORE
        self.game_time = 0
        self.time_limit = TIME_LIMIT_MS
        self.speed = GAME_SPEED

    @property
    def projectiles(self) -> pygame.sprite.Group:
        """The player's live projectiles."""
        return self.player.projectiles

    @property
    def won(self) -> bool:
        """True once the score has passed the winning threshold."""
        return self.score > self.winning_score

    def reset(self) -> None:
        """Reset the game state to start a new round."""
        self._start_round()
        logger.info("Game reset - starting new round")

    def update(self, delta_time: int) -> None:
        """Advance the game by one frame.

        Args:
            delta_time: Milliseconds elapsed since the previous frame
        """
        if not self.game_over:
            self.game_time += delta_time
            if self.game_time > self.time_limit:
                self._end_game()

        self.background.update()
        self.player.update()

        # Regenerate ammo
        if self.ammo_timer > self.ammo_interval:
            if self.ammo < self.max_ammo:
                self.ammo += 1
            self.ammo_timer = 0
        else:
            self.ammo_timer += delta_time

        self.particles.update(delta_time)
        remove_marked(self.particles)

        for enemy in self.enemies:
            enemy.update()
            self._handle_collisions(enemy)
        removed = remove_marked(self.enemies)
        if removed:
            logger.debug(f"Removed {removed} enemies, {len(self.enemies)} remaining")

        if self.enemy_timer > self.enemy_interval and not self.game_over:
            self.add_enemy()
            self.enemy_timer = 0
        else:
            self.enemy_timer += delta_time

    def _handle_collisions(self, enemy) -> None:
        """Checks and handles collisions between one enemy and the player's side."""
        if check_collision(self.player, enemy):
            enemy.marked_for_deletion = True
            emit_debris(
                self, enemy.rect.centerx, enemy.rect.centery, PARTICLES_PER_COLLISION, self.particles
            )
            if not self.game_over:
                self.score = max(0, self.score - COLLISION_SCORE_PENALTY)
            logger.debug(f"Enemy rammed the player, score {self.score}")
            return

        hits = pygame.sprite.spritecollide(enemy, self.projectiles, False, check_collision)
        for projectile in hits:
            if projectile.marked_for_deletion or enemy.marked_for_deletion:
                continue

            projectile.marked_for_deletion = True
            emit_debris(
                self, enemy.rect.centerx, enemy.rect.centery, PARTICLES_PER_HIT, self.particles
            )

            if enemy.hit():
                self._process_enemy_destruction(enemy)

    def _process_enemy_destruction(self, enemy) -> None:
        """Process an enemy that was destroyed."""
        emit_debris(
            self, enemy.rect.centerx, enemy.rect.centery, PARTICLES_PER_DESTRUCTION, self.particles
        )
        logger.debug(f"Enemy destroyed at {enemy.rect.center}")

        if not self.game_over:
            self.score += enemy.score
            if self.won:
                self._end_game()

    def _end_game(self) -> None:
        """Handles the end of a round."""
        self.game_over = True
        if self.won:
            logger.info(f"Game over - player wins with score {self.score}")
        else:
            logger.warning(f"Game over - time up with score {self.score}")

    def add_enemy(self) -> Angler:
        """Spawn a new enemy at the right edge."""
        enemy = Angler(self, self.enemies)
        logger.debug(f"Enemy spawned at y={enemy.y:.0f}")
        return enemy

    def draw(self, surface: pygame.Surface) -> None:
        """Draws the game state onto the given surface."""
        self.background.draw(surface)
        self.player.draw(surface)
        for particle in self.particles:
            particle.draw(surface)
        for enemy in self.enemies:
            enemy.draw(surface)
        self.ui.draw(surface)

"""Centralized game configuration settings."""

import logging
import os
from typing import Optional, Tuple

# ==============================================================================
# GENERAL SETTINGS
# ==============================================================================

# Frame rate
FPS: int = 60

# World scroll speed (pixels per frame), subtracted from enemy movement
GAME_SPEED: float = 1.0

WINDOW_TITLE: str = "Angler Strike"


# ==============================================================================
# LOGGING SETTINGS
# ==============================================================================

# Can be set to logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, or logging.CRITICAL
LOG_LEVEL: int = logging.WARNING

# Persistent log file, written inside LOG_DIR
LOG_FILE_NAME: str = "anglerstrike.log"
LOG_FILE_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_CONSOLE_FORMAT: str = "[%(levelname)s] %(message)s"


# ==============================================================================
# DIRECTORY PATHS
# ==============================================================================

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
LOG_DIR = os.path.join(BASE_DIR, ".logs")


# ==============================================================================
# SCREEN AND DISPLAY SETTINGS
# ==============================================================================

# Screen dimensions
SCREEN_WIDTH: int = 1500
SCREEN_HEIGHT: int = 500

# Colors
WHITE: Tuple[int, int, int] = (255, 255, 255)
BLACK: Tuple[int, int, int] = (0, 0, 0)
RED: Tuple[int, int, int] = (255, 0, 0)
GREEN: Tuple[int, int, int] = (0, 255, 0)
YELLOW: Tuple[int, int, int] = (255, 255, 0)
SKY_BLUE: Tuple[int, int, int] = (70, 110, 160)
DEBRIS_BROWN: Tuple[int, int, int] = (120, 80, 40)


# ==============================================================================
# UI SETTINGS
# ==============================================================================

UI_FONT_SIZE: int = 25
UI_FONT_NAME: Optional[str] = "Helvetica"  # Falls back to the default font if missing
UI_COLOR: Tuple[int, int, int] = WHITE
UI_SHADOW_COLOR: Tuple[int, int, int] = BLACK
UI_MARGIN: int = 20
AMMO_BAR_SIZE: Tuple[int, int] = (3, 20)
AMMO_BAR_SPACING: int = 5
GAME_OVER_FONT_SIZE: int = 70


# ==============================================================================
# PLAYER SETTINGS
# ==============================================================================

PLAYER_WIDTH: int = 120
PLAYER_HEIGHT: int = 190
PLAYER_START_X: float = 20.0
PLAYER_START_Y: float = 100.0
PLAYER_MAX_SPEED: float = 2.0  # pixels per frame


# ==============================================================================
# PROJECTILE SETTINGS
# ==============================================================================

PROJECTILE_SIZE: Tuple[int, int] = (10, 3)
PROJECTILE_SPEED: float = 3.0  # pixels per frame
PROJECTILE_RANGE_RATIO: float = 0.8  # fraction of screen width a projectile travels
PROJECTILE_OFFSET: Tuple[int, int] = (80, 80)  # muzzle position relative to player


# ==============================================================================
# AMMO SETTINGS
# ==============================================================================

STARTING_AMMO: int = 20
MAX_AMMO: int = 50
AMMO_INTERVAL_MS: int = 500  # one round regenerated per interval


# ==============================================================================
# ENEMY SETTINGS
# ==============================================================================

ENEMY_INTERVAL_MS: int = 1000  # milliseconds between spawns
ENEMY_SPEED_RANGE: Tuple[float, float] = (-1.5, -0.5)  # pixels per frame (moving left)
ENEMY_SPAWN_HEIGHT_RATIO: float = 0.9  # enemies spawn within the top 90% of the screen

ANGLER_WIDTH: int = 228
ANGLER_HEIGHT: int = 169
ANGLER_LIVES: int = 2


# ==============================================================================
# SCORING AND ROUND SETTINGS
# ==============================================================================

WINNING_SCORE: int = 10  # must be exceeded to win
TIME_LIMIT_MS: int = 15000
COLLISION_SCORE_PENALTY: int = 1


# ==============================================================================
# PARTICLE SETTINGS
# ==============================================================================

PARTICLE_SIZE_RANGE: Tuple[int, int] = (4, 10)
PARTICLE_LIFETIME_MS: int = 1200
PARTICLE_GRAVITY: float = 0.5  # pixels per frame squared
PARTICLE_SPEED_X_RANGE: Tuple[float, float] = (-6.0, -2.0)
PARTICLE_SPEED_Y_RANGE: Tuple[float, float] = (-15.0, 0.0)
PARTICLES_PER_HIT: int = 1
PARTICLES_PER_COLLISION: int = 5
PARTICLES_PER_DESTRUCTION: int = 3


# ==============================================================================
# BACKGROUND SETTINGS
# ==============================================================================

# Speed modifiers relative to GAME_SPEED, slowest (most distant) first
BG_LAYER_SPEED_MODIFIERS: Tuple[float, ...] = (0.2, 0.4, 1.0, 1.5)
BG_LAYER_STAR_DENSITY: Tuple[float, ...] = (0.0006, 0.0010, 0.0015, 0.0020)
BG_TILE_WIDTH: int = 1768

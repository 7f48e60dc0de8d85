"""
test_player.py
--------------
Unit tests for player movement, screen clamping and shooting.
"""

import pygame

from config.config import (
    PLAYER_HEIGHT,
    PLAYER_MAX_SPEED,
    PLAYER_START_X,
    PLAYER_START_Y,
    PLAYER_WIDTH,
    PROJECTILE_OFFSET,
    PROJECTILE_RANGE_RATIO,
    PROJECTILE_SPEED,
)

# ===========================================================
# Movement
# ===========================================================


def test_player_starts_at_spawn_position(game):
    player = game.player

    assert (player.x, player.y) == (PLAYER_START_X, PLAYER_START_Y)
    assert (player.width, player.height) == (PLAYER_WIDTH, PLAYER_HEIGHT)


def test_up_key_moves_player_up(game):
    game.keys.append(pygame.K_UP)

    game.player.update()

    assert game.player.speed_y == -PLAYER_MAX_SPEED
    assert game.player.y == PLAYER_START_Y - PLAYER_MAX_SPEED


def test_down_key_moves_player_down(game):
    game.keys.append(pygame.K_DOWN)

    game.player.update()

    assert game.player.y == PLAYER_START_Y + PLAYER_MAX_SPEED


def test_up_wins_when_both_keys_held(game):
    game.keys.extend([pygame.K_DOWN, pygame.K_UP])

    game.player.update()

    assert game.player.speed_y == -PLAYER_MAX_SPEED


def test_no_keys_stops_player(game):
    game.player.speed_y = PLAYER_MAX_SPEED

    game.player.update()

    assert game.player.speed_y == 0
    assert game.player.y == PLAYER_START_Y


def test_player_clamped_to_top(game):
    game.player.set_position(PLAYER_START_X, 1)
    game.keys.append(pygame.K_UP)

    game.player.update()

    assert game.player.y == 0
    assert game.player.rect.top == 0


def test_player_clamped_to_bottom(game):
    bottom = game.height - PLAYER_HEIGHT
    game.player.set_position(PLAYER_START_X, bottom - 1)
    game.keys.append(pygame.K_DOWN)

    game.player.update()

    assert game.player.y == bottom
    assert game.player.rect.bottom == game.height


# ===========================================================
# Shooting
# ===========================================================


def test_shoot_top_spawns_projectile_at_muzzle(game):
    game.player.shoot_top()

    (projectile,) = game.player.projectiles
    assert projectile.x == PLAYER_START_X + PROJECTILE_OFFSET[0]
    assert projectile.y == PLAYER_START_Y + PROJECTILE_OFFSET[1]


def test_shoot_top_spends_ammo(game):
    starting_ammo = game.ammo

    game.player.shoot_top()
    game.player.shoot_top()

    assert game.ammo == starting_ammo - 2
    assert len(game.player.projectiles) == 2


def test_shoot_top_without_ammo_does_nothing(game):
    game.ammo = 0

    game.player.shoot_top()

    assert game.ammo == 0
    assert len(game.player.projectiles) == 0


def test_projectiles_move_with_player_update(game):
    game.player.shoot_top()
    (projectile,) = game.player.projectiles
    start_x = projectile.x

    game.player.update()

    assert projectile.x == start_x + PROJECTILE_SPEED


def test_expired_projectiles_are_removed(game):
    game.player.shoot_top()
    (projectile,) = game.player.projectiles
    projectile.set_position(game.width * PROJECTILE_RANGE_RATIO - 1, projectile.y)

    game.player.update()

    assert projectile.marked_for_deletion
    assert len(game.player.projectiles) == 0
    assert not projectile.alive()


# ===========================================================
# Drawing
# ===========================================================


def test_draw_fills_body(game, surface):
    surface.fill((255, 255, 255))

    game.player.draw(surface)

    assert surface.get_at(game.player.rect.center)[:3] == (0, 0, 0)


def test_debug_draw_outlines_body(game, surface):
    surface.fill((255, 255, 255))
    game.debug = True

    game.player.draw(surface)

    assert surface.get_at(game.player.rect.center)[:3] == (255, 255, 255)
    assert surface.get_at(game.player.rect.topleft)[:3] == (0, 255, 0)

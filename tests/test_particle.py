"""
test_particle.py
----------------
Unit tests for debris particles.
"""

import random

import pygame

from anglerstrike.particle import Particle, emit_debris
from config.config import PARTICLE_GRAVITY, PARTICLE_LIFETIME_MS, PARTICLE_SIZE_RANGE


def test_particle_is_centred_on_spawn_point(game):
    random.seed(5)
    particle = Particle(game, 200, 200)

    assert PARTICLE_SIZE_RANGE[0] <= particle.width <= PARTICLE_SIZE_RANGE[1]
    assert particle.x + particle.width / 2 == 200
    assert particle.y + particle.height / 2 == 200


def test_gravity_pulls_particle_down(game):
    particle = Particle(game, 200, 200)
    particle.set_speed(-1.0, 0.0)

    particle.update(16)
    particle.update(16)

    assert particle.speed_y == 2 * PARTICLE_GRAVITY
    assert particle.y > 200 - particle.height / 2


def test_particle_expires_after_lifetime(game):
    particle = Particle(game, 200, 200)
    particle.set_speed(0.0, 0.0)
    particle.gravity = 0.0

    particle.update(PARTICLE_LIFETIME_MS)
    assert not particle.marked_for_deletion

    particle.update(1)
    assert particle.marked_for_deletion


def test_particle_expires_below_screen(game):
    particle = Particle(game, 200, game.height - 1)
    particle.set_speed(0.0, 20.0)

    particle.update(1)

    assert particle.marked_for_deletion


def test_emit_debris_adds_particles_to_group(game):
    group = pygame.sprite.Group()

    emit_debris(game, 100, 100, 4, group)

    assert len(group) == 4


def test_finished_particles_are_dropped_by_game_update(game):
    emit_debris(game, 300, 300, 3, game.particles)

    game.update(PARTICLE_LIFETIME_MS + 1)

    assert len(game.particles) == 0

"""Axis-aligned bounding box collision test."""

from typing import Any


def check_collision(first: Any, second: Any) -> bool:
    """Return True when the boxes of two entities overlap.

    Both arguments need float ``x``, ``y``, ``width`` and ``height``
    attributes. Boxes that only touch along an edge do not collide.
    The signature matches the ``collided`` callback taken by
    ``pygame.sprite.spritecollide`` and ``pygame.sprite.groupcollide``.
    """
    return (
        first.x < second.x + second.width
        and first.x + first.width > second.x
        and first.y < second.y + second.height
        and first.height + first.y > second.y
    )

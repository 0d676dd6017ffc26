"""Random numbers and small numeric helpers."""

from __future__ import annotations

import math
import random

import pygame

_generator = random.Random()


def seed(value=None) -> None:
    """Reseed the shared generator; ``None`` draws from system entropy."""
    _generator.seed(value)


def random_int(low: int, high: int) -> int:
    """Return an integer in ``[low, high]``, both ends included."""
    return _generator.randint(low, high)


def random_float(low: float, high: float) -> float:
    """Return a float between ``low`` and ``high``."""
    return _generator.uniform(low, high)


def random_value() -> float:
    """Return a float between 0 and 1."""
    return random_float(0.0, 1.0)


def random_on_unit_circle() -> pygame.Vector2:
    """Return a random point on the unit circle."""
    angle = random_float(0.0, 2.0 * math.pi)
    return pygame.Vector2(math.cos(angle), math.sin(angle))


def random_in_unit_circle() -> pygame.Vector2:
    """Return a random point inside the unit circle."""
    return random_on_unit_circle() * random_value()


def clamp(value: float, low: float, high: float) -> float:
    """Limit ``value`` to the range ``[low, high]``."""
    if value < low:
        return low
    if value > high:
        return high
    return value
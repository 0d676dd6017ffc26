"""Branches, drifting clouds and flying log pieces."""

from __future__ import annotations

import pygame

from .defines import Sides, SortingLayers
from .game_object import SpriteGo, _transformed_rect
from .utils import random_float, random_value

Vec = pygame.Vector2


class Branch(SpriteGo):
    """A tree branch sticking out on one side, or hidden."""

    def __init__(self, texture_id: str, name: str = "") -> None:
        super().__init__(texture_id, name)
        self.side = Sides.NONE

    def set_side(self, side: Sides) -> None:
        self.side = side
        if side is Sides.LEFT:
            self.active = True
            self.scale = (-1.0, 1.0)
        elif side is Sides.RIGHT:
            self.active = True
            self.scale = (1.0, 1.0)
        else:
            self.active = False


class CloudGo(SpriteGo):
    """A cloud drifting across a band of the sky, respawned when it leaves."""

    def __init__(self, texture_id: str, name: str = "") -> None:
        super().__init__(texture_id, name)
        self.speed = 0.0
        self.direction = Vec(1, 0)
        self.range_speed = (100.0, 200.0)
        self.range_scale = (0.5, 1.5)
        self.bounds = (0.0, 0.0, 1920.0, 500.0)

    def reset(self) -> None:
        super().reset()
        left, top, width, height = self.bounds
        self.speed = random_float(*self.range_speed)
        if random_value() > 0.5:
            self.direction = Vec(1, 0)
            x = left
        else:
            self.direction = Vec(-1, 0)
            x = left + width
        self.position = (x, random_float(top, top + height))
        size = random_float(*self.range_scale)
        scale_x = -abs(size) if self.direction.x > 0 else abs(size)
        self.scale = (scale_x, size)

    def update(self, dt: float) -> None:
        self.position = self.position + self.direction * self.speed * dt
        if not self._within_bounds():
            self.reset()

    def _within_bounds(self) -> bool:
        left, top, width, _ = _transformed_rect(
            self.texture.get_size(), self.position, self.origin, self.scale
        )
        b_left, _, b_width, _ = self.bounds
        if self.direction.x > 0 and left > b_left + b_width:
            return False
        if self.direction.x < 0 and left + width < b_left:
            return False
        return True


class EffectLog(SpriteGo):
    """A chopped log piece flying off under gravity for a few seconds."""

    DEFAULT_TEXTURE = "graphics/log.png"

    def __init__(self, texture_id: str | None = None, name: str = "") -> None:
        super().__init__(texture_id or self.DEFAULT_TEXTURE, name)
        if texture_id is None:
            self.sorting_layer = SortingLayers.FOREGROUND
            self.sorting_order = 1
        self.gravity = Vec(0, 1000)
        self.velocity = Vec(0, 0)
        self.duration = 3.0
        self.timer = 0.0

    def update(self, dt: float) -> None:
        self.timer += dt
        if self.timer > self.duration:
            self.active = False
            return
        self.velocity += self.gravity * dt
        self.position = self.position + self.velocity * dt

    def fire(self, velocity) -> None:
        """Launch the piece with ``velocity`` and restart its lifetime."""
        self.velocity = Vec(velocity)
        self.timer = 0.0
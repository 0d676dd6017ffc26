"""Bees buzzing across the screen and the hive they come from."""

from __future__ import annotations

import math

import pygame

from .anim import Anim
from .defines import SceneStatus, Sides
from .game_object import GameObject, SpriteGo, _blit_transformed
from .resources import TEXTURES

Vec = pygame.Vector2


class BeeGo(SpriteGo):
    """A bee flying back and forth, bobbing up and down.

    It only moves while ``scene`` (when set) is in the game state.
    """

    def __init__(self, texture_id: str, name: str = "") -> None:
        super().__init__(texture_id, name)
        self.speed = 100.0
        self.direction = Sides.LEFT
        self.elapsed = 0.0
        self.scene = None
        self.anim_idle_r = Anim()
        self.anim_idle_l = Anim()
        for anim, top in ((self.anim_idle_r, 128), (self.anim_idle_l, 64)):
            anim.load_from_file(self.texture_id)
            anim.set_sequence((0, top, 64, 64), 0, 0.1, 4)
        self._sync_anims()

    def _sync_anims(self) -> None:
        for anim in (self.anim_idle_r, self.anim_idle_l):
            anim.position = self._position
            anim.scale = self._scale

    def reset(self) -> None:
        self._sync_anims()

    def update(self, dt: float) -> None:
        if self.scene is not None and self.scene.status is not SceneStatus.GAME:
            return
        self.anim_idle_r.update(dt)
        self.anim_idle_l.update(dt)
        self.elapsed += dt

        x, y = self._position.x, self._position.y
        if self.direction is Sides.LEFT:
            x -= self.speed * dt
        elif self.direction is Sides.RIGHT:
            x += self.speed * dt
        y += 0.25 * math.sin(15.0 * self.elapsed)
        self._position = Vec(x, y)
        self.anim_idle_r.position = self._position
        self.anim_idle_l.position = self._position

        if x < -100.0 or x > 1920.0 - 180.0:
            self.direction = Sides.RIGHT if self.direction is Sides.LEFT else Sides.LEFT

    def draw(self, surface) -> None:
        if self.direction is Sides.RIGHT:
            self.anim_idle_r.draw(surface)
        elif self.direction is Sides.LEFT:
            self.anim_idle_l.draw(surface)


class BeeHive(GameObject):
    """A hive that falls, bursts on the ground and disappears after a while."""

    def __init__(self, name: str = "") -> None:
        super().__init__(name)
        self.tex_id_idle = "graphics/Stup.png"
        self.tex_id_dead = "graphics/StupDead.png"
        self.texture_idle = TEXTURES.empty
        self.texture_dead = TEXTURES.empty
        self.side = Sides.RIGHT
        self.is_alive = True
        self.is_exploded = False
        self.gravity = Vec(0, 1000)
        self.velocity = Vec(0, 0)
        self.timer = 0.0
        self.duration = 5.0

    def init(self) -> None:
        TEXTURES.load(self.tex_id_idle)
        self.texture_idle = TEXTURES.get(self.tex_id_idle)
        TEXTURES.load(self.tex_id_dead)
        self.texture_dead = TEXTURES.get(self.tex_id_dead)

    def update(self, dt: float) -> None:
        self.timer += dt
        if self.timer > self.duration:
            self.active = False
            return
        if self._position.y < 750.0:
            self.velocity += self.gravity * dt
            self.position = self._position + self.velocity * dt
        else:
            self.is_exploded = True
            self.is_alive = False

    def reset(self) -> None:
        self.timer = 0.0
        self.is_exploded = False
        self.is_alive = True
        self.velocity = Vec(0, 0)

    def draw(self, surface) -> None:
        texture = self.texture_idle if self.is_alive else self.texture_dead
        _blit_transformed(surface, texture, self._position, Vec(0, 0), self._scale)
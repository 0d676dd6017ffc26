"""The classic lumberjack drawn from plain sprites with an axe and a gravestone."""

from __future__ import annotations

import pygame

from .defines import Origins, Sides
from .game_object import _blit_transformed
from .player import Player
from .resources import SOUNDS, TEXTURES

Vec = pygame.Vector2


class PlayerNormal(Player):
    """A player standing left or right of the tree, swinging an axe while a key is held."""

    def __init__(self, texture_path: str) -> None:
        super().__init__(texture_path)
        self.sb_id_chop = "audio/chop.wav"
        self.tex_id_axe = "graphics/axe.png"
        self.tex_id_rip = "graphics/rip.png"
        self.player_texture = TEXTURES.empty
        self.axe_texture = TEXTURES.empty
        self.rip_texture = TEXTURES.empty

        self.local_pos_player = {
            Sides.LEFT: Vec(-200.0, 0.0),
            Sides.RIGHT: Vec(200.0, 0.0),
            Sides.NONE: Vec(0.0, 0.0),
        }
        self.local_pos_axe = Vec(0.0, 150.0)
        self.local_pos_rip = Vec(0.0, 0.0)

        self.player_position = Vec(0, 0)
        self.axe_position = Vec(0, 0)
        self.rip_position = Vec(0, 0)
        self.player_origin = Vec(0, 0)
        self.axe_origin = Vec(0, 0)
        self.rip_origin = Vec(0, 0)
        self.axe_scale = Vec(1, 1)
        self.rip_scale = Vec(1, 1)

    @property
    def scale(self) -> pygame.Vector2:
        return Vec(self._scale)

    @scale.setter
    def scale(self, value) -> None:
        self._scale = Vec(value)
        self.axe_scale = Vec(-self._scale.x, self._scale.y)
        self.rip_scale = Vec(abs(self._scale.x), self._scale.y)

    def set_side(self, side: Sides) -> None:
        """Stand on ``side`` of the tree, facing it."""
        self.side = side
        if side is Sides.LEFT:
            self.scale = (-1.0, 1.0)
        elif side is Sides.RIGHT:
            self.scale = (1.0, 1.0)
        new_pos = self._position + self.local_pos_player[side]
        self.player_position = Vec(new_pos)
        self.axe_origin = Vec(Origins.BC.offset(*self.axe_texture.get_size()))
        self.axe_position = new_pos + self.local_pos_axe
        self.rip_position = new_pos + self.local_pos_rip

    def on_die(self) -> None:
        self.is_alive = False
        self.is_chopping = False

    def set_origin(self, origin) -> None:
        if isinstance(origin, Origins):
            self.origin_preset = origin
            if origin is not Origins.CUSTOM:
                self.player_origin = Vec(origin.offset(*self.player_texture.get_size()))
        else:
            self.origin_preset = Origins.CUSTOM
            self.origin = Vec(origin)
            self.player_origin = Vec(origin)
            self.rip_origin = Vec(origin)

    def init(self) -> None:
        self.axe_texture = TEXTURES.get(self.tex_id_axe)
        self.axe_origin = Vec(self.origin_axe)
        self.rip_texture = TEXTURES.get(self.tex_id_rip)

    def release(self) -> None:
        pass

    def reset(self) -> None:
        self.sfx_chop = SOUNDS.get(self.sb_id_chop)
        self.player_texture = TEXTURES.get(self.texture_id)
        self.axe_texture = TEXTURES.get(self.tex_id_axe)
        self.rip_texture = TEXTURES.get(self.tex_id_rip)
        self.scale = (1.0, 1.0)
        self.set_side(Sides.RIGHT)
        self.is_chopping = False
        self.is_alive = True

    def _chop(self, side: Sides) -> None:
        self.is_chopping = True
        self.set_side(side)
        if self.scene_game is not None:
            self.scene_game.on_chop(side)
        if self.sfx_chop is not None:
            self.sfx_chop.play()

    def update(self, dt: float) -> None:
        if not self.is_alive or dt <= 0.0:
            return
        keys = self.input
        if keys.key_down(pygame.K_LEFT):
            self._chop(Sides.LEFT)
        if keys.key_up(pygame.K_LEFT):
            self.set_side(Sides.LEFT)
            self.is_chopping = False
        if keys.key_down(pygame.K_RIGHT):
            self._chop(Sides.RIGHT)
        if keys.key_up(pygame.K_RIGHT):
            self.set_side(Sides.RIGHT)
            self.is_chopping = False

    def draw(self, surface) -> None:
        if self.is_alive:
            _blit_transformed(
                surface, self.player_texture, self.player_position, self.player_origin, self._scale
            )
            if self.is_chopping:
                _blit_transformed(
                    surface, self.axe_texture, self.axe_position, self.axe_origin, self.axe_scale
                )
        else:
            _blit_transformed(
                surface, self.rip_texture, self.rip_position, self.rip_origin, self.rip_scale
            )
"""The animated lumberjack and its idle showcase model."""

from __future__ import annotations

import pygame

from .anim import Anim, Frame
from .defines import Origins, SceneStatus, Sides, SortingLayers
from .game_object import GameObject, _blit_transformed
from .input_mgr import INPUT
from .resources import SOUNDS, TEXTURES

Vec = pygame.Vector2

_ANIM_SCALE = (3.7, 3.7)
_ANIM_HOME = (1920.0 * 0.5 + 80.0, 560.0)
_RIGHT_ANIM_POS = (1920.0 * 0.5 + 480.0, 560.0)
_LEFT_ANIM_POS = (1920.0 * 0.5 - 480.0, 560.0)
_RIGHT_DIE_POS = (1920.0 * 0.5 + 200.0, 700.0)
_LEFT_DIE_POS = (1920.0 * 0.5 - 350.0, 700.0)
_RIP_TEXTURE = "graphics/rip.png"


class Player(GameObject):
    """The player: chops with the arrow keys and reports chops to ``scene_game``.

    ``scene_game`` is expected to expose ``status`` and ``on_chop(side)``.
    """

    def __init__(self, texture_path: str = "", name: str = "") -> None:
        super().__init__(name)
        self.sorting_layer = SortingLayers.FOREGROUND
        self.sorting_order = 0
        self.texture_id = texture_path or "graphics/player2.png"
        self.sb_id_chop = "sound/chop.wav"
        self.sfx_chop = None
        self.side = Sides.RIGHT
        self.origin_axe = Vec(-65, 0)
        self.is_alive = True
        self.is_chopping = False
        self.is_finish_move = False
        self.scene_game = None
        self.input = INPUT

        self.anim_idle = Anim()
        self.anim_attack = Anim()
        self.anim_finish_move = Anim()
        self.anim_transform = Anim()
        self.anim_energy_beam = Anim()
        for anim in (self.anim_idle, self.anim_attack, self.anim_finish_move, self.anim_transform):
            anim.load_from_file(self.texture_id)

        self.die_texture = TEXTURES.get(_RIP_TEXTURE)
        self.die_position = Vec(1920.0 * 0.5, 600.0)

        idle_times = [0.1, 0.1, 0.1, 0.1, 0.1, 0.6]
        self.anim_idle.set_sequence((11, 140, 112, 82), 4, idle_times, 6)
        self.anim_idle.add_sequence_rev((11, 140, 112, 82), 4, idle_times, 6)

        self.anim_attack.set_sequence((11, 1090, 112, 82), 4, 0.02, 7)
        self.anim_attack.repeat = False
        self.anim_attack.activated = False

        self.anim_finish_move.set_sequence((11, 762, 112, 82), 4, 0.2, 11)
        self.anim_finish_move.add_sequence(
            (11, 1198, 112, 82), 4, [0.1, 0.1, 0.6, 0.2, 0.2, 2.0, 0.2], 7
        )
        self.anim_finish_move.repeat = False

        self.anim_energy_beam.add_frame(Frame((4, 1347, 50, 80), 0.2))
        self.anim_energy_beam.add_frame(Frame((4, 1347, 80, 100), 0.2))
        self.anim_energy_beam.add_sequence((4, 1347, 112, 82), 4, 0.2, 11)
        self.anim_energy_beam.repeat = False

        self.anim_transform.set_sequence((11, 758, 112, 82), 4, 0.1, 11)

        for anim in self._all_anims():
            anim.scale = _ANIM_SCALE
            anim.position = _ANIM_HOME

    def _all_anims(self):
        return (
            self.anim_idle,
            self.anim_attack,
            self.anim_finish_move,
            self.anim_energy_beam,
            self.anim_transform,
        )

    def _playing_anims(self):
        return (self.anim_idle, self.anim_attack, self.anim_finish_move, self.anim_transform)

    def on_die(self) -> None:
        self.is_alive = False
        self.is_chopping = False

    def set_origin(self, origin) -> None:
        if isinstance(origin, Origins):
            self.origin_preset = origin
        else:
            self.origin_preset = Origins.CUSTOM
            self.origin = Vec(origin)

    def init(self) -> None:
        pass

    def release(self) -> None:
        pass

    def reset(self) -> None:
        self.sfx_chop = SOUNDS.get(self.sb_id_chop)
        for anim in self._playing_anims():
            anim.reset()
        self.die_texture = TEXTURES.get(_RIP_TEXTURE)
        self.set_origin(Origins.BC)
        self.is_alive = True
        self.is_chopping = False

    def _chop(self, side: Sides) -> None:
        self.is_chopping = True
        self.side = side
        if self.scene_game is not None:
            self.scene_game.on_chop(side)
        self.anim_attack.reset()
        self.anim_attack.activated = True
        if self.sfx_chop is not None:
            self.sfx_chop.play()

    def update(self, dt: float) -> None:
        if not self.is_alive:
            return
        for anim in self._playing_anims():
            anim.update(dt)

        if self.scene_game is not None and self.scene_game.status is not SceneStatus.GAME:
            return

        keys = self.input
        if keys.key_up(pygame.K_SPACE):
            self.is_chopping = True
            self.is_finish_move = True
        if keys.key_up(pygame.K_SPACE):
            self.is_chopping = False

        if keys.key_down(pygame.K_LEFT):
            self._chop(Sides.LEFT)
        if keys.key_up(pygame.K_LEFT):
            self.is_chopping = False

        if keys.key_down(pygame.K_RIGHT):
            self._chop(Sides.RIGHT)
        if keys.key_up(pygame.K_RIGHT):
            self.is_chopping = False

    def draw(self, surface) -> None:
        if self.side is Sides.RIGHT:
            anim_pos, die_pos, flip = _RIGHT_ANIM_POS, _RIGHT_DIE_POS, True
        elif self.side is Sides.LEFT:
            anim_pos, die_pos, flip = _LEFT_ANIM_POS, _LEFT_DIE_POS, False
        else:
            return

        if not self.is_alive:
            self.die_position = Vec(die_pos)
            _blit_transformed(surface, self.die_texture, self.die_position, Vec(0, 0), Vec(1, 1))
            return

        if self.is_finish_move:
            if self.anim_finish_move.is_end:
                self.anim_finish_move.reset()
                self.is_finish_move = False
                return
            anim = self.anim_finish_move
        elif self.anim_attack.is_end:
            anim = self.anim_idle
        else:
            anim = self.anim_attack
        anim.position = anim_pos
        anim.flip_x = flip
        anim.draw(surface)


class PlayerModel(Player):
    """A player figure that only plays its idle animation where it stands."""

    def update(self, dt: float) -> None:
        self.anim_idle.update(dt)

    def draw(self, surface) -> None:
        self.anim_idle.position = self.position
        self.anim_idle.flip_x = True
        self.anim_idle.draw(surface)
"""The tree with its branches and the log pieces chopped off it."""

from __future__ import annotations

from collections import deque

import pygame

from .defines import Origins, Sides, SortingLayers
from .game_object import GameObject, _blit_transformed
from .object_pool import ObjectPool
from .resources import TEXTURES
from .scenery import Branch, EffectLog
from .utils import random_int

Vec = pygame.Vector2


class Tree(GameObject):
    """A trunk with a column of branches that shifts down on every chop.

    Flying log pieces are added to and removed from ``scene`` when one is set.
    """

    def __init__(self, name: str = "", scene=None) -> None:
        super().__init__(name)
        self.sorting_layer = SortingLayers.FOREGROUND
        self.sorting_order = -1
        self.scene = scene
        self.tree_tex_id = "graphics/tree.png"
        self.branch_tex_id = "graphics/branch.png"
        self.branch_count = 6
        self.branch_offset_y = 150.0
        self.texture = TEXTURES.empty
        self.tree_origin = Vec(0, 0)
        self.branches: deque[Branch] = deque()
        self.effect_log_pool: ObjectPool[EffectLog] = ObjectPool(EffectLog)
        self.log_effects: list[EffectLog] = []

    @property
    def position(self) -> pygame.Vector2:
        return Vec(self._position)

    @position.setter
    def position(self, value) -> None:
        self._position = Vec(value)
        self.update_branch_pos()

    def random_side(self) -> Sides:
        """Pick left, right or no branch, each equally likely."""
        value = random_int(0, 2)
        if value > 1:
            return Sides.NONE
        return Sides(value)

    def _load_trunk(self) -> None:
        self.texture = TEXTURES.get(self.tree_tex_id)
        self.tree_origin = Vec(Origins.BC.offset(*self.texture.get_size()))

    def init(self) -> None:
        self.release()
        self._load_trunk()
        branch_height = TEXTURES.get(self.branch_tex_id).get_height()
        branch_origin = Vec(self.texture.get_width() * -0.5, branch_height * 0.5)
        for _ in range(self.branch_count):
            branch = Branch(self.branch_tex_id)
            branch.set_origin(branch_origin)
            branch.init()
            branch.set_side(self.random_side())
            self.branches.append(branch)

    def _discard_log(self, log: EffectLog) -> None:
        self.effect_log_pool.release(log)
        if self.scene is not None:
            self.scene.remove_go(log)

    def release(self) -> None:
        for log in self.log_effects:
            self._discard_log(log)
        self.log_effects.clear()
        for branch in self.branches:
            branch.release()
        self.branches.clear()

    def reset(self) -> None:
        self._load_trunk()
        for branch in self.branches:
            branch.reset()
        self.update_branch_pos()
        self.branches[0].set_side(Sides.NONE)

    def update(self, dt: float) -> None:
        for branch in self.branches:
            branch.update(dt)
        finished = [log for log in self.log_effects if not log.active]
        for log in finished:
            self._discard_log(log)
        self.log_effects = [log for log in self.log_effects if log.active]

    def draw(self, surface) -> None:
        _blit_transformed(surface, self.texture, self._position, self.tree_origin, Vec(1, 1))
        for branch in self.branches:
            if branch.active:
                branch.draw(surface)

    def clear_effect_log(self) -> None:
        """Take every flying log piece out of the scene and back into the pool."""
        for log in self.log_effects:
            if self.scene is not None:
                self.scene.remove_go(log)
            self.effect_log_pool.release(log)
        self.log_effects.clear()

    def chop(self, side: Sides) -> Sides:
        """Chop from ``side``; returns the side of the branch now at the bottom."""
        if side is not Sides.NONE:
            effect = self.effect_log_pool.take()
            if self.scene is not None:
                self.scene.add_go(effect)
            effect.set_origin(Origins.BC)
            effect.position = self.position
            effect.fire((-1000.0 if side is Sides.RIGHT else 1000.0, -1000.0))
            self.log_effects.append(effect)

        bottom = self.branches.popleft()
        bottom.set_side(self.random_side())
        self.branches.append(bottom)
        self.update_branch_pos()
        return self.branches[0].side

    def update_branch_pos(self) -> None:
        """Stack the branches upwards from the trunk's base."""
        x, y = self._position.x, self._position.y
        for branch in self.branches:
            y -= self.branch_offset_y
            branch.position = (x, y)
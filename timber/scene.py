"""A scene holding game objects with deferred adds and removals."""

from __future__ import annotations

from typing import TypeVar

from .defines import SceneIds
from .game_object import GameObject, draw_order

G = TypeVar("G", bound=GameObject)


class Scene:
    """A set of game objects that are updated and drawn together."""

    def __init__(self, scene_id: SceneIds) -> None:
        self.scene_id = scene_id
        self.game_objects: list[GameObject] = []
        self._to_add: list[GameObject] = []
        self._to_remove: list[GameObject] = []

    def init(self) -> None:
        self.apply_add_go()
        self.apply_remove_go()
        for obj in self.game_objects:
            obj.init()

    def release(self) -> None:
        for obj in self.game_objects:
            obj.release()
        self.game_objects.clear()

    def enter(self) -> None:
        for obj in self.game_objects:
            obj.reset()

    def exit(self) -> None:
        self.apply_add_go()
        self.apply_remove_go()

    def update(self, dt: float) -> None:
        for obj in list(self.game_objects):
            if obj.active:
                obj.update(dt)

    def late_update(self, dt: float) -> None:
        pass

    def on_pre_draw(self) -> None:
        pass

    def draw(self, surface) -> None:
        for obj in draw_order(obj for obj in self.game_objects if obj.active):
            obj.draw(surface)

    def on_post_draw(self) -> None:
        self.apply_add_go()
        self.apply_remove_go()

    def add_go(self, obj: G) -> G:
        """Queue an object to join the scene; returns it."""
        self._to_add.append(obj)
        return obj

    def remove_go(self, obj: GameObject) -> None:
        """Queue an object to leave the scene."""
        self._to_remove.append(obj)

    def find_go(self, name: str) -> GameObject | None:
        return next((obj for obj in self.game_objects if obj.name == name), None)

    def find_go_all(self, name: str) -> list[GameObject]:
        return [obj for obj in self.game_objects if obj.name == name]

    def apply_add_go(self) -> None:
        for obj in self._to_add:
            if not any(existing is obj for existing in self.game_objects):
                self.game_objects.append(obj)
        self._to_add.clear()

    def apply_remove_go(self) -> None:
        for obj in self._to_remove:
            self.game_objects = [existing for existing in self.game_objects if existing is not obj]
        self._to_remove.clear()
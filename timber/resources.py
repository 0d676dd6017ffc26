"""Caches of textures, fonts and sounds keyed by file path."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Generic, TypeVar

import pygame

T = TypeVar("T")


class ResourceMgr(Generic[T]):
    """Loads resources once and hands them out by id; unknown ids get ``empty``."""

    def __init__(self, loader: Callable[[str], T], empty: T | None = None) -> None:
        self._loader = loader
        self.empty = empty
        self._resources: dict[str, T] = {}

    def __contains__(self, resource_id: str) -> bool:
        return resource_id in self._resources

    def load(self, resource_id: str) -> bool:
        """Load a resource; False if it was already loaded or could not be read."""
        if resource_id in self._resources:
            return False
        try:
            resource = self._loader(resource_id)
        except (OSError, pygame.error):
            return False
        self._resources[resource_id] = resource
        return True

    def unload(self, resource_id: str) -> bool:
        """Drop a resource; False if it was not loaded."""
        if resource_id not in self._resources:
            return False
        del self._resources[resource_id]
        return True

    def unload_all(self) -> None:
        self._resources.clear()

    def get(self, resource_id: str):
        return self._resources.get(resource_id, self.empty)


def _load_texture(path: str) -> pygame.Surface:
    return pygame.image.load(path)


def _load_font(path: str) -> str:
    if not Path(path).is_file():
        raise FileNotFoundError(path)
    return path


def _load_sound(path: str):
    if not Path(path).is_file():
        raise FileNotFoundError(path)
    if not pygame.mixer.get_init():
        pygame.mixer.init()
    return pygame.mixer.Sound(path)


TEXTURES: ResourceMgr[pygame.Surface] = ResourceMgr(_load_texture, pygame.Surface((0, 0)))
FONTS: ResourceMgr[str] = ResourceMgr(_load_font, None)
SOUNDS: ResourceMgr = ResourceMgr(_load_sound, None)
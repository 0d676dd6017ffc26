"""Base game objects: plain, sprite-backed and text-backed."""

from __future__ import annotations

from functools import lru_cache

import pygame

from .defines import Origins, SortingLayers
from .resources import FONTS, TEXTURES

Vec = pygame.Vector2


def _transformed_rect(size, position, origin, scale) -> tuple[float, float, float, float]:
    """Screen rectangle (left, top, width, height) of a box placed by position/origin/scale."""
    width, height = size
    x0 = position.x - scale.x * origin.x
    y0 = position.y - scale.y * origin.y
    x1 = x0 + scale.x * width
    y1 = y0 + scale.y * height
    return min(x0, x1), min(y0, y1), abs(x1 - x0), abs(y1 - y0)


def _blit_transformed(target, image, position, origin, scale) -> None:
    left, top, width, height = _transformed_rect(image.get_size(), position, origin, scale)
    size = (round(width), round(height))
    if size[0] <= 0 or size[1] <= 0:
        return
    if scale.x < 0 or scale.y < 0:
        image = pygame.transform.flip(image, scale.x < 0, scale.y < 0)
    if size != image.get_size():
        image = pygame.transform.scale(image, size)
    target.blit(image, (round(left), round(top)))


@lru_cache(maxsize=None)
def _font(path: str, size: int):
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(path, size)


class GameObject:
    """Something in a scene with a position, scale, origin and draw order."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self.active = True
        self._position = Vec(0, 0)
        self._scale = Vec(1, 1)
        self.origin_preset = Origins.TL
        self.origin = Vec(0, 0)
        self.sorting_layer = SortingLayers.DEFAULT
        self.sorting_order = 0

    @property
    def position(self) -> pygame.Vector2:
        return Vec(self._position)

    @position.setter
    def position(self, value) -> None:
        self._position = Vec(value)

    @property
    def scale(self) -> pygame.Vector2:
        return Vec(self._scale)

    @scale.setter
    def scale(self, value) -> None:
        self._scale = Vec(value)

    def set_origin(self, origin) -> None:
        """Set the origin from a preset or an explicit point."""
        if isinstance(origin, Origins):
            self.origin_preset = origin
            self.origin = Vec(0, 0)
        else:
            self.origin = Vec(origin)
            self.origin_preset = Origins.CUSTOM

    def init(self) -> None:
        pass

    def release(self) -> None:
        pass

    def reset(self) -> None:
        pass

    def update(self, dt: float) -> None:
        pass

    def draw(self, surface) -> None:
        pass


class SpriteGo(GameObject):
    """A game object drawn as a texture."""

    def __init__(self, texture_id: str = "", name: str = "") -> None:
        super().__init__(name)
        self.texture_id = texture_id
        self.texture = TEXTURES.empty

    def set_origin(self, origin) -> None:
        if isinstance(origin, Origins):
            self.origin_preset = origin
            if origin is not Origins.CUSTOM:
                self.origin = Vec(origin.offset(*self.texture.get_size()))
        else:
            super().set_origin(origin)

    def reset(self) -> None:
        self.texture = TEXTURES.get(self.texture_id)
        self.set_origin(self.origin_preset)

    def draw(self, surface) -> None:
        _blit_transformed(surface, self.texture, self._position, self.origin, self._scale)


class TextGo(GameObject):
    """A game object drawn as a line of text."""

    def __init__(self, font_id: str, name: str = "") -> None:
        super().__init__(name)
        self.font_id = font_id
        self.font_path: str | None = None
        self.text = ""
        self.character_size = 30
        self.fill_color = pygame.Color("white")

    def _local_size(self) -> tuple[int, int]:
        if self.font_path is None or not self.text:
            return 0, 0
        return _font(self.font_path, self.character_size).size(self.text)

    def set_origin(self, origin) -> None:
        if isinstance(origin, Origins):
            self.origin_preset = origin
            if origin is not Origins.CUSTOM:
                self.origin = Vec(origin.offset(*self._local_size()))
        else:
            super().set_origin(origin)

    def reset(self) -> None:
        self.font_path = FONTS.get(self.font_id)
        self.set_origin(self.origin_preset)

    def draw(self, surface) -> None:
        if self.font_path is None or not self.text:
            return
        image = _font(self.font_path, self.character_size).render(self.text, True, self.fill_color)
        _blit_transformed(surface, image, self._position, self.origin, self._scale)


def draw_order(objects):
    """Return the objects sorted so that earlier ones are drawn first."""
    return sorted(objects, key=lambda obj: (obj.sorting_layer, obj.sorting_order))
"""Score display and countdown bar."""

from __future__ import annotations

import pygame

from .defines import Origins, SortingLayers
from .game_object import GameObject, TextGo, _transformed_rect
from .utils import clamp

Vec = pygame.Vector2


class UiScore(TextGo):
    """A text line showing the current score."""

    def __init__(self, font_id: str, name: str = "") -> None:
        super().__init__(font_id, name)
        self.sorting_layer = SortingLayers.UI
        self.text_format = "SCORE: "
        self._score = 0

    @property
    def score(self) -> int:
        return self._score

    @score.setter
    def score(self, value: int) -> None:
        self._score = value
        self.text = f"{self.text_format}{value}"
        self.set_origin(self.origin_preset)

    def reset(self) -> None:
        super().reset()
        self.score = 0


class UiTimebar(GameObject):
    """A filled bar whose width shows a value between 0 and 1."""

    def __init__(self, name: str = "") -> None:
        super().__init__(name)
        self.sorting_layer = SortingLayers.UI
        self.max_size = Vec(0, 0)
        self.current_size = Vec(0, 0)
        self.color = pygame.Color("white")

    def set_origin(self, origin) -> None:
        if isinstance(origin, Origins):
            self.origin_preset = origin
            if origin is not Origins.CUSTOM:
                self.origin = Vec(origin.offset(self.current_size.x, self.current_size.y))
        else:
            self.origin = Vec(origin)
            self.origin_preset = Origins.CUSTOM

    def reset(self) -> None:
        self.value = 1.0

    def draw(self, surface) -> None:
        left, top, width, height = _transformed_rect(
            self.current_size, self.position, self.origin, self.scale
        )
        rect = pygame.Rect(round(left), round(top), round(width), round(height))
        if rect.width > 0 and rect.height > 0:
            pygame.draw.rect(surface, self.color, rect)

    def configure(self, size, color) -> None:
        """Set the full size and colour of the bar and fill it."""
        self.max_size = Vec(size)
        self.current_size = Vec(size)
        self.color = pygame.Color(color)
        self.value = 1.0

    @property
    def value(self) -> float:
        return self.current_size.x / self.max_size.x

    @value.setter
    def value(self, value: float) -> None:
        fraction = clamp(value, 0.0, 1.0)
        self.current_size = Vec(self.max_size.x * fraction, self.current_size.y)
        self.set_origin(self.origin_preset)
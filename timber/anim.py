"""Frame-based sprite animation cut from a sprite sheet."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union

import pygame

from .game_object import _blit_transformed

Vec = pygame.Vector2
Rect = tuple[int, int, int, int]
Durations = Union[float, Sequence[float]]


@dataclass(frozen=True)
class Frame:
    """One animation frame: a texture rectangle shown for ``duration`` seconds."""

    rect: Rect
    duration: float


def _duration_list(durations: Durations, count: int) -> list[float]:
    if isinstance(durations, (int, float)):
        return [float(durations)] * count
    values = [float(d) for d in durations]
    if len(values) < count:
        raise ValueError(f"{count} frames need {count} durations, got {len(values)}")
    return values


class Anim:
    """A sequence of frames played over a texture, optionally looping."""

    def __init__(self, name: str = "Anim") -> None:
        self.name = name
        self.activated = True
        self.repeat = True
        self.texture: pygame.Surface | None = None
        self.frames: list[Frame] = []
        self._position = Vec(0, 0)
        self._scale = Vec(1, 1)
        self.flip_x = False
        self.flip_y = False
        self.total_progress = 0.0
        self.is_end = False
        self.current_rect: Rect | None = None

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

    @property
    def total_length(self) -> float:
        """Sum of all frame durations."""
        return sum(frame.duration for frame in self.frames)

    def load_from_file(self, path: str) -> bool:
        """Load the sprite sheet; False if it cannot be read."""
        try:
            self.texture = pygame.image.load(path)
        except (OSError, pygame.error):
            return False
        self.current_rect = None
        return True

    def add_frame(self, frame: Frame) -> None:
        self.frames.append(frame)

    def add_sequence(self, rect: Rect, stride: int, durations: Durations, count: int) -> None:
        """Append ``count`` frames laid out left to right from ``rect``."""
        x, y, width, height = rect
        times = _duration_list(durations, count)
        for i, duration in zip(range(count), times):
            self.frames.append(Frame((x + i * (width + stride), y, width, height), duration))

    def add_sequence_rev(self, rect: Rect, stride: int, durations: Durations, count: int) -> None:
        """Append ``count`` frames laid out from ``rect``, played right to left."""
        x, y, width, height = rect
        times = _duration_list(durations, count)
        for i, duration in zip(reversed(range(count)), times):
            self.frames.append(Frame((x + i * (width + stride), y, width, height), duration))

    def set_sequence(self, rect: Rect, stride: int, durations: Durations, count: int) -> None:
        self.clear_sequence()
        self.add_sequence(rect, stride, durations, count)

    def set_sequence_rev(self, rect: Rect, stride: int, durations: Durations, count: int) -> None:
        self.clear_sequence()
        self.add_sequence_rev(rect, stride, durations, count)

    def update(self, dt: float) -> None:
        """Advance the animation and pick the frame to show."""
        self.total_progress += dt
        if not self.frames:
            return
        progress = self.total_progress
        for frame in self.frames:
            progress -= frame.duration
            if progress <= 0.0:
                self.current_rect = frame.rect
                break
        else:
            if self.repeat or self.activated:
                self.reset()
            else:
                self.current_rect = self.frames[0].rect
            self.is_end = True

    def reset(self) -> None:
        self.total_progress = 0.0
        self.is_end = False

    def draw(self, surface) -> None:
        if not self.activated or self.texture is None:
            return
        image = self.texture
        if self.current_rect is not None:
            area = pygame.Rect(self.current_rect).clip(self.texture.get_rect())
            if area.width <= 0 or area.height <= 0:
                return
            image = self.texture.subsurface(area)
        scale = Vec(
            self._scale.x * (-1.0 if self.flip_x else 1.0),
            self._scale.y * (-1.0 if self.flip_y else 1.0),
        )
        _blit_transformed(surface, image, self._position, Vec(0, 0), scale)

    def clear_sequence(self) -> None:
        self.frames.clear()
        self.total_progress = 0.0
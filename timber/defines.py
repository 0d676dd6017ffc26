"""Enumerations shared across the game."""

from __future__ import annotations

from enum import Enum, IntEnum


class SortingLayers(IntEnum):
    """Drawing layers; lower layers are drawn first."""

    BACKGROUND = 0
    FOREGROUND = 1
    UI = 2
    DEFAULT = 3


class SceneIds(IntEnum):
    """Identifiers of the scenes, in the order the scene manager holds them."""

    NONE = -1
    TITLE = 0
    GAME_MENU = 1
    CHT_SELECTION = 2
    SOLO_SELECTION = 3
    DEV1 = 4
    DEV2 = 5
    COUNT = 6


class Origins(Enum):
    """Origin presets: rows Top/Middle/Bottom, columns Left/Center/Right."""

    TL = 0
    TC = 1
    TR = 2
    ML = 3
    MC = 4
    MR = 5
    BL = 6
    BC = 7
    BR = 8
    CUSTOM = 9

    def offset(self, width: float, height: float) -> tuple[float, float]:
        """Return the origin point of a ``width`` x ``height`` box for this preset."""
        if self is Origins.CUSTOM:
            raise ValueError("a custom origin has no preset offset")
        column, row = self.value % 3, self.value // 3
        return width * column * 0.5, height * row * 0.5


class Sides(IntEnum):
    """Side of the tree a branch or the player is on."""

    LEFT = 0
    RIGHT = 1
    NONE = 2


class SceneStatus(Enum):
    """States of the main game scene."""

    AWAKE = "awake"
    GAME = "game"
    GAME_OVER = "game_over"
    PAUSE = "pause"
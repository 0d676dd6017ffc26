"""A development scene showing a single sprite."""

from __future__ import annotations

from .defines import SceneIds
from .game_object import SpriteGo
from .resources import TEXTURES
from .scene import Scene

_PLAYER_TEX = "graphics/player.png"


class SceneDev2(Scene):
    """Shows the player sprite and nothing else."""

    def __init__(self) -> None:
        super().__init__(SceneIds.DEV2)

    def init(self) -> None:
        self.add_go(SpriteGo(_PLAYER_TEX))
        super().init()

    def enter(self) -> None:
        TEXTURES.load(_PLAYER_TEX)
        super().enter()

    def exit(self) -> None:
        super().exit()
        TEXTURES.unload(_PLAYER_TEX)

    def update(self, dt: float) -> None:
        super().update(dt)

    def draw(self, surface) -> None:
        super().draw(surface)
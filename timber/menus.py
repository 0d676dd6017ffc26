"""Title, main menu and character selection scenes."""

from __future__ import annotations

import pygame

from .defines import Origins, SceneIds, SortingLayers
from .game_mgr import GAME_MGR
from .game_object import SpriteGo, TextGo
from .input_mgr import INPUT
from .player import Player, PlayerModel
from .resources import FONTS, TEXTURES
from .scene import Scene
from .scenery import CloudGo

SCREEN_WIDTH = 1920
SCREEN_HEIGHT = 1080

_FONT = "fonts/KOMIKAP_.ttf"
_BACKGROUND_TEX = "graphics/background.png"
_CLOUD_TEX = "graphics/cloud.png"
_PLAYER_TEX = "graphics/player.png"
_PLAYER2_TEX = "graphics/player2.png"


class _MenuScene(Scene):
    """A scene that loads a fixed set of resources and can ask for another scene."""

    textures: tuple[str, ...] = ()

    def __init__(self, scene_id: SceneIds, scene_mgr=None, input_mgr=None) -> None:
        super().__init__(scene_id)
        self.scene_mgr = scene_mgr
        self.input = INPUT if input_mgr is None else input_mgr

    def _go_to(self, scene_id: SceneIds) -> None:
        if self.scene_mgr is not None:
            self.scene_mgr.change_scene(scene_id)

    def _add_background(self, texture_id: str) -> SpriteGo:
        background = self.add_go(SpriteGo(texture_id))
        background.sorting_layer = SortingLayers.BACKGROUND
        background.sorting_order = -1
        background.set_origin(Origins.MC)
        background.position = (SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2)
        return background

    def _add_label(self, name: str, size: int, origin: Origins, position, text: str) -> TextGo:
        label = self.add_go(TextGo(_FONT, name))
        label.character_size = size
        label.fill_color = pygame.Color("white")
        label.set_origin(origin)
        label.position = position
        label.text = text
        return label

    def enter(self) -> None:
        for path in self.textures:
            TEXTURES.load(path)
        FONTS.load(_FONT)
        super().enter()

    def exit(self) -> None:
        super().exit()
        for path in self.textures:
            TEXTURES.unload(path)
        FONTS.unload(_FONT)


class TitleScene(_MenuScene):
    """The opening screen; Space leads to the game menu."""

    textures = ("graphics/file.png", _CLOUD_TEX)

    def __init__(self, scene_mgr=None, input_mgr=None) -> None:
        super().__init__(SceneIds.TITLE, scene_mgr, input_mgr)
        self.title_msg_text: TextGo | None = None

    def init(self) -> None:
        self._add_background("graphics/file.png")
        self.title_msg_text = self._add_label(
            "Title Messege",
            80,
            Origins.TC,
            (SCREEN_WIDTH // 2, 500),
            "Press Space to GameMenu",
        )
        super().init()

    def enter(self) -> None:
        super().enter()

    def exit(self) -> None:
        super().exit()

    def update(self, dt: float) -> None:
        super().update(dt)
        if self.input.key_down(pygame.K_SPACE):
            self._go_to(SceneIds.GAME_MENU)


class GameMenuScene(_MenuScene):
    """Chooses between solo mode (key 1) and friend mode (key 2)."""

    textures = (_BACKGROUND_TEX, _CLOUD_TEX)

    def __init__(self, scene_mgr=None, input_mgr=None) -> None:
        super().__init__(SceneIds.GAME_MENU, scene_mgr, input_mgr)
        self.title_text: TextGo | None = None
        self.solo_mode_text: TextGo | None = None
        self.friend_mode_text: TextGo | None = None

    def init(self) -> None:
        self._add_background(_BACKGROUND_TEX)
        for _ in range(3):
            cloud = self.add_go(CloudGo(_CLOUD_TEX))
            cloud.sorting_layer = SortingLayers.BACKGROUND
            cloud.sorting_order = 0

        center = SCREEN_WIDTH // 2
        self.title_text = self._add_label("Title", 200, Origins.BC, (center, 400), "TIMBER!!")
        self.solo_mode_text = self._add_label(
            "solomode", 80, Origins.TC, (center, 500), "1. SOLO MODE!!"
        )
        self.friend_mode_text = self._add_label(
            "friendmode", 80, Origins.TC, (center, 600), "2. FRIEND MODE!!"
        )
        super().init()

    def enter(self) -> None:
        super().enter()

    def exit(self) -> None:
        super().exit()

    def update(self, dt: float) -> None:
        super().update(dt)
        if self.input.key_down(pygame.K_1):
            self._go_to(SceneIds.SOLO_SELECTION)
        if self.input.key_down(pygame.K_2):
            self._go_to(SceneIds.DEV2)


class ChtSelectionScene(_MenuScene):
    """Shows the animated character for a two-player pick."""

    textures = (_BACKGROUND_TEX, _PLAYER_TEX, _PLAYER2_TEX)

    def __init__(self, scene_mgr=None, input_mgr=None) -> None:
        super().__init__(SceneIds.CHT_SELECTION, scene_mgr, input_mgr)
        self.cht1: Player | None = None
        self.cht2: Player | None = None

    def init(self) -> None:
        self._add_background(_BACKGROUND_TEX)
        self.cht2 = self.add_go(Player(_PLAYER2_TEX))
        self.cht2.input = self.input
        self.cht2.sorting_layer = SortingLayers.FOREGROUND
        self.cht2.set_origin(Origins.ML)
        self.cht2.position = (SCREEN_WIDTH // 2 + 300, SCREEN_HEIGHT // 2)
        super().init()

    def enter(self) -> None:
        super().enter()

    def exit(self) -> None:
        super().exit()

    def update(self, dt: float) -> None:
        super().update(dt)


class SoloSelectionScene(_MenuScene):
    """Picks the character for solo play: key 1 the classic one, key 2 the animated one."""

    textures = (_BACKGROUND_TEX, _PLAYER_TEX, _PLAYER2_TEX)

    def __init__(self, scene_mgr=None, input_mgr=None, game_mgr=None) -> None:
        super().__init__(SceneIds.SOLO_SELECTION, scene_mgr, input_mgr)
        self.game_mgr = GAME_MGR if game_mgr is None else game_mgr
        self.cht1: SpriteGo | None = None
        self.cht2: PlayerModel | None = None

    def init(self) -> None:
        self._add_background(_BACKGROUND_TEX)

        self.cht1 = self.add_go(SpriteGo(_PLAYER_TEX))
        self.cht2 = self.add_go(PlayerModel())
        self.cht2.texture_id = _PLAYER2_TEX

        self.cht1.sorting_layer = SortingLayers.FOREGROUND
        self.cht1.set_origin(Origins.MR)
        self.cht1.position = (SCREEN_WIDTH // 2 - 300, SCREEN_HEIGHT // 2)
        self.cht1.scale = (-1.0, 1.0)

        self.cht2.sorting_layer = SortingLayers.FOREGROUND
        self.cht2.set_origin(Origins.ML)
        self.cht2.position = (SCREEN_WIDTH // 2 + 450, SCREEN_HEIGHT // 2 - 230)
        super().init()

    def enter(self) -> None:
        super().enter()

    def exit(self) -> None:
        super().exit()

    def update(self, dt: float) -> None:
        super().update(dt)
        if self.input.key_down(pygame.K_1):
            self.game_mgr.play_tex_id = _PLAYER_TEX
            self._go_to(SceneIds.DEV1)
        elif self.input.key_down(pygame.K_2):
            self.game_mgr.play_tex_id = _PLAYER2_TEX
            self._go_to(SceneIds.DEV1)
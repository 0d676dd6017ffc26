"""The main game scene: chop the tree, dodge branches, beat the clock."""

from __future__ import annotations

import pygame

from .bees import BeeGo, BeeHive
from .defines import Origins, SceneIds, SceneStatus, Sides, SortingLayers
from .framework import FRAMEWORK
from .game_mgr import GAME_MGR
from .game_object import SpriteGo, TextGo
from .input_mgr import INPUT
from .player import Player
from .player_normal import PlayerNormal
from .resources import FONTS, SOUNDS, TEXTURES
from .scene import Scene
from .scenery import CloudGo
from .tree import Tree
from .ui import UiScore, UiTimebar
from .utils import clamp, random_float, random_int

SCREEN_WIDTH = 1920
SCREEN_HEIGHT = 1080

_FONT = "fonts/KOMIKAP_.ttf"
_PLAYER_NORMAL_TEX = "graphics/player.png"
_PLAYER_ANIMATED_TEX = "graphics/player2.png"
_BEE_TEX = "graphics/Bee_Walk.png"

_INIT_TEXTURES = (
    "graphics/tree.png",
    "graphics/branch.png",
    "graphics/player.png",
    "graphics/player2.png",
    "graphics/rip.png",
    "graphics/axe.png",
)
_SCENE_TEXTURES = (
    "graphics/background.png",
    "graphics/cloud.png",
    "graphics/tree.png",
    "graphics/branch.png",
    "graphics/log.png",
    "graphics/player.png",
    "graphics/player2.png",
    "graphics/rip.png",
    "graphics/axe.png",
    "graphics/Stup.png",
    "graphics/StupDead.png",
    _BEE_TEX,
)


def _play(sound) -> None:
    if sound is not None:
        sound.play()


class SceneDev1(Scene):
    """The timed chopping game with falling hives and bees."""

    def __init__(self, game_mgr=None, input_mgr=None, framework=None) -> None:
        super().__init__(SceneIds.DEV1)
        self.game_mgr = GAME_MGR if game_mgr is None else game_mgr
        self.input = INPUT if input_mgr is None else input_mgr
        self.framework = FRAMEWORK if framework is None else framework

        self._status = SceneStatus.AWAKE
        self.tree: Tree | None = None
        self.player: Player | None = None
        self.bee_hive: BeeHive | None = None
        self.bees: list[BeeGo] = []
        self.center_msg: TextGo | None = None
        self.ui_score: UiScore | None = None
        self.ui_timer: UiTimebar | None = None

        self.score = 0
        self.timer = 0.0
        self.bee_timer = 0.0
        self.bee_gen_time = 1.0
        self.game_time = 5.0

        self.sb_id_chop = "sound/chop.wav"
        self.sb_id_death = "sound/death.wav"
        self.sb_id_timeout = "sound/out_of_time.wav"
        self.sfx_death = None
        self.sfx_timeout = None

    @property
    def status(self) -> SceneStatus:
        return self._status

    def init(self) -> None:
        background = self.add_go(SpriteGo("graphics/background.png"))
        background.sorting_layer = SortingLayers.BACKGROUND
        background.sorting_order = -1
        background.set_origin(Origins.MC)
        background.position = (SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2)

        for _ in range(3):
            cloud = self.add_go(CloudGo("graphics/cloud.png"))
            cloud.sorting_layer = SortingLayers.BACKGROUND
            cloud.sorting_order = 0

        for path in _INIT_TEXTURES:
            TEXTURES.load(path)

        self.tree = self.add_go(Tree("Tree", scene=self))

        texture = self.game_mgr.play_tex_id
        if texture == _PLAYER_NORMAL_TEX:
            player = PlayerNormal(texture)
            player.position = (SCREEN_WIDTH / 2, SCREEN_HEIGHT - 400.0)
        elif texture == _PLAYER_ANIMATED_TEX:
            player = Player(texture)
            player.position = (SCREEN_WIDTH / 2, SCREEN_HEIGHT - 200.0)
        else:
            raise ValueError(f"no player character uses texture {texture!r}")
        player.input = self.input
        player.scene_game = self
        self.player = self.add_go(player)

        self.center_msg = self.add_go(TextGo(_FONT, "Center Message"))
        self.center_msg.sorting_layer = SortingLayers.UI
        self.ui_score = self.add_go(UiScore(_FONT, "Ui Score"))
        self.ui_timer = self.add_go(UiTimebar("Ui Timer"))
        self.bee_hive = self.add_go(BeeHive("BeeHive"))
        self.bee_hive.active = False

        super().init()

        self.tree.position = (SCREEN_WIDTH / 2, SCREEN_HEIGHT - 200.0)

        self.center_msg.character_size = 100
        self.center_msg.fill_color = pygame.Color("white")
        self.center_msg.position = (SCREEN_WIDTH / 2, SCREEN_HEIGHT / 2)

        self.ui_score.character_size = 75
        self.ui_score.fill_color = pygame.Color("white")
        self.ui_score.position = (30.0, 30.0)

        self.ui_timer.configure((500.0, 100.0), "red")
        self.ui_timer.set_origin(Origins.ML)
        self.ui_timer.position = (SCREEN_WIDTH / 2 - 250.0, SCREEN_HEIGHT - 100.0)
        self.player.scene_game = self

    def enter(self) -> None:
        for path in _SCENE_TEXTURES:
            TEXTURES.load(path)
        FONTS.load(_FONT)
        for sound_id in (self.sb_id_chop, self.sb_id_death, self.sb_id_timeout):
            SOUNDS.load(sound_id)
        self.sfx_death = SOUNDS.get(self.sb_id_death)
        self.sfx_timeout = SOUNDS.get(self.sb_id_timeout)

        super().enter()
        self.set_status(SceneStatus.AWAKE)

    def exit(self) -> None:
        self.player.scene_game = None
        self.tree.clear_effect_log()

        super().exit()

        for path in _SCENE_TEXTURES:
            TEXTURES.unload(path)
        FONTS.unload(_FONT)
        for sound_id in (self.sb_id_chop, self.sb_id_death, self.sb_id_timeout):
            SOUNDS.unload(sound_id)

    def update(self, dt: float) -> None:
        super().update(dt)
        handlers = {
            SceneStatus.AWAKE: self.update_awake,
            SceneStatus.GAME: self.update_game,
            SceneStatus.GAME_OVER: self.update_game_over,
            SceneStatus.PAUSE: self.update_pause,
        }
        handlers[self._status](dt)

    def draw(self, surface) -> None:
        super().draw(surface)

    def set_center_message(self, msg: str) -> None:
        if self.center_msg is None:
            return
        self.center_msg.text = msg
        self.center_msg.set_origin(Origins.MC)

    def set_visible_center_message(self, visible: bool) -> None:
        if self.center_msg is None:
            return
        self.center_msg.active = visible

    def set_score(self, score: int) -> None:
        if self.ui_score is None:
            return
        self.score = score
        self.ui_score.score = score

    def set_status(self, status: SceneStatus) -> None:
        previous = self._status
        self._status = status

        if status is SceneStatus.AWAKE:
            self.framework.time_scale = 0.0
            self.set_visible_center_message(True)
            self.set_center_message("Press Enter To Start!!")
            self.score = 0
            self.timer = self.game_time
            self.set_score(self.score)
            self.ui_timer.value = 1.0
        elif status is SceneStatus.GAME:
            if previous is SceneStatus.GAME_OVER:
                self.score = 0
                self.timer = self.game_time
                self.set_score(self.score)
                self.ui_timer.value = 1.0
                self.player.reset()
                self.tree.reset()
            self.framework.time_scale = 1.0
            self.set_visible_center_message(False)
        elif status is SceneStatus.GAME_OVER:
            self.framework.time_scale = 0.0
            for bee in self.bees:
                self.remove_go(bee)
            self.bees.clear()
            self.bee_hive.active = False
            self.set_visible_center_message(True)
        elif status is SceneStatus.PAUSE:
            self.framework.time_scale = 0.0
            self.set_visible_center_message(True)
            self.set_center_message("PAUSE! ESC TO RESUME!")

    def update_awake(self, dt: float) -> None:
        if self.input.key_down(pygame.K_RETURN):
            self.set_status(SceneStatus.GAME)

    def update_game(self, dt: float) -> None:
        if self.input.key_down(pygame.K_ESCAPE):
            self.set_status(SceneStatus.PAUSE)
            return

        self.timer = clamp(self.timer - dt, 0.0, self.game_time)
        self.ui_timer.value = self.timer / self.game_time
        if self.timer <= 0.0:
            _play(self.sfx_timeout)
            self.player.on_die()
            self.set_center_message("Time Over!")
            self.set_status(SceneStatus.GAME_OVER)
            return

        if self.bee_hive.active and self.bee_hive.is_exploded:
            self.bee_timer = clamp(self.bee_timer - dt, 0.0, self.bee_gen_time)
            if self.bee_timer <= 0.0:
                self._spawn_bee()
                self.bee_timer = self.bee_gen_time
        elif not self.bee_hive.active:
            if random_int(0, 2000) == 1:
                offset = 400.0 if random_int(0, 1) else -600.0
                self.bee_hive.reset()
                self.bee_hive.position = (SCREEN_WIDTH // 2 + offset, 0.0)
                self.bee_hive.scale = (2.0, 2.0)
                self.bee_hive.active = True

    def _spawn_bee(self) -> None:
        bee = self.add_go(BeeGo(_BEE_TEX))
        self.bees.append(bee)
        hive = self.bee_hive.position
        bee.position = (hive.x - 50.0, hive.y - 100.0)
        bee.scale = (4.0, 4.0)
        bee.speed = random_float(100.0, 400.0)
        bee.direction = Sides.LEFT if random_int(0, 1) == 1 else Sides.RIGHT
        bee.reset()
        bee.scene = self

    def update_game_over(self, dt: float) -> None:
        if self.input.key_down(pygame.K_RETURN):
            self.set_status(SceneStatus.GAME)

    def update_pause(self, dt: float) -> None:
        if self.input.key_down(pygame.K_ESCAPE):
            self.set_status(SceneStatus.GAME)

    def on_chop(self, side: Sides) -> None:
        """Chop the tree from ``side``; dying if a branch comes down on the player."""
        branch_side = self.tree.chop(side)
        if self.player.side is branch_side:
            _play(self.sfx_death)
            self.player.on_die()
            self.set_center_message("You Die!")
            self.set_status(SceneStatus.GAME_OVER)
        else:
            self.set_score(self.score + 100)
            self.timer += 1.0
"""Owns the scenes and switches between them at the end of a frame."""

from __future__ import annotations

from .defines import SceneIds
from .framework import FRAMEWORK
from .game_mgr import GAME_MGR
from .input_mgr import INPUT
from .menus import ChtSelectionScene, GameMenuScene, SoloSelectionScene, TitleScene
from .scene import Scene
from .scene_dev1 import SceneDev1
from .scene_dev2 import SceneDev2


class SceneMgr:
    """Runs the current scene and applies scene changes after drawing."""

    def __init__(self, input_mgr=None, game_mgr=None, framework=None) -> None:
        self.input = INPUT if input_mgr is None else input_mgr
        self.game_mgr = GAME_MGR if game_mgr is None else game_mgr
        self.framework = FRAMEWORK if framework is None else framework
        self.scenes: dict[SceneIds, Scene] = {}
        self.start_scene = SceneIds.TITLE
        self.current_scene_id = SceneIds.NONE
        self.next_scene = SceneIds.NONE

    @property
    def current_scene(self) -> Scene:
        if self.current_scene_id is SceneIds.NONE:
            raise RuntimeError("the scene manager has not been initialised")
        return self.scenes[self.current_scene_id]

    def init(self) -> None:
        self.scenes = {
            SceneIds.TITLE: TitleScene(self, self.input),
            SceneIds.GAME_MENU: GameMenuScene(self, self.input),
            SceneIds.CHT_SELECTION: ChtSelectionScene(self, self.input),
            SceneIds.SOLO_SELECTION: SoloSelectionScene(self, self.input, self.game_mgr),
        }
        for scene in self.scenes.values():
            scene.init()
        self.current_scene_id = self.start_scene
        self.current_scene.enter()

    def release(self) -> None:
        for scene in self.scenes.values():
            scene.release()
        self.scenes.clear()
        self.current_scene_id = SceneIds.NONE
        self.next_scene = SceneIds.NONE

    def change_scene(self, scene_id: SceneIds) -> None:
        """Request a switch to ``scene_id`` once the current frame is drawn."""
        self.next_scene = scene_id

    def update(self, dt: float) -> None:
        self.current_scene.update(dt)
        if self.next_scene is SceneIds.DEV1:
            scene = SceneDev1(self.game_mgr, self.input, self.framework)
        elif self.next_scene is SceneIds.DEV2:
            scene = SceneDev2()
        else:
            return
        scene.init()
        self.scenes[self.next_scene] = scene

    def late_update(self, dt: float) -> None:
        self.current_scene.late_update(dt)

    def _on_pre_draw(self) -> None:
        self.current_scene.on_pre_draw()

    def _on_post_draw(self) -> None:
        self.current_scene.on_post_draw()
        if self.next_scene is not SceneIds.NONE:
            self.current_scene.exit()
            self.current_scene_id = self.next_scene
            self.next_scene = SceneIds.NONE
            self.current_scene.enter()

    def draw(self, surface) -> None:
        self._on_pre_draw()
        self.current_scene.draw(surface)
        self._on_post_draw()
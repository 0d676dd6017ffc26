from types import SimpleNamespace

import pygame
import pytest

from timber.bees import BeeGo
from timber.defines import SceneIds, SceneStatus, Sides
from timber.framework import Framework
from timber.game_mgr import GameMgr
from timber.input_mgr import InputMgr
from timber.player_normal import PlayerNormal
from timber.scene_dev1 import SceneDev1


def _make_scene(texture="graphics/player2.png"):
    scene = SceneDev1(
        game_mgr=GameMgr(play_tex_id=texture), input_mgr=InputMgr(), framework=Framework()
    )
    scene.init()
    scene.enter()
    return scene


@pytest.fixture
def scene():
    return _make_scene()


def press(scene, key):
    scene.input.clear()
    scene.input.update_event(SimpleNamespace(type=pygame.KEYUP, key=key))
    scene.input.clear()
    scene.input.update_event(SimpleNamespace(type=pygame.KEYDOWN, key=key))
    scene.update(0.0)


def line_up(tree, next_side):
    for branch in tree.branches:
        branch.set_side(Sides.NONE)
    tree.branches[1].set_side(next_side)


def test_enter_starts_awake(scene):
    assert scene.scene_id is SceneIds.DEV1
    assert scene.status is SceneStatus.AWAKE
    assert scene.framework.time_scale == 0.0
    assert scene.center_msg.text == "Press Enter To Start!!"
    assert scene.center_msg.active
    assert scene.score == 0
    assert scene.timer == scene.game_time
    assert scene.ui_timer.value == 1.0


def test_enter_key_starts_game(scene):
    press(scene, pygame.K_RETURN)
    assert scene.status is SceneStatus.GAME
    assert scene.framework.time_scale == 1.0
    assert not scene.center_msg.active


def test_escape_pauses_and_resumes(scene):
    press(scene, pygame.K_RETURN)
    press(scene, pygame.K_ESCAPE)
    assert scene.status is SceneStatus.PAUSE
    assert scene.center_msg.text == "PAUSE! ESC TO RESUME!"
    assert scene.framework.time_scale == 0.0
    press(scene, pygame.K_ESCAPE)
    assert scene.status is SceneStatus.GAME


def test_running_out_of_time_ends_game(scene):
    scene.set_status(SceneStatus.GAME)
    scene.update_game(scene.game_time + 1.0)
    assert scene.status is SceneStatus.GAME_OVER
    assert scene.center_msg.text == "Time Over!"
    assert not scene.player.is_alive
    assert scene.ui_timer.value == 0.0


def test_safe_chop_scores_and_adds_time(scene):
    scene.set_status(SceneStatus.GAME)
    line_up(scene.tree, Sides.LEFT)
    scene.on_chop(Sides.LEFT)
    assert scene.status is SceneStatus.GAME
    assert scene.score == 100
    assert scene.ui_score.score == 100
    assert scene.timer == scene.game_time + 1.0


def test_branch_on_player_side_kills(scene):
    scene.set_status(SceneStatus.GAME)
    line_up(scene.tree, scene.player.side)
    scene.on_chop(Sides.LEFT)
    assert scene.status is SceneStatus.GAME_OVER
    assert scene.center_msg.text == "You Die!"
    assert not scene.player.is_alive
    assert scene.score == 0


def test_restart_after_game_over_resets(scene):
    scene.set_status(SceneStatus.GAME)
    line_up(scene.tree, Sides.LEFT)
    scene.on_chop(Sides.LEFT)
    line_up(scene.tree, scene.player.side)
    scene.on_chop(Sides.LEFT)
    assert scene.status is SceneStatus.GAME_OVER

    press(scene, pygame.K_RETURN)
    assert scene.status is SceneStatus.GAME
    assert scene.score == 0
    assert scene.timer == scene.game_time
    assert scene.player.is_alive
    assert scene.tree.branches[0].side is Sides.NONE


def test_exploded_hive_spawns_bees_cleared_on_game_over(scene):
    scene.set_status(SceneStatus.GAME)
    scene.bee_hive.active = True
    scene.bee_hive.is_exploded = True
    scene.bee_timer = 0.0
    scene.update_game(0.01)
    assert len(scene.bees) == 1
    bee = scene.bees[0]
    assert isinstance(bee, BeeGo)
    assert bee.scene is scene
    assert bee.position == scene.bee_hive.position + pygame.Vector2(-50.0, -100.0)
    assert scene.bee_timer == scene.bee_gen_time

    scene.set_status(SceneStatus.GAME_OVER)
    assert scene.bees == []
    assert not scene.bee_hive.active


def test_unknown_player_texture_rejected():
    scene = SceneDev1(game_mgr=GameMgr(play_tex_id="graphics/unknown.png"), input_mgr=InputMgr())
    with pytest.raises(ValueError):
        scene.init()


def test_normal_player_chosen_for_first_character():
    scene = _make_scene("graphics/player.png")
    assert isinstance(scene.player, PlayerNormal)
    assert scene.player.position == pygame.Vector2(1920 / 2, 1080.0 - 400.0)
    assert scene.player.scene_game is scene


def test_exit_detaches_player(scene):
    scene.exit()
    assert scene.player.scene_game is None
    assert scene.tree.log_effects == []
import pygame
import pytest

from timber.defines import SceneIds
from timber.game_object import SpriteGo
from timber.resources import TEXTURES
from timber.scene_dev2 import SceneDev2

GREEN = (0, 255, 0)


@pytest.fixture
def player_png(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "graphics").mkdir()
    image = pygame.Surface((16, 16))
    image.fill(GREEN)
    pygame.image.save(image, "graphics/player.png")
    yield "graphics/player.png"
    TEXTURES.unload("graphics/player.png")


def test_init_adds_player_sprite():
    scene = SceneDev2()
    scene.init()
    assert scene.scene_id is SceneIds.DEV2
    assert len(scene.game_objects) == 1
    sprite = scene.game_objects[0]
    assert isinstance(sprite, SpriteGo)
    assert sprite.texture_id == "graphics/player.png"


def test_enter_loads_texture_and_exit_unloads(player_png):
    scene = SceneDev2()
    scene.init()
    scene.enter()
    assert player_png in TEXTURES
    assert scene.game_objects[0].texture.get_size() == (16, 16)
    scene.exit()
    assert player_png not in TEXTURES


def test_draw_shows_sprite(player_png):
    scene = SceneDev2()
    scene.init()
    scene.enter()
    scene.update(0.1)
    surface = pygame.Surface((32, 32))
    scene.draw(surface)
    assert tuple(surface.get_at((4, 4)))[:3] == GREEN
    assert tuple(surface.get_at((20, 20)))[:3] == (0, 0, 0)
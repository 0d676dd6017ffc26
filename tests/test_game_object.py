import pygame
import pytest

from timber.defines import Origins, SortingLayers
from timber.game_object import GameObject, SpriteGo, TextGo, draw_order
from timber.resources import TEXTURES

RED = (255, 0, 0)
BLACK = (0, 0, 0)


@pytest.fixture
def texture_path(tmp_path):
    image = pygame.Surface((4, 2))
    image.fill(RED)
    path = str(tmp_path / "block.bmp")
    pygame.image.save(image, path)
    TEXTURES.load(path)
    yield path
    TEXTURES.unload(path)


def pixel(surface, x, y):
    return tuple(surface.get_at((x, y)))[:3]


def test_position_is_copied_on_set():
    obj = GameObject("thing")
    v = pygame.Vector2(1, 2)
    obj.position = v
    v.x = 9
    assert obj.position == (1, 2)


def test_base_preset_origin_is_zero():
    obj = GameObject()
    obj.set_origin((3, 4))
    obj.set_origin(Origins.BR)
    assert obj.origin == (0, 0)
    assert obj.origin_preset is Origins.BR


def test_vector_origin_is_custom():
    obj = GameObject()
    obj.set_origin((3, 4))
    assert obj.origin == (3, 4)
    assert obj.origin_preset is Origins.CUSTOM


def test_sprite_origin_presets_follow_texture(texture_path):
    sprite = SpriteGo(texture_path)
    sprite.reset()
    sprite.set_origin(Origins.BR)
    assert sprite.origin == (4, 2)
    sprite.set_origin(Origins.MC)
    assert sprite.origin == (4 * 0.5, 2 * 0.5)


def test_sprite_reset_reapplies_preset(texture_path):
    sprite = SpriteGo(texture_path)
    sprite.set_origin(Origins.BR)
    assert sprite.origin == (0, 0)
    sprite.reset()
    assert sprite.origin == (4, 2)


def test_sprite_with_missing_texture_has_zero_origin():
    sprite = SpriteGo("does/not/exist.png")
    sprite.reset()
    sprite.set_origin(Origins.BR)
    assert sprite.origin == (0, 0)


def test_sprite_draws_at_position(texture_path):
    sprite = SpriteGo(texture_path)
    sprite.reset()
    sprite.position = (5, 3)
    target = pygame.Surface((20, 10))
    sprite.draw(target)
    assert pixel(target, 5, 3) == RED
    assert pixel(target, 8, 4) == RED
    assert pixel(target, 9, 3) == BLACK
    assert pixel(target, 4, 3) == BLACK


def test_sprite_negative_scale_extends_left(texture_path):
    sprite = SpriteGo(texture_path)
    sprite.reset()
    sprite.position = (10, 0)
    sprite.scale = (-1, 1)
    target = pygame.Surface((20, 10))
    sprite.draw(target)
    assert pixel(target, 6, 0) == RED
    assert pixel(target, 5, 0) == BLACK
    assert pixel(target, 10, 0) == BLACK


def test_sprite_bottom_right_origin_draws_up_left(texture_path):
    sprite = SpriteGo(texture_path)
    sprite.reset()
    sprite.set_origin(Origins.BR)
    sprite.position = (10, 5)
    target = pygame.Surface((20, 10))
    sprite.draw(target)
    assert pixel(target, 9, 4) == RED
    assert pixel(target, 10, 5) == BLACK


def test_text_without_font_has_zero_bounds():
    text = TextGo("missing.ttf", "label")
    text.text = "SCORE: 0"
    text.reset()
    text.set_origin(Origins.BR)
    assert text.origin == (0, 0)
    target = pygame.Surface((10, 10))
    text.draw(target)
    assert pixel(target, 0, 0) == BLACK


def test_text_vector_origin_is_custom():
    text = TextGo("missing.ttf")
    text.set_origin((2, 5))
    text.reset()
    assert text.origin == (2, 5)
    assert text.origin_preset is Origins.CUSTOM


def test_draw_order_sorts_by_layer_then_order():
    ui = GameObject("ui")
    ui.sorting_layer = SortingLayers.UI
    bg_front = GameObject("bg_front")
    bg_front.sorting_layer = SortingLayers.BACKGROUND
    bg_back = GameObject("bg_back")
    bg_back.sorting_layer = SortingLayers.BACKGROUND
    bg_back.sorting_order = -1
    fg = GameObject("fg")
    fg.sorting_layer = SortingLayers.FOREGROUND
    ordered = draw_order([ui, fg, bg_front, bg_back])
    assert [o.name for o in ordered] == ["bg_back", "bg_front", "fg", "ui"]
import pygame
import pytest

from timber.anim import Anim, Frame


def _sheet(tmp_path, color=(255, 0, 0)):
    surface = pygame.Surface((8, 8))
    surface.fill(color)
    path = tmp_path / "sheet.bmp"
    pygame.image.save(surface, str(path))
    return str(path)


def test_add_sequence_steps_by_width_plus_stride():
    anim = Anim()
    anim.add_sequence((11, 140, 112, 82), 4, 0.1, 3)
    xs = [frame.rect[0] for frame in anim.frames]
    assert xs[0] == 11
    assert all(b - a == 112 + 4 for a, b in zip(xs, xs[1:]))
    assert all(frame.rect[1:] == (140, 112, 82) for frame in anim.frames)


def test_reverse_sequence_mirrors_forward_rects():
    forward = Anim()
    forward.add_sequence((0, 0, 10, 10), 2, 0.1, 4)
    backward = Anim()
    durations = [0.1, 0.2, 0.3, 0.4]
    backward.add_sequence_rev((0, 0, 10, 10), 2, durations, 4)
    assert [f.rect for f in backward.frames] == [f.rect for f in reversed(forward.frames)]
    assert [f.duration for f in backward.frames] == durations


def test_too_few_durations_rejected():
    anim = Anim()
    with pytest.raises(ValueError):
        anim.add_sequence((0, 0, 1, 1), 0, [0.1], 2)


def test_set_sequence_replaces_and_clear_empties():
    anim = Anim()
    anim.add_frame(Frame((0, 0, 5, 5), 1.0))
    anim.set_sequence((0, 0, 2, 2), 0, 0.5, 2)
    assert len(anim.frames) == 2
    assert anim.total_length == pytest.approx(1.0)
    anim.clear_sequence()
    assert anim.frames == []
    assert anim.total_length == 0


def test_update_selects_frame_by_elapsed_time():
    anim = Anim()
    anim.set_sequence((0, 0, 2, 2), 1, 0.1, 3)
    anim.update(0.05)
    assert anim.current_rect == anim.frames[0].rect
    anim.update(0.1)
    assert anim.current_rect == anim.frames[1].rect
    assert not anim.is_end


def test_repeating_animation_wraps_and_flags_end():
    anim = Anim()
    anim.set_sequence((0, 0, 2, 2), 0, 0.1, 2)
    anim.update(0.5)
    assert anim.is_end
    assert anim.total_progress == 0.0
    anim.reset()
    assert not anim.is_end


def test_finished_one_shot_shows_first_frame():
    anim = Anim()
    anim.repeat = False
    anim.activated = False
    anim.set_sequence((0, 0, 2, 2), 0, 0.1, 3)
    anim.update(1.0)
    assert anim.is_end
    assert anim.current_rect == anim.frames[0].rect
    assert anim.total_progress == pytest.approx(1.0)


def test_load_missing_file_fails():
    assert Anim().load_from_file("no/such/sheet.bmp") is False


def test_draw_blits_current_frame(tmp_path):
    anim = Anim()
    assert anim.load_from_file(_sheet(tmp_path))
    anim.set_sequence((0, 0, 2, 2), 0, 0.1, 1)
    anim.update(0.01)
    target = pygame.Surface((4, 4))
    anim.draw(target)
    assert target.get_at((0, 0))[:3] == (255, 0, 0)
    assert target.get_at((3, 3))[:3] == (0, 0, 0)


def test_inactive_anim_draws_nothing(tmp_path):
    anim = Anim()
    anim.load_from_file(_sheet(tmp_path))
    anim.activated = False
    target = pygame.Surface((4, 4))
    anim.draw(target)
    assert target.get_at((0, 0))[:3] == (0, 0, 0)
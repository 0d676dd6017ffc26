import pygame

from timber.input_mgr import InputMgr


def key_event(kind, key):
    return pygame.event.Event(kind, key=key)


def button_event(kind, button):
    return pygame.event.Event(kind, button=button, pos=(0, 0))


def test_key_press_is_down_then_held():
    mgr = InputMgr()
    mgr.update_event(key_event(pygame.KEYDOWN, pygame.K_SPACE))
    assert mgr.key_down(pygame.K_SPACE)
    assert mgr.key_held(pygame.K_SPACE)
    mgr.clear()
    assert not mgr.key_down(pygame.K_SPACE)
    assert mgr.key_held(pygame.K_SPACE)


def test_key_release_is_up_then_idle():
    mgr = InputMgr()
    mgr.update_event(key_event(pygame.KEYDOWN, pygame.K_LEFT))
    mgr.clear()
    mgr.update_event(key_event(pygame.KEYUP, pygame.K_LEFT))
    assert mgr.key_up(pygame.K_LEFT)
    assert not mgr.key_held(pygame.K_LEFT)
    mgr.clear()
    assert not mgr.key_up(pygame.K_LEFT)
    assert not mgr.key_down(pygame.K_LEFT)


def test_repeated_press_while_held_stays_held():
    mgr = InputMgr()
    mgr.update_event(key_event(pygame.KEYDOWN, pygame.K_RIGHT))
    mgr.clear()
    mgr.update_event(key_event(pygame.KEYDOWN, pygame.K_RIGHT))
    assert not mgr.key_down(pygame.K_RIGHT)
    assert mgr.key_held(pygame.K_RIGHT)


def test_untouched_key_reports_nothing():
    mgr = InputMgr()
    assert not (mgr.key_down(pygame.K_a) or mgr.key_held(pygame.K_a) or mgr.key_up(pygame.K_a))


def test_mouse_buttons_tracked_separately_from_keys():
    mgr = InputMgr()
    mgr.update_event(button_event(pygame.MOUSEBUTTONDOWN, 1))
    assert mgr.mouse_button_down(1)
    assert not mgr.key_down(1)
    mgr.clear()
    assert mgr.mouse_button_held(1)
    mgr.update_event(button_event(pygame.MOUSEBUTTONUP, 1))
    assert mgr.mouse_button_up(1)
    assert not mgr.mouse_button_held(1)


def test_mouse_motion_updates_position():
    mgr = InputMgr()
    mgr.update_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(10, 20), rel=(0, 0), buttons=(0, 0, 0)))
    assert mgr.mouse_position == (10, 20)
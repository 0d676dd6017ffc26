"""Keyboard and mouse state tracked frame by frame."""

from __future__ import annotations

from enum import Enum

import pygame


class KeyStatus(Enum):
    """State of a key or button within the current frame."""

    NONE = "none"
    DOWN = "down"
    HELD = "held"
    UP = "up"


class InputMgr:
    """Turns input events into per-frame down/held/up states."""

    def __init__(self) -> None:
        self._keys: dict[int, KeyStatus] = {}
        self._buttons: dict[int, KeyStatus] = {}
        self.mouse_position: tuple[int, int] = (0, 0)

    def clear(self) -> None:
        """Advance to a new frame: released keys go idle, pressed keys become held."""
        for table in (self._keys, self._buttons):
            for code, status in list(table.items()):
                if status is KeyStatus.UP:
                    del table[code]
                elif status is KeyStatus.DOWN:
                    table[code] = KeyStatus.HELD

    @staticmethod
    def _press(table: dict[int, KeyStatus], code: int) -> None:
        if table.get(code, KeyStatus.NONE) is KeyStatus.NONE:
            table[code] = KeyStatus.DOWN

    def update_event(self, event) -> None:
        """Record one pygame event."""
        if event.type == pygame.KEYDOWN:
            self._press(self._keys, event.key)
        elif event.type == pygame.KEYUP:
            self._keys[event.key] = KeyStatus.UP
        elif event.type == pygame.MOUSEBUTTONDOWN:
            self._press(self._buttons, event.button)
        elif event.type == pygame.MOUSEBUTTONUP:
            self._buttons[event.button] = KeyStatus.UP
        elif event.type == pygame.MOUSEMOTION:
            x, y = event.pos
            self.mouse_position = (x, y)

    def _status(self, table: dict[int, KeyStatus], code: int) -> KeyStatus:
        return table.get(code, KeyStatus.NONE)

    def key_down(self, key: int) -> bool:
        return self._status(self._keys, key) is KeyStatus.DOWN

    def key_held(self, key: int) -> bool:
        return self._status(self._keys, key) in (KeyStatus.DOWN, KeyStatus.HELD)

    def key_up(self, key: int) -> bool:
        return self._status(self._keys, key) is KeyStatus.UP

    def mouse_button_down(self, button: int) -> bool:
        return self._status(self._buttons, button) is KeyStatus.DOWN

    def mouse_button_held(self, button: int) -> bool:
        return self._status(self._buttons, button) in (KeyStatus.DOWN, KeyStatus.HELD)

    def mouse_button_up(self, button: int) -> bool:
        return self._status(self._buttons, button) is KeyStatus.UP


INPUT = InputMgr()
"""Choices made in the menus that the game scene reads."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class GameMgr:
    """Texture ids of the chosen characters."""

    play_tex_id: str = ""
    play_tex_id1: str = ""
    play_tex_id2: str = ""

    def set_users(self, p1: int, p2: int) -> None:
        """Store the two players' choices, each as the character with that code."""
        self.play_tex_id1 = chr(p1)
        self.play_tex_id2 = chr(p2)


GAME_MGR = GameMgr()
"""Window, main loop and the command that starts the game."""

from __future__ import annotations

import argparse

import pygame

from . import utils
from .framework import FRAMEWORK
from .game_mgr import GAME_MGR
from .input_mgr import INPUT
from .scene_mgr import SceneMgr


class App:
    """Opens the window and drives input, update and drawing each frame."""

    def __init__(self, input_mgr=None, game_mgr=None, framework=None) -> None:
        self.input = INPUT if input_mgr is None else input_mgr
        self.game_mgr = GAME_MGR if game_mgr is None else game_mgr
        self.framework = FRAMEWORK if framework is None else framework
        self.scene_mgr = SceneMgr(self.input, self.game_mgr, self.framework)
        self.window: pygame.Surface | None = None
        self.running = False

    def init(self, width: int, height: int, name: str) -> None:
        pygame.init()
        self.window = pygame.display.set_mode((width, height))
        pygame.display.set_caption(name)
        utils.seed()
        self.scene_mgr.init()
        self.running = True

    def step(self, real_dt: float, events) -> float:
        """Run one frame over ``events``; returns the scaled time step."""
        if self.window is None:
            raise RuntimeError("call init() before running frames")
        dt = self.framework.tick(real_dt)

        self.input.clear()
        for event in events:
            if event.type == pygame.QUIT:
                self.running = False
            self.input.update_event(event)

        self.scene_mgr.update(dt)
        self.scene_mgr.late_update(dt)

        self.window.fill((0, 0, 0))
        self.scene_mgr.draw(self.window)
        return dt

    def run(self) -> None:
        clock = pygame.time.Clock()
        while self.running:
            real_dt = clock.tick() / 1000.0
            self.step(real_dt, pygame.event.get())
            pygame.display.flip()

    def release(self) -> None:
        self.scene_mgr.release()
        self.window = None
        self.running = False
        pygame.quit()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="timber", description="Chop the tree, dodge the branches.")
    parser.add_argument("--width", type=int, default=1920)
    parser.add_argument("--height", type=int, default=1080)
    args = parser.parse_args(argv)

    app = App()
    app.init(args.width, args.height, "Timber")
    app.run()
    app.release()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
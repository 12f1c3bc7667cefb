from __future__ import annotations
import pygame
from typing import Tuple

from space_circles.api import Game, FrameData
from space_circles.app.context import Context
from space_circles.app.scheduler import FixedStepScheduler
from space_circles.core import GameSimulation, SimulationConfig
from space_circles.core.const import HIGHSCORE_KEY
from space_circles.render.scene import draw_scene


class SpaceCircles(Game):
    def on_load(self, ctx: Context, manifest):
        self.ctx = ctx
        self.manifest = manifest
        options = manifest.get("options", {})
        self.font_name = options.get("font")

        cfg = SimulationConfig.from_options(options)
        key = manifest.get("storage", {}).get("key", HIGHSCORE_KEY)
        self.sim = GameSimulation(ctx.resources["store"], ctx.screen_size, cfg, highscore_key=key)
        self.scheduler = FixedStepScheduler(cfg.tick_ms, self.sim.tick)

    def on_update(self, dt_ms: float, frame: FrameData) -> None:
        self.sim.set_visible(frame.visible)
        self.scheduler.paused = not frame.visible
        if not frame.visible:
            return

        for p in frame.points:
            was_over = self.sim.is_game_over
            self.sim.register_click(p.x, p.y)
            if was_over:
                # the restart click is not also a shot at the new game
                self.scheduler.reset()
                break

        self.scheduler.advance(dt_ms)

    def on_draw(self, surface: pygame.Surface) -> None:
        draw_scene(surface, self.sim, self.font_name)

    def on_resize(self, screen_size: Tuple[int, int]) -> None:
        self.sim.resize(*screen_size)

    def on_unload(self) -> None:
        pass


def get_game():
    return SpaceCircles()

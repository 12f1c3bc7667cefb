from __future__ import annotations
from typing import Optional

import pygame

from space_circles.core import const
from space_circles.core.simulation import GameSimulation
from .layout import text_layout
from .shapes import draw_disk, draw_text

TITLE = "Space Circles"


def draw_scene(surface: pygame.Surface, sim: GameSimulation, font_name: Optional[str] = None) -> None:
    """Background, HUD, then either the circles or the game-over overlay."""
    surface.fill(const.BG_COLOR)
    draw_hud(surface, sim, font_name)

    if sim.is_game_over:
        draw_game_over(surface, sim, font_name)
        return

    for c in sim.circles:
        draw_disk(surface, c.color, (c.x, c.y), c.size,
                  outline=const.OUTLINE_COLOR, outline_width=const.OUTLINE_WIDTH)


def draw_hud(surface: pygame.Surface, sim: GameSimulation, font_name: Optional[str] = None) -> None:
    w, h = surface.get_size()
    lay = text_layout(w)
    pad = lay.extra_padding
    label_y = h - lay.text_padding - pad
    color = const.TEXT_COLOR

    draw_text(surface, TITLE, (w // 2, lay.text_padding + pad), color,
              size=lay.big_size, align="center", font_name=font_name)

    draw_text(surface, "Score", (pad, label_y), color, size=lay.small_size, font_name=font_name)
    draw_text(surface, str(sim.score), (pad, h - pad), color, size=lay.big_size, font_name=font_name)

    draw_text(surface, "Highscore", (w // 2, label_y), color, size=lay.small_size,
              align="center", font_name=font_name)
    draw_text(surface, str(sim.highscore), (w // 2, h - pad), color, size=lay.big_size,
              align="center", font_name=font_name)

    draw_text(surface, "Lives", (w - pad, label_y), color, size=lay.small_size,
              align="right", font_name=font_name)
    draw_text(surface, str(sim.lives), (w - pad, h - pad), color, size=lay.big_size,
              align="right", font_name=font_name)


def draw_game_over(surface: pygame.Surface, sim: GameSimulation, font_name: Optional[str] = None) -> None:
    w, h = surface.get_size()
    lay = text_layout(w)
    cx, cy = w // 2, h // 2

    draw_text(surface, "Game Over!", (cx, cy - lay.overlay_offset), const.GAME_OVER_COLOR,
              size=lay.big_size, align="center", font_name=font_name)
    rect = draw_text(surface, f"Score {sim.score}", (cx, cy + lay.overlay_offset), const.GAME_OVER_COLOR,
                     size=lay.big_size, align="center", font_name=font_name)

    y = rect.bottom + lay.small_size + lay.extra_padding
    if sim.new_highscore:
        draw_text(surface, "New Highscore!", (cx, y), const.HIGHSCORE_COLOR,
                  size=lay.small_size, align="center", font_name=font_name)
        y += lay.small_size + lay.extra_padding
    draw_text(surface, "Click to play again", (cx, y), const.TEXT_COLOR,
              size=lay.small_size, align="center", font_name=font_name)

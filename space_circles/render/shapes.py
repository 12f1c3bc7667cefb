from __future__ import annotations
from functools import lru_cache
from typing import Optional, Tuple

import pygame


@lru_cache(maxsize=32)
def get_font(name: Optional[str], size: int) -> pygame.font.Font:
    # SysFont falls back to pygame's default font when `name` is not installed
    return pygame.font.SysFont(name, size)


def draw_text(surface: pygame.Surface, text: str, pos: Tuple[int, int], color=(230, 230, 230), size=24,
              align: str = "left", font_name: Optional[str] = None) -> pygame.Rect:
    """
    Draw `text` with its baseline-ish bottom edge at pos[1].
    `align` picks which point of the text sits at pos[0]: left, center or right.
    """
    img = get_font(font_name, size).render(text, True, color)
    rect = img.get_rect()
    rect.bottom = pos[1]
    if align == "center":
        rect.centerx = pos[0]
    elif align == "right":
        rect.right = pos[0]
    else:
        rect.left = pos[0]
    surface.blit(img, rect)
    return rect


def draw_disk(surface: pygame.Surface, color, center: Tuple[float, float], diameter: float,
              outline=None, outline_width: int = 0) -> None:
    r = int(diameter / 2)
    if r <= 0:
        return
    cx, cy = int(center[0]), int(center[1])
    pygame.draw.circle(surface, color, (cx, cy), r)
    if outline is not None and outline_width > 0:
        pygame.draw.circle(surface, outline, (cx, cy), r, width=min(outline_width, r))

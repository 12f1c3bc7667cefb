from __future__ import annotations
import pygame
from typing import List, Tuple

from space_circles.api.config import EngineConfig
from space_circles.api.frame_data import Point

LEFT_BUTTON = 1


class PointerInput:
    """
    Collects pointer activations for the current frame:
    - left mouse button presses (at the press position)
    - finger taps (normalized touch coords scaled to the screen)
    Mouse events that SDL synthesizes from touches are skipped so a tap counts once.
    Respects --mirror by converting window coords -> logical coords.
    """

    def __init__(self, cfg: EngineConfig):
        self.mirror = cfg.mirror
        self._points: List[Point] = []

    def _to_logical(self, x: float, y: float, w: int, h: int) -> Tuple[float, float]:
        if self.mirror:
            x = (w - 1) - x
        return float(x), float(y)

    def handle_pygame_event(self, event: pygame.event.Event, screen_size: Tuple[int, int]) -> None:
        w, h = screen_size

        if event.type == pygame.MOUSEBUTTONDOWN:
            if event.button != LEFT_BUTTON or getattr(event, "touch", False):
                return
            self._points.append(Point(*self._to_logical(*event.pos, w, h)))

        elif event.type == pygame.FINGERDOWN:
            self._points.append(Point(*self._to_logical(event.x * w, event.y * h, w, h)))

        # a click that lands on another window must not reach the game
        elif event.type == pygame.WINDOWFOCUSLOST:
            self._points.clear()

    def drain(self) -> List[Point]:
        """Return this frame's activations and forget them."""
        out, self._points = self._points, []
        return out

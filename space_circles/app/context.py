from __future__ import annotations
from dataclasses import dataclass
import pygame
from typing import Any, Tuple
from space_circles.api.config import EngineConfig


@dataclass
class Context:
    screen: pygame.Surface
    clock: pygame.time.Clock
    cfg: EngineConfig
    # shared services for games, e.g. resources["store"] -> HighscoreStore
    resources: dict[str, Any]
    screen_size: Tuple[int, int]

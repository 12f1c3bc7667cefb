from __future__ import annotations
import logging
import math
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from space_circles.storage import HighscoreStore

from . import const
from .config import Color, SimulationConfig

log = logging.getLogger(__name__)


@dataclass(eq=False)
class Circle:
    x: float
    y: float
    size: float  # diameter
    color: Color
    clicked: bool = False

    def contains(self, x: float, y: float) -> bool:
        return math.hypot(x - self.x, y - self.y) * 2 < self.size


class Phase(Enum):
    Playing = 1
    GameOver = 2


def time_to_next_circle(score: int, floor_ms: int = const.MIN_SPAWN_INTERVAL_MS) -> int:
    """Spawn interval in ms; gets shorter as the score grows."""
    interval = math.floor(const.BASE_SPAWN_INTERVAL_MS
                          - const.SPAWN_INTERVAL_LOG_FACTOR * math.log10(score * 0.5 + 1))
    return max(floor_ms, interval)


def circle_size(score: int, floor: int = const.MIN_CIRCLE_SIZE) -> int:
    """Diameter of a freshly spawned circle; gets smaller as the score grows."""
    size = math.floor(const.BASE_CIRCLE_SIZE
                      - const.CIRCLE_SIZE_LOG_FACTOR * math.log10(score + 1))
    return max(floor, size)


class GameSimulation:
    """
    Circles spawn, shrink and must be clicked before they vanish.

    All time-dependent state advances in `tick(dt_ms)`; the host decides how
    often to call it. Clicks arrive through `register_click(x, y)`. A click
    only marks circles; they are scored on the next tick.
    """

    def __init__(
        self,
        store: HighscoreStore,
        screen_size: Tuple[int, int],
        config: Optional[SimulationConfig] = None,
        rng: Optional[random.Random] = None,
        highscore_key: str = const.HIGHSCORE_KEY,
    ):
        self.store = store
        self.width, self.height = screen_size
        self.cfg = config or SimulationConfig()
        self.rng = rng or random.Random()
        self.highscore_key = highscore_key
        self.visible = True
        self.initialize()

    # ------------- state -------------
    def initialize(self) -> None:
        self.phase = Phase.Playing
        self.score = 0
        self.lives = self.cfg.initial_lives
        self.next_extra_life_at = self.cfg.extra_life_step
        self.elapsed_ms = 0.0
        self.next_spawn_at_ms = float(self.cfg.first_spawn_delay_ms)
        self._circles: List[Circle] = []
        self.highscore = self.store.load(self.highscore_key) or 0
        self.new_highscore = False

    reset = initialize

    @property
    def circles(self) -> Tuple[Circle, ...]:
        return tuple(self._circles)

    @property
    def is_game_over(self) -> bool:
        return self.phase == Phase.GameOver

    def set_visible(self, visible: bool) -> None:
        if visible != self.visible:
            log.debug("simulation %s", "resumed" if visible else "paused")
        self.visible = visible

    def resize(self, width: int, height: int) -> None:
        self.width, self.height = width, height

    # ------------- helpers -------------
    def _random_position(self, size: float) -> Tuple[float, float]:
        half = size / 2 + self.cfg.spawn_margin

        def axis(extent: int) -> float:
            lo, hi = half, extent - half
            if hi < lo:
                return extent / 2
            return self.rng.uniform(lo, hi)

        return axis(self.width), axis(self.height)

    def _spawn_circle(self) -> Circle:
        size = circle_size(self.score, self.cfg.min_circle_size)
        x, y = self._random_position(size)
        c = Circle(x=x, y=y, size=size, color=self.rng.choice(self.cfg.palette))
        self._circles.append(c)
        return c

    def _lose_lives(self, n: int) -> None:
        if n <= 0:
            return
        self.lives = max(0, self.lives - n)
        if self.lives == 0:
            self.on_game_over()

    # ------------- loop hooks -------------
    def tick(self, dt_ms: float) -> None:
        if not self.visible or self.is_game_over:
            return

        self.elapsed_ms += dt_ms

        if self.elapsed_ms >= self.next_spawn_at_ms:
            self._spawn_circle()
            self.next_spawn_at_ms += time_to_next_circle(self.score, self.cfg.min_spawn_interval_ms)

        before = len(self._circles)
        self._circles = [c for c in self._circles if not c.clicked]
        self.score += before - len(self._circles)

        if self.score > self.highscore:
            self.highscore = self.score
            self.new_highscore = True

        if self.score >= self.next_extra_life_at:
            self.lives += 1
            self.next_extra_life_at += self.cfg.extra_life_step

        for c in self._circles:
            c.size -= const.SHRINK_PER_TICK

        before = len(self._circles)
        self._circles = [c for c in self._circles if c.size > self.cfg.expire_size]
        self._lose_lives(before - len(self._circles))

    def register_click(self, x: float, y: float) -> int:
        """
        Mark every circle under (x, y) as clicked and return how many were hit.
        A click on a finished game restarts it instead; a click that hits
        nothing costs a life straight away.
        """
        if self.is_game_over:
            log.info("restarting")
            self.initialize()
            return 0

        hits = 0
        for c in self._circles:
            if c.contains(x, y):
                c.clicked = True
                hits += 1

        if hits == 0:
            self._lose_lives(const.MISS_PENALTY)
        return hits

    def on_game_over(self) -> None:
        self.phase = Phase.GameOver
        log.info("game over: score=%d highscore=%d", self.score, self.highscore)
        if not self.new_highscore:
            return
        try:
            self.store.save(self.highscore_key, self.highscore)
        except OSError:
            log.exception("could not save highscore %d", self.highscore)
        else:
            log.info("new highscore saved: %d", self.highscore)

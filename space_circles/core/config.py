from __future__ import annotations
from dataclasses import dataclass, fields
from typing import Any, Dict, Tuple

from . import const

Color = Tuple[int, int, int]


@dataclass
class SimulationConfig:
    tick_ms: int = const.TICK_MS
    initial_lives: int = const.INITIAL_LIVES
    extra_life_step: int = const.EXTRA_LIFE_STEP
    first_spawn_delay_ms: int = const.FIRST_SPAWN_DELAY_MS
    min_spawn_interval_ms: int = const.MIN_SPAWN_INTERVAL_MS
    min_circle_size: int = const.MIN_CIRCLE_SIZE
    expire_size: int = const.EXPIRE_SIZE
    spawn_margin: int = const.SPAWN_MARGIN
    palette: Tuple[Color, ...] = const.PALETTE

    def __post_init__(self):
        if self.tick_ms <= 0:
            raise ValueError("tick_ms must be positive")
        if self.initial_lives <= 0:
            raise ValueError("initial_lives must be positive")
        if self.extra_life_step <= 0:
            raise ValueError("extra_life_step must be positive")
        if self.min_spawn_interval_ms <= 0:
            raise ValueError("min_spawn_interval_ms must be positive")
        if self.min_circle_size <= self.expire_size:
            raise ValueError("min_circle_size must be larger than expire_size")
        if not self.palette:
            raise ValueError("palette must not be empty")

    @classmethod
    def from_options(cls, options: Dict[str, Any] | None) -> "SimulationConfig":
        """
        Build a config from the `options` mapping of a game manifest.
        Keys that are not simulation settings (fonts, etc.) are ignored.
        """
        options = options or {}
        kwargs: Dict[str, Any] = {}
        for f in fields(cls):
            if f.name not in options:
                continue
            value = options[f.name]
            if f.name == "palette":
                kwargs[f.name] = tuple(_parse_color(c) for c in value)
            else:
                if isinstance(value, bool) or not isinstance(value, (int, float)):
                    raise TypeError(f"option {f.name!r} must be a number, got {value!r}")
                kwargs[f.name] = int(value)
        return cls(**kwargs)


def _parse_color(value) -> Color:
    if isinstance(value, str):
        v = value.lstrip("#")
        if len(v) != 6:
            raise ValueError(f"bad color {value!r}")
        return (int(v[0:2], 16), int(v[2:4], 16), int(v[4:6], 16))
    rgb = tuple(int(c) for c in value)
    if len(rgb) != 3 or any(c < 0 or c > 255 for c in rgb):
        raise ValueError(f"bad color {value!r}")
    return rgb  # type: ignore[return-value]

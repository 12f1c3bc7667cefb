from __future__ import annotations
from dataclasses import dataclass, field
from typing import List


@dataclass
class Point:
    x: float
    y: float


@dataclass
class FrameData:
    timestamp: float
    # pointer activations (mouse clicks, taps) since the last frame, in screen coords
    points: List[Point] = field(default_factory=list)
    # False while the window is hidden or minimized
    visible: bool = True

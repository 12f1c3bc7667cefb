from __future__ import annotations
from typing import Callable


class FixedStepScheduler:
    """
    Turns variable frame times into fixed-size steps.

    `advance(dt_ms)` is fed whatever the host clock measured; `callback(step_ms)`
    runs once for every whole step that fits into the accumulated time. At most
    `max_steps_per_advance` steps run per call and any backlog past that is
    dropped, so a long stall (window drag, debugger) does not replay seconds of
    game time in one frame.
    """

    def __init__(self, step_ms: float, callback: Callable[[float], None], max_steps_per_advance: int = 10):
        if step_ms <= 0:
            raise ValueError("step_ms must be positive")
        if max_steps_per_advance <= 0:
            raise ValueError("max_steps_per_advance must be positive")
        self.step_ms = step_ms
        self.callback = callback
        self.max_steps_per_advance = max_steps_per_advance
        self.paused = False
        self._acc_ms = 0.0

    def reset(self) -> None:
        self._acc_ms = 0.0

    def advance(self, dt_ms: float) -> int:
        """Returns the number of steps that ran."""
        if self.paused or dt_ms <= 0:
            return 0
        self._acc_ms += dt_ms
        steps = 0
        while self._acc_ms >= self.step_ms and steps < self.max_steps_per_advance:
            self.callback(self.step_ms)
            self._acc_ms -= self.step_ms
            steps += 1
        if self._acc_ms >= self.step_ms:
            self._acc_ms %= self.step_ms
        return steps

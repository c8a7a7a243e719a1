"""Frame clock for the real-time loop."""
from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, Optional


@dataclass
class FrameTimer:
    """Reports the real seconds elapsed between consecutive frames.

    ``clock`` defaults to :func:`time.perf_counter`; the first ``tick`` is
    measured from construction.
    """

    clock: Callable[[], float] = time.perf_counter
    last_time: Optional[float] = field(default=None)

    def __post_init__(self) -> None:
        if self.last_time is None:
            self.last_time = self.clock()

    def tick(self) -> float:
        now = self.clock()
        dt_real = max(0.0, now - self.last_time)
        self.last_time = now
        return dt_real


__all__ = ["FrameTimer"]

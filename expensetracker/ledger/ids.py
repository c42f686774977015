"""Mini README: Transaction identifiers from a millisecond clock.

``MillisecondIdClock`` hands out the current Unix time in milliseconds, but
never the same value twice: a tick that has already been used, or a clock
that stepped backwards, yields ``last + 1`` instead.
"""

from __future__ import annotations

import time
from typing import Callable, Iterable


def _wall_clock_ms() -> int:
    return time.time_ns() // 1_000_000


class MillisecondIdClock:
    """Strictly increasing integer ids derived from wall-clock time."""

    def __init__(self, clock: Callable[[], int] = _wall_clock_ms) -> None:
        self._clock = clock
        self._last = 0

    def observe(self, identifiers: Iterable[int]) -> None:
        """Make sure future ids exceed every id in ``identifiers``."""

        self._last = max([self._last, *identifiers])

    def next_id(self) -> int:
        self._last = max(self._clock(), self._last + 1)
        return self._last

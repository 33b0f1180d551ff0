"""Frame timing measured in whole milliseconds."""

from __future__ import annotations

import time
from typing import Callable, Optional

_UINT32_MASK = 0xFFFFFFFF

Clock = Callable[[], int]


def _monotonic_ticks() -> Clock:
    """Return a clock giving milliseconds elapsed since it was made."""
    start = time.monotonic()

    def ticks() -> int:
        return int((time.monotonic() - start) * 1000)

    return ticks


class GameTime:
    """Tracks the time of the current frame and the one before it.

    ``clock`` is a callable returning a tick count in milliseconds. Tick
    arithmetic wraps at 32 bits.
    """

    def __init__(self, clock: Optional[Clock] = None) -> None:
        self._clock: Clock = clock if clock is not None else _monotonic_ticks()
        self._last_update = self._clock() & _UINT32_MASK
        self._current = 0

    @property
    def delta_time(self) -> float:
        """Seconds between the previous and the current frame."""
        return ((self._current - self._last_update) & _UINT32_MASK) / 1000.0

    @property
    def current_time(self) -> int:
        """Tick count of the current frame, in milliseconds."""
        return self._current

    def reset(self) -> None:
        """Start a new frame at the clock's present tick count."""
        self._last_update = self._current
        self._current = self._clock() & _UINT32_MASK
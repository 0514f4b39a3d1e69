"""Frames-per-second counter."""

from __future__ import annotations

import time
from typing import Callable

__all__ = ["FpsCounter"]


class FpsCounter:
    """Counts frames and reports how many fell in the last full second."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._start = clock()
        self._frame = 0
        self._fps = 0

    def update(self) -> None:
        """Register one frame; call once per frame."""
        now = self._clock()
        if now - self._start >= 1.0:
            self._fps = self._frame
            self._frame = 0
            self._start = now
        self._frame += 1

    @property
    def fps(self) -> int:
        """Frame count of the most recently completed second."""
        return self._fps
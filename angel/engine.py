"""Engine start-up, shutdown and timing."""

from __future__ import annotations

import time
from typing import Callable, Optional

import pygame

from angel.log import print_error

_START = time.monotonic()


class EngineError(RuntimeError):
    """Raised when the engine's subsystems cannot be started."""


def init() -> None:
    """Start the video and font subsystems."""
    try:
        pygame.display.init()
    except pygame.error as exc:
        print_error("Could not initialize video subsystem: ", exc)
        pygame.quit()
        raise EngineError(f"could not initialize video subsystem: {exc}") from exc
    try:
        pygame.font.init()
    except pygame.error as exc:
        print_error("Could not initialize TTF: ", exc)
        finish()
        raise EngineError(f"could not initialize TTF: {exc}") from exc


def finish() -> None:
    """Shut down every subsystem."""
    pygame.font.quit()
    pygame.quit()


def get_ticks() -> int:
    """Milliseconds since the engine was loaded."""
    return int((time.monotonic() - _START) * 1000)


def delay(ticks: int) -> None:
    """Sleep for the given number of milliseconds."""
    time.sleep(max(0, ticks) / 1000)


class FpsCounter:
    """Counts calls per second, reporting the last complete second's count."""

    def __init__(self, clock: Optional[Callable[[], int]] = None) -> None:
        self.clock = clock if clock is not None else get_ticks
        self._wait: Optional[int] = None
        self._count = 0
        self._max_count = 0

    def count(self) -> int:
        """Register a frame and return the frames counted in the last full second."""
        if self._wait is None:
            self._wait = self.clock()
        now = self.clock()
        self._count += 1
        if self._wait + 1000 <= now:
            self._wait += 1000
            self._max_count = self._count
            self._count = 0
        return self._max_count
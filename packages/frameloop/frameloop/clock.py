"""Frame clocks: wall-clock time for live play, virtual time for tests."""

import time
from abc import ABC, abstractmethod


class Clock(ABC):
    """Counts frames at a nominal rate. ``now()`` is in milliseconds."""

    def __init__(self, fps: int) -> None:
        if fps <= 0:
            raise ValueError("fps must be positive")
        self._fps = fps
        self._frame_ms = 1000.0 / fps
        self._frame_number = 0

    @property
    def fps(self) -> int:
        return self._fps

    @property
    def frame_ms(self) -> float:
        return self._frame_ms

    @property
    def frame_number(self) -> int:
        return self._frame_number

    def advance(self) -> int:
        self._frame_number += 1
        return self._frame_number

    @abstractmethod
    def now(self) -> float:
        ...

    def reset(self, frame_number: int = 0) -> None:
        self._frame_number = frame_number


class WallClock(Clock):
    def now(self) -> float:
        return time.monotonic() * 1000.0


class VirtualClock(Clock):
    """Deterministic clock where time moves only when frames advance.

    Time is derived from the frame count rather than accumulated, so
    ``now()`` after N frames is exactly ``start + N * 1000 / fps`` up to a
    single rounding step.
    """

    def __init__(self, fps: int = 60, start: float = 0.0) -> None:
        super().__init__(fps)
        self._start = start

    def now(self) -> float:
        return self._start + self._frame_number * 1000.0 / self._fps

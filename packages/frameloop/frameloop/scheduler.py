"""Scheduler - frame loop, pacing, cancellable recurring tasks."""

import os
import random
import time
from typing import Callable

from frameloop.clock import Clock, VirtualClock
from frameloop.types import SchedulerClosedError, Task, TaskHandle, TickContext


class Scheduler:
    """Runs recurring per-frame tasks on a single thread.

    Every task re-arms itself each frame until cancelled. All tasks of a
    frame see the same ``TickContext``, so time is read once per frame.
    """

    def __init__(
        self,
        clock: Clock | None = None,
        fps: int = 60,
        seed: int | None = None,
    ) -> None:
        self._clock = clock if clock is not None else VirtualClock(fps)
        self._tasks: list[TaskHandle] = []
        self._next_id = 0
        self._closed = False
        self._stop_requested = False
        self._start_hooks: list[Callable[[TickContext], None]] = []
        self._stop_hooks: list[Callable[[TickContext], None]] = []

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def random(self) -> random.Random:
        return self._rng

    @property
    def closed(self) -> bool:
        return self._closed

    def tasks(self) -> list[TaskHandle]:
        return [t for t in self._tasks if t.active]

    def every(self, callback: Task, name: str = "") -> TaskHandle:
        if self._closed:
            raise SchedulerClosedError(
                f"Cannot schedule {name or 'task'!r} on a closed scheduler"
            )
        handle = TaskHandle(self._next_id, name, callback)
        self._next_id += 1
        self._tasks.append(handle)
        return handle

    def cancel(self, handle: TaskHandle | None) -> None:
        if handle is None or not handle.active:
            return
        handle.active = False
        self._tasks = [t for t in self._tasks if t is not handle]

    def on_start(self, hook: Callable[[TickContext], None]) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Callable[[TickContext], None]) -> None:
        self._stop_hooks.append(hook)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _context(self) -> TickContext:
        return TickContext(
            frame_number=self._clock.frame_number,
            now=self._clock.now(),
            dt=self._clock.frame_ms,
            request_stop=self._request_stop,
            random=self._rng,
        )

    def _frame(self) -> None:
        self._clock.advance()
        ctx = self._context()
        # Tasks scheduled during this frame first run on the next one.
        for handle in list(self._tasks):
            if handle.active:
                handle.callback(ctx)
            if self._stop_requested:
                break

    def step(self) -> None:
        self._stop_requested = False
        self._frame()

    def run(self, n: int) -> None:
        self._stop_requested = False
        ctx = self._context()
        for hook in self._start_hooks:
            hook(ctx)

        for _ in range(n):
            self._frame()
            if self._stop_requested:
                break

        ctx = self._context()
        for hook in self._stop_hooks:
            hook(ctx)

    def run_for(self, ms: float) -> None:
        """Run the number of whole frames that fit in ``ms`` milliseconds."""
        self.run(int(round(ms * self._clock.fps / 1000.0)))

    def run_forever(self) -> None:
        self._stop_requested = False
        ctx = self._context()
        for hook in self._start_hooks:
            hook(ctx)

        dt = self._clock.frame_ms / 1000.0
        while not self._stop_requested and not self._closed:
            start = time.monotonic()
            self._frame()
            if self._stop_requested:
                break
            elapsed = time.monotonic() - start
            sleep_time = dt - elapsed
            if sleep_time > 0:
                time.sleep(sleep_time)

        ctx = self._context()
        for hook in self._stop_hooks:
            hook(ctx)

    def close(self) -> None:
        for handle in self._tasks:
            handle.active = False
        self._tasks = []
        self._closed = True

"""Shared types for the frame scheduler."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True, slots=True)
class TickContext:
    frame_number: int
    now: float
    dt: float
    request_stop: Callable[[], None]
    random: _random.Random


@dataclass(eq=False)
class TaskHandle:
    """Handle to a recurring task. ``active`` drops to False once cancelled."""

    task_id: int
    name: str
    callback: Callable[[TickContext], None]
    active: bool = True


class SchedulerClosedError(RuntimeError):
    """Raised when scheduling a task on a scheduler that has been closed."""


Task = Callable[[TickContext], None]

"""frameloop - A frame-paced cooperative scheduler."""

from frameloop.clock import Clock, VirtualClock, WallClock
from frameloop.scheduler import Scheduler
from frameloop.types import SchedulerClosedError, TaskHandle, TickContext

__all__ = [
    "Scheduler",
    "Clock",
    "WallClock",
    "VirtualClock",
    "TickContext",
    "TaskHandle",
    "SchedulerClosedError",
]

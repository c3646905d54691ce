"""Game event names and the per-frame pub/sub bus that carries them."""
from __future__ import annotations

from typing import Any, Callable

GAME_STARTED = "game_started"
GAME_RESET = "game_reset"
GAME_PAUSED = "game_paused"
GAME_RESUMED = "game_resumed"
GAME_OVER = "game_over"
OBJECT_SPAWNED = "object_spawned"
COMBO_ARMED = "combo_armed"
COMBO_EXPIRED = "combo_expired"

ALL_SIGNALS = (
    GAME_STARTED, GAME_RESET, GAME_PAUSED, GAME_RESUMED, GAME_OVER,
    OBJECT_SPAWNED, COMBO_ARMED, COMBO_EXPIRED,
)

Handler = Callable[[str, dict[str, Any]], None]


class SignalBus:
    """Queues signals as they happen and delivers them on ``flush()``.

    Handlers never run inside the callback that published, so a handler
    always sees the state as it was at the end of a frame.
    """

    def __init__(self) -> None:
        self._subscribers: dict[str, list[Handler]] = {}
        self._queue: list[tuple[str, dict[str, Any]]] = []

    def subscribe(self, signal_name: str, handler: Handler) -> None:
        self._subscribers.setdefault(signal_name, []).append(handler)

    def unsubscribe(self, signal_name: str, handler: Handler) -> None:
        handlers = self._subscribers.get(signal_name)
        if handlers and handler in handlers:
            handlers.remove(handler)

    def publish(self, signal_name: str, **data: Any) -> None:
        self._queue.append((signal_name, data))

    @property
    def pending(self) -> int:
        return len(self._queue)

    def flush(self) -> int:
        """Deliver queued signals. Returns how many were delivered."""
        batch, self._queue = self._queue, []
        for signal_name, data in batch:
            for handler in list(self._subscribers.get(signal_name, ())):
                handler(signal_name, data)
        return len(batch)

    def clear(self) -> None:
        self._queue.clear()

"""JSONL chronicle recorder: a structured log of everything the game signals."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

from dodge.signals import ALL_SIGNALS, SignalBus


class ChronicleRecorder:
    """Subscribes to a SignalBus and accumulates one record per signal."""

    def __init__(
        self,
        bus: SignalBus,
        clock_fn: Callable[[], int],
        signals: tuple[str, ...] = ALL_SIGNALS,
    ) -> None:
        """*clock_fn* returns the current frame number."""
        self._records: list[dict[str, Any]] = []
        self._clock_fn = clock_fn
        for sig in signals:
            bus.subscribe(sig, self._record)

    def _record(self, signal: str, data: dict[str, Any]) -> None:
        record: dict[str, Any] = {"frame": self._clock_fn(), "type": signal}
        record.update(data)
        self._records.append(record)

    @property
    def count(self) -> int:
        return len(self._records)

    def records(self, signal: str | None = None) -> list[dict[str, Any]]:
        if signal is None:
            return list(self._records)
        return [r for r in self._records if r["type"] == signal]

    def write(self, path: str | Path) -> int:
        """Write all records as JSONL. Returns number of lines written."""
        p = Path(path)
        with p.open("w") as f:
            for record in self._records:
                f.write(json.dumps(record, default=str) + "\n")
        return len(self._records)

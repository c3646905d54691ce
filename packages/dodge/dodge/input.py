"""Held-key tracking with edge detection."""
from __future__ import annotations

from typing import Iterable


class KeyState:
    """Set of currently held keys, owned by the core.

    ``key_down`` reports only the up-to-down edge, so auto-repeat from the
    input device never counts as a fresh press.
    """

    def __init__(self) -> None:
        self._held: set[str] = set()

    def key_down(self, key: str) -> bool:
        if key in self._held:
            return False
        self._held.add(key)
        return True

    def key_up(self, key: str) -> None:
        self._held.discard(key)

    def held(self, key: str) -> bool:
        return key in self._held

    def is_combo(self, keys: Iterable[str]) -> bool:
        return all(k in self._held for k in keys)

    def clear(self) -> None:
        self._held.clear()

    def snapshot(self) -> frozenset[str]:
        return frozenset(self._held)

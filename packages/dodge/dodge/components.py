"""Simulation data: game state, paddle, falling objects, session."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class GameState(Enum):
    """Top-level phase of a session. Drives which systems run."""

    READY = "ready"
    ACTIVE = "active"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass
class PlayerState:
    """Paddle. ``x`` is the left edge; the row is fixed by the config."""

    x: float
    width: float
    height: float


@dataclass(frozen=True)
class FallingObject:
    """Square obstacle. Only ``y`` changes, and only by replacement."""

    id: int
    x: float
    y: float
    size: float


@dataclass
class PauseCombo:
    """Pending pause gesture. ``last_press`` is None while idle."""

    last_press: float | None = None
    started_at: float | None = None
    progress: float = 0.0

    @property
    def armed(self) -> bool:
        return self.last_press is not None


@dataclass
class Session:
    """Everything one game owns. Systems mutate it in place each tick."""

    player: PlayerState
    state: GameState = GameState.READY
    objects: list[FallingObject] = field(default_factory=list)
    score: int = 0
    last_spawn: float | None = None
    next_object_id: int = 1
    hit: FallingObject | None = None

"""Game state transition table."""
from __future__ import annotations

from dodge.components import GameState

START = "start"
TOGGLE = "toggle"
RESUME = "resume"
COLLIDE = "collide"
RESET = "reset"

# Maps each state to the actions it accepts and their target state.
TRANSITIONS: dict[GameState, dict[str, GameState]] = {
    GameState.READY: {
        START: GameState.ACTIVE,
        RESET: GameState.READY,
    },
    GameState.ACTIVE: {
        TOGGLE: GameState.PAUSED,
        COLLIDE: GameState.GAME_OVER,
        RESET: GameState.READY,
    },
    GameState.PAUSED: {
        TOGGLE: GameState.ACTIVE,
        RESUME: GameState.ACTIVE,
        RESET: GameState.READY,
    },
    GameState.GAME_OVER: {
        START: GameState.ACTIVE,
        RESET: GameState.READY,
    },
}


def next_state(current: GameState, action: str) -> GameState | None:
    """Return the target of ``action`` from ``current``, or None if undefined."""
    return TRANSITIONS[current].get(action)


def accepts(current: GameState, action: str) -> bool:
    return action in TRANSITIONS[current]

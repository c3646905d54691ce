"""Paddle movement."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from dodge.config import GameConfig
from dodge.input import KeyState

if TYPE_CHECKING:
    from frameloop import TickContext

    from dodge.components import Session


def move_player(x: float, left: bool, right: bool, config: GameConfig) -> float:
    """New left edge after one tick, clamped to the playfield.

    Holding both keys cancels out.
    """
    if left:
        x -= config.player_speed
    if right:
        x += config.player_speed
    return max(0.0, min(config.field_width - config.player_width, x))


def make_player_system(
    config: GameConfig, keys: KeyState,
) -> Callable[[Session, TickContext], None]:
    def player_system(session: Session, ctx: TickContext) -> None:
        session.player.x = move_player(
            session.player.x,
            keys.held(config.left_key),
            keys.held(config.right_key),
            config,
        )

    return player_system
